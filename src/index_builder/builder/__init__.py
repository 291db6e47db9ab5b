"""인덱스 페이지 생성 모듈."""

from index_builder.builder.content import ContentBuilder
from index_builder.builder.generator import (
    IndexGenerator,
    TemplateLoader,
    render_template,
    write_index,
)

__all__ = [
    "ContentBuilder",
    "IndexGenerator",
    "TemplateLoader",
    "render_template",
    "write_index",
]
