"""페이지 품질 검증 모듈."""

from index_builder.quality.text import extract_text_content
from index_builder.quality.validator import (
    CHECK_WEIGHTS,
    DEFAULT_DOMAIN_MARKERS,
    QualityValidator,
)

__all__ = [
    "CHECK_WEIGHTS",
    "DEFAULT_DOMAIN_MARKERS",
    "QualityValidator",
    "extract_text_content",
]
