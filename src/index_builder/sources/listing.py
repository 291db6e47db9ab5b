"""저장소 목록 설정 파일 로더."""

import json
from pathlib import Path

from pydantic import TypeAdapter

from index_builder.models import RepositoryMetadata

_LISTING_ADAPTER = TypeAdapter(list[RepositoryMetadata])


def load_listing(path: Path) -> list[RepositoryMetadata]:
    """JSON 저장소 목록을 읽는다.

    최상위가 배열이거나 `{"repositories": [...]}` 형태여야 한다.

    Raises:
        pydantic.ValidationError: 항목 형식이 잘못된 경우
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("repositories", [])
    return _LISTING_ADAPTER.validate_python(data)
