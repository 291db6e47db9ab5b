"""저장소 인덱스 페이지 생성기."""

__version__ = "1.0.0"
