"""저장소 메타데이터 소스 모듈."""

from index_builder.sources.github import GitHubRepositorySource
from index_builder.sources.listing import load_listing

__all__ = ["GitHubRepositorySource", "load_listing"]
