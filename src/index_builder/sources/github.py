"""GitHub 저장소 메타데이터 소스."""

import asyncio
import logging
from typing import Any

import httpx

from index_builder.config import settings
from index_builder.models import RepositoryMetadata

logger = logging.getLogger(__name__)

README_FILES = ("README.md", "readme.md", "Readme.md", "README.rst")


class GitHubRepositorySource:
    """GitHub API와 raw content에서 저장소 메타데이터를 가져온다."""

    API_URL = "https://api.github.com"
    RAW_URL = "https://raw.githubusercontent.com"

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            timeout: HTTP 요청 타임아웃 (초). None이면 설정값 사용.
            transport: httpx 전송 계층 (테스트용)
        """
        self.timeout = timeout or settings.request_timeout
        self.transport = transport

    async def _fetch_repo(self, client: httpx.AsyncClient, full_name: str) -> dict[str, Any]:
        """GitHub API에서 저장소 정보를 가져온다."""
        response = await client.get(
            f"{self.API_URL}/repos/{full_name}",
            headers={"Accept": "application/vnd.github+json"},
        )
        response.raise_for_status()
        data: dict[str, Any] = response.json()
        return data

    async def _fetch_readme(self, client: httpx.AsyncClient, full_name: str) -> str | None:
        """raw content에서 README를 찾는다. 없으면 None."""
        for filename in README_FILES:
            url = f"{self.RAW_URL}/{full_name}/HEAD/{filename}"
            try:
                response = await client.get(url)
                if response.status_code == 200:
                    return str(response.text)
            except httpx.RequestError as e:
                logger.warning(f"Failed to fetch {url}: {e}")
                continue
        return None

    async def fetch(self, name: str) -> RepositoryMetadata:
        """`owner/repo` 저장소의 메타데이터를 가져온다.

        Raises:
            httpx.HTTPStatusError: 저장소 정보를 읽을 수 없는 경우
        """
        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self.transport,
            follow_redirects=True,
        ) as client:
            repo, readme = await asyncio.gather(
                self._fetch_repo(client, name),
                self._fetch_readme(client, name),
            )

        return RepositoryMetadata(
            name=repo.get("name") or name.split("/")[-1],
            description=repo.get("description"),
            topics=repo.get("topics") or [],
            readme=readme,
        )

    async def fetch_many(self, names: list[str]) -> list[RepositoryMetadata]:
        """여러 저장소를 병렬로 가져온다. 실패한 저장소는 건너뛴다."""
        results = await asyncio.gather(
            *(self.fetch(name) for name in names), return_exceptions=True
        )

        repositories: list[RepositoryMetadata] = []
        for name, result in zip(names, results, strict=True):
            if isinstance(result, httpx.HTTPError):
                logger.warning(f"Skipping {name}: {result}")
                continue
            if isinstance(result, BaseException):
                raise result
            repositories.append(result)
        return repositories
