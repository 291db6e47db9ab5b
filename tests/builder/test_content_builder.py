"""콘텐츠 빌더 테스트."""

import pytest

from index_builder.builder import ContentBuilder
from index_builder.models import RepositoryMetadata, Theme


@pytest.fixture
def builder() -> ContentBuilder:
    """ContentBuilder 인스턴스를 반환한다."""
    return ContentBuilder()


class TestContentBuilder:
    """ContentBuilder 테스트."""

    def test_header_uses_metadata(self, builder: ContentBuilder) -> None:
        """헤더는 저장소 이름/설명과 테마 아이콘을 쓴다."""
        metadata = RepositoryMetadata(name="pricing-engine", description="Quotes")
        header = builder.build_header(metadata, Theme.pricing)
        assert header.title == "pricing-engine"
        assert header.subtitle == "Quotes"
        assert header.icon == "💰"

    def test_header_defaults(self, builder: ContentBuilder) -> None:
        """설명이 없으면 기본 부제를 쓴다."""
        header = builder.build_header(RepositoryMetadata(name=""), Theme.default)
        assert header.title == "Repository"
        assert header.subtitle == "Full-featured repository index"

    def test_navigation(self, builder: ContentBuilder) -> None:
        """홈과 다섯 개 형제 사이트, 전체 테마 목록을 가진다."""
        navigation = builder.build_navigation()
        assert [link.url for link in navigation.main] == [
            "/",
            "/dash-hub",
            "/banksy",
            "/token-mint",
            "/pricing-engine",
            "/facet-commerce",
        ]
        assert len(navigation.themes) == 11

    def test_sidebar_token_economy(self) -> None:
        """사이드바에 토큰 정보가 반영된다."""
        builder = ContentBuilder(token_symbol="XYZ", token_name="Test Coin")
        sidebar = builder.build_sidebar()
        assert sidebar.token_economy.coin == "Test Coin (XYZ)"
        assert sidebar.token_economy.earnings["build_index"] == 10
        assert [repo.name for repo in sidebar.connections][0] == "dash-hub"

    def test_build_content_is_valid(self, builder: ContentBuilder) -> None:
        """기본 콘텐츠는 구조 검사를 통과한다."""
        content = builder.build_content(
            RepositoryMetadata(name="mario-kart-game"), Theme.mario
        )
        check = builder.validate_content(content)
        assert check.passed is True
        assert all(check.checks.values())
        assert len(content.features) == 6

    def test_validate_content_detects_placeholder(
        self, builder: ContentBuilder
    ) -> None:
        """메타데이터에 placeholder가 들어오면 구조 검사가 실패한다."""
        content = builder.build_content(
            RepositoryMetadata(name="repo", description="placeholder description"),
            Theme.default,
        )
        check = builder.validate_content(content)
        assert check.passed is False
        assert check.checks["no_placeholder"] is False
