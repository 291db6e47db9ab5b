"""테마 감지 테스트."""

import re

import pytest

from index_builder.models import RepositoryMetadata, Theme
from index_builder.themes import THEME_PATTERNS, ThemeDetector


@pytest.fixture
def detector() -> ThemeDetector:
    """기본 패턴 테이블의 ThemeDetector를 반환한다."""
    return ThemeDetector()


class TestThemeDetector:
    """ThemeDetector 테스트."""

    def test_mario_scenario(self, detector: ThemeDetector) -> None:
        """mario와 game 패턴이 매칭되어 mario를 고른다."""
        metadata = RepositoryMetadata(
            name="mario-kart-game", description="A fun racing game"
        )
        assert detector.detect(metadata) == Theme.mario
        assert detector.detect(metadata) == "mario"

    def test_electronics_scenario(self, detector: ThemeDetector) -> None:
        """회로/센서 키워드는 electronics를 고른다."""
        metadata = RepositoryMetadata(
            name="circuit-sim", description="Arduino sensor project"
        )
        assert detector.detect(metadata) == Theme.electronics

    def test_no_match_returns_default(self, detector: ThemeDetector) -> None:
        """어떤 패턴도 매칭되지 않으면 default를 반환한다."""
        metadata = RepositoryMetadata(name="qqq", description="zzz")
        assert detector.detect(metadata) == Theme.default

    def test_only_name_given(self, detector: ThemeDetector) -> None:
        """선택 필드가 없어도 동작한다."""
        assert detector.detect(RepositoryMetadata(name="")) == Theme.default

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("nintendo", Theme.mario),
            ("shell", Theme.terminal),
            ("wallet", Theme.token_wallet),
            ("gallery", Theme.art_gallery),
            ("checkout", Theme.commerce),
        ],
    )
    def test_single_pattern_selects_its_theme(
        self, detector: ThemeDetector, name: str, expected: Theme
    ) -> None:
        """패턴 하나만 매칭되면 해당 테마를 고른다."""
        assert detector.detect(RepositoryMetadata(name=name)) == expected

    def test_tie_prefers_earlier_theme(self, detector: ThemeDetector) -> None:
        """동점이면 테이블에 먼저 선언된 테마가 이긴다."""
        # "mint"는 token-wallet과 coin-mint 양쪽에 있다
        metadata = RepositoryMetadata(name="mint")
        scores = detector.score_all(metadata)
        assert scores[Theme.token_wallet] == scores[Theme.coin_mint] == 1
        for _ in range(5):
            assert detector.detect(metadata) == Theme.token_wallet

    def test_tie_between_mario_and_terminal(self, detector: ThemeDetector) -> None:
        """game(mario)과 cli(terminal) 동점이면 mario."""
        assert detector.detect(RepositoryMetadata(name="cli game")) == Theme.mario

    def test_substring_matching(self, detector: ThemeDetector) -> None:
        """패턴은 단어 단위가 아니라 부분 문자열로 매칭된다."""
        metadata = RepositoryMetadata(name="testing")
        assert detector.detect(metadata) == Theme.lab_bench

    def test_case_insensitive(self, detector: ThemeDetector) -> None:
        """대소문자를 구분하지 않는다."""
        metadata = RepositoryMetadata(name="ARDUINO")
        assert detector.detect(metadata) == Theme.electronics

    def test_score_counts_patterns_not_occurrences(
        self, detector: ThemeDetector
    ) -> None:
        """같은 패턴이 여러 번 나와도 1점이다."""
        text = detector.get_search_text(
            RepositoryMetadata(name="game game game", readme="game")
        )
        assert detector.score_theme(Theme.mario, text) == 1

    def test_search_text_includes_all_fields(self, detector: ThemeDetector) -> None:
        """모든 필드가 소문자로 합쳐진다."""
        metadata = RepositoryMetadata(
            name="Repo",
            description="Desc",
            topics=["TopicA", "TopicB"],
            keywords=["Key"],
            readme="Readme",
        )
        assert detector.get_search_text(metadata) == "repo desc topica topicb key readme"

    def test_topics_and_readme_participate(self, detector: ThemeDetector) -> None:
        """토픽, 키워드, README도 점수에 반영된다."""
        metadata = RepositoryMetadata(
            name="x",
            topics=["dashboard"],
            keywords=["admin"],
            readme="central panel",
        )
        assert detector.detect(metadata) == Theme.dash_hub

    def test_custom_pattern_table(self) -> None:
        """생성자로 전달한 패턴 테이블을 사용한다."""
        table = (
            (Theme.pricing, (re.compile("alpha", re.IGNORECASE),)),
            (Theme.terminal, (re.compile("alpha", re.IGNORECASE),)),
        )
        detector = ThemeDetector(patterns=table)
        assert detector.detect(RepositoryMetadata(name="Alpha")) == Theme.pricing
        assert detector.detect(RepositoryMetadata(name="mario")) == Theme.default

    def test_detect_is_idempotent(self, detector: ThemeDetector) -> None:
        """같은 입력은 항상 같은 결과를 낸다."""
        metadata = RepositoryMetadata(name="token shop", topics=["crypto"])
        assert detector.detect(metadata) == detector.detect(metadata)
        assert detector.score_all(metadata) == detector.score_all(metadata)

    def test_pattern_table_order(self) -> None:
        """패턴 테이블은 default를 제외한 10개 테마를 선언 순서대로 가진다."""
        labels = [label for label, _ in THEME_PATTERNS]
        assert labels == [theme for theme in Theme if theme != Theme.default]

    def test_get_theme_info(self, detector: ThemeDetector) -> None:
        """테마 정보와 알 수 없는 테마의 대체 정보."""
        assert detector.get_theme_info(Theme.terminal).name == "Terminal"
        assert detector.get_theme_info("coin-mint").icon == "🏭"
        assert detector.get_theme_info("unknown").name == "Default Theme"
