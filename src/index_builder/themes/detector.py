"""키워드 패턴 기반 테마 감지 모듈."""

import logging

from index_builder.models import RepositoryMetadata, Theme, ThemeInfo
from index_builder.themes.patterns import THEME_INFO, THEME_PATTERNS, ThemePatternTable

logger = logging.getLogger(__name__)


class ThemeDetector:
    """저장소 메타데이터로 인덱스 페이지 테마를 고른다."""

    def __init__(self, patterns: ThemePatternTable = THEME_PATTERNS) -> None:
        """
        Args:
            patterns: (테마, 패턴 목록) 쌍의 순서 있는 테이블.
                앞에 선언된 테마가 동점에서 이긴다.
        """
        self.patterns = patterns

    def get_search_text(self, metadata: RepositoryMetadata) -> str:
        """검색 대상 필드를 하나의 소문자 문자열로 합친다."""
        parts = [
            metadata.name or "",
            metadata.description or "",
            *metadata.topics,
            *metadata.keywords,
            metadata.readme or "",
        ]
        return " ".join(parts).lower()

    def score_theme(self, theme: Theme, search_text: str) -> int:
        """매칭된 패턴 수를 센다 (출현 횟수가 아니라 패턴 단위)."""
        for label, patterns in self.patterns:
            if label == theme:
                return sum(1 for pattern in patterns if pattern.search(search_text))
        return 0

    def score_all(self, metadata: RepositoryMetadata) -> dict[Theme, int]:
        """모든 테마의 점수를 테이블 순서대로 계산한다."""
        search_text = self.get_search_text(metadata)
        return {
            label: sum(1 for pattern in patterns if pattern.search(search_text))
            for label, patterns in self.patterns
        }

    def detect(self, metadata: RepositoryMetadata) -> Theme:
        """가장 높은 점수의 테마를 반환한다. 모두 0점이면 default."""
        scores = self.score_all(metadata)

        best_theme = Theme.default
        best_score = 0
        for theme, score in scores.items():
            # 엄격한 비교: 동점이면 먼저 선언된 테마 유지
            if score > best_score:
                best_score = score
                best_theme = theme

        matched = {theme.value: score for theme, score in scores.items() if score}
        logger.debug(
            f"Theme detection for {metadata.name}: "
            f"scores={matched} selected={best_theme.value}"
        )
        return best_theme

    def get_theme_info(self, theme: Theme | str) -> ThemeInfo:
        """테마 표시 정보를 반환한다. 알 수 없는 테마는 default 정보."""
        try:
            return THEME_INFO[Theme(theme)]
        except ValueError:
            return THEME_INFO[Theme.default]
