"""테마 감지 모듈."""

from index_builder.themes.detector import ThemeDetector
from index_builder.themes.patterns import THEME_INFO, THEME_PATTERNS, ThemePatternTable

__all__ = ["THEME_INFO", "THEME_PATTERNS", "ThemeDetector", "ThemePatternTable"]
