"""플레이스홀더 페이지 검출 모듈."""

import logging
import re
from collections.abc import Sequence

from index_builder.models import (
    ContentStats,
    InteractivityResult,
    JunkyTextResult,
    QualityThresholdsResult,
    RealContentResult,
    RequiredElementsResult,
    ValidationResults,
    ValidationVerdict,
)
from index_builder.quality.text import extract_text_content

logger = logging.getLogger(__name__)

JUNKY_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"lorem ipsum",
        r"placeholder",
        r"todo",
        r"coming soon",
        r"under construction",
        r"test test test",
        r"asdf",
        r"xxx",
        r"dummy",
        r"sample text",
        r"[.]{3,}",  # 말줄임표 남용
    )
)

REQUIRED_ELEMENT_PATTERNS: dict[str, re.Pattern[str]] = {
    "navigation": re.compile(r"<nav", re.IGNORECASE),
    "content": re.compile(r"<main|<article|<section", re.IGNORECASE),
    "header": re.compile(r"<header|<h1", re.IGNORECASE),
    "proper_title": re.compile(r"<title>(?!.*placeholder).*</title>", re.IGNORECASE),
    "real_description": re.compile(
        r'<meta name="description" content="(?!.*placeholder).*"', re.IGNORECASE
    ),
}

GENERIC_PHRASES: tuple[str, ...] = (
    "welcome to our website",
    "this is a website",
    "page is under construction",
    "check back later",
)

DEFAULT_DOMAIN_MARKERS: tuple[str, ...] = ("ALC", "INDEX_BUILDER", "token", "theme")

MIN_CONTENT_LENGTH = 500
MIN_UNIQUE_WORDS = 50
MIN_LINKS = 5
MIN_INTERACTIVE_ELEMENTS = 3
MIN_INTERACTIVITY_TOTAL = 3

# 검사별 가중치 (합계 100)
CHECK_WEIGHTS: dict[str, int] = {
    "no_junky_text": 30,
    "has_required_elements": 25,
    "meets_quality_thresholds": 20,
    "has_real_content": 15,
    "is_interactive": 10,
}

_LINK_RE = re.compile(r"<a ")
_THRESHOLD_INTERACTIVE_RE = re.compile(r"<button|<input|<select|onclick")
_INTERACTIVITY_RES: dict[str, re.Pattern[str]] = {
    "buttons": re.compile(r"<button"),
    "inputs": re.compile(r"<input"),
    "click_handlers": re.compile(r"onclick"),
    "forms": re.compile(r"<form"),
    "scripts": re.compile(r"<script"),
}

PROPER_VERDICT = "✅ PROPER PAGE - Quality Approved!"
JUNKY_VERDICT = "❌ JUNKY PAGE - Needs Improvement!"


class QualityValidator:
    """렌더링된 HTML이 제대로 된 페이지인지 판정한다.

    다섯 가지 독립 검사를 모두 통과해야 페이지가 승인된다. 검사는 순수
    함수이며 어떤 입력에도 예외를 던지지 않는다.
    """

    def __init__(self, domain_markers: Sequence[str] | None = None) -> None:
        """
        Args:
            domain_markers: 실제 콘텐츠 판정용 마커. None이면 기본 마커 사용.
        """
        self.domain_markers = tuple(
            DEFAULT_DOMAIN_MARKERS if domain_markers is None else domain_markers
        )

    def validate(self, html: str) -> ValidationVerdict:
        """HTML 전체를 검사하고 판정을 반환한다."""
        results = ValidationResults(
            no_junky_text=self.check_junky_text(html),
            has_required_elements=self.check_required_elements(html),
            meets_quality_thresholds=self.check_quality_thresholds(html),
            has_real_content=self.check_real_content(html),
            is_interactive=self.check_interactivity(html),
        )

        passed = all(getattr(results, name).passed for name in CHECK_WEIGHTS)
        score = self.calculate_score(results)
        logger.debug(f"Page validation: passed={passed} score={score}")

        return ValidationVerdict(
            passed=passed,
            results=results,
            score=score,
            verdict=PROPER_VERDICT if passed else JUNKY_VERDICT,
        )

    def check_junky_text(self, html: str) -> JunkyTextResult:
        """플레이스홀더성 금지 문구를 찾는다."""
        found = [p.pattern for p in JUNKY_PATTERNS if p.search(html)]
        return JunkyTextResult(
            passed=not found,
            issues=found,
            message=(
                f"❌ Found junky patterns: {', '.join(found)}"
                if found
                else "✅ No junky text detected"
            ),
        )

    def check_required_elements(self, html: str) -> RequiredElementsResult:
        """필수 구조 요소가 있는지 확인한다."""
        missing = [
            name
            for name, pattern in REQUIRED_ELEMENT_PATTERNS.items()
            if not pattern.search(html)
        ]
        return RequiredElementsResult(
            passed=not missing,
            missing=missing,
            message=(
                f"❌ Missing elements: {', '.join(missing)}"
                if missing
                else "✅ All required elements present"
            ),
        )

    def check_quality_thresholds(self, html: str) -> QualityThresholdsResult:
        """본문 길이, 고유 단어, 링크, 인터랙티브 요소 수를 기준과 비교한다."""
        text = extract_text_content(html)
        unique_words = {word for word in text.split() if len(word) > 2}
        stats = ContentStats(
            content_length=len(text),
            unique_words=len(unique_words),
            links=len(_LINK_RE.findall(html)),
            interactive_elements=len(_THRESHOLD_INTERACTIVE_RE.findall(html)),
        )

        checks = {
            "content_length": stats.content_length >= MIN_CONTENT_LENGTH,
            "unique_words": stats.unique_words >= MIN_UNIQUE_WORDS,
            "links": stats.links >= MIN_LINKS,
            "interactive": stats.interactive_elements >= MIN_INTERACTIVE_ELEMENTS,
        }
        failed = [name for name, ok in checks.items() if not ok]

        return QualityThresholdsResult(
            passed=not failed,
            stats=stats,
            failed=failed,
            message=(
                f"❌ Quality thresholds not met: {', '.join(failed)}"
                if failed
                else "✅ All quality thresholds met"
            ),
        )

    def check_real_content(self, html: str) -> RealContentResult:
        """일반적인 채움 문구가 없고 도메인 마커가 있는지 확인한다."""
        text = extract_text_content(html).lower()
        generic_found = [phrase for phrase in GENERIC_PHRASES if phrase in text]
        has_specific = any(marker in html for marker in self.domain_markers)

        if generic_found:
            message = f"❌ Generic content found: {', '.join(generic_found)}"
        elif not has_specific:
            message = "❌ No project-specific content found"
        else:
            message = "✅ Content is specific and useful"

        return RealContentResult(
            passed=not generic_found and has_specific,
            generic_phrases=generic_found,
            has_specific_features=has_specific,
            message=message,
        )

    def check_interactivity(self, html: str) -> InteractivityResult:
        """버튼, 입력, 폼, 스크립트 등 인터랙티브 요소 수를 센다."""
        elements = {
            name: len(pattern.findall(html))
            for name, pattern in _INTERACTIVITY_RES.items()
        }
        total = sum(elements.values())
        passed = total >= MIN_INTERACTIVITY_TOTAL
        return InteractivityResult(
            passed=passed,
            elements=elements,
            total=total,
            message="✅ Page is interactive" if passed else "❌ Page lacks interactivity",
        )

    def calculate_score(self, results: ValidationResults) -> int:
        """통과한 검사의 가중치를 합산한다 (0-100)."""
        return sum(
            weight
            for name, weight in CHECK_WEIGHTS.items()
            if getattr(results, name).passed
        )

    def get_recommendations(self, verdict: ValidationVerdict) -> list[str]:
        """실패한 검사별 개선 제안을 반환한다."""
        results = verdict.results
        recommendations: list[str] = []

        if not results.no_junky_text.passed:
            recommendations.append("🔧 Remove all placeholder text and Lorem Ipsum")
            recommendations.append("🔧 Replace with actual, useful content")

        if not results.has_required_elements.passed:
            recommendations.append(
                "🔧 Add missing structural elements: "
                + ", ".join(results.has_required_elements.missing)
            )

        if not results.meets_quality_thresholds.passed:
            recommendations.append(
                "🔧 Improve content quality: add more text, links, and interactive elements"
            )

        if not results.has_real_content.passed:
            recommendations.append(
                "🔧 Replace generic content with specific, useful information"
            )

        if not results.is_interactive.passed:
            recommendations.append(
                "🔧 Add interactive elements: buttons, forms, search, etc."
            )

        if not recommendations:
            recommendations.append("🎉 Page is perfect! Keep up the good work!")

        return recommendations
