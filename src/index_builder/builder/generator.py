"""인덱스 페이지 자동 생성 모듈."""

import json
import logging
import re
from datetime import UTC, datetime
from html import escape
from importlib import resources
from pathlib import Path
from typing import Any

from index_builder.builder.content import ContentBuilder
from index_builder.config import settings
from index_builder.models import (
    GeneratedIndex,
    PageContent,
    RepositoryMetadata,
    Theme,
    TokenAward,
    ValidationVerdict,
)
from index_builder.quality import QualityValidator
from index_builder.themes import ThemeDetector

logger = logging.getLogger(__name__)

BASE_TEMPLATE = "base-index.html"
TOKEN_PATTERN = re.compile(r"\{\{(\w+)\}\}")


class TemplateLoader:
    """테마별 HTML 템플릿을 읽는다."""

    def __init__(self, directory: Path | None = None) -> None:
        """
        Args:
            directory: 템플릿 디렉토리. None이면 패키지 내장 템플릿 사용.
        """
        self.directory = directory

    def _read(self, filename: str) -> str | None:
        if self.directory is not None:
            path = self.directory / filename
            return path.read_text(encoding="utf-8") if path.is_file() else None

        resource = resources.files("index_builder.builder") / "templates" / filename
        return resource.read_text(encoding="utf-8") if resource.is_file() else None

    def load(self, theme: Theme) -> str:
        """`{theme}-index.html`을 읽고, 없으면 기본 템플릿으로 대체한다."""
        template = self._read(f"{theme.value}-index.html")
        if template is not None:
            return template

        logger.debug(f"No template for theme {theme.value}, using {BASE_TEMPLATE}")
        template = self._read(BASE_TEMPLATE)
        if template is None:
            raise FileNotFoundError(f"Base template not found: {BASE_TEMPLATE}")
        return template


def render_template(template: str, data: dict[str, Any]) -> str:
    """`{{key}}` 토큰을 값으로 치환한다.

    문자열은 그대로 넣고 (이미 이스케이프된 HTML 조각으로 간주), 그 외 값은
    JSON으로 직렬화해서 넣는다. 템플릿을 한 번만 훑으므로 삽입된 값 안의
    토큰은 다시 치환되지 않는다.
    """

    def replace(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in data:
            return match.group(0)
        value = data[key]
        return value if isinstance(value, str) else json.dumps(value, ensure_ascii=False)

    return TOKEN_PATTERN.sub(replace, template)


def _render_navigation(content: PageContent) -> str:
    links = [
        f'<a href="{escape(link.url)}">{link.icon} {escape(link.label)}</a>'
        for link in content.navigation.main
    ]
    return "\n".join(links)


def _render_search(content: PageContent, current: Theme) -> str:
    search = content.navigation.search
    options = "".join(
        f'<option value="{theme.value}"{" selected" if theme == current else ""}>'
        f"{theme.value}</option>"
        for theme in content.navigation.themes
    )
    parts = []
    if search.enabled:
        parts.append(
            f'<input type="search" name="q" aria-label="{escape(search.hint)}" '
            f'data-scope="{escape(search.scope)}">'
        )
        parts.append('<button type="submit">🔍 Search</button>')
    parts.append(
        f'<select aria-label="Theme" onchange="switchTheme(this)">{options}</select>'
    )
    return "\n".join(parts)


def _render_header(content: PageContent) -> str:
    header = content.header
    return (
        f"<h1>{header.icon} {escape(header.title)}</h1>\n"
        f"<p>{escape(header.subtitle)}</p>\n"
        f'<span class="badge">{escape(header.badge)}</span>'
    )


def _render_hero(content: PageContent) -> str:
    hero = content.hero
    buttons = "\n".join(
        f'<button type="button" data-action="{escape(cta.action)}">{escape(cta.text)}</button>'
        for cta in hero.cta
    )
    return (
        f"<h2>{escape(hero.tagline)}</h2>\n"
        f"<p>{escape(hero.description)}</p>\n"
        f"{buttons}"
    )


def _render_features(content: PageContent) -> str:
    return "\n".join(
        f'<article class="feature" data-status="{escape(feature.status)}">'
        f"<h3>{feature.icon} {escape(feature.title)}</h3>"
        f"<p>{escape(feature.description)}</p></article>"
        for feature in content.features
    )


def _render_sidebar(content: PageContent) -> str:
    sidebar = content.sidebar
    economy = sidebar.token_economy
    earnings = "".join(
        f"<li>{escape(name.replace('_', ' '))}: +{amount}</li>"
        for name, amount in economy.earnings.items()
    )
    repos = "".join(
        f'<li><a href="/{escape(repo.name)}">{escape(repo.name)}</a> '
        f"({escape(repo.status)}, {escape(repo.bond)} bond)</li>"
        for repo in sidebar.connections
    )
    actions = "\n".join(
        f'<button type="button" data-action="{escape(action.action)}">'
        f"{action.icon} {escape(action.label)}</button>"
        for action in sidebar.quick_actions
    )
    return (
        f"<h2>{escape(economy.title)}</h2>\n"
        f"<p>{escape(economy.coin)}</p>\n"
        f"<ul>{earnings}</ul>\n"
        f"<h2>🔗 Connected Repos</h2>\n"
        f"<ul>{repos}</ul>\n"
        f"{actions}"
    )


def _render_footer(content: PageContent) -> str:
    footer = content.footer
    return (
        f"<p>{escape(footer.branding)}</p>\n"
        f"<p>{escape(footer.quality)}</p>\n"
        f'<p><time datetime="{escape(footer.timestamp)}">v{escape(footer.version)}</time></p>'
    )


class IndexGenerator:
    """저장소 인덱스 페이지를 생성하고 품질을 검증한다."""

    def __init__(
        self,
        detector: ThemeDetector | None = None,
        content_builder: ContentBuilder | None = None,
        validator: QualityValidator | None = None,
        templates: TemplateLoader | None = None,
    ) -> None:
        """
        Args:
            detector: 테마 감지기. None이면 기본 패턴 테이블 사용.
            content_builder: 콘텐츠 빌더. None이면 설정값 토큰 정보로 생성.
            validator: 품질 검증기. None이면 설정값 도메인 마커 사용.
            templates: 템플릿 로더. None이면 패키지 내장 템플릿 사용.
        """
        self.detector = detector or ThemeDetector()
        self.content_builder = content_builder or ContentBuilder(
            token_symbol=settings.token_symbol,
            token_name=settings.token_name,
        )
        self.validator = validator or QualityValidator(settings.domain_markers)
        self.templates = templates or TemplateLoader()

    def render(self, metadata: RepositoryMetadata, theme: Theme) -> str:
        """메타데이터와 테마로 HTML을 렌더링한다."""
        content = self.content_builder.build_content(metadata, theme)
        info = self.detector.get_theme_info(theme)
        colors_css = " ".join(
            f"--color-{i}: {color};" for i, color in enumerate(info.colors, 1)
        )

        data: dict[str, Any] = {
            "title": escape(" ".join(content.header.title.split())),
            "meta_description": escape(" ".join(content.header.subtitle.split())),
            "theme": theme.value,
            "theme_name": escape(info.name),
            "colors_css": colors_css,
            "navigation": _render_navigation(content),
            "search": _render_search(content, theme),
            "header": _render_header(content),
            "hero": _render_hero(content),
            "features": _render_features(content),
            "sidebar": _render_sidebar(content),
            "footer": _render_footer(content),
            "themes": [t.value for t in content.navigation.themes],
        }
        return render_template(self.templates.load(theme), data)

    def generate_index(self, metadata: RepositoryMetadata) -> GeneratedIndex:
        """테마 감지, 렌더링, 품질 검증, 보상 계산을 한 번에 수행한다."""
        theme = self.detector.detect(metadata)
        html = self.render(metadata, theme)
        verdict = self.validator.validate(html)

        if verdict.passed:
            logger.info(f"Built index for {metadata.name} (theme={theme.value})")
        else:
            logger.warning(
                f"Index for {metadata.name} failed quality checks (score={verdict.score})"
            )

        return GeneratedIndex(
            repository=metadata,
            theme=theme,
            html=html,
            verdict=verdict,
            award=self.award_tokens(verdict),
        )

    def award_tokens(self, verdict: ValidationVerdict) -> TokenAward:
        """인덱스 생성 보상을 계산한다. 품질 통과 시 보너스 추가."""
        amount = settings.build_index_reward
        if verdict.passed:
            amount += settings.quality_bonus_reward

        return TokenAward(
            amount=amount,
            currency=settings.token_symbol,
            reason="Index Builder - Proper page created",
            timestamp=datetime.now(UTC).isoformat(),
        )


def write_index(item: GeneratedIndex, output: Path) -> Path:
    """생성된 페이지를 `{output}/{name}/index.html`로 저장한다.

    Raises:
        ValueError: 저장소 이름이 단일 디렉토리 이름이 아닌 경우 (`/`, `\\`, `..` 등)
    """
    name = item.repository.name
    if not name or name in {".", ".."} or "/" in name or "\\" in name:
        raise ValueError(f"Unsafe repository name for output path: {name!r}")

    target = output / name / "index.html"
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(item.html, encoding="utf-8")
    return target
