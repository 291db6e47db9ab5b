"""인덱스 페이지 콘텐츠 구성 모듈."""

from datetime import UTC, datetime

from index_builder.models import (
    CallToAction,
    ConnectedRepo,
    ContentCheck,
    Feature,
    Navigation,
    NavLink,
    PageContent,
    PageFooter,
    PageHeader,
    PageHero,
    QuickAction,
    RepositoryMetadata,
    SearchConfig,
    Sidebar,
    Theme,
    TokenEconomy,
)
from index_builder.themes.patterns import THEME_INFO

VERSION = "1.0.0"

# 사이드바/내비게이션에 노출되는 형제 사이트
SIBLING_SITES: tuple[tuple[str, str, str], ...] = (
    ("Token Hub", "/dash-hub", "🪙"),
    ("Art Assets", "/banksy", "🎨"),
    ("Token Mint", "/token-mint", "🏭"),
    ("Pricing", "/pricing-engine", "💰"),
    ("Commerce", "/facet-commerce", "🛒"),
)

EARNINGS: dict[str, int] = {
    "build_index": 10,
    "proper_page": 5,
    "theme_support": 3,
    "wiring_connection": 2,
}


class ContentBuilder:
    """저장소 메타데이터로 인덱스 페이지 콘텐츠를 만든다."""

    def __init__(
        self,
        token_symbol: str = "ALC",
        token_name: str = "Andy Lian Coin",
    ) -> None:
        """
        Args:
            token_symbol: 사이드바에 표시할 토큰 심볼
            token_name: 사이드바에 표시할 토큰 이름
        """
        self.token_symbol = token_symbol
        self.token_name = token_name

    def build_content(self, metadata: RepositoryMetadata, theme: Theme) -> PageContent:
        """페이지 전체 콘텐츠를 구성한다."""
        return PageContent(
            header=self.build_header(metadata, theme),
            hero=self.build_hero(),
            features=self.build_features(),
            navigation=self.build_navigation(),
            sidebar=self.build_sidebar(),
            footer=self.build_footer(),
        )

    def build_header(self, metadata: RepositoryMetadata, theme: Theme) -> PageHeader:
        info = THEME_INFO.get(theme, THEME_INFO[Theme.default])
        return PageHeader(
            icon=info.icon,
            title=metadata.name or "Repository",
            subtitle=metadata.description or "Full-featured repository index",
            badge="✅ PROPER PAGE",
        )

    def build_hero(self) -> PageHero:
        return PageHero(
            tagline="Automated Index Building Machine",
            description=(
                "Built with INDEX_BUILDER: real content, proper pages, "
                "and no junk left behind."
            ),
            cta=[
                CallToAction(text="Explore Features", action="scroll_features"),
                CallToAction(text="View Token Economy", action="show_tokens"),
                CallToAction(text="Connect Repos", action="show_wiring"),
            ],
        )

    def build_features(self) -> list[Feature]:
        return [
            Feature(
                icon="🎛️",
                title="Smart Index Builder",
                description="Automatically constructs complete indexes from repository metadata",
            ),
            Feature(
                icon="🪙",
                title="Token Integration",
                description=f"Earn {self.token_name} rewards for building quality pages",
            ),
            Feature(
                icon="🔗",
                title="Website Wiring",
                description="Connected to dash-hub, banksy, token-mint, and more",
                status="connected",
            ),
            Feature(
                icon="🎨",
                title="Theme Support",
                description=f"All {len(Theme)} themes supported with auto-detection",
            ),
            Feature(
                icon="🔍",
                title="Instant Search",
                description="Find anything across all connected repos",
            ),
            Feature(
                icon="🚗",
                title="MRW Terminal",
                description="Mario walks, cars deliver, mushrooms generate instantly",
            ),
        ]

    def build_navigation(self) -> Navigation:
        main = [NavLink(label="Home", url="/", icon="🏠")]
        main.extend(
            NavLink(label=label, url=url, icon=icon) for label, url, icon in SIBLING_SITES
        )
        return Navigation(
            main=main,
            themes=list(Theme),
            search=SearchConfig(),
        )

    def build_sidebar(self) -> Sidebar:
        return Sidebar(
            token_economy=TokenEconomy(
                title="🪙 Token Economy",
                coin=f"{self.token_name} ({self.token_symbol})",
                earnings=dict(EARNINGS),
            ),
            connections=[
                ConnectedRepo(name=url.strip("/")) for _, url, _ in SIBLING_SITES
            ],
            quick_actions=[
                QuickAction(icon="⚡", label="Build Index", action="generate_index"),
                QuickAction(icon="🍄", label="Instant Generate", action="mushroom_boost"),
                QuickAction(icon="🔍", label="Search All", action="open_search"),
                QuickAction(icon="🎨", label="Change Theme", action="theme_picker"),
            ],
        )

    def build_footer(self) -> PageFooter:
        return PageFooter(
            branding="🎛️ INDEX_BUILDER + 🧱Kris🔑 = Index Authority",
            quality="✅ NO junky indexes - Proper pages only!",
            timestamp=datetime.now(UTC).isoformat(),
            version=VERSION,
        )

    def validate_content(self, content: PageContent) -> ContentCheck:
        """구성된 콘텐츠가 기본 품질 기준을 만족하는지 확인한다."""
        serialized = content.model_dump_json().lower()
        checks = {
            "no_lorem": "lorem" not in serialized,
            "no_placeholder": "placeholder" not in serialized,
            "has_real_features": bool(content.features),
            "has_navigation": bool(content.navigation.main),
            "has_sidebar": bool(content.sidebar.token_economy.earnings),
        }
        passed = all(checks.values())
        return ContentCheck(
            passed=passed,
            checks=checks,
            message="✅ Content quality approved!" if passed else "❌ Content needs improvement",
        )
