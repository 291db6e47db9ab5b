"""테마 키워드 패턴 테이블."""

import re

from index_builder.models import Theme, ThemeInfo

ThemePatternTable = tuple[tuple[Theme, tuple[re.Pattern[str], ...]], ...]


def _compile(*words: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(word, re.IGNORECASE) for word in words)


# 선언 순서가 동점 처리 우선순위다.
THEME_PATTERNS: ThemePatternTable = (
    (
        Theme.mario,
        _compile("mario", "luigi", "mushroom", "princess", "koopa", "game", "nintendo"),
    ),
    (
        Theme.electronics,
        _compile(
            "circuit",
            "electronics",
            "hardware",
            "arduino",
            "raspberry",
            "pcb",
            "sensor",
            "iot",
            "embedded",
        ),
    ),
    (
        Theme.token_wallet,
        _compile(
            "token",
            "coin",
            "wallet",
            "crypto",
            "blockchain",
            "currency",
            "mint",
            "economy",
        ),
    ),
    (
        Theme.lab_bench,
        _compile(
            "lab", "experiment", "science", "research", "test", "chemistry", "physics"
        ),
    ),
    (
        Theme.coin_mint,
        _compile("mint", "factory", "production", "manufacture", "forge"),
    ),
    (
        Theme.art_gallery,
        _compile(
            "art",
            "gallery",
            "design",
            "creative",
            "visual",
            "banksy",
            "paint",
            "canvas",
        ),
    ),
    (
        Theme.commerce,
        _compile("commerce", "shop", "store", "ecommerce", "product", "cart", "checkout"),
    ),
    (
        Theme.dash_hub,
        _compile("dashboard", "hub", "admin", "control", "panel", "central"),
    ),
    (
        Theme.pricing,
        _compile("price", "pricing", "cost", "rate", "value", "quote"),
    ),
    (
        Theme.terminal,
        _compile("terminal", "console", "cli", "command", "shell"),
    ),
)


THEME_INFO: dict[Theme, ThemeInfo] = {
    Theme.mario: ThemeInfo(
        name="Mario Theme",
        icon="🍄",
        colors=["#e52521", "#0066cc", "#00cc00"],
        description="Fun and playful Mario-themed interface",
    ),
    Theme.electronics: ThemeInfo(
        name="Electronics Lab",
        icon="🔌",
        colors=["#00ff00", "#0000ff", "#ff9900"],
        description="Lab bench with circuits and components",
    ),
    Theme.token_wallet: ThemeInfo(
        name="Token Wallet",
        icon="🪙",
        colors=["#ffd700", "#ff6b35", "#004e98"],
        description="Cryptocurrency and token management",
    ),
    Theme.lab_bench: ThemeInfo(
        name="Laboratory",
        icon="🧪",
        colors=["#00cccc", "#9933ff", "#ff3366"],
        description="Scientific research and experiments",
    ),
    Theme.coin_mint: ThemeInfo(
        name="Coin Mint",
        icon="🏭",
        colors=["#c0c0c0", "#ffd700", "#cd7f32"],
        description="Token production and minting",
    ),
    Theme.art_gallery: ThemeInfo(
        name="Art Gallery",
        icon="🎨",
        colors=["#ff1744", "#00e676", "#2979ff"],
        description="Creative arts and design showcase",
    ),
    Theme.commerce: ThemeInfo(
        name="Commerce Hub",
        icon="🛒",
        colors=["#4caf50", "#ff9800", "#2196f3"],
        description="E-commerce and shopping platform",
    ),
    Theme.dash_hub: ThemeInfo(
        name="Dashboard Hub",
        icon="📊",
        colors=["#3f51b5", "#f44336", "#4caf50"],
        description="Central control dashboard",
    ),
    Theme.pricing: ThemeInfo(
        name="Pricing Engine",
        icon="💰",
        colors=["#ffd700", "#4caf50", "#2196f3"],
        description="Price calculation and quotes",
    ),
    Theme.terminal: ThemeInfo(
        name="Terminal",
        icon="💻",
        colors=["#00ff00", "#000000", "#ffffff"],
        description="Command-line interface",
    ),
    Theme.default: ThemeInfo(
        name="Default Theme",
        icon="🌐",
        colors=["#00e5ff", "#0b0b0b", "#e6e6e6"],
        description="Clean and professional default theme",
    ),
}
