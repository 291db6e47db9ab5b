"""데이터 모델 정의."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Theme(str, Enum):
    """인덱스 페이지 테마 라벨."""

    mario = "mario"
    electronics = "electronics"
    token_wallet = "token-wallet"
    lab_bench = "lab-bench"
    coin_mint = "coin-mint"
    art_gallery = "art-gallery"
    commerce = "commerce"
    dash_hub = "dash-hub"
    pricing = "pricing"
    terminal = "terminal"
    default = "default"


class RepositoryMetadata(BaseModel):
    """저장소 메타데이터 (테마 감지 입력)."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="저장소 이름")
    description: str | None = Field(default=None, description="저장소 설명")
    topics: list[str] = Field(default_factory=list, description="토픽 목록")
    keywords: list[str] = Field(default_factory=list, description="키워드 목록")
    readme: str | None = Field(default=None, description="README 본문")

    @field_validator("topics", "keywords", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        """JSON null은 빈 목록으로 취급한다."""
        return [] if value is None else value


class ThemeInfo(BaseModel):
    """테마 표시 정보."""

    name: str = Field(description="테마 표시 이름")
    icon: str = Field(description="테마 아이콘")
    colors: list[str] = Field(default_factory=list, description="대표 색상")
    description: str = Field(description="테마 설명")


# --- 품질 검사 결과 ---

# JSON 출력은 camelCase 키 (noJunkyText, contentLength, ...)
VERDICT_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class QualityCheckResult(BaseModel):
    """개별 품질 검사 결과."""

    model_config = VERDICT_CONFIG

    passed: bool = Field(description="통과 여부")
    message: str = Field(description="사람이 읽을 수 있는 결과 메시지")


class JunkyTextResult(QualityCheckResult):
    """금지 문구 검사 결과."""

    issues: list[str] = Field(default_factory=list, description="매칭된 금지 패턴")


class RequiredElementsResult(QualityCheckResult):
    """필수 구조 요소 검사 결과."""

    missing: list[str] = Field(default_factory=list, description="누락된 요소 이름")


class ContentStats(BaseModel):
    """본문 통계."""

    model_config = VERDICT_CONFIG

    content_length: int = Field(description="추출 텍스트 길이")
    unique_words: int = Field(description="3글자 이상 고유 단어 수")
    links: int = Field(description="앵커 태그 수")
    interactive_elements: int = Field(description="인터랙티브 요소 수")


class QualityThresholdsResult(QualityCheckResult):
    """최소 품질 기준 검사 결과."""

    stats: ContentStats = Field(description="계산된 통계")
    failed: list[str] = Field(default_factory=list, description="기준 미달 지표")


class RealContentResult(QualityCheckResult):
    """실제 콘텐츠 검사 결과."""

    generic_phrases: list[str] = Field(
        default_factory=list, description="발견된 일반 문구"
    )
    has_specific_features: bool = Field(description="도메인 마커 존재 여부")


class InteractivityResult(QualityCheckResult):
    """인터랙티브 요소 검사 결과."""

    elements: dict[str, int] = Field(default_factory=dict, description="요소별 개수")
    total: int = Field(description="요소 합계")


class ValidationResults(BaseModel):
    """다섯 가지 검사 결과 묶음."""

    model_config = VERDICT_CONFIG

    no_junky_text: JunkyTextResult
    has_required_elements: RequiredElementsResult
    meets_quality_thresholds: QualityThresholdsResult
    has_real_content: RealContentResult
    is_interactive: InteractivityResult


class ValidationVerdict(BaseModel):
    """페이지 품질 판정."""

    model_config = VERDICT_CONFIG

    passed: bool = Field(description="모든 검사 통과 여부")
    results: ValidationResults = Field(description="검사별 결과")
    score: int = Field(ge=0, le=100, description="가중치 합산 점수 (0-100)")
    verdict: str = Field(description="표시용 판정 문구")


# --- 페이지 콘텐츠 ---


class PageHeader(BaseModel):
    """페이지 헤더."""

    icon: str
    title: str
    subtitle: str
    badge: str


class CallToAction(BaseModel):
    """히어로 영역 버튼."""

    text: str
    action: str


class PageHero(BaseModel):
    """히어로 영역."""

    tagline: str
    description: str
    cta: list[CallToAction] = Field(default_factory=list)


class Feature(BaseModel):
    """기능 카드."""

    icon: str
    title: str
    description: str
    status: str = "active"


class NavLink(BaseModel):
    """내비게이션 링크."""

    label: str
    url: str
    icon: str


class SearchConfig(BaseModel):
    """검색 설정."""

    enabled: bool = True
    hint: str = "Find anything instantly"
    scope: str = "all_repos"


class Navigation(BaseModel):
    """내비게이션 구성."""

    main: list[NavLink] = Field(default_factory=list)
    themes: list[Theme] = Field(default_factory=list)
    search: SearchConfig = Field(default_factory=SearchConfig)


class TokenEconomy(BaseModel):
    """사이드바 토큰 이코노미 위젯."""

    title: str
    coin: str
    earnings: dict[str, int] = Field(default_factory=dict)


class ConnectedRepo(BaseModel):
    """사이드바 연결 저장소 항목."""

    name: str
    status: str = "online"
    bond: str = "hydrogen"


class QuickAction(BaseModel):
    """빠른 실행 버튼."""

    icon: str
    label: str
    action: str


class Sidebar(BaseModel):
    """사이드바."""

    token_economy: TokenEconomy
    connections: list[ConnectedRepo] = Field(default_factory=list)
    quick_actions: list[QuickAction] = Field(default_factory=list)


class PageFooter(BaseModel):
    """페이지 푸터."""

    branding: str
    quality: str
    timestamp: str
    version: str


class PageContent(BaseModel):
    """인덱스 페이지 전체 콘텐츠."""

    header: PageHeader
    hero: PageHero
    features: list[Feature] = Field(default_factory=list)
    navigation: Navigation
    sidebar: Sidebar
    footer: PageFooter


class ContentCheck(BaseModel):
    """콘텐츠 구조 검사 결과."""

    passed: bool
    checks: dict[str, bool] = Field(default_factory=dict)
    message: str


class TokenAward(BaseModel):
    """인덱스 생성 보상."""

    amount: int = Field(description="지급 토큰 수")
    currency: str = Field(description="토큰 심볼")
    reason: str = Field(description="지급 사유")
    timestamp: str = Field(description="ISO 8601 지급 시각")


class GeneratedIndex(BaseModel):
    """생성된 인덱스 페이지."""

    repository: RepositoryMetadata
    theme: Theme
    html: str
    verdict: ValidationVerdict
    award: TokenAward


# --- 저장소 연결 ---


class SiteConnection(BaseModel):
    """연결된 형제 사이트 정보."""

    name: str = Field(description="사이트 이름")
    path: str = Field(description="사이트 경로 (예: /dash-hub)")
    type: str = Field(description="연결 유형")
    bond: str = Field(default="hydrogen", description="결합 방식")
    endpoints: dict[str, str] = Field(default_factory=dict, description="엔드포인트")


class ConnectionResult(BaseModel):
    """개별 연결 점검 결과."""

    repo: str
    success: bool
    status: str = Field(default="unknown", description="online | offline | error | unknown")
    bond: str | None = None
    http_status: int | None = None
    error: str | None = None
    checked_at: str | None = None


class ConnectivityReport(BaseModel):
    """전체 연결 점검 결과."""

    total: int
    online: int
    offline: int
    results: dict[str, ConnectionResult] = Field(default_factory=dict)


class DeliveryResult(BaseModel):
    """POST 전달 결과."""

    target: str
    success: bool
    http_status: int | None = None
    error: str | None = None


class PropagationResult(BaseModel):
    """업데이트/백업 전파 결과."""

    propagated: bool
    method: str
    results: list[DeliveryResult] = Field(default_factory=list)
    successful: int = 0
    failed: int = 0
    message: str | None = None


class ConnectionStats(BaseModel):
    """연결 통계."""

    total: int
    online: int
    offline: int
    health_percentage: float
    bond: str = "hydrogen"
    domino_enabled: bool
