"""설정 관리 모듈."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    site_base_url: str = Field(
        default="http://localhost:8000",
        description="형제 사이트들이 배포된 기본 URL",
    )
    request_timeout: float = Field(
        default=10.0,
        gt=0,
        description="HTTP 요청 타임아웃 (초)",
    )

    domain_markers: list[str] = Field(
        default=["ALC", "INDEX_BUILDER", "token", "theme"],
        description="실제 콘텐츠 판정에 쓰는 도메인 마커",
    )

    # 토큰 이코노미
    token_symbol: str = Field(default="ALC", description="토큰 심볼")
    token_name: str = Field(default="Andy Lian Coin", description="토큰 이름")
    build_index_reward: int = Field(default=10, ge=0, description="인덱스 생성 보상")
    quality_bonus_reward: int = Field(default=5, ge=0, description="품질 통과 보너스")

    domino_update_enabled: bool = Field(
        default=True,
        description="형제 사이트로 업데이트 연쇄 전파 여부",
    )

    # 배치
    listing_path: Path = Field(
        default=Path("repositories.json"),
        description="저장소 목록 JSON 경로",
    )
    output_dir: Path = Field(default=Path("site"), description="출력 디렉토리")


settings = Settings()
