"""배치 엔트리포인트 (정적 사이트 배포 파이프라인용)."""

import asyncio
import logging

from index_builder.builder import IndexGenerator, write_index
from index_builder.config import settings
from index_builder.sources import load_listing
from index_builder.wiring import RepoConnector

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def run() -> None:
    """배치 메인 로직."""
    logger.info("Starting index-builder batch")

    # 1. 저장소 목록 로드
    logger.info(f"Loading listing from {settings.listing_path}")
    repositories = load_listing(settings.listing_path)
    logger.info(f"Loaded {len(repositories)} repositories")

    # 2. 인덱스 생성 및 저장
    generator = IndexGenerator()
    failed = []
    total_award = 0
    for metadata in repositories:
        item = generator.generate_index(metadata)
        path = write_index(item, settings.output_dir)
        total_award += item.award.amount
        if not item.verdict.passed:
            failed.append(metadata.name)
        logger.info(
            f"Wrote {path} (theme={item.theme.value}, score={item.verdict.score})"
        )

    if failed:
        logger.warning(f"{len(failed)} pages failed quality checks: {', '.join(failed)}")
    logger.info(f"Awarded {total_award} {settings.token_symbol}")

    # 3. 형제 사이트 연결 점검 (개별 실패는 상태로만 기록)
    logger.info("Probing sibling sites...")
    connector = RepoConnector()
    report = await connector.connect_all()
    logger.info(f"Sites online: {report.online}/{report.total}")
    for name, result in report.results.items():
        if not result.success:
            logger.warning(f"Site {name} is {result.status}: {result.error or result.http_status}")

    logger.info("Batch completed")


def main() -> None:
    """CLI 엔트리포인트."""
    asyncio.run(run())


if __name__ == "__main__":
    main()
