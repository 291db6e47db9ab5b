"""형제 사이트 연결 점검 모듈."""

import asyncio
import logging
from datetime import UTC, datetime
from typing import Any

import httpx

from index_builder.config import settings
from index_builder.models import (
    ConnectionResult,
    ConnectionStats,
    ConnectivityReport,
    DeliveryResult,
    PropagationResult,
    SiteConnection,
)

logger = logging.getLogger(__name__)

WIRING_HEADERS = {
    "X-Wiring": "hydrogen-bond",
    "X-Source": "index-designer",
}

DEFAULT_CONNECTIONS: tuple[SiteConnection, ...] = (
    SiteConnection(
        name="dash-hub",
        path="/dash-hub",
        type="token_economy",
        endpoints={
            "economy": "/dash-hub/economy",
            "balance": "/dash-hub/balance",
            "transactions": "/dash-hub/transactions",
        },
    ),
    SiteConnection(
        name="banksy",
        path="/banksy",
        type="art_assets",
        endpoints={
            "gallery": "/banksy/gallery",
            "upload": "/banksy/upload",
        },
    ),
    SiteConnection(
        name="token-mint",
        path="/token-mint",
        type="receipts",
        endpoints={
            "mint": "/token-mint/mint",
            "receipts": "/token-mint/receipts",
        },
    ),
    SiteConnection(
        name="pricing-engine",
        path="/pricing-engine",
        type="values",
        endpoints={
            "calculate": "/pricing-engine/calculate",
            "quote": "/pricing-engine/quote",
        },
    ),
    SiteConnection(
        name="facet-commerce",
        path="/facet-commerce",
        type="products",
        endpoints={
            "products": "/facet-commerce/products",
            "cart": "/facet-commerce/cart",
            "checkout": "/facet-commerce/checkout",
        },
    ),
)

BACKUP_LOCATIONS: tuple[str, ...] = ("/dash-hub/docs", "/token-mint/docs", "/banksy/docs")


def _now() -> str:
    return datetime.now(UTC).isoformat()


class RepoConnector:
    """형제 사이트의 상태를 점검하고 업데이트를 전파한다."""

    def __init__(
        self,
        base_url: str | None = None,
        connections: tuple[SiteConnection, ...] = DEFAULT_CONNECTIONS,
        timeout: float | None = None,
        domino_enabled: bool | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            base_url: 사이트 기본 URL. None이면 설정값 사용.
            connections: 점검 대상 사이트 목록
            timeout: HTTP 요청 타임아웃 (초). None이면 설정값 사용.
            domino_enabled: 업데이트 연쇄 전파 여부. None이면 설정값 사용.
            transport: httpx 전송 계층 (테스트용)
        """
        self.base_url = (base_url or settings.site_base_url).rstrip("/")
        self.connections = {conn.name: conn for conn in connections}
        self.timeout = timeout or settings.request_timeout
        self.domino_enabled = (
            settings.domino_update_enabled if domino_enabled is None else domino_enabled
        )
        self.transport = transport
        self.statuses: dict[str, ConnectionResult] = {}

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self.transport,
        )

    async def _probe(self, client: httpx.AsyncClient, name: str) -> ConnectionResult:
        """단일 사이트의 /health를 호출한다. 전송 오류는 error 상태로 변환한다."""
        conn = self.connections.get(name)
        if conn is None:
            return ConnectionResult(
                repo=name,
                success=False,
                error=f"Repository {name} not found in connections",
            )

        try:
            response = await client.get(f"{conn.path}/health", headers=WIRING_HEADERS)
        except httpx.RequestError as e:
            logger.warning(f"Failed to reach {name}: {e}")
            return ConnectionResult(
                repo=name,
                success=False,
                status="error",
                bond=conn.bond,
                error=str(e) or type(e).__name__,
                checked_at=_now(),
            )

        return ConnectionResult(
            repo=name,
            success=response.is_success,
            status="online" if response.is_success else "offline",
            bond=conn.bond,
            http_status=response.status_code,
            checked_at=_now(),
        )

    async def connect(self, name: str) -> ConnectionResult:
        """사이트 하나의 연결 상태를 점검한다."""
        async with self._client() as client:
            result = await self._probe(client, name)
        if name in self.connections:
            self.statuses[name] = result
        return result

    async def connect_all(self) -> ConnectivityReport:
        """모든 사이트를 병렬로 점검한다. 개별 실패가 전체를 중단시키지 않는다."""
        names = list(self.connections)
        async with self._client() as client:
            results = await asyncio.gather(*(self._probe(client, n) for n in names))

        by_name = dict(zip(names, results, strict=True))
        self.statuses.update(by_name)

        online = sum(1 for r in results if r.success)
        return ConnectivityReport(
            total=len(names),
            online=online,
            offline=len(names) - online,
            results=by_name,
        )

    async def _post(
        self, client: httpx.AsyncClient, target: str, path: str, body: dict[str, Any]
    ) -> DeliveryResult:
        try:
            response = await client.post(
                path,
                json=body,
                headers={**WIRING_HEADERS, "X-Domino": "cascade"},
            )
        except httpx.RequestError as e:
            logger.warning(f"Failed to deliver to {target}: {e}")
            return DeliveryResult(target=target, success=False, error=str(e) or type(e).__name__)

        return DeliveryResult(
            target=target,
            success=response.is_success,
            http_status=response.status_code,
        )

    async def propagate_update(self, update: dict[str, Any]) -> PropagationResult:
        """업데이트를 모든 사이트의 /update로 연쇄 전파한다."""
        if not self.domino_enabled:
            return PropagationResult(
                propagated=False,
                method="domino",
                message="Domino updates disabled",
            )

        body = {**update, "timestamp": _now(), "propagation": "domino"}
        async with self._client() as client:
            results = await asyncio.gather(
                *(
                    self._post(client, name, f"{conn.path}/update", body)
                    for name, conn in self.connections.items()
                )
            )

        successful = sum(1 for r in results if r.success)
        logger.info(f"Propagated update to {successful}/{len(results)} sites")
        return PropagationResult(
            propagated=True,
            method="domino",
            results=list(results),
            successful=successful,
            failed=len(results) - successful,
        )

    async def backup_documentation(
        self,
        docs: dict[str, Any],
        locations: tuple[str, ...] = BACKUP_LOCATIONS,
    ) -> PropagationResult:
        """문서를 여러 위치에 백업한다."""
        body = {"docs": docs, "timestamp": _now()}
        async with self._client() as client:
            results = await asyncio.gather(
                *(self._post(client, loc, f"{loc}/backup", body) for loc in locations)
            )

        successful = sum(1 for r in results if r.success)
        return PropagationResult(
            propagated=True,
            method="backup",
            results=list(results),
            successful=successful,
            failed=len(results) - successful,
        )

    def get_wiring_status(self) -> dict[str, Any]:
        """현재 연결 구성과 마지막 점검 결과를 반환한다."""
        return {
            "connections": {
                name: {
                    **conn.model_dump(),
                    "status": self.statuses[name].status if name in self.statuses else "unknown",
                }
                for name, conn in self.connections.items()
            },
            "domino_update": {
                "enabled": self.domino_enabled,
                "propagation": "cascade",
                "backup": "multi_location",
            },
            "hydrogen_bonds": len(self.connections),
            "last_update": _now(),
        }

    def get_stats(self) -> ConnectionStats:
        """마지막 점검 기준 연결 통계를 반환한다."""
        total = len(self.connections)
        online = sum(1 for r in self.statuses.values() if r.status == "online")
        offline = sum(1 for r in self.statuses.values() if r.status == "offline")
        return ConnectionStats(
            total=total,
            online=online,
            offline=offline,
            health_percentage=(online / total * 100) if total else 0.0,
            domino_enabled=self.domino_enabled,
        )
