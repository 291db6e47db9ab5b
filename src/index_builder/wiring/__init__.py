"""형제 사이트 연결 모듈."""

from index_builder.wiring.connector import (
    BACKUP_LOCATIONS,
    DEFAULT_CONNECTIONS,
    RepoConnector,
)

__all__ = ["BACKUP_LOCATIONS", "DEFAULT_CONNECTIONS", "RepoConnector"]
