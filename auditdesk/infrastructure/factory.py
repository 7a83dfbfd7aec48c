"""Repository factory: builds repositories bound to one injected record store."""

from typing import Optional

from auditdesk.application.repositories import (
    AuditRepository,
    AuditTemplateRepository,
    StoreReportRepository,
)
from auditdesk.config.settings import AppSettings, get_settings
from auditdesk.infrastructure.repositories import (
    AuditRecordRepository,
    AuditTemplateRecordRepository,
    StoreReportRecordRepository,
)
from auditdesk.infrastructure.store.interface import RecordStore
from auditdesk.infrastructure.store.redis_client import RedisClient
from auditdesk.infrastructure.store.redis_store import RedisRecordStore

_default_factory: "RepositoryFactory | None" = None


class RepositoryFactory:
    """
    Holds only the store handle. Each call returns a fresh repository;
    callers must not rely on repository identity.
    """

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "RepositoryFactory":
        """Factory over the Redis record store described by settings."""
        client = RedisClient(settings.redis_url, timeout=settings.store_timeout_seconds)
        return cls(RedisRecordStore(client, key_prefix=settings.record_key_prefix))

    @property
    def store(self) -> RecordStore:
        return self._store

    async def close(self) -> None:
        """Close the underlying store. Repositories built earlier must not be used afterwards."""
        await self._store.close()

    def audit_templates(self) -> AuditTemplateRepository:
        return AuditTemplateRecordRepository(self._store)

    def audits(self) -> AuditRepository:
        return AuditRecordRepository(self._store)

    def store_reports(self) -> StoreReportRepository:
        return StoreReportRecordRepository(self._store)


def get_repository_factory(settings: Optional[AppSettings] = None) -> RepositoryFactory:
    """Return the process-wide factory, building it from settings on first use."""
    global _default_factory
    if _default_factory is None:
        _default_factory = RepositoryFactory.from_settings(settings or get_settings())
    return _default_factory


def reset_repository_factory() -> None:
    """Forget the process-wide factory (tests, reconfiguration)."""
    global _default_factory
    _default_factory = None
