"""Record-store implementation of AuditRepository."""

from typing import List

from auditdesk.domain.models.audit import Audit, AuditResponse, AuditStatus
from auditdesk.infrastructure import queries
from auditdesk.infrastructure.mappers.audit_mapper import AuditMapper
from auditdesk.infrastructure.repositories.base import RecordRepository
from auditdesk.infrastructure.store.interface import RecordStore


class AuditRecordRepository(RecordRepository[Audit]):
    """
    Lifecycle helpers apply the Audit transition and save the result.
    They add no checks of their own: complete() stores any score pair as given.
    """

    def __init__(self, store: RecordStore) -> None:
        super().__init__(store, AuditMapper())

    async def fetch_all(self) -> List[Audit]:
        return await self._fetch_many(queries.all_audits())

    async def fetch_by_store_code(self, store_code: str) -> List[Audit]:
        return await self._fetch_many(queries.audits_for_store(store_code))

    async def fetch_by_template(self, template_id: str) -> List[Audit]:
        return await self._fetch_many(queries.audits_for_template(template_id))

    async def fetch_by_status(self, status: AuditStatus) -> List[Audit]:
        return await self._fetch_many(queries.audits_by_status(status))

    async def fetch_in_progress(self) -> List[Audit]:
        return await self._fetch_many(queries.audits_in_progress())

    async def add_response(self, audit: Audit, response: AuditResponse) -> Audit:
        """Raises AuditNotEditableError, without writing, unless the audit is in progress or paused."""
        return await self.save(audit.add_response(response))

    async def complete(self, audit: Audit, final_score: float, max_score: float) -> Audit:
        return await self.save(audit.complete(final_score=final_score, max_score=max_score))

    async def submit(self, audit: Audit) -> Audit:
        return await self.save(audit.submit())
