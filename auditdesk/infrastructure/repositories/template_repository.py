"""Record-store implementation of AuditTemplateRepository."""

from typing import List

from auditdesk.domain.models.template import AuditCategory, AuditTemplate
from auditdesk.infrastructure import queries
from auditdesk.infrastructure.mappers.template_mapper import AuditTemplateMapper
from auditdesk.infrastructure.repositories.base import RecordRepository
from auditdesk.infrastructure.store.interface import RecordStore


class AuditTemplateRecordRepository(RecordRepository[AuditTemplate]):
    def __init__(self, store: RecordStore) -> None:
        super().__init__(store, AuditTemplateMapper())

    async def fetch_all(self) -> List[AuditTemplate]:
        return await self._fetch_many(queries.all_templates())

    async def fetch_active(self) -> List[AuditTemplate]:
        return await self._fetch_many(queries.active_templates())

    async def fetch_by_category(self, category: AuditCategory) -> List[AuditTemplate]:
        return await self._fetch_many(queries.templates_by_category(category))

    async def fetch_by_store_code(self, store_code: str) -> List[AuditTemplate]:
        return await self._fetch_many(queries.templates_for_store(store_code))

    async def publish(self, template: AuditTemplate) -> AuditTemplate:
        return await self.save(template.publish())

    async def archive(self, template: AuditTemplate) -> AuditTemplate:
        return await self.save(template.archive())
