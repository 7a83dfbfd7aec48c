"""Record-store implementation of StoreReportRepository."""

from datetime import datetime
from typing import List, Optional, Tuple

from auditdesk.domain.models.report import StoreReport
from auditdesk.infrastructure import queries
from auditdesk.infrastructure.mappers.report_mapper import StoreReportMapper
from auditdesk.infrastructure.repositories.base import RecordRepository
from auditdesk.infrastructure.store.interface import RecordStore


class StoreReportRecordRepository(RecordRepository[StoreReport]):
    def __init__(self, store: RecordStore) -> None:
        super().__init__(store, StoreReportMapper())

    async def fetch_for_store(
        self, store_code: str, date_range: Optional[Tuple[datetime, datetime]] = None
    ) -> List[StoreReport]:
        """Reports for store_code; date_range bounds are inclusive. Unordered."""
        return await self._fetch_many(queries.reports_for_store(store_code, date_range))
