"""Repository protocols. Callers depend on these; infrastructure implements them."""

from datetime import datetime
from typing import List, Optional, Protocol, Tuple

from auditdesk.domain.models.audit import Audit, AuditResponse, AuditStatus
from auditdesk.domain.models.report import StoreReport
from auditdesk.domain.models.template import AuditCategory, AuditTemplate

DateRange = Tuple[datetime, datetime]


class AuditTemplateRepository(Protocol):
    """Queries and lifecycle persistence for audit templates."""

    async def fetch_all(self) -> List[AuditTemplate]:
        """All templates, newest first."""
        ...

    async def fetch_active(self) -> List[AuditTemplate]:
        """Published and active templates, by title."""
        ...

    async def fetch_by_category(self, category: AuditCategory) -> List[AuditTemplate]:
        ...

    async def fetch_by_store_code(self, store_code: str) -> List[AuditTemplate]:
        """Published, active templates applicable to a store, highest priority first."""
        ...

    async def fetch(self, record_id: str) -> Optional[AuditTemplate]:
        """Return template by identifier, or None if not found."""
        ...

    async def save(self, template: AuditTemplate) -> AuditTemplate:
        ...

    async def delete(self, template: AuditTemplate) -> None:
        ...

    async def publish(self, template: AuditTemplate) -> AuditTemplate:
        ...

    async def archive(self, template: AuditTemplate) -> AuditTemplate:
        ...


class AuditRepository(Protocol):
    """Queries and lifecycle persistence for audits."""

    async def fetch_all(self) -> List[Audit]:
        ...

    async def fetch_by_store_code(self, store_code: str) -> List[Audit]:
        ...

    async def fetch_by_template(self, template_id: str) -> List[Audit]:
        ...

    async def fetch_by_status(self, status: AuditStatus) -> List[Audit]:
        ...

    async def fetch_in_progress(self) -> List[Audit]:
        """Audits that are in progress or paused."""
        ...

    async def fetch(self, record_id: str) -> Optional[Audit]:
        ...

    async def save(self, audit: Audit) -> Audit:
        ...

    async def delete(self, audit: Audit) -> None:
        ...

    async def add_response(self, audit: Audit, response: AuditResponse) -> Audit:
        ...

    async def complete(self, audit: Audit, final_score: float, max_score: float) -> Audit:
        ...

    async def submit(self, audit: Audit) -> Audit:
        ...


class StoreReportRepository(Protocol):
    """Queries and persistence for daily store reports."""

    async def fetch_for_store(
        self, store_code: str, date_range: Optional[DateRange] = None
    ) -> List[StoreReport]:
        """Reports for a store; restricted to date_range (inclusive) when given."""
        ...

    async def fetch(self, record_id: str) -> Optional[StoreReport]:
        ...

    async def save(self, report: StoreReport) -> StoreReport:
        ...

    async def delete(self, report: StoreReport) -> None:
        ...
