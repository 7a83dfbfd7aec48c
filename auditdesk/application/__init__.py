# Application layer: repository contracts and the errors they raise.

from auditdesk.application.exceptions import (
    ApplicationError,
    MalformedRecordError,
    RecordNotFoundError,
    StoreTransportError,
)
from auditdesk.application.repositories import (
    AuditRepository,
    AuditTemplateRepository,
    DateRange,
    StoreReportRepository,
)

__all__ = [
    "ApplicationError",
    "AuditRepository",
    "AuditTemplateRepository",
    "DateRange",
    "MalformedRecordError",
    "RecordNotFoundError",
    "StoreReportRepository",
    "StoreTransportError",
]
