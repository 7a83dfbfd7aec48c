"""Record-store backed repositories, one per entity kind."""

from auditdesk.infrastructure.repositories.audit_repository import AuditRecordRepository
from auditdesk.infrastructure.repositories.base import RecordRepository
from auditdesk.infrastructure.repositories.report_repository import StoreReportRecordRepository
from auditdesk.infrastructure.repositories.template_repository import AuditTemplateRecordRepository

__all__ = [
    "AuditRecordRepository",
    "AuditTemplateRecordRepository",
    "RecordRepository",
    "StoreReportRecordRepository",
]
