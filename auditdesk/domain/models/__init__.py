"""Domain models. Pure business entities."""

from auditdesk.domain.models.audit import (
    IN_PROGRESS_STATUSES,
    AnswerType,
    Audit,
    AuditResponse,
    AuditStatus,
)
from auditdesk.domain.models.report import StoreReport
from auditdesk.domain.models.template import AuditCategory, AuditTemplate, TemplateStatus

__all__ = [
    "IN_PROGRESS_STATUSES",
    "AnswerType",
    "Audit",
    "AuditCategory",
    "AuditResponse",
    "AuditStatus",
    "AuditTemplate",
    "StoreReport",
    "TemplateStatus",
]
