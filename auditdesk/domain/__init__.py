"""Domain layer: models, schemas, exceptions. Pure business logic only."""

from auditdesk.domain.exceptions import (
    AuditNotEditableError,
    DomainError,
    DomainValidationError,
    InvalidStatusTransitionError,
)
from auditdesk.domain.models import (
    AnswerType,
    Audit,
    AuditCategory,
    AuditResponse,
    AuditStatus,
    AuditTemplate,
    StoreReport,
    TemplateStatus,
)

__all__ = [
    "AnswerType",
    "Audit",
    "AuditCategory",
    "AuditNotEditableError",
    "AuditResponse",
    "AuditStatus",
    "AuditTemplate",
    "DomainError",
    "DomainValidationError",
    "InvalidStatusTransitionError",
    "StoreReport",
    "TemplateStatus",
]
