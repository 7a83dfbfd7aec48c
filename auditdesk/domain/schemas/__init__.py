from auditdesk.domain.schemas.response import (
    AuditResponsePayload,
    responses_from_json,
    responses_to_json,
)

__all__ = [
    "AuditResponsePayload",
    "responses_from_json",
    "responses_to_json",
]
