"""Entity mappers: domain entities <-> store records."""

from auditdesk.infrastructure.mappers.audit_mapper import AUDIT_RECORD_TYPE, AuditMapper, template_reference
from auditdesk.infrastructure.mappers.base import EntityMapper
from auditdesk.infrastructure.mappers.report_mapper import REPORT_RECORD_TYPE, StoreReportMapper
from auditdesk.infrastructure.mappers.template_mapper import TEMPLATE_RECORD_TYPE, AuditTemplateMapper

__all__ = [
    "AUDIT_RECORD_TYPE",
    "AuditMapper",
    "AuditTemplateMapper",
    "EntityMapper",
    "REPORT_RECORD_TYPE",
    "StoreReportMapper",
    "TEMPLATE_RECORD_TYPE",
    "template_reference",
]
