"""AuditTemplate <-> record mapping. Field names are the stored wire contract."""

from auditdesk.domain.models.template import AuditCategory, AuditTemplate, TemplateStatus
from auditdesk.infrastructure.mappers.base import EntityMapper
from auditdesk.infrastructure.mappers.fields import (
    as_bool,
    as_datetime,
    as_float,
    as_int,
    as_str,
    as_str_tuple,
    enum_coercer,
    optional,
    required,
    to_utc,
    without_none,
)
from auditdesk.infrastructure.store.records import Record

TEMPLATE_RECORD_TYPE = "AuditTemplate"

F_TITLE = "title"
F_DESCRIPTION = "description"
F_DEPARTMENT = "department"
F_CATEGORY = "category"
F_STATUS = "status"
F_IS_ACTIVE = "isActive"
F_APPLICABLE_STORES = "applicableStores"
F_PRIORITY = "priority"
F_VERSION = "version"
F_ESTIMATED_DURATION = "estimatedDuration"
F_USAGE_COUNT = "usageCount"
F_LAST_USED_AT = "lastUsedAt"
F_PUBLISHED_AT = "publishedAt"
F_TAGS = "tags"
F_CREATED_AT = "createdAt"
F_UPDATED_AT = "updatedAt"


class AuditTemplateMapper(EntityMapper[AuditTemplate]):
    record_type = TEMPLATE_RECORD_TYPE

    def _build(self, record: Record) -> AuditTemplate:
        return AuditTemplate(
            title=required(record, F_TITLE, as_str),
            category=required(record, F_CATEGORY, enum_coercer(AuditCategory)),
            status=required(record, F_STATUS, enum_coercer(TemplateStatus)),
            is_active=required(record, F_IS_ACTIVE, as_bool),
            created_at=required(record, F_CREATED_AT, as_datetime),
            applicable_stores=optional(record, F_APPLICABLE_STORES, as_str_tuple, ()),
            priority=optional(record, F_PRIORITY, as_int, 0),
            description=optional(record, F_DESCRIPTION, as_str),
            department=optional(record, F_DEPARTMENT, as_str),
            version=optional(record, F_VERSION, as_int, 1),
            estimated_duration=optional(record, F_ESTIMATED_DURATION, as_float, 1800.0),
            usage_count=optional(record, F_USAGE_COUNT, as_int, 0),
            last_used_at=optional(record, F_LAST_USED_AT, as_datetime),
            published_at=optional(record, F_PUBLISHED_AT, as_datetime),
            tags=optional(record, F_TAGS, as_str_tuple, ()),
            updated_at=optional(record, F_UPDATED_AT, as_datetime),
            record_id=record.record_id,
            modified_at=record.modified_at,
        )

    def to_record(self, entity: AuditTemplate) -> Record:
        fields = without_none(
            {
                F_TITLE: entity.title,
                F_DESCRIPTION: entity.description,
                F_DEPARTMENT: entity.department,
                F_CATEGORY: entity.category.value,
                F_STATUS: entity.status.value,
                F_IS_ACTIVE: entity.is_active,
                F_APPLICABLE_STORES: list(entity.applicable_stores),
                F_PRIORITY: entity.priority,
                F_VERSION: entity.version,
                F_ESTIMATED_DURATION: entity.estimated_duration,
                F_USAGE_COUNT: entity.usage_count,
                F_LAST_USED_AT: to_utc(entity.last_used_at, F_LAST_USED_AT),
                F_PUBLISHED_AT: to_utc(entity.published_at, F_PUBLISHED_AT),
                F_TAGS: list(entity.tags),
                F_CREATED_AT: to_utc(entity.created_at, F_CREATED_AT),
                F_UPDATED_AT: to_utc(entity.updated_at, F_UPDATED_AT),
            }
        )
        return Record(record_type=TEMPLATE_RECORD_TYPE, fields=fields, record_id=entity.record_id)
