"""
Query builders: one pure function per named access pattern. No I/O.
Filter literals are the same enum values the mappers write.
"""

from datetime import datetime
from typing import Optional, Tuple

from auditdesk.domain.models.audit import IN_PROGRESS_STATUSES, AuditStatus
from auditdesk.domain.models.template import AuditCategory, TemplateStatus
from auditdesk.infrastructure.mappers import audit_mapper as audit_fields
from auditdesk.infrastructure.mappers import report_mapper as report_fields
from auditdesk.infrastructure.mappers import template_mapper as template_fields
from auditdesk.infrastructure.mappers.audit_mapper import AUDIT_RECORD_TYPE, template_reference
from auditdesk.infrastructure.mappers.fields import to_utc
from auditdesk.infrastructure.mappers.report_mapper import REPORT_RECORD_TYPE
from auditdesk.infrastructure.mappers.template_mapper import TEMPLATE_RECORD_TYPE
from auditdesk.infrastructure.store.query import (
    And,
    Between,
    Contains,
    Equals,
    In,
    Query,
    SortDescriptor,
)

_BY_TITLE = (SortDescriptor(template_fields.F_TITLE, ascending=True),)
_NEWEST_TEMPLATE_FIRST = (SortDescriptor(template_fields.F_CREATED_AT, ascending=False),)
_NEWEST_AUDIT_FIRST = (SortDescriptor(audit_fields.F_STARTED_AT, ascending=False),)

_IS_ACTIVE = Equals(template_fields.F_IS_ACTIVE, True)
_IS_PUBLISHED = Equals(template_fields.F_STATUS, TemplateStatus.PUBLISHED.value)


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

def all_templates() -> Query:
    return Query(TEMPLATE_RECORD_TYPE, None, _NEWEST_TEMPLATE_FIRST)


def active_templates() -> Query:
    """status == published AND isActive, by title."""
    return Query(TEMPLATE_RECORD_TYPE, And((_IS_PUBLISHED, _IS_ACTIVE)), _BY_TITLE)


def templates_by_category(category: AuditCategory) -> Query:
    """category == X AND isActive, by title. Status is not filtered."""
    predicate = And((Equals(template_fields.F_CATEGORY, category.value), _IS_ACTIVE))
    return Query(TEMPLATE_RECORD_TYPE, predicate, _BY_TITLE)


def templates_for_store(store_code: str) -> Query:
    """
    applicableStores CONTAINS X AND published AND active, highest priority first.
    Order among equal priorities is whatever the store returns.
    """
    predicate = And((Contains(template_fields.F_APPLICABLE_STORES, store_code), _IS_PUBLISHED, _IS_ACTIVE))
    return Query(
        TEMPLATE_RECORD_TYPE,
        predicate,
        (SortDescriptor(template_fields.F_PRIORITY, ascending=False),),
    )


# ---------------------------------------------------------------------------
# Audits
# ---------------------------------------------------------------------------

def all_audits() -> Query:
    return Query(AUDIT_RECORD_TYPE, None, _NEWEST_AUDIT_FIRST)


def audits_for_store(store_code: str) -> Query:
    return Query(AUDIT_RECORD_TYPE, Equals(audit_fields.F_STORE_CODE, store_code), _NEWEST_AUDIT_FIRST)


def audits_for_template(template_id: str) -> Query:
    """templateRef == ref(id). Legacy audits holding the bare identifier match too."""
    predicate = In(audit_fields.F_TEMPLATE_REF, (template_reference(template_id), template_id))
    return Query(AUDIT_RECORD_TYPE, predicate, _NEWEST_AUDIT_FIRST)


def audits_by_status(status: AuditStatus) -> Query:
    return Query(AUDIT_RECORD_TYPE, Equals(audit_fields.F_STATUS, status.value), _NEWEST_AUDIT_FIRST)


def audits_in_progress() -> Query:
    """status IN {in_progress, paused}."""
    values = tuple(sorted(s.value for s in IN_PROGRESS_STATUSES))
    return Query(AUDIT_RECORD_TYPE, In(audit_fields.F_STATUS, values), _NEWEST_AUDIT_FIRST)


# ---------------------------------------------------------------------------
# Store reports
# ---------------------------------------------------------------------------

def reports_for_store(store_code: str, date_range: Optional[Tuple[datetime, datetime]] = None) -> Query:
    """storeCode == X, AND lower <= date <= upper when a range is given. No sort order."""
    predicate = Equals(report_fields.F_STORE_CODE, store_code)
    if date_range is not None:
        lower, upper = (to_utc(bound, report_fields.F_DATE) for bound in date_range)
        predicate = And((predicate, Between(report_fields.F_DATE, lower, upper)))
    return Query(REPORT_RECORD_TYPE, predicate)
