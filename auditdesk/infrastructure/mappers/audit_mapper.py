"""Audit <-> record mapping. Responses travel as a JSON array in a single text field."""

import logging
from typing import Tuple

from pydantic import ValidationError

from auditdesk.domain.models.audit import Audit, AuditResponse, AuditStatus
from auditdesk.domain.schemas.response import responses_from_json, responses_to_json
from auditdesk.infrastructure.mappers.base import EntityMapper
from auditdesk.infrastructure.mappers.fields import (
    as_bool,
    as_datetime,
    as_float,
    as_int,
    as_reference_id,
    as_str,
    enum_coercer,
    optional,
    required,
    to_utc,
    without_none,
)
from auditdesk.infrastructure.mappers.template_mapper import TEMPLATE_RECORD_TYPE
from auditdesk.infrastructure.store.records import Record, RecordReference

AUDIT_RECORD_TYPE = "Audit"

F_STORE_CODE = "storeCode"
F_STORE_NAME = "storeName"
F_TEMPLATE_REF = "templateRef"
F_TEMPLATE_TITLE = "templateTitle"
F_STATUS = "status"
F_STARTED_BY_NAME = "startedByName"
F_STARTED_AT = "startedAt"
F_FINISHED_AT = "finishedAt"
F_PAUSED_AT = "pausedAt"
F_RESUMED_AT = "resumedAt"
F_SCORE = "score"
F_MAX_SCORE = "maxScore"
F_PERCENTAGE = "percentage"
F_PASS_COUNT = "passCount"
F_FAIL_COUNT = "failCount"
F_NA_COUNT = "naCount"
F_TOTAL_QUESTIONS = "totalQuestions"
F_DURATION = "duration"
F_IS_SUBMITTED = "isSubmitted"
F_SUBMITTED_AT = "submittedAt"
F_COMMENTS = "comments"
F_RESPONSES = "responses"
F_CREATED_AT = "createdAt"
F_UPDATED_AT = "updatedAt"

logger = logging.getLogger(__name__)


def template_reference(template_id: str) -> RecordReference:
    """Reference value stored in an audit's templateRef field."""
    return RecordReference(record_type=TEMPLATE_RECORD_TYPE, record_id=template_id)


def _decode_responses(record: Record) -> Tuple[AuditResponse, ...]:
    raw = record.get(F_RESPONSES)
    if not isinstance(raw, str):
        return ()
    try:
        return tuple(responses_from_json(raw))
    except ValidationError:
        logger.debug("Audit record %s has undecodable responses; using none", record.record_id)
        return ()


class AuditMapper(EntityMapper[Audit]):
    record_type = AUDIT_RECORD_TYPE

    def _build(self, record: Record) -> Audit:
        return Audit(
            store_code=required(record, F_STORE_CODE, as_str),
            template_id=required(record, F_TEMPLATE_REF, as_reference_id),
            status=required(record, F_STATUS, enum_coercer(AuditStatus)),
            started_at=required(record, F_STARTED_AT, as_datetime),
            template_title=optional(record, F_TEMPLATE_TITLE, as_str, ""),
            store_name=optional(record, F_STORE_NAME, as_str),
            started_by_name=optional(record, F_STARTED_BY_NAME, as_str, ""),
            responses=_decode_responses(record),
            score=optional(record, F_SCORE, as_float),
            max_score=optional(record, F_MAX_SCORE, as_float),
            percentage=optional(record, F_PERCENTAGE, as_float),
            pass_count=optional(record, F_PASS_COUNT, as_int, 0),
            fail_count=optional(record, F_FAIL_COUNT, as_int, 0),
            na_count=optional(record, F_NA_COUNT, as_int, 0),
            total_questions=optional(record, F_TOTAL_QUESTIONS, as_int, 0),
            finished_at=optional(record, F_FINISHED_AT, as_datetime),
            paused_at=optional(record, F_PAUSED_AT, as_datetime),
            resumed_at=optional(record, F_RESUMED_AT, as_datetime),
            duration=optional(record, F_DURATION, as_float),
            is_submitted=optional(record, F_IS_SUBMITTED, as_bool, False),
            submitted_at=optional(record, F_SUBMITTED_AT, as_datetime),
            comments=optional(record, F_COMMENTS, as_str),
            created_at=optional(record, F_CREATED_AT, as_datetime),
            updated_at=optional(record, F_UPDATED_AT, as_datetime),
            record_id=record.record_id,
            modified_at=record.modified_at,
        )

    def to_record(self, entity: Audit) -> Record:
        fields = without_none(
            {
                F_STORE_CODE: entity.store_code,
                F_STORE_NAME: entity.store_name,
                F_TEMPLATE_REF: template_reference(entity.template_id),
                F_TEMPLATE_TITLE: entity.template_title,
                F_STATUS: entity.status.value,
                F_STARTED_BY_NAME: entity.started_by_name,
                F_STARTED_AT: to_utc(entity.started_at, F_STARTED_AT),
                F_FINISHED_AT: to_utc(entity.finished_at, F_FINISHED_AT),
                F_PAUSED_AT: to_utc(entity.paused_at, F_PAUSED_AT),
                F_RESUMED_AT: to_utc(entity.resumed_at, F_RESUMED_AT),
                F_SCORE: entity.score,
                F_MAX_SCORE: entity.max_score,
                F_PERCENTAGE: entity.percentage,
                F_PASS_COUNT: entity.pass_count,
                F_FAIL_COUNT: entity.fail_count,
                F_NA_COUNT: entity.na_count,
                F_TOTAL_QUESTIONS: entity.total_questions,
                F_DURATION: entity.duration,
                F_IS_SUBMITTED: entity.is_submitted,
                F_SUBMITTED_AT: to_utc(entity.submitted_at, F_SUBMITTED_AT),
                F_COMMENTS: entity.comments,
                F_RESPONSES: responses_to_json(entity.responses) if entity.responses else None,
                F_CREATED_AT: to_utc(entity.created_at, F_CREATED_AT),
                F_UPDATED_AT: to_utc(entity.updated_at, F_UPDATED_AT),
            }
        )
        return Record(record_type=AUDIT_RECORD_TYPE, fields=fields, record_id=entity.record_id)
