"""Domain model for store audits. Pure business semantics; no record or store details."""

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple

from auditdesk.domain.exceptions import AuditNotEditableError, InvalidStatusTransitionError


class AuditStatus(str, Enum):
    """Lifecycle status of an audit run. Values are persisted verbatim."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    PAUSED = "paused"
    SUBMITTED = "submitted"
    COMPLETED = "completed"


# Statuses counted as "in progress" by queries and accepted by add_response
IN_PROGRESS_STATUSES: FrozenSet[AuditStatus] = frozenset({AuditStatus.IN_PROGRESS, AuditStatus.PAUSED})

# Transitions driven by start/pause/resume. complete refuses closed audits; submit is unconditional.
_STATUS_TRANSITIONS: Dict[AuditStatus, FrozenSet[AuditStatus]] = {
    AuditStatus.NOT_STARTED: frozenset({AuditStatus.IN_PROGRESS}),
    AuditStatus.IN_PROGRESS: frozenset({AuditStatus.PAUSED}),
    AuditStatus.PAUSED: frozenset({AuditStatus.IN_PROGRESS}),
    AuditStatus.SUBMITTED: frozenset(),
    AuditStatus.COMPLETED: frozenset(),
}


def _validate_transition(current: AuditStatus, new: AuditStatus) -> None:
    """Validate that transition from current to new is allowed. Raises if invalid."""
    allowed = _STATUS_TRANSITIONS.get(current, frozenset())
    if new not in allowed:
        raise InvalidStatusTransitionError(
            f"Invalid status transition from {current.value} to {new.value}"
        )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AnswerType(str, Enum):
    PASS = "pass"
    FAIL = "fail"
    NA = "na"
    YES = "yes"
    NO = "no"
    TEXT = "text"
    NUMERIC = "numeric"
    MULTIPLE_CHOICE = "multiple_choice"
    RATING = "rating"
    CHECKLIST = "checklist"


@dataclass(frozen=True)
class AuditResponse:
    """One answered question. At most one response per question_id is kept on an audit."""

    question_id: str
    section_id: str
    question_text: str
    answer_type: AnswerType
    answer: str
    max_points: float
    timestamp: datetime
    points: Optional[float] = None
    is_passing: bool = True
    comments: Optional[str] = None


@dataclass(frozen=True)
class Audit:
    """
    An audit of one store against one template.
    Every transition returns a new Audit; persist it with the repository to take effect.
    """

    store_code: str
    template_id: str
    status: AuditStatus
    started_at: datetime
    template_title: str = ""
    store_name: Optional[str] = None
    started_by_name: str = ""
    responses: Tuple[AuditResponse, ...] = ()
    score: Optional[float] = None
    max_score: Optional[float] = None
    percentage: Optional[float] = None
    pass_count: int = 0
    fail_count: int = 0
    na_count: int = 0
    total_questions: int = 0
    finished_at: Optional[datetime] = None
    paused_at: Optional[datetime] = None
    resumed_at: Optional[datetime] = None
    duration: Optional[float] = None
    is_submitted: bool = False
    submitted_at: Optional[datetime] = None
    comments: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    record_id: Optional[str] = None
    modified_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        store_code: str,
        template_id: str,
        template_title: str = "",
        store_name: Optional[str] = None,
        started_by_name: str = "",
        total_questions: int = 0,
    ) -> "Audit":
        """New unsaved audit in NOT_STARTED."""
        now = _utcnow()
        return cls(
            store_code=store_code,
            template_id=template_id,
            status=AuditStatus.NOT_STARTED,
            started_at=now,
            template_title=template_title,
            store_name=store_name,
            started_by_name=started_by_name,
            total_questions=total_questions,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_editable(self) -> bool:
        return self.status in IN_PROGRESS_STATUSES

    @property
    def completion_percentage(self) -> float:
        if self.total_questions <= 0:
            return 0.0
        return len(self.responses) / self.total_questions * 100

    def start(self) -> "Audit":
        _validate_transition(self.status, AuditStatus.IN_PROGRESS)
        now = _utcnow()
        return replace(self, status=AuditStatus.IN_PROGRESS, started_at=now, updated_at=now)

    def pause(self) -> "Audit":
        _validate_transition(self.status, AuditStatus.PAUSED)
        now = _utcnow()
        return replace(self, status=AuditStatus.PAUSED, paused_at=now, updated_at=now)

    def resume(self) -> "Audit":
        if self.status != AuditStatus.PAUSED:
            raise InvalidStatusTransitionError(
                f"Invalid status transition from {self.status.value} to {AuditStatus.IN_PROGRESS.value}"
            )
        now = _utcnow()
        return replace(self, status=AuditStatus.IN_PROGRESS, resumed_at=now, updated_at=now)

    def add_response(self, response: AuditResponse) -> "Audit":
        """
        Return a copy with response recorded, replacing any earlier answer to the same question.
        Raises AuditNotEditableError unless the audit is in progress or paused.
        """
        if not self.is_editable:
            raise AuditNotEditableError(
                f"Cannot add responses to an audit with status {self.status.value}"
            )
        responses = tuple(r for r in self.responses if r.question_id != response.question_id)
        responses = responses + (response,)
        return replace(
            self,
            responses=responses,
            pass_count=sum(1 for r in responses if r.answer_type == AnswerType.PASS),
            fail_count=sum(1 for r in responses if r.answer_type == AnswerType.FAIL),
            na_count=sum(1 for r in responses if r.answer_type == AnswerType.NA),
            updated_at=_utcnow(),
        )

    def complete(self, final_score: float, max_score: float) -> "Audit":
        """
        Return a completed copy holding the final score pair.
        The pair is stored as given: final_score is not checked against max_score.
        A completed or submitted audit keeps its score; completing it again raises.
        """
        if self.status in (AuditStatus.COMPLETED, AuditStatus.SUBMITTED):
            raise InvalidStatusTransitionError(
                f"Invalid status transition from {self.status.value} to {AuditStatus.COMPLETED.value}"
            )
        now = _utcnow()
        percentage = (final_score / max_score) * 100 if max_score else None
        return replace(
            self,
            status=AuditStatus.COMPLETED,
            score=final_score,
            max_score=max_score,
            percentage=percentage,
            finished_at=now,
            duration=(now - self.started_at).total_seconds(),
            is_submitted=False,
            submitted_at=None,
            updated_at=now,
        )

    def submit(self) -> "Audit":
        """Return a submitted copy. Score fields from a prior complete() are kept."""
        now = _utcnow()
        return replace(
            self,
            status=AuditStatus.SUBMITTED,
            finished_at=self.finished_at or now,
            duration=self.duration if self.duration is not None else (now - self.started_at).total_seconds(),
            is_submitted=True,
            submitted_at=now,
            updated_at=now,
        )
