"""Pydantic schemas for audit responses stored as JSON inside audit records."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, TypeAdapter

from auditdesk.domain.models.audit import AnswerType, AuditResponse


class AuditResponsePayload(BaseModel):
    """Wire shape of one audit response. Field aliases are the stored camelCase names."""

    question_id: str = Field(..., min_length=1, alias="questionId")
    section_id: str = Field(..., alias="sectionId")
    question_text: str = Field(..., alias="questionText")
    answer_type: AnswerType = Field(..., alias="answerType")
    answer: str
    points: Optional[float] = None
    max_points: float = Field(..., alias="maxPoints")
    is_passing: bool = Field(True, alias="isPassing")
    comments: Optional[str] = None
    timestamp: datetime

    model_config = {"populate_by_name": True}

    @classmethod
    def from_domain(cls, response: AuditResponse) -> "AuditResponsePayload":
        return cls(
            question_id=response.question_id,
            section_id=response.section_id,
            question_text=response.question_text,
            answer_type=response.answer_type,
            answer=response.answer,
            points=response.points,
            max_points=response.max_points,
            is_passing=response.is_passing,
            comments=response.comments,
            timestamp=response.timestamp,
        )

    def to_domain(self) -> AuditResponse:
        return AuditResponse(
            question_id=self.question_id,
            section_id=self.section_id,
            question_text=self.question_text,
            answer_type=self.answer_type,
            answer=self.answer,
            points=self.points,
            max_points=self.max_points,
            is_passing=self.is_passing,
            comments=self.comments,
            timestamp=self.timestamp,
        )


_RESPONSE_LIST = TypeAdapter(List[AuditResponsePayload])


def responses_to_json(responses) -> str:
    """Serialize a sequence of AuditResponse to a JSON array (camelCase keys)."""
    payloads = [AuditResponsePayload.from_domain(r) for r in responses]
    return _RESPONSE_LIST.dump_json(payloads, by_alias=True).decode("utf-8")


def responses_from_json(data: str) -> List[AuditResponse]:
    """Deserialize a JSON array of responses. Raises pydantic.ValidationError on bad input."""
    return [p.to_domain() for p in _RESPONSE_LIST.validate_json(data)]
