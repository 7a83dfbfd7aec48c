"""Domain model for audit templates. Immutable values; transitions return new instances."""

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Tuple

from auditdesk.domain.exceptions import DomainValidationError


class AuditCategory(str, Enum):
    """Template category. Values are persisted verbatim and used in query filters."""

    OPERATIONS = "operations"
    SAFETY = "safety"
    CUSTOMER_SERVICE = "customer_service"
    VISUAL_MERCHANDISING = "visual_merchandising"
    INVENTORY = "inventory"
    COMPLIANCE = "compliance"
    CLEANLINESS = "cleanliness"
    SECURITY = "security"
    TRAINING = "training"
    SALES = "sales"
    CUSTOM = "custom"


class TemplateStatus(str, Enum):
    """Publication status of a template."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class AuditTemplate:
    """
    Audit template: the question set a store audit is run against.
    Only templates that are both published and active are offered to field users.
    """

    title: str
    category: AuditCategory
    status: TemplateStatus
    is_active: bool
    created_at: datetime
    applicable_stores: Tuple[str, ...] = ()
    priority: int = 0
    description: Optional[str] = None
    department: Optional[str] = None
    version: int = 1
    estimated_duration: float = 1800.0
    usage_count: int = 0
    last_used_at: Optional[datetime] = None
    published_at: Optional[datetime] = None
    tags: Tuple[str, ...] = ()
    updated_at: Optional[datetime] = None
    record_id: Optional[str] = None
    modified_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        title: str,
        category: AuditCategory,
        applicable_stores: Tuple[str, ...] = (),
        priority: int = 0,
        description: Optional[str] = None,
        department: Optional[str] = None,
        estimated_duration: float = 1800.0,
        tags: Tuple[str, ...] = (),
    ) -> "AuditTemplate":
        """New unsaved draft template. Active, version 1, no identifier."""
        if not title or not title.strip():
            raise DomainValidationError("template title must not be empty")
        now = _utcnow()
        return cls(
            title=title,
            category=category,
            status=TemplateStatus.DRAFT,
            is_active=True,
            created_at=now,
            applicable_stores=tuple(applicable_stores),
            priority=priority,
            description=description,
            department=department,
            estimated_duration=estimated_duration,
            tags=tuple(tags),
            updated_at=now,
        )

    @property
    def is_visible(self) -> bool:
        """True when the template would be returned by active and per-store queries."""
        return self.status == TemplateStatus.PUBLISHED and self.is_active

    def publish(self) -> "AuditTemplate":
        """Return a published copy."""
        now = _utcnow()
        return replace(self, status=TemplateStatus.PUBLISHED, published_at=now, updated_at=now)

    def archive(self) -> "AuditTemplate":
        """Return an archived copy."""
        return replace(self, status=TemplateStatus.ARCHIVED, updated_at=_utcnow())

    def deactivate(self) -> "AuditTemplate":
        return replace(self, is_active=False, updated_at=_utcnow())

    def increment_usage(self) -> "AuditTemplate":
        now = _utcnow()
        return replace(self, usage_count=self.usage_count + 1, last_used_at=now, updated_at=now)
