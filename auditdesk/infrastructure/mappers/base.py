"""Entity mapper base: record <-> entity with a tolerate-and-skip read path."""

import logging
from typing import Generic, Optional, TypeVar

from auditdesk.application.exceptions import MalformedRecordError
from auditdesk.infrastructure.store.records import Record

T = TypeVar("T")

logger = logging.getLogger(__name__)


class EntityMapper(Generic[T]):
    """
    Subclasses set record_type and implement _build and to_record.
    from_record never raises for bad data: a malformed record maps to None.
    """

    record_type: str = ""

    def _build(self, record: Record) -> T:
        """Build the entity. Raise MalformedRecordError for missing or malformed required fields."""
        raise NotImplementedError

    def to_record(self, entity: T) -> Record:
        raise NotImplementedError

    def from_record(self, record: Record) -> Optional[T]:
        if record.record_type != self.record_type:
            logger.debug("Record %s has type %s, expected %s", record.record_id, record.record_type, self.record_type)
            return None
        try:
            return self._build(record)
        except MalformedRecordError as e:
            logger.debug("Malformed %s record %s: %s", self.record_type, record.record_id, e.message)
            return None
