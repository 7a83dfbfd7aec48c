"""Shared fetch/save/delete primitives for record-store backed repositories."""

import logging
from typing import Generic, List, Optional, TypeVar

from auditdesk.application.exceptions import RecordNotFoundError, StoreTransportError
from auditdesk.infrastructure.mappers.base import EntityMapper
from auditdesk.infrastructure.store.interface import RecordStore
from auditdesk.infrastructure.store.query import Query

T = TypeVar("T")

logger = logging.getLogger(__name__)


class RecordRepository(Generic[T]):
    """
    One store round trip per call. Entities are immutable; every write returns a new value.
    Transport errors propagate; malformed records are dropped from bulk results.
    """

    def __init__(self, store: RecordStore, mapper: EntityMapper[T]) -> None:
        self._store = store
        self._mapper = mapper

    @property
    def record_type(self) -> str:
        return self._mapper.record_type

    async def _fetch_many(self, query: Query) -> List[T]:
        try:
            records = await self._store.query(query)
        except StoreTransportError as e:
            logger.error("Query on %s failed: %s", query.record_type, e.message)
            raise
        entities = [e for e in (self._mapper.from_record(r) for r in records) if e is not None]
        dropped = len(records) - len(entities)
        if dropped:
            logger.debug("Dropped %d malformed %s records of %d", dropped, query.record_type, len(records))
        return entities

    async def fetch(self, record_id: str) -> Optional[T]:
        """Entity by identifier, or None when it does not resolve or cannot be mapped."""
        try:
            record = await self._store.fetch(self.record_type, record_id)
        except StoreTransportError as e:
            logger.error("Fetch of %s %s failed: %s", self.record_type, record_id, e.message)
            raise
        if record is None:
            return None
        return self._mapper.from_record(record)

    async def save(self, entity: T) -> T:
        """
        Upsert and return the entity rebuilt from the store's saved record, so store-assigned
        fields (record_id, modified_at) win over the caller's copy. If the saved record cannot
        be mapped back, the caller's entity is returned unchanged and may lack those fields.
        """
        try:
            saved = await self._store.save(self._mapper.to_record(entity))
        except StoreTransportError as e:
            logger.error("Save of %s failed: %s", self.record_type, e.message)
            raise
        rebuilt = self._mapper.from_record(saved)
        if rebuilt is None:
            logger.warning(
                "Saved %s record %s could not be mapped back; returning caller entity",
                self.record_type,
                saved.record_id,
            )
            return entity
        return rebuilt

    async def delete(self, entity: T) -> None:
        """Remove the entity's record. Raises RecordNotFoundError if it has no identifier or is unknown."""
        record_id = getattr(entity, "record_id", None)
        if not record_id:
            raise RecordNotFoundError(f"Cannot delete unsaved {self.record_type}")
        try:
            await self._store.delete(self.record_type, record_id)
        except StoreTransportError as e:
            logger.error("Delete of %s %s failed: %s", self.record_type, record_id, e.message)
            raise
