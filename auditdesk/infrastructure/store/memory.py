"""In-process record store for tests and local development. Same contract as the remote store."""

import copy
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from auditdesk.application.exceptions import RecordNotFoundError
from auditdesk.infrastructure.store.query import Query, run_query
from auditdesk.infrastructure.store.records import Record


class InMemoryRecordStore:
    """
    Dict-backed RecordStore. Query results follow insertion order before sorting,
    so ties in a sort key keep the order records were first saved.
    """

    def __init__(self) -> None:
        self._records: Dict[Tuple[str, str], Record] = {}

    def _key(self, record_type: str, record_id: str) -> Tuple[str, str]:
        return (record_type, record_id)

    async def query(self, query: Query) -> List[Record]:
        matched = run_query(list(self._records.values()), query)
        return [copy.deepcopy(r) for r in matched]

    async def fetch(self, record_type: str, record_id: str) -> Optional[Record]:
        record = self._records.get(self._key(record_type, record_id))
        return copy.deepcopy(record) if record is not None else None

    async def save(self, record: Record) -> Record:
        record_id = record.record_id or uuid.uuid4().hex
        now = datetime.now(timezone.utc)
        existing = self._records.get(self._key(record.record_type, record_id))
        stored = replace(
            record,
            fields=copy.deepcopy(record.fields),
            record_id=record_id,
            created_at=existing.created_at if existing is not None else now,
            modified_at=now,
        )
        self._records[self._key(record.record_type, record_id)] = stored
        return copy.deepcopy(stored)

    async def delete(self, record_type: str, record_id: str) -> None:
        if self._records.pop(self._key(record_type, record_id), None) is None:
            raise RecordNotFoundError(f"{record_type} {record_id} not found")

    async def close(self) -> None:
        """Nothing to release."""

    def put_raw(self, record: Record) -> Record:
        """Insert a record as-is, bypassing mappers. Lets tests seed malformed legacy records."""
        record_id = record.record_id or uuid.uuid4().hex
        stored = replace(record, record_id=record_id)
        self._records[self._key(record.record_type, record_id)] = stored
        return stored

    def __len__(self) -> int:
        return len(self._records)
