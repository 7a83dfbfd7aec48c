"""Record store protocol. Repositories depend on this; backends implement it."""

from typing import List, Optional, Protocol

from auditdesk.infrastructure.store.query import Query
from auditdesk.infrastructure.store.records import Record


class RecordStore(Protocol):
    """
    Remote document store addressed by record type.
    Every method is one round trip and raises StoreTransportError when the store is unreachable.
    """

    async def query(self, query: Query) -> List[Record]:
        """Records matching query.predicate, ordered by query.sort. Complete result set, no paging."""
        ...

    async def fetch(self, record_type: str, record_id: str) -> Optional[Record]:
        """Return record by identifier, or None if not found."""
        ...

    async def save(self, record: Record) -> Record:
        """Upsert. Assigns record_id when absent; returns the stored record with server fields."""
        ...

    async def delete(self, record_type: str, record_id: str) -> None:
        """Remove record. Raises RecordNotFoundError when the identifier does not resolve."""
        ...

    async def close(self) -> None:
        """Release connections held by the store."""
        ...
