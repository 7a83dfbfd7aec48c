"""Generic record representation exchanged with the record store."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class RecordReference:
    """Pointer from one record to another, e.g. an audit to its template."""

    record_type: str
    record_id: str


@dataclass(frozen=True)
class Record:
    """
    Loosely typed stored document: a record type, named fields and an identifier.
    record_id, created_at and modified_at are assigned by the store on save.
    """

    record_type: str
    fields: Dict[str, Any] = field(default_factory=dict)
    record_id: Optional[str] = None
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None

    def get(self, key: str, default: Any = None) -> Any:
        return self.fields.get(key, default)
