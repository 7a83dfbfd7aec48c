"""Record model, query types and record store backends."""

from auditdesk.infrastructure.store.interface import RecordStore
from auditdesk.infrastructure.store.memory import InMemoryRecordStore
from auditdesk.infrastructure.store.query import (
    And,
    Between,
    Contains,
    Equals,
    In,
    Predicate,
    Query,
    SortDescriptor,
)
from auditdesk.infrastructure.store.records import Record, RecordReference
from auditdesk.infrastructure.store.redis_store import RedisRecordStore

__all__ = [
    "And",
    "Between",
    "Contains",
    "Equals",
    "In",
    "InMemoryRecordStore",
    "Predicate",
    "Query",
    "Record",
    "RecordReference",
    "RecordStore",
    "RedisRecordStore",
    "SortDescriptor",
]
