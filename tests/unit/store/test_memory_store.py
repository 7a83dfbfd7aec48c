"""InMemoryRecordStore: identifier assignment, upsert, delete semantics."""

import pytest

from auditdesk.application.exceptions import RecordNotFoundError
from auditdesk.infrastructure.store.memory import InMemoryRecordStore
from auditdesk.infrastructure.store.query import Equals, Query
from auditdesk.infrastructure.store.records import Record


async def test_save_assigns_identifier_and_timestamps():
    store = InMemoryRecordStore()
    saved = await store.save(Record(record_type="Thing", fields={"a": 1}))
    assert saved.record_id
    assert saved.created_at is not None
    assert saved.modified_at is not None
    assert len(store) == 1


async def test_upsert_keeps_created_at_and_replaces_fields():
    store = InMemoryRecordStore()
    first = await store.save(Record(record_type="Thing", fields={"a": 1, "b": 2}))
    second = await store.save(Record(record_type="Thing", fields={"a": 5}, record_id=first.record_id))
    assert second.record_id == first.record_id
    assert second.created_at == first.created_at
    fetched = await store.fetch("Thing", first.record_id)
    assert fetched.fields == {"a": 5}
    assert len(store) == 1


async def test_returned_records_are_copies():
    store = InMemoryRecordStore()
    saved = await store.save(Record(record_type="Thing", fields={"tags": ["x"]}))
    saved.fields["tags"].append("y")
    fetched = await store.fetch("Thing", saved.record_id)
    assert fetched.fields["tags"] == ["x"]


async def test_fetch_unknown_returns_none():
    assert await InMemoryRecordStore().fetch("Thing", "nope") is None


async def test_delete_unknown_raises():
    with pytest.raises(RecordNotFoundError):
        await InMemoryRecordStore().delete("Thing", "nope")


async def test_query_scoped_to_record_type():
    store = InMemoryRecordStore()
    await store.save(Record(record_type="Thing", fields={"a": 1}))
    await store.save(Record(record_type="Other", fields={"a": 1}))
    out = await store.query(Query("Thing", Equals("a", 1)))
    assert len(out) == 1
    assert out[0].record_type == "Thing"


async def test_put_raw_bypasses_timestamps():
    store = InMemoryRecordStore()
    raw = store.put_raw(Record(record_type="Thing", fields={"junk": True}))
    fetched = await store.fetch("Thing", raw.record_id)
    assert fetched.modified_at is None
