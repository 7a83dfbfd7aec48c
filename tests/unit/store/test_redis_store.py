"""RedisRecordStore against a mocked client: key layout, JSON codec, error translation."""

import json
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from auditdesk.application.exceptions import RecordNotFoundError, StoreTransportError
from auditdesk.infrastructure.store.query import Equals, Query, SortDescriptor
from auditdesk.infrastructure.store.records import Record, RecordReference
from auditdesk.infrastructure.store.redis_client import RedisClient
from auditdesk.infrastructure.store.redis_store import (
    RedisRecordStore,
    _record_from_json,
    _record_to_json,
)

WHEN = datetime(2020, 3, 1, 12, 0, tzinfo=timezone.utc)


def _doc(record_id: str, **fields) -> str:
    return _record_to_json(Record(record_type="Audit", fields=fields, record_id=record_id, created_at=WHEN))


@pytest.fixture
def redis():
    r = AsyncMock()
    r.get = AsyncMock(return_value=None)
    r.mget = AsyncMock(return_value=[])
    r.smembers = AsyncMock(return_value=set())
    r.set_document = AsyncMock(return_value=None)
    r.delete_document = AsyncMock(return_value=True)
    return r


def test_codec_round_trip_tags_dates_and_references():
    record = Record(
        record_type="Audit",
        fields={"startedAt": WHEN, "templateRef": RecordReference("AuditTemplate", "tpl-1"), "tags": ["a"]},
        record_id="aud-1",
        created_at=WHEN,
        modified_at=WHEN,
    )
    data = _record_to_json(record)
    assert json.loads(data)["fields"]["startedAt"] == {"$date": WHEN.isoformat()}
    assert _record_from_json(data) == record


async def test_save_new_record_assigns_id_and_indexes(redis):
    store = RedisRecordStore(redis, key_prefix="test")
    saved = await store.save(Record(record_type="Audit", fields={"storeCode": "S42"}))
    assert saved.record_id
    assert saved.created_at is not None
    key, payload, index_key, member = redis.set_document.call_args[0]
    assert key == f"test:Audit:{saved.record_id}"
    assert index_key == "test:Audit:ids"
    assert member == saved.record_id
    assert json.loads(payload)["fields"] == {"storeCode": "S42"}


async def test_save_existing_keeps_created_at(redis):
    redis.get.return_value = _doc("aud-1", storeCode="S42")
    store = RedisRecordStore(redis)
    saved = await store.save(Record(record_type="Audit", fields={"storeCode": "S1"}, record_id="aud-1"))
    assert saved.created_at == WHEN
    assert saved.modified_at > WHEN


async def test_query_filters_sorts_and_skips_bad_documents(redis):
    redis.smembers.return_value = {"a", "b", "c", "d"}
    redis.mget.return_value = [
        _doc("a", storeCode="S42", startedAt=datetime(2026, 3, 1, tzinfo=timezone.utc)),
        "{not json",
        _doc("c", storeCode="S42", startedAt=datetime(2026, 3, 3, tzinfo=timezone.utc)),
        None,
    ]
    store = RedisRecordStore(redis)
    out = await store.query(
        Query("Audit", Equals("storeCode", "S42"), (SortDescriptor("startedAt", ascending=False),))
    )
    assert [r.record_id for r in out] == ["c", "a"]
    redis.mget.assert_awaited_once_with(
        ["auditdesk:Audit:a", "auditdesk:Audit:b", "auditdesk:Audit:c", "auditdesk:Audit:d"]
    )


async def test_fetch_miss_returns_none(redis):
    store = RedisRecordStore(redis)
    assert await store.fetch("Audit", "nope") is None
    redis.get.assert_awaited_once_with("auditdesk:Audit:nope")


async def test_delete_missing_raises_not_found(redis):
    redis.delete_document.return_value = False
    with pytest.raises(RecordNotFoundError):
        await RedisRecordStore(redis).delete("Audit", "nope")


@pytest.mark.parametrize("error", [RedisConnectionError("down"), ConnectionError("refused"), TimeoutError()])
async def test_redis_failures_become_transport_errors(redis, error):
    redis.get.side_effect = error
    redis.smembers.side_effect = error
    redis.delete_document.side_effect = error
    store = RedisRecordStore(redis)
    with pytest.raises(StoreTransportError):
        await store.fetch("Audit", "a")
    with pytest.raises(StoreTransportError):
        await store.query(Query("Audit"))
    with pytest.raises(StoreTransportError):
        await store.save(Record(record_type="Audit"))
    with pytest.raises(StoreTransportError):
        await store.delete("Audit", "a")


async def test_close_closes_client(redis):
    await RedisRecordStore(redis).close()
    redis.close.assert_awaited_once()


# ---------- RedisClient pipelines ----------


def _client_with_pipeline(results):
    pipe = MagicMock()
    pipe.execute = AsyncMock(return_value=results)
    client = RedisClient("redis://localhost:6379/0", timeout=1.0)
    client.client = MagicMock()
    client.client.pipeline.return_value.__aenter__.return_value = pipe
    return client, pipe


async def test_set_document_writes_value_and_index_together():
    client, pipe = _client_with_pipeline([True, 1])
    await client.set_document("p:Audit:a", "{}", "p:Audit:ids", "a")
    client.client.pipeline.assert_called_once_with(transaction=True)
    pipe.set.assert_called_once_with("p:Audit:a", "{}")
    pipe.sadd.assert_called_once_with("p:Audit:ids", "a")


@pytest.mark.parametrize("results,expected", [([1, 1], True), ([0, 0], False)])
async def test_delete_document_reports_existence(results, expected):
    client, pipe = _client_with_pipeline(results)
    assert await client.delete_document("p:Audit:a", "p:Audit:ids", "a") is expected
    pipe.srem.assert_called_once_with("p:Audit:ids", "a")


async def test_mget_without_keys_skips_round_trip():
    client = RedisClient("redis://localhost:6379/0")
    client.client = MagicMock()
    assert await client.mget([]) == []
    client.client.mget.assert_not_called()


async def test_client_close_releases_connection_pool():
    client = RedisClient("redis://localhost:6379/0")
    client.client = MagicMock()
    client.client.aclose = AsyncMock()
    await client.close()
    client.client.aclose.assert_awaited_once()
