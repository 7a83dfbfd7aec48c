"""Redis-backed record store. One JSON document per record plus a set index per record type."""

import json
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from redis.exceptions import RedisError

from auditdesk.application.exceptions import RecordNotFoundError, StoreTransportError
from auditdesk.infrastructure.store.query import Query, run_query
from auditdesk.infrastructure.store.records import Record, RecordReference

RECORD_KEY_PREFIX = "auditdesk"

logger = logging.getLogger(__name__)


def _encode_value(value: Any) -> Any:
    """Tag values JSON cannot carry natively: datetimes and references."""
    if isinstance(value, datetime):
        return {"$date": value.isoformat()}
    if isinstance(value, RecordReference):
        return {"$ref": value.record_id, "$type": value.record_type}
    if isinstance(value, (list, tuple)):
        return [_encode_value(v) for v in value]
    return value


def _decode_value(value: Any) -> Any:
    if isinstance(value, dict):
        if "$date" in value:
            return datetime.fromisoformat(value["$date"].replace("Z", "+00:00"))
        if "$ref" in value:
            return RecordReference(record_type=value.get("$type", ""), record_id=value["$ref"])
        return value
    if isinstance(value, list):
        return [_decode_value(v) for v in value]
    return value


def _record_to_json(record: Record) -> str:
    payload: Dict[str, Any] = {
        "recordType": record.record_type,
        "recordId": record.record_id,
        "createdAt": _encode_value(record.created_at),
        "modifiedAt": _encode_value(record.modified_at),
        "fields": {k: _encode_value(v) for k, v in record.fields.items()},
    }
    return json.dumps(payload)


def _record_from_json(data: str) -> Record:
    """Raises ValueError/KeyError/TypeError on undecodable documents."""
    payload = json.loads(data)
    return Record(
        record_type=payload["recordType"],
        record_id=payload["recordId"],
        created_at=_decode_value(payload.get("createdAt")),
        modified_at=_decode_value(payload.get("modifiedAt")),
        fields={k: _decode_value(v) for k, v in payload.get("fields", {}).items()},
    )


class RedisRecordStore:
    """
    RecordStore over Redis. Keys: {prefix}:{record_type}:{record_id} and index {prefix}:{record_type}:ids.
    Predicates and sorting are evaluated client side over the full set for the record type.
    Redis failures surface as StoreTransportError.
    """

    def __init__(self, redis_client: object, key_prefix: str = RECORD_KEY_PREFIX) -> None:
        self._redis = redis_client
        self._prefix = key_prefix

    def _key(self, record_type: str, record_id: str) -> str:
        return f"{self._prefix}:{record_type}:{record_id}"

    def _index_key(self, record_type: str) -> str:
        return f"{self._prefix}:{record_type}:ids"

    async def query(self, query: Query) -> List[Record]:
        try:
            ids = sorted(await self._redis.smembers(self._index_key(query.record_type)))  # type: ignore[union-attr]
            raw = await self._redis.mget([self._key(query.record_type, i) for i in ids])  # type: ignore[union-attr]
        except (RedisError, OSError) as e:
            raise StoreTransportError(f"Record store query failed for {query.record_type}: {e}") from e
        records: List[Record] = []
        for record_id, data in zip(ids, raw):
            if data is None:
                continue
            try:
                records.append(_record_from_json(data))
            except (ValueError, KeyError, TypeError, AttributeError):
                logger.debug("Skipping undecodable %s document %s", query.record_type, record_id)
        return run_query(records, query)

    async def fetch(self, record_type: str, record_id: str) -> Optional[Record]:
        try:
            raw = await self._redis.get(self._key(record_type, record_id))  # type: ignore[union-attr]
        except (RedisError, OSError) as e:
            raise StoreTransportError(f"Record store fetch failed for {record_type} {record_id}: {e}") from e
        if raw is None:
            return None
        try:
            return _record_from_json(raw)
        except (ValueError, KeyError, TypeError, AttributeError):
            logger.debug("Undecodable %s document %s treated as missing", record_type, record_id)
            return None

    async def save(self, record: Record) -> Record:
        record_id = record.record_id or uuid.uuid4().hex
        key = self._key(record.record_type, record_id)
        now = datetime.now(timezone.utc)
        try:
            existing_raw = await self._redis.get(key)  # type: ignore[union-attr]
            created_at = now
            if existing_raw is not None:
                try:
                    created_at = _record_from_json(existing_raw).created_at or now
                except (ValueError, KeyError, TypeError, AttributeError):
                    logger.debug("Overwriting undecodable %s document %s", record.record_type, record_id)
            stored = Record(
                record_type=record.record_type,
                fields=dict(record.fields),
                record_id=record_id,
                created_at=created_at,
                modified_at=now,
            )
            await self._redis.set_document(  # type: ignore[union-attr]
                key, _record_to_json(stored), self._index_key(record.record_type), record_id
            )
        except (RedisError, OSError) as e:
            raise StoreTransportError(f"Record store save failed for {record.record_type}: {e}") from e
        return stored

    async def delete(self, record_type: str, record_id: str) -> None:
        try:
            deleted = await self._redis.delete_document(  # type: ignore[union-attr]
                self._key(record_type, record_id), self._index_key(record_type), record_id
            )
        except (RedisError, OSError) as e:
            raise StoreTransportError(f"Record store delete failed for {record_type} {record_id}: {e}") from e
        if not deleted:
            raise RecordNotFoundError(f"{record_type} {record_id} not found")

    async def close(self) -> None:
        try:
            await self._redis.close()  # type: ignore[union-attr]
        except (RedisError, OSError) as e:
            raise StoreTransportError(f"Record store close failed: {e}") from e
