"""Field extraction and type coercion shared by entity mappers."""

from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Any, Callable, Optional, Tuple, Type, TypeVar

from auditdesk.application.exceptions import MalformedRecordError
from auditdesk.infrastructure.store.records import Record, RecordReference

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


def _malformed(key: str, value: Any, expected: str) -> MalformedRecordError:
    return MalformedRecordError(f"field {key!r}: expected {expected}, got {type(value).__name__}")


def as_str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise _malformed(key, value, "str")
    return value


def as_int(value: Any, key: str) -> int:
    if isinstance(value, bool):
        raise _malformed(key, value, "int")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise _malformed(key, value, "int")


def as_float(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _malformed(key, value, "float")
    return float(value)


def as_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise _malformed(key, value, "bool")


def as_datetime(value: Any, key: str) -> datetime:
    """Accept datetimes, dates or ISO-8601 strings. Naive values are taken as UTC; a date is its UTC midnight."""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as e:
            raise MalformedRecordError(f"field {key!r}: invalid ISO datetime") from e
    if isinstance(value, date) and not isinstance(value, datetime):
        value = datetime.combine(value, time.min, tzinfo=timezone.utc)
    if not isinstance(value, datetime):
        raise _malformed(key, value, "datetime")
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def to_utc(value: Optional[datetime], key: str) -> Optional[datetime]:
    """
    Normalize a caller-supplied datetime before it is written or compared. None passes through.
    Raises TypeError for values that are not dates.
    """
    if value is None:
        return None
    try:
        return as_datetime(value, key)
    except MalformedRecordError as e:
        raise TypeError(e.message) from e


def as_str_tuple(value: Any, key: str) -> Tuple[str, ...]:
    if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
        raise _malformed(key, value, "list of str")
    return tuple(value)


def as_reference_id(value: Any, key: str) -> str:
    """Identifier from a reference field. Legacy records may hold the bare identifier."""
    if isinstance(value, RecordReference):
        return value.record_id
    if isinstance(value, str) and value:
        return value
    raise _malformed(key, value, "reference")


def enum_coercer(enum_cls: Type[E]) -> Callable[[Any, str], E]:
    def coerce(value: Any, key: str) -> E:
        try:
            return enum_cls(value)
        except ValueError as e:
            raise MalformedRecordError(f"field {key!r}: unknown {enum_cls.__name__} {value!r}") from e

    return coerce


def required(record: Record, key: str, coerce: Callable[[Any, str], T]) -> T:
    """Coerced value of a required field. Raises MalformedRecordError if absent or malformed."""
    value = record.get(key)
    if value is None:
        raise MalformedRecordError(f"field {key!r} is missing")
    return coerce(value, key)


def optional(record: Record, key: str, coerce: Callable[[Any, str], T], default: Optional[T] = None) -> Optional[T]:
    """Coerced value of an optional field; default when absent or malformed."""
    value = record.get(key)
    if value is None:
        return default
    try:
        return coerce(value, key)
    except MalformedRecordError:
        return default


def without_none(fields: dict) -> dict:
    """Drop unset optional fields so they are not written to the store."""
    return {k: v for k, v in fields.items() if v is not None}
