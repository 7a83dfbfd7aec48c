"""Filter predicates, sort descriptors and queries understood by record stores."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional, Protocol, Sequence, Tuple

from auditdesk.infrastructure.store.records import Record

_MISSING = object()


def _comparable(value: Any) -> Any:
    """Naive datetimes are taken as UTC so they order against aware ones."""
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Predicate(Protocol):
    """Condition on a record's fields."""

    def matches(self, fields: Mapping[str, Any]) -> bool:
        ...


@dataclass(frozen=True)
class Equals:
    field: str
    value: Any

    def matches(self, fields: Mapping[str, Any]) -> bool:
        current = fields.get(self.field, _MISSING)
        return current is not _MISSING and current == self.value


@dataclass(frozen=True)
class Contains:
    """List-valued field contains value."""

    field: str
    value: Any

    def matches(self, fields: Mapping[str, Any]) -> bool:
        current = fields.get(self.field)
        if not isinstance(current, (list, tuple)):
            return False
        return self.value in current


@dataclass(frozen=True)
class In:
    """Field value is one of values."""

    field: str
    values: Tuple[Any, ...]

    def matches(self, fields: Mapping[str, Any]) -> bool:
        current = fields.get(self.field, _MISSING)
        return current is not _MISSING and current in self.values


@dataclass(frozen=True)
class Between:
    """Inclusive range: lower <= field <= upper."""

    field: str
    lower: Any
    upper: Any

    def matches(self, fields: Mapping[str, Any]) -> bool:
        current = fields.get(self.field)
        if current is None:
            return False
        try:
            return _comparable(self.lower) <= _comparable(current) <= _comparable(self.upper)
        except TypeError:
            # e.g. a string in a date field
            return False


@dataclass(frozen=True)
class And:
    predicates: Tuple[Predicate, ...]

    def matches(self, fields: Mapping[str, Any]) -> bool:
        return all(p.matches(fields) for p in self.predicates)


@dataclass(frozen=True)
class SortDescriptor:
    field: str
    ascending: bool = True


@dataclass(frozen=True)
class Query:
    """Record type plus optional filter and sort order. predicate=None matches everything."""

    record_type: str
    predicate: Optional[Predicate] = None
    sort: Tuple[SortDescriptor, ...] = ()

    def matches(self, record: Record) -> bool:
        if record.record_type != self.record_type:
            return False
        return self.predicate is None or self.predicate.matches(record.fields)


def apply_sort(records: Sequence[Record], sort: Sequence[SortDescriptor]) -> List[Record]:
    """
    Stable multi-key sort. Records missing a sort field go after those that have it.
    Records comparing equal keep their incoming order.
    """
    ordered = list(records)
    for descriptor in reversed(sort):
        present = [r for r in ordered if r.get(descriptor.field) is not None]
        missing = [r for r in ordered if r.get(descriptor.field) is None]
        reverse = not descriptor.ascending
        try:
            present = sorted(present, key=lambda r: _comparable(r.get(descriptor.field)), reverse=reverse)
        except TypeError:
            # Mixed value types from legacy records: order by type name, then text
            present = sorted(
                present,
                key=lambda r: (type(r.get(descriptor.field)).__name__, str(r.get(descriptor.field))),
                reverse=reverse,
            )
        ordered = present + missing
    return ordered


def run_query(records: Sequence[Record], query: Query) -> List[Record]:
    """Filter and sort in process. Used by backends without server-side predicates."""
    return apply_sort([r for r in records if query.matches(r)], query.sort)
