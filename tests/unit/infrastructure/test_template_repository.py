"""AuditTemplateRecordRepository over the in-memory store."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from auditdesk.application.exceptions import RecordNotFoundError, StoreTransportError
from auditdesk.domain.models.template import AuditCategory, AuditTemplate, TemplateStatus
from auditdesk.infrastructure.repositories import AuditTemplateRecordRepository
from auditdesk.infrastructure.store.records import Record


def _template(title: str = "Opening checks", **overrides) -> AuditTemplate:
    values = dict(
        title=title,
        category=AuditCategory.OPERATIONS,
        status=TemplateStatus.PUBLISHED,
        is_active=True,
        created_at=datetime(2026, 3, 1, tzinfo=timezone.utc),
        applicable_stores=("S42",),
    )
    values.update(overrides)
    return AuditTemplate(**values)


# ---------- 1. Save and fetch ----------


async def test_save_assigns_identifier(template_repository):
    saved = await template_repository.save(AuditTemplate.create("Cash office", AuditCategory.SECURITY))
    assert saved.record_id
    assert saved.modified_at is not None
    assert saved.status == TemplateStatus.DRAFT


async def test_fetch_by_identifier(template_repository):
    saved = await template_repository.save(_template())
    fetched = await template_repository.fetch(saved.record_id)
    assert fetched == saved


async def test_fetch_unknown_identifier_returns_none(template_repository):
    assert await template_repository.fetch("missing") is None


async def test_resave_updates_in_place(template_repository, store):
    saved = await template_repository.save(_template())
    updated = await template_repository.save(saved.increment_usage())
    assert updated.record_id == saved.record_id
    assert updated.usage_count == 1
    assert len(store) == 1


# ---------- 2. Access patterns ----------


async def test_fetch_all_newest_first(template_repository):
    await template_repository.save(_template("Old", created_at=datetime(2026, 1, 1, tzinfo=timezone.utc)))
    await template_repository.save(_template("New", created_at=datetime(2026, 2, 1, tzinfo=timezone.utc)))
    assert [t.title for t in await template_repository.fetch_all()] == ["New", "Old"]


async def test_fetch_active_excludes_drafts_and_inactive(template_repository):
    await template_repository.save(_template("Live"))
    await template_repository.save(_template("Draft", status=TemplateStatus.DRAFT))
    await template_repository.save(_template("Retired", is_active=False))
    await template_repository.save(_template("Archived", status=TemplateStatus.ARCHIVED))
    assert [t.title for t in await template_repository.fetch_active()] == ["Live"]


async def test_fetch_active_sorted_by_title(template_repository):
    for title in ("Zeta", "Alpha", "Mid"):
        await template_repository.save(_template(title))
    assert [t.title for t in await template_repository.fetch_active()] == ["Alpha", "Mid", "Zeta"]


async def test_fetch_by_category(template_repository):
    await template_repository.save(_template("Ops"))
    await template_repository.save(_template("Safe", category=AuditCategory.SECURITY))
    await template_repository.save(_template("Old safe", category=AuditCategory.SECURITY, is_active=False))
    result = await template_repository.fetch_by_category(AuditCategory.SECURITY)
    assert [t.title for t in result] == ["Safe"]


async def test_fetch_by_store_code_never_returns_drafts(template_repository):
    await template_repository.save(_template("Draft active", status=TemplateStatus.DRAFT, is_active=True))
    await template_repository.save(_template("Draft inactive", status=TemplateStatus.DRAFT, is_active=False))
    await template_repository.save(_template("Published"))
    result = await template_repository.fetch_by_store_code("S42")
    assert [t.title for t in result] == ["Published"]


async def test_fetch_by_store_code_orders_by_priority(template_repository):
    await template_repository.save(_template("Low", priority=1))
    await template_repository.save(_template("High", priority=9, applicable_stores=("S7", "S42")))
    await template_repository.save(_template("Mid", priority=5))
    await template_repository.save(_template("Elsewhere", priority=10, applicable_stores=("S7",)))
    result = await template_repository.fetch_by_store_code("S42")
    priorities = [t.priority for t in result]
    assert priorities == sorted(priorities, reverse=True)
    assert {t.title for t in result} == {"Low", "High", "Mid"}


async def test_fetch_by_store_code_equal_priority_tie_order_is_undefined(template_repository):
    """Equal priorities come back in whatever order the store returns; only membership is asserted."""
    await template_repository.save(_template("First", priority=5))
    await template_repository.save(_template("Second", priority=5))
    await template_repository.save(_template("Top", priority=8))
    result = await template_repository.fetch_by_store_code("S42")
    assert result[0].title == "Top"
    assert {t.title for t in result[1:]} == {"First", "Second"}
    assert [t.priority for t in result] == [8, 5, 5]


async def test_fetch_all_orders_naive_and_aware_created_at(template_repository):
    await template_repository.save(_template("Aware", created_at=datetime(2026, 3, 1, tzinfo=timezone.utc)))
    await template_repository.save(_template("Naive", created_at=datetime(2026, 3, 2)))
    result = await template_repository.fetch_all()
    assert [t.title for t in result] == ["Naive", "Aware"]
    assert all(t.created_at.tzinfo is not None for t in result)


async def test_legacy_naive_created_at_does_not_break_bulk_fetch(template_repository, store):
    await template_repository.save(_template("Aware", created_at=datetime(2026, 3, 1, tzinfo=timezone.utc)))
    store.put_raw(
        Record(
            record_type="AuditTemplate",
            fields={
                "title": "Legacy",
                "category": "operations",
                "status": "published",
                "isActive": True,
                "createdAt": datetime(2026, 2, 1),
            },
        )
    )
    result = await template_repository.fetch_all()
    assert [t.title for t in result] == ["Aware", "Legacy"]


# ---------- 3. Lifecycle helpers ----------


async def test_publish_persists(template_repository):
    draft = await template_repository.save(AuditTemplate.create("Cash office", AuditCategory.SECURITY))
    published = await template_repository.publish(draft)
    assert published.status == TemplateStatus.PUBLISHED
    assert published.published_at is not None
    assert (await template_repository.fetch(draft.record_id)).status == TemplateStatus.PUBLISHED
    assert draft.status == TemplateStatus.DRAFT


async def test_archive_hides_from_active(template_repository):
    saved = await template_repository.save(_template())
    await template_repository.archive(saved)
    assert await template_repository.fetch_active() == []


# ---------- 4. Delete ----------


async def test_delete_then_fetch_returns_none(template_repository):
    saved = await template_repository.save(_template())
    await template_repository.delete(saved)
    assert await template_repository.fetch(saved.record_id) is None


async def test_delete_unsaved_raises(template_repository):
    with pytest.raises(RecordNotFoundError):
        await template_repository.delete(_template())


async def test_delete_twice_raises(template_repository):
    saved = await template_repository.save(_template())
    await template_repository.delete(saved)
    with pytest.raises(RecordNotFoundError):
        await template_repository.delete(saved)


# ---------- 5. Malformed records and failures ----------


async def test_malformed_records_are_dropped(template_repository, store):
    await template_repository.save(_template("Good"))
    store.put_raw(Record(record_type="AuditTemplate", fields={"title": "No status", "isActive": True}))
    store.put_raw(
        Record(
            record_type="AuditTemplate",
            fields={
                "title": "Bad category",
                "category": "nonsense",
                "status": "published",
                "isActive": True,
                "createdAt": datetime(2026, 3, 1, tzinfo=timezone.utc),
            },
        )
    )
    assert [t.title for t in await template_repository.fetch_all()] == ["Good"]


async def test_malformed_record_by_identifier_returns_none(template_repository, store):
    raw = store.put_raw(Record(record_type="AuditTemplate", fields={"title": 3}))
    assert await template_repository.fetch(raw.record_id) is None


async def test_transport_error_propagates():
    store = AsyncMock()
    store.query.side_effect = StoreTransportError("connection refused")
    store.save.side_effect = StoreTransportError("connection refused")
    repo = AuditTemplateRecordRepository(store)
    with pytest.raises(StoreTransportError):
        await repo.fetch_all()
    with pytest.raises(StoreTransportError):
        await repo.save(_template())


async def test_save_returns_caller_entity_when_saved_record_unmappable(caplog):
    store = AsyncMock()
    store.save.return_value = Record(record_type="AuditTemplate", fields={}, record_id="tpl-x")
    repo = AuditTemplateRecordRepository(store)
    original = _template()
    with caplog.at_level("WARNING"):
        result = await repo.save(original)
    assert result is original
    assert "could not be mapped back" in caplog.text
