"""Shared fixtures: in-memory record store and repositories bound to it."""

import pytest

from auditdesk.infrastructure.factory import RepositoryFactory
from auditdesk.infrastructure.store.memory import InMemoryRecordStore


@pytest.fixture
def store():
    return InMemoryRecordStore()


@pytest.fixture
def factory(store):
    return RepositoryFactory(store)


@pytest.fixture
def template_repository(factory):
    return factory.audit_templates()


@pytest.fixture
def audit_repository(factory):
    return factory.audits()


@pytest.fixture
def report_repository(factory):
    return factory.store_reports()
