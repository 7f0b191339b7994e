from __future__ import annotations

from datetime import date

import pytest

from tests.fakes import FakeUnitOfWork, InMemoryStore, make_policy


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 6, 15)


@pytest.fixture
def policy():
    return make_policy()


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def uow(store) -> FakeUnitOfWork:
    return FakeUnitOfWork(store)
