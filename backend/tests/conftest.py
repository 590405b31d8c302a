"""Pytest configuration and shared fixtures.

This module provides centralized test fixtures for:
- An in-memory record store that logs every query it receives
- Profile and assignment builders
- HTTP client for API testing with auth and store dependencies stubbed
"""

from collections.abc import Iterable
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.auth import require_caller
from app.exceptions import StoreUnavailable
from app.main import app
from app.routes.dashboard import get_record_store
from app.schemas.records import AssignmentRecord, Caller, ProfileRecord

DENTIST_ID = "D1"


class FakeRecordStore:
    """In-memory stand-in for RecordStore.

    Rows are returned in insertion order. Every call is appended to
    ``calls`` as ``(method, table)`` so tests can assert which queries ran.
    Tables listed in ``failing`` raise StoreUnavailable.
    """

    def __init__(
        self,
        profiles: Iterable[ProfileRecord] = (),
        assignments: Iterable[tuple[str, str]] = (),
        failing: Iterable[str] = (),
    ):
        self.profiles = list(profiles)
        self.assignments = [
            AssignmentRecord(dentist_id=d, patient_id=p) for d, p in assignments
        ]
        self.failing = set(failing)
        self.calls: list[tuple[str, str]] = []

    def _rows(self, table: str) -> list[Any]:
        if table in self.failing:
            raise StoreUnavailable(table, "connection refused")
        return self.profiles if table == "profile" else self.assignments

    async def fetch_one(self, table: str, **filters: Any):
        self.calls.append(("fetch_one", table))
        matches = await self._match(table, filters)
        return matches[0] if matches else None

    async def fetch_many(self, table: str, **filters: Any):
        self.calls.append(("fetch_many", table))
        return await self._match(table, filters)

    async def fetch_in(self, table: str, column: str, values: Iterable[Any]):
        self.calls.append(("fetch_in", table))
        wanted = set(values)
        return [row for row in self._rows(table) if getattr(row, column) in wanted]

    async def _match(self, table: str, filters: dict[str, Any]) -> list[Any]:
        return [
            row
            for row in self._rows(table)
            if all(getattr(row, k) == v for k, v in filters.items())
        ]


def make_profile(id: str, **fields: Any) -> ProfileRecord:
    """Build a ProfileRecord with only the given fields set."""
    return ProfileRecord(id=id, **fields)


@pytest.fixture
def dentist() -> ProfileRecord:
    return make_profile(DENTIST_ID, is_dentist=True, first_name="Dana", last_name="Molar")


@pytest.fixture
def patients() -> list[ProfileRecord]:
    return [
        make_profile("P1", first_name="Noa", last_name="Levi", gum_pain=True),
        make_profile("P2", first_name="Omer", last_name="Katz"),
    ]


@pytest.fixture
def store(dentist, patients) -> FakeRecordStore:
    """D1 is assigned P1 twice and P2 once."""
    return FakeRecordStore(
        profiles=[dentist, *patients],
        assignments=[(DENTIST_ID, "P1"), (DENTIST_ID, "P2"), (DENTIST_ID, "P1")],
    )


@pytest.fixture
def caller() -> Caller:
    return Caller(id=DENTIST_ID)


# =============================================================================
# HTTP Client Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def client(store, caller):
    """Async test client for the FastAPI app.

    Overrides the identity and record store dependencies so API tests run
    against the in-memory store as caller D1.
    """

    async def override_require_caller() -> Caller:
        return caller

    async def override_get_record_store() -> FakeRecordStore:
        return store

    app.dependency_overrides[require_caller] = override_require_caller
    app.dependency_overrides[get_record_store] = override_get_record_store

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    # Clean up overrides
    app.dependency_overrides.pop(require_caller, None)
    app.dependency_overrides.pop(get_record_store, None)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Authentication headers for API requests."""
    return {"Authorization": "Bearer test-token"}
