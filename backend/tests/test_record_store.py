"""Tests for the record store."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from app.exceptions import MalformedRecord, StoreUnavailable
from app.models import Assignment, Profile
from app.repositories.record_store import RecordStore
from app.schemas.records import AssignmentRecord, ProfileRecord


def result_of(rows):
    """Build a mock Result whose scalars().all() returns ``rows``."""
    result = MagicMock()
    result.scalars.return_value.all.return_value = rows
    return result


@pytest.fixture
def mock_db():
    """Create a mock database session."""
    db = AsyncMock()
    db.execute = AsyncMock(return_value=result_of([]))
    return db


@pytest.fixture
def store(mock_db):
    return RecordStore(mock_db, timeout=1.0)


def executed_sql(mock_db) -> str:
    """SQL text of the last executed statement."""
    return str(mock_db.execute.call_args.args[0])


class TestFetchOne:
    """Tests for fetch_one()."""

    @pytest.mark.asyncio
    async def test_returns_validated_record(self, store, mock_db):
        """An ORM row should come back as a ProfileRecord."""
        mock_db.execute.return_value = result_of(
            [Profile(id="D1", is_dentist=True, first_name="Dana")]
        )

        record = await store.fetch_one("profile", id="D1")

        assert isinstance(record, ProfileRecord)
        assert record.id == "D1"
        assert record.is_dentist is True
        assert record.first_name == "Dana"
        assert record.birthday is None

    @pytest.mark.asyncio
    async def test_not_found_returns_none(self, store):
        """No row should give None, not an error."""
        assert await store.fetch_one("profile", id="missing") is None

    @pytest.mark.asyncio
    async def test_filters_by_column(self, store, mock_db):
        """The filter should appear in the WHERE clause."""
        await store.fetch_one("profile", id="D1")
        sql = executed_sql(mock_db)
        assert "FROM profile" in sql
        assert "profile.id =" in sql


class TestFetchMany:
    """Tests for fetch_many()."""

    @pytest.mark.asyncio
    async def test_returns_all_rows_in_order(self, store, mock_db):
        """Rows should keep the database's order, duplicates included."""
        mock_db.execute.return_value = result_of(
            [
                Assignment(dentist_id="D1", patient_id="P1"),
                Assignment(dentist_id="D1", patient_id="P2"),
                Assignment(dentist_id="D1", patient_id="P1"),
            ]
        )

        records = await store.fetch_many("assignment", dentist_id="D1")

        assert all(isinstance(r, AssignmentRecord) for r in records)
        assert [r.patient_id for r in records] == ["P1", "P2", "P1"]
        assert "assignment.dentist_id =" in executed_sql(mock_db)

    @pytest.mark.asyncio
    async def test_empty(self, store):
        assert await store.fetch_many("assignment", dentist_id="D1") == []


class TestFetchIn:
    """Tests for fetch_in()."""

    @pytest.mark.asyncio
    async def test_single_membership_query(self, store, mock_db):
        """All ids should be fetched in one IN query."""
        mock_db.execute.return_value = result_of(
            [Profile(id="P1", is_dentist=False), Profile(id="P2", is_dentist=False)]
        )

        records = await store.fetch_in("profile", "id", ["P1", "P2"])

        assert [r.id for r in records] == ["P1", "P2"]
        assert mock_db.execute.await_count == 1
        assert "profile.id IN" in executed_sql(mock_db)

    @pytest.mark.asyncio
    async def test_empty_values_skip_query(self, store, mock_db):
        """No ids should mean no database round-trip."""
        assert await store.fetch_in("profile", "id", []) == []
        mock_db.execute.assert_not_awaited()


class TestValidation:
    """Tests for relation and row validation."""

    @pytest.mark.asyncio
    async def test_unknown_table(self, store):
        with pytest.raises(ValueError, match="Unknown table"):
            await store.fetch_one("billing", id="x")

    @pytest.mark.asyncio
    async def test_unknown_column(self, store):
        with pytest.raises(ValueError, match="Unknown column"):
            await store.fetch_many("assignment", clinic_id="c1")

    @pytest.mark.asyncio
    async def test_malformed_row(self, store, mock_db):
        """A row that does not fit the schema should raise MalformedRecord."""
        mock_db.execute.return_value = result_of([Profile(id="P1", is_dentist=None)])

        with pytest.raises(MalformedRecord) as exc_info:
            await store.fetch_one("profile", id="P1")
        assert exc_info.value.table == "profile"


class TestFailures:
    """Tests for transport failures and timeouts."""

    @pytest.mark.asyncio
    async def test_database_error(self, store, mock_db):
        """SQLAlchemy errors should become StoreUnavailable."""
        mock_db.execute.side_effect = OperationalError("SELECT 1", {}, Exception("refused"))

        with pytest.raises(StoreUnavailable) as exc_info:
            await store.fetch_many("assignment", dentist_id="D1")
        assert exc_info.value.step == "assignment"

    @pytest.mark.asyncio
    async def test_timeout(self, mock_db):
        """A query slower than the timeout should become StoreUnavailable."""

        async def slow_execute(*args, **kwargs):
            await asyncio.sleep(1)

        mock_db.execute = slow_execute
        store = RecordStore(mock_db, timeout=0.01)

        with pytest.raises(StoreUnavailable) as exc_info:
            await store.fetch_one("profile", id="D1")
        assert "timed out" in exc_info.value.reason

    def test_default_timeout_from_settings(self, mock_db, monkeypatch):
        """Without an explicit timeout the configured one should apply."""
        from app.config import settings

        monkeypatch.setattr(settings, "store_timeout_seconds", 2.5)
        assert RecordStore(mock_db).timeout == 2.5
