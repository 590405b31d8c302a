"""Record store.

Generic read-only query surface over the ``profile`` and ``assignment``
relations. Each query is bounded by a timeout and every returned row is
validated into its pydantic record, so callers receive typed data or a
typed error:

- not found: ``None`` / ``[]``
- transport, query or timeout failure: ``StoreUnavailable``
- row that does not fit its schema: ``MalformedRecord``
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ValidationError
from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import Base
from app.exceptions import MalformedRecord, StoreUnavailable
from app.models import Assignment, Profile
from app.schemas.records import AssignmentRecord, ProfileRecord

logger = logging.getLogger(__name__)

# relation name -> (ORM model, validated record type)
RELATIONS: dict[str, tuple[type[Base], type[BaseModel]]] = {
    "profile": (Profile, ProfileRecord),
    "assignment": (Assignment, AssignmentRecord),
}


class RecordStore:
    """Read-only access to the dashboard relations.

    Rows come back in the database's natural order; no ORDER BY is applied.
    """

    def __init__(self, db: AsyncSession, timeout: float | None = None):
        """Initialize store with database session.

        Args:
            db: Async SQLAlchemy session.
            timeout: Per-query timeout in seconds. Defaults to
                ``settings.store_timeout_seconds``.
        """
        self.db = db
        self.timeout = settings.store_timeout_seconds if timeout is None else timeout

    async def fetch_one(self, table: str, **filters: Any) -> BaseModel | None:
        """Fetch a single row by exact match, typically on the primary key.

        Returns:
            The validated record, or None if no row matches.
        """
        model, _ = self._relation(table)
        query = self._filtered(table, select(model), filters).limit(1)
        rows = await self._execute(table, query)
        return rows[0] if rows else None

    async def fetch_many(self, table: str, **filters: Any) -> list[BaseModel]:
        """Fetch every row matching the scalar filters."""
        model, _ = self._relation(table)
        query = self._filtered(table, select(model), filters)
        return await self._execute(table, query)

    async def fetch_in(self, table: str, column: str, values: Iterable[Any]) -> list[BaseModel]:
        """Fetch every row whose ``column`` is one of ``values`` in one query.

        An empty ``values`` returns ``[]`` without touching the database.
        """
        model, _ = self._relation(table)
        values = list(values)
        if not values:
            return []
        query = select(model).where(self._column(table, column).in_(values))
        return await self._execute(table, query)

    def _relation(self, table: str) -> tuple[type[Base], type[BaseModel]]:
        try:
            return RELATIONS[table]
        except KeyError:
            raise ValueError(f"Unknown table: {table}") from None

    def _column(self, table: str, column: str):
        model, _ = self._relation(table)
        if column not in model.__table__.columns:
            raise ValueError(f"Unknown column {column!r} on {table}")
        return getattr(model, column)

    def _filtered(self, table: str, query: Select, filters: dict[str, Any]) -> Select:
        for column, value in filters.items():
            query = query.where(self._column(table, column) == value)
        return query

    async def _execute(self, table: str, query: Select) -> list[BaseModel]:
        """Run ``query`` under the timeout and validate each row."""
        _, record_cls = self._relation(table)
        try:
            result = await asyncio.wait_for(self.db.execute(query), timeout=self.timeout)
            rows = result.scalars().all()
        except asyncio.TimeoutError:
            logger.warning("Query on %s timed out after %.1fs", table, self.timeout)
            raise StoreUnavailable(table, f"timed out after {self.timeout}s") from None
        except SQLAlchemyError as e:
            logger.warning("Query on %s failed: %s", table, e)
            raise StoreUnavailable(table, str(e)) from e

        records = []
        for row in rows:
            try:
                records.append(record_cls.model_validate(row))
            except ValidationError as e:
                logger.error("Malformed %s row: %s", table, e)
                raise MalformedRecord(table, str(e)) from e
        return records
