"""Repository layer for data access.

Repositories encapsulate database queries and hand typed records to the
service layer.
"""

from app.repositories.record_store import RecordStore

__all__ = ["RecordStore"]
