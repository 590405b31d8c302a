"""SQLAlchemy models."""

from app.models.assignment import Assignment
from app.models.auth import BetterAuthSession, BetterAuthUser
from app.models.profile import Profile

__all__ = [
    "Assignment",
    "BetterAuthSession",
    "BetterAuthUser",
    "Profile",
]
