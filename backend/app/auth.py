"""Bearer token identity via the Better-Auth session table."""

import asyncio
import logging
from datetime import datetime, timezone

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db
from app.exceptions import IdentityUnavailable
from app.models.auth import BetterAuthSession
from app.schemas.records import Caller

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_caller(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> str | None:
    """Resolve the bearer token to the caller's user id.

    Returns:
        The user_id of a live session, or None if the token is missing,
        unknown or expired.

    Raises:
        IdentityUnavailable: If the session lookup fails or times out.
    """
    if credentials is None:
        return None

    query = select(BetterAuthSession).where(
        BetterAuthSession.token == credentials.credentials,
        BetterAuthSession.expiresAt > datetime.now(timezone.utc),
    )
    try:
        result = await asyncio.wait_for(
            db.execute(query), timeout=settings.store_timeout_seconds
        )
    except asyncio.TimeoutError:
        logger.warning("Session lookup timed out")
        raise IdentityUnavailable("Identity lookup timed out") from None
    except SQLAlchemyError as e:
        logger.warning("Session lookup failed: %s", e)
        raise IdentityUnavailable("Identity lookup failed") from e

    session = result.scalar_one_or_none()
    return session.userId if session else None


async def require_caller(user_id: str | None = Depends(get_current_caller)) -> Caller:
    """Dependency that turns a missing identity into IdentityUnavailable."""
    if user_id is None:
        raise IdentityUnavailable("Invalid or expired token")
    return Caller(id=user_id)
