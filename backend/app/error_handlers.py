"""Translate dashboard errors into JSON responses.

Identity, profile and access failures end the session, so their responses
carry the login path for the frontend to redirect to. Store failures keep
the session and report which fetch failed.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.config import settings
from app.constants import STORE_FAILURE_MESSAGE
from app.exceptions import (
    AccessDenied,
    IdentityUnavailable,
    MalformedRecord,
    ProfileNotFound,
    StoreUnavailable,
)

logger = logging.getLogger(__name__)


def _redirect(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "redirect": settings.login_path},
    )


async def identity_unavailable_handler(request: Request, exc: IdentityUnavailable) -> JSONResponse:
    return _redirect(status.HTTP_401_UNAUTHORIZED, exc.reason)


async def profile_not_found_handler(request: Request, exc: ProfileNotFound) -> JSONResponse:
    return _redirect(status.HTTP_401_UNAUTHORIZED, "Profile not found")


async def access_denied_handler(request: Request, exc: AccessDenied) -> JSONResponse:
    return _redirect(status.HTTP_403_FORBIDDEN, "Access denied. Not a dentist.")


async def store_unavailable_handler(request: Request, exc: StoreUnavailable) -> JSONResponse:
    logger.warning("Dashboard load failed at %s: %s", exc.step, exc.reason)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": STORE_FAILURE_MESSAGE, "step": exc.step},
    )


async def malformed_record_handler(request: Request, exc: MalformedRecord) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": f"Malformed {exc.table} record"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the dashboard error handlers on ``app``."""
    app.add_exception_handler(IdentityUnavailable, identity_unavailable_handler)
    app.add_exception_handler(ProfileNotFound, profile_not_found_handler)
    app.add_exception_handler(AccessDenied, access_denied_handler)
    app.add_exception_handler(StoreUnavailable, store_unavailable_handler)
    app.add_exception_handler(MalformedRecord, malformed_record_handler)
