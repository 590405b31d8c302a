"""Dentist dashboard API routes."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import require_caller
from app.database import get_db
from app.repositories.record_store import RecordStore
from app.schemas.dashboard import DashboardResponse, ErrorResponse, PatientView
from app.schemas.records import Caller
from app.services.dashboard import load_dashboard, select_patient

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

_ERROR_RESPONSES = {
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
    status.HTTP_403_FORBIDDEN: {"model": ErrorResponse},
    status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorResponse},
}


async def get_record_store(db: AsyncSession = Depends(get_db)) -> RecordStore:
    """Request-scoped record store."""
    return RecordStore(db)


@router.get("", response_model=DashboardResponse, responses=_ERROR_RESPONSES)
async def get_dashboard(
    caller: Caller = Depends(require_caller),
    store: RecordStore = Depends(get_record_store),
) -> DashboardResponse:
    """Load the caller's profile and assigned patients.

    Returns:
        Welcome line, patient list and one complete view per patient.
        ``empty_message`` is set when no patients are assigned.
    """
    return await load_dashboard(caller, store)


@router.get(
    "/patients/{patient_id}",
    response_model=PatientView,
    responses={**_ERROR_RESPONSES, status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def get_assigned_patient(
    patient_id: str,
    caller: Caller = Depends(require_caller),
    store: RecordStore = Depends(get_record_store),
) -> PatientView:
    """Get one assigned patient's view.

    Raises:
        HTTPException: 404 if the patient is not assigned to the caller.
    """
    dashboard = await load_dashboard(caller, store)
    view = select_patient(dashboard, patient_id)
    if view is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Patient not found",
        )
    return view
