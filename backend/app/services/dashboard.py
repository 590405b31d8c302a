"""Dashboard assembly.

Runs access resolution and projects the result into the response the
dashboard page renders. Selecting a patient afterwards is an in-memory
lookup over the already-projected views.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.constants import NO_PATIENTS_MESSAGE
from app.schemas.dashboard import DashboardResponse, PatientView
from app.schemas.records import Caller
from app.services.access_resolver import ResolvedAccess, resolve_access
from app.services.patient_view import display_name, project, summarize

if TYPE_CHECKING:
    from app.repositories.record_store import RecordStore

logger = logging.getLogger(__name__)


def build_dashboard(resolved: ResolvedAccess) -> DashboardResponse:
    """Project resolved access into the dashboard response. Pure."""
    return DashboardResponse(
        welcome=f"Welcome, {display_name(resolved.caller_profile)}!",
        clinician=summarize(resolved.caller_profile),
        patients=[summarize(p) for p in resolved.patients],
        details=[project(p) for p in resolved.patients],
        empty_message=None if resolved.has_patients else NO_PATIENTS_MESSAGE,
    )


async def load_dashboard(caller: Caller, store: RecordStore) -> DashboardResponse:
    """Resolve the caller's patients and build the dashboard.

    Raises whatever resolve_access raises; nothing is retried here.
    """
    resolved = await resolve_access(caller, store)
    dashboard = build_dashboard(resolved)
    logger.info(
        "Loaded dashboard for dentist %s with %d patient(s)",
        caller.id,
        len(dashboard.patients),
    )
    return dashboard


def select_patient(dashboard: DashboardResponse, patient_id: str) -> PatientView | None:
    """Find an already-loaded patient by id. No I/O."""
    for view in dashboard.details:
        if view.id == patient_id:
            return view
    return None
