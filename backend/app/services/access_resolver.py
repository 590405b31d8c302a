"""Access resolution for the dentist dashboard.

Decides whether a caller may use the dashboard and, if so, which patient
profiles they may see. The flow is a fixed linear pipeline:

    caller profile -> clinician check -> assignments -> batch patient fetch

Each step either returns its value or raises, so a failure stops the
pipeline at that step. The clinician check runs before any assignment
query. Patients are fetched with a single set-membership query no matter
how many are assigned.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeVar

from app.exceptions import AccessDenied, ProfileNotFound, StoreUnavailable
from app.schemas.records import AssignmentRecord, Caller, ProfileRecord

if TYPE_CHECKING:
    from app.repositories.record_store import RecordStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

STEP_CALLER_PROFILE = "caller_profile"
STEP_ASSIGNMENTS = "assignments"
STEP_PATIENTS = "patients"


@dataclass(frozen=True, slots=True)
class ResolvedAccess:
    caller_profile: ProfileRecord
    patients: list[ProfileRecord] = field(default_factory=list)

    @property
    def has_patients(self) -> bool:
        return bool(self.patients)


async def _step(step: str, awaitable: Awaitable[T]) -> T:
    """Await one store call, tagging a store failure with the pipeline step."""
    try:
        return await awaitable
    except StoreUnavailable as e:
        raise StoreUnavailable(step, e.reason) from e


def unique_patient_ids(assignments: list[AssignmentRecord]) -> list[str]:
    """Patient ids in first-seen order, each once."""
    return list(dict.fromkeys(a.patient_id for a in assignments))


async def resolve_access(caller: Caller, store: RecordStore) -> ResolvedAccess:
    """Resolve the caller's own profile and their assigned patients.

    Args:
        caller: Identity that has already been authenticated.
        store: Record store to read from.

    Returns:
        ResolvedAccess with the caller's profile and each assigned patient
        exactly once, in the store's return order. An empty patient list
        means no assignments, not a failure.

    Raises:
        ProfileNotFound: The caller has no profile row.
        AccessDenied: The caller is not a dentist.
        StoreUnavailable: A query failed; ``step`` names which one.
    """
    profile = await _step(STEP_CALLER_PROFILE, store.fetch_one("profile", id=caller.id))
    if profile is None:
        logger.info("No profile for caller %s", caller.id)
        raise ProfileNotFound(caller.id)

    if caller.is_clinician is False or not profile.is_dentist:
        logger.info("Access denied for non-dentist caller %s", caller.id)
        raise AccessDenied(caller.id)

    assignments = await _step(
        STEP_ASSIGNMENTS, store.fetch_many("assignment", dentist_id=caller.id)
    )
    patient_ids = unique_patient_ids(assignments)
    if not patient_ids:
        logger.info("No assigned patients for dentist %s", caller.id)
        return ResolvedAccess(caller_profile=profile)

    patients = await _step(STEP_PATIENTS, store.fetch_in("profile", "id", patient_ids))
    # One entry per id even if the store repeats a row
    seen: set[str] = set()
    unique_patients = []
    for patient in patients:
        if patient.id not in seen:
            seen.add(patient.id)
            unique_patients.append(patient)

    return ResolvedAccess(caller_profile=profile, patients=unique_patients)
