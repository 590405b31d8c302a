"""Pydantic schemas."""

from app.schemas.dashboard import (
    AnalysisView,
    DashboardResponse,
    Demographics,
    ErrorResponse,
    Hygiene,
    Lifestyle,
    PatientSummary,
    PatientView,
    SurgicalHistory,
    Symptoms,
)
from app.schemas.records import AnalysisResult, AssignmentRecord, Caller, ProfileRecord

__all__ = [
    # Store records
    "AnalysisResult",
    "AssignmentRecord",
    "Caller",
    "ProfileRecord",
    # Dashboard views
    "AnalysisView",
    "DashboardResponse",
    "Demographics",
    "ErrorResponse",
    "Hygiene",
    "Lifestyle",
    "PatientSummary",
    "PatientView",
    "SurgicalHistory",
    "Symptoms",
]
