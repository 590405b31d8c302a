"""Pydantic schemas for the dashboard API.

Every field is display-ready: optional values have already been replaced by
"N/A", "Yes"/"No" or "Uploaded"/"Not Uploaded" so the frontend renders them
as-is.
"""

from pydantic import BaseModel, Field


class PatientSummary(BaseModel):
    """Entry in the patient list."""

    id: str
    full_name: str


class Demographics(BaseModel):
    gender: str
    pregnant: str
    phone_number: str
    birthday: str
    last_dentist_appointment: str
    blood_test: str = Field(description="Uploaded / Not Uploaded")


class Lifestyle(BaseModel):
    smoker: str
    smoker_type: str
    alcohol: str
    alcohol_type: str
    diet: str
    diet_type: str


class Symptoms(BaseModel):
    gum_pain: str
    gum_bleed: str
    bad_breath: str
    loose_teeth: str
    pus_white_discharge: str
    gum_recession: str
    teeth_longer: str
    gap_form: str
    tooth_pain: str
    sensitivity: str
    ulcer: str
    inflammation: str


class Hygiene(BaseModel):
    toothbrush: str
    toothpaste: str
    mouthwash: str
    weekly_floss_frequency: int | str
    weekly_daily_brush: str


class SurgicalHistory(BaseModel):
    teeth_removed: str
    fillings: str
    root_canals: str


class AnalysisView(BaseModel):
    """Gum-health analysis, or its "no analysis" form."""

    available: bool
    score: float | str
    analysis: str
    causes: list[str]
    suggestions: list[str]
    last_analysis: str
    photo: str | None = Field(description="Opaque object-storage URI of the analysed photo")
    photo_status: str


class PatientView(BaseModel):
    """Complete, renderable patient record."""

    id: str
    full_name: str
    demographics: Demographics
    lifestyle: Lifestyle
    symptoms: Symptoms
    hygiene: Hygiene
    history: SurgicalHistory
    analysis: AnalysisView


class DashboardResponse(BaseModel):
    """Everything the dashboard page needs after one load."""

    welcome: str
    clinician: PatientSummary
    patients: list[PatientSummary]
    details: list[PatientView]
    empty_message: str | None = Field(
        default=None,
        description="Set when the clinician has no assigned patients",
    )


class ErrorResponse(BaseModel):
    """Body of dashboard error responses."""

    detail: str
    redirect: str | None = None
    step: str | None = None
