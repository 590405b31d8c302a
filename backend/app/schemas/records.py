"""Typed records for rows read from the record store.

Rows are validated into these models at the store boundary so the rest of the
application never handles untyped data.
"""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Caller(BaseModel):
    """Authenticated identity for one request.

    ``is_clinician`` is ``None`` until the caller's profile has been read.
    """

    id: str = Field(min_length=1)
    is_clinician: bool | None = None


class AssignmentRecord(BaseModel):
    """A (dentist_id, patient_id) link."""

    model_config = ConfigDict(from_attributes=True)

    dentist_id: str
    patient_id: str


class AnalysisResult(BaseModel):
    """Gum-health analysis produced by the external image-analysis job."""

    score: float = Field(allow_inf_nan=False)
    analysis: str
    causes: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)


class ProfileRecord(BaseModel):
    """A dentist or patient profile.

    Everything but ``id`` is optional; intake forms are often incomplete.
    ``analysis_result`` is kept opaque here and parsed by the view-model.
    """

    model_config = ConfigDict(from_attributes=True)

    id: str
    is_dentist: bool = False

    # Demographics
    first_name: str | None = None
    last_name: str | None = None
    gender: str | None = None
    pregnant: bool | None = None
    phone_number: str | None = None
    birthday: date | None = None
    blood_test: str | None = None
    last_dentist_appointment: date | None = None

    # Symptoms
    gum_pain: bool | None = None
    gum_bleed: bool | None = None
    bad_breath: bool | None = None
    loose_teeth: bool | None = None
    pus_white_discharge: bool | None = None
    gum_recession: bool | None = None
    teeth_longer: bool | None = None
    gap_form: bool | None = None
    tooth_pain: bool | None = None
    sensitivity: bool | None = None
    ulcer: bool | None = None
    inflammation: bool | None = None

    # Lifestyle
    smoker: bool | None = None
    smoker_type: str | None = None
    alcohol: bool | None = None
    alcohol_type: str | None = None
    diet: bool | None = None
    diet_type: str | None = None

    # Hygiene
    toothbrush: str | None = None
    toothpaste: str | None = None
    mouthwash: bool | None = None
    weekly_floss_frequency: int | None = None
    weekly_daily_brush: bool | None = None

    # Surgical history
    teeth_removed: bool | None = None
    fillings: bool | None = None
    root_canals: bool | None = None

    # Gum analysis
    analysis_result: Any = None
    last_analysis: datetime | None = None
    photo_analyzed: str | None = None

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)
