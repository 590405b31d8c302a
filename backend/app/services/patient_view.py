"""Patient view-model.

Turns a validated ProfileRecord into the display-ready PatientView returned
by the dashboard API. All functions are pure and total: any combination of
missing optional fields produces a complete view, with "N/A" (or the
relevant sentinel) in place of each missing value.
"""

import logging
from datetime import date, datetime, timezone
from typing import Any

from pydantic import ValidationError

from app.constants import (
    DISPLAY_DATE_FORMAT,
    NO,
    NOT_AVAILABLE,
    NOT_UPLOADED,
    UPLOADED,
    YES,
)
from app.exceptions import MalformedAnalysis
from app.schemas.dashboard import (
    AnalysisView,
    Demographics,
    Hygiene,
    Lifestyle,
    PatientSummary,
    PatientView,
    SurgicalHistory,
    Symptoms,
)
from app.schemas.records import AnalysisResult, ProfileRecord

logger = logging.getLogger(__name__)


def format_date(value: date | datetime | None) -> str:
    """Format as dd/mm/YYYY, or "N/A" when absent.

    Timezone-aware timestamps are shown as their UTC date.
    """
    if value is None:
        return NOT_AVAILABLE
    if isinstance(value, datetime) and value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(DISPLAY_DATE_FORMAT)


def format_flag(value: bool | None) -> str:
    """Render a yes/no answer; unanswered questions render as "N/A"."""
    if value is None:
        return NOT_AVAILABLE
    return YES if value else NO


def format_text(value: str | None) -> str:
    if value is None or not value.strip():
        return NOT_AVAILABLE
    return value


def format_document(reference: str | None) -> str:
    """Blob references are opaque; only presence is reported."""
    return UPLOADED if reference else NOT_UPLOADED


def _decode_analysis(payload: Any) -> AnalysisResult:
    """Decode an analysis payload or raise MalformedAnalysis."""
    if isinstance(payload, (str, bytes)):
        try:
            return AnalysisResult.model_validate_json(payload)
        except ValidationError as e:
            raise MalformedAnalysis(str(e)) from e

    if not isinstance(payload, dict):
        raise MalformedAnalysis(f"expected an object, got {type(payload).__name__}")

    try:
        return AnalysisResult.model_validate(payload)
    except ValidationError as e:
        raise MalformedAnalysis(str(e)) from e


def parse_analysis(payload: Any, patient_id: str | None = None) -> AnalysisResult | None:
    """Parse the stored analysis_result payload.

    Args:
        payload: JSON text or an already-decoded mapping, as written by the
            analysis job.
        patient_id: Used only for the warning log.

    Returns:
        The AnalysisResult, or None when the payload is absent or malformed.
        Malformed payloads are logged as warnings and never raised.
    """
    if payload is None or (isinstance(payload, str) and not payload.strip()):
        return None

    try:
        return _decode_analysis(payload)
    except MalformedAnalysis as e:
        logger.warning("Ignoring malformed analysis for patient %s: %s", patient_id, e)
        return None


def build_analysis_view(profile: ProfileRecord) -> AnalysisView:
    result = parse_analysis(profile.analysis_result, patient_id=profile.id)
    photo_status = format_document(profile.photo_analyzed)

    if result is None:
        return AnalysisView(
            available=False,
            score=NOT_AVAILABLE,
            analysis=NOT_AVAILABLE,
            causes=[],
            suggestions=[],
            last_analysis=format_date(profile.last_analysis),
            photo=profile.photo_analyzed or None,
            photo_status=photo_status,
        )

    return AnalysisView(
        available=True,
        score=result.score,
        analysis=format_text(result.analysis),
        causes=list(result.causes),
        suggestions=list(result.suggestions),
        last_analysis=format_date(profile.last_analysis),
        photo=profile.photo_analyzed or None,
        photo_status=photo_status,
    )


def display_name(profile: ProfileRecord) -> str:
    return profile.full_name or NOT_AVAILABLE


def summarize(profile: ProfileRecord) -> PatientSummary:
    """Patient list entry."""
    return PatientSummary(id=profile.id, full_name=display_name(profile))


def project(profile: ProfileRecord) -> PatientView:
    """Project a profile into a complete PatientView."""
    p = profile
    return PatientView(
        id=p.id,
        full_name=display_name(p),
        demographics=Demographics(
            gender=format_text(p.gender),
            pregnant=format_flag(p.pregnant),
            phone_number=format_text(p.phone_number),
            birthday=format_date(p.birthday),
            last_dentist_appointment=format_date(p.last_dentist_appointment),
            blood_test=format_document(p.blood_test),
        ),
        lifestyle=Lifestyle(
            smoker=format_flag(p.smoker),
            smoker_type=format_text(p.smoker_type),
            alcohol=format_flag(p.alcohol),
            alcohol_type=format_text(p.alcohol_type),
            diet=format_flag(p.diet),
            diet_type=format_text(p.diet_type),
        ),
        symptoms=Symptoms(
            gum_pain=format_flag(p.gum_pain),
            gum_bleed=format_flag(p.gum_bleed),
            bad_breath=format_flag(p.bad_breath),
            loose_teeth=format_flag(p.loose_teeth),
            pus_white_discharge=format_flag(p.pus_white_discharge),
            gum_recession=format_flag(p.gum_recession),
            teeth_longer=format_flag(p.teeth_longer),
            gap_form=format_flag(p.gap_form),
            tooth_pain=format_flag(p.tooth_pain),
            sensitivity=format_flag(p.sensitivity),
            ulcer=format_flag(p.ulcer),
            inflammation=format_flag(p.inflammation),
        ),
        hygiene=Hygiene(
            toothbrush=format_text(p.toothbrush),
            toothpaste=format_text(p.toothpaste),
            mouthwash=format_flag(p.mouthwash),
            weekly_floss_frequency=(
                p.weekly_floss_frequency
                if p.weekly_floss_frequency is not None
                else NOT_AVAILABLE
            ),
            weekly_daily_brush=format_flag(p.weekly_daily_brush),
        ),
        history=SurgicalHistory(
            teeth_removed=format_flag(p.teeth_removed),
            fillings=format_flag(p.fillings),
            root_canals=format_flag(p.root_canals),
        ),
        analysis=build_analysis_view(p),
    )
