"""SQLAlchemy model for the ``profile`` relation.

One row per person, dentist or patient. The primary key is the auth user id,
so a caller's own profile is found by looking up their session's user id.
"""

from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Profile(Base):
    """Clinician or patient profile with the dental intake questionnaire."""

    __tablename__ = "profile"

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    is_dentist: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false")
    )

    # === Demographics ===
    first_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    last_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    gender: Mapped[str | None] = mapped_column(Text, nullable=True)
    pregnant: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    phone_number: Mapped[str | None] = mapped_column(Text, nullable=True)
    birthday: Mapped[date | None] = mapped_column(Date, nullable=True)
    blood_test: Mapped[str | None] = mapped_column(Text, nullable=True)
    last_dentist_appointment: Mapped[date | None] = mapped_column(Date, nullable=True)

    # === Symptoms ===
    gum_pain: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    gum_bleed: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    bad_breath: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    loose_teeth: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    pus_white_discharge: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    gum_recession: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    teeth_longer: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    gap_form: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    tooth_pain: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    sensitivity: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    ulcer: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    inflammation: Mapped[bool | None] = mapped_column(Boolean, nullable=True)

    # === Lifestyle ===
    smoker: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    smoker_type: Mapped[str | None] = mapped_column(Text, nullable=True)
    alcohol: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    alcohol_type: Mapped[str | None] = mapped_column(Text, nullable=True)
    diet: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    diet_type: Mapped[str | None] = mapped_column(Text, nullable=True)

    # === Hygiene ===
    toothbrush: Mapped[str | None] = mapped_column(Text, nullable=True)
    toothpaste: Mapped[str | None] = mapped_column(Text, nullable=True)
    mouthwash: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    weekly_floss_frequency: Mapped[int | None] = mapped_column(Integer, nullable=True)
    weekly_daily_brush: Mapped[bool | None] = mapped_column(Boolean, nullable=True)

    # === Surgical history ===
    teeth_removed: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    fillings: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    root_canals: Mapped[bool | None] = mapped_column(Boolean, nullable=True)

    # === Gum analysis (written by the external analysis job) ===
    analysis_result: Mapped[str | None] = mapped_column(Text, nullable=True)
    last_analysis: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    photo_analyzed: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Profile(id={self.id}, is_dentist={self.is_dentist})>"
