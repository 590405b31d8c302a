"""SQLAlchemy model for dentist-to-patient assignments."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Assignment(Base):
    """Grants a dentist read access to one patient's profile.

    Many-to-many and unordered. The (dentist_id, patient_id) pair is not
    unique at the database level, so readers must de-duplicate.
    """

    __tablename__ = "assignment"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    dentist_id: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    patient_id: Mapped[str] = mapped_column(Text, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Assignment(dentist_id={self.dentist_id}, patient_id={self.patient_id})>"
