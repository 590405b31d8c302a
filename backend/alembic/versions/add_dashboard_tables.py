"""add profile and assignment tables

Revision ID: add_dashboard_tables
Revises: add_better_auth_tables
Create Date: 2026-10-19
"""

from collections.abc import Sequence
from typing import Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "add_dashboard_tables"
down_revision: Union[str, Sequence[str], None] = "add_better_auth_tables"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_FLAG_COLUMNS = [
    "pregnant",
    "gum_pain",
    "gum_bleed",
    "bad_breath",
    "loose_teeth",
    "pus_white_discharge",
    "gum_recession",
    "teeth_longer",
    "gap_form",
    "tooth_pain",
    "sensitivity",
    "ulcer",
    "inflammation",
    "smoker",
    "alcohol",
    "diet",
    "mouthwash",
    "weekly_daily_brush",
    "teeth_removed",
    "fillings",
    "root_canals",
]

_TEXT_COLUMNS = [
    "first_name",
    "last_name",
    "gender",
    "phone_number",
    "blood_test",
    "smoker_type",
    "alcohol_type",
    "diet_type",
    "toothbrush",
    "toothpaste",
    "analysis_result",
    "photo_analyzed",
]


def upgrade() -> None:
    op.create_table(
        "profile",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("is_dentist", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        *[sa.Column(name, sa.Text(), nullable=True) for name in _TEXT_COLUMNS],
        *[sa.Column(name, sa.Boolean(), nullable=True) for name in _FLAG_COLUMNS],
        sa.Column("birthday", sa.Date(), nullable=True),
        sa.Column("last_dentist_appointment", sa.Date(), nullable=True),
        sa.Column("weekly_floss_frequency", sa.Integer(), nullable=True),
        sa.Column("last_analysis", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    # No unique constraint on the pair: duplicates are tolerated by readers
    op.create_table(
        "assignment",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("dentist_id", sa.Text(), nullable=False),
        sa.Column("patient_id", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["dentist_id"], ["profile.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["patient_id"], ["profile.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_assignment_dentist_id", "assignment", ["dentist_id"])
    op.create_index("ix_assignment_patient_id", "assignment", ["patient_id"])


def downgrade() -> None:
    op.drop_index("ix_assignment_patient_id", table_name="assignment")
    op.drop_index("ix_assignment_dentist_id", table_name="assignment")
    op.drop_table("assignment")
    op.drop_table("profile")
