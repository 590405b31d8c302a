"""Seed the database with a demo dentist, patients and assignments.

Creates a Better-Auth user and a live session for the dentist so the printed
bearer token works immediately against /api/dashboard.

Usage:
    uv run python -m app.scripts.seed_database

The script is idempotent - it skips seeding if the dentist already exists.
"""

import asyncio
import json
import uuid
from datetime import date, datetime, timedelta, timezone

from sqlalchemy import select, text

from app.config import settings
from app.database import async_session_maker, engine
from app.models import Assignment, BetterAuthSession, BetterAuthUser, Profile

DEMO_PATIENTS = [
    {
        "first_name": "Noa",
        "last_name": "Levi",
        "gender": "female",
        "pregnant": False,
        "phone_number": "050-1234567",
        "birthday": date(1988, 4, 12),
        "blood_test": "blood-tests/noa-levi.pdf",
        "last_dentist_appointment": date(2025, 11, 3),
        "gum_pain": True,
        "gum_bleed": True,
        "smoker": False,
        "toothbrush": "electric",
        "toothpaste": "fluoride",
        "mouthwash": True,
        "weekly_floss_frequency": 3,
        "weekly_daily_brush": True,
        "analysis_result": json.dumps(
            {
                "score": 62,
                "analysis": "Moderate gingival inflammation along the lower incisors.",
                "causes": ["Plaque build-up", "Irregular flossing"],
                "suggestions": ["Floss daily", "Book a cleaning within a month"],
            }
        ),
        "last_analysis": datetime(2026, 1, 15, 9, 30, tzinfo=timezone.utc),
        "photo_analyzed": "analysis-photos/noa-levi.jpg",
    },
    {
        "first_name": "Omer",
        "last_name": "Katz",
        "gender": "male",
        "birthday": date(1975, 9, 30),
        "smoker": True,
        "smoker_type": "cigarettes",
    },
    {
        # Analysis job wrote a truncated payload; the dashboard shows no analysis
        "first_name": "Maya",
        "last_name": "Cohen",
        "gender": "female",
        "analysis_result": '{"score": 40, "analysis": ',
    },
]


async def seed_database() -> dict[str, int]:
    """Insert the demo dentist, patients and assignments.

    Returns:
        Dictionary with counts: profiles_created, assignments_created.
    """
    stats = {"profiles_created": 0, "assignments_created": 0}

    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    print("  PostgreSQL: connected")

    async with async_session_maker() as session:
        result = await session.execute(
            select(BetterAuthUser).where(BetterAuthUser.email == settings.seed_dentist_email)
        )
        existing = result.scalar_one_or_none()
        if existing:
            print(f"  Dentist already exists: {settings.seed_dentist_email} (id={existing.id})")
            return stats

        now = datetime.now(timezone.utc)
        dentist_id = str(uuid.uuid4())
        token = str(uuid.uuid4())
        first_name, _, last_name = settings.seed_dentist_name.partition(" ")

        session.add(
            BetterAuthUser(
                id=dentist_id,
                name=settings.seed_dentist_name,
                email=settings.seed_dentist_email,
                emailVerified=True,
                createdAt=now,
                updatedAt=now,
            )
        )
        session.add(
            BetterAuthSession(
                id=str(uuid.uuid4()),
                token=token,
                userId=dentist_id,
                expiresAt=now + timedelta(days=7),
                createdAt=now,
                updatedAt=now,
            )
        )
        session.add(
            Profile(id=dentist_id, is_dentist=True, first_name=first_name, last_name=last_name)
        )
        stats["profiles_created"] += 1

        patient_ids = []
        for fields in DEMO_PATIENTS:
            patient_id = str(uuid.uuid4())
            session.add(Profile(id=patient_id, is_dentist=False, **fields))
            patient_ids.append(patient_id)
            stats["profiles_created"] += 1

        # The first patient is assigned twice; the dashboard lists them once
        for patient_id in [*patient_ids, patient_ids[0]]:
            session.add(Assignment(dentist_id=dentist_id, patient_id=patient_id))
            stats["assignments_created"] += 1

        await session.commit()

    print(f"  Dentist created: {settings.seed_dentist_email} (id={dentist_id})")
    print(f"  Bearer token: {token}")
    return stats


async def main() -> None:
    print("Seeding dentist dashboard data...")
    stats = await seed_database()
    print(
        f"\nDone: {stats['profiles_created']} profiles, "
        f"{stats['assignments_created']} assignments"
    )


if __name__ == "__main__":
    asyncio.run(main())
