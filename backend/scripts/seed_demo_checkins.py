from datetime import date, datetime, timedelta, timezone
import argparse
import random

from recovery.core.constants import TRIGGER_OPTIONS
from recovery.db import Base, SessionLocal, engine
from recovery.models.check_in import DailyCheckIn
from recovery.models.goal import Goal
from recovery.models.recovery_profile import RecoveryProfile


def clear_demo_user(db, user_id: str) -> None:
    """Delete the demo user's check-ins, goals and profile so we can reseed cleanly."""
    db.query(DailyCheckIn).filter(DailyCheckIn.user_id == user_id).delete()
    db.query(Goal).filter(Goal.user_id == user_id).delete()
    db.query(RecoveryProfile).filter(RecoveryProfile.user_id == user_id).delete()
    db.commit()


def seed_demo_data(db, user_id: str, days: int = 90) -> None:
    """Insert `days` of check-ins (with the odd missed day), a profile and a few goals."""
    today = date.today()

    db.add(
        RecoveryProfile(
            user_id=user_id,
            recovery_start_date=today - timedelta(days=days + 10),
            timezone="UTC",
            recovery_program="Self-managed",
        )
    )

    check_ins = []
    mood = 5
    for offset in range(days, -1, -1):
        d = today - timedelta(days=offset)
        # Skip roughly one day in ten, but never the last week so the streak shows
        if offset > 7 and random.random() < 0.1:
            continue
        mood = max(1, min(10, mood + random.choice([-1, 0, 0, 1, 1])))
        check_ins.append(
            DailyCheckIn(
                user_id=user_id,
                date=d,
                mood_score=mood,
                energy_level=random.randint(2, 5),
                sleep_quality=random.randint(1, 5),
                trigger_tags=random.sample(TRIGGER_OPTIONS, k=random.randint(0, 3)),
                gratitude_note=random.choice([None, "Morning walk.", "Call with my sister."]),
            )
        )

    now = datetime.now(timezone.utc)
    goals = [
        Goal(user_id=user_id, title="Attend two meetings a week", category="Recovery",
             priority=1, target_date=today + timedelta(days=30), created_at=now - timedelta(days=30)),
        Goal(user_id=user_id, title="Run a 5k", category="Health & Wellness",
             priority=2, target_date=today - timedelta(days=3), created_at=now - timedelta(days=60)),
        Goal(user_id=user_id, title="Read one book", category="Personal Growth",
             priority=3, is_completed=True, completed_date=today - timedelta(days=5),
             created_at=now - timedelta(days=45)),
    ]

    db.add_all(check_ins + goals)
    db.commit()

    print(f"Seeded {len(check_ins)} demo check-ins and {len(goals)} goals for {user_id}")


def main():
    parser = argparse.ArgumentParser(description="Seed demo recovery data")
    parser.add_argument("--user", default="demo-user")
    parser.add_argument("--days", type=int, default=90)
    args = parser.parse_args()

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        clear_demo_user(db, args.user)
        seed_demo_data(db, args.user, days=args.days)
    finally:
        db.close()


if __name__ == "__main__":
    main()
