"""Record store used by the metrics engine.

`RecordStore` is the read/write surface the engine relies on;
`SqlRecordStore` implements it over the SQLAlchemy session used by the API.
"""
from __future__ import annotations

import logging
from datetime import date
from enum import Enum
from typing import Optional, Protocol

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from recovery.metrics import records
from recovery.models.check_in import DailyCheckIn
from recovery.models.goal import Goal
from recovery.models.milestone import Milestone
from recovery.models.recovery_profile import RecoveryProfile

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """A read or write against the backing store failed."""


class InsertResult(str, Enum):
    CREATED = "created"
    EXISTS = "exists"


class RecordStore(Protocol):
    def fetch_check_ins(
        self, user_id: str, since: Optional[date] = None, limit: Optional[int] = None
    ) -> list[records.CheckIn]: ...

    def fetch_goals(self, user_id: str) -> list[records.Goal]: ...

    def fetch_milestones(self, user_id: str) -> list[records.Milestone]: ...

    def insert_milestone(self, user_id: str, milestone: records.Milestone) -> InsertResult: ...

    def fetch_recovery_profile(self, user_id: str) -> Optional[records.RecoveryProfile]: ...

    def fetch_check_in_count(self, user_id: str) -> int: ...

    def fetch_completed_goal_count(self, user_id: str) -> int: ...


def check_in_record(row: DailyCheckIn) -> records.CheckIn:
    return records.CheckIn(
        date=row.date,
        mood_score=row.mood_score,
        energy_level=row.energy_level,
        sleep_quality=row.sleep_quality,
        trigger_tags=tuple(row.trigger_tags or ()),
        gratitude_note=row.gratitude_note,
        notes=row.notes,
        id=row.id,
    )


def goal_record(row: Goal) -> records.Goal:
    # ck_goal_completed_date keeps the two completion columns consistent
    return records.Goal(
        id=row.id,
        title=row.title,
        description=row.description,
        category=row.category,
        priority=row.priority,
        target_date=row.target_date,
        is_completed=bool(row.is_completed),
        completed_date=row.completed_date,
        created_at=row.created_at,
    )


def milestone_record(row: Milestone) -> records.Milestone:
    return records.Milestone(
        id=row.id,
        milestone_type=records.MilestoneType(row.milestone_type),
        milestone_value=row.milestone_value,
        achieved_date=row.achieved_date,
        title=row.title,
        description=row.description,
    )


class SqlRecordStore:
    def __init__(self, db: Session):
        self.db = db

    def _fail(self, action: str, user_id: str, exc: Exception):
        logger.exception("Store failure while %s for user %s", action, user_id)
        self.db.rollback()
        raise StoreError(f"{action} failed: {exc.__class__.__name__}") from exc

    def fetch_check_ins(self, user_id, since=None, limit=None):
        """Check-ins newest first, optionally from `since` on and/or capped at `limit`."""
        try:
            query = self.db.query(DailyCheckIn).filter(DailyCheckIn.user_id == user_id)
            if since is not None:
                query = query.filter(DailyCheckIn.date >= since)
            query = query.order_by(DailyCheckIn.date.desc())
            if limit is not None:
                query = query.limit(limit)
            return [check_in_record(row) for row in query.all()]
        except SQLAlchemyError as e:
            self._fail("fetching check-ins", user_id, e)

    def fetch_goals(self, user_id):
        try:
            rows = (
                self.db.query(Goal)
                .filter(Goal.user_id == user_id)
                .order_by(Goal.is_completed, Goal.priority, Goal.target_date)
                .all()
            )
            return [goal_record(row) for row in rows]
        except SQLAlchemyError as e:
            self._fail("fetching goals", user_id, e)

    def fetch_milestones(self, user_id):
        try:
            rows = (
                self.db.query(Milestone)
                .filter(Milestone.user_id == user_id)
                .order_by(Milestone.achieved_date.desc(), Milestone.id.desc())
                .all()
            )
            return [milestone_record(row) for row in rows]
        except SQLAlchemyError as e:
            self._fail("fetching milestones", user_id, e)

    def insert_milestone(self, user_id, milestone):
        """Insert and commit one milestone.

        A uniqueness conflict on (user, type, value) means it was already
        earned and returns `InsertResult.EXISTS`.
        """
        row = Milestone(
            user_id=user_id,
            milestone_type=records.MilestoneType(milestone.milestone_type).value,
            milestone_value=milestone.milestone_value,
            achieved_date=milestone.achieved_date,
            title=milestone.title,
            description=milestone.description,
        )
        try:
            self.db.add(row)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            return InsertResult.EXISTS
        except SQLAlchemyError as e:
            self._fail("inserting milestone", user_id, e)
        return InsertResult.CREATED

    def fetch_recovery_profile(self, user_id):
        try:
            row = self.db.get(RecoveryProfile, user_id)
        except SQLAlchemyError as e:
            self._fail("fetching recovery profile", user_id, e)
        if row is None:
            return None
        return records.RecoveryProfile(
            recovery_start_date=row.recovery_start_date,
            timezone=row.timezone,
            recovery_program=row.recovery_program,
        )

    def fetch_check_in_count(self, user_id):
        try:
            return (
                self.db.query(func.count(DailyCheckIn.id))
                .filter(DailyCheckIn.user_id == user_id)
                .scalar()
            ) or 0
        except SQLAlchemyError as e:
            self._fail("counting check-ins", user_id, e)

    def fetch_completed_goal_count(self, user_id):
        try:
            return (
                self.db.query(func.count(Goal.id))
                .filter(Goal.user_id == user_id, Goal.is_completed.is_(True))
                .scalar()
            ) or 0
        except SQLAlchemyError as e:
            self._fail("counting completed goals", user_id, e)
