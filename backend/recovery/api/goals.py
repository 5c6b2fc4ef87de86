from datetime import date, datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from recovery.api.deps import get_timezone, get_today, get_user_id
from recovery.db import get_db
from recovery.metrics.goals import (
    days_until_target,
    describe_days_until,
    goal_progress,
    set_completion,
)
from recovery.models.goal import Goal
from recovery.schemas.goal import GoalCreate, GoalRead, GoalUpdate
from recovery.store import goal_record


router = APIRouter(prefix="/goals", tags=["goals"])


def _to_read(row: Goal, today: date, tz_name: str) -> GoalRead:
    goal = goal_record(row)
    label = None
    if goal.target_date is not None and not goal.is_completed:
        label = describe_days_until(days_until_target(goal.target_date, today))
    return GoalRead(
        id=goal.id,
        title=goal.title,
        description=goal.description,
        category=goal.category,
        target_date=goal.target_date,
        priority=goal.priority,
        is_completed=goal.is_completed,
        completed_date=goal.completed_date,
        created_at=goal.created_at,
        progress=round(goal_progress(goal, today, tz_name), 1),
        days_left_label=label,
    )


def _get_owned(db: Session, goal_id: int, user_id: str) -> Goal:
    row = db.query(Goal).filter(Goal.id == goal_id, Goal.user_id == user_id).first()
    if not row:
        raise HTTPException(status_code=404, detail="Goal not found")
    return row


@router.get("/", response_model=list[GoalRead])
def list_goals(
    user_id: str = Depends(get_user_id),
    today: date = Depends(get_today),
    tz_name: str = Depends(get_timezone),
    db: Session = Depends(get_db),
):
    # open goals first, then by priority and nearest target
    rows = (
        db.query(Goal)
        .filter(Goal.user_id == user_id)
        .order_by(Goal.is_completed, Goal.priority, Goal.target_date)
        .all()
    )
    return [_to_read(row, today, tz_name) for row in rows]


@router.post("/", response_model=GoalRead)
def create_goal(
    payload: GoalCreate,
    user_id: str = Depends(get_user_id),
    today: date = Depends(get_today),
    tz_name: str = Depends(get_timezone),
    db: Session = Depends(get_db),
):
    row = Goal(
        user_id=user_id,
        title=payload.title.strip(),
        description=payload.description,
        category=payload.category,
        target_date=payload.target_date,
        priority=payload.priority,
        is_completed=False,
        created_at=datetime.now(timezone.utc),
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return _to_read(row, today, tz_name)


@router.put("/{goal_id}", response_model=GoalRead)
def update_goal(
    goal_id: int,
    payload: GoalUpdate,
    user_id: str = Depends(get_user_id),
    today: date = Depends(get_today),
    tz_name: str = Depends(get_timezone),
    db: Session = Depends(get_db),
):
    row = _get_owned(db, goal_id, user_id)
    for field, value in payload.model_dump(exclude_unset=True).items():
        if field in ("title", "category", "priority") and value is None:
            raise HTTPException(status_code=422, detail=f"{field} cannot be null")
        setattr(row, field, value.strip() if field == "title" else value)
    db.commit()
    db.refresh(row)
    return _to_read(row, today, tz_name)


@router.post("/{goal_id}/toggle", response_model=GoalRead)
def toggle_goal(
    goal_id: int,
    user_id: str = Depends(get_user_id),
    today: date = Depends(get_today),
    tz_name: str = Depends(get_timezone),
    db: Session = Depends(get_db),
):
    """Flip completion; completing stamps today, reopening clears the date."""
    row = _get_owned(db, goal_id, user_id)
    toggled = set_completion(goal_record(row), not row.is_completed, today)
    row.is_completed = toggled.is_completed
    row.completed_date = toggled.completed_date
    db.commit()
    db.refresh(row)
    return _to_read(row, today, tz_name)


@router.delete("/{goal_id}")
def delete_goal(
    goal_id: int,
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    row = _get_owned(db, goal_id, user_id)
    db.delete(row)
    db.commit()
    return {"message": "Goal deleted"}
