import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from recovery.api.deps import get_today, get_user_id
from recovery.db import get_db
from recovery.models.check_in import DailyCheckIn
from recovery.schemas.check_in import CheckInRead, CheckInUpsert


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/checkins", tags=["checkins"])


@router.get("/", response_model=list[CheckInRead])
def list_check_ins(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    limit: Optional[int] = Query(None, ge=1, le=1000),
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    """Check-ins for the user, most recent first."""
    if start_date and end_date and start_date > end_date:
        raise HTTPException(status_code=422, detail="start_date must be on or before end_date")

    query = db.query(DailyCheckIn).filter(DailyCheckIn.user_id == user_id)
    if start_date is not None:
        query = query.filter(DailyCheckIn.date >= start_date)
    if end_date is not None:
        query = query.filter(DailyCheckIn.date <= end_date)
    query = query.order_by(DailyCheckIn.date.desc())
    if limit is not None:
        query = query.limit(limit)
    return query.all()


@router.get("/today", response_model=CheckInRead)
def get_todays_check_in(
    user_id: str = Depends(get_user_id),
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
):
    row = (
        db.query(DailyCheckIn)
        .filter(DailyCheckIn.user_id == user_id, DailyCheckIn.date == today)
        .first()
    )
    if not row:
        raise HTTPException(status_code=404, detail="No check-in today")
    return row


def _find_check_in(db: Session, user_id: str, day: date) -> Optional[DailyCheckIn]:
    return (
        db.query(DailyCheckIn)
        .filter(DailyCheckIn.user_id == user_id, DailyCheckIn.date == day)
        .first()
    )


@router.put("/{day}", response_model=CheckInRead)
def upsert_check_in(
    day: date,
    payload: CheckInUpsert,
    user_id: str = Depends(get_user_id),
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
):
    """Save the check-in for `day`, overwriting an earlier one for the same day.

    If another request inserts the same day between our lookup and our
    insert, uq_checkin_user_date rejects ours and the write is retried as
    an update of the row that won.
    """
    if day > today:
        raise HTTPException(status_code=422, detail="Cannot check in for a future day")

    data = payload.model_dump()
    try:
        row = _find_check_in(db, user_id, day)
        if not row:
            row = DailyCheckIn(user_id=user_id, date=day, **data)
            db.add(row)
            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                logger.info("Check-in for %s on %s created concurrently, updating", user_id, day)
                row = _find_check_in(db, user_id, day)
                if row is None:
                    raise
                for field, value in data.items():
                    setattr(row, field, value)
                db.commit()
        else:
            for field, value in data.items():
                setattr(row, field, value)
            db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to save check-in for %s on %s", user_id, day)
        raise HTTPException(status_code=503, detail="Failed to save check-in")
    db.refresh(row)
    return row
