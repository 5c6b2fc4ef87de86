from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from recovery.api.deps import get_today, get_user_id
from recovery.core.config import settings
from recovery.core.time_utils import today_local
from recovery.db import get_db
from recovery.metrics.milestones import days_clean, describe_clean_time
from recovery.models.recovery_profile import RecoveryProfile
from recovery.schemas.profile import (
    NotificationPreferences,
    PrivacySettings,
    ProfileRead,
    ProfileUpsert,
)


router = APIRouter(prefix="/profile", tags=["profile"])


def _to_read(row: RecoveryProfile | None, today: date) -> ProfileRead:
    if row is None:
        return ProfileRead(recovery_program=settings.default_recovery_program)
    clean = days_clean(row.recovery_start_date, today)
    # Rows written before preferences existed hold NULL; fall back to defaults
    return ProfileRead(
        recovery_start_date=row.recovery_start_date,
        timezone=row.timezone,
        recovery_program=row.recovery_program,
        privacy_settings=PrivacySettings(**(row.privacy_settings or {})),
        notification_preferences=NotificationPreferences(**(row.notification_preferences or {})),
        days_clean=clean,
        clean_time_label=describe_clean_time(clean),
    )


@router.get("/", response_model=ProfileRead)
def get_profile(
    user_id: str = Depends(get_user_id),
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
):
    return _to_read(db.get(RecoveryProfile, user_id), today)


@router.put("/", response_model=ProfileRead)
def upsert_profile(
    payload: ProfileUpsert,
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    data = payload.model_dump()
    row = db.get(RecoveryProfile, user_id)
    if not row:
        row = RecoveryProfile(user_id=user_id, **data)
        db.add(row)
    else:
        for field, value in data.items():
            setattr(row, field, value)
    db.commit()
    db.refresh(row)
    # days clean is counted in the timezone just saved
    return _to_read(row, today_local(row.timezone))
