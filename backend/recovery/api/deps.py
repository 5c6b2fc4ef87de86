from datetime import date
from typing import Optional

from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from recovery.core.config import settings
from recovery.core.time_utils import today_local
from recovery.db import get_db
from recovery.store import SqlRecordStore, StoreError


def get_user_id(x_user_id: Optional[str] = Header(None)) -> str:
    # Authentication happens upstream; the gateway forwards the user id
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Missing X-User-Id header")
    return x_user_id.strip()


def get_store(db: Session = Depends(get_db)) -> SqlRecordStore:
    return SqlRecordStore(db)


def get_timezone(
    user_id: str = Depends(get_user_id),
    store: SqlRecordStore = Depends(get_store),
) -> str:
    """The caller's profile timezone, or the server default without a profile."""
    try:
        profile = store.fetch_recovery_profile(user_id)
    except StoreError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return profile.timezone if profile else settings.timezone


def get_today(tz_name: str = Depends(get_timezone)) -> date:
    return today_local(tz_name)
