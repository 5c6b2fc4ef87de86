import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from recovery.api.deps import get_user_id
from recovery.core.constants import DEFAULT_COPING_STRATEGIES, STRATEGY_CATEGORIES
from recovery.db import get_db
from recovery.models.coping_strategy import CopingStrategy
from recovery.schemas.coping_strategy import StrategyCreate, StrategyRating, StrategyRead


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/strategies", tags=["strategies"])


def ensure_library(db: Session, user_id: str) -> None:
    """Copy the built-in strategies into the user's library once.

    Each user gets their own rows so usage counts and ratings stay personal.
    """
    has_builtin = (
        db.query(CopingStrategy.id)
        .filter(CopingStrategy.user_id == user_id, CopingStrategy.is_custom.is_(False))
        .first()
    )
    if has_builtin:
        return
    taken = {
        title
        for (title,) in db.query(CopingStrategy.title).filter(CopingStrategy.user_id == user_id)
    }
    for category, title, description in DEFAULT_COPING_STRATEGIES:
        if title in taken:
            continue
        db.add(
            CopingStrategy(
                user_id=user_id,
                category=category,
                title=title,
                description=description,
                is_custom=False,
                usage_count=0,
            )
        )
    try:
        db.commit()
    except IntegrityError:
        # a parallel request provisioned the library first
        db.rollback()
        logger.info("Strategy library for %s already provisioned", user_id)


def _get_owned(db: Session, strategy_id: int, user_id: str) -> CopingStrategy:
    row = (
        db.query(CopingStrategy)
        .filter(CopingStrategy.id == strategy_id, CopingStrategy.user_id == user_id)
        .first()
    )
    if not row:
        raise HTTPException(status_code=404, detail="Strategy not found")
    return row


@router.get("/", response_model=list[StrategyRead])
def list_strategies(
    category: Optional[str] = Query(None),
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    """Built-in strategies first, then custom ones, each by category and title."""
    if category == "All":
        category = None
    if category is not None and category not in STRATEGY_CATEGORIES:
        raise HTTPException(
            status_code=422,
            detail=f"category must be 'All' or one of: {', '.join(STRATEGY_CATEGORIES)}",
        )
    ensure_library(db, user_id)
    query = db.query(CopingStrategy).filter(CopingStrategy.user_id == user_id)
    if category is not None:
        query = query.filter(CopingStrategy.category == category)
    return query.order_by(CopingStrategy.is_custom, CopingStrategy.category, CopingStrategy.title).all()


@router.post("/", response_model=StrategyRead)
def create_strategy(
    payload: StrategyCreate,
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    ensure_library(db, user_id)
    row = CopingStrategy(
        user_id=user_id,
        title=payload.title,
        description=payload.description,
        category=payload.category,
        is_custom=True,
        usage_count=0,
    )
    db.add(row)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="A strategy with this title already exists")
    db.refresh(row)
    return row


@router.post("/{strategy_id}/use", response_model=StrategyRead)
def use_strategy(
    strategy_id: int,
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    """Count one use and stamp `last_used`."""
    row = _get_owned(db, strategy_id, user_id)
    # increment in SQL so simultaneous uses are all counted
    db.query(CopingStrategy).filter(CopingStrategy.id == row.id).update(
        {
            CopingStrategy.usage_count: CopingStrategy.usage_count + 1,
            CopingStrategy.last_used: datetime.now(timezone.utc),
        },
        synchronize_session=False,
    )
    db.commit()
    db.refresh(row)
    return row


@router.put("/{strategy_id}/rating", response_model=StrategyRead)
def rate_strategy(
    strategy_id: int,
    payload: StrategyRating,
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    row = _get_owned(db, strategy_id, user_id)
    row.effectiveness_rating = payload.rating
    db.commit()
    db.refresh(row)
    return row


@router.delete("/{strategy_id}")
def delete_strategy(
    strategy_id: int,
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    row = _get_owned(db, strategy_id, user_id)
    if not row.is_custom:
        raise HTTPException(status_code=403, detail="Built-in strategies cannot be deleted")
    db.delete(row)
    db.commit()
    return {"message": "Strategy deleted"}
