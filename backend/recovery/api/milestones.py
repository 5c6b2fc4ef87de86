import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException

from recovery.api.deps import get_store, get_today, get_user_id
from recovery.metrics.milestones import award_milestones
from recovery.schemas.milestone import MilestoneAwardRead, MilestoneEvaluation, MilestoneRead
from recovery.store import SqlRecordStore, StoreError


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/milestones", tags=["milestones"])


@router.get("/", response_model=list[MilestoneRead])
def list_milestones(
    user_id: str = Depends(get_user_id),
    store: SqlRecordStore = Depends(get_store),
):
    try:
        milestones = store.fetch_milestones(user_id)
    except StoreError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return [MilestoneRead.model_validate(m) for m in milestones]


@router.post("/evaluate", response_model=MilestoneEvaluation)
def evaluate(
    user_id: str = Depends(get_user_id),
    today: date = Depends(get_today),
    store: SqlRecordStore = Depends(get_store),
):
    """Unlock every milestone the user has earned but not yet received.

    Each new milestone is saved on its own; the response lists the outcome
    per milestone.
    """
    try:
        awards = award_milestones(store, user_id, today)
    except StoreError as e:
        raise HTTPException(status_code=503, detail=str(e))

    return MilestoneEvaluation(
        awards=[
            MilestoneAwardRead(
                milestone=MilestoneRead.model_validate(a.milestone),
                status=a.status,
                error=a.error,
            )
            for a in awards
        ],
        created=sum(1 for a in awards if a.status == "created"),
        failed=sum(1 for a in awards if not a.ok),
    )
