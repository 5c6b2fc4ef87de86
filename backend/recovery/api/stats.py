from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from recovery.api.deps import get_store, get_today, get_user_id
from recovery.core.config import settings
from recovery.core.constants import DASHBOARD_RECENT_CHECKINS, PROGRESS_WINDOWS
from recovery.core.time_utils import window_start
from recovery.metrics.aggregates import average_mood, daily_series, summarize_window, top_triggers
from recovery.metrics.streaks import calculate_streak, dates_from_check_ins
from recovery.schemas.check_in import CheckInRead
from recovery.schemas.stats import DailyPoint, DashboardStats, ProgressStats, TriggerCount
from recovery.store import SqlRecordStore, StoreError


router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("/dashboard", response_model=DashboardStats)
def get_dashboard_stats(
    user_id: str = Depends(get_user_id),
    today: date = Depends(get_today),
    store: SqlRecordStore = Depends(get_store),
):
    """
    Headline numbers for the dashboard.

    - total_check_ins: all-time count.
    - average_mood: over the last `dashboard_mood_window_days` days, one decimal.
    - streak: consecutive days up to today, read from the most recent
      `streak_window_days` check-ins.
    - recent_check_ins: the latest check-ins up to today.
    """
    try:
        total = store.fetch_check_in_count(user_id)
        mood_window = store.fetch_check_ins(
            user_id, since=window_start(today, settings.dashboard_mood_window_days)
        )
        history = store.fetch_check_ins(user_id, limit=settings.streak_window_days)
    except StoreError as e:
        raise HTTPException(status_code=503, detail=str(e))

    # rows dated after today would hide today's check-in from the streak
    history = [c for c in history if c.date <= today]
    mood_window = [c for c in mood_window if c.date <= today]

    return DashboardStats(
        total_check_ins=total,
        average_mood=round(average_mood(mood_window), 1),
        streak=calculate_streak(dates_from_check_ins(history), today),
        recent_check_ins=[
            CheckInRead.model_validate(c) for c in history[:DASHBOARD_RECENT_CHECKINS]
        ],
    )


@router.get("/progress", response_model=ProgressStats)
def get_progress_stats(
    days: int = Query(30),
    user_id: str = Depends(get_user_id),
    today: date = Depends(get_today),
    store: SqlRecordStore = Depends(get_store),
):
    """Averages, consistency, trigger counts and chart series for the last `days` days."""
    if days not in PROGRESS_WINDOWS:
        raise HTTPException(
            status_code=422,
            detail=f"days must be one of {', '.join(str(d) for d in PROGRESS_WINDOWS)}",
        )
    start = window_start(today, days)
    try:
        check_ins = store.fetch_check_ins(user_id, since=start)
    except StoreError as e:
        raise HTTPException(status_code=503, detail=str(e))

    # drop anything dated after today (clock skew between clients)
    check_ins = [c for c in check_ins if c.date <= today]
    summary = summarize_window(check_ins, days)

    return ProgressStats(
        window_days=days,
        start_date=start,
        end_date=today,
        check_in_count=summary.check_in_count,
        average_mood=round(summary.average_mood, 1),
        average_energy=round(summary.average_energy, 1),
        average_sleep=round(summary.average_sleep, 1),
        consistency_percent=summary.consistency_percent,
        trigger_counts=summary.trigger_counts,
        top_triggers=[TriggerCount(trigger=t, count=n) for t, n in top_triggers(summary.trigger_counts)],
        series=[DailyPoint(**p) for p in daily_series(check_ins)],
        integrity_warning=summary.integrity_warning,
    )
