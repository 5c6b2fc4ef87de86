from datetime import date, datetime, timedelta, timezone

import pytest

from recovery.metrics.goals import (
    days_until_target,
    describe_days_until,
    goal_progress,
    set_completion,
)
from recovery.metrics.records import Goal


DAY0 = date(2025, 1, 1)


def make_goal(target_offset=None, **kwargs):
    target = DAY0 + timedelta(days=target_offset) if target_offset is not None else None
    return Goal(
        id=1,
        title="Go to a meeting every week",
        created_at=datetime(2025, 1, 1, 9, 30),
        target_date=target,
        **kwargs,
    )


def on_day(n):
    return DAY0 + timedelta(days=n)


def test_halfway_to_target():
    assert goal_progress(make_goal(10), on_day(5)) == 50.0


def test_past_target_is_capped_at_100():
    assert goal_progress(make_goal(10), on_day(15)) == 100.0


def test_before_creation_is_floored_at_0():
    assert goal_progress(make_goal(10), on_day(-2)) == 0.0


def test_no_target_date_means_no_progress():
    assert goal_progress(make_goal(None), on_day(5)) == 0.0


def test_completed_goal_is_done():
    goal = make_goal(None, is_completed=True, completed_date=on_day(3))
    assert goal_progress(goal, on_day(3)) == 100.0


def test_target_on_creation_day_is_reached():
    assert goal_progress(make_goal(0), on_day(0)) == 100.0
    assert goal_progress(make_goal(-4), on_day(2)) == 100.0
    assert goal_progress(make_goal(0), on_day(-1)) == 0.0


def test_days_left_labels():
    today = on_day(0)
    assert describe_days_until(days_until_target(today, today)) == "Due today"
    assert describe_days_until(days_until_target(on_day(1), today)) == "1 day left"
    assert describe_days_until(days_until_target(on_day(12), today)) == "12 days left"
    assert describe_days_until(days_until_target(on_day(-3), today)) == "3 days overdue"


def test_set_completion_stamps_and_clears_date():
    done = set_completion(make_goal(10), True, on_day(4))
    assert done.is_completed and done.completed_date == on_day(4)

    reopened = set_completion(done, False, on_day(6))
    assert not reopened.is_completed and reopened.completed_date is None


def test_completed_date_must_match_completion():
    with pytest.raises(ValueError):
        make_goal(10, is_completed=True)
    with pytest.raises(ValueError):
        make_goal(10, completed_date=on_day(2))


def test_aware_created_at_is_read_in_the_users_timezone():
    # 05:00 UTC on Jan 2 is still 18:00 on Jan 1 in Pago Pago (UTC-11)
    goal = Goal(
        id=2,
        title="Finish step one",
        created_at=datetime(2025, 1, 2, 5, 0, tzinfo=timezone.utc),
        target_date=DAY0,
    )
    assert goal_progress(goal, DAY0, "Pacific/Pago_Pago") == 100.0
    # read as a UTC day the goal would not exist yet
    assert goal_progress(goal, DAY0) == 0.0


def test_progress_uses_local_creation_day():
    # 20:00 UTC on Jan 1 is already Jan 2 in Tokyo (UTC+9)
    goal = Goal(
        id=3,
        title="Journal daily",
        created_at=datetime(2025, 1, 1, 20, 0, tzinfo=timezone.utc),
        target_date=on_day(11),
    )
    assert goal_progress(goal, on_day(6), "Asia/Tokyo") == 50.0


def test_naive_created_at_is_taken_as_utc():
    goal = Goal(id=4, title="x", created_at=datetime(2025, 1, 1, 23, 0), target_date=on_day(10))
    # 23:00 UTC is Jan 2 in Tokyo
    assert goal_progress(goal, on_day(6), "Asia/Tokyo") == pytest.approx(5 / 9 * 100)
    assert goal_progress(goal, on_day(5), "UTC") == 50.0
