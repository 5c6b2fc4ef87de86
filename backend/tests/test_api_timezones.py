"""Day boundaries follow the caller's profile timezone, not the server's.

The server runs in UTC here (see conftest). Pacific/Kiritimati is UTC+14
and Pacific/Pago_Pago UTC-11, so the two never share a calendar day.
"""
from datetime import timedelta

from recovery.core.time_utils import today_local


AHEAD = "Pacific/Kiritimati"
BEHIND = "Pacific/Pago_Pago"


def set_timezone(client, tz_name):
    r = client.put("/profile/", json={"timezone": tz_name})
    assert r.status_code == 200, r.text


def test_zones_never_share_a_day():
    assert today_local(AHEAD) > today_local(BEHIND)


def test_check_in_for_local_today_is_accepted(client):
    set_timezone(client, AHEAD)
    local_today = today_local(AHEAD)

    r = client.put(f"/checkins/{local_today.isoformat()}", json={"mood_score": 7})
    assert r.status_code == 200, r.text

    r = client.get("/checkins/today")
    assert r.status_code == 200
    assert r.json()["date"] == local_today.isoformat()

    stats = client.get("/stats/dashboard").json()
    assert stats["streak"] == 1
    assert stats["average_mood"] == 7.0


def test_day_ahead_of_profile_timezone_is_future(client):
    set_timezone(client, BEHIND)
    r = client.put(f"/checkins/{today_local(AHEAD).isoformat()}", json={"mood_score": 7})
    assert r.status_code == 422


def test_streak_counts_back_from_local_today(client):
    set_timezone(client, AHEAD)
    local_today = today_local(AHEAD)
    for n in range(3):
        day = (local_today - timedelta(days=n)).isoformat()
        assert client.put(f"/checkins/{day}", json={"mood_score": 5}).status_code == 200

    assert client.get("/stats/dashboard").json()["streak"] == 3

    r = client.get("/stats/progress", params={"days": 7})
    assert r.json()["end_date"] == local_today.isoformat()
    assert r.json()["check_in_count"] == 3


def test_timezone_is_per_user(client):
    set_timezone(client, BEHIND)
    other = {"X-User-Id": "user-2"}
    assert client.put("/profile/", json={"timezone": AHEAD}, headers=other).status_code == 200

    day = today_local(AHEAD).isoformat()
    assert client.put(f"/checkins/{day}", json={"mood_score": 5}).status_code == 422
    assert client.put(f"/checkins/{day}", json={"mood_score": 5}, headers=other).status_code == 200


def test_goal_due_local_today_is_complete_progress(client):
    # created "now" in UTC, which can already be tomorrow for this user
    for tz_name in (BEHIND, AHEAD):
        set_timezone(client, tz_name)
        local_today = today_local(tz_name)
        r = client.post("/goals/", json={"title": f"Due in {tz_name}", "target_date": local_today.isoformat()})
        assert r.status_code == 200, r.text
        assert r.json()["progress"] == 100
        assert r.json()["days_left_label"] == "Due today"


def test_goal_toggle_stamps_local_today(client):
    set_timezone(client, AHEAD)
    goal = client.post("/goals/", json={"title": "Read a recovery book"}).json()
    r = client.post(f"/goals/{goal['id']}/toggle")
    assert r.json()["completed_date"] == today_local(AHEAD).isoformat()


def test_days_clean_counts_in_profile_timezone(client):
    start = today_local(AHEAD) - timedelta(days=10)
    r = client.put("/profile/", json={"timezone": AHEAD, "recovery_start_date": start.isoformat()})
    assert r.json()["days_clean"] == 10
    assert client.get("/profile/").json()["days_clean"] == 10


def test_profile_lookup_failure_is_503(client, monkeypatch):
    from recovery.store import SqlRecordStore, StoreError

    def broken_fetch(self, user_id):
        raise StoreError("fetching recovery profile failed: OperationalError")

    monkeypatch.setattr(SqlRecordStore, "fetch_recovery_profile", broken_fetch)
    assert client.get("/checkins/today").status_code == 503
