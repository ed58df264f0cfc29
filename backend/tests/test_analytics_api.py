from datetime import date, timedelta

from app.core.dates import format_week_range, monday_of

MODERATE_DAY = {"stress_level": 3, "sleep_hours": 8, "mood_level": 3, "time_spent_hours": 8}
OVERLOADED_DAY = {"stress_level": 5, "sleep_hours": 4, "mood_level": 1, "time_spent_hours": 16}


def test_weekly_empty_user(client, auth_headers):
    r = client.get("/analytics/weekly", headers=auth_headers)
    assert r.status_code == 200
    points = r.json()
    assert len(points) == 8
    assert points[-1]["week_start"] == monday_of(date.today()).isoformat()
    assert all(p["total_goals"] == 0 for p in points)
    assert all(p["goal_completion_pct"] == 0 for p in points)
    assert all(p["avg_burnout_score"] == 0 for p in points)


def test_weekly_completion_and_burnout_average(client, auth_headers):
    wk = monday_of(date.today())
    goal = client.post(
        "/goals/", json={"title": "Stretch", "target_days": 2}, headers=auth_headers
    ).json()
    client.put(
        f"/goals/{goal['id']}/completions/{wk.isoformat()}",
        json={"completed": True},
        headers=auth_headers,
    )
    client.put(f"/checkins/{wk.isoformat()}", json=MODERATE_DAY, headers=auth_headers)
    client.put(f"/checkins/{(wk + timedelta(days=1)).isoformat()}", json=OVERLOADED_DAY, headers=auth_headers)

    points = client.get("/analytics/weekly", params={"weeks": 2}, headers=auth_headers).json()
    assert len(points) == 2
    current = points[-1]
    assert current["total_goals"] == 1
    assert current["goal_completion_pct"] == 50
    # (3.5 + 10.0) / 2 = 6.75 -> 6.8
    assert current["avg_burnout_score"] == 6.8


def test_trend_window(client, auth_headers):
    today = date.today()
    for delta, payload in [(40, OVERLOADED_DAY), (2, OVERLOADED_DAY), (0, MODERATE_DAY)]:
        d = (today - timedelta(days=delta)).isoformat()
        client.put(f"/checkins/{d}", json=payload, headers=auth_headers)

    trend = client.get("/analytics/trend", headers=auth_headers).json()
    assert [p["burnout_score"] for p in trend] == [10.0, 3.5]
    assert trend[-1]["date"] == today.isoformat()
    assert trend[0]["sleep_hours"] == 4.0


def test_summary_uses_latest_score(client, auth_headers):
    empty = client.get("/analytics/summary", headers=auth_headers).json()
    assert empty["latest_burnout_score"] == 0
    assert empty["level"] == "low"

    client.put(f"/checkins/{date.today().isoformat()}", json=OVERLOADED_DAY, headers=auth_headers)
    s = client.get("/analytics/summary", headers=auth_headers).json()
    assert s["latest_burnout_score"] == 10.0
    assert s["level"] == "high"
    assert s["suggestion"].startswith("Consider reducing")


def test_dashboard(client, auth_headers):
    dash = client.get("/dashboard", headers=auth_headers).json()
    wk = monday_of(date.today())
    assert dash["week_start"] == wk.isoformat()
    assert dash["week_label"] == format_week_range(wk)
    assert dash["goals"] == []
    assert dash["today_checkin"] is None
