#!/usr/bin/env python3
"""
Seed N weeks of goals and wellness check-ins through the GoalSync API.

Per week (Mon–Sun):
  - three goals (exercise, reading, deep work) with a target day count
  - completions ticked on most target days
  - one check-in per day up to today

Wellness drifts from rested to stretched over the block, so the
analytics endpoints show a rising burnout trend:
  stress 2 → 4, sleep 8h → 6h, mood 4 → 2, time spent 7h → 11h

Usage examples:
  - Against a local server:
      python scripts/seed_demo_weeks.py --base-url http://localhost:8000
  - Different account / length:
      python scripts/seed_demo_weeks.py --base-url http://localhost:8000 --email me@x.dev --weeks 16
"""

from __future__ import annotations

import argparse
import datetime as dt
import sys

try:
    import requests  # type: ignore
except Exception as exc:  # pragma: no cover
    print("This script requires the 'requests' package.\nInstall with: pip install requests", file=sys.stderr)
    raise


GOALS = [
    ("Exercise", 4),
    ("Read 20 pages", 5),
    ("Deep work block", 5),
]


def monday_of_week(d: dt.date) -> dt.date:
    return d - dt.timedelta(days=d.weekday())


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def half_hours(x: float) -> float:
    return round(x * 2) / 2


class Api:
    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()

    def call(self, method: str, path: str, payload: dict | None = None) -> dict | None:
        url = f"{self.base_url}/{path.lstrip('/')}"
        r = self.session.request(method, url, json=payload, timeout=15)
        if r.status_code >= 300:
            raise RuntimeError(f"{method} {path} -> HTTP {r.status_code}: {r.text}")
        return r.json() if r.content else None

    def authenticate(self, email: str, password: str) -> None:
        try:
            data = self.call("POST", "auth/login", {"email": email, "password": password})
        except RuntimeError:
            data = self.call("POST", "auth/register", {"email": email, "password": password, "full_name": "Demo"})
        self.session.headers["Authorization"] = f"Bearer {data['token']}"


def seed_week(api: Api, week_start: dt.date, t: float, today: dt.date) -> None:
    for idx, (title, target) in enumerate(GOALS):
        goal = api.call("POST", "goals/", {"title": title, "target_days": target, "week_start": week_start.isoformat()})
        # Tick the first `target` days, dropping more as load rises
        done_days = max(1, round(target * lerp(1.0, 0.5, t))) - (idx % 2)
        for dow in range(done_days):
            day = week_start + dt.timedelta(days=dow)
            if day > today:
                break
            api.call("PUT", f"goals/{goal['id']}/completions/{day.isoformat()}", {"completed": True})

    for dow in range(7):
        day = week_start + dt.timedelta(days=dow)
        if day > today:
            break
        weekend = dow >= 5
        payload = {
            "stress_level": max(1, round(lerp(2, 4, t)) - (1 if weekend else 0)),
            "sleep_hours": half_hours(lerp(8, 6, t) + (1 if weekend else 0)),
            "mood_level": min(5, round(lerp(4, 2, t)) + (1 if weekend else 0)),
            "time_spent_hours": half_hours(lerp(7, 11, t) * (0.5 if weekend else 1)),
        }
        api.call("PUT", f"checkins/{day.isoformat()}", payload)


def main() -> None:
    ap = argparse.ArgumentParser(description="Seed weeks of goals and check-ins")
    ap.add_argument("--base-url", required=True, help="API base URL (e.g., http://localhost:8000)")
    ap.add_argument("--email", default="demo@goalsync.dev")
    ap.add_argument("--password", default="demo-password")
    ap.add_argument("--weeks", type=int, default=8)
    args = ap.parse_args()

    api = Api(args.base_url)
    api.authenticate(args.email, args.password)

    today = dt.date.today()
    this_monday = monday_of_week(today)
    week_starts = [this_monday - dt.timedelta(weeks=args.weeks - 1 - i) for i in range(args.weeks)]

    for i, ws in enumerate(week_starts):
        seed_week(api, ws, i / max(1, args.weeks - 1), today)

    summary = api.call("GET", "analytics/summary")
    print(f"Seed complete: {args.weeks} weeks created. Latest burnout: {summary['latest_burnout_score']} ({summary['level']})")


if __name__ == "__main__":
    main()
