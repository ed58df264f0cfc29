from datetime import date, timedelta
import random

from app.core.burnout import WellnessMetrics, compute_score
from app.core.dates import monday_of, week_days
from app.core.security import hash_password
from app.db import Base, SessionLocal, engine
from app.models.burnout_checkin import BurnoutCheckin
from app.models.daily_completion import DailyCompletion
from app.models.goal import Goal
from app.models.user import User

DEMO_EMAIL = "demo@goalsync.dev"
DEMO_PASSWORD = "demo-password"

DEMO_GOALS = [
    ("Exercise", "30 minutes of movement", 4),
    ("Read", "20 pages", 5),
    ("Deep work block", "2 focused hours", 5),
]


def get_or_create_demo_user(db) -> User:
    user = db.query(User).filter(User.email == DEMO_EMAIL).first()
    if user:
        return user
    user = User(email=DEMO_EMAIL, full_name="Demo User", password_hash=hash_password(DEMO_PASSWORD))
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def clear_demo_data(db, user: User) -> None:
    """Delete the demo user's goals and check-ins so we can reseed cleanly."""
    db.query(BurnoutCheckin).filter(BurnoutCheckin.user_id == user.id).delete()
    db.query(DailyCompletion).filter(DailyCompletion.user_id == user.id).delete()
    db.query(Goal).filter(Goal.user_id == user.id).delete()
    db.commit()


def seed_demo_weeks(db, user: User, weeks: int = 12) -> None:
    """Insert goals, completions and daily check-ins for the last N weeks."""
    today = date.today()
    first_monday = monday_of(today) - timedelta(weeks=weeks - 1)
    checkins = 0

    for week in range(weeks):
        wk = first_monday + timedelta(weeks=week)
        # Later weeks drift toward more stress / longer days
        load = week / max(1, weeks - 1)

        for title, desc, target in DEMO_GOALS:
            goal = Goal(user_id=user.id, title=title, description=desc, target_days=target, week_start=wk)
            db.add(goal)
            db.flush()
            for d in week_days(wk):
                done = d <= today and random.random() < (0.85 - 0.4 * load)
                db.add(DailyCompletion(goal_id=goal.id, user_id=user.id, date=d, completed=done))

        # Skip future days
        for d in week_days(wk):
            if d > today:
                continue
            metrics = WellnessMetrics(
                stress_level=min(5, max(1, round(random.gauss(2 + 2 * load, 0.8)))),
                sleep_hours=round(min(12.0, max(3.0, random.gauss(7.5 - 1.5 * load, 1.0))) * 2) / 2,
                mood_level=min(5, max(1, round(random.gauss(4 - 1.5 * load, 0.8)))),
                time_spent_hours=round(min(16.0, max(4.0, random.gauss(8 + 3 * load, 1.5))) * 2) / 2,
            )
            db.add(
                BurnoutCheckin(
                    user_id=user.id,
                    date=d,
                    stress_level=metrics.stress_level,
                    sleep_hours=metrics.sleep_hours,
                    mood_level=metrics.mood_level,
                    time_spent_hours=metrics.time_spent_hours,
                    burnout_score=compute_score(metrics),
                )
            )
            checkins += 1

    db.commit()
    print(f"Seeded {weeks} demo weeks ({checkins} check-ins) for {DEMO_EMAIL}")


def main():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        user = get_or_create_demo_user(db)
        clear_demo_data(db, user)
        seed_demo_weeks(db, user)
    finally:
        db.close()


if __name__ == "__main__":
    main()
