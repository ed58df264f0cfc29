from datetime import date

from app.core.dates import (
    format_display_date,
    format_week_range,
    monday_of,
    week_days,
    week_end,
    weeks_back,
)


def test_monday_of():
    assert monday_of(date(2025, 1, 6)) == date(2025, 1, 6)   # Monday
    assert monday_of(date(2025, 1, 8)) == date(2025, 1, 6)   # Wednesday
    assert monday_of(date(2025, 1, 12)) == date(2025, 1, 6)  # Sunday


def test_week_days_and_end():
    days = week_days(date(2025, 1, 8))
    assert len(days) == 7
    assert days[0] == date(2025, 1, 6)
    assert days[-1] == date(2025, 1, 12)
    assert week_end(date(2025, 1, 6)) == date(2025, 1, 12)


def test_week_crossing_year():
    assert monday_of(date(2025, 1, 1)) == date(2024, 12, 30)
    assert format_week_range(date(2024, 12, 30)) == "Dec 30 - Jan 5, 2025"


def test_format_week_range():
    assert format_week_range(date(2025, 1, 6)) == "Jan 6 - Jan 12, 2025"


def test_format_display_date():
    today = date(2025, 1, 8)
    assert format_display_date(today, today=today) == "Today"
    assert format_display_date(date(2025, 1, 6), today=today) == "Mon, Jan 6"


def test_weeks_back_oldest_first():
    mondays = weeks_back(date(2025, 1, 8), 3)
    assert mondays == [date(2024, 12, 23), date(2024, 12, 30), date(2025, 1, 6)]


def test_format_display_date_defaults_to_configured_today():
    from app.core.config import settings
    from app.core.dates import local_today

    assert format_display_date(local_today(settings.timezone)) == "Today"
