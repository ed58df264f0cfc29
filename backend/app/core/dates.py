from datetime import date, datetime, timedelta

from app.core.config import settings


def monday_of(d: date) -> date:
    # Monday = 0, Sunday = 6
    return d - timedelta(days=d.weekday())


def week_end(week_start: date) -> date:
    """Sunday of the week starting on `week_start`'s Monday."""
    return monday_of(week_start) + timedelta(days=6)


def week_days(week_start: date) -> list[date]:
    """
    All seven dates of the week, Monday first.
    Example: 2025-01-08 -> [2025-01-06, ..., 2025-01-12]
    """
    start = monday_of(week_start)
    return [start + timedelta(days=i) for i in range(7)]


def weeks_back(end: date, count: int) -> list[date]:
    """Mondays of the last `count` weeks up to and including `end`'s week, oldest first."""
    last = monday_of(end)
    return [last - timedelta(weeks=count - 1 - i) for i in range(count)]


def format_week_range(week_start: date) -> str:
    """
    Human label for a week.
    Example: 2025-01-06 -> 'Jan 6 - Jan 12, 2025'
    """
    start = monday_of(week_start)
    end = week_end(start)
    return f"{start.strftime('%b')} {start.day} - {end.strftime('%b')} {end.day}, {end.year}"


def format_display_date(d: date, today: date | None = None) -> str:
    """'Today' for today, otherwise e.g. 'Mon, Jan 6'."""
    if d == (today or local_today(settings.timezone)):
        return "Today"
    return f"{d.strftime('%a, %b')} {d.day}"


def local_today(tz_name: str | None = None) -> date:
    """Current date in the given tz.

    - If `tz_name` is 'local' or None: use system local timezone.
    - If `tz_name` is IANA tz name (e.g., 'America/New_York'): use that.
    """
    if tz_name and tz_name != "local":
        from zoneinfo import ZoneInfo
        return datetime.now(ZoneInfo(tz_name)).date()
    return date.today()
