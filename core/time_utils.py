# core/time_utils.py
from datetime import datetime, timedelta, timezone, date
from typing import Any, Optional, List
import pytz

from core.config import app_timezone

LOCAL_TZ = pytz.timezone(app_timezone())


def utc_now_iso() -> str:
    """ISO timestamp in UTC with millisecond precision, e.g. 2026-01-05T14:03:11.120Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def now_local() -> datetime:
    return datetime.now(LOCAL_TZ)


def today_local() -> date:
    return now_local().date()


def day_anchor(d: date) -> str:
    """Stored form of a day-granularity date (noon, no offset)."""
    return f"{d.isoformat()}T12:00:00"


def parse_day(value: Any) -> Optional[date]:
    """Calendar day of a stored date string; None when it cannot be parsed.

    Aware timestamps are converted to the app time zone first; naive ones are
    taken as local wall-clock time.
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        return value
    elif isinstance(value, str) and value.strip():
        raw = value.strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(raw)
        except ValueError:
            return None
    else:
        return None
    if dt.tzinfo is not None:
        dt = dt.astimezone(LOCAL_TZ)
    return dt.date()


def trailing_days(end: date, n: int = 7) -> List[date]:
    """The n days ending at `end`, oldest first."""
    return [end - timedelta(days=n - 1 - i) for i in range(n)]
