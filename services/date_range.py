from datetime import date, datetime, timedelta
from typing import List, Union

from dateutil.parser import isoparse

MAX_ITEMS = 9

DateLike = Union[date, str]


def to_date(value: DateLike) -> date:
    """Accept a date or an ISO string (YYYY-MM-DD). Raises ValueError otherwise."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return isoparse(value).date()


def build_date_range(start: DateLike, end: DateLike, limit: int = MAX_ITEMS) -> List[str]:
    """Inclusive list of ISO dates from start to end, capped at `limit`.

    A reversed range yields an empty list; callers treat that as "no results".
    """
    s, e = to_date(start), to_date(end)
    if s > e:
        return []
    count = min((e - s).days + 1, limit)
    return [(s + timedelta(days=i)).isoformat() for i in range(count)]


def short_date(value: DateLike) -> str:
    """1/5/2024 style; the raw value if it isn't a date."""
    try:
        d = to_date(value)
    except (TypeError, ValueError):
        return str(value)
    return f"{d.month}/{d.day}/{d.year}"


def long_date(value: DateLike) -> str:
    """January 5, 2024 style; the raw value if it isn't a date."""
    try:
        d = to_date(value)
    except (TypeError, ValueError):
        return str(value)
    return f"{d:%B} {d.day}, {d.year}"
