"""Resolve period phrases into concrete date ranges.

All boundaries are inclusive and computed from the caller-supplied ``now`` so
resolution stays a pure function of (message, now).
"""

from __future__ import annotations

import calendar
import re
from datetime import date, datetime, timedelta

from deskbot.models import DateRange

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")
_CUSTOM_RANGE_TRIGGERS = ("between", "from", "to")


def this_week_dates(now: datetime | date) -> tuple[str, str]:
    """Return the Sunday-to-Saturday week containing ``now``."""

    today = _as_date(now)
    # date.weekday() is Monday=0; shift so Sunday is day 0.
    days_since_sunday = (today.weekday() + 1) % 7
    start = today - timedelta(days=days_since_sunday)
    end = start + timedelta(days=6)
    return start.isoformat(), end.isoformat()


def this_month_dates(now: datetime | date) -> tuple[str, str]:
    today = _as_date(now)
    return _month_bounds(today.year, today.month)


def this_year_dates(now: datetime | date) -> tuple[str, str]:
    today = _as_date(now)
    return date(today.year, 1, 1).isoformat(), date(today.year, 12, 31).isoformat()


def last_month_dates(now: datetime | date) -> tuple[str, str]:
    """Return the month before ``now``'s month, rolling back across January."""

    today = _as_date(now)
    if today.month == 1:
        return _month_bounds(today.year - 1, 12)
    return _month_bounds(today.year, today.month - 1)


def parse_custom_date_range(message: str) -> tuple[str, str] | None:
    """Take the first two YYYY-MM-DD literals in order of appearance.

    The literals are returned as written: they are neither checked against the
    calendar nor swapped when the end precedes the start.
    """

    found = _ISO_DATE.findall(message)
    if len(found) < 2:
        return None
    return found[0], found[1]


def resolve_period(message: str, now: datetime | date) -> DateRange | None:
    """Resolve the period named in a lower-cased message.

    Returns None when no named period matches and fewer than two literal dates
    are present.
    """

    if "this week" in message:
        return DateRange(*this_week_dates(now), label="This Week")
    if "this month" in message:
        return DateRange(*this_month_dates(now), label="This Month")
    if "this year" in message:
        return DateRange(*this_year_dates(now), label="This Year")
    if "last month" in message:
        return DateRange(*last_month_dates(now), label="Last Month")
    if any(trigger in message for trigger in _CUSTOM_RANGE_TRIGGERS):
        custom = parse_custom_date_range(message)
        if custom is not None:
            start, end = custom
            return DateRange(start, end, label=f"Custom Period ({start} to {end})")
    return None


def _month_bounds(year: int, month: int) -> tuple[str, str]:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1).isoformat(), date(year, month, last_day).isoformat()


def _as_date(value: datetime | date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value
