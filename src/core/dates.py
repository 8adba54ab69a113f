"""Date helpers shared by the calculation engines.

Every helper takes the reference date explicitly; nothing here reads the
wall clock.
"""
from __future__ import annotations

from datetime import date, datetime, timedelta

from django.utils import timezone

MONTH_NAMES = [
    "janeiro", "fevereiro", "março", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
]

FRIDAY = 4


def as_date(value) -> date | None:
    """Coerce a date, datetime or ISO string to a ``date`` (local time for aware datetimes)."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            return timezone.localtime(value).date()
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def period_key(year: int, month: int) -> str:
    return f"{year}-{month:02d}"


def month_name(month: int) -> str:
    return MONTH_NAMES[month - 1]


def last_friday(as_of: date) -> date:
    """Most recent Friday on or before ``as_of``."""
    return as_of - timedelta(days=(as_of.weekday() - FRIDAY) % 7)


def is_month_past(year: int, month: int, as_of: date) -> bool:
    """True when (year, month) is before or equal to the month of ``as_of``."""
    return (year, month) <= (as_of.year, as_of.month)
