from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Optional

from ..core.constants import DATE_KEY_FORMAT, MONTH_KEY_FORMAT, MONTH_NAMES_PT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_KEY_FORMAT).date()


def date_key(d: date) -> str:
    return d.strftime(DATE_KEY_FORMAT)


def parse_date_key(key: str) -> Optional[date]:
    """Date for a stored record key, or None.

    Only zero-padded YYYY-MM-DD keys are accepted, the same shape `date_key`
    writes, so "2024-2-5" is rejected.
    """
    try:
        d = parse_iso_date(key)
    except ValueError:
        return None
    return d if date_key(d) == key else None


def month_key(d: date) -> str:
    return d.strftime(MONTH_KEY_FORMAT)


def parse_month(value: Optional[str], *, default: date) -> date:
    """Parse YYYY-MM into the first day of that month.

    Falls back to the month of `default` when the value is missing or invalid.
    """
    v = (value or "").strip()
    if v:
        try:
            return datetime.strptime(v, MONTH_KEY_FORMAT).date()
        except ValueError:
            pass
    return default.replace(day=1)


def month_start(d: date) -> date:
    return d.replace(day=1)


def month_end(d: date) -> date:
    return d.replace(day=calendar.monthrange(d.year, d.month)[1])


def days_in_month(d: date) -> list[date]:
    start = month_start(d)
    return [start + timedelta(days=i) for i in range(month_end(d).day)]


def add_months(d: date, months: int) -> date:
    """Shift to the first day of the month `months` away."""
    index = d.year * 12 + (d.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def calendar_days(d: date) -> list[date]:
    """Full Monday-start weeks covering the month of `d`."""
    start = month_start(d)
    end = month_end(d)
    grid_start = start - timedelta(days=start.weekday())
    grid_end = end + timedelta(days=6 - end.weekday())
    return [grid_start + timedelta(days=i) for i in range((grid_end - grid_start).days + 1)]


def is_weekend(d: date) -> bool:
    # 0 = Monday, 6 = Sunday
    return d.weekday() >= 5


def month_label(d: date) -> str:
    """Portuguese month label, e.g. 'fevereiro 2024'."""
    return f"{MONTH_NAMES_PT[d.month - 1]} {d.year}"


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
