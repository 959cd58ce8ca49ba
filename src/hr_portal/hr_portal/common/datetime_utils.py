from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch it.
    """
    return date.today()


def iso_date(value: Any) -> Optional[str]:
    """Normalize a date column to 'YYYY-MM-DD'.

    SQL drivers return datetime.date, PostgREST returns strings.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def iso_timestamp(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def month_label(day: date) -> str:
    """Payroll period label, e.g. 'October 2026'."""
    return day.strftime("%B %Y")
