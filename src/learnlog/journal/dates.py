"""Calendar helpers. All dates travel as ``YYYY-MM-DD`` strings."""

from __future__ import annotations

from datetime import date, timedelta


def _as_date(value: date | str | None) -> date:
    if value is None:
        return date.today()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def today_iso(today: date | str | None = None) -> str:
    """Return today's local date as ``YYYY-MM-DD``."""
    return _as_date(today).isoformat()


def start_of_week_iso(today: date | str | None = None) -> str:
    """Return the Monday of *today*'s week as ``YYYY-MM-DD``.

    On a Sunday this is the Monday six days earlier.
    """
    d = _as_date(today)
    return (d - timedelta(days=d.weekday())).isoformat()


def format_month_day(iso: str) -> str:
    """Render ``2026-02-18`` as ``2月18日`` for card headers."""
    _, month, day = (int(part) for part in iso.split("-"))
    return f"{month}月{day}日"
