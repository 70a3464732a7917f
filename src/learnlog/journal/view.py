"""View derivation: what the dashboard shows for a given selection.

Everything here is a pure function of the log collection and the
selection. Nothing mutates the logs it is handed.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date

from .dates import start_of_week_iso, today_iso
from .models import Log, PeriodTab, SortOrder


@dataclass(frozen=True)
class PeriodCounts:
    """Entries per period tab over the unfiltered collection."""

    today: int = 0
    week: int = 0
    all: int = 0


@dataclass(frozen=True)
class LogView:
    """The derived collections to render.

    Attributes:
        pinned: Matching pinned logs, in collection order.
        normal: Matching non-pinned logs, sorted by date.
        counts: Per-period totals, independent of every filter.
    """

    pinned: list[Log] = field(default_factory=list)
    normal: list[Log] = field(default_factory=list)
    counts: PeriodCounts = field(default_factory=PeriodCounts)

    @property
    def is_empty(self) -> bool:
        return not self.pinned and not self.normal


def in_period(log: Log, tab: PeriodTab, today: str, week_start: str) -> bool:
    if tab == PeriodTab.TODAY:
        return log.date == today
    if tab == PeriodTab.WEEK:
        return week_start <= log.date <= today
    return True


def match_query(log: Log, query: str) -> bool:
    """Case-insensitive substring match over title and content.

    Title and content are searched as one text joined by a space, so a
    query may straddle the end of the title and the start of the content.
    """
    needle = query.strip().casefold()
    if not needle:
        return True
    haystack = f"{log.title} {log.content}".casefold()
    return needle in haystack


def match_tags(log: Log, selected_tags: Collection[str]) -> bool:
    """True when the log carries every selected tag."""
    if not selected_tags:
        return True
    return set(selected_tags).issubset(log.tags)


def sort_logs(logs: Iterable[Log], order: SortOrder) -> list[Log]:
    """Stable sort by date; ties keep their collection order."""
    return sorted(logs, key=lambda log: log.date, reverse=order == SortOrder.NEW)


def count_periods(logs: Sequence[Log], today: date | str | None = None) -> PeriodCounts:
    t0 = today_iso(today)
    w0 = start_of_week_iso(t0)
    return PeriodCounts(
        today=sum(1 for log in logs if log.date == t0),
        week=sum(1 for log in logs if w0 <= log.date <= t0),
        all=len(logs),
    )


def collect_tags(logs: Iterable[Log]) -> list[str]:
    """Every distinct tag, in the order it first appears."""
    seen: dict[str, None] = {}
    for log in logs:
        for tag in log.tags:
            seen.setdefault(tag, None)
    return list(seen)


def derive_view(
    logs: Sequence[Log],
    tab: PeriodTab = PeriodTab.ALL,
    query: str = "",
    selected_tags: Collection[str] = (),
    sort: SortOrder = SortOrder.NEW,
    today: date | str | None = None,
) -> LogView:
    """Partition, filter and sort *logs* for the current selection.

    Args:
        logs: The full collection, in stored order.
        tab: Period filter.
        query: Free-text filter; blank means no filter.
        selected_tags: Tags a log must all carry; empty means no filter.
        sort: Ordering of the non-pinned list. Pinned logs are never sorted.
        today: Reference date, defaults to the local date.

    Returns:
        LogView with pinned and normal lists and per-period counts.
    """
    t0 = today_iso(today)
    w0 = start_of_week_iso(t0)

    def visible(log: Log) -> bool:
        return in_period(log, tab, t0, w0) and match_query(log, query) and match_tags(log, selected_tags)

    pinned = [log for log in logs if log.pinned and visible(log)]
    normal = sort_logs((log for log in logs if not log.pinned and visible(log)), sort)
    return LogView(pinned=pinned, normal=normal, counts=count_periods(logs, t0))
