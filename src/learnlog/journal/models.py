"""Core data models for the learning log.

A ``Log`` is one dated journal entry. ``LogDraft`` is what the composition
form hands over before an id exists. ``PeriodTab`` and ``SortOrder`` are the
two enumerated selections of the dashboard.
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field
from datetime import date
from enum import StrEnum
from typing import Any

from .dates import today_iso

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Serialized key order, kept stable so stored JSON diffs cleanly
LOG_FIELDS = ("id", "title", "date", "tags", "content", "images", "pinned")
EDITABLE_FIELDS = frozenset(LOG_FIELDS) - {"id"}


class PeriodTab(StrEnum):
    """Which period of the collection is visible."""

    TODAY = "today"
    WEEK = "week"  # Monday-start week up to today
    ALL = "all"


class SortOrder(StrEnum):
    """Date ordering of the non-pinned list."""

    NEW = "new"  # Later dates first
    OLD = "old"  # Earlier dates first


def is_iso_date(value: Any) -> bool:
    """Whether *value* is a real calendar date written as ``YYYY-MM-DD``."""
    if not isinstance(value, str) or not _ISO_DATE_RE.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def _str_list(name: str, value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise ValueError(f"{name} must be a list of strings")
    if not all(isinstance(item, str) for item in value):
        raise ValueError(f"{name} must be a list of strings")
    return list(value)


def _check_entry_fields(entry: Log | LogDraft) -> None:
    if not isinstance(entry.title, str) or not entry.title.strip():
        raise ValueError("Title must be a non-empty string")
    if not is_iso_date(entry.date):
        raise ValueError(f"Date must be a valid YYYY-MM-DD calendar date, got {entry.date!r}")
    if not isinstance(entry.content, str):
        raise ValueError("Content must be a string")
    if not isinstance(entry.pinned, bool):
        raise ValueError("Pinned must be a boolean")
    entry.tags = _str_list("Tags", entry.tags)
    entry.images = _str_list("Images", entry.images)


@dataclass
class LogDraft:
    """Fields supplied by the composition or edit form.

    Attributes:
        title: Short heading, required.
        date: ``YYYY-MM-DD``; defaults to today.
        tags: Free-text labels in the order the user entered them.
        content: Body text.
        images: Embedded image references (data URLs).
        pinned: Whether the log starts pinned.
    """

    title: str
    date: str = field(default_factory=today_iso)
    tags: list[str] = field(default_factory=list)
    content: str = ""
    images: list[str] = field(default_factory=list)
    pinned: bool = False

    def __post_init__(self):
        _check_entry_fields(self)


@dataclass
class Log:
    """A single journal entry.

    ``id`` is assigned once at creation and never changes. ``tags`` and
    ``images`` are always lists, never ``None``.
    """

    id: str
    title: str
    date: str
    tags: list[str] = field(default_factory=list)
    content: str = ""
    images: list[str] = field(default_factory=list)
    pinned: bool = False

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValueError("Id must be a non-empty string")
        _check_entry_fields(self)

    @classmethod
    def from_draft(cls, log_id: str, draft: LogDraft) -> Log:
        return cls(
            id=log_id,
            title=draft.title,
            date=draft.date,
            tags=list(draft.tags),
            content=draft.content,
            images=list(draft.images),
            pinned=draft.pinned,
        )

    @classmethod
    def from_dict(cls, data: Any) -> Log:
        """Build a Log from its stored JSON object.

        Absent or null ``tags``/``images`` become empty lists and absent ``pinned``
        becomes False. Anything else missing or mistyped raises ValueError.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Log record must be an object, got {type(data).__name__}")
        for key in ("id", "title", "date"):
            if key not in data:
                raise ValueError(f"Log record is missing {key!r}")
        pinned = data.get("pinned")
        return cls(
            id=data["id"],
            title=data["title"],
            date=data["date"],
            tags=data.get("tags"),
            content=data.get("content") if data.get("content") is not None else "",
            images=data.get("images"),
            pinned=False if pinned is None else pinned,
        )

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        return {key: data[key] for key in LOG_FIELDS}

    def __repr__(self) -> str:
        preview = self.title[:30] + "..." if len(self.title) > 30 else self.title
        pin = ", pinned" if self.pinned else ""
        return f"Log(id='{self.id}', date='{self.date}', title='{preview}'{pin})"
