"""Configuration dataclasses for the journal controller and its views.

These are pure data containers with sensible defaults. The CLI fills them
from the validated application config; tests build them directly.
"""

from __future__ import annotations

from dataclasses import dataclass

from .models import PeriodTab, SortOrder


@dataclass
class JournalConfig:
    """Settings for loading and seeding the log collection.

    Attributes:
        storage_key: Name of the storage slot holding the collection.
        seed_on_empty: Install the example logs when storage is empty.
        persist_seed: Write the example logs right away instead of on the
            first mutation.
    """

    storage_key: str = "learning_logs_v1"
    seed_on_empty: bool = True
    persist_seed: bool = False


@dataclass
class DisplayConfig:
    """Settings for the initial selection and card rendering.

    Attributes:
        default_tab: Period tab selected on start.
        default_sort: Sort order selected on start.
        max_thumbnails: Image markers shown on a card before "+N".
        preview_chars: Content characters shown on a card.
    """

    default_tab: PeriodTab = PeriodTab.ALL
    default_sort: SortOrder = SortOrder.NEW
    max_thumbnails: int = 2
    preview_chars: int = 80
