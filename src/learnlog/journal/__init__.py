"""Learning-log journal core.

Provides the Log model, the LogStore persistence adapter, pure view
derivation (filters, sort, period counts) and the JournalController
that ties user actions to mutations and saves.
"""

from .config import DisplayConfig, JournalConfig
from .controller import JournalController, MenuClosed, MenuOpen, Selection
from .models import Log, LogDraft, PeriodTab, SortOrder
from .store import LogStore
from .view import LogView, PeriodCounts, derive_view

__all__ = [
    "DisplayConfig",
    "JournalConfig",
    "JournalController",
    "Log",
    "LogDraft",
    "LogStore",
    "LogView",
    "MenuClosed",
    "MenuOpen",
    "PeriodCounts",
    "PeriodTab",
    "Selection",
    "SortOrder",
    "derive_view",
]
