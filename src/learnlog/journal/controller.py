"""Journal controller: selection state and log mutations.

The controller owns the in-memory log collection. Every mutation is
followed by one full save through the LogStore; every selection change
just updates ``selection`` and the next ``view`` reflects it.
"""

from __future__ import annotations

import dataclasses
import uuid
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from loguru import logger

from learnlog.core.events import (
    LOG_CREATED,
    LOG_DELETED,
    LOG_PIN_TOGGLED,
    LOG_UPDATED,
    PERSISTENCE_FAILED,
    Event,
    EventBus,
)
from learnlog.core.exceptions import PersistenceError

from .config import DisplayConfig, JournalConfig
from .models import EDITABLE_FIELDS, Log, LogDraft, PeriodTab, SortOrder
from .seed import seed_logs
from .store import LogStore
from .view import LogView, collect_tags, derive_view

PERSISTENCE_NOTICE = "Persistence unavailable - changes are session-only"

ConfirmFn = Callable[[Log], bool]


# ---------------------------------------------------------------------------
# Action menu state
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MenuClosed:
    """No action menu is open."""


@dataclass(frozen=True)
class MenuOpen:
    """The action menu of ``log_id`` is open."""

    log_id: str


MenuState = MenuClosed | MenuOpen
MENU_CLOSED = MenuClosed()


def toggle_menu_state(state: MenuState, log_id: str) -> MenuState:
    """Clicking a log's menu button: open it, close it, or switch to it."""
    if isinstance(state, MenuOpen) and state.log_id == log_id:
        return MENU_CLOSED
    return MenuOpen(log_id)


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------


@dataclass
class Selection:
    """Ephemeral UI state. Never persisted."""

    tab: PeriodTab = PeriodTab.ALL
    query: str = ""
    selected_tags: set[str] = field(default_factory=set)
    sort: SortOrder = SortOrder.NEW
    detail_id: str | None = None
    edit_id: str | None = None
    menu: MenuState = MENU_CLOSED

    def forget(self, log_id: str) -> None:
        """Drop every reference to *log_id*."""
        if self.detail_id == log_id:
            self.detail_id = None
        if self.edit_id == log_id:
            self.edit_id = None
        if isinstance(self.menu, MenuOpen) and self.menu.log_id == log_id:
            self.menu = MENU_CLOSED


def _refuse(log: Log) -> bool:
    return False


def _uuid_hex() -> str:
    return uuid.uuid4().hex


# ---------------------------------------------------------------------------
# JournalController
# ---------------------------------------------------------------------------


class JournalController:
    """Owns the log collection and the dashboard selection.

    Args:
        store: Persistence adapter; loaded once on construction.
        confirm: Asked before a delete goes ahead. Without one, deletes are
            always declined.
        bus: Optional event bus receiving change notifications.
        config: Seeding behaviour.
        display: Initial tab and sort order.
        today: Fixed reference date for period filters. None follows the clock.
        id_factory: Source of new log ids.
    """

    def __init__(
        self,
        store: LogStore,
        *,
        confirm: ConfirmFn | None = None,
        bus: EventBus | None = None,
        config: JournalConfig | None = None,
        display: DisplayConfig | None = None,
        today: date | str | None = None,
        id_factory: Callable[[], str] | None = None,
    ):
        self.store = store
        self.confirm = confirm or _refuse
        self.bus = bus
        self.config = config or JournalConfig()
        display = display or DisplayConfig()
        self.today = today
        self._id_factory = id_factory or _uuid_hex
        self.selection = Selection(tab=PeriodTab(display.default_tab), sort=SortOrder(display.default_sort))
        self.notice: str | None = None

        self._logs: list[Log] = store.load()
        if not self._logs and self.config.seed_on_empty:
            self._logs = seed_logs(self._new_id)
            logger.debug(f"Storage empty, installed {len(self._logs)} example logs")
            if self.config.persist_seed:
                self._persist()

    # -- Read access ---------------------------------------------------------

    @property
    def logs(self) -> list[Log]:
        return list(self._logs)

    @property
    def view(self) -> LogView:
        s = self.selection
        return derive_view(self._logs, s.tab, s.query, s.selected_tags, s.sort, today=self.today)

    @property
    def tags(self) -> list[str]:
        return collect_tags(self._logs)

    def get(self, log_id: str) -> Log | None:
        for log in self._logs:
            if log.id == log_id:
                return log
        return None

    def is_menu_open(self, log_id: str) -> bool:
        menu = self.selection.menu
        return isinstance(menu, MenuOpen) and menu.log_id == log_id

    # -- Mutations -----------------------------------------------------------

    def create_log(self, draft: LogDraft) -> Log:
        """Assign a fresh id, append, persist."""
        log = Log.from_draft(self._new_id(), draft)
        self._logs.append(log)
        logger.debug(f"Created log {log.id} ({log.date})")
        self._persist()
        self._emit(LOG_CREATED, log.id)
        return log

    def edit_log(self, log_id: str, patch: Mapping[str, Any] | LogDraft) -> Log | None:
        """Replace the given fields of a log. Unknown ids are a no-op.

        Raises:
            ValueError: For unknown field names, an attempt to change the id,
                or values that fail validation. The log is left untouched.
        """
        index = self._index_of(log_id)
        if index is None:
            return None

        changes = dataclasses.asdict(patch) if isinstance(patch, LogDraft) else dict(patch)
        if "id" in changes:
            raise ValueError("Log id cannot be changed")
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown log field(s): {', '.join(sorted(unknown))}")

        updated = dataclasses.replace(self._logs[index], **changes)
        self._logs[index] = updated
        if self.selection.edit_id == log_id:
            self.selection.edit_id = None
        logger.debug(f"Edited log {log_id}: {', '.join(sorted(changes)) or 'no fields'}")
        self._persist()
        self._emit(LOG_UPDATED, log_id)
        return updated

    def delete_log(self, log_id: str) -> bool:
        """Delete after confirmation. Returns True if the log was removed."""
        index = self._index_of(log_id)
        if index is None:
            return False
        if not self.confirm(self._logs[index]):
            logger.debug(f"Delete of {log_id} not confirmed")
            return False

        del self._logs[index]
        self.selection.forget(log_id)
        logger.debug(f"Deleted log {log_id}")
        self._persist()
        self._emit(LOG_DELETED, log_id)
        return True

    def toggle_pinned(self, log_id: str) -> Log | None:
        log = self.get(log_id)
        if log is None:
            return None
        log.pinned = not log.pinned
        logger.debug(f"Log {log_id} pinned={log.pinned}")
        self._persist()
        self._emit(LOG_PIN_TOGGLED, log_id, pinned=log.pinned)
        return log

    def attach_images(self, log_id: str, refs: Iterable[str]) -> Log | None:
        """Append embedded image references to a log."""
        log = self.get(log_id)
        if log is None:
            return None
        return self.edit_log(log_id, {"images": [*log.images, *refs]})

    # -- Selection -----------------------------------------------------------

    def set_tab(self, tab: PeriodTab | str) -> None:
        self.selection.tab = PeriodTab(tab)

    def set_query(self, query: str) -> None:
        self.selection.query = query

    def set_sort(self, sort: SortOrder | str) -> None:
        self.selection.sort = SortOrder(sort)

    def toggle_tag(self, tag: str) -> None:
        tags = self.selection.selected_tags
        if tag in tags:
            tags.discard(tag)
        else:
            tags.add(tag)

    def clear_tags(self) -> None:
        self.selection.selected_tags.clear()

    def open_detail(self, log_id: str) -> None:
        if self.get(log_id) is None:
            return
        self.selection.menu = MENU_CLOSED
        self.selection.detail_id = log_id

    def close_detail(self) -> None:
        self.selection.detail_id = None

    def start_edit(self, log_id: str) -> None:
        if self.get(log_id) is None:
            return
        self.selection.edit_id = log_id

    def cancel_edit(self) -> None:
        self.selection.edit_id = None

    # -- Action menu ---------------------------------------------------------

    def toggle_menu(self, log_id: str) -> None:
        self.selection.menu = toggle_menu_state(self.selection.menu, log_id)

    def close_menu(self) -> None:
        """Outside click: whatever menu is open closes."""
        self.selection.menu = MENU_CLOSED

    def menu_edit(self, log_id: str) -> None:
        self.close_menu()
        self.start_edit(log_id)

    def menu_toggle_pinned(self, log_id: str) -> Log | None:
        self.close_menu()
        return self.toggle_pinned(log_id)

    def menu_delete(self, log_id: str) -> bool:
        self.close_menu()
        return self.delete_log(log_id)

    # -- Notices -------------------------------------------------------------

    def dismiss_notice(self) -> None:
        self.notice = None

    # -- Internals -----------------------------------------------------------

    def _index_of(self, log_id: str) -> int | None:
        for i, log in enumerate(self._logs):
            if log.id == log_id:
                return i
        return None

    def _new_id(self) -> str:
        existing = {log.id for log in self._logs}
        while True:
            log_id = self._id_factory()
            if log_id not in existing:
                return log_id

    def _persist(self) -> bool:
        """Save the whole collection. On failure keep memory and raise a notice."""
        try:
            self.store.save(self._logs)
        except PersistenceError as e:
            logger.warning(f"{e}. Keeping changes in memory only.")
            self.notice = PERSISTENCE_NOTICE
            self._emit(PERSISTENCE_FAILED, None, error=str(e))
            return False
        self.notice = None
        return True

    def _emit(self, name: str, log_id: str | None, **payload: Any) -> None:
        if self.bus is None:
            return
        if log_id is not None:
            payload["id"] = log_id
        self.bus.emit(Event(name=name, payload=payload, source="journal"))
