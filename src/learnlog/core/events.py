"""Event bus for loose-coupled change notification.

Provides a lightweight publish/subscribe system that lets the journal
controller announce mutations without knowing who renders or audits them.
Everything runs synchronously on the caller's thread.

Usage::

    from learnlog.core.events import EventBus, Event, LOG_CREATED

    bus = EventBus()
    bus.on(LOG_CREATED, lambda event: print(event.payload["id"]))
    bus.emit(Event(name=LOG_CREATED, payload={"id": "abc"}, source="controller"))
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass, field
from time import time
from typing import Any

from loguru import logger

# ---------------------------------------------------------------------------
# Well-known event names
# ---------------------------------------------------------------------------

LOG_CREATED = "log.created"
LOG_UPDATED = "log.updated"
LOG_DELETED = "log.deleted"
LOG_PIN_TOGGLED = "log.pin_toggled"
PERSISTENCE_FAILED = "persistence.failed"


# ---------------------------------------------------------------------------
# Event model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Event:
    """An immutable event that flows through the bus."""

    name: str
    payload: dict[str, Any] = field(default_factory=dict)
    timestamp: float = field(default_factory=time)
    source: str = ""


Hook = Callable[[Event], None]


# ---------------------------------------------------------------------------
# EventBus
# ---------------------------------------------------------------------------


class EventBus:
    """Simple synchronous pub/sub event bus."""

    def __init__(self) -> None:
        self._hooks: dict[str, list[Hook]] = defaultdict(list)
        self._wildcard_hooks: list[Hook] = []

    def on(self, event_name: str, hook: Hook) -> None:
        """Register *hook* for a specific event name."""
        self._hooks[event_name].append(hook)

    def on_all(self, hook: Hook) -> None:
        """Register *hook* for all events (wildcard)."""
        self._wildcard_hooks.append(hook)

    def off(self, event_name: str, hook: Hook) -> None:
        """Unregister *hook* from a specific event name."""
        try:
            self._hooks[event_name].remove(hook)
        except ValueError:
            pass

    def emit(self, event: Event) -> None:
        """Run all matching hooks. A failing hook never stops the others."""
        hooks = list(self._hooks.get(event.name, []))
        hooks.extend(self._wildcard_hooks)
        for hook in hooks:
            try:
                hook(event)
            except Exception as exc:
                logger.warning(f"Event hook failed for {event.name}: {exc}")
