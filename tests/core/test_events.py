"""Tests for learnlog.core.events: EventBus and Event."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from learnlog.core.events import Event, EventBus


def test_on_off_emit_lifecycle():
    bus = EventBus()
    received: list[Event] = []

    bus.on("test.event", received.append)
    evt = Event(name="test.event", payload={"k": "v"}, source="test")
    bus.emit(evt)

    assert received == [evt]

    bus.off("test.event", received.append)
    bus.emit(evt)
    assert len(received) == 1


def test_off_unknown_hook_is_silent():
    EventBus().off("nothing", lambda event: None)


def test_wildcard_hooks_receive_all_events():
    bus = EventBus()
    received: list[str] = []
    bus.on_all(lambda event: received.append(event.name))

    bus.emit(Event(name="alpha"))
    bus.emit(Event(name="beta"))

    assert received == ["alpha", "beta"]


def test_failing_hook_does_not_stop_others():
    bus = EventBus()
    received: list[str] = []

    def boom(event: Event) -> None:
        raise RuntimeError("boom")

    bus.on("x", boom)
    bus.on("x", lambda event: received.append("after"))
    bus.emit(Event(name="x"))

    assert received == ["after"]


def test_event_is_frozen():
    evt = Event(name="x")
    with pytest.raises(FrozenInstanceError):
        evt.name = "y"
