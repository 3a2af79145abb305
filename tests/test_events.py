"""Tests for the event-contract helpers."""

from __future__ import annotations

from collections.abc import Callable

from typed_emitter.domain.emitter import Emitter
from typed_emitter.domain.events import EventTypes, declared_events


class BaseEvents(EventTypes):
    ready: Callable[[], None]


class ChatEvents(BaseEvents):
    message: Callable[[str, int], None]
    closed: Callable[[], None]


def test_declared_events_lists_annotations_base_first():
    assert declared_events(ChatEvents) == ["ready", "message", "closed"]


def test_declared_events_of_bare_contract_is_empty():
    assert declared_events(EventTypes) == []


def test_undeclared_event_is_just_empty_at_runtime():
    """The contract is for type checkers; runtime treats unknown names as empty."""
    emitter = Emitter[ChatEvents]()

    assert emitter.emit("not_declared") is False
    assert emitter.listeners("not_declared") == []


def test_typed_emitter_scenario():
    emitter = Emitter[ChatEvents]()
    received = []

    emitter.on("message", lambda text, n: received.append(("message", text, n)))
    emitter.once("ready", lambda: received.append(("ready",)))

    emitter.emit("ready")
    emitter.emit("ready")
    emitter.emit("message", "hi", 2)

    assert received == [("ready",), ("message", "hi", 2)]
