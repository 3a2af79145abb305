"""Synchronous in-process event emitter with a typed event contract."""

from __future__ import annotations

import logging
from typing import Any, Generic

from typed_emitter.domain.events import EventName, EventsT, Listener
from typed_emitter.domain.handlers import OnceWrapper
from typed_emitter.domain.models import EmitterSettings, Placement
from typed_emitter.repos.memory import ListenerRepository
from typed_emitter.services.limits import warn_if_exceeded

logger = logging.getLogger(__name__)

_ALL_EVENTS = object()


class Emitter(Generic[EventsT]):
    """Registry of named-event listeners with in-order, synchronous dispatch.

    Listeners run in list order on the caller's thread.  ``emit`` iterates a
    snapshot taken when it starts: listeners added during dispatch wait for
    the next ``emit``, and listeners removed during dispatch still receive
    the in-flight one.  Exceptions raised by a listener propagate out of
    ``emit`` and the remaining listeners of that dispatch are skipped.

    Registration and removal methods return the emitter so calls can be
    chained.
    """

    def __init__(self, settings: EmitterSettings | None = None) -> None:
        self._settings = (settings or EmitterSettings()).model_copy()
        self._repo = ListenerRepository()
        self._leak_warned: set[EventName] = set()

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add_listener(
        self, event_name: EventName, listener: Listener
    ) -> Emitter[EventsT]:
        self._register(event_name, listener, Placement.APPEND)
        return self

    def on(self, event_name: EventName, listener: Listener) -> Emitter[EventsT]:
        self._register(event_name, listener, Placement.APPEND)
        return self

    def prepend_listener(
        self, event_name: EventName, listener: Listener
    ) -> Emitter[EventsT]:
        self._register(event_name, listener, Placement.PREPEND)
        return self

    def once(self, event_name: EventName, listener: Listener) -> Emitter[EventsT]:
        """Register *listener* to run on the next ``emit`` of *event_name* only."""
        _require_callable(listener)
        wrapper = OnceWrapper(self, event_name, listener)
        self._register(event_name, wrapper, Placement.APPEND)
        return self

    def prepend_once_listener(
        self, event_name: EventName, listener: Listener
    ) -> Emitter[EventsT]:
        _require_callable(listener)
        wrapper = OnceWrapper(self, event_name, listener)
        self._register(event_name, wrapper, Placement.PREPEND)
        return self

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------

    def remove_listener(
        self, event_name: EventName, listener: Listener
    ) -> Emitter[EventsT]:
        """Remove the first registered entry that is *listener*.

        Does nothing if *listener* is not registered for *event_name*.
        """
        if self._repo.remove(event_name, listener):
            logger.debug("Removed listener %r from %r", listener, event_name)
            if not self._repo.has(event_name):
                self._leak_warned.discard(event_name)
        return self

    def off(self, event_name: EventName, listener: Listener) -> Emitter[EventsT]:
        return self.remove_listener(event_name, listener)

    def remove_all_listeners(
        self, event_name: EventName = _ALL_EVENTS
    ) -> Emitter[EventsT]:
        """Drop every listener for *event_name*, or for all events if omitted."""
        if event_name is _ALL_EVENTS:
            self._repo.clear()
            self._leak_warned.clear()
            logger.debug("Removed all listeners")
        else:
            self._repo.delete(event_name)
            self._leak_warned.discard(event_name)
            logger.debug("Removed all listeners for %r", event_name)
        return self

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def emit(self, event_name: EventName, *args: Any) -> bool:
        """Call each listener of *event_name* with ``*args``, in order.

        Returns True if the event had listeners, False otherwise.
        """
        listeners = self._repo.get(event_name)
        if not listeners:
            return False
        logger.debug("Emitting %r to %d listener(s)", event_name, len(listeners))
        for listener in listeners:
            listener(*args)
        return True

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def listeners(self, event_name: EventName) -> list[Listener]:
        return self._repo.get(event_name)

    def raw_listeners(self, event_name: EventName) -> list[Listener]:
        """Return an independent copy of the stored entries, wrappers included."""
        return self._repo.get(event_name)

    def event_names(self) -> list[EventName]:
        return self._repo.names()

    def listener_count(
        self, event_name: EventName, listener: Listener | None = None
    ) -> int:
        return self._repo.count(event_name, listener)

    def get_max_listeners(self) -> int:
        return self._settings.max_listeners

    def set_max_listeners(self, n: int) -> Emitter[EventsT]:
        self._settings.max_listeners = n
        return self

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _register(
        self, event_name: EventName, listener: Listener, placement: Placement
    ) -> None:
        _require_callable(listener)
        count = self._repo.insert(event_name, listener, placement)
        logger.debug(
            "Registered listener %r for %r (%s, %d total)",
            listener,
            event_name,
            placement,
            count,
        )
        warn_if_exceeded(
            event_name, count, self._settings.max_listeners, self._leak_warned
        )


def _require_callable(listener: object) -> None:
    if not callable(listener):
        raise TypeError(f"listener must be callable, got {type(listener).__name__}")
