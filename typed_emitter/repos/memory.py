"""In-memory listener store backing the emitter."""

from __future__ import annotations

from types import MethodType

from typed_emitter.domain.events import EventName, Listener
from typed_emitter.domain.models import Placement


class ListenerRepository:
    """Dict-backed store of ordered listener lists, keyed by event name.

    Keys keep insertion order.  A key is deleted as soon as its list becomes
    empty, so every stored list is non-empty.  Listeners are matched by
    identity, never by equality; a bound method matches another bound method
    of the same function on the same instance.
    """

    def __init__(self) -> None:
        self._store: dict[EventName, list[Listener]] = {}

    def get(self, event_name: EventName) -> list[Listener]:
        """Return a copy of the listeners for *event_name* (empty if none)."""
        return list(self._store.get(event_name, ()))

    def insert(
        self,
        event_name: EventName,
        listener: Listener,
        placement: Placement = Placement.APPEND,
    ) -> int:
        """Add *listener* and return the new size of the event's list."""
        listeners = self._store.setdefault(event_name, [])
        if placement == Placement.PREPEND:
            listeners.insert(0, listener)
        else:
            listeners.append(listener)
        return len(listeners)

    def remove(self, event_name: EventName, listener: Listener) -> bool:
        """Remove the first entry that *is* ``listener``.

        Returns ``False`` and leaves the store untouched when no such entry
        exists.
        """
        listeners = self._store.get(event_name)
        if listeners is None:
            return False
        for index, registered in enumerate(listeners):
            if _same_listener(registered, listener):
                del listeners[index]
                break
        else:
            return False
        if not listeners:
            del self._store[event_name]
        return True

    def delete(self, event_name: EventName) -> None:
        self._store.pop(event_name, None)

    def clear(self) -> None:
        self._store.clear()

    def names(self) -> list[EventName]:
        return list(self._store)

    def has(self, event_name: EventName) -> bool:
        return event_name in self._store

    def count(self, event_name: EventName, listener: Listener | None = None) -> int:
        listeners = self._store.get(event_name, ())
        if listener is None:
            return len(listeners)
        return sum(
            1 for registered in listeners if _same_listener(registered, listener)
        )


def _same_listener(registered: Listener, listener: Listener) -> bool:
    """Identity match; bound methods match on their instance and function."""
    if registered is listener:
        return True
    if isinstance(registered, MethodType) and isinstance(listener, MethodType):
        return (
            registered.__self__ is listener.__self__
            and registered.__func__ is listener.__func__
        )
    return False
