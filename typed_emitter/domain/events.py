"""Event contracts: the caller-declared mapping of event names to handler signatures."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Hashable
from typing import Any, TypeVar

Listener = Callable[..., Any]
EventName = Hashable


class EventTypes:
    """Base class for an emitter's event contract.

    Subclass it and annotate one attribute per event, typed as the handler
    signature for that event::

        class ChatEvents(EventTypes):
            message: Callable[[str, int], None]
            closed: Callable[[], None]

    The emitter does not enforce the contract at runtime.  As the type
    parameter of ``Emitter[ChatEvents]`` it only labels which contract an
    emitter serves: event names and listeners are typed loosely, so a type
    checker does not match names or signatures against it.  ``declared_events``
    reads the annotated names back.
    """


EventsT = TypeVar("EventsT", bound=EventTypes)


class MaxListenersExceededWarning(RuntimeWarning):
    """Issued when an event gathers more listeners than the advisory limit."""

    def __init__(self, event_name: EventName, count: int, max_listeners: int) -> None:
        self.event_name = event_name
        self.count = count
        self.max_listeners = max_listeners
        super().__init__(
            f"Possible listener leak: {count} listeners added for event "
            f"{event_name!r} (max_listeners={max_listeners}). "
            "Use set_max_listeners() to raise the limit."
        )


def declared_events(contract: type[EventTypes]) -> list[str]:
    """Return the event names annotated on *contract*, base classes first."""
    names: list[str] = []
    for klass in reversed(contract.__mro__):
        for name in inspect.get_annotations(klass):
            if name not in names:
                names.append(name)
    return names
