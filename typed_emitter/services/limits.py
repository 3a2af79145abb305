"""Service for the advisory max-listeners check."""

from __future__ import annotations

import warnings

from typed_emitter.domain.events import EventName, MaxListenersExceededWarning


def exceeds_limit(count: int, max_listeners: int) -> bool:
    """Return True when *count* listeners is over the advisory limit.

    A limit of ``0`` means unlimited.
    """
    return max_listeners > 0 and count > max_listeners


def warn_if_exceeded(
    event_name: EventName,
    count: int,
    max_listeners: int,
    warned: set[EventName],
) -> bool:
    """Issue a ``MaxListenersExceededWarning`` once per event name.

    *warned* records the event names already reported and is updated in
    place.  Returns True if a warning was issued by this call.
    """
    if event_name in warned or not exceeds_limit(count, max_listeners):
        return False
    warned.add(event_name)
    warnings.warn(
        MaxListenersExceededWarning(event_name, count, max_listeners),
        stacklevel=4,
    )
    return True
