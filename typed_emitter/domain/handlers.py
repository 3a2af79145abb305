"""Listener wrappers stored by the emitter in place of caller handlers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from typed_emitter.domain.events import EventName, Listener

if TYPE_CHECKING:
    from typed_emitter.domain.emitter import Emitter


class OnceWrapper:
    """Calls ``listener`` on the first delivery, then unregisters itself.

    The wrapper (not ``listener``) is the entry held in the emitter, so it is
    removed by its own identity.  Removal happens after ``listener`` returns
    or raises.  ``fired`` guards against a second call when ``listener``
    re-emits the same event before the removal has run.
    """

    __slots__ = ("emitter", "event_name", "listener", "fired")

    def __init__(
        self, emitter: Emitter, event_name: EventName, listener: Listener
    ) -> None:
        self.emitter = emitter
        self.event_name = event_name
        self.listener = listener
        self.fired = False

    def __call__(self, *args: Any) -> None:
        if self.fired:
            return
        self.fired = True
        try:
            self.listener(*args)
        finally:
            self.emitter.remove_listener(self.event_name, self)

    def __repr__(self) -> str:
        return (
            f"OnceWrapper(event_name={self.event_name!r}, "
            f"listener={self.listener!r})"
        )
