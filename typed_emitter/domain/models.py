"""Configuration models for the event emitter."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MAX_LISTENERS = 25


class Placement(StrEnum):
    APPEND = "append"
    PREPEND = "prepend"


class EmitterSettings(BaseModel):
    """Tunable settings for an ``Emitter``.

    ``max_listeners`` is advisory: exceeding it issues a warning but never
    blocks a registration.  ``0`` turns the check off.
    """

    model_config = ConfigDict(validate_assignment=True, strict=True)

    max_listeners: int = Field(default=DEFAULT_MAX_LISTENERS, ge=0)
