"""Per-tram state model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pytram._constants import MAX_PASSENGER_COUNT
from pytram._text import display_bytes


class Tram(BaseModel):
    """Latest known state of one tram.

    ``location`` and ``passenger_count`` are ``None`` until the first message
    of the matching kind arrives for this tram. ``b""`` and ``0`` are valid
    observations and are kept distinct from "never observed".

    Parameters
    ----------
    tram_id : bytes
        Identifier as received on the wire. Immutable after creation.
    location : bytes or None
        Last reported location, exactly as sent.
    passenger_count : int or None
        Last reported passenger count.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    tram_id: bytes = Field(..., frozen=True)
    location: bytes | None = None
    passenger_count: int | None = Field(default=None, ge=0, le=MAX_PASSENGER_COUNT)

    @property
    def display_id(self) -> str:
        return display_bytes(self.tram_id)

    @property
    def display_location(self) -> str | None:
        if self.location is None:
            return None
        return display_bytes(self.location)
