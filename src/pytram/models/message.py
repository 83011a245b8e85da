"""Decoded protocol messages."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class MessageKind(StrEnum):
    """Known ``MSGTYPE`` values. Each member's value is its wire literal."""

    LOCATION = "LOCATION"
    PASSENGER_COUNT = "PASSENGER_COUNT"

    @property
    def wire(self) -> bytes:
        return self.value.encode("ascii")

    @classmethod
    def from_wire(cls, content: bytes) -> MessageKind | None:
        """Return the kind whose literal equals *content*, or ``None``."""
        for kind in cls:
            if kind.wire == content:
                return kind
        return None


class TramMessage(BaseModel):
    """One complete update, as assembled from six content units."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: MessageKind
    tram_id: bytes = Field(..., description="Raw TRAM_ID content")
    value: bytes = Field(..., description="Raw VALUE content")
    value_length: int = Field(..., ge=0, le=255, description="Declared length byte of the VALUE content unit")

    @model_validator(mode="after")
    def _check_value_length(self) -> TramMessage:
        if len(self.value) != self.value_length:
            raise ValueError(f"value is {len(self.value)} bytes but its declared length is {self.value_length}")
        return self
