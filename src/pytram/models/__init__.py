"""Data models for tram protocol messages and tram state."""

from pytram.models.message import MessageKind, TramMessage
from pytram.models.tram import Tram

__all__ = [
    "MessageKind",
    "Tram",
    "TramMessage",
]
