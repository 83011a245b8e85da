"""Ingestion layer.

Validates assembled messages and applies them to the tram registry.
"""

from pytram.ingestion.dispatch import MessageDispatcher
from pytram.ingestion.normalize import parse_passenger_count

__all__ = [
    "MessageDispatcher",
    "parse_passenger_count",
]
