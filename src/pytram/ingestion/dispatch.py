"""Apply assembled messages to the tram registry."""

from __future__ import annotations

import logging

from pytram._text import display_bytes
from pytram.exceptions import TramProtocolError, TramValidationError
from pytram.ingestion.normalize import parse_passenger_count
from pytram.models.message import MessageKind, TramMessage
from pytram.models.tram import Tram
from pytram.state.registry import TramRegistry

_logger = logging.getLogger(__name__)


class MessageDispatcher:
    """Validates message payloads and writes them into a :class:`TramRegistry`.

    Each message updates exactly one field of one tram. A value that fails
    validation raises before the registry is touched.
    """

    def __init__(self, registry: TramRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> TramRegistry:
        return self._registry

    def apply(self, message: TramMessage) -> Tram:
        """Apply *message* and return the updated tram."""
        if message.kind == MessageKind.LOCATION:
            tram = self._registry.find_or_create(message.tram_id)
            tram.location = message.value
            _logger.debug("tram=%s location=%s", tram.display_id, tram.display_location)
            return tram

        if message.kind == MessageKind.PASSENGER_COUNT:
            count = parse_passenger_count(message.value, message.value_length)
            if count is None:
                tram_id, raw = display_bytes(message.tram_id), display_bytes(message.value)
                raise TramValidationError(
                    f'Unexpected passenger count for {tram_id}: "{raw}"',
                    tram_id=message.tram_id,
                    raw_value=message.value,
                )
            tram = self._registry.find_or_create(message.tram_id)
            tram.passenger_count = count
            _logger.debug("tram=%s passenger_count=%d", tram.display_id, count)
            return tram

        raise TramProtocolError(f"Unexpected message type: {message.kind!r}")
