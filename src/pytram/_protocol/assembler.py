"""Message assembly.

A message is the fixed sequence ``MSGTYPE <kind> TRAM_ID <id> VALUE <value>``.
The assembler walks that sequence as a small state machine, alternating
between expecting a key and expecting the value for that key. It never tries
to resynchronize: the first content unit that does not fit ends processing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from pytram._constants import KEY_MSGTYPE, KEY_TRAM_ID, KEY_VALUE
from pytram._protocol.framing import FrameReader
from pytram._text import display_bytes
from pytram.exceptions import TramProtocolError
from pytram.models.message import MessageKind, TramMessage

_logger = logging.getLogger(__name__)


class Phase(StrEnum):
    EXPECT_KEY = "expect_key"
    EXPECT_VALUE = "expect_value"


@dataclass(frozen=True, slots=True)
class AssemblerState:
    """Where the assembler is within the current message."""

    phase: Phase
    key: bytes


_INITIAL_STATE = AssemblerState(Phase.EXPECT_KEY, KEY_MSGTYPE)


class MessageAssembler:
    """Turns a stream of content units into :class:`TramMessage` objects."""

    def __init__(self, frames: FrameReader) -> None:
        self._frames = frames
        self._state = _INITIAL_STATE

    @property
    def state(self) -> AssemblerState:
        return self._state

    async def _expect_key(self, key: bytes) -> None:
        self._state = AssemblerState(Phase.EXPECT_KEY, key)
        content = await self._frames.next_content()
        if content != key:
            raise TramProtocolError(
                f"Unexpected content: expected '{display_bytes(key)}', got '{display_bytes(content)}'",
                expected=key,
                actual=content,
            )

    async def _read_value(self, key: bytes) -> bytes:
        self._state = AssemblerState(Phase.EXPECT_VALUE, key)
        return await self._frames.next_content()

    async def next_message(self) -> TramMessage:
        """Read content units until one full message has been assembled."""
        self._frames.start_message()

        await self._expect_key(KEY_MSGTYPE)
        kind_content = await self._read_value(KEY_MSGTYPE)
        kind = MessageKind.from_wire(kind_content)
        if kind is None:
            raise TramProtocolError(
                f"Unexpected message type: '{display_bytes(kind_content)}'",
                actual=kind_content,
            )

        await self._expect_key(KEY_TRAM_ID)
        tram_id = await self._read_value(KEY_TRAM_ID)

        await self._expect_key(KEY_VALUE)
        value = await self._read_value(KEY_VALUE)

        message = TramMessage(
            kind=kind,
            tram_id=tram_id,
            value=value,
            value_length=self._frames.last_length,
        )
        self._state = _INITIAL_STATE
        _logger.debug(
            "Assembled %s message for tram=%s (%d bytes)",
            kind,
            display_bytes(message.tram_id),
            self._frames.consumed,
        )
        return message
