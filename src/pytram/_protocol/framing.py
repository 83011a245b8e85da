"""Length-prefixed content units.

On the wire every content unit is one length byte followed by exactly that
many bytes of content. There is no terminator and no message-level header,
so the reader keeps a running total per message to bound memory use.
"""

from __future__ import annotations

from typing import Protocol

from pytram._constants import DEFAULT_MAX_MESSAGE_SIZE, MAX_CONTENT_LENGTH, MESSAGE_KEYS
from pytram.exceptions import TramProtocolError, TramStreamError
from pytram.models.message import MessageKind


class ByteStream(Protocol):
    """Structural interface for the byte source.

    ``asyncio.StreamReader`` satisfies it; tests pass simpler doubles.
    ``read`` may return fewer bytes than requested and returns ``b""`` at
    end of stream.
    """

    async def read(self, n: int) -> bytes: ...


class FrameReader:
    """Reads one content unit at a time off a byte stream."""

    def __init__(
        self,
        stream: ByteStream,
        *,
        max_message_size: int = DEFAULT_MAX_MESSAGE_SIZE,
    ) -> None:
        self._stream = stream
        self._max_message_size = max_message_size
        self._consumed = 0
        self._last_length = 0

    @property
    def consumed(self) -> int:
        """Bytes read for the current message, length headers included."""
        return self._consumed

    @property
    def last_length(self) -> int:
        """Declared length of the most recently read content unit."""
        return self._last_length

    def start_message(self) -> None:
        self._consumed = 0

    async def _read_exactly(self, n: int) -> bytes:
        buf = bytearray()
        while len(buf) < n:
            try:
                chunk = await self._stream.read(n - len(buf))
            except OSError as exc:
                raise TramStreamError(
                    f"Error reading from the server: {exc}",
                    expected=n,
                    received=len(buf),
                ) from exc
            if not chunk:
                raise TramStreamError(
                    f"Server closed the stream after {len(buf)} of {n} bytes",
                    expected=n,
                    received=len(buf),
                )
            buf.extend(chunk)
        return bytes(buf)

    async def next_content(self) -> bytes:
        """Read the next content unit and return its content bytes.

        The size bound is checked against the length byte before any content
        is consumed.
        """
        header = await self._read_exactly(1)
        length = header[0]

        size = self._consumed + 1 + length
        if size > self._max_message_size:
            raise TramProtocolError(
                f"Frame too large: {length}-byte content would bring the message to "
                f"{size} bytes (limit {self._max_message_size})"
            )

        content = await self._read_exactly(length) if length else b""
        self._consumed = size
        self._last_length = length
        return content


def encode_content(content: bytes) -> bytes:
    """Encode *content* as one length-prefixed content unit."""
    if len(content) > MAX_CONTENT_LENGTH:
        raise ValueError(f"content must be at most {MAX_CONTENT_LENGTH} bytes, got {len(content)}")
    return bytes([len(content)]) + content


def encode_message(kind: MessageKind, tram_id: bytes, value: bytes) -> bytes:
    """Encode a complete message in the server's key order."""
    values = (kind.wire, tram_id, value)
    return b"".join(encode_content(key) + encode_content(val) for key, val in zip(MESSAGE_KEYS, values, strict=True))
