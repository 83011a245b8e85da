"""High-level async client for the tram data stream."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import AsyncIterator
from typing import Any

from pytram._protocol.assembler import MessageAssembler
from pytram._protocol.framing import ByteStream, FrameReader
from pytram.config import TramConfig
from pytram.exceptions import TramConnectionError
from pytram.ingestion.dispatch import MessageDispatcher
from pytram.models.message import TramMessage
from pytram.state.registry import TramRegistry

_logger = logging.getLogger(__name__)


class TramClient:
    """Async client for the tram data server.

    Usage::

        async with TramClient(config) as client:
            async for message in client.updates():
                print(len(client.registry))

    Messages are handled strictly one at a time: each is read, validated and
    applied to :attr:`registry` before the next read begins. Any error ends
    processing; there is no reconnect or resynchronization.
    """

    def __init__(
        self,
        config: TramConfig,
        *,
        reader: ByteStream | None = None,
        registry: TramRegistry | None = None,
    ) -> None:
        self._config = config
        self._external_reader = reader is not None
        self._reader = reader
        self._writer: asyncio.StreamWriter | None = None
        self._registry = registry if registry is not None else TramRegistry()
        self._dispatcher = MessageDispatcher(self._registry)
        self._assembler: MessageAssembler | None = None
        if reader is not None:
            self._assembler = self._build_assembler(reader)

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> TramClient:
        if self._reader is None:
            await self.connect()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    async def connect(self) -> None:
        """Open the TCP connection described by the configuration."""
        host, port = self._config.host, self._config.port
        _logger.debug("Connecting to %s:%d", host, port)
        try:
            reader, writer = await asyncio.open_connection(host, port)
        # UnicodeError/ValueError: the host fails IDNA encoding before resolution.
        except (OSError, UnicodeError, ValueError) as exc:
            raise TramConnectionError(
                f"Connection to {host}:{port} failed: {exc}",
                host=host,
                port=port,
            ) from exc
        self._reader = reader
        self._writer = writer
        self._assembler = self._build_assembler(reader)
        _logger.debug("Connected to %s:%d", host, port)

    async def close(self) -> None:
        writer, self._writer = self._writer, None
        if writer is not None:
            writer.close()
            with contextlib.suppress(OSError):
                await writer.wait_closed()
        if not self._external_reader:
            self._reader = None
            self._assembler = None

    def _build_assembler(self, reader: ByteStream) -> MessageAssembler:
        frames = FrameReader(reader, max_message_size=self._config.max_message_size)
        return MessageAssembler(frames)

    # ------------------------------------------------------------------
    # Processing
    # ------------------------------------------------------------------

    @property
    def registry(self) -> TramRegistry:
        return self._registry

    async def process_next(self) -> TramMessage:
        """Read one message off the stream and apply it to the registry."""
        if self._assembler is None:
            raise RuntimeError("Client is not connected; use within 'async with TramClient(...)'")
        message = await self._assembler.next_message()
        self._dispatcher.apply(message)
        return message

    async def updates(self) -> AsyncIterator[TramMessage]:
        """Yield every message after it has been applied.

        Runs until the stream fails; the resulting :class:`~pytram.exceptions.TramError`
        propagates to the caller.
        """
        while True:
            yield await self.process_next()
