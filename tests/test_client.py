from __future__ import annotations

import asyncio
import socket

import pytest

from pytram._protocol.framing import encode_content, encode_message
from pytram.client import TramClient
from pytram.config import TramConfig
from pytram.exceptions import TramConnectionError, TramProtocolError, TramStreamError, TramValidationError
from pytram.models.message import MessageKind
from pytram.render import render_dashboard

_CONFIG = TramConfig(port=8081)


def _reader_with(data: bytes) -> asyncio.StreamReader:
    reader = asyncio.StreamReader()
    reader.feed_data(data)
    reader.feed_eof()
    return reader


@pytest.mark.asyncio
async def test_location_then_count_end_to_end() -> None:
    data = b"\x07MSGTYPE\x08LOCATION\x07TRAM_ID\x07TRAMABC\x05VALUE\x04CITY" + encode_message(
        MessageKind.PASSENGER_COUNT, b"TRAMABC", b"50"
    )

    async with TramClient(_CONFIG, reader=_reader_with(data)) as client:
        await client.process_next()
        await client.process_next()
        with pytest.raises(TramStreamError):
            await client.process_next()

    trams = client.registry.snapshot()
    assert len(trams) == 1
    assert trams[0].tram_id == b"TRAMABC"
    assert trams[0].location == b"CITY"
    assert trams[0].passenger_count == 50
    assert render_dashboard(client.registry) == (
        "\n    TRAMABC:\n        Location: CITY\n        Passenger Count: 50\n"
    )


@pytest.mark.asyncio
async def test_updates_yields_each_applied_message() -> None:
    data = b"".join(
        encode_message(kind, tram_id, value)
        for kind, tram_id, value in (
            (MessageKind.LOCATION, b"T1", b"Docklands"),
            (MessageKind.LOCATION, b"T2", b"St Kilda"),
            (MessageKind.PASSENGER_COUNT, b"T1", b"3"),
        )
    )
    seen: list[tuple[bytes, int]] = []

    async with TramClient(_CONFIG, reader=_reader_with(data)) as client:
        with pytest.raises(TramStreamError):
            async for message in client.updates():
                # The registry already reflects the message when it is yielded.
                seen.append((message.tram_id, len(client.registry)))

    assert seen == [(b"T1", 1), (b"T2", 2), (b"T1", 2)]
    tram = client.registry.find(b"T1")
    assert tram is not None
    assert tram.passenger_count == 3


@pytest.mark.asyncio
async def test_unknown_message_type_fails_before_registry_mutation() -> None:
    bad = b"".join(encode_content(c) for c in (b"MSGTYPE", b"SPEED", b"TRAM_ID", b"T2", b"VALUE", b"40"))
    data = encode_message(MessageKind.LOCATION, b"T1", b"CITY") + bad

    async with TramClient(_CONFIG, reader=_reader_with(data)) as client:
        await client.process_next()
        with pytest.raises(TramProtocolError):
            await client.process_next()

    assert len(client.registry) == 1
    assert b"T2" not in client.registry


@pytest.mark.asyncio
async def test_invalid_passenger_count_stops_processing() -> None:
    data = encode_message(MessageKind.PASSENGER_COUNT, b"T1", b"12x") + encode_message(
        MessageKind.LOCATION, b"T1", b"CITY"
    )

    async with TramClient(_CONFIG, reader=_reader_with(data)) as client:
        with pytest.raises(TramValidationError):
            await client.process_next()

    assert client.registry.find(b"T1") is None


@pytest.mark.asyncio
async def test_configured_message_limit_is_enforced() -> None:
    data = encode_message(MessageKind.LOCATION, b"T1", b"A much longer location name")
    config = TramConfig(port=8081, max_message_size=48)

    async with TramClient(config, reader=_reader_with(data)) as client:
        with pytest.raises(TramProtocolError, match="Frame too large"):
            await client.process_next()


@pytest.mark.asyncio
async def test_process_next_requires_connection() -> None:
    client = TramClient(_CONFIG)

    with pytest.raises(RuntimeError):
        await client.process_next()


@pytest.mark.asyncio
async def test_reads_from_tcp_server_delivering_small_chunks() -> None:
    payload = encode_message(MessageKind.LOCATION, b"TRAMABC", b"CITY") + encode_message(
        MessageKind.PASSENGER_COUNT, b"TRAMABC", b"50"
    )

    async def handler(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        for start in range(0, len(payload), 3):
            writer.write(payload[start : start + 3])
            await writer.drain()
            await asyncio.sleep(0)
        writer.close()
        await writer.wait_closed()

    server = await asyncio.start_server(handler, host="127.0.0.1", port=0)
    port = server.sockets[0].getsockname()[1]
    messages = []
    async with server:
        async with TramClient(TramConfig(port=port)) as client:
            with pytest.raises(TramStreamError):
                async for message in client.updates():
                    messages.append(message)

    assert [m.kind for m in messages] == [MessageKind.LOCATION, MessageKind.PASSENGER_COUNT]
    tram = client.registry.find(b"TRAMABC")
    assert tram is not None
    assert (tram.location, tram.passenger_count) == (b"CITY", 50)


@pytest.mark.asyncio
async def test_connection_refused_is_connection_error() -> None:
    # A bound but non-listening socket reserves the port and refuses connections.
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]

        with pytest.raises(TramConnectionError) as exc_info:
            async with TramClient(TramConfig(port=port)):
                pass

    assert exc_info.value.host == "127.0.0.1"
    assert exc_info.value.port == port


@pytest.mark.asyncio
async def test_unencodable_host_is_connection_error() -> None:
    # A DNS label longer than 63 characters fails IDNA encoding before any lookup.
    host = "a" * 64

    with pytest.raises(TramConnectionError) as exc_info:
        async with TramClient(TramConfig(port=8081, host=host)):
            pass

    assert exc_info.value.host == host
    assert isinstance(exc_info.value.__cause__, (UnicodeError, ValueError))
