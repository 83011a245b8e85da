#!/usr/bin/env python3
"""Synthetic tram data server for local dashboard runs.

Streams random ``LOCATION`` and ``PASSENGER_COUNT`` messages for a handful of
trams to every connected client, using the same wire encoding the dashboard
decodes.

Usage:
    python scripts/replay_server.py 8081
    tram-dashboard 8081
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import random
import sys
from pathlib import Path

# Allow running from repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pytram._protocol.framing import encode_message  # noqa: E402
from pytram.models.message import MessageKind  # noqa: E402

_LOG = logging.getLogger("replay_server")

STOPS: tuple[str, ...] = (
    "Flinders Street",
    "Williams Street",
    "Bourke Street Mall",
    "Melbourne Central",
    "Southern Cross",
    "Docklands",
    "St Kilda",
)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve synthetic tram updates over TCP.")
    parser.add_argument("port", type=int, help="Port to listen on.")
    parser.add_argument("--host", default="127.0.0.1", help="Address to bind.")
    parser.add_argument("--trams", type=int, default=4, help="Number of distinct trams.")
    parser.add_argument(
        "--interval",
        type=float,
        default=0.5,
        help="Seconds between messages.",
    )
    parser.add_argument(
        "--chunk",
        type=int,
        default=0,
        help="Split writes into chunks of this many bytes (0 = whole messages).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible runs.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logs.")
    return parser.parse_args()


def _random_message(rng: random.Random, tram_count: int) -> bytes:
    tram_id = f"TRAM{rng.randint(1, tram_count)}".encode("ascii")
    if rng.random() < 0.5:
        return encode_message(MessageKind.LOCATION, tram_id, rng.choice(STOPS).encode("utf-8"))
    return encode_message(MessageKind.PASSENGER_COUNT, tram_id, str(rng.randint(0, 120)).encode("ascii"))


async def _serve_client(
    reader: asyncio.StreamReader,
    writer: asyncio.StreamWriter,
    *,
    args: argparse.Namespace,
) -> None:
    peer = writer.get_extra_info("peername")
    _LOG.info("Client connected: %s", peer)
    rng = random.Random(args.seed)
    try:
        while True:
            payload = _random_message(rng, args.trams)
            step = args.chunk or len(payload)
            for start in range(0, len(payload), step):
                writer.write(payload[start : start + step])
                await writer.drain()
            await asyncio.sleep(args.interval)
    except ConnectionError:
        _LOG.info("Client disconnected: %s", peer)
    finally:
        writer.close()


async def _run(args: argparse.Namespace) -> None:
    async def handler(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        await _serve_client(reader, writer, args=args)

    server = await asyncio.start_server(handler, host=args.host, port=args.port)
    addrs = ", ".join(str(sock.getsockname()) for sock in server.sockets)
    _LOG.info("Serving tram updates on %s", addrs)
    async with server:
        await server.serve_forever()


def main() -> int:
    args = _parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        asyncio.run(_run(args))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
