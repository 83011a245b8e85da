"""Command-line entry point: live tram dashboard."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from pytram.client import TramClient
from pytram.config import TramConfig
from pytram.exceptions import TramError
from pytram.render import DashboardRenderer

_logger = logging.getLogger("pytram")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Live dashboard for the tram data server")
    parser.add_argument("port", type=int, help="TCP port of the tram data server")
    parser.add_argument("--host", default=None, help="Server address (default: TRAM_HOST or 127.0.0.1)")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser.parse_args(argv)


async def _run(config: TramConfig) -> int:
    renderer = DashboardRenderer(sys.stdout, clear_screen=config.clear_screen)
    async with TramClient(config) as client:
        async for _message in client.updates():
            renderer.render(client.registry)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    overrides: dict[str, object] = {"port": args.port}
    if args.host:
        overrides["host"] = args.host

    try:
        config = TramConfig.from_env(**overrides)
        return asyncio.run(_run(config))
    except TramError as exc:
        _logger.error("%s", exc)
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
