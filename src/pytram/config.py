"""Client configuration for pytram."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pytram._constants import DEFAULT_HOST, DEFAULT_MAX_MESSAGE_SIZE
from pytram.exceptions import TramConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_int(env_key: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise TramConfigError(f"{env_key} must be an integer, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class TramConfig:
    """Client configuration.

    Parameters
    ----------
    port : int
        TCP port of the tram data server.
    host : str
        Server address. Defaults to the IPv4 loopback.
    max_message_size : int
        Upper bound on the bytes of one message, counting the length byte
        and content of every content unit. A frame that would exceed it is
        a fatal protocol error.
    clear_screen : bool
        Emit the ANSI home/clear sequence before every dashboard redraw.
    """

    port: int
    host: str = DEFAULT_HOST
    max_message_size: int = DEFAULT_MAX_MESSAGE_SIZE
    clear_screen: bool = True

    def __post_init__(self) -> None:
        if not 0 <= self.port <= 65535:
            raise TramConfigError(f"port must be between 0 and 65535, got {self.port}")
        if self.max_message_size < 1:
            raise TramConfigError(f"max_message_size must be positive, got {self.max_message_size}")

    @classmethod
    def from_env(cls, **overrides: Any) -> TramConfig:
        """Create configuration from environment variables.

        Reads ``TRAM_PORT``, ``TRAM_HOST``, ``TRAM_MAX_MESSAGE_SIZE`` and
        ``TRAM_CLEAR_SCREEN``. Explicit keyword arguments override
        environment values.

        Raises
        ------
        TramConfigError
            If no port is given by either source, or a value is malformed.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        host = env.get("TRAM_HOST")
        if host is not None:
            config_kwargs["host"] = host.strip()

        port_env = env.get("TRAM_PORT")
        if port_env is not None and "port" not in overrides:
            config_kwargs["port"] = _env_int("TRAM_PORT", port_env)

        size_env = env.get("TRAM_MAX_MESSAGE_SIZE")
        if size_env is not None and "max_message_size" not in overrides:
            config_kwargs["max_message_size"] = _env_int("TRAM_MAX_MESSAGE_SIZE", size_env)

        if "clear_screen" not in overrides:
            config_kwargs["clear_screen"] = _env_bool(env.get("TRAM_CLEAR_SCREEN"), True)

        config_kwargs.update(overrides)

        if "port" not in config_kwargs:
            raise TramConfigError("No port provided (pass one explicitly or set TRAM_PORT)")

        return cls(**config_kwargs)
