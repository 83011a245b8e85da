"""Byte-to-text conversion for dashboard output, logs and error messages."""

from __future__ import annotations


def display_bytes(content: bytes) -> str:
    """Decode wire content for humans.

    Valid UTF-8 is shown as text; any other byte appears as a ``\\xNN`` escape,
    so distinct ids never render identically.
    """
    return content.decode("utf-8", errors="backslashreplace")
