"""Normalization helpers.

Centralizes strict parsing of message values.
"""

from __future__ import annotations

from pytram._constants import MAX_PASSENGER_COUNT


def parse_passenger_count(value: bytes, declared_length: int) -> int | None:
    """Parse a passenger count, returning ``None`` if it is not acceptable.

    Accepted values are non-empty runs of ASCII decimal digits whose length
    matches the declared content length and whose value fits a signed 32-bit
    integer. Signs, whitespace and any other byte are rejected.
    """
    if not value or len(value) != declared_length:
        return None
    # bytes.isdigit() only accepts ASCII 0-9.
    if not value.isdigit():
        return None
    number = int(value)
    if number > MAX_PASSENGER_COUNT:
        return None
    return number
