"""Text dashboard for the tram registry."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from pytram._constants import CLEAR_SCREEN
from pytram.models.tram import Tram


def render_dashboard(trams: Iterable[Tram]) -> str:
    """Project *trams* into the dashboard text.

    Only observed fields are printed; a tram seen only in passenger-count
    messages gets no location line and vice versa.
    """
    lines: list[str] = []
    for tram in trams:
        lines.append("")
        lines.append(f"    {tram.display_id}:")
        location = tram.display_location
        if location is not None:
            lines.append(f"        Location: {location}")
        if tram.passenger_count is not None:
            lines.append(f"        Passenger Count: {tram.passenger_count}")
    return "".join(f"{line}\n" for line in lines)


class DashboardRenderer:
    """Redraws the full dashboard on a text stream."""

    def __init__(self, stream: TextIO | None = None, *, clear_screen: bool = True) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._clear_screen = clear_screen

    def render(self, trams: Iterable[Tram]) -> None:
        text = render_dashboard(trams)
        if self._clear_screen:
            text = CLEAR_SCREEN + text
        self._stream.write(text)
        self._stream.flush()
