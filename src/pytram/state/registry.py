"""Insertion-ordered in-memory registry of trams."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from pytram.models.tram import Tram

_logger = logging.getLogger(__name__)


class TramRegistry:
    """Latest known state of every tram, keyed by raw tram id.

    Iteration yields trams in first-seen order, which is also the dashboard
    order. Entries are never removed. The :class:`Tram` objects handed out
    are the stored ones, so mutating them updates the registry.
    """

    def __init__(self) -> None:
        self._trams: dict[bytes, Tram] = {}

    def __len__(self) -> int:
        return len(self._trams)

    def __iter__(self) -> Iterator[Tram]:
        return iter(self._trams.values())

    def __contains__(self, tram_id: object) -> bool:
        return tram_id in self._trams

    def find(self, tram_id: bytes) -> Tram | None:
        """Exact byte-for-byte lookup."""
        return self._trams.get(tram_id)

    def find_or_create(self, tram_id: bytes) -> Tram:
        """Return the tram for *tram_id*, registering a blank one if unseen."""
        tram = self._trams.get(tram_id)
        if tram is None:
            tram = Tram(tram_id=tram_id)
            self._trams[tram_id] = tram
            _logger.debug("New tram registered: %s (total=%d)", tram.display_id, len(self._trams))
        return tram

    def snapshot(self) -> list[Tram]:
        """Deep copies of all trams, in registry order."""
        return [tram.model_copy(deep=True) for tram in self._trams.values()]
