"""State layer.

The registry is the single source of truth for the latest known state of
every tram seen on the stream. Only the dispatcher mutates it.
"""

from pytram.state.registry import TramRegistry

__all__ = ["TramRegistry"]
