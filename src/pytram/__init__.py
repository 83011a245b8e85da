"""pytram - Async Python client for the tram data stream protocol."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pytram")
except PackageNotFoundError:
    __version__ = "0+local"
from pytram.client import TramClient
from pytram.config import TramConfig
from pytram.exceptions import (
    TramConfigError,
    TramConnectionError,
    TramError,
    TramProtocolError,
    TramStreamError,
    TramValidationError,
)
from pytram.ingestion import MessageDispatcher
from pytram.models import MessageKind, Tram, TramMessage
from pytram.render import DashboardRenderer, render_dashboard
from pytram.state import TramRegistry

__all__ = [
    "__version__",
    "DashboardRenderer",
    "MessageDispatcher",
    "MessageKind",
    "Tram",
    "TramClient",
    "TramConfig",
    "TramConfigError",
    "TramConnectionError",
    "TramError",
    "TramMessage",
    "TramProtocolError",
    "TramRegistry",
    "TramStreamError",
    "TramValidationError",
    "render_dashboard",
]
