"""pyaetherfm - Never-raising adapter for the AetherFM media service."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyaetherfm")
except PackageNotFoundError:
    __version__ = "0+local"
from pyaetherfm._safe import CallResult
from pyaetherfm._transport import CallGateTransport, StatusHandler, Transport
from pyaetherfm.config import AetherFmConfig
from pyaetherfm.controller import AetherFmController, FavoriteChange, LastStationCache
from pyaetherfm.dispatch import StatusEventPump
from pyaetherfm.exceptions import (
    AetherFmConfigError,
    AetherFmError,
    AetherFmTransportError,
    AetherFmTypeError,
)
from pyaetherfm.gateway import AetherFmGateway
from pyaetherfm.models import (
    UNSET_TIMESTAMP,
    FavoritesCollection,
    PlaybackStatus,
    RemoteCapability,
    StateSnapshot,
    StationReference,
)
from pyaetherfm.registry import SubscriptionRegistry
from pyaetherfm.snapshot import capture_snapshot

__all__ = [
    "__version__",
    "AetherFmConfig",
    "AetherFmConfigError",
    "AetherFmController",
    "AetherFmError",
    "AetherFmGateway",
    "AetherFmTransportError",
    "AetherFmTypeError",
    "CallGateTransport",
    "CallResult",
    "FavoriteChange",
    "FavoritesCollection",
    "LastStationCache",
    "PlaybackStatus",
    "RemoteCapability",
    "StateSnapshot",
    "StationReference",
    "StatusEventPump",
    "StatusHandler",
    "SubscriptionRegistry",
    "Transport",
    "UNSET_TIMESTAMP",
    "capture_snapshot",
]
