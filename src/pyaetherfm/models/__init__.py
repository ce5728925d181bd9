"""Data models for the media service adapter."""

from pyaetherfm.models.capability import RemoteCapability
from pyaetherfm.models.state import UNSET_TIMESTAMP, StateSnapshot
from pyaetherfm.models.station import FavoritesCollection, StationReference
from pyaetherfm.models.status import PlaybackStatus

__all__ = [
    "FavoritesCollection",
    "PlaybackStatus",
    "RemoteCapability",
    "StateSnapshot",
    "StationReference",
    "UNSET_TIMESTAMP",
]
