"""Quick-control policy on top of the gateway.

These are the few decisions a toolbar or tray control has to make
beyond single gateway calls: how play/stop falls back to resume, how a
volume step is applied, how the current station is (un)favorited and
what label to show. None of it ever restarts playback on its own; a
``Stopped`` status stays stopped until the user acts.
"""

from __future__ import annotations

import logging
import threading
from enum import StrEnum

from pyaetherfm._normalize import clamp_volume
from pyaetherfm.config import AetherFmConfig
from pyaetherfm.gateway import AetherFmGateway
from pyaetherfm.models.state import StateSnapshot
from pyaetherfm.models.status import PlaybackStatus

_logger = logging.getLogger(__name__)


class FavoriteChange(StrEnum):
    ADDED = "added"
    REMOVED = "removed"
    FAILED = "failed"
    NO_STATION = "no_station"


class LastStationCache:
    """Last known station URL and name.

    Written from status callbacks, which may run on the transport's
    thread, and read from the control thread; every access takes the lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._url = ""
        self._name = ""
        self._gateway: AetherFmGateway | None = None

    @property
    def url(self) -> str:
        with self._lock:
            return self._url

    @property
    def name(self) -> str:
        with self._lock:
            return self._name

    def remember(self, *, url: str | None = None, name: str | None = None) -> None:
        """Store non-empty values; empty ones leave the cache untouched."""
        with self._lock:
            if url:
                self._url = url
            if name:
                self._name = name

    def refresh(self, gateway: AetherFmGateway) -> None:
        """Re-read both values from *gateway*, overwriting even with empties."""
        url = gateway.get_current_station_url()
        name = gateway.get_current_station()
        with self._lock:
            self._url = url
            self._name = name

    def attach(self, gateway: AetherFmGateway) -> bool:
        """Subscribe to status changes on *gateway*.

        The handler calls back into *gateway* for the station URL and name,
        so *gateway* should be built with a
        :class:`~pyaetherfm.dispatch.StatusEventPump`; otherwise those reads
        run on whatever thread the transport delivers events on.
        """
        self._gateway = gateway
        return gateway.subscribe_status_changed(self.on_status_changed)

    def detach(self) -> bool:
        gateway = self._gateway
        if gateway is None:
            return False
        ok = gateway.unsubscribe_status_changed(self.on_status_changed)
        if ok:
            self._gateway = None
        return ok

    def on_status_changed(self, status: str) -> None:
        gateway = self._gateway
        if gateway is None:
            return
        if PlaybackStatus(status) is PlaybackStatus.PLAYING:
            url = gateway.get_current_station_url()
            name = gateway.get_current_station()
            self.remember(url=url, name=name)
            _logger.debug("Station playing url=%s name=%s", url, name)
            return
        if PlaybackStatus(status) is PlaybackStatus.STOPPED:
            # Never auto-resume on Stopped; only user action restarts playback.
            _logger.debug("Station stopped")


class AetherFmController:
    """User-facing quick controls.

    Parameters
    ----------
    gateway : AetherFmGateway
        Gateway used for every remote call.
    cache : LastStationCache or None
        Last-station cache; a fresh one is created when omitted.
    """

    def __init__(self, gateway: AetherFmGateway, cache: LastStationCache | None = None) -> None:
        self._gateway = gateway
        self._cache = cache or LastStationCache()

    @property
    def cache(self) -> LastStationCache:
        return self._cache

    @property
    def config(self) -> AetherFmConfig:
        return self._gateway.config

    def start(self) -> bool:
        """Prime the cache with the current station and start tracking it."""
        self._cache.remember(url=self._gateway.get_current_station_url())
        return self._cache.attach(self._gateway)

    def toggle_or_resume(self, is_playing: bool) -> bool:
        """Toggle playback, resuming the last station if toggling is refused.

        Returns the expected playing flag after the action, or *is_playing*
        unchanged when nothing was accepted.
        """
        if self._gateway.toggle_play_pause():
            return not is_playing
        if not is_playing and self._gateway.resume_last():
            return True
        _logger.debug("Toggle and resume both refused (playing=%s)", is_playing)
        return is_playing

    def step_volume(self, direction: int) -> float | None:
        """Move the volume one ``config.volume_step`` up (>0) or down (<0).

        Returns the level that was set, or ``None`` if the write failed.
        """
        if direction == 0:
            raise ValueError("direction must be positive or negative, not 0")
        step = self.config.volume_step if direction > 0 else -self.config.volume_step
        current = self._gateway.get_volume()
        level = clamp_volume(current + step)
        if not self._gateway.set_volume(level):
            return None
        _logger.debug("Volume changed from %s to %s", current, level)
        return level

    def volume_up(self) -> float | None:
        return self.step_volume(1)

    def volume_down(self) -> float | None:
        return self.step_volume(-1)

    def play_favorite(self, name: str) -> bool:
        if not name:
            return False
        if not self._gateway.play_by_name(name):
            return False
        self._cache.remember(name=name)
        return True

    def toggle_current_favorite(self) -> FavoriteChange:
        url = self._gateway.get_current_station_url()
        if not url:
            return FavoriteChange.NO_STATION

        favorites = self._gateway.get_favorites_collection()
        if favorites.contains(url):
            ok = self._gateway.remove_favorite(url)
            change = FavoriteChange.REMOVED
        else:
            ok = self._gateway.add_favorite(url)
            change = FavoriteChange.ADDED
        return change if ok else FavoriteChange.FAILED

    def label_for(self, snapshot: StateSnapshot) -> str:
        """Display label for *snapshot*, filling a missing station name from the cache."""
        unavailable = self.config.unavailable_label
        if snapshot.ready and not snapshot.station_name and snapshot.is_playing:
            cached = self._cache.name
            if cached:
                return f"{snapshot.status}: {cached}"
        return snapshot.format_label(unavailable)

    def label(self) -> str:
        return self.label_for(self._gateway.capture())

    def close(self) -> None:
        self._cache.detach()
