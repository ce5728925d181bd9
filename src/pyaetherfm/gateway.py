"""Never-raising gateway to the AetherFM media service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any, TypeVar

from pyaetherfm._constants import (
    FAVORITE_NAME_GATES,
    GATE_ADD_FAVORITE,
    GATE_FEATURE_FLAGS,
    GATE_GET_CURRENT_STATION,
    GATE_GET_CURRENT_STATION_URL,
    GATE_GET_FAVORITES,
    GATE_GET_STATUS,
    GATE_GET_VOLUME,
    GATE_IPC_VERSION,
    GATE_IS_READY,
    GATE_OPEN_MINI_PLAYER,
    GATE_OPEN_WINDOW,
    GATE_PAUSE,
    GATE_PLAY,
    GATE_PLAY_BY_NAME,
    GATE_PLAY_BY_URL,
    GATE_REMOVE_FAVORITE,
    GATE_RESUME_LAST,
    GATE_SET_VOLUME,
    GATE_STOP,
    GATE_SUBSCRIBE_STATUS,
    GATE_TOGGLE_MINI_PLAYER,
    GATE_TOGGLE_PLAY_STOP,
    GATE_TOGGLE_WINDOW,
    GATE_UNSUBSCRIBE_STATUS,
)
from pyaetherfm._normalize import as_bool, as_int, as_str, as_str_tuple, as_volume, clamp_volume, text_or_empty
from pyaetherfm._safe import CallResult, safe_invoke
from pyaetherfm._transport import StatusHandler, Transport
from pyaetherfm.config import AetherFmConfig
from pyaetherfm.dispatch import StatusEventPump
from pyaetherfm.models.capability import RemoteCapability
from pyaetherfm.models.state import StateSnapshot
from pyaetherfm.models.station import FavoritesCollection, StationReference
from pyaetherfm.registry import SubscriptionRegistry
from pyaetherfm.snapshot import _utcnow, capture_snapshot

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class AetherFmGateway:
    """Call gateway for the AetherFM media service.

    Every method performs at most one remote call per gate and never
    raises: a failed call (transport error, remote exception, wrong result
    type) returns the fallback documented on the method.

    Usage::

        with AetherFmGateway(transport) as gateway:
            if gateway.is_available():
                gateway.play()
                print(gateway.capture().display_label)

    Gateway methods, including subscription changes, are meant to be
    called from one control thread.  Pass a
    :class:`~pyaetherfm.dispatch.StatusEventPump` as *dispatcher* to have
    status callbacks delivered on that thread as well.
    """

    def __init__(
        self,
        transport: Transport,
        config: AetherFmConfig | None = None,
        *,
        dispatcher: StatusEventPump | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._transport = transport
        self._config = config or AetherFmConfig()
        self._clock = clock
        self._closed = False
        self._subscriptions = SubscriptionRegistry(
            register=self._register_status_handler,
            unregister=self._unregister_status_handler,
            dispatcher=dispatcher,
        )
        _logger.debug("Gateway bound to %s prefix=%s", type(transport).__name__, self._config.gate_prefix)

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    def __enter__(self) -> AetherFmGateway:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    @property
    def config(self) -> AetherFmConfig:
        return self._config

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def subscriptions(self) -> SubscriptionRegistry:
        return self._subscriptions

    def close(self) -> None:
        """Unregister every tracked status handler and clear the registry.

        Safe to call more than once; only the first call does any work.
        """
        if self._closed:
            return
        self._closed = True
        _logger.debug("Closing gateway with %d subscription(s)", len(self._subscriptions))
        try:
            self._subscriptions.teardown_all()
        except Exception:
            _logger.debug("Error during gateway close", exc_info=True)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _call(self, name: str, coerce: Callable[[Any], T], *args: Any) -> CallResult[T]:
        gate = self._config.gate(name)
        return safe_invoke(
            gate,
            lambda: self._transport.invoke(gate, *args),
            coerce,
            args=args,
            trace=self._config.trace_calls,
        )

    def _register_status_handler(self, identity: StatusHandler) -> bool:
        gate = self._config.gate(GATE_SUBSCRIBE_STATUS)
        return safe_invoke(
            gate,
            lambda: self._transport.register_callback(gate, identity),
            as_bool,
            args=(identity,),
            trace=self._config.trace_calls,
        ).value_or(False)

    def _unregister_status_handler(self, identity: StatusHandler) -> bool:
        gate = self._config.gate(GATE_UNSUBSCRIBE_STATUS)
        return safe_invoke(
            gate,
            lambda: self._transport.unregister_callback(gate, identity),
            as_bool,
            args=(identity,),
            trace=self._config.trace_calls,
        ).value_or(False)

    def _command(self, name: str, *args: Any) -> bool:
        return self._call(name, as_bool, *args).value_or(False)

    # ------------------------------------------------------------------
    # Versioning & health
    # ------------------------------------------------------------------

    def ipc_version(self) -> int:
        """Remote API version, ``0`` on failure."""
        return self._call(GATE_IPC_VERSION, as_int).value_or(0)

    def feature_flags(self) -> int:
        """Remote feature bitmask, ``0`` on failure."""
        return self._call(GATE_FEATURE_FLAGS, as_int).value_or(0)

    def is_ready(self) -> bool:
        """Whether the service reports itself ready, ``False`` on failure."""
        return self._call(GATE_IS_READY, as_bool).value_or(False)

    def is_available(self) -> bool:
        """Ready and speaking at least ``config.min_ipc_version``."""
        return self.is_ready() and self.ipc_version() >= self._config.min_ipc_version

    def capability(self) -> RemoteCapability:
        return RemoteCapability(
            version=self.ipc_version(),
            feature_flags=self.feature_flags(),
            ready=self.is_ready(),
        )

    # ------------------------------------------------------------------
    # State & info
    # ------------------------------------------------------------------

    def get_current_station(self) -> str:
        return self._call(GATE_GET_CURRENT_STATION, as_str).value_or("")

    def get_current_station_url(self) -> str:
        return self._call(GATE_GET_CURRENT_STATION_URL, as_str).value_or("")

    def get_current_station_reference(self) -> StationReference:
        return StationReference(name=self.get_current_station(), url=self.get_current_station_url())

    def get_status(self) -> str:
        """Status text as reported (e.g. ``"Playing"``), ``""`` on failure."""
        return self._call(GATE_GET_STATUS, as_str).value_or("")

    # ------------------------------------------------------------------
    # Controls & windows (all return False on failure)
    # ------------------------------------------------------------------

    def play(self) -> bool:
        return self._command(GATE_PLAY)

    def pause(self) -> bool:
        return self._command(GATE_PAUSE)

    def stop(self) -> bool:
        return self._command(GATE_STOP)

    def resume_last(self) -> bool:
        return self._command(GATE_RESUME_LAST)

    def toggle_play_pause(self) -> bool:
        return self._command(GATE_TOGGLE_PLAY_STOP)

    def open_window(self) -> bool:
        return self._command(GATE_OPEN_WINDOW)

    def toggle_window(self) -> bool:
        return self._command(GATE_TOGGLE_WINDOW)

    def open_mini_player(self) -> bool:
        return self._command(GATE_OPEN_MINI_PLAYER)

    def toggle_mini_player(self) -> bool:
        return self._command(GATE_TOGGLE_MINI_PLAYER)

    # ------------------------------------------------------------------
    # Direct play
    # ------------------------------------------------------------------

    def play_by_url(self, url: str | None) -> bool:
        return self._command(GATE_PLAY_BY_URL, text_or_empty(url))

    def play_by_name(self, name: str | None) -> bool:
        return self._command(GATE_PLAY_BY_NAME, text_or_empty(name))

    # ------------------------------------------------------------------
    # Favorites
    # ------------------------------------------------------------------

    def get_favorites(self) -> tuple[str, ...]:
        """Favorite station URLs, ``()`` on failure."""
        return self._call(GATE_GET_FAVORITES, as_str_tuple).value_or(())

    def get_favorite_names(self) -> tuple[str, ...]:
        """Favorite display names.

        Name sources are tried in order and the first non-empty result
        wins; later sources are not called once one has answered.
        """
        for name in FAVORITE_NAME_GATES:
            names = self._call(name, as_str_tuple).value_or(())
            if names:
                return names
        return ()

    def get_favorites_collection(self) -> FavoritesCollection:
        return FavoritesCollection(urls=self.get_favorites(), names=self.get_favorite_names())

    def add_favorite(self, url: str | None) -> bool:
        return self._command(GATE_ADD_FAVORITE, text_or_empty(url))

    def remove_favorite(self, url: str | None) -> bool:
        return self._command(GATE_REMOVE_FAVORITE, text_or_empty(url))

    # ------------------------------------------------------------------
    # Volume
    # ------------------------------------------------------------------

    def get_volume(self) -> float:
        """Volume in [0, 1], ``0.0`` on failure."""
        return self._call(GATE_GET_VOLUME, as_volume).value_or(0.0)

    def set_volume(self, value: float) -> bool:
        """Clamp *value* to [0, 1] and send it.  NaN is sent as ``0.0``."""
        try:
            level = clamp_volume(value)
        except TypeError:
            _logger.debug("Rejected non-numeric volume %r", value)
            return False
        return self._command(GATE_SET_VOLUME, level)

    # ------------------------------------------------------------------
    # Status events
    # ------------------------------------------------------------------

    def subscribe_status_changed(self, handler: StatusHandler | None) -> bool:
        """Register *handler* for status-change events.

        Returns ``False`` for ``None``, after :meth:`close`, or when the
        remote registration fails; the handler is tracked only on success.
        """
        if self._closed:
            _logger.debug("Subscribe after close ignored")
            return False
        return self._subscriptions.subscribe(handler)

    def unsubscribe_status_changed(self, handler: StatusHandler | None) -> bool:
        return self._subscriptions.unsubscribe(handler)

    # ------------------------------------------------------------------
    # State aggregate
    # ------------------------------------------------------------------

    def capture(self) -> StateSnapshot:
        """Aggregate the current state; never raises."""
        return capture_snapshot(self, clock=self._clock)
