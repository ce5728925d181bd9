"""Aggregation of gateway reads into a :class:`StateSnapshot`."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from pyaetherfm._normalize import clamp_volume
from pyaetherfm.models.state import StateSnapshot
from pyaetherfm.models.status import PlaybackStatus

if TYPE_CHECKING:
    from pyaetherfm.gateway import AetherFmGateway

_logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


def capture_snapshot(
    gateway: AetherFmGateway,
    *,
    clock: Callable[[], datetime] = _utcnow,
) -> StateSnapshot:
    """Read availability, status, station and volume, then freeze them.

    All five reads are performed even when the service reports itself
    unavailable. The result is normalised so that an unavailable snapshot
    carries no station data, and a ready snapshot always has a status
    (``"Unknown"`` when the service reported none).
    """
    try:
        ready = gateway.is_available()
        status = gateway.get_status()
        station_name = gateway.get_current_station()
        station_url = gateway.get_current_station_url()
        volume = clamp_volume(gateway.get_volume())
        captured_at = clock()

        if not ready:
            return StateSnapshot.unavailable(captured_at)

        return StateSnapshot(
            ready=True,
            status=status or PlaybackStatus.UNKNOWN.value,
            station_name=station_name,
            station_url=station_url,
            volume=volume,
            captured_at=captured_at,
        )
    except Exception:
        _logger.debug("Snapshot aggregation failed", exc_info=True)
        try:
            captured_at = clock()
        except Exception:
            _logger.debug("Snapshot clock failed", exc_info=True)
            captured_at = _utcnow()
        return StateSnapshot.unavailable(captured_at)
