"""Point-in-time snapshot of the media service state."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, field_validator

from pyaetherfm._constants import DEFAULT_UNAVAILABLE_LABEL, VOLUME_MAX, VOLUME_MIN
from pyaetherfm.models.station import StationReference
from pyaetherfm.models.status import PlaybackStatus

#: Timestamp value meaning "never captured".
UNSET_TIMESTAMP = datetime.min.replace(tzinfo=UTC)


class StateSnapshot(BaseModel):
    """Immutable aggregate of five reads taken in immediate succession.

    The reads are not transactional; ``captured_at`` records when the
    aggregation finished and bounds how stale the fields can be.

    Parameters
    ----------
    ready : bool
        Whether the service was available (ready and a supported version).
    status : str
        Status text exactly as reported, e.g. ``"Playing"``.
    station_name : str
        Current station display name, or ``""``.
    station_url : str
        Current station URL, or ``""``.
    volume : float
        Volume level in [0, 1].
    captured_at : datetime
        UTC time at which aggregation completed.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    ready: bool
    status: str
    station_name: str
    station_url: str
    volume: float
    captured_at: datetime

    @field_validator("captured_at")
    @classmethod
    def _ensure_tz_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @classmethod
    def unavailable(cls, now: datetime) -> StateSnapshot:
        """Snapshot used when the service cannot be reached."""
        return cls(
            ready=False,
            status="",
            station_name="",
            station_url="",
            volume=0.0,
            captured_at=now,
        )

    @property
    def playback_status(self) -> PlaybackStatus:
        if not self.ready:
            return PlaybackStatus.UNKNOWN
        return PlaybackStatus(self.status)

    @property
    def is_playing(self) -> bool:
        return self.playback_status is PlaybackStatus.PLAYING

    @property
    def is_paused(self) -> bool:
        return self.playback_status is PlaybackStatus.PAUSED

    @property
    def is_stopped(self) -> bool:
        return self.playback_status is PlaybackStatus.STOPPED

    @property
    def volume_percentage(self) -> int:
        return round(self.volume * 100)

    @property
    def station(self) -> StationReference:
        return StationReference(name=self.station_name, url=self.station_url)

    @property
    def display_label(self) -> str:
        return self.format_label()

    def format_label(self, unavailable_label: str = DEFAULT_UNAVAILABLE_LABEL) -> str:
        """``"{status}: {station}"``, the status alone, or *unavailable_label*."""
        if not self.ready:
            return unavailable_label
        if not self.station_name:
            return self.status
        return f"{self.status}: {self.station_name}"

    @property
    def is_valid(self) -> bool:
        if not VOLUME_MIN <= self.volume <= VOLUME_MAX:
            return False
        if self.captured_at == UNSET_TIMESTAMP:
            return False
        if self.ready and not self.status:
            return False
        return True
