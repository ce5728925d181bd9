"""Playback status reported by the media service."""

from __future__ import annotations

from enum import StrEnum


class PlaybackStatus(StrEnum):
    """Known playback states.

    Lookup is case-insensitive. Strings without a matching member resolve
    to ``UNKNOWN`` instead of raising ``ValueError``; the original text is
    kept by whoever holds it (see :class:`~pyaetherfm.models.state.StateSnapshot`).
    """

    UNKNOWN = "Unknown"
    PLAYING = "Playing"
    PAUSED = "Paused"
    STOPPED = "Stopped"

    @classmethod
    def _missing_(cls, value: object) -> PlaybackStatus:
        if isinstance(value, str):
            folded = value.casefold()
            for member in cls:
                if member.value.casefold() == folded:
                    return member
        return cls.UNKNOWN
