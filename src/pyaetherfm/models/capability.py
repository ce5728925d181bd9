"""Remote capability model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from pyaetherfm._constants import DEFAULT_MIN_IPC_VERSION


class RemoteCapability(BaseModel):
    """Version, feature flags and readiness of the media service.

    Queried on demand and never cached by the gateway.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: int = 0
    feature_flags: int = 0
    ready: bool = False

    def is_available(self, min_version: int = DEFAULT_MIN_IPC_VERSION) -> bool:
        return self.ready and self.version >= min_version

    def has_feature(self, flag: int) -> bool:
        """Return ``True`` when every bit of *flag* is set."""
        return flag != 0 and (self.feature_flags & flag) == flag
