"""Adapter configuration for pyaetherfm."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyaetherfm._constants import (
    DEFAULT_GATE_PREFIX,
    DEFAULT_MIN_IPC_VERSION,
    DEFAULT_UNAVAILABLE_LABEL,
    DEFAULT_VOLUME_STEP,
)
from pyaetherfm.exceptions import AetherFmConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class AetherFmConfig:
    """Adapter configuration.

    Parameters
    ----------
    gate_prefix : str
        Prefix prepended to every gate name (e.g. ``"AetherFM."``).
    min_ipc_version : int
        Lowest remote API version considered usable by
        :meth:`~pyaetherfm.gateway.AetherFmGateway.is_available`.
    volume_step : float
        Increment used by the quick controls for volume up/down.
    unavailable_label : str
        Display label shown when the media service is not available.
    trace_calls : bool
        Log every successful remote call at DEBUG level.  Failures are
        always logged.
    """

    gate_prefix: str = DEFAULT_GATE_PREFIX
    min_ipc_version: int = DEFAULT_MIN_IPC_VERSION
    volume_step: float = DEFAULT_VOLUME_STEP
    unavailable_label: str = DEFAULT_UNAVAILABLE_LABEL
    trace_calls: bool = False

    def __post_init__(self) -> None:
        if not 0.0 < self.volume_step <= 1.0:
            raise AetherFmConfigError(f"volume_step must be in (0, 1], got {self.volume_step}")
        if self.min_ipc_version < 0:
            raise AetherFmConfigError(f"min_ipc_version must be >= 0, got {self.min_ipc_version}")

    def gate(self, name: str) -> str:
        """Return the fully-qualified gate name for *name*."""
        return f"{self.gate_prefix}{name}"

    @classmethod
    def from_env(cls, **overrides: Any) -> AetherFmConfig:
        """Create configuration from environment variables.

        Reads optional ``AETHERFM_*`` variables. Explicit keyword
        arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        AetherFmConfig
            Populated configuration.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        _ENV_STR_MAP = {
            "AETHERFM_GATE_PREFIX": "gate_prefix",
            "AETHERFM_UNAVAILABLE_LABEL": "unavailable_label",
        }
        for env_key, field_name in _ENV_STR_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        try:
            version_env = env.get("AETHERFM_MIN_IPC_VERSION")
            if version_env is not None and "min_ipc_version" not in overrides:
                config_kwargs["min_ipc_version"] = int(version_env)

            step_env = env.get("AETHERFM_VOLUME_STEP")
            if step_env is not None and "volume_step" not in overrides:
                config_kwargs["volume_step"] = float(step_env)
        except ValueError as exc:
            raise AetherFmConfigError(f"Invalid numeric AETHERFM_* variable: {exc}") from exc

        if "trace_calls" not in overrides:
            config_kwargs["trace_calls"] = _env_bool(env.get("AETHERFM_TRACE_CALLS"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
