"""Custom exception hierarchy for pyaetherfm.

None of these ever reach a gateway caller: the gateway absorbs them and
returns the operation's fallback. Only :class:`AetherFmConfigError` can
surface, when a configuration is constructed with invalid values.
"""

from __future__ import annotations

from typing import Any


class AetherFmError(Exception):
    """Base exception for all pyaetherfm errors."""


class AetherFmConfigError(AetherFmError):
    """Invalid configuration value."""


class AetherFmTransportError(AetherFmError):
    """Named call could not be delivered or the remote side raised."""

    def __init__(self, message: str, *, gate: str = "") -> None:
        self.gate = gate
        super().__init__(message)


class AetherFmTypeError(AetherFmError):
    """Remote call returned a value of the wrong type for the operation."""

    def __init__(self, message: str, *, operation: str = "", received: Any = None) -> None:
        self.operation = operation
        self.received = received
        super().__init__(message)
