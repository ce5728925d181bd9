"""Normalization helpers.

Centralizes type checking of remote results. ``None`` maps to the empty
value of the expected type; anything else of the wrong type raises
:class:`~pyaetherfm.exceptions.AetherFmTypeError` so the gateway can
treat it like any other failed call.
"""

from __future__ import annotations

import math
from typing import Any

from pyaetherfm._constants import VOLUME_MAX, VOLUME_MIN
from pyaetherfm.exceptions import AetherFmTypeError


def _mismatch(expected: str, value: Any) -> AetherFmTypeError:
    return AetherFmTypeError(
        f"expected {expected}, got {type(value).__name__}",
        received=value,
    )


def clamp_volume(value: Any) -> float:
    """Clamp *value* to the closed interval [0, 1].

    NaN has no nearest bound and maps to ``0.0``.  Infinities and ints
    too large for a float clamp to the matching bound.  Anything that is
    not an ``int`` or ``float`` (including ``bool`` and numeric strings)
    raises ``TypeError``.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"volume must be a real number, got {type(value).__name__}")
    if isinstance(value, int):
        if value <= 0:
            return VOLUME_MIN
        if value >= 1:
            return VOLUME_MAX
    result = float(value)
    if math.isnan(result):
        return VOLUME_MIN
    return max(VOLUME_MIN, min(VOLUME_MAX, result))


def as_bool(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    raise _mismatch("bool", value)


def as_int(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise _mismatch("int", value)


def as_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    raise _mismatch("str", value)


def as_str_tuple(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise _mismatch("sequence of str", value)
    return tuple(as_str(item) for item in value)


def as_volume(value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _mismatch("float", value)
    return clamp_volume(value)


def text_or_empty(value: str | None) -> str:
    """Outbound string argument: ``None`` is sent as ``""``."""
    return "" if value is None else value
