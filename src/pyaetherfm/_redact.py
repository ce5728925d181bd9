"""Helpers for safe debug logging.

Gate arguments can carry long URLs, station names with odd characters,
and callables. This module shortens them before they are emitted in
DEBUG logs.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


def summarize_for_log(value: Any, *, max_string: int = 128, _depth: int = 0) -> Any:
    """Return a shortened copy of *value* suitable for debug logs."""
    if _depth > 8:
        return "<max-depth>"

    if value is None:
        return None

    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, bytes):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, Mapping):
        return {str(k): summarize_for_log(v, max_string=max_string, _depth=_depth + 1) for k, v in value.items()}

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        if len(value) > 16:
            head = [summarize_for_log(v, max_string=max_string, _depth=_depth + 1) for v in value[:16]]
            return [*head, f"<+{len(value) - 16} more>"]
        return [summarize_for_log(v, max_string=max_string, _depth=_depth + 1) for v in value]

    if callable(value):
        name = getattr(value, "__qualname__", None) or type(value).__name__
        return f"<callable:{name}>"

    # Fallback: represent unknown objects without dumping internals.
    return f"<{type(value).__name__}>"
