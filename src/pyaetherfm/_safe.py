"""Safe-invoke: one remote call, never raising.

Every gateway operation goes through :func:`safe_invoke`, which returns a
:class:`CallResult` carrying the success flag alongside the value. The
public gateway methods collapse it with :meth:`CallResult.value_or`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pyaetherfm._redact import summarize_for_log
from pyaetherfm.exceptions import AetherFmTypeError

_logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class CallResult(Generic[T]):
    """Outcome of a single safe-invoked call."""

    operation: str
    ok: bool
    value: T | None = None
    error: Exception | None = None

    def value_or(self, fallback: T) -> T:
        """Return the call's value on success, *fallback* otherwise."""
        if self.ok:
            return self.value  # type: ignore[return-value]
        return fallback


def safe_invoke(
    operation: str,
    call: Callable[[], Any],
    coerce: Callable[[Any], T],
    *,
    args: Sequence[Any] = (),
    trace: bool = False,
) -> CallResult[T]:
    """Run *call* once and type-check its result with *coerce*.

    Any :class:`Exception` from the call or from coercion becomes a failed
    result. ``BaseException`` subclasses such as ``KeyboardInterrupt``
    propagate.
    """
    try:
        value = coerce(call())
    except Exception as exc:
        if isinstance(exc, AetherFmTypeError) and not exc.operation:
            exc.operation = operation
        _logger.debug(
            "Call %s args=%s failed: %s",
            operation,
            summarize_for_log(list(args)),
            exc,
            exc_info=True,
        )
        return CallResult(operation=operation, ok=False, error=exc)

    if trace:
        _logger.debug(
            "Call %s args=%s -> %s",
            operation,
            summarize_for_log(list(args)),
            summarize_for_log(value),
        )
    return CallResult(operation=operation, ok=True, value=value)
