"""Named-call transport used to reach the media service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol

from pyaetherfm.exceptions import AetherFmTransportError

_logger = logging.getLogger(__name__)

StatusHandler = Callable[[str], None]


class Transport(Protocol):
    """Structural transport interface used by the gateway.

    Having a protocol here makes it easy to pass test doubles while
    keeping the in-process implementation (`CallGateTransport`) concrete.
    Every method performs exactly one remote call and may raise on any
    failure.
    """

    def invoke(self, name: str, *args: Any) -> Any:
        ...

    def register_callback(self, name: str, handler: StatusHandler) -> Any:
        ...

    def unregister_callback(self, name: str, handler: StatusHandler) -> Any:
        ...


class CallGateTransport:
    """In-process call gates.

    The provider side publishes callables under gate names; consumers
    invoke them by name. Callback registration is itself a gate call that
    receives the handler as its only argument, so the provider decides
    what identity means for its own subscriber list.
    """

    def __init__(self) -> None:
        self._gates: dict[str, Callable[..., Any]] = {}

    def provide(self, name: str, func: Callable[..., Any]) -> None:
        """Publish *func* under gate *name*, replacing any previous provider."""
        self._gates[name] = func

    def withdraw(self, name: str) -> None:
        """Remove the provider for gate *name* (no-op when absent)."""
        self._gates.pop(name, None)

    def is_provided(self, name: str) -> bool:
        return name in self._gates

    def invoke(self, name: str, *args: Any) -> Any:
        func = self._gates.get(name)
        if func is None:
            raise AetherFmTransportError(f"No provider for gate {name}", gate=name)

        _logger.debug("CALL %s", name)

        try:
            return func(*args)
        except AetherFmTransportError:
            raise
        except Exception as exc:
            raise AetherFmTransportError(
                f"Gate {name} raised {type(exc).__name__}: {exc}",
                gate=name,
            ) from exc

    def register_callback(self, name: str, handler: StatusHandler) -> Any:
        return self.invoke(name, handler)

    def unregister_callback(self, name: str, handler: StatusHandler) -> Any:
        return self.invoke(name, handler)
