from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

import pytest

from pyaetherfm.exceptions import AetherFmTransportError
from pyaetherfm.gateway import AetherFmGateway

P = "AetherFM."


class RecordingTransport:
    """Transport double that records every call.

    ``results`` maps a full gate name to the value returned; an Exception
    instance is raised instead. Gates listed in ``failing`` (or every gate
    when ``fail_all`` is set) raise a transport error. Unknown gates raise
    as well, like an unreachable service.
    """

    def __init__(
        self,
        results: dict[str, Any] | None = None,
        *,
        failing: set[str] | None = None,
        fail_all: bool = False,
    ) -> None:
        self.results: dict[str, Any] = dict(results or {})
        self.failing: set[str] = set(failing or ())
        self.fail_all = fail_all
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.handlers: list[Callable[[str], None]] = []

    def count(self, name: str) -> int:
        return sum(1 for called, _ in self.calls if called == name)

    def args_for(self, name: str) -> list[tuple[Any, ...]]:
        return [args for called, args in self.calls if called == name]

    def _answer(self, name: str) -> Any:
        if self.fail_all or name in self.failing:
            raise AetherFmTransportError(f"{name} unreachable", gate=name)
        if name not in self.results:
            raise AetherFmTransportError(f"No provider for gate {name}", gate=name)
        value = self.results[name]
        if isinstance(value, Exception):
            raise value
        return value

    def invoke(self, name: str, *args: Any) -> Any:
        self.calls.append((name, args))
        return self._answer(name)

    def register_callback(self, name: str, handler: Callable[[str], None]) -> Any:
        self.calls.append((name, (handler,)))
        result = self._answer(name) if name in self.results or self.fail_all or name in self.failing else True
        if result is True:
            self.handlers.append(handler)
        return result

    def unregister_callback(self, name: str, handler: Callable[[str], None]) -> Any:
        self.calls.append((name, (handler,)))
        result = self._answer(name) if name in self.results or self.fail_all or name in self.failing else True
        if result is True and handler in self.handlers:
            self.handlers.remove(handler)
        return result

    def push(self, status: str) -> None:
        """Deliver a status event the way the remote side would."""
        for handler in list(self.handlers):
            handler(status)


def playing_results(**overrides: Any) -> dict[str, Any]:
    results: dict[str, Any] = {
        f"{P}IsReady": True,
        f"{P}IpcVersion": 1,
        f"{P}FeatureFlags": 0,
        f"{P}GetStatus": "Playing",
        f"{P}GetCurrentStation": "Jazz FM",
        f"{P}GetCurrentStationUrl": "http://x",
        f"{P}GetVolume": 0.42,
    }
    for key, value in overrides.items():
        results[f"{P}{key}"] = value
    return results


FIXED_NOW = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    return RecordingTransport


@pytest.fixture
def make_gateway() -> Callable[..., tuple[AetherFmGateway, RecordingTransport]]:
    def _make(results: dict[str, Any] | None = None, **kwargs: Any) -> tuple[AetherFmGateway, RecordingTransport]:
        gateway_kwargs = {k: kwargs.pop(k) for k in ("config", "dispatcher") if k in kwargs}
        transport = RecordingTransport(results, **kwargs)
        gateway = AetherFmGateway(transport, clock=lambda: FIXED_NOW, **gateway_kwargs)
        return gateway, transport

    return _make


@pytest.fixture
def playing() -> Callable[..., dict[str, Any]]:
    return playing_results


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW
