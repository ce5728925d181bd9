"""Marshal status callbacks from the transport's context to the control thread.

The media service pushes status changes on its own schedule, from
whatever thread the transport uses. :class:`StatusEventPump` hands the
transport a proxy per handler; the proxy only enqueues. The real handler
runs later on the control thread, either when that thread calls
:meth:`StatusEventPump.drain` or, when the pump is bound to an asyncio
loop, via ``loop.call_soon_threadsafe``.
"""

from __future__ import annotations

import asyncio
import logging
import queue
from collections.abc import Callable

from pyaetherfm._transport import StatusHandler

_logger = logging.getLogger(__name__)


class StatusEventPump:
    """Thread-safe hand-off of status events to the control thread."""

    def __init__(self, *, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop
        self._queue: queue.SimpleQueue[tuple[StatusHandler, str]] = queue.SimpleQueue()
        self._proxies: dict[StatusHandler, StatusHandler] = {}

    @property
    def pending(self) -> int:
        """Approximate number of queued events (always 0 in loop mode)."""
        return self._queue.qsize()

    def wrap(self, handler: StatusHandler) -> StatusHandler:
        """Return the marshalling proxy for *handler*.

        The same proxy object is returned for equal handlers until
        :meth:`release` is called, so it can be used as a registration
        identity.
        """
        proxy = self._proxies.get(handler)
        if proxy is None:
            proxy = self._make_proxy(handler)
            self._proxies[handler] = proxy
        return proxy

    def release(self, handler: StatusHandler) -> None:
        """Forget the proxy for *handler* (no-op when unknown)."""
        self._proxies.pop(handler, None)

    def drain(self, max_events: int | None = None) -> int:
        """Run queued handlers in FIFO order on the calling thread.

        Returns the number of handlers run.  A failing handler is logged
        and does not stop the drain.
        """
        ran = 0
        while max_events is None or ran < max_events:
            try:
                handler, status = self._queue.get_nowait()
            except queue.Empty:
                break
            self._run(handler, status)
            ran += 1
        return ran

    def _make_proxy(self, handler: StatusHandler) -> StatusHandler:
        def proxy(status: str) -> None:
            self._post(handler, status)

        proxy.__qualname__ = f"StatusEventPump.proxy[{getattr(handler, '__qualname__', type(handler).__name__)}]"
        return proxy

    def _post(self, handler: StatusHandler, status: str) -> None:
        loop = self._loop
        if loop is None:
            self._queue.put((handler, status))
            return
        try:
            loop.call_soon_threadsafe(self._run, handler, status)
        except RuntimeError:
            # Loop already closed; the event has nowhere to go.
            _logger.debug("Dropping status=%s: event loop is closed", status)

    @staticmethod
    def _run(handler: Callable[[str], None], status: str) -> None:
        try:
            handler(status)
        except Exception:
            _logger.warning("Status handler failed for status=%s", status, exc_info=True)
