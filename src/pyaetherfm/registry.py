"""Tracking of status-change subscriptions.

The registry is owned by a single gateway and only touched from the
control thread; it takes no lock.  Entries are keyed by handler equality,
so two bound methods of the same object and function count as one
subscription while two separately defined lambdas do not.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from pyaetherfm._transport import StatusHandler
from pyaetherfm.dispatch import StatusEventPump

_logger = logging.getLogger(__name__)


class SubscriptionRegistry:
    """Set of handlers successfully registered with the remote side.

    Parameters
    ----------
    register, unregister : callable
        Safe-invoked remote (de)registration.  Receive the identity to
        hand to the transport and return ``True`` on success; they must
        not raise.
    dispatcher : StatusEventPump or None
        When set, the transport sees the pump's proxy instead of the
        handler itself.
    """

    def __init__(
        self,
        *,
        register: Callable[[StatusHandler], bool],
        unregister: Callable[[StatusHandler], bool],
        dispatcher: StatusEventPump | None = None,
    ) -> None:
        self._register = register
        self._unregister = unregister
        self._dispatcher = dispatcher
        # handler -> identity registered with the transport
        self._members: dict[StatusHandler, StatusHandler] = {}

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, handler: object) -> bool:
        return handler in self._members

    @property
    def handlers(self) -> tuple[StatusHandler, ...]:
        return tuple(self._members)

    def _identity_for(self, handler: StatusHandler) -> StatusHandler:
        existing = self._members.get(handler)
        if existing is not None:
            return existing
        if self._dispatcher is not None:
            return self._dispatcher.wrap(handler)
        return handler

    def _release_untracked(self, handler: StatusHandler) -> None:
        if self._dispatcher is not None and handler not in self._members:
            self._dispatcher.release(handler)

    def subscribe(self, handler: StatusHandler | None) -> bool:
        if handler is None:
            return False
        identity = self._identity_for(handler)
        if not self._register(identity):
            self._release_untracked(handler)
            return False
        self._members[handler] = identity
        return True

    def unsubscribe(self, handler: StatusHandler | None) -> bool:
        if handler is None:
            return False
        identity = self._identity_for(handler)
        if not self._unregister(identity):
            self._release_untracked(handler)
            return False
        self._members.pop(handler, None)
        if self._dispatcher is not None:
            self._dispatcher.release(handler)
        return True

    def teardown_all(self) -> int:
        """Offer every tracked handler one unsubscribe attempt, then clear.

        Returns the number of attempts that failed.
        """
        failures = 0
        for handler in list(self._members):
            try:
                ok = self.unsubscribe(handler)
            except Exception:
                _logger.debug("Unsubscribe raised during teardown", exc_info=True)
                ok = False
            if not ok:
                failures += 1
                _logger.debug("Status handler teardown failed: %r", handler)

        if self._dispatcher is not None:
            for handler in self._members:
                self._dispatcher.release(handler)
        self._members.clear()
        if failures:
            _logger.debug("Subscription teardown finished with %d failure(s)", failures)
        return failures
