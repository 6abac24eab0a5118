"""
Cooperative repeating tick schedule.

The host loop calls poll(now) whenever it likes; the ticker fires its
callback at most once per poll and only when a full period has passed since
the previous tick. Nothing fires after cancel().
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Subscription:
    """
    Handle returned by subscribe(). Revoked when its session leaves running.
    """

    def __init__(self, owner: "Publisher", listener: Callable):
        self._owner = owner
        self.listener = listener
        self.active = True

    def unsubscribe(self) -> None:
        if self.active:
            self._owner._remove(self)

    def _revoke(self) -> None:
        self.active = False


class Publisher:
    """Fan-out of read-only snapshots to subscribed listeners."""

    def __init__(self):
        self._subscriptions: list[Subscription] = []

    def subscribe(self, listener: Callable) -> Subscription:
        subscription = Subscription(self, listener)
        self._subscriptions.append(subscription)
        return subscription

    def publish(self, payload) -> None:
        for subscription in list(self._subscriptions):
            subscription.listener(payload)

    def revoke_all(self) -> None:
        for subscription in self._subscriptions:
            subscription._revoke()
        self._subscriptions = []

    def _remove(self, subscription: Subscription) -> None:
        subscription._revoke()
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)

    def __len__(self) -> int:
        return len(self._subscriptions)


class Ticker:
    """
    Cancellable repeating task driven by poll(now).

    Args:
        interval: Period in seconds
        on_tick: Called with the poll timestamp when a tick is due
    """

    def __init__(self, interval: float, on_tick: Callable[[float], None]):
        if interval <= 0:
            raise ValueError("Tick interval must be positive")
        self.interval = interval
        self._on_tick = on_tick
        self._next_due: Optional[float] = None

    @property
    def active(self) -> bool:
        return self._next_due is not None

    def start(self, now: float) -> None:
        self._next_due = now + self.interval

    def cancel(self) -> None:
        self._next_due = None

    def poll(self, now: float) -> bool:
        """
        Fire the callback if a tick is due.

        Returns:
            True if the callback ran
        """
        if self._next_due is None or now < self._next_due:
            return False

        # Missed periods collapse into one tick
        self._next_due = now + self.interval
        self._on_tick(now)
        return True
