"""
Change Broadcast.

Multi-subscriber notification primitive. Publishers call notify() after a
change; every subscriber sees a "dirty" flag and re-reads whatever it
observes. Signals are conflated: several notifications before a subscriber
wakes up count as one, which is enough because the subscriber always reads
the latest state.

Usage:
    from notes_app.events.broadcast import ChangeNotifier

    notifier = ChangeNotifier("notes")

    with notifier.subscribe() as subscription:
        while True:
            snapshot = await read_state()
            await subscription.wait()
"""

import asyncio
from collections.abc import Iterator
from contextlib import contextmanager

from notes_app.core.logging import get_logger

logger = get_logger(__name__)


class Subscription:
    """One subscriber's view of a ChangeNotifier."""

    def __init__(self) -> None:
        self._dirty = asyncio.Event()

    def _mark_dirty(self) -> None:
        self._dirty.set()

    @property
    def pending(self) -> bool:
        """True when a change arrived that wait() has not consumed yet."""
        return self._dirty.is_set()

    async def wait(self) -> None:
        """Suspend until the next change, then reset the flag."""
        await self._dirty.wait()
        self._dirty.clear()


class ChangeNotifier:
    """Broadcasts "something changed" to any number of subscribers."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._subscriptions: set[Subscription] = set()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def notify(self) -> None:
        """Wake every current subscriber. Never blocks."""
        for subscription in list(self._subscriptions):
            subscription._mark_dirty()
        logger.debug(
            "Change broadcast",
            extra={"channel": self.name, "subscribers": len(self._subscriptions)},
        )

    @contextmanager
    def subscribe(self) -> Iterator[Subscription]:
        """Register a subscriber for the duration of the with-block."""
        subscription = Subscription()
        self._subscriptions.add(subscription)
        try:
            yield subscription
        finally:
            self._subscriptions.discard(subscription)
