"""
Effect Channel.

Bounded FIFO for one-shot UI effects, owned by a single state holder.

- send() never drops: when the buffer is full the sender waits for room.
- Each effect is delivered at most once, in order, to the active consumer.
- Effects wait in the buffer while nobody is consuming.
- Only one consumer may drain the channel at a time.
- close() ends consumption and discards whatever is still buffered.
"""

import asyncio
from collections.abc import AsyncIterator
from typing import Any, Generic, TypeVar

from notes_app.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_CAPACITY = 64

_CLOSED: Any = object()


class EffectChannel(Generic[T]):
    """Single-consumer, order-preserving queue of effects."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY, name: str = "effects") -> None:
        self.name = name
        self.capacity = capacity
        self._queue: asyncio.Queue[T] = asyncio.Queue(maxsize=capacity)
        self._consuming = False
        self._closed = False

    @property
    def is_closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        """Number of buffered, not yet delivered effects."""
        return 0 if self._closed else self._queue.qsize()

    async def send(self, effect: T) -> None:
        """
        Buffer an effect for the consumer.

        Waits only while the buffer is full. Effects sent after close()
        are discarded.
        """
        if self._closed:
            logger.debug("Effect dropped on closed channel", extra={"channel": self.name})
            return
        await self._queue.put(effect)

    def try_receive(self) -> T | None:
        """Take the next buffered effect without waiting, or None."""
        if self._queue.empty():
            return None
        effect = self._queue.get_nowait()
        if effect is _CLOSED:
            self._queue.put_nowait(effect)
            return None
        return effect

    async def consume(self) -> AsyncIterator[T]:
        """
        Deliver effects in order until the channel is closed.

        Raises:
            RuntimeError: If another consumer is already draining the channel
        """
        if self._consuming:
            raise RuntimeError(f"Effect channel {self.name!r} already has a consumer")

        self._consuming = True
        try:
            while True:
                effect = await self._queue.get()
                if effect is _CLOSED:
                    self._queue.put_nowait(effect)
                    return
                yield effect
        finally:
            self._consuming = False

    def close(self) -> None:
        """Stop delivery and discard buffered effects."""
        if self._closed:
            return
        self._closed = True

        discarded = 0
        while not self._queue.empty():
            self._queue.get_nowait()
            discarded += 1

        # Room is guaranteed after draining; wakes a waiting consumer.
        self._queue.put_nowait(_CLOSED)
        logger.debug("Effect channel closed", extra={"channel": self.name, "discarded": discarded})
