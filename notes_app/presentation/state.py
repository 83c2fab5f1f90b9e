"""
Reactive State.

MutableStateFlow holds the latest value of a piece of view state and lets
any number of observers follow it. Assigning an equal value is ignored,
so observers only see real changes.
"""

from collections.abc import AsyncIterator
from typing import Any, Generic, TypeVar

from notes_app.events.broadcast import ChangeNotifier

T = TypeVar("T")

_UNSET: Any = object()


class MutableStateFlow(Generic[T]):
    """Observable holder of a single current value."""

    def __init__(self, initial: T, name: str = "state") -> None:
        self._value = initial
        self._notifier = ChangeNotifier(name)

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        if new_value == self._value:
            return
        self._value = new_value
        self._notifier.notify()

    async def collect(self) -> AsyncIterator[T]:
        """
        Yield the current value, then every later distinct value.

        Values set in quick succession are conflated: an observer that is
        busy sees the latest one, never a stale backlog.
        """
        with self._notifier.subscribe() as subscription:
            last = _UNSET
            while True:
                current = self._value
                if last is _UNSET or current != last:
                    last = current
                    yield current
                await subscription.wait()
