"""
Base View Model.

Common lifetime handling for screen state holders. A view model is created
inside a running event loop when its screen is entered and cleared when
the screen is destroyed. Everything it launches runs in its TaskScope, so
clear() abandons in-flight fetches and writes and their results never
reach the state.

Usage:
    from notes_app.presentation.base import BaseViewModel

    class NotesViewModel(BaseViewModel):
        def __init__(self, use_case: NotesUseCase, saved_state: SavedStateHandle) -> None:
            super().__init__(saved_state)
            self.launch(self._collect_notes())
"""

import asyncio
from collections.abc import Coroutine
from typing import Any, TypeVar

from notes_app.core.concurrency import TaskScope
from notes_app.core.logging import get_logger, log_with_source
from notes_app.events.channel import EffectChannel
from notes_app.presentation.saved_state import SavedStateHandle

T = TypeVar("T")


class BaseViewModel:
    """
    Base class for all view models.

    Provides:
    - A TaskScope bound to the view model's lifetime
    - The screen's SavedStateHandle
    - Registration of effect channels closed on clear()
    """

    def __init__(self, saved_state: SavedStateHandle) -> None:
        self.saved_state = saved_state
        self._scope = TaskScope(self.__class__.__name__)
        self._channels: list[EffectChannel[Any]] = []
        self._logger = get_logger(self.__class__.__module__)
        self._cleared = False

    @property
    def is_cleared(self) -> bool:
        return self._cleared

    def launch(self, coro: Coroutine[Any, Any, T]) -> asyncio.Task[T]:
        """Run a coroutine for as long as this view model lives."""
        return self._scope.launch(coro)

    def _register_channel(self, channel: EffectChannel[T]) -> EffectChannel[T]:
        self._channels.append(channel)
        return channel

    def _log_event(self, message: str, **context: Any) -> None:
        log_with_source(
            self._logger,
            "ui",
            "debug",
            message,
            view_model=self.__class__.__name__,
            **context,
        )

    def clear(self) -> None:
        """Cancel all launched work and close effect channels. Idempotent."""
        if self._cleared:
            return
        self._cleared = True
        self._scope.cancel()
        for channel in self._channels:
            channel.close()
        self._log_event("View model cleared")
