"""
Concurrency Infrastructure.

Task scoping for state holders. Every asynchronous unit of work a view
model starts is launched through its TaskScope, so the whole batch can be
cancelled when the owning screen goes away.

Usage:
    from notes_app.core.concurrency import TaskScope

    scope = TaskScope("notes")
    task = scope.launch(do_work())
    ...
    scope.cancel()   # in-flight tasks are cancelled, later launches never run
"""

import asyncio
from collections.abc import Coroutine
from typing import Any, TypeVar

from notes_app.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class TaskScope:
    """A set of asyncio tasks sharing one lifetime.

    Tasks inherit the caller's contextvars (structlog context included),
    as asyncio.create_task copies the current context.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._tasks: set[asyncio.Task[Any]] = set()
        self._cancelled = False

    @property
    def is_active(self) -> bool:
        """False once cancel() has been called."""
        return not self._cancelled

    @property
    def pending(self) -> int:
        """Number of tasks still running."""
        return len(self._tasks)

    def launch(self, coro: Coroutine[Any, Any, T]) -> asyncio.Task[T]:
        """
        Start a coroutine as a task owned by this scope.

        Must be called with a running event loop. After cancel() the
        coroutine is still wrapped in a task but cancelled before its
        first step, so it never runs.

        Returns:
            The task, which callers may await or ignore
        """
        task = asyncio.get_running_loop().create_task(coro)
        if self._cancelled:
            task.cancel()
            logger.debug("Launch after scope cancel dropped", extra={"scope": self.name})
            return task

        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return task

    def _on_done(self, task: asyncio.Task[Any]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(
                "Scoped task failed",
                extra={"scope": self.name, "error": repr(error)},
            )

    def cancel(self) -> None:
        """
        Cancel every in-flight task and refuse future work.

        A scoped task that cancels its own scope (a save that navigates
        back and clears its view model) is left to finish its current step.
        """
        self._cancelled = True
        try:
            current = asyncio.current_task()
        except RuntimeError:
            current = None
        for task in list(self._tasks):
            if task is not current:
                task.cancel()
        logger.debug("Task scope cancelled", extra={"scope": self.name, "tasks": len(self._tasks)})

