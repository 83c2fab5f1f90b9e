"""Unit tests for notes_app.core.concurrency."""

import asyncio

import pytest

from notes_app.core.concurrency import TaskScope


class TestTaskScopeLaunch:
    @pytest.mark.asyncio
    async def test_runs_coroutine_and_returns_task(self):
        scope = TaskScope("test")

        async def work():
            return 42

        task = scope.launch(work())

        assert await task == 42
        assert scope.pending == 0

    @pytest.mark.asyncio
    async def test_tracks_running_tasks(self):
        scope = TaskScope("test")
        gate = asyncio.Event()

        task = scope.launch(gate.wait())
        await asyncio.sleep(0)
        assert scope.pending == 1

        gate.set()
        await task
        assert scope.pending == 0

    @pytest.mark.asyncio
    async def test_failed_task_is_released(self):
        scope = TaskScope("test")

        async def boom():
            raise ValueError("nope")

        task = scope.launch(boom())

        with pytest.raises(ValueError):
            await task
        assert scope.pending == 0


class TestTaskScopeCancel:
    @pytest.mark.asyncio
    async def test_cancels_in_flight_work(self):
        scope = TaskScope("test")
        reached_end = False

        async def slow():
            nonlocal reached_end
            await asyncio.Event().wait()
            reached_end = True

        task = scope.launch(slow())
        await asyncio.sleep(0)
        scope.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert not reached_end
        assert not scope.is_active

    @pytest.mark.asyncio
    async def test_task_cancelling_its_own_scope_completes(self):
        scope = TaskScope("test")

        async def finish_and_leave():
            scope.cancel()
            return "done"

        task = scope.launch(finish_and_leave())

        assert await task == "done"
        assert not scope.is_active

    @pytest.mark.asyncio
    async def test_launch_after_cancel_never_runs(self):
        scope = TaskScope("test")
        scope.cancel()
        ran = False

        async def work():
            nonlocal ran
            ran = True

        task = scope.launch(work())

        with pytest.raises(asyncio.CancelledError):
            await task
        assert not ran
        assert scope.pending == 0
