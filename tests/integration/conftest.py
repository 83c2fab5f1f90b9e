"""
Integration Test Fixtures.

Fixtures for integration tests - uses the real database and the fully
wired object graph. These fixtures build on the root conftest.py
database and container fixtures.
"""

import asyncio
from collections.abc import AsyncGenerator

import pytest

from notes_app.core.dependencies import AppContainer
from notes_app.navigation.host import AppNavHost
from notes_app.repositories.note import NoteRepository


@pytest.fixture
def note_repository(container: AppContainer) -> NoteRepository:
    """Repository from the wired container."""
    return container.note_repository


@pytest.fixture
async def nav_host(container: AppContainer) -> AsyncGenerator[AppNavHost, None]:
    """
    Navigation host started on the note list.

    Usage:
        async def test_flow(nav_host: AppNavHost):
            nav_host.on_add_note_click()
    """
    host = AppNavHost(container)

    yield host

    host.close()
    # let cancelled view model tasks unwind before the engine is disposed
    await asyncio.sleep(0.01)
