"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Test Database Configuration:
    Each test gets a fresh SQLite file under pytest's tmp_path, opened
    through aiosqlite. A file (rather than :memory:) lets the store's
    per-call sessions use separate connections, as they do in the app.
"""

import asyncio
from collections.abc import AsyncGenerator, Awaitable, Callable

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from notes_app.core.config_schema import ApplicationSchema, UiSchema
from notes_app.core.database import create_engine, create_session_factory, init_database
from notes_app.core.dependencies import AppContainer
from notes_app.store.note import NoteStore


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
async def db_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """Create a test engine on a throwaway database file with the schema in place."""
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'notes.db'}")
    await init_database(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
def db_session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return create_session_factory(db_engine)


@pytest.fixture
def note_store(db_session_factory: async_sessionmaker[AsyncSession]) -> NoteStore:
    """A NoteStore over the test database."""
    return NoteStore(db_session_factory)


# =============================================================================
# Application Fixtures
# =============================================================================


@pytest.fixture
def app_settings() -> ApplicationSchema:
    """Application settings matching config/settings/application.yaml."""
    return ApplicationSchema(
        name="Notes",
        version="test",
        ui=UiSchema(effect_buffer_capacity=64, all_deleted_message="All notes deleted"),
    )


@pytest.fixture
async def container(
    db_engine: AsyncEngine,
    app_settings: ApplicationSchema,
) -> AsyncGenerator[AppContainer, None]:
    """
    Fully wired application container over the test database.

    Usage:
        async def test_pipeline(container: AppContainer):
            await container.notes_use_case.add_note(note)
    """
    app = AppContainer(engine=db_engine, application=app_settings)
    await app.start(configure_logging=False)

    yield app

    await app.close()


# =============================================================================
# Utility Fixtures
# =============================================================================


@pytest.fixture
def eventually() -> Callable[..., Awaitable[None]]:
    """
    Wait until a condition holds, yielding to the event loop in between.

    Usage:
        await eventually(lambda: view_model.status.value is DetailStatus.READY)
    """

    async def wait(condition: Callable[[], bool], timeout: float = 2.0) -> None:
        async with asyncio.timeout(timeout):
            while not condition():
                await asyncio.sleep(0.005)

    return wait
