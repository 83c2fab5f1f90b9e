"""
Application Dependencies.

Composition root: builds the store -> repository -> use-case chain once
per process and constructs view models for the navigation host. All
wiring is constructor injection; singletons are created lazily on first
access.

Usage:
    container = AppContainer()
    await container.start()
    ...
    await container.close()
"""

from functools import cached_property
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from notes_app.core.config_schema import ApplicationSchema, UiSchema
from notes_app.core.database import (
    create_session_factory,
    dispose_engine,
    get_engine,
    init_database,
)
from notes_app.core.logging import get_logger, log_with_source, setup_logging
from notes_app.mappers.note import NoteMapper
from notes_app.navigation.routes import Screen
from notes_app.presentation.base import BaseViewModel
from notes_app.presentation.note_detail import NoteDetailViewModel
from notes_app.presentation.notes import NotesViewModel
from notes_app.presentation.saved_state import SavedStateHandle
from notes_app.repositories.note import NoteRepository
from notes_app.services.note import NotesUseCase
from notes_app.store.note import NoteStore

logger = get_logger(__name__)


class AppContainer:
    """
    Application-scoped object graph.

    Args:
        engine: Engine to use; defaults to the one described by config
        application: Application settings; defaults to application.yaml
    """

    def __init__(
        self,
        engine: AsyncEngine | None = None,
        application: ApplicationSchema | None = None,
    ) -> None:
        self._engine = engine
        self._application = application

    @cached_property
    def engine(self) -> AsyncEngine:
        return self._engine if self._engine is not None else get_engine()

    @cached_property
    def application(self) -> ApplicationSchema:
        if self._application is not None:
            return self._application
        from notes_app.core.config import get_app_config

        return get_app_config().application

    @property
    def ui(self) -> UiSchema:
        return self.application.ui

    @cached_property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(self.engine)

    @cached_property
    def mapper(self) -> NoteMapper:
        return NoteMapper()

    @cached_property
    def note_store(self) -> NoteStore:
        return NoteStore(self.session_factory)

    @cached_property
    def note_repository(self) -> NoteRepository:
        return NoteRepository(self.note_store, self.mapper)

    @cached_property
    def notes_use_case(self) -> NotesUseCase:
        return NotesUseCase(self.note_repository)

    async def start(self, configure_logging: bool = True) -> None:
        """Configure logging and make sure the schema exists."""
        if configure_logging:
            setup_logging()
        await init_database(self.engine)
        log_with_source(
            logger, "internal", "info", "Application container started",
            app=self.application.name, version=self.application.version,
        )

    async def close(self) -> None:
        if self._engine is None:
            await dispose_engine()
        else:
            await self._engine.dispose()
        log_with_source(logger, "internal", "info", "Application container closed")

    def notes_view_model(self, saved_state: SavedStateHandle) -> NotesViewModel:
        return NotesViewModel(
            self.notes_use_case,
            saved_state,
            effect_capacity=self.ui.effect_buffer_capacity,
            all_deleted_message=self.ui.all_deleted_message,
        )

    def note_detail_view_model(
        self,
        note_id: int,
        saved_state: SavedStateHandle,
    ) -> NoteDetailViewModel:
        return NoteDetailViewModel(note_id, self.notes_use_case, saved_state)

    def create_view_model(
        self,
        screen: Screen,
        arguments: dict[str, Any],
        saved_state: SavedStateHandle,
    ) -> BaseViewModel:
        """View model factory used by the navigation host."""
        if screen is Screen.NOTE_LIST:
            return self.notes_view_model(saved_state)
        return self.note_detail_view_model(arguments.get("noteId", 0), saved_state)
