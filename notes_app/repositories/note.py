"""
Note Repository.

Domain-facing access to notes. Wraps the NoteStore behind Note objects,
mapping in both directions. No validation, caching or retries happen here.
"""

from collections.abc import AsyncIterator
from contextlib import aclosing

from notes_app.core.logging import get_logger
from notes_app.mappers.note import NoteMapper
from notes_app.schemas.note import Note
from notes_app.store.note import NoteStore

logger = get_logger(__name__)


class NoteRepository:
    """
    Repository for Note domain objects.

    Every write goes straight to the store; the observable list is the
    store's live listing passed through the mapper.
    """

    def __init__(self, store: NoteStore, mapper: NoteMapper) -> None:
        self._store = store
        self._mapper = mapper

    async def get_notes(self) -> AsyncIterator[list[Note]]:
        """
        Live list of all notes, newest first.

        Yields the current list immediately and a fresh one after every
        change to the table. The underlying subscription is released when
        this iterator is closed.
        """
        async with aclosing(self._store.observe_all()) as rows:
            async for entities in rows:
                yield [self._mapper.to_domain(entity) for entity in entities]

    async def get_note_by_id(self, id: int) -> Note | None:
        """
        Get a note by ID.

        Returns:
            The note, or None when no row has that id
        """
        entity = await self._store.get_by_id(id)
        if entity is None:
            logger.debug("Note not found", extra={"note_id": id})
            return None
        return self._mapper.to_domain(entity)

    async def add_note(self, note: Note) -> None:
        await self._store.insert(self._mapper.to_entity(note))

    async def update_note(self, note: Note) -> None:
        await self._store.update(self._mapper.to_entity(note))

    async def delete_note(self, note: Note) -> None:
        await self._store.delete(self._mapper.to_entity(note))

    async def delete_all_notes(self) -> None:
        await self._store.delete_all()
