"""
Notes Use-Case.

Application-facing façade over NoteRepository. Signatures mirror the
repository one to one; the service adds logging and nothing else.
"""

from collections.abc import AsyncIterator

from notes_app.repositories.note import NoteRepository
from notes_app.schemas.note import Note
from notes_app.services.base import BaseService


class NotesUseCase(BaseService):
    """Use-case entry point for everything the screens do with notes."""

    def __init__(self, repo: NoteRepository) -> None:
        super().__init__()
        self.repo = repo

    def get_notes(self) -> AsyncIterator[list[Note]]:
        """Live list of all notes, newest first."""
        return self.repo.get_notes()

    async def get_note_by_id(self, id: int) -> Note | None:
        self._log_debug("Fetching note", note_id=id)
        return await self.repo.get_note_by_id(id)

    async def add_note(self, note: Note) -> None:
        self._log_operation("Creating note", title=note.title)
        await self.repo.add_note(note)

    async def update_note(self, note: Note) -> None:
        self._log_operation("Updating note", note_id=note.id)
        await self.repo.update_note(note)

    async def delete_note(self, note: Note) -> None:
        self._log_operation("Deleting note", note_id=note.id)
        await self.repo.delete_note(note)

    async def delete_all(self) -> None:
        self._log_operation("Deleting all notes")
        await self.repo.delete_all_notes()
