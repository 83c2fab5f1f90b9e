"""
Unit Tests for NotesUseCase.

The use-case is a pass-through; every call must reach the repository
unchanged.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from notes_app.repositories.note import NoteRepository
from notes_app.services.note import NotesUseCase


@pytest.fixture
def mock_repo() -> MagicMock:
    repo = MagicMock(spec=NoteRepository)
    repo.get_note_by_id = AsyncMock()
    repo.add_note = AsyncMock()
    repo.update_note = AsyncMock()
    repo.delete_note = AsyncMock()
    repo.delete_all_notes = AsyncMock()
    return repo


@pytest.fixture
def use_case(mock_repo) -> NotesUseCase:
    return NotesUseCase(mock_repo)


class TestNotesUseCase:
    def test_get_notes_returns_repository_stream(self, use_case, mock_repo):
        stream = object()
        mock_repo.get_notes.return_value = stream

        assert use_case.get_notes() is stream

    @pytest.mark.asyncio
    async def test_get_note_by_id(self, use_case, mock_repo, make_note):
        note = make_note(id=7)
        mock_repo.get_note_by_id.return_value = note

        assert await use_case.get_note_by_id(7) is note
        mock_repo.get_note_by_id.assert_awaited_once_with(7)

    @pytest.mark.asyncio
    async def test_add_note(self, use_case, mock_repo, make_note):
        note = make_note(id=0)
        await use_case.add_note(note)
        mock_repo.add_note.assert_awaited_once_with(note)

    @pytest.mark.asyncio
    async def test_update_note(self, use_case, mock_repo, make_note):
        note = make_note(id=3)
        await use_case.update_note(note)
        mock_repo.update_note.assert_awaited_once_with(note)

    @pytest.mark.asyncio
    async def test_delete_note(self, use_case, mock_repo, make_note):
        note = make_note(id=3)
        await use_case.delete_note(note)
        mock_repo.delete_note.assert_awaited_once_with(note)

    @pytest.mark.asyncio
    async def test_delete_all(self, use_case, mock_repo):
        await use_case.delete_all()
        mock_repo.delete_all_notes.assert_awaited_once_with()

    @pytest.mark.asyncio
    async def test_storage_errors_propagate(self, use_case, mock_repo, make_note):
        from notes_app.core.exceptions import StorageError

        mock_repo.add_note.side_effect = StorageError("disk full", operation="insert")

        with pytest.raises(StorageError) as exc_info:
            await use_case.add_note(make_note(id=0))
        assert exc_info.value.code == "SYS_STORAGE_ERROR"
