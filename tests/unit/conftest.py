"""
Unit Test Fixtures.

Fixtures for unit tests - collaborators are mocked.
Unit tests should be fast and isolated, never touching real databases.
"""

import asyncio
from collections.abc import AsyncIterator, Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

from notes_app.schemas.note import Note
from notes_app.services.note import NotesUseCase


def note_stream(*snapshots: list[Note]) -> AsyncIterator[list[Note]]:
    """
    Async iterator that yields the given lists, then stays open.

    Mimics a live subscription: it never ends on its own and is released
    when its consumer is cancelled or closes it.
    """

    async def stream() -> AsyncIterator[list[Note]]:
        for snapshot in snapshots:
            yield snapshot
        await asyncio.Event().wait()

    return stream()


@pytest.fixture
def make_note() -> Callable[..., Note]:
    """
    Build a Note with sensible defaults.

    Usage:
        note = make_note(id=7, title="Groceries")
    """

    def factory(**overrides) -> Note:
        fields = {
            "id": 1,
            "title": "Groceries",
            "content": "Milk, eggs",
            "timestamp": 1_700_000_000_000,
        }
        fields.update(overrides)
        return Note(**fields)

    return factory


@pytest.fixture
def mock_use_case() -> MagicMock:
    """
    Mocked NotesUseCase.

    get_notes yields an empty list and stays subscribed; every other
    operation is an AsyncMock.
    """
    use_case = MagicMock(spec=NotesUseCase)
    use_case.get_notes.side_effect = lambda: note_stream([])
    use_case.get_note_by_id = AsyncMock(return_value=None)
    use_case.add_note = AsyncMock()
    use_case.update_note = AsyncMock()
    use_case.delete_note = AsyncMock()
    use_case.delete_all = AsyncMock()
    return use_case


@pytest.fixture(name="note_stream")
def note_stream_fixture() -> Callable[..., AsyncIterator[list[Note]]]:
    """Factory for live-looking note list streams (see note_stream)."""
    return note_stream
