"""
Note Card.

Display model for one row of the note list.
"""

from datetime import timezone

from pydantic import BaseModel, ConfigDict

from notes_app.core.utils import format_timestamp
from notes_app.schemas.note import Note

PREVIEW_MAX_LINES = 3


class NoteCard(BaseModel):
    """What the list screen shows for a note."""

    note_id: int
    title: str
    preview: str
    last_updated: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_note(cls, note: Note, tz: timezone | None = None) -> "NoteCard":
        return cls(
            note_id=note.id,
            title=note.title,
            preview="\n".join(note.content.splitlines()[:PREVIEW_MAX_LINES]),
            last_updated=f"Last updated: {format_timestamp(note.timestamp, tz=tz)}",
        )
