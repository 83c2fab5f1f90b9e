# Domain schemas package
from notes_app.schemas.note import NEW_NOTE_ID, Note

__all__ = [
    "NEW_NOTE_ID",
    "Note",
]
