"""
Note Mapper.

Converts between the stored row (NoteEntity) and the domain Note.
"""

from notes_app.models.note import NoteEntity
from notes_app.schemas.note import NEW_NOTE_ID, Note


class NoteMapper:
    """Stateless field copy between NoteEntity and Note.

    The only translation is the id sentinel: a domain id of 0 becomes a
    row id of None so the database assigns one, and back.
    """

    def to_domain(self, entity: NoteEntity) -> Note:
        return Note(
            id=entity.id if entity.id is not None else NEW_NOTE_ID,
            title=entity.title,
            content=entity.content,
            timestamp=entity.timestamp,
        )

    def to_entity(self, note: Note) -> NoteEntity:
        return NoteEntity(
            id=None if note.id == NEW_NOTE_ID else note.id,
            title=note.title,
            content=note.content,
            timestamp=note.timestamp,
        )
