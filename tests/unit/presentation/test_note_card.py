"""Unit tests for the note list display model."""

from datetime import timezone

from notes_app.presentation.note_card import NoteCard


class TestNoteCard:
    def test_from_note(self, make_note):
        card = NoteCard.from_note(make_note(id=5, timestamp=0), tz=timezone.utc)

        assert card.note_id == 5
        assert card.title == "Groceries"
        assert card.preview == "Milk, eggs"
        assert card.last_updated == "Last updated: Jan 01, 1970 00:00"

    def test_preview_is_limited_to_three_lines(self, make_note):
        card = NoteCard.from_note(make_note(content="1\n2\n3\n4\n5"))

        assert card.preview == "1\n2\n3"

    def test_empty_content(self, make_note):
        assert NoteCard.from_note(make_note(content="")).preview == ""
