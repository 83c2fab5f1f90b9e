"""
Note Detail View Model.

State holder for the create/edit screen.

Lifecycle per screen instance:

    note_id == 0:  READY immediately, drafts start empty (or restored)
    note_id != 0:  LOADING -> fetch by id -> READY

Drafts are mirrored into the screen's SavedStateHandle on every edit so a
restored process resumes where the user stopped. The initial fetch only
fills draft fields that are still empty, so a restored draft wins over the
stored note.
"""

import asyncio
import enum
from collections.abc import Callable

from notes_app.core.utils import current_time_millis
from notes_app.presentation.base import BaseViewModel
from notes_app.presentation.saved_state import (
    KEY_DRAFT_CONTENT,
    KEY_DRAFT_TITLE,
    SavedStateHandle,
)
from notes_app.presentation.state import MutableStateFlow
from notes_app.schemas.note import NEW_NOTE_ID, Note
from notes_app.services.note import NotesUseCase


class DetailStatus(enum.Enum):
    NEW = "new"
    LOADING = "loading"
    READY = "ready"


class NoteDetailViewModel(BaseViewModel):
    """
    View model for the note detail screen.

    Must be constructed with a running event loop when note_id != 0, since
    the fetch is launched from the constructor.
    """

    def __init__(
        self,
        note_id: int,
        notes_use_case: NotesUseCase,
        saved_state: SavedStateHandle,
        clock: Callable[[], int] = current_time_millis,
    ) -> None:
        super().__init__(saved_state)
        self.note_id = note_id
        self._use_case = notes_use_case
        self._clock = clock

        self.status: MutableStateFlow[DetailStatus] = MutableStateFlow(DetailStatus.NEW, name="status")
        self.note: MutableStateFlow[Note | None] = MutableStateFlow(None, name="note")
        self.title: MutableStateFlow[str] = MutableStateFlow(
            saved_state.get(KEY_DRAFT_TITLE, ""), name="title"
        )
        self.content: MutableStateFlow[str] = MutableStateFlow(
            saved_state.get(KEY_DRAFT_CONTENT, ""), name="content"
        )

        if note_id != NEW_NOTE_ID:
            self.status.value = DetailStatus.LOADING
            self.launch(self._load_note(note_id))
        else:
            self.status.value = DetailStatus.READY

    @property
    def is_editing(self) -> bool:
        return self.note_id > 0

    @property
    def screen_title(self) -> str:
        """Edit title once a stored note has loaded, new-note title otherwise."""
        return "Edit Note" if self.note.value is not None else "New Note"

    @property
    def can_delete(self) -> bool:
        """True only while a loaded note is on screen."""
        return self.note.value is not None

    async def _load_note(self, note_id: int) -> None:
        existing = await self._use_case.get_note_by_id(note_id)
        self.note.value = existing
        if existing is not None:
            if not self.title.value:
                self.title.value = existing.title
            if not self.content.value:
                self.content.value = existing.content
        self.status.value = DetailStatus.READY
        self._log_event("Note loaded", note_id=note_id, found=existing is not None)

    def on_title_change(self, new_title: str) -> None:
        self.title.value = new_title
        self.saved_state[KEY_DRAFT_TITLE] = new_title

    def on_content_change(self, new_content: str) -> None:
        self.content.value = new_content
        self.saved_state[KEY_DRAFT_CONTENT] = new_content

    def save_note(self, on_navigate_back: Callable[[], None]) -> asyncio.Task[None]:
        """
        Persist the draft and navigate back.

        A blank title abandons the save: nothing is written and
        on_navigate_back is not called.
        """
        return self.launch(self._save_note(on_navigate_back))

    async def _save_note(self, on_navigate_back: Callable[[], None]) -> None:
        title = self.title.value.strip()
        content = self.content.value.strip()
        if not title:
            self._log_event("Save skipped, blank title", note_id=self.note_id)
            return

        model = Note(
            id=self.note_id if self.is_editing else NEW_NOTE_ID,
            title=title,
            content=content,
            timestamp=self._clock(),
        )

        if self.is_editing:
            await self._use_case.update_note(model)
        else:
            await self._use_case.add_note(model)
        self._clear_draft()
        on_navigate_back()

    def _clear_draft(self) -> None:
        self.saved_state[KEY_DRAFT_TITLE] = ""
        self.saved_state[KEY_DRAFT_CONTENT] = ""

    def delete_note(self, on_complete: Callable[[], None]) -> asyncio.Task[None]:
        """Delete the loaded note, then call on_complete. No-op before it loads."""
        return self.launch(self._delete_note(on_complete))

    async def _delete_note(self, on_complete: Callable[[], None]) -> None:
        note_to_delete = self.note.value
        if note_to_delete is None:
            return
        await self._use_case.delete_note(note_to_delete)
        on_complete()
