"""
Notes View Model.

State holder for the note list screen. Follows the live note list for its
whole lifetime, performs delete-all, and emits one-shot messages through a
buffered effect channel.
"""

import asyncio
from contextlib import aclosing

from notes_app.events.channel import DEFAULT_CAPACITY, EffectChannel
from notes_app.events.schemas import NotesEffect, ShowMessage
from notes_app.presentation.base import BaseViewModel
from notes_app.presentation.note_card import NoteCard
from notes_app.presentation.saved_state import KEY_RESULT, SavedStateHandle
from notes_app.presentation.state import MutableStateFlow
from notes_app.schemas.note import Note
from notes_app.services.note import NotesUseCase

ALL_NOTES_DELETED = "All notes deleted"


class NotesViewModel(BaseViewModel):
    """
    View model for the note list screen.

    Must be constructed with a running event loop: the note subscription
    and the result relay start immediately.
    """

    def __init__(
        self,
        notes_use_case: NotesUseCase,
        saved_state: SavedStateHandle,
        effect_capacity: int = DEFAULT_CAPACITY,
        all_deleted_message: str = ALL_NOTES_DELETED,
    ) -> None:
        super().__init__(saved_state)
        self._use_case = notes_use_case
        self._all_deleted_message = all_deleted_message

        self.notes: MutableStateFlow[list[Note]] = MutableStateFlow([], name="notes")
        self.effects: EffectChannel[NotesEffect] = self._register_channel(
            EffectChannel(effect_capacity, name="notes-effects")
        )

        self.launch(self._collect_notes())
        self.launch(self._relay_results())

    @property
    def note_cards(self) -> list[NoteCard]:
        return [NoteCard.from_note(note) for note in self.notes.value]

    @property
    def is_empty(self) -> bool:
        return not self.notes.value

    async def _collect_notes(self) -> None:
        async with aclosing(self._use_case.get_notes()) as stream:
            async for notes in stream:
                self.notes.value = notes

    async def _relay_results(self) -> None:
        """Forward every non-blank "result" left by another screen, once."""
        flow = self.saved_state.get_state_flow(KEY_RESULT, "")
        async with aclosing(flow.collect()) as results:
            async for message in results:
                if not message or not message.strip():
                    continue
                await self.effects.send(ShowMessage(text=message))
                self.saved_state[KEY_RESULT] = ""

    def delete_all_notes(self) -> asyncio.Task[None]:
        """Delete every note, then queue the confirmation message."""
        return self.launch(self._delete_all_notes())

    async def _delete_all_notes(self) -> None:
        await self._use_case.delete_all()
        await self.effects.send(ShowMessage(text=self._all_deleted_message))
        self._log_event("All notes deleted")
