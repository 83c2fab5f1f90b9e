"""
Effect Schemas.

One-shot UI effects emitted by state holders. An effect is consumed once by
the screen and is never part of persistent state.

Usage:
    from notes_app.events.schemas import ShowMessage

    await effects.send(ShowMessage(text="All notes deleted"))
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class ShowMessage(BaseModel):
    """Ask the list screen to show a transient message."""

    kind: Literal["show_message"] = "show_message"
    text: str

    model_config = ConfigDict(frozen=True)


NotesEffect = ShowMessage
"""Every effect the note list screen understands."""
