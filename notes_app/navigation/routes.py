"""
Navigation Routes.

The two logical screens and their route patterns:

    note_list_screen              - note list, no parameters
    note_detail_screen/{noteId}   - create (noteId == 0) or edit a note
"""

import enum
import re

from notes_app.core.exceptions import NavigationError
from notes_app.schemas.note import NEW_NOTE_ID

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


class Screen(enum.Enum):
    NOTE_LIST = "note_list_screen"
    NOTE_DETAIL = "note_detail_screen/{noteId}"

    @property
    def route(self) -> str:
        """Route pattern, placeholders included."""
        return self.value

    @property
    def argument_names(self) -> list[str]:
        return _PLACEHOLDER.findall(self.value)

    def _pattern(self) -> re.Pattern[str]:
        parts = _PLACEHOLDER.split(self.value)
        regex = ""
        for index, part in enumerate(parts):
            # split() alternates literal text and placeholder names
            regex += re.escape(part) if index % 2 == 0 else rf"(?P<{part}>-?\d+)"
        return re.compile(rf"^{regex}$")


def note_detail_route(note_id: int) -> str:
    """Concrete detail route; note_id 0 opens an empty new note."""
    return Screen.NOTE_DETAIL.route.replace("{noteId}", str(note_id))


def new_note_route() -> str:
    return note_detail_route(NEW_NOTE_ID)


def match_route(route: str) -> tuple[Screen, dict[str, int]]:
    """
    Resolve a concrete route to its screen and integer arguments.

    Raises:
        NavigationError: If no screen matches
    """
    for screen in Screen:
        match = screen._pattern().match(route)
        if match is not None:
            return screen, {name: int(value) for name, value in match.groupdict().items()}
    raise NavigationError(f"Unknown route: {route!r}")
