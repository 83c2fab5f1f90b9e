"""
Navigation Host.

Back stack of screen entries. Each entry owns its SavedStateHandle and the
view model built for it; popping an entry clears its view model. The host
is the glue the UI layer drives: it passes note ids between screens and
relays an optional result string back to the previous entry.

Usage:
    host = AppNavHost(container)
    host.on_add_note_click()
    detail = host.current_entry.view_model
    detail.on_title_change("Groceries")
    await detail.save_note(host.navigate_back)
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from notes_app.core.dependencies import AppContainer
from notes_app.core.logging import get_logger, log_with_source
from notes_app.navigation.routes import (
    Screen,
    match_route,
    new_note_route,
    note_detail_route,
)
from notes_app.presentation.base import BaseViewModel
from notes_app.presentation.saved_state import KEY_RESULT, SavedStateHandle

logger = get_logger(__name__)


@dataclass
class NavBackStackEntry:
    """One screen instance on the back stack."""

    route: str
    screen: Screen
    arguments: dict[str, int]
    saved_state: SavedStateHandle
    view_model: BaseViewModel = field(repr=False)


class AppNavHost:
    """
    Navigation host for the two note screens.

    Must be created with a running event loop: the start destination's
    view model is built immediately.
    """

    def __init__(
        self,
        container: AppContainer,
        start_route: str = Screen.NOTE_LIST.route,
        restored: Sequence[Mapping[str, Any]] | None = None,
    ) -> None:
        self._container = container
        self._back_stack: list[NavBackStackEntry] = []

        if restored:
            for saved in restored:
                self._push(saved["route"], saved.get("state"))
        else:
            self._push(start_route)

    @property
    def back_stack(self) -> list[NavBackStackEntry]:
        return list(self._back_stack)

    @property
    def current_entry(self) -> NavBackStackEntry:
        return self._back_stack[-1]

    def _push(self, route: str, state: Mapping[str, Any] | None = None) -> NavBackStackEntry:
        screen, arguments = match_route(route)
        saved_state = SavedStateHandle(state)
        view_model = self._container.create_view_model(screen, arguments, saved_state)
        entry = NavBackStackEntry(route, screen, arguments, saved_state, view_model)
        self._back_stack.append(entry)
        log_with_source(logger, "navigation", "info", "Route pushed", route=route)
        return entry

    def navigate(self, route: str) -> NavBackStackEntry:
        """
        Open a screen on top of the current one.

        Raises:
            NavigationError: If the route is unknown
        """
        return self._push(route)

    def on_note_click(self, note_id: int) -> NavBackStackEntry:
        return self.navigate(note_detail_route(note_id))

    def on_add_note_click(self) -> NavBackStackEntry:
        return self.navigate(new_note_route())

    def pop_back_stack(self, result: str | None = None) -> bool:
        """
        Leave the current screen.

        The start destination is never popped. A result string is stored
        under "result" in the previous entry's saved state.

        Returns:
            True if an entry was popped
        """
        if len(self._back_stack) <= 1:
            return False

        entry = self._back_stack.pop()
        entry.view_model.clear()
        if result is not None:
            self.current_entry.saved_state[KEY_RESULT] = result
        log_with_source(logger, "navigation", "info", "Route popped", route=entry.route)
        return True

    def navigate_back(self) -> None:
        """Callback form of pop_back_stack() handed to view models."""
        self.pop_back_stack()

    def snapshot(self) -> list[dict[str, Any]]:
        """Routes and saved state of every entry, for restoring after process death."""
        return [
            {"route": entry.route, "state": entry.saved_state.snapshot()}
            for entry in self._back_stack
        ]

    def close(self) -> None:
        """Clear every view model on the stack."""
        while self._back_stack:
            self._back_stack.pop().view_model.clear()
