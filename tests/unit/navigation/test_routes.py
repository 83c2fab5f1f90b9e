"""Unit tests for route building and matching."""

import pytest

from notes_app.core.exceptions import NavigationError
from notes_app.navigation.routes import (
    Screen,
    match_route,
    new_note_route,
    note_detail_route,
)


class TestRouteBuilding:
    def test_detail_route(self):
        assert note_detail_route(7) == "note_detail_screen/7"

    def test_new_note_route_uses_zero(self):
        assert new_note_route() == "note_detail_screen/0"

    def test_argument_names(self):
        assert Screen.NOTE_LIST.argument_names == []
        assert Screen.NOTE_DETAIL.argument_names == ["noteId"]


class TestMatchRoute:
    def test_list_route(self):
        assert match_route("note_list_screen") == (Screen.NOTE_LIST, {})

    def test_detail_route_parses_integer_id(self):
        screen, arguments = match_route(note_detail_route(42))

        assert screen is Screen.NOTE_DETAIL
        assert arguments == {"noteId": 42}

    @pytest.mark.parametrize(
        "route",
        [
            "",
            "settings_screen",
            "note_detail_screen/",
            "note_detail_screen/abc",
            "note_detail_screen/1/extra",
            "note_list_screen/1",
        ],
    )
    def test_unknown_routes_raise(self, route):
        with pytest.raises(NavigationError) as exc_info:
            match_route(route)
        assert exc_info.value.code == "NAV_INVALID_ROUTE"
