"""
Saved State.

Small key-value store scoped to one navigation entry. Values written here
are meant to survive process death: the host persists snapshot() and
hands the dict back when the entry is recreated.

Well-known keys:
    draft_title    - in-progress title on the detail screen
    draft_content  - in-progress content on the detail screen
    result         - one-shot message relayed to the previous screen
"""

from collections.abc import Iterator, Mapping
from typing import Any

from notes_app.presentation.state import MutableStateFlow

KEY_DRAFT_TITLE = "draft_title"
KEY_DRAFT_CONTENT = "draft_content"
KEY_RESULT = "result"


class SavedStateHandle:
    """Recoverable key-value slots for a single screen instance."""

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(initial or {})
        self._flows: dict[str, MutableStateFlow[Any]] = {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value
        flow = self._flows.get(key)
        if flow is not None:
            flow.value = value

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def keys(self) -> Iterator[str]:
        return iter(self._values)

    def get_state_flow(self, key: str, initial: Any) -> MutableStateFlow[Any]:
        """
        Observable view of one key.

        The key is seeded with initial when absent. Later set() calls on
        the handle are pushed to the flow.
        """
        if key not in self._flows:
            if key not in self._values:
                self._values[key] = initial
            self._flows[key] = MutableStateFlow(self._values[key], name=f"saved:{key}")
        return self._flows[key]

    def snapshot(self) -> dict[str, Any]:
        """Plain copy of every slot, for persisting across process death."""
        return dict(self._values)
