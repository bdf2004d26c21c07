"""Input state machine for the picker, independent of Textual."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from histfind.session import SearchSession


class Mode(Enum):
    """Which part of the picker receives navigation."""

    EDITING_QUERY = "editing"
    NAVIGATING_RESULTS = "navigating"


@dataclass(frozen=True)
class PickerState:
    """Picker state after one input event.

    Transitions return a new state. Ranking only happens in :meth:`edit`.
    """

    session: SearchSession
    mode: Mode = Mode.EDITING_QUERY
    selected: int = 0
    max_visible: int = 100

    @classmethod
    def start(cls, session: SearchSession, max_visible: int = 100) -> PickerState:
        """Initial state: editing the query, first entry selected."""
        return cls(session=session, max_visible=max_visible)

    @property
    def query(self) -> str:
        """Current query text."""
        return self.session.query

    @property
    def visible(self) -> tuple[str, ...]:
        """Results shown to the user."""
        return self.session.results[: self.max_visible]

    @property
    def selected_entry(self) -> str | None:
        """Raw text of the selected entry, or None if out of range."""
        if 0 <= self.selected < len(self.visible):
            return self.visible[self.selected]
        return None

    def edit(self, query: str) -> PickerState:
        """Apply a query change: re-rank and return to editing."""
        if query == self.query and self.mode is Mode.EDITING_QUERY:
            return self
        session = self.session if query == self.query else self.session.with_query(query)
        return replace(self, session=session, mode=Mode.EDITING_QUERY, selected=0)

    def move(self, direction: str) -> PickerState:
        """Apply a navigation key ("next" or "prev")."""
        count = len(self.visible)
        if count == 0:
            return self
        if self.mode is Mode.EDITING_QUERY:
            # The first entry is already the implicit choice while typing.
            selected = 1 if direction == "next" and count > 1 else 0
            return replace(self, mode=Mode.NAVIGATING_RESULTS, selected=selected)
        step = 1 if direction == "next" else -1
        return replace(self, selected=(self.selected + step) % count)

    def confirm(self) -> str | None:
        """Return the entry to emit, or None when nothing is selectable."""
        return self.selected_entry
