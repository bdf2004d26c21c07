"""Main Textual application for histfind."""

from __future__ import annotations

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.widgets import Static, TextArea

from histfind.session import SearchSession
from histfind.tui.state import Mode, PickerState
from histfind.tui.widgets.query_input import QueryInput
from histfind.tui.widgets.result_list import ResultList

logger = logging.getLogger(__name__)

# Prompt and highlight color
HISTFIND_PURPLE = "#9664c8"


class HistfindTUI(App[str | None]):
    """Textual app for picking a command from history.

    The app exits with the chosen entry's raw text, or None when the user
    cancels.

    Args:
        corpus: Deduplicated history, most recent first.
        query: Initial query text.
        max_results: Maximum number of entries rendered.
        max_line_length: Entries longer than this are truncated for display.
    """

    CSS = f"""
    Screen {{
        layout: vertical;
        padding: 0 1;
    }}
    #query-row {{
        height: 1;
    }}
    #prompt {{
        width: 2;
        height: 1;
        color: {HISTFIND_PURPLE};
    }}
    #query-row QueryInput {{
        width: 1fr;
    }}
    #status-bar {{
        height: 1;
        color: $text-muted;
    }}
    """

    BINDINGS = [
        Binding("ctrl+c", "cancel", "Cancel", show=False),
    ]

    # Ctrl+P moves up through results
    ENABLE_COMMAND_PALETTE = False

    def __init__(
        self,
        corpus: list[str],
        query: str = "",
        max_results: int = 100,
        max_line_length: int = 200,
    ) -> None:
        super().__init__()
        self._max_line_length = max_line_length
        self._state = PickerState.start(
            SearchSession.start(corpus, query), max_visible=max_results
        )

    @property
    def state(self) -> PickerState:
        """Current picker state."""
        return self._state

    def compose(self) -> ComposeResult:
        """Create the app layout."""
        with Horizontal(id="query-row"):
            yield Static(">", id="prompt")
            yield QueryInput(self._state.query)
        yield ResultList(max_line_length=self._max_line_length)
        yield Static("", id="status-bar")

    def on_mount(self) -> None:
        """Focus the query and draw the initial results."""
        try:
            query_input = self.query_one(QueryInput)
        except NoMatches:
            return
        query_input.focus()
        query_input.move_cursor((0, len(self._state.query)))
        self._refresh_results()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        """Re-rank when the query changes."""
        query = self.query_one(QueryInput).query_text
        self._state = self._state.edit(query)
        logger.debug("Query %r matched %d entries", query, self._state.session.result_count)
        self._refresh_results()

    def on_query_input_navigate(self, event: QueryInput.Navigate) -> None:
        """Move the selection through the visible results."""
        self._state = self._state.move(event.direction)
        self._refresh_results()

    def on_query_input_confirmed(self, event: QueryInput.Confirmed) -> None:
        """Exit with the selected entry, if any."""
        entry = self._state.confirm()
        if entry is None:
            return
        logger.info("Selected entry %r", entry)
        self.exit(entry)

    def on_query_input_cancelled(self, event: QueryInput.Cancelled) -> None:
        """Exit without a selection."""
        self.action_cancel()

    def action_cancel(self) -> None:
        """Exit without a selection."""
        self.exit(None)

    def _refresh_results(self) -> None:
        """Push the current state into the display widgets."""
        state = self._state
        selected = state.selected if state.mode is Mode.NAVIGATING_RESULTS else None
        self.query_one(ResultList).show_entries(state.visible, state.query, selected)
        total = state.session.result_count
        shown = len(state.visible)
        status = f"{total:,}/{len(state.session.corpus):,}"
        if shown < total:
            status += f" (showing {shown})"
        self.query_one("#status-bar", Static).update(
            f"{status} \u2502 \u2191\u2193: select \u2502 Enter: pick \u2502 Esc: cancel"
        )
