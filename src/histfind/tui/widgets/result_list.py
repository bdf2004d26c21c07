"""Result list widget for the history picker."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.geometry import Region
from textual.widgets import Static

from histfind.tui.markup import render_entry

SELECTED_MARKER = ">"


def render_rows(
    entries: tuple[str, ...], query: str, selected: int | None, max_line_length: int
) -> Text:
    """Build the text for all rows, one entry per line."""
    lines = []
    for i, entry in enumerate(entries):
        marker = SELECTED_MARKER if i == selected else " "
        line = Text(f"{marker} ", style="bold" if i == selected else "")
        line.append_text(render_entry(entry, query, max_line_length))
        lines.append(line)
    return Text("\n").join(lines)


class ResultList(VerticalScroll):
    """Scrolling display of ranked history entries with highlighted matches.

    A pure display widget: the app passes in the visible entries, the
    query they were ranked against, and the selected row. The selected row
    is kept in view.
    """

    DEFAULT_CSS = """
    ResultList {
        height: 1fr;
        padding: 0 1;
        border-top: solid $accent;
    }
    ResultList > #result-rows {
        height: auto;
    }
    """

    can_focus = False

    def __init__(self, max_line_length: int = 200) -> None:
        super().__init__()
        self._max_line_length = max_line_length
        self._entries: tuple[str, ...] = ()
        self._query = ""
        self._selected: int | None = None
        self._rows = Static("", id="result-rows")

    @property
    def entries(self) -> tuple[str, ...]:
        """Entries currently displayed."""
        return self._entries

    @property
    def selected(self) -> int | None:
        """Row shown as selected, or None while editing."""
        return self._selected

    def compose(self) -> ComposeResult:
        """Create the row display."""
        yield self._rows

    def show_entries(
        self, entries: tuple[str, ...], query: str, selected: int | None = None
    ) -> None:
        """Replace the displayed entries.

        Args:
            entries: Entries to show, already ranked and capped.
            query: Query used to highlight matched characters.
            selected: Row to mark as selected, or None for no marker.
        """
        self._entries = entries
        self._query = query
        self._selected = selected
        self._rows.update(self.render_content())
        # Row heights are only known after the next layout pass.
        self.call_after_refresh(self._scroll_to_selected)

    def render_content(self) -> Text:
        """Build the text for the current rows."""
        return render_rows(self._entries, self._query, self._selected, self._max_line_length)

    def _scroll_to_selected(self) -> None:
        """Bring the selected row into view, or return to the top."""
        if self._selected is None:
            self.scroll_home(animate=False)
            return
        self.scroll_to_region(Region(0, self._selected, 1, 1), animate=False)
