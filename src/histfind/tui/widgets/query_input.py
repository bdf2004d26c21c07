"""Single-line query input for the history picker."""

from textual import events
from textual.message import Message
from textual.widgets import TextArea

_NAVIGATION_KEYS = {
    "down": "next",
    "ctrl+n": "next",
    "up": "prev",
    "ctrl+p": "prev",
}


class QueryInput(TextArea):
    """Query field for the picker.

    Enter confirms the selection, Escape cancels, and Up/Down (or
    Ctrl+P/Ctrl+N) move through results. Every other key edits the query.
    """

    DEFAULT_CSS = """
    QueryInput {
        height: 1;
        border: none;
        padding: 0;
    }
    QueryInput:focus {
        border: none;
    }
    """

    BINDINGS = []  # Override default TextArea bindings

    class Navigate(Message):
        """Posted when the user moves through the result list."""

        def __init__(self, direction: str) -> None:
            super().__init__()
            self.direction = direction

    class Confirmed(Message):
        """Posted when the user picks the selected entry."""

    class Cancelled(Message):
        """Posted when the user leaves without picking."""

    def __init__(self, text: str = "") -> None:
        super().__init__(text, language=None, show_line_numbers=False, soft_wrap=False)

    @property
    def query_text(self) -> str:
        """The query with any pasted line breaks removed."""
        return self.text.replace("\n", "")

    async def _on_key(self, event: events.Key) -> None:
        """Handle key events."""
        direction = _NAVIGATION_KEYS.get(event.key)
        if direction is not None:
            event.prevent_default()
            event.stop()
            self.post_message(QueryInput.Navigate(direction))
            return

        if event.key == "enter":
            event.prevent_default()
            event.stop()
            self.post_message(QueryInput.Confirmed())
            return

        if event.key == "escape":
            event.prevent_default()
            event.stop()
            self.post_message(QueryInput.Cancelled())
            return

        if event.key in ("shift+enter", "alt+enter", "tab"):
            event.prevent_default()
            event.stop()
            return

        await super()._on_key(event)
