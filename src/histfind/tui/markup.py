"""Build Rich text for history entries with matched characters styled."""

from rich.text import Text

from histfind.search import matched_positions

HIGHLIGHT_STYLE = "bold #9664c8"
ELLIPSIS = "..."
ELLIPSIS_STYLE = "grey50"


def render_entry(entry: str, query: str, max_length: int) -> Text:
    """Truncate and style one entry for display.

    Styles come from the same greedy scan that places highlight markers, so
    entry text that happens to look like a marker is shown verbatim. The
    entry is cut to ``max_length`` characters first; the scan is
    prefix-stable, so the visible highlights match those of the full entry.
    """
    truncated = len(entry) > max_length
    shown = entry[:max_length] if truncated else entry
    text = Text(shown, no_wrap=True, overflow="ellipsis")
    if query:
        for i in matched_positions(shown, query):
            text.stylize(HIGHLIGHT_STYLE, i, i + 1)
    if truncated:
        text.append(ELLIPSIS, style=ELLIPSIS_STYLE)
    return text
