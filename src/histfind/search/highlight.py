"""Inline highlight markers for matched characters.

The marker tokens are a fixed contract with the renderer: every matched
character is wrapped individually in ``OPEN_TOKEN`` and ``CLOSE_TOKEN``.
"""

from histfind.search.ranking import fold

OPEN_TOKEN = "[#9664c8::b]"
CLOSE_TOKEN = "[white::-]"


def _fold_with_index(entry: str) -> tuple[str, list[int]]:
    """Fold entry and map each folded character back to its source index."""
    folded = fold(entry)
    if len(folded) == len(entry):
        return folded, list(range(len(entry)))
    # Lowercasing changed the length (e.g. "İ" -> "i̇"); fold per character.
    chars: list[str] = []
    index: list[int] = []
    for i, char in enumerate(entry):
        for folded_char in fold(char):
            chars.append(folded_char)
            index.append(i)
    return "".join(chars), index


def matched_positions(entry: str, query: str) -> list[int]:
    """Return the entry indices picked by a greedy subsequence scan.

    The scan runs over the folded entry, as ranking does. A source character
    that folds to several characters is reported once if any of them matched.
    """
    folded_entry, index = _fold_with_index(entry)
    folded_query = fold(query)

    positions: list[int] = []
    cursor = 0
    for i, char in enumerate(folded_entry):
        if cursor == len(folded_query):
            break
        if char == folded_query[cursor]:
            cursor += 1
            if not positions or positions[-1] != index[i]:
                positions.append(index[i])
    return positions


def annotate(entry: str, query: str) -> str:
    """Wrap each character of entry that matched query in highlight markers.

    Args:
        entry: The history entry, emitted with its original case.
        query: The search text. An empty query returns entry unchanged.

    Returns:
        The entry with inline markers around each matched character.
    """
    if not query:
        return entry

    matched = set(matched_positions(entry, query))
    parts: list[str] = []
    for i, char in enumerate(entry):
        if i in matched:
            parts.append(f"{OPEN_TOKEN}{char}{CLOSE_TOKEN}")
        else:
            parts.append(char)
    return "".join(parts)
