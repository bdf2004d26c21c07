"""Collapse a chronological history log into a most-recent-first corpus."""

from collections.abc import Sequence


def deduplicate(lines: Sequence[str]) -> list[str]:
    """Keep the most recent occurrence of each line, newest first.

    Args:
        lines: History lines in chronological order (oldest first).

    Returns:
        Unique lines ordered from most to least recent.
    """
    seen: set[str] = set()
    corpus: list[str] = []
    for line in reversed(lines):
        if line in seen:
            continue
        seen.add(line)
        corpus.append(line)
    return corpus
