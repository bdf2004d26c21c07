"""Three-tier matching and ranking of history entries against a query."""

from collections.abc import Sequence
from enum import IntEnum


class MatchTier(IntEnum):
    """How an entry matched a query. Lower values rank first."""

    PREFIX = 0
    SUBSTRING = 1
    SUBSEQUENCE = 2


def fold(text: str) -> str:
    """Return the comparison form of text. Never used for display."""
    return text.lower()


def is_subsequence(text: str, pattern: str) -> bool:
    """Check whether pattern's characters occur in text in order.

    Greedy scan: the pattern cursor advances on each equal character.
    An empty pattern is a subsequence of anything.
    """
    cursor = 0
    for char in text:
        if cursor == len(pattern):
            break
        if char == pattern[cursor]:
            cursor += 1
    return cursor == len(pattern)


def _classify_folded(folded_entry: str, folded_query: str) -> MatchTier | None:
    if folded_entry.startswith(folded_query):
        return MatchTier.PREFIX
    if folded_query in folded_entry:
        return MatchTier.SUBSTRING
    if is_subsequence(folded_entry, folded_query):
        return MatchTier.SUBSEQUENCE
    return None


def classify(entry: str, query: str) -> MatchTier | None:
    """Return the best tier entry matches query in, or None for no match."""
    return _classify_folded(fold(entry), fold(query))


def rank(corpus: Sequence[str], query: str) -> list[str]:
    """Filter and order corpus entries against a query.

    An empty query returns the corpus as-is. Otherwise entries are grouped
    as prefix matches, then substring matches, then subsequence matches,
    each group keeping corpus order. Non-matching entries are dropped.

    Args:
        corpus: Unique entries, most recent first.
        query: The user's search text.

    Returns:
        The ranked entries.
    """
    if not query:
        return list(corpus)

    folded_query = fold(query)
    tiers: dict[MatchTier, list[str]] = {tier: [] for tier in MatchTier}
    for entry in corpus:
        tier = _classify_folded(fold(entry), folded_query)
        if tier is not None:
            tiers[tier].append(entry)

    results: list[str] = []
    for tier in MatchTier:
        results.extend(tiers[tier])
    return results
