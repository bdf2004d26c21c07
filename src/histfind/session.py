"""Immutable search session record."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from histfind.search import annotate, rank


@dataclass(frozen=True)
class SearchSession:
    """One step of an interactive search: corpus, query and ranked results.

    Each query change produces a new record through :meth:`with_query`.
    The corpus is shared between records and never modified.
    """

    corpus: tuple[str, ...]
    query: str = ""
    results: tuple[str, ...] = field(default=())

    @classmethod
    def start(cls, corpus: Sequence[str], query: str = "") -> SearchSession:
        """Create the first record for a corpus."""
        frozen = tuple(corpus)
        return cls(corpus=frozen, query=query, results=tuple(rank(frozen, query)))

    def with_query(self, query: str) -> SearchSession:
        """Return a new record ranked against query."""
        return SearchSession(
            corpus=self.corpus, query=query, results=tuple(rank(self.corpus, query))
        )

    @property
    def result_count(self) -> int:
        """Number of entries matching the current query."""
        return len(self.results)

    def annotated(self, index: int) -> str:
        """Return the result at index with highlight markers applied."""
        return annotate(self.results[index], self.query)
