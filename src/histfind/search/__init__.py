"""Matching, ranking, deduplication and highlighting for history search."""

from histfind.search.dedup import deduplicate
from histfind.search.highlight import CLOSE_TOKEN, OPEN_TOKEN, annotate, matched_positions
from histfind.search.ranking import MatchTier, classify, fold, is_subsequence, rank

__all__ = [
    "CLOSE_TOKEN",
    "OPEN_TOKEN",
    "MatchTier",
    "annotate",
    "classify",
    "deduplicate",
    "fold",
    "is_subsequence",
    "matched_positions",
    "rank",
]
