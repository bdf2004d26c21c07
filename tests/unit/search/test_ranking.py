"""Tests for matching and ranking."""

import pytest

from histfind.search.ranking import MatchTier, classify, fold, is_subsequence, rank

HIST_CORPUS = [
    "history command",
    "git push",
    "show history",
    "historical data",
    "git pull",
    "bash history file",
    "git add .",
]

GIT_CORPUS = [
    "git push",
    "git pull",
    "go install tools",
    "gradle integration test",
    "git commit",
]


class TestIsSubsequence:
    """Tests for is_subsequence()."""

    def test_in_order_gaps(self) -> None:
        """Characters may be spread out."""
        assert is_subsequence("go install tools", "git") is True

    def test_out_of_order(self) -> None:
        """Order matters."""
        assert is_subsequence("tig", "git") is False

    def test_empty_pattern(self) -> None:
        """Empty pattern matches any text."""
        assert is_subsequence("anything", "") is True
        assert is_subsequence("", "") is True

    def test_pattern_longer_than_text(self) -> None:
        """A longer pattern can never match."""
        assert is_subsequence("ab", "abc") is False

    def test_repeated_characters(self) -> None:
        """Each pattern character consumes a distinct text character."""
        assert is_subsequence("a-b", "aa") is False
        assert is_subsequence("a-a", "aa") is True


class TestClassify:
    """Tests for classify()."""

    def test_prefix(self) -> None:
        """Entries starting with the query are prefix matches."""
        assert classify("git push", "git") is MatchTier.PREFIX

    def test_substring(self) -> None:
        """Entries containing the query elsewhere are substring matches."""
        assert classify("show history", "hist") is MatchTier.SUBSTRING

    def test_subsequence(self) -> None:
        """Scattered characters give a subsequence match."""
        assert classify("gradle integration test", "git") is MatchTier.SUBSEQUENCE

    def test_no_match(self) -> None:
        """Unrelated entries are excluded."""
        assert classify("ls -la", "git") is None

    def test_case_insensitive(self) -> None:
        """Case is ignored on both sides."""
        assert classify("Git Push", "gIT") is MatchTier.PREFIX
        assert classify("Show HISTORY", "History") is MatchTier.SUBSTRING

    def test_tier_order(self) -> None:
        """Lower tier values rank first."""
        assert MatchTier.PREFIX < MatchTier.SUBSTRING < MatchTier.SUBSEQUENCE


class TestRank:
    """Tests for rank()."""

    def test_empty_query_is_identity(self) -> None:
        """An empty query returns the corpus unchanged."""
        assert rank(HIST_CORPUS, "") == HIST_CORPUS

    def test_empty_query_returns_new_list(self) -> None:
        """The result never aliases the corpus."""
        corpus = ["a", "b"]
        result = rank(corpus, "")
        result.append("c")
        assert corpus == ["a", "b"]

    def test_prefix_before_substring(self) -> None:
        """Prefix matches lead, substring matches follow, both in corpus order."""
        result = rank(HIST_CORPUS, "hist")
        assert result == [
            "history command",
            "historical data",
            "show history",
            "bash history file",
        ]

    def test_prefix_before_subsequence(self) -> None:
        """Subsequence matches come after every prefix match."""
        result = rank(GIT_CORPUS, "git")
        assert result[:3] == ["git push", "git pull", "git commit"]
        assert result[3:] == ["go install tools", "gradle integration test"]

    def test_all_three_tiers(self) -> None:
        """Tiers are never interleaved."""
        corpus = ["a-b-c", "xabc", "abc", "zzz", "abcd", "qabcq"]
        result = rank(corpus, "abc")
        assert result == ["abc", "abcd", "xabc", "qabcq", "a-b-c"]
        tiers = [classify(entry, "abc") for entry in result]
        assert tiers == sorted(tiers)

    def test_no_compactness_scoring(self) -> None:
        """Subsequence matches keep corpus order regardless of gap size."""
        corpus = ["g...........i.........t", "g-i-t"]
        assert rank(corpus, "git") == corpus

    def test_entries_appear_once(self) -> None:
        """No entry is duplicated across tiers."""
        result = rank(HIST_CORPUS + GIT_CORPUS[2:4], "hi")
        assert len(result) == len(set(result))

    def test_query_longer_than_every_entry(self) -> None:
        """An over-long query matches nothing."""
        assert rank(["ls", "cd"], "ls -la --color") == []

    def test_query_longer_excludes_only_short_entry(self) -> None:
        """Only entries that can contain the query survive."""
        assert rank(["ls", "ls -la"], "ls -l") == ["ls -la"]

    def test_empty_corpus(self) -> None:
        """Ranking an empty corpus gives an empty result."""
        assert rank([], "git") == []

    def test_original_case_preserved(self) -> None:
        """Results carry the entries' original text."""
        assert rank(["Git Push"], "git") == ["Git Push"]

    @pytest.mark.parametrize("query", ["g", "gi", "git", "t", "pu", "xyz"])
    def test_result_is_subset_in_tier_then_corpus_order(self, query: str) -> None:
        """Each tier keeps the relative order of the corpus."""
        result = rank(GIT_CORPUS, query)
        positions = [(classify(e, query), GIT_CORPUS.index(e)) for e in result]
        assert positions == sorted(positions)
        assert all(tier is not None for tier, _ in positions)


def test_fold_lowercases() -> None:
    assert fold("MiXeD") == "mixed"
