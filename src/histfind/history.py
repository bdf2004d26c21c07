"""Load shell history from disk."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from histfind.exceptions import EmptyHistoryError, HistoryLoadError
from histfind.search import deduplicate

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_FILE = "~/.bash_history"


def resolve_history_path(explicit: Path | str | None = None) -> Path:
    """Pick the history file: explicit path, then $HISTFILE, then ~/.bash_history."""
    if explicit:
        return Path(explicit).expanduser()
    histfile = os.environ.get("HISTFILE")
    if histfile:
        return Path(histfile).expanduser()
    return Path(DEFAULT_HISTORY_FILE).expanduser()


def read_history(path: Path) -> list[str]:
    """Read non-empty, whitespace-trimmed lines, oldest first.

    Raises:
        HistoryLoadError: If the file is missing or unreadable.
    """
    try:
        with path.open(encoding="utf-8", errors="replace") as f:
            lines = [line.strip() for line in f]
    except OSError as e:
        raise HistoryLoadError(path, e.strerror or str(e)) from e
    entries = [line for line in lines if line]
    logger.debug("Read %d history lines from %s", len(entries), path)
    return entries


def load_corpus(path: Path) -> list[str]:
    """Read history and deduplicate it into a most-recent-first corpus.

    Raises:
        HistoryLoadError: If the file is missing or unreadable.
        EmptyHistoryError: If the file has no entries.
    """
    corpus = deduplicate(read_history(path))
    if not corpus:
        raise EmptyHistoryError(path)
    logger.debug("Corpus has %d unique entries", len(corpus))
    return corpus
