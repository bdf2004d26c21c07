"""Exceptions raised outside the search engine."""

from pathlib import Path


class HistfindError(Exception):
    """Base exception for histfind errors."""


class HistoryLoadError(HistfindError):
    """Raised when the history file cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read history file {path}: {reason}")


class EmptyHistoryError(HistfindError):
    """Raised when the history file holds no usable entries."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"No history found in {path}")


class ConfigError(HistfindError):
    """Raised for invalid configuration values."""
