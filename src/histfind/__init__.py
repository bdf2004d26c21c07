"""histfind: interactive search over shell command history."""

__version__ = "0.1.0"
