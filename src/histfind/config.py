"""Configuration loaded from environment variables and overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path

from histfind.exceptions import ConfigError

ENV_PREFIX = "HISTFIND_"

_INT_FIELDS = ("max_results", "max_line_length")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class HistfindConfig:
    """Runtime settings for histfind.

    Values come from defaults, then ``HISTFIND_*`` environment variables,
    then explicit overrides passed to :meth:`load`.
    """

    history_file: Path | None = None
    max_results: int = 100
    max_line_length: int = 200
    log_file: Path | None = None
    log_level: str = "WARNING"

    @classmethod
    def load(cls, **overrides: object) -> HistfindConfig:
        """Build a config from the environment plus non-None overrides."""
        names = [f.name for f in fields(cls)]
        values: dict[str, object] = {}
        for name in names:
            env_value = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
            if env_value:
                values[name] = env_value
        for name, value in overrides.items():
            if name not in names:
                raise ConfigError(f"Unknown config option: {name}")
            if value is not None:
                values[name] = value
        return cls(**_coerce(values))


def _coerce(values: dict[str, object]) -> dict[str, object]:
    """Convert raw values to field types and validate them."""
    result = dict(values)
    for name in _INT_FIELDS:
        if name not in result:
            continue
        try:
            number = int(str(result[name]))
        except ValueError:
            raise ConfigError(f"{name} must be an integer, got {result[name]!r}") from None
        if number <= 0:
            raise ConfigError(f"{name} must be positive, got {number}")
        result[name] = number
    for name in ("history_file", "log_file"):
        if name in result:
            result[name] = Path(str(result[name])).expanduser()
    if "log_level" in result:
        level = str(result["log_level"]).upper()
        if level not in _LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {level!r}")
        result["log_level"] = level
    return result


def configure_logging(config: HistfindConfig) -> None:
    """Route log output to the configured file, or silence it.

    The TUI owns the terminal, so records never go to stdout or stderr.
    """
    root = logging.getLogger("histfind")
    if config.log_file is None:
        root.addHandler(logging.NullHandler())
        return
    config.log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        filename=config.log_file,
        filemode="a",
    )
