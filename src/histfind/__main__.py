"""Entry point for histfind."""

from __future__ import annotations

import argparse
import logging
import sys

from histfind import __version__
from histfind.config import HistfindConfig, configure_logging
from histfind.exceptions import HistfindError
from histfind.history import load_corpus, resolve_history_path
from histfind.session import SearchSession
from histfind.tui.app import HistfindTUI

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Search shell history and print the chosen command"
    )
    parser.add_argument(
        "--history-file",
        type=str,
        help="History file to search (default: $HISTFILE or ~/.bash_history)",
    )
    parser.add_argument("--query", type=str, default="", help="Initial search text")
    parser.add_argument("--max-results", type=int, help="Maximum entries to display")
    parser.add_argument(
        "--filter",
        type=str,
        metavar="QUERY",
        help="Print ranked matches for QUERY, one per line, without the picker",
    )
    parser.add_argument(
        "--highlight",
        action="store_true",
        help="With --filter, wrap matched characters in highlight markers",
    )
    parser.add_argument("--log-file", type=str, help="Write debug logs to this file")
    parser.add_argument("--log-level", type=str, help="Log level (default: WARNING)")
    parser.add_argument("--version", action="version", version=f"histfind {__version__}")
    return parser.parse_args(argv)


def print_matches(session: SearchSession, limit: int, highlight: bool) -> None:
    """Write up to limit ranked results to stdout, one per line."""
    for i in range(min(session.result_count, limit)):
        line = session.annotated(i) if highlight else session.results[i]
        sys.stdout.write(line + "\n")
    sys.stdout.flush()


def main(argv: list[str] | None = None) -> int:
    """Run the history picker and print the selection to stdout."""
    args = parse_args(argv)
    try:
        config = HistfindConfig.load(
            history_file=args.history_file,
            max_results=args.max_results,
            log_file=args.log_file,
            log_level=args.log_level,
        )
        configure_logging(config)
        path = resolve_history_path(config.history_file)
        corpus = load_corpus(path)
    except HistfindError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info("Loaded %d entries from %s", len(corpus), path)

    # Non-interactive mode with --filter
    if args.filter is not None:
        print_matches(SearchSession.start(corpus, args.filter), config.max_results, args.highlight)
        return 0

    # Interactive mode - launch TUI
    app = HistfindTUI(
        corpus,
        query=args.query,
        max_results=config.max_results,
        max_line_length=config.max_line_length,
    )
    selection = app.run()
    if selection:
        sys.stdout.write(selection)
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
