"""Summarize a score file per person.

Usage:
    python tally_scores.py scores.txt

The first argument is always the file path, even when it starts with ``-``;
anything after it is ignored. The log level is read from
``SCORE_TALLY_LOG_LEVEL`` (default WARNING).
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Iterable, List, Optional

from score_records import MissingArgument, Record, ScoreFileError, parse_file
from score_summary import aggregate, summary_lines

LOGGER = logging.getLogger(__name__)

LOG_LEVEL_ENV = "SCORE_TALLY_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING


def _env(key: str, default: str) -> str:
    return os.environ.get(key) or default


def log_level() -> int:
    """Resolve ``SCORE_TALLY_LOG_LEVEL`` to a logging level number."""

    name = _env(LOG_LEVEL_ENV, "WARNING")
    level = getattr(logging, name.upper(), None)
    if not isinstance(level, int):
        LOGGER.warning("Ignoring unknown log level %r from $%s", name, LOG_LEVEL_ENV)
        return DEFAULT_LOG_LEVEL
    return level


def format_records(records: List[Record]) -> str:
    return f"Records: {records!r}"


def run(filename: Optional[str]) -> None:
    if filename is None:
        raise MissingArgument()

    records = parse_file(filename)
    stats = aggregate(records)

    print(format_records(records))
    print()
    for line in summary_lines(stats):
        print(line)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = list(argv) if argv is not None else sys.argv[1:]

    logging.basicConfig(level=log_level())

    try:
        run(args[0] if args else None)
    except ScoreFileError as exc:
        LOGGER.debug("Aborting", exc_info=exc)
        raise SystemExit(f"Error: {exc}") from exc
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main(sys.argv[1:]))
