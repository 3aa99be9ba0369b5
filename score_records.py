"""Parse per-line test-score records.

The expected input format is one record per line:

    name
    name:score

A line without a ``:`` is a missed test for ``name``. A line with a ``:`` is
split on every ``:``; the first field is the name and the second must be a
signed 64-bit integer. Any further fields are ignored. Names are kept exactly
as written, so ``"Alice"`` and ``"Alice "`` are different people.

Trailing whitespace at the very end of the file is stripped before the
content is split into lines. Parsing stops at the first malformed score.
"""
from __future__ import annotations

import dataclasses
import logging
import os
import re
from pathlib import Path
from typing import List, Optional, Union

LOGGER = logging.getLogger(__name__)

DELIMITER = ":"

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Unicode White_Space. str.rstrip() with no argument also drops U+001C..U+001F.
WHITESPACE = "".join(
    chr(code)
    for code in [
        0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20, 0x85, 0xA0, 0x1680,
        *range(0x2000, 0x200B),
        0x2028, 0x2029, 0x202F, 0x205F, 0x3000,
    ]
)


class ScoreFileError(Exception):
    """Base class for errors raised while reading a score file."""


class MissingArgument(ScoreFileError):
    def __init__(self) -> None:
        super().__init__("Expected filename")


class FileReadError(ScoreFileError):
    def __init__(self, path: Union[str, os.PathLike], reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Could not read {self.path}: {reason}")


class MalformedScore(ScoreFileError, ValueError):
    """A line has a ``:`` but the text after it is not an integer."""

    def __init__(self, score_text: str, reason: str, line_number: Optional[int] = None) -> None:
        self.score_text = score_text
        self.reason = reason
        self.line_number = line_number
        message = f"Error parsing number {score_text!r}: {reason}"
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


@dataclasses.dataclass(frozen=True)
class NameOnly:
    """A missed test: only the name was present."""

    name: str


@dataclasses.dataclass(frozen=True)
class NamedScore:
    """A completed test with its score."""

    name: str
    score: int


Record = Union[NameOnly, NamedScore]


def parse_score(score_text: str, line_number: Optional[int] = None) -> int:
    """Return ``score_text`` as an integer or raise :class:`MalformedScore`.

    Only an optional sign followed by ASCII digits is accepted; whitespace,
    underscores and values outside the signed 64-bit range are rejected.
    """

    if not score_text:
        raise MalformedScore(score_text, "cannot parse integer from empty string", line_number)
    if not _INTEGER_RE.fullmatch(score_text):
        raise MalformedScore(score_text, "invalid digit found in string", line_number)

    value = int(score_text)
    if value > I64_MAX:
        raise MalformedScore(score_text, "number too large to fit in target type", line_number)
    if value < I64_MIN:
        raise MalformedScore(score_text, "number too small to fit in target type", line_number)
    return value


def parse_line(line: str, line_number: Optional[int] = None) -> Record:
    """Convert a single line into a :data:`Record`."""

    if DELIMITER not in line:
        return NameOnly(line)

    parts = line.split(DELIMITER)
    name, score_text = parts[0], parts[1]
    return NamedScore(name, parse_score(score_text, line_number))


def parse_contents(contents: str) -> List[Record]:
    """Parse the full text of a score file.

    The first malformed line aborts the parse; no partial result is returned.
    An empty file yields a single ``NameOnly("")`` record.
    """

    lines = contents.rstrip(WHITESPACE).split("\n")
    records = [parse_line(line, line_number) for line_number, line in enumerate(lines, start=1)]
    LOGGER.debug("Parsed %d record(s)", len(records))
    return records


def decode_contents(data: bytes, source: Union[str, os.PathLike]) -> str:
    """Decode raw file bytes as UTF-8, reporting failures against ``source``."""

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise FileReadError(source, f"stream did not contain valid UTF-8 ({exc.reason})") from exc


def read_contents(path: Union[str, os.PathLike]) -> str:
    """Return the UTF-8 text of ``path`` without newline translation."""

    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise FileReadError(path, exc.strerror or str(exc)) from exc
    return decode_contents(data, path)


def parse_file(path: Union[str, os.PathLike]) -> List[Record]:
    LOGGER.info("Reading scores from %s", path)
    return parse_contents(read_contents(path))
