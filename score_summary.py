"""Fold parsed score records into per-person totals and render summaries."""
from __future__ import annotations

import dataclasses
import logging
from typing import Dict, Iterable, List

import pandas as pd

from score_records import NamedScore, NameOnly, Record

LOGGER = logging.getLogger(__name__)

SUMMARY_COLUMNS = ["name", "total", "tests_completed", "tests_missed"]


@dataclasses.dataclass
class PersonStats:
    """Running totals for one person."""

    total: int = 0
    tests_completed: int = 0
    tests_missed: int = 0

    def add_score(self, score: int) -> None:
        self.total += score
        self.tests_completed += 1

    def missed_test(self) -> None:
        self.tests_missed += 1

    def describe(self) -> str:
        """Return the sentence that follows ``"<name> took "``."""

        if self.tests_completed == 1:
            tests = "1 test"
        else:
            tests = f"{self.tests_completed} tests"
        if self.tests_missed == 1:
            missed = "They missed 1 test"
        else:
            missed = f"They missed {self.tests_missed} tests"
        return f"{tests} with a total score of {self.total}. {missed}"

    def to_json_dict(self) -> dict:
        return dataclasses.asdict(self)


def aggregate(records: Iterable[Record]) -> Dict[str, PersonStats]:
    """Build the name -> :class:`PersonStats` mapping for ``records``.

    Entries are created the first time a name is seen; names that never
    appear get no entry.
    """

    stats: Dict[str, PersonStats] = {}
    for record in records:
        person = stats.setdefault(record.name, PersonStats())
        if isinstance(record, NamedScore):
            person.add_score(record.score)
        elif isinstance(record, NameOnly):
            person.missed_test()
        else:
            raise TypeError(f"Unsupported record: {record!r}")
    LOGGER.debug("Aggregated scores for %d person(s)", len(stats))
    return stats


def summary_line(name: str, person: PersonStats) -> str:
    return f"{name} took {person.describe()}"


def summary_lines(stats: Dict[str, PersonStats]) -> List[str]:
    """One summary line per person, ordered by name."""

    return [summary_line(name, stats[name]) for name in sorted(stats)]


def summary_rows(stats: Dict[str, PersonStats]) -> List[dict]:
    return [{"name": name, **stats[name].to_json_dict()} for name in sorted(stats)]


def summary_frame(stats: Dict[str, PersonStats]) -> pd.DataFrame:
    """Tabular view of ``stats`` with one row per person, ordered by name."""

    return pd.DataFrame(summary_rows(stats), columns=SUMMARY_COLUMNS)
