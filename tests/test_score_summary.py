"""Tests for score aggregation and summary rendering."""

import itertools

from score_records import NamedScore, NameOnly, parse_contents
from score_summary import (
    SUMMARY_COLUMNS,
    PersonStats,
    aggregate,
    summary_frame,
    summary_line,
    summary_lines,
    summary_rows,
)


def test_aggregate_mixed_records():
    stats = aggregate(parse_contents("Alice:10\nBob\nAlice:5"))
    assert stats == {
        "Alice": PersonStats(total=15, tests_completed=2, tests_missed=0),
        "Bob": PersonStats(total=0, tests_completed=0, tests_missed=1),
    }


def test_aggregate_negative_score():
    stats = aggregate([NamedScore("Dan", -3)])
    assert stats["Dan"] == PersonStats(total=-3, tests_completed=1, tests_missed=0)


def test_aggregate_no_records_creates_no_entries():
    assert aggregate([]) == {}
    assert "Carol" not in aggregate([NameOnly("Alice")])


def test_aggregate_whitespace_names_are_distinct():
    stats = aggregate([NamedScore("Alice", 1), NamedScore("Alice ", 2)])
    assert stats["Alice"].total == 1
    assert stats["Alice "].total == 2


def test_aggregate_is_order_independent():
    records = [
        NamedScore("Alice", 10),
        NameOnly("Alice"),
        NamedScore("Alice", -4),
        NameOnly("Alice"),
        NamedScore("Alice", 7),
    ]
    expected = aggregate(records)
    for permutation in itertools.permutations(records):
        assert aggregate(permutation) == expected


def test_aggregate_accepts_generator():
    stats = aggregate(NameOnly(name) for name in ["A", "B", "A"])
    assert stats["A"].tests_missed == 2
    assert stats["B"].tests_missed == 1


def test_person_stats_defaults():
    assert PersonStats() == PersonStats(total=0, tests_completed=0, tests_missed=0)


def test_describe_plural_wording():
    person = PersonStats(total=15, tests_completed=2, tests_missed=0)
    assert person.describe() == "2 tests with a total score of 15. They missed 0 tests"


def test_describe_singular_wording():
    person = PersonStats(total=42, tests_completed=1, tests_missed=1)
    assert person.describe() == "1 test with a total score of 42. They missed 1 test"


def test_empty_name_summary():
    stats = aggregate(parse_contents(""))
    assert summary_lines(stats) == [" took 0 tests with a total score of 0. They missed 1 test"]


def test_summary_line():
    person = PersonStats(total=0, tests_completed=0, tests_missed=3)
    assert summary_line("Bob", person) == "Bob took 0 tests with a total score of 0. They missed 3 tests"


def test_summary_lines_sorted_by_name():
    stats = aggregate(parse_contents("Carol:1\nAlice:2\nBob"))
    assert summary_lines(stats) == [
        "Alice took 1 test with a total score of 2. They missed 0 tests",
        "Bob took 0 tests with a total score of 0. They missed 1 test",
        "Carol took 1 test with a total score of 1. They missed 0 tests",
    ]


def test_summary_rows():
    stats = aggregate(parse_contents("Bob\nAlice:3"))
    assert summary_rows(stats) == [
        {"name": "Alice", "total": 3, "tests_completed": 1, "tests_missed": 0},
        {"name": "Bob", "total": 0, "tests_completed": 0, "tests_missed": 1},
    ]


def test_summary_frame():
    frame = summary_frame(aggregate(parse_contents("Bob:2\nAlice:3\nBob")))
    assert list(frame.columns) == SUMMARY_COLUMNS
    assert frame["name"].tolist() == ["Alice", "Bob"]
    assert frame["total"].tolist() == [3, 2]
    assert frame["tests_missed"].tolist() == [0, 1]


def test_summary_frame_empty():
    frame = summary_frame({})
    assert frame.empty
    assert list(frame.columns) == SUMMARY_COLUMNS
