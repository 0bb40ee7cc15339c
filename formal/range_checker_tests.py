"""
Tests for the database reader and the part one / part two front ends.
"""

from pathlib import Path

import pytest

from interval_set.id_range import IdRange, InvalidRange
from interval_set.range_checker import (
    InputFormatError, count_valid_ids, main as checker_main, parse_input, read_input,
)
from interval_set.range_merger import (
    calculate_total_coverage, main as merger_main, merge_all_ranges,
)


EXAMPLE_FILE = Path(__file__).parent.parent / "testcases" / "example_input.txt"

EXAMPLE_TEXT = """
3-5
10-14
16-20
12-18

1
5
8
11
17
32"""


def test_parse_example():
    ranges, checks = parse_input(EXAMPLE_TEXT)
    assert ranges == [IdRange(3, 5), IdRange(10, 14), IdRange(16, 20), IdRange(12, 18)]
    assert checks == [1, 5, 8, 11, 17, 32]


def test_read_example_file():
    ranges, checks = read_input(EXAMPLE_FILE)
    assert len(ranges) == 4
    assert checks == [1, 5, 8, 11, 17, 32]


def test_parse_tolerates_whitespace_and_trailing_blanks():
    ranges, checks = parse_input("  1-3 \n\n 7 \n\n9\n\n")
    assert ranges == [IdRange(1, 3)]
    assert checks == [7, 9]


def test_parse_ranges_only():
    ranges, checks = parse_input("1-3\n4-6\n")
    assert [r.as_tuple() for r in ranges] == [(1, 3), (4, 6)]
    assert checks == []


def test_parse_empty_input():
    assert parse_input("") == ([], [])


@pytest.mark.parametrize("text, line_number", [
    ("1-3\n4\n\n5", 2),
    ("1-x\n\n5", 1),
    ("1-3-5\n\n5", 1),
    ("1-3\n\nfive", 3),
])
def test_parse_malformed_lines(text, line_number):
    with pytest.raises(InputFormatError) as excinfo:
        parse_input(text)
    assert excinfo.value.line_number == line_number
    assert f"line {line_number}" in str(excinfo.value)


def test_parse_reversed_range_raises_invalid_range():
    with pytest.raises(InvalidRange):
        parse_input("1-3\n5-3\n\n4")


def test_count_valid_ids_example():
    ranges, checks = parse_input(EXAMPLE_TEXT)
    assert count_valid_ids(ranges, checks) == 3


def test_merge_and_coverage_example():
    ranges, _ = parse_input(EXAMPLE_TEXT)
    merged = merge_all_ranges(ranges)
    assert merged == [(3, 5), (10, 20)]
    assert calculate_total_coverage(merged) == 14


def test_checker_cli(capsys):
    assert checker_main([str(EXAMPLE_FILE)]) == 0
    out, err = capsys.readouterr()
    assert out.strip() == "3"
    assert err == ""


def test_checker_cli_verbose(capsys):
    assert checker_main([str(EXAMPLE_FILE), "--verbose"]) == 0
    out, err = capsys.readouterr()
    assert out.strip() == "3"
    assert "Stored ranges: 2" in err
    assert "Fresh IDs: 3" in err


def test_merger_cli(capsys):
    assert merger_main([str(EXAMPLE_FILE), "-v"]) == 0
    out, err = capsys.readouterr()
    assert out.strip() == "14"
    assert "10-20 (11 IDs)" in err


def test_cli_rejects_reversed_range(tmp_path, capsys):
    bad = tmp_path / "bad.txt"
    bad.write_text("3-5\n9-4\n\n4\n")
    assert checker_main([str(bad)]) == 1
    assert merger_main([str(bad)]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert "Error: Invalid range" in err


def test_cli_rejects_malformed_line(tmp_path, capsys):
    bad = tmp_path / "bad.txt"
    bad.write_text("3-5\nabc\n")
    assert checker_main([str(bad)]) == 1
    _, err = capsys.readouterr()
    assert "Error: line 2" in err
