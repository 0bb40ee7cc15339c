#!/usr/bin/env python3
"""
Range Checker - Part One: Count Fresh Ingredient IDs

Reads the inventory database (fresh ID ranges, a blank line, then the
available IDs) and counts the available IDs that fall inside any range.
Membership is answered by predecessor lookup on an OrderedIntervalSet.
"""

import sys
from typing import Iterable, List, Tuple

from interval_set.id_range import IdRange, InvalidRange
from interval_set.ordered_interval_set import OrderedIntervalSet


class InputFormatError(ValueError):
    """Raised when a database line cannot be parsed."""

    def __init__(self, line_number, message):
        self.line_number = line_number
        super().__init__(f"line {line_number}: {message}")


def _parse_range(line, line_number):
    parts = line.split("-")
    if len(parts) != 2:
        raise InputFormatError(line_number, f"expected 'lower-upper', got {line!r}")
    try:
        lower, upper = int(parts[0]), int(parts[1])
    except ValueError as err:
        raise InputFormatError(line_number, f"non-numeric range bound in {line!r}") from err
    # Reversed bounds surface as InvalidRange
    return IdRange(lower, upper)


def _parse_check(line, line_number):
    try:
        return int(line)
    except ValueError as err:
        raise InputFormatError(line_number, f"expected an ingredient ID, got {line!r}") from err


def parse_input(text: str) -> Tuple[List[IdRange], List[int]]:
    """
    Parse database text into ranges and IDs to check.

    Args:
        text: Range lines "lower-upper", a blank line, then one ID per line

    Returns:
        tuple: (ranges, checks) where ranges is a list of IdRange and
               checks is a list of integers

    Raises:
        InputFormatError: On a malformed line
        InvalidRange: On a range whose lower bound exceeds its upper bound
    """
    ranges = []
    checks = []
    in_ranges = True

    for line_number, line in enumerate(text.splitlines(), start=1):
        line = line.strip()

        if in_ranges:
            if not line:
                # Leading blank lines come before the range section
                if ranges:
                    in_ranges = False
                continue
            ranges.append(_parse_range(line, line_number))

        elif line:
            checks.append(_parse_check(line, line_number))

    return ranges, checks


def read_input(filename):
    """
    Read input file containing ranges and check values.

    Args:
        filename: Path to input file

    Returns:
        tuple: (ranges, checks) as returned by parse_input
    """
    with open(filename) as f:
        return parse_input(f.read())


def count_valid_ids(ranges: Iterable[IdRange], checks: Iterable[int]) -> int:
    """
    Count how many check IDs fall within any of the ranges.

    Args:
        ranges: IdRange values (merged on insertion)
        checks: Integer IDs to check

    Returns:
        int: Count of check IDs covered by at least one range

    Time Complexity: O(n log n + m log n) for n ranges and m checks
    """
    fresh = OrderedIntervalSet.from_ranges(ranges)
    return fresh.count_contained(checks)


def main(argv=None):
    """Command-line interface for part one."""
    import argparse

    parser = argparse.ArgumentParser(
        description='Count available ingredient IDs that fall in a fresh range'
    )
    parser.add_argument('input_file', nargs='?', type=argparse.FileType('r'),
                        default=sys.stdin,
                        help='Inventory database file (default: stdin)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Print interval set statistics')
    args = parser.parse_args(argv)

    try:
        ranges, checks = parse_input(args.input_file.read())
    except (InputFormatError, InvalidRange) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    fresh = OrderedIntervalSet.from_ranges(ranges)
    valid_count = fresh.count_contained(checks)

    print(valid_count)

    if args.verbose:
        stats = fresh.get_statistics()
        print(f"\nStatistics:", file=sys.stderr)
        print(f"  Ranges read: {stats['insertions']}", file=sys.stderr)
        print(f"  Ranges absorbed: {stats['merges']}", file=sys.stderr)
        print(f"  Stored ranges: {stats['stored_ranges']}", file=sys.stderr)
        print(f"  IDs checked: {len(checks)}", file=sys.stderr)
        print(f"  Fresh IDs: {valid_count}", file=sys.stderr)

    return 0


if __name__ == '__main__':
    sys.exit(main())
