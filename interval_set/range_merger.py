#!/usr/bin/env python3
"""
Range Merger - Part Two: Total Fresh ID Coverage

Merges all fresh ID ranges and counts how many distinct IDs they cover.
The available-ID section of the database is ignored.
"""

import sys
from typing import Iterable, List, Tuple

from interval_set.id_range import IdRange, InvalidRange
from interval_set.ordered_interval_set import OrderedIntervalSet
from interval_set.range_checker import InputFormatError, parse_input


def merge_all_ranges(ranges: Iterable[IdRange]) -> List[Tuple[int, int]]:
    """
    Merge overlapping ranges into a disjoint list.

    Args:
        ranges: IdRange values in any order

    Returns:
        list: (lower, upper) tuples sorted by lower bound, pairwise
              non-overlapping (touching ranges stay separate)
    """
    return OrderedIntervalSet.from_ranges(ranges).ranges()


def calculate_total_coverage(ranges):
    """
    Calculate total number of integers covered by disjoint ranges.

    Args:
        ranges: List of (lower, upper) tuples, as returned by merge_all_ranges

    Returns:
        int: Total count of integers in all ranges
    """
    total = 0
    for lower, upper in ranges:
        total += upper - (lower - 1)
    return total


def main(argv=None):
    """Command-line interface for part two."""
    import argparse

    parser = argparse.ArgumentParser(
        description='Count every ingredient ID covered by the fresh ranges'
    )
    parser.add_argument('input_file', nargs='?', type=argparse.FileType('r'),
                        default=sys.stdin,
                        help='Inventory database file (default: stdin)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Print merged ranges and statistics')
    args = parser.parse_args(argv)

    try:
        ranges, _ = parse_input(args.input_file.read())
    except (InputFormatError, InvalidRange) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    fresh = OrderedIntervalSet.from_ranges(ranges)

    print(fresh.total_covered_count())

    if args.verbose:
        print(f"\nMerged ranges:", file=sys.stderr)
        for id_range in fresh:
            print(f"  {id_range} ({id_range.size()} IDs)", file=sys.stderr)
        stats = fresh.get_statistics()
        print(f"\nStatistics:", file=sys.stderr)
        print(f"  Ranges read: {stats['insertions']}", file=sys.stderr)
        print(f"  Ranges absorbed: {stats['merges']}", file=sys.stderr)
        print(f"  Stored ranges: {stats['stored_ranges']}", file=sys.stderr)

    return 0


if __name__ == '__main__':
    sys.exit(main())
