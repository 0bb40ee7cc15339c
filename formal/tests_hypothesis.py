"""
Property-based tests for the ordered interval set using Hypothesis.

Checks the invariants that must hold for every insertion sequence: stored
ranges stay disjoint, membership and coverage agree with a brute-force set
of covered integers, and the result does not depend on insertion order.
"""

import pytest
from hypothesis import given, strategies as st, assume, settings
from hypothesis.strategies import lists, integers

from interval_set.id_range import IdRange
from interval_set.ordered_interval_set import OrderedIntervalSet
from interval_set.range_merger import merge_all_ranges, calculate_total_coverage


# Strategy for generating valid ranges (lower <= upper)
@st.composite
def valid_range(draw, min_value=-1000, max_value=1000):
    """Generate a valid IdRange where lower <= upper."""
    lower = draw(integers(min_value=min_value, max_value=max_value))
    upper = draw(integers(min_value=lower, max_value=max_value))
    return IdRange(lower, upper)


# Strategy for generating lists of valid ranges
ranges_strategy = lists(valid_range(), min_size=0, max_size=60)


def ranges_to_set(ranges):
    """Convert ranges to the set of all integers they cover."""
    result = set()
    for id_range in ranges:
        result.update(range(id_range.lower, id_range.upper + 1))
    return result


def has_no_overlaps(pairs):
    """Check that sorted (lower, upper) pairs share no integer."""
    for i in range(len(pairs) - 1):
        if pairs[i][1] >= pairs[i + 1][0]:
            return False
    return True


# Property 1: Stored ranges never overlap
@given(ranges_strategy)
def test_disjointness_after_inserts(ranges):
    interval_set = OrderedIntervalSet()
    for id_range in ranges:
        interval_set.insert(id_range)
        stored = interval_set.ranges()
        assert has_no_overlaps(stored), f"Overlapping ranges stored: {stored}"


# Property 2: Membership matches the union of inserted ranges
@given(ranges_strategy, lists(integers(min_value=-1100, max_value=1100), max_size=50))
@settings(max_examples=300)
def test_membership_matches_union(ranges, values):
    interval_set = OrderedIntervalSet.from_ranges(ranges)
    covered = ranges_to_set(ranges)

    for value in values:
        assert interval_set.contains(value) == (value in covered), \
            f"contains({value}) wrong for {ranges}"


@given(ranges_strategy)
def test_every_endpoint_is_covered(ranges):
    interval_set = OrderedIntervalSet.from_ranges(ranges)
    for id_range in ranges:
        assert interval_set.contains(id_range.lower)
        assert interval_set.contains(id_range.upper)


# Property 3: Coverage counts each integer exactly once
@given(ranges_strategy)
@settings(max_examples=300)
def test_coverage_matches_union(ranges):
    interval_set = OrderedIntervalSet.from_ranges(ranges)
    assert interval_set.total_covered_count() == len(ranges_to_set(ranges))


@given(ranges_strategy, st.randoms())
def test_order_independence(ranges, rnd):
    """
    Property: Stored ranges are the same regardless of insertion order.
    """
    assume(len(ranges) >= 2)

    forward = OrderedIntervalSet.from_ranges(ranges)
    shuffled = list(ranges)
    rnd.shuffle(shuffled)
    other = OrderedIntervalSet.from_ranges(shuffled)

    assert forward.ranges() == other.ranges()
    assert forward.total_covered_count() == other.total_covered_count()


# Property 4: Inserting a range again changes nothing
@given(ranges_strategy, valid_range())
def test_merge_idempotence(ranges, id_range):
    interval_set = OrderedIntervalSet.from_ranges(ranges)
    interval_set.insert(id_range)
    once = interval_set.ranges()
    covered_once = interval_set.total_covered_count()

    interval_set.insert(id_range)

    assert interval_set.ranges() == once
    assert interval_set.total_covered_count() == covered_once


@given(ranges_strategy)
def test_merging_merged_ranges_is_stable(ranges):
    """
    Property: merge_all_ranges(merge_all_ranges(x)) == merge_all_ranges(x)
    """
    merged_once = merge_all_ranges(ranges)
    merged_twice = merge_all_ranges(IdRange(lower, upper) for lower, upper in merged_once)
    assert merged_once == merged_twice


@given(ranges_strategy)
def test_calculate_total_coverage_agrees(ranges):
    merged = merge_all_ranges(ranges)
    assert calculate_total_coverage(merged) == \
        OrderedIntervalSet.from_ranges(ranges).total_covered_count()


@given(valid_range())
def test_single_range(id_range):
    assert merge_all_ranges([id_range]) == [id_range.as_tuple()]


# Non-overlapping ranges with gaps stay separate
@given(lists(integers(min_value=0, max_value=100), min_size=2, max_size=10, unique=True))
def test_non_overlapping_ranges_separate(positions):
    ranges = [IdRange(pos * 10, pos * 10 + 1) for pos in positions]
    merged = merge_all_ranges(ranges)
    assert len(merged) == len(ranges), \
        f"Non-overlapping ranges were merged: input={ranges}, output={merged}"


# A range covering every stored range collapses the set to one entry
@given(ranges_strategy)
def test_spanning_range_collapses_set(ranges):
    assume(ranges)
    lower = min(r.lower for r in ranges)
    upper = max(r.upper for r in ranges)

    interval_set = OrderedIntervalSet.from_ranges(ranges)
    interval_set.insert(IdRange(lower, upper))

    assert interval_set.ranges() == [(lower, upper)]


# Very large bounds do not lose precision
@given(valid_range(min_value=0, max_value=2 ** 64 - 1))
def test_large_bounds(id_range):
    interval_set = OrderedIntervalSet.from_ranges([id_range])
    assert interval_set.total_covered_count() == id_range.upper - id_range.lower + 1
    assert interval_set.contains(id_range.upper)
    assert not interval_set.contains(id_range.upper + 1)


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
