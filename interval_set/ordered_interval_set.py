"""
Ordered Interval Set - Disjoint Range Storage

Stores inclusive ranges keyed by their lower bound in a SortedDict, merging
every insertion with the stored ranges it overlaps. Because stored ranges
never overlap, the only range that can contain a value is the one with the
greatest lower bound <= that value (its predecessor).

Only ranges that actually share an integer are merged. Touching ranges such
as 3-5 and 6-8 are kept as two entries; coverage is unaffected.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from sortedcontainers import SortedDict

from interval_set.id_range import IdRange


class OrderedIntervalSet:
    """
    Set of disjoint inclusive ranges with logarithmic membership queries.

    The set only grows: ranges are inserted one at a time and never removed
    by callers. Build it fully before sharing it for queries.
    """

    def __init__(self):
        # lower bound -> IdRange
        self._ranges = SortedDict()
        self.insertions = 0
        self.merges = 0

    @classmethod
    def from_ranges(cls, ranges: Iterable[IdRange]) -> "OrderedIntervalSet":
        """Build a set by inserting every range in iteration order."""
        interval_set = cls()
        for id_range in ranges:
            interval_set.insert(id_range)
        return interval_set

    def insert(self, id_range: IdRange) -> None:
        """
        Insert a range, merging it with every stored range it overlaps.

        Args:
            id_range: Range to add

        Algorithm:
            1. Remove every stored range whose lower bound lies inside
               [id_range.lower, id_range.upper], tracking the largest upper
            2. Look up the predecessor of id_range.lower; if it reaches
               id_range.lower, remove it too and extend the lower bound
            3. Store the single merged range under its lower bound

        One insertion can bridge several previously disjoint ranges.

        Time Complexity: O(k log n) where k is the number of ranges absorbed
        """
        lower = id_range.lower
        upper = id_range.upper

        # list() because irange is a live view over the keys being removed
        for key in list(self._ranges.irange(id_range.lower, id_range.upper)):
            upper = max(upper, self._ranges.pop(key).upper)
            self.merges += 1

        predecessor = self._predecessor(id_range.lower)
        if predecessor is not None and predecessor.upper >= id_range.lower:
            del self._ranges[predecessor.lower]
            lower = predecessor.lower
            upper = max(upper, predecessor.upper)
            self.merges += 1

        if lower == id_range.lower and upper == id_range.upper:
            merged = id_range
        else:
            merged = IdRange(lower, upper)
        self._ranges[merged.lower] = merged
        self.insertions += 1

    def contains(self, value: int) -> bool:
        """
        Check whether any stored range covers value.

        Args:
            value: Integer to look up

        Returns:
            bool: True if value lies inside a stored range
        """
        candidate = self._predecessor(value)
        if candidate is None:
            return False
        return value <= candidate.upper

    def count_contained(self, values: Iterable[int]) -> int:
        """Count how many of the given values are covered."""
        return sum(1 for value in values if self.contains(value))

    def total_covered_count(self) -> int:
        """
        Count the distinct integers covered by the set.

        Stored ranges are disjoint, so summing their sizes never counts an
        integer twice.
        """
        return sum(id_range.size() for id_range in self._ranges.values())

    def ranges(self) -> List[Tuple[int, int]]:
        """Stored ranges as (lower, upper) tuples in ascending order."""
        return [id_range.as_tuple() for id_range in self._ranges.values()]

    def get_statistics(self) -> Dict[str, int]:
        return {
            'insertions': self.insertions,
            'merges': self.merges,
            'stored_ranges': len(self._ranges),
            'covered': self.total_covered_count(),
        }

    def _predecessor(self, value: int) -> Optional[IdRange]:
        """Stored range with the greatest lower bound <= value, if any."""
        index = self._ranges.bisect_right(value) - 1
        if index < 0:
            return None
        return self._ranges.peekitem(index)[1]

    def __contains__(self, value) -> bool:
        if not isinstance(value, int):
            return False
        return self.contains(value)

    def __iter__(self) -> Iterator[IdRange]:
        return iter(self._ranges.values())

    def __len__(self) -> int:
        return len(self._ranges)

    def __repr__(self) -> str:
        inner = ", ".join(str(id_range) for id_range in self._ranges.values())
        return f"OrderedIntervalSet([{inner}])"
