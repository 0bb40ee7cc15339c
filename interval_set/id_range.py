"""
IdRange - Inclusive Integer Range

Value type for one fresh-ID range [lower, upper]. Both bounds are inclusive,
so the range 3-5 covers the IDs 3, 4 and 5.
"""

from typing import Tuple


class InvalidRange(ValueError):
    """Raised when a range is built with lower > upper."""

    def __init__(self, lower, upper):
        self.lower = lower
        self.upper = upper
        super().__init__(
            f"Invalid range: lower ({lower}) cannot be greater than upper ({upper})"
        )


class IdRange:
    """
    Immutable inclusive range of integers.

    Invariant: lower <= upper. A reversed range is rejected at construction
    time, so an IdRange is always non-empty.
    """

    __slots__ = ("_lower", "_upper")

    def __init__(self, lower: int, upper: int):
        for bound in (lower, upper):
            if not isinstance(bound, int) or isinstance(bound, bool):
                raise TypeError(f"Range bounds must be integers: ({lower!r}, {upper!r})")
        if lower > upper:
            raise InvalidRange(lower, upper)
        object.__setattr__(self, "_lower", lower)
        object.__setattr__(self, "_upper", upper)

    @classmethod
    def create(cls, lower: int, upper: int) -> "IdRange":
        """
        Build a range, failing with InvalidRange when lower > upper.

        Args:
            lower: First integer covered
            upper: Last integer covered

        Returns:
            IdRange: The validated range
        """
        return cls(lower, upper)

    @property
    def lower(self) -> int:
        return self._lower

    @property
    def upper(self) -> int:
        return self._upper

    def size(self) -> int:
        """Count of integers covered by the range."""
        return self._upper - (self._lower - 1)

    def overlaps(self, other: "IdRange") -> bool:
        """
        Check whether two ranges share at least one integer.

        Touching ranges such as 3-5 and 6-8 do not overlap.
        """
        return max(self._lower, other.lower) <= min(self._upper, other.upper)

    def as_tuple(self) -> Tuple[int, int]:
        return (self._lower, self._upper)

    def __contains__(self, value) -> bool:
        return self._lower <= value <= self._upper

    def __setattr__(self, name, value):
        raise AttributeError("IdRange is immutable")

    def __eq__(self, other) -> bool:
        if not isinstance(other, IdRange):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __repr__(self) -> str:
        return f"IdRange({self._lower}, {self._upper})"

    def __str__(self) -> str:
        return f"{self._lower}-{self._upper}"
