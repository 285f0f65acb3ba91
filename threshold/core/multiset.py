"""
Threshold multiset over non-negative sequence numbers.

Stores how many times each sequence number was inserted and answers the
threshold query: the largest value ``v`` such that at least ``t`` of the
inserted elements are ``>= v``.  Because an observation of sequence
number ``n`` also counts as an observation of every ``m < n``, the query
is a descending scan that accumulates multiplicities until the running
total reaches ``t``.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import Dict, Iterable, Iterator, List, Optional, Tuple


class InvalidThresholdError(ValueError):
    """Raised when a threshold below 1 is requested."""

    pass


def check_threshold(threshold: int) -> int:
    """
    Validate a threshold argument and return it unchanged.

    Raises:
        TypeError: If *threshold* is not an integer.
        InvalidThresholdError: If *threshold* is smaller than 1.
    """
    if isinstance(threshold, bool) or not isinstance(threshold, int):
        raise TypeError(f"Threshold must be an int, got {type(threshold).__name__}")
    if threshold < 1:
        raise InvalidThresholdError(f"Threshold must be at least 1, got {threshold}")
    return threshold


def check_seq(seq: int) -> int:
    """
    Validate a sequence number and return it unchanged.

    Raises:
        TypeError: If *seq* is not an integer.
        ValueError: If *seq* is negative.
    """
    if isinstance(seq, bool) or not isinstance(seq, int):
        raise TypeError(f"Sequence number must be an int, got {type(seq).__name__}")
    if seq < 0:
        raise ValueError(f"Sequence number must be non-negative, got {seq}")
    return seq


class ThresholdMultiSet:
    """
    Multiset of sequence numbers supporting the threshold query.

    Values are kept in an ascending sorted list next to a value -> count
    mapping, so the threshold query can walk the distinct values from the
    highest one downwards.

    Attributes:
        total: Number of insertions performed (total multiplicity).
    """

    __slots__ = ("_counts", "_values", "_total")

    def __init__(self, values: Optional[Iterable[int]] = None) -> None:
        self._counts: Dict[int, int] = {}
        self._values: List[int] = []
        self._total: int = 0
        if values is not None:
            self.insert_many(values)

    @classmethod
    def singleton(cls, value: int) -> ThresholdMultiSet:
        """Return a multiset holding *value* once."""
        mset = cls()
        mset.insert(value)
        return mset

    # ------------------------------------------------------------------ #
    # Mutation
    # ------------------------------------------------------------------ #

    def insert(self, value: int, times: int = 1) -> None:
        """
        Add *value* to the multiset *times* times.

        Args:
            value: A non-negative sequence number.
            times: Number of insertions (used to back-fill zeros).

        Raises:
            ValueError: If *value* is negative or *times* is below 1.
        """
        check_seq(value)
        if times < 1:
            raise ValueError(f"Insertion count must be at least 1, got {times}")

        if value in self._counts:
            self._counts[value] += times
        else:
            self._counts[value] = times
            self._values.insert(bisect_left(self._values, value), value)
        self._total += times

    def insert_many(self, values: Iterable[int]) -> None:
        """Insert every value of *values* once."""
        for value in values:
            self.insert(value)

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    @property
    def total(self) -> int:
        return self._total

    def count(self, value: int) -> int:
        """Return the multiplicity of *value* (0 if absent)."""
        return self._counts.get(value, 0)

    def highest(self) -> Optional[int]:
        """Return the largest stored value, or None when empty."""
        return self._values[-1] if self._values else None

    def items(self) -> Iterator[Tuple[int, int]]:
        """Yield ``(value, count)`` pairs from the highest value down."""
        for value in reversed(self._values):
            yield value, self._counts[value]

    def threshold(self, threshold: int) -> Optional[int]:
        """
        Return the largest value reached by at least *threshold* elements.

        Walks the distinct values in descending order, accumulating
        multiplicities; the first value at which the running total is
        ``>= threshold`` is the answer.

        Args:
            threshold: Minimum number of elements, at least 1.

        Returns:
            The qualifying value, or None if fewer than *threshold*
            elements were inserted.

        Raises:
            InvalidThresholdError: If *threshold* is smaller than 1.
        """
        check_threshold(threshold)
        if threshold > self._total:
            return None

        running = 0
        for value, count in self.items():
            running += count
            if running >= threshold:
                return value
        # unreachable while the total matches the stored counts
        return None

    # ------------------------------------------------------------------ #
    # Dunder helpers
    # ------------------------------------------------------------------ #

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, value: object) -> bool:
        return value in self._counts

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ThresholdMultiSet):
            return NotImplemented
        return self._counts == other._counts

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        entries = ", ".join(f"{v}x{c}" for v, c in self.items())
        return f"ThresholdMultiSet({entries})"
