"""
Threshold set: which elements appear in at least ``t`` of the added sets.

The set counterpart of :class:`~threshold.core.tclock.TClock`, without
prefix semantics: each element is counted independently.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Hashable, Iterable

from threshold.core.multiset import check_threshold


class TSet:
    """
    Counts element occurrences across a growing collection of sets.

    Attributes:
        set_count: Number of sets added so far.
    """

    def __init__(self) -> None:
        self._set_count: int = 0
        self._occurrences: Dict[Hashable, int] = {}

    @property
    def set_count(self) -> int:
        return self._set_count

    def add(self, elements: Iterable[Hashable]) -> None:
        """Add one set; repeated elements inside *elements* count once."""
        self._set_count += 1
        for elem in set(elements):
            self._occurrences[elem] = self._occurrences.get(elem, 0) + 1

    def count(self, elem: Hashable) -> int:
        """Return the number of added sets containing *elem*."""
        return self._occurrences.get(elem, 0)

    def threshold_union(self, threshold: int) -> FrozenSet[Hashable]:
        """
        Return the elements present in at least *threshold* sets.

        Raises:
            InvalidThresholdError: If *threshold* is smaller than 1.
        """
        check_threshold(threshold)
        return frozenset(e for e, c in self._occurrences.items() if c >= threshold)

    def union(self) -> FrozenSet[Hashable]:
        return self.threshold_union(1)

    def intersection(self) -> FrozenSet[Hashable]:
        """Return the elements present in every added set."""
        if not self._set_count:
            return frozenset()
        return self.threshold_union(self._set_count)

    def __repr__(self) -> str:
        return f"TSet(sets={self._set_count}, elements={len(self._occurrences)})"
