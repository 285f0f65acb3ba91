"""
Threshold clock: threshold union over a growing collection of vector clocks.

Each actor gets its own :class:`ThresholdMultiSet` holding the sequence
number every added clock reported for that actor.  Since vector clocks
have prefix semantics per actor, "at least ``t`` clocks have seen event
``n`` of actor ``a``" depends on actor ``a`` alone, so the threshold
union is assembled coordinate by coordinate.

Every multiset always holds exactly one entry per added clock: a clock
that omits a known actor contributes a zero, and an actor seen for the
first time is back-filled with one zero per earlier clock.
"""

from __future__ import annotations

from typing import Dict, Iterable, KeysView, Optional

from threshold.core.multiset import ThresholdMultiSet, check_threshold
from threshold.core.vector_clock import Actor, VectorClock
from threshold.utils.logger import ThresholdLogger


class TClock:
    """
    Accumulates vector clocks and computes their threshold union.

    Not thread-safe: concurrent writers must hold an external lock
    around the whole structure.

    Attributes:
        clock_count: Number of vector clocks added so far.
    """

    def __init__(self, logger: Optional[ThresholdLogger] = None) -> None:
        """
        Create an empty threshold clock.

        Args:
            logger: Optional logger receiving debug records.
        """
        self._occurrences: Dict[Actor, ThresholdMultiSet] = {}
        self._clock_count: int = 0
        self._logger: Optional[ThresholdLogger] = logger

    @property
    def clock_count(self) -> int:
        return self._clock_count

    def actors(self) -> KeysView[Actor]:
        """Return the actors tracked so far."""
        return self._occurrences.keys()

    # ------------------------------------------------------------------ #
    # Accumulation
    # ------------------------------------------------------------------ #

    def add(self, vclock: VectorClock) -> None:
        """
        Record one more observer's vector clock.

        Raises:
            TypeError: If *vclock* is not a VectorClock.
        """
        if not isinstance(vclock, VectorClock):
            raise TypeError(f"Expected VectorClock, got {type(vclock).__name__}")

        for actor in vclock.actors():
            if actor not in self._occurrences:
                mset = ThresholdMultiSet()
                if self._clock_count:
                    mset.insert(0, times=self._clock_count)
                self._occurrences[actor] = mset

        for actor, mset in self._occurrences.items():
            mset.insert(vclock.get(actor))

        self._clock_count += 1
        if self._logger is not None:
            self._logger.clock_added(self._clock_count, vclock)

    def add_all(self, vclocks: Iterable[VectorClock]) -> None:
        """Add every clock of *vclocks* in order."""
        for vclock in vclocks:
            self.add(vclock)

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def threshold_union(self, threshold: int) -> VectorClock:
        """
        Return the per-actor highest sequence seen by at least *threshold* clocks.

        Actors whose multiset does not reach *threshold* contribute 0, so
        a threshold above :attr:`clock_count` yields the empty clock.

        Raises:
            InvalidThresholdError: If *threshold* is smaller than 1.
        """
        check_threshold(threshold)
        result: Dict[Actor, int] = {}
        for actor, mset in self._occurrences.items():
            seq = mset.threshold(threshold)
            if seq:
                result[actor] = seq

        vclock = VectorClock(result)
        if self._logger is not None:
            self._logger.debug(
                "Computed threshold union",
                threshold=threshold,
                clocks=self._clock_count,
                result=vclock,
            )
        return vclock

    def union(self) -> VectorClock:
        """Return the component-wise maximum of every added clock."""
        return VectorClock(
            {a: mset.highest() for a, mset in self._occurrences.items() if mset.highest()}
        )

    def equals_union(self, threshold: int) -> bool:
        """True when ``threshold_union(threshold)`` equals :meth:`union`."""
        return self.threshold_union(threshold) == self.union()

    def all_equal(self) -> bool:
        """True when every added clock is the same clock."""
        return all(len(mset) == 1 for mset in self._occurrences.values())

    def __len__(self) -> int:
        return len(self._occurrences)

    def __repr__(self) -> str:
        return f"TClock(clocks={self._clock_count}, actors={len(self._occurrences)})"
