"""
Vector clock with prefix (causal-history) semantics.

A vector clock maps each actor to the highest sequence number observed
from it.  Observing sequence number ``n`` implies having observed
``1..n``, so a single integer per actor describes the full set of
observed events.  Entries equal to zero are dropped at construction:
an absent actor and an actor at zero are the same clock.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Any,
    Dict,
    Hashable,
    Iterable,
    Iterator,
    KeysView,
    List,
    Mapping,
    Optional,
    Tuple,
    Union,
)

from threshold.core.multiset import check_seq, check_threshold
from threshold.parser.lexer import format_actor
from threshold.parser.literal import parse_clock_literal


Actor = Hashable


def _sort_key(actor: Any) -> Tuple[str, Any]:
    """Order actors by type name first so mixed int/str clocks still sort."""
    return (type(actor).__name__, actor)


@dataclass(frozen=True)
class Dot:
    """
    A single event: the *seq*-th event produced by *actor*.

    Attributes:
        actor: The actor that produced the event.
        seq: Sequence number of the event (1-based).
    """

    actor: Actor
    seq: int

    def __str__(self) -> str:
        return f"{format_actor(self.actor)}:{self.seq}"


class VectorClock:
    """
    Immutable mapping from actor to highest observed sequence number.

    All operations that would change a clock return a *new* instance.

    Attributes:
        clock: Copy of the normalized actor -> sequence mapping.
    """

    __slots__ = ("_clock",)

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #

    def __init__(
        self,
        entries: Union[Mapping[Actor, int], Iterable[Tuple[Actor, int]], None] = None,
    ) -> None:
        """
        Build a clock from a mapping or an iterable of ``(actor, seq)`` pairs.

        Zero entries are discarded.

        Raises:
            ValueError: If a sequence number is negative or an actor
                appears twice in *entries*.
            TypeError: If a sequence number is not an integer.
        """
        pairs: Iterable[Tuple[Actor, int]]
        if entries is None:
            pairs = ()
        elif isinstance(entries, Mapping):
            pairs = entries.items()
        else:
            pairs = entries

        clock: Dict[Actor, int] = {}
        seen = set()
        for actor, seq in pairs:
            if actor in seen:
                raise ValueError(f"Duplicate entry for actor {actor!r}")
            seen.add(actor)
            if check_seq(seq) > 0:
                clock[actor] = seq
        self._clock: Dict[Actor, int] = clock

    @classmethod
    def from_mapping(cls, mapping: Mapping[Actor, int]) -> VectorClock:
        """Build a clock from an explicit actor -> sequence mapping."""
        return cls(mapping)

    @classmethod
    def from_seqs(cls, seqs: Iterable[int], start: int = 1) -> VectorClock:
        """
        Build a clock from positional sequence numbers.

        The first value belongs to actor *start*, the next to
        ``start + 1`` and so on.

        Example:
            >>> VectorClock.from_seqs([10, 5, 5]).get(1)
            10
        """
        return cls((start + i, seq) for i, seq in enumerate(seqs))

    @classmethod
    def from_string(cls, s: str) -> VectorClock:
        """
        Parse a clock literal such as ``{A:2, B:1}``, ``A:2;B:1`` or ``[2, 1]``.

        Raises:
            LexerError: On characters outside the literal syntax.
            ParseError: On malformed literals or duplicate actors.
        """
        return cls(parse_clock_literal(s))

    # ------------------------------------------------------------------ #
    # Read access
    # ------------------------------------------------------------------ #

    @property
    def clock(self) -> Dict[Actor, int]:
        """Return a *copy* of the internal mapping."""
        return dict(self._clock)

    def get(self, actor: Actor) -> int:
        """Return the sequence number of *actor*, or 0 if absent."""
        return self._clock.get(actor, 0)

    def actors(self) -> KeysView[Actor]:
        """Return a live, re-iterable view of actors with non-zero entries."""
        return self._clock.keys()

    def items(self) -> Iterator[Tuple[Actor, int]]:
        """Yield ``(actor, seq)`` pairs ordered by actor."""
        for actor in sorted(self._clock, key=_sort_key):
            yield actor, self._clock[actor]

    def to_dict(self) -> Dict[Actor, int]:
        return dict(self._clock)

    def contains(self, dot: Dot) -> bool:
        """True when *dot* is part of this clock's causal history."""
        return 1 <= dot.seq <= self.get(dot.actor)

    def frontier_threshold(self, threshold: int) -> Optional[int]:
        """
        Return the *threshold*-th highest entry among this clock's actors.

        This is the highest sequence number reached by at least
        *threshold* actors.  Actors at zero are not entries of a clock
        and are not counted, so this returns None when the clock has
        fewer than *threshold* non-zero entries.

        Raises:
            InvalidThresholdError: If *threshold* is smaller than 1.
        """
        check_threshold(threshold)
        if threshold > len(self._clock):
            return None
        return sorted(self._clock.values(), reverse=True)[threshold - 1]

    def subtracted(self, other: VectorClock) -> Dict[Actor, List[int]]:
        """
        Return, per actor, the events in *self* that are missing from *other*.

        Actors with nothing missing are omitted.
        """
        missing: Dict[Actor, List[int]] = {}
        for actor, seq in self._clock.items():
            known = other.get(actor)
            if seq > known:
                missing[actor] = list(range(known + 1, seq + 1))
        return missing

    # ------------------------------------------------------------------ #
    # Clock operations
    # ------------------------------------------------------------------ #

    def next_dot(self, actor: Actor) -> Tuple[Dot, VectorClock]:
        """
        Generate the next event of *actor*.

        Returns:
            The new dot and a **new** clock that includes it.
        """
        dot = Dot(actor, self.get(actor) + 1)
        return dot, self.add_dot(dot)

    def add_dot(self, dot: Dot) -> VectorClock:
        """Return a **new** clock that includes *dot* (and its prefix)."""
        if self.contains(dot):
            return self
        values = dict(self._clock)
        values[dot.actor] = dot.seq
        return VectorClock(values)

    def join(self, other: VectorClock) -> VectorClock:
        """Return the component-wise maximum of both clocks."""
        merged = dict(other._clock)
        for actor, seq in self._clock.items():
            merged[actor] = max(seq, merged.get(actor, 0))
        return VectorClock(merged)

    def meet(self, other: VectorClock) -> VectorClock:
        """
        Return the component-wise minimum of both clocks.

        Actors missing from either clock are missing from the result.
        """
        return VectorClock(
            {a: min(seq, other._clock[a]) for a, seq in self._clock.items() if a in other._clock}
        )

    # ------------------------------------------------------------------ #
    # Ordering
    # ------------------------------------------------------------------ #

    def leq(self, other: VectorClock) -> bool:
        """Component-wise ≤, missing entries counting as 0."""
        return all(seq <= other.get(a) for a, seq in self._clock.items())

    def is_concurrent_with(self, other: VectorClock) -> bool:
        """True when neither clock is ≤ the other."""
        return not self.leq(other) and not other.leq(self)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, VectorClock):
            return NotImplemented
        return self.leq(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, VectorClock):
            return NotImplemented
        return self.leq(other) and self._clock != other._clock

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, VectorClock):
            return NotImplemented
        return other.leq(self)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, VectorClock):
            return NotImplemented
        return other.leq(self) and self._clock != other._clock

    # ------------------------------------------------------------------ #
    # Equality / hashing / repr
    # ------------------------------------------------------------------ #

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VectorClock):
            return NotImplemented
        return self._clock == other._clock

    def __hash__(self) -> int:
        return hash(frozenset(self._clock.items()))

    def __len__(self) -> int:
        return len(self._clock)

    def __iter__(self) -> Iterator[Actor]:
        return iter(self._clock)

    def __contains__(self, dot: object) -> bool:
        if not isinstance(dot, Dot):
            return False
        return self.contains(dot)

    def __str__(self) -> str:
        entries = ", ".join(f"{format_actor(a)}:{seq}" for a, seq in self.items())
        return f"{{{entries}}}"

    def __repr__(self) -> str:
        entries = ", ".join(f"{a!r}:{seq}" for a, seq in self.items())
        return f"VectorClock({entries})"


def vclock_from_seqs(seqs: Iterable[int], start: int = 1) -> VectorClock:
    """Shorthand for :meth:`VectorClock.from_seqs`."""
    return VectorClock.from_seqs(seqs, start=start)
