"""State assembly and classification.

A state is three columns, each an interned hand pair. Column order carries no
meaning, so a state is the sorted triple of pair indices and every unordered
triple (repetition allowed) is visited exactly once by the bounded loops
``i1 <= i2 <= i3``.

A state is final when exactly one player has filled all three columns and
intermediate when neither has. Both players full at once cannot happen in a
game; those triples are tallied as invalid and kept out of the totals.
"""

from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from enum import Enum, auto
from math import comb
from typing import Iterator, List, Optional, Sequence, Tuple

from .pairs import HandPairTable, reverse_pair
from .types import HandPair, Player


class StateClass(Enum):
    INTERMEDIATE = auto()
    FINAL = auto()
    INVALID = auto()


def classify(column_1: HandPair, column_2: HandPair, column_3: HandPair) -> StateClass:
    """Classify three columns by which players have completed every column."""

    p1_full = column_1[0].is_full() and column_2[0].is_full() and column_3[0].is_full()
    p2_full = column_1[1].is_full() and column_2[1].is_full() and column_3[1].is_full()
    if p1_full and p2_full:
        return StateClass.INVALID
    if p1_full or p2_full:
        return StateClass.FINAL
    return StateClass.INTERMEDIATE


@dataclass
class StateCounts:
    """Running tallies for an enumeration (or a slice of one)."""

    intermediate: int = 0
    final: int = 0
    invalid: int = 0

    @property
    def total(self) -> int:
        return self.intermediate + self.final

    def add(self, state_class: StateClass) -> None:
        if state_class is StateClass.INTERMEDIATE:
            self.intermediate += 1
        elif state_class is StateClass.FINAL:
            self.final += 1
        else:
            self.invalid += 1

    def __add__(self, other: "StateCounts") -> "StateCounts":
        return StateCounts(
            intermediate=self.intermediate + other.intermediate,
            final=self.final + other.final,
            invalid=self.invalid + other.invalid,
        )


def canonical_triple_count(n: int) -> int:
    """Number of unordered triples with repetition drawn from ``n`` items."""

    return comb(n + 2, 3)


def _outer_range(n: int, start: int, stop: Optional[int]) -> range:
    stop = n if stop is None else stop
    if not 0 <= start <= stop <= n:
        raise ValueError(f"outer range [{start}, {stop}) outside [0, {n}]")
    return range(start, stop)


def iter_canonical_triples(n: int, start: int = 0, stop: Optional[int] = None) -> Iterator[Tuple[int, int, int]]:
    """Yield ``(i1, i2, i3)`` with ``start <= i1 < stop`` and ``i1 <= i2 <= i3 < n``."""

    for i1 in _outer_range(n, start, stop):
        for i2 in range(i1, n):
            for i3 in range(i2, n):
                yield i1, i2, i3


def count_states_exhaustive(
    pairs: Sequence[HandPair], start: int = 0, stop: Optional[int] = None
) -> StateCounts:
    """Classify every canonical triple one by one.

    This is the reference enumeration; it is cubic in ``len(pairs)`` and far
    too slow in Python for the full 3067-pair table.
    """

    counts = StateCounts()
    for i1, i2, i3 in iter_canonical_triples(len(pairs), start, stop):
        counts.add(classify(pairs[i1], pairs[i2], pairs[i3]))
    return counts


def _fullness(pairs: Sequence[HandPair]) -> List[Tuple[bool, bool]]:
    return [(pair[0].is_full(), pair[1].is_full()) for pair in pairs]


def _suffix_tallies(flags: Sequence[Tuple[bool, bool]]) -> Tuple[List[int], List[int], List[int]]:
    """Counts of A-full, B-full and both-full pairs at index ``i`` or later."""

    n = len(flags)
    suffix_a = [0] * (n + 1)
    suffix_b = [0] * (n + 1)
    suffix_both = [0] * (n + 1)
    for i in range(n - 1, -1, -1):
        a_full, b_full = flags[i]
        suffix_a[i] = suffix_a[i + 1] + a_full
        suffix_b[i] = suffix_b[i + 1] + b_full
        suffix_both[i] = suffix_both[i + 1] + (a_full and b_full)
    return suffix_a, suffix_b, suffix_both


def count_states(pairs: Sequence[HandPair], start: int = 0, stop: Optional[int] = None) -> StateCounts:
    """Count canonical triples by class.

    The outer and middle loops are the same bounded loops as
    ``iter_canonical_triples``. The classifier only reads whether the third
    column's hands are full, so the innermost loop over ``i3 >= i2`` is
    replaced by suffix tallies of full pairs from ``i2`` onward.
    """

    n = len(pairs)
    outer = _outer_range(n, start, stop)
    flags = _fullness(pairs)
    suffix_a, suffix_b, suffix_both = _suffix_tallies(flags)

    intermediate = 0
    final = 0
    invalid = 0
    for i1 in outer:
        a1, b1 = flags[i1]
        for i2 in range(i1, n):
            a2, b2 = flags[i2]
            remaining = n - i2
            a_full = a1 and a2
            b_full = b1 and b2
            if a_full and b_full:
                both = suffix_both[i2]
                invalid += both
                final += suffix_a[i2] + suffix_b[i2] - 2 * both
                intermediate += remaining - suffix_a[i2] - suffix_b[i2] + both
            elif a_full:
                final += suffix_a[i2]
                intermediate += remaining - suffix_a[i2]
            elif b_full:
                final += suffix_b[i2]
                intermediate += remaining - suffix_b[i2]
            else:
                intermediate += remaining
    return StateCounts(intermediate=intermediate, final=final, invalid=invalid)


def _count_chunk(args: Tuple[Tuple[HandPair, ...], int, int]) -> StateCounts:
    pairs, start, stop = args
    return count_states(pairs, start, stop)


def count_states_parallel(pairs: Sequence[HandPair], workers: int, chunk_size: int = 64) -> StateCounts:
    """Split the outer index range into chunks and sum the per-chunk counts."""

    if workers < 1:
        raise ValueError("workers must be at least 1")
    if chunk_size < 1:
        raise ValueError("chunk_size must be at least 1")
    if workers == 1:
        return count_states(pairs)

    frozen = tuple(pairs)
    n = len(frozen)
    tasks = [(frozen, lo, min(lo + chunk_size, n)) for lo in range(0, n, chunk_size)]
    counts = StateCounts()
    with ProcessPoolExecutor(max_workers=workers) as executor:
        for partial in executor.map(_count_chunk, tasks):
            counts = counts + partial
    return counts


def closed_form_counts(pairs: Sequence[HandPair]) -> StateCounts:
    """Compute the same tallies from multiset counts over full pairs.

    With ``A`` pairs where player A is full, ``B`` where player B is full and
    ``AB`` where both are, a triple drawn only from the A-full pairs has player
    A done, and similarly for B.
    """

    flags = _fullness(pairs)
    n_a = sum(1 for a_full, _ in flags if a_full)
    n_b = sum(1 for _, b_full in flags if b_full)
    n_both = sum(1 for a_full, b_full in flags if a_full and b_full)

    everything = canonical_triple_count(len(flags))
    a_done = canonical_triple_count(n_a)
    b_done = canonical_triple_count(n_b)
    both_done = canonical_triple_count(n_both)
    return StateCounts(
        intermediate=everything - a_done - b_done + both_done,
        final=a_done + b_done - 2 * both_done,
        invalid=both_done,
    )


@dataclass(frozen=True)
class State:
    """Canonical state: three pair indices with ``column_1 <= column_2 <= column_3``."""

    column_1: int
    column_2: int
    column_3: int

    def __post_init__(self) -> None:
        if not self.column_1 <= self.column_2 <= self.column_3:
            raise ValueError("state columns must be sorted; use State.from_indices")

    @classmethod
    def from_indices(cls, column_a: int, column_b: int, column_c: int) -> "State":
        c1, c2, c3 = sorted((column_a, column_b, column_c))
        return cls(c1, c2, c3)

    @classmethod
    def from_pairs(
        cls, table: HandPairTable, column_a: HandPair, column_b: HandPair, column_c: HandPair
    ) -> "State":
        return cls.from_indices(
            table.get_by_hand(column_a),
            table.get_by_hand(column_b),
            table.get_by_hand(column_c),
        )

    def indices(self) -> Tuple[int, int, int]:
        return self.column_1, self.column_2, self.column_3

    def hands(self, table: HandPairTable) -> Tuple[HandPair, HandPair, HandPair]:
        return (
            table.get_by_index(self.column_1),
            table.get_by_index(self.column_2),
            table.get_by_index(self.column_3),
        )

    def reverse(self, table: HandPairTable) -> "State":
        """Return the state with the players swapped in every column."""

        c1, c2, c3 = self.hands(table)
        return State.from_pairs(table, reverse_pair(c1), reverse_pair(c2), reverse_pair(c3))

    def classify(self, table: HandPairTable) -> StateClass:
        return classify(*self.hands(table))

    def is_done(self, table: HandPairTable) -> bool:
        """True when either player has filled all three columns."""

        c1, c2, c3 = self.hands(table)
        return (c1[0].is_full() and c2[0].is_full() and c3[0].is_full()) or (
            c1[1].is_full() and c2[1].is_full() and c3[1].is_full()
        )

    def num_choices(self, table: HandPairTable, player: Player = Player.A) -> int:
        """Number of columns where ``player`` still has room for a die."""

        side = 0 if player is Player.A else 1
        return sum(1 for column in self.hands(table) if not column[side].is_full())

    def scores(self, table: HandPairTable) -> Tuple[int, int]:
        """Return ``(score_a, score_b)`` summed over the three columns."""

        columns = self.hands(table)
        return sum(c[0].score() for c in columns), sum(c[1].score() for c in columns)
