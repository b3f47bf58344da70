"""Hand-pair generation and index interning.

A hand pair is one column seen from both sides: ``(hand_a, hand_b)``. The
state space is indexed by small integers, so pairs are interned once into a
read-only table that maps in both directions.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from .hands import generate_hands, overlaps
from .types import Hand, HandPair

HAND_PAIR_COUNT = 3067


class UnknownHandPairError(KeyError):
    """Raised when a pair or index is not present in a ``HandPairTable``."""


def generate_hand_pairs(hands: Sequence[Hand]) -> List[HandPair]:
    """Return every ordered pair of hands that share no face value."""

    pairs: List[HandPair] = []
    for hand_1 in hands:
        for hand_2 in hands:
            if not overlaps(hand_1, hand_2):
                pairs.append((hand_1, hand_2))
    return pairs


def reverse_pair(pair: HandPair) -> HandPair:
    """Swap the two players' hands of a column."""

    return pair[1], pair[0]


class HandPairTable:
    """Bidirectional mapping between hand pairs and dense indices."""

    def __init__(self, pairs: Iterable[HandPair]) -> None:
        self._pairs: Tuple[HandPair, ...] = tuple(pairs)
        index: dict = {}
        for ix, pair in enumerate(self._pairs):
            if pair in index:
                raise ValueError(f"duplicate hand pair {format_pair(pair)}")
            index[pair] = ix
        self._index: Mapping[HandPair, int] = MappingProxyType(index)

    @classmethod
    def build(cls, hands: Optional[Sequence[Hand]] = None) -> "HandPairTable":
        """Build the table for ``hands`` (all legal hands by default)."""

        if hands is None:
            hands = generate_hands()
        return cls(generate_hand_pairs(hands))

    @property
    def pairs(self) -> Tuple[HandPair, ...]:
        return self._pairs

    def get_by_index(self, ix: int) -> HandPair:
        if not 0 <= ix < len(self._pairs):
            raise UnknownHandPairError(f"hand pair index out of range: {ix}")
        return self._pairs[ix]

    def get_by_hand(self, pair: HandPair) -> int:
        try:
            return self._index[pair]
        except KeyError as exc:
            raise UnknownHandPairError(f"unknown hand pair {format_pair(pair)}") from exc

    def __contains__(self, pair: object) -> bool:
        return pair in self._index

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[HandPair]:
        return iter(self._pairs)


def format_pair(pair: HandPair) -> str:
    return f"{pair[0]}|{pair[1]}"
