"""Hand generation.

Every legal column hand is produced exactly once: the empty hand, the six
one-die hands, the 21 two-die and 56 three-die non-decreasing hands.
"""

from __future__ import annotations

from typing import List

from .types import DIE_VALUES, Hand

HAND_COUNT = 84


def generate_hands() -> List[Hand]:
    """Return all hands of zero to three non-decreasing dice."""

    hands: List[Hand] = [Hand.empty()]
    for i1, d1 in enumerate(DIE_VALUES):
        hands.append(Hand.one(d1))
        for i2, d2 in enumerate(DIE_VALUES[i1:], start=i1):
            hands.append(Hand.two(d1, d2))
            for d3 in DIE_VALUES[i2:]:
                hands.append(Hand.three(d1, d2, d3))
    return hands


def overlaps(hand_1: Hand, hand_2: Hand) -> bool:
    """Return True if both hands hold at least one common face."""

    return any(hand_1.has(die) and hand_2.has(die) for die in DIE_VALUES)
