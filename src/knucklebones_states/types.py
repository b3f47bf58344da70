"""Core data structures for the Knucklebones state enumerator.

Rule reminders:
- Each player owns one hand of up to three dice in each of the three columns.
- Dice inside a hand are kept in non-decreasing order.
- The two hands sharing a column never hold a common face value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Optional, Tuple


class HandError(ValueError):
    """Raised when a hand is built from out-of-order dice."""


class Die(IntEnum):
    """Face values of a six-sided die."""

    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6

    def __str__(self) -> str:
        return str(int(self))


DIE_VALUES: Tuple[Die, ...] = tuple(Die)


class Player(Enum):
    """Players in the game. ``A`` owns the first hand of every column pair."""

    A = auto()
    B = auto()

    def opponent(self) -> "Player":
        """Return the opposing player."""

        return Player.A if self is Player.B else Player.B


def _face(die: Optional[Die]) -> int:
    return 0 if die is None else int(die)


@dataclass(frozen=True)
class Hand:
    """One player's dice in a single column.

    Slots fill left to right: if ``die_2`` is set then ``die_1`` is too, and if
    ``die_3`` is set then all three are. Use the dedicated constructors rather
    than the dataclass initializer.
    """

    die_1: Optional[Die] = None
    die_2: Optional[Die] = None
    die_3: Optional[Die] = None

    @classmethod
    def empty(cls) -> "Hand":
        return cls()

    @classmethod
    def one(cls, die_1: Die) -> "Hand":
        return cls(die_1=die_1)

    @classmethod
    def two(cls, die_1: Die, die_2: Die) -> "Hand":
        if die_2 < die_1:
            raise HandError(f"dice must be non-decreasing: {die_1}, {die_2}")
        return cls(die_1=die_1, die_2=die_2)

    @classmethod
    def three(cls, die_1: Die, die_2: Die, die_3: Die) -> "Hand":
        if not die_1 <= die_2 <= die_3:
            raise HandError(f"dice must be non-decreasing: {die_1}, {die_2}, {die_3}")
        return cls(die_1=die_1, die_2=die_2, die_3=die_3)

    def dice(self) -> Tuple[Die, ...]:
        """Return the assigned dice in slot order."""

        return tuple(d for d in (self.die_1, self.die_2, self.die_3) if d is not None)

    def values(self) -> Tuple[int, int, int]:
        """Return the three slot faces, using 0 for an empty slot."""

        return _face(self.die_1), _face(self.die_2), _face(self.die_3)

    def has(self, die: Die) -> bool:
        return self.die_1 == die or self.die_2 == die or self.die_3 == die

    def is_full(self) -> bool:
        return self.die_3 is not None

    def __len__(self) -> int:
        if self.die_3 is not None:
            return 3
        if self.die_2 is not None:
            return 2
        if self.die_1 is not None:
            return 1
        return 0

    def score(self) -> int:
        """Return the face total plus ``v*v`` for every matching slot pair.

        The slot pairs checked are (1,2), (2,3) and (1,3), so three equal dice
        collect the bonus three times.
        """

        v1, v2, v3 = self.values()
        total = v1 + v2 + v3
        for left, right in ((self.die_1, self.die_2), (self.die_2, self.die_3), (self.die_1, self.die_3)):
            if left is not None and left == right:
                total += int(left) * int(left)
        return total

    def __str__(self) -> str:
        return "(" + "".join(str(d) for d in self.dice()) + ")"


HandPair = Tuple[Hand, Hand]
