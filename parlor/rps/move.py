"""
Defines the Move enum for rock-paper-scissors-lizard-spock.

Each move beats exactly two others and loses to the remaining two, so between
two different moves exactly one wins. Moves compare with `>` and `<` along that
relation; equal moves tie.

>>> Move.SPOCK > Move.ROCK
True
>>> Move.ROCK.compare(Move.ROCK)
0
"""

from enum import Enum
from typing import FrozenSet

from parlor.common.exceptions import InvalidActionError


class Move(Enum):
    """Enum for the five moves."""

    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"
    LIZARD = "lizard"
    SPOCK = "spock"

    @property
    def beats(self) -> FrozenSet["Move"]:
        """The moves this move defeats."""
        return WINNING_COMBOS[self]

    def compare(self, other: "Move") -> int:
        """Return 1 if this move wins, -1 if `other` wins, 0 on a tie."""
        if other in self.beats:
            return 1
        if self in other.beats:
            return -1
        return 0

    def __gt__(self, other):
        if not isinstance(other, Move):
            return NotImplemented
        return self.compare(other) > 0

    def __lt__(self, other):
        if not isinstance(other, Move):
            return NotImplemented
        return self.compare(other) < 0

    @classmethod
    def from_token(cls, token) -> "Move":
        """
        Resolve an already-validated move name to a Move.

        :raises InvalidActionError: If the token names no move.
        """
        if isinstance(token, cls):
            return token
        try:
            return cls(token)
        except ValueError:
            raise InvalidActionError(token, [m.value for m in cls]) from None

    def __str__(self) -> str:
        return self.value


WINNING_COMBOS = {
    Move.ROCK: frozenset({Move.LIZARD, Move.SCISSORS}),
    Move.PAPER: frozenset({Move.ROCK, Move.SPOCK}),
    Move.SCISSORS: frozenset({Move.LIZARD, Move.PAPER}),
    Move.LIZARD: frozenset({Move.SPOCK, Move.PAPER}),
    Move.SPOCK: frozenset({Move.ROCK, Move.SCISSORS}),
}
