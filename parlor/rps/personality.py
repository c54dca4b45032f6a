"""
Computer personalities.

A personality is a named bag of moves. The computer samples its bag uniformly,
so a move listed three times is picked three times as often as one listed once.
The won and lost messages are taunts shown when a game ends.
"""

import random
from dataclasses import dataclass
from typing import Optional, Tuple

from parlor.rps.move import Move


@dataclass(frozen=True)
class Personality:
    name: str
    moves: Tuple[Move, ...]
    winning_message: str = ""
    losing_message: str = ""

    def __post_init__(self):
        if not self.moves:
            raise ValueError(f"Personality {self.name!r} needs at least one move")
        object.__setattr__(self, "moves", tuple(Move.from_token(m) for m in self.moves))

    def pick(self, rng: Optional[random.Random] = None) -> Move:
        """Sample one move from the bag."""
        return (rng or random).choice(self.moves)

    def weight(self, move: Move) -> float:
        """The probability of `move` being picked."""
        return self.moves.count(move) / len(self.moves)


# Not a very clever guy, just loves lizards
CLAPTRAP = Personality(
    "Claptrap",
    (Move.ROCK, Move.SPOCK, Move.LIZARD, Move.LIZARD, Move.LIZARD),
    winning_message="Claptrap: Minion, I am victorious! Lizards forever!",
    losing_message="Claptrap: Noooo! My lizards have failed me!",
)

# Intellectual opponent, believes the pen is mightier than the sword
MR_HANDY = Personality(
    "Mr. Handy",
    (Move.ROCK, Move.SCISSORS, Move.PAPER, Move.PAPER, Move.PAPER),
    winning_message="Mr. Handy: Jolly good show, but paper prevails, old sport.",
    losing_message="Mr. Handy: Well played. I shall reconsider my stationery.",
)

# Wants to crush other life forms with rock
MR_GUTSY = Personality(
    "Mr. Gutsy",
    (Move.SCISSORS, Move.ROCK, Move.ROCK, Move.ROCK),
    winning_message="Mr. Gutsy: Crushed, soldier! Rock wins again!",
    losing_message="Mr. Gutsy: Retreat! Regroup! This is not over!",
)

PERSONALITIES = (CLAPTRAP, MR_HANDY, MR_GUTSY)
