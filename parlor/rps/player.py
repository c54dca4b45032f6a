"""
The two parties of a rock-paper-scissors-lizard-spock game.

Each party owns its score and its move history. The score is reset between
games; the history is not, and keeps growing for as long as the party exists.
"""

import random
from abc import abstractmethod
from typing import List, Optional, Sequence

from parlor.common.actor import Actor
from parlor.common.io_interface import IOInterface
from parlor.rps.move import Move
from parlor.rps.personality import PERSONALITIES, Personality


class RPSPlayer(Actor):
    """
    A party with a score and a move history.
    """

    def __init__(self, name: str, io_interface: IOInterface):
        super().__init__(name, io_interface)
        self._score = 0
        self.move: Optional[Move] = None
        self._move_history: List[Move] = []

    @property
    def score(self) -> int:
        return self._score

    @property
    def move_history(self) -> List[Move]:
        return list(self._move_history)

    def add_point(self) -> None:
        self._score += 1

    def score_reset(self) -> None:
        self._score = 0

    def reset(self):
        """Reset the score for a new game. The move history is kept."""
        self.score_reset()
        self.move = None

    def choose(self, valid_moves: Sequence[Move] = tuple(Move)) -> Move:
        """Pick a move, remember it and log it in the history."""
        self.move = Move.from_token(self.pick_move(valid_moves))
        self._move_history.append(self.move)
        return self.move

    @abstractmethod
    def pick_move(self, valid_moves: Sequence[Move]) -> Move:
        """Decide on the next move."""


class Human(RPSPlayer):
    """The human party. Moves come from the IO interface."""

    def pick_move(self, valid_moves: Sequence[Move]) -> Move:
        return self.io_interface.get_move(self, valid_moves)


class Computer(RPSPlayer):
    """
    The computer party.

    A personality is picked once when the computer is created and is kept for
    the rest of the session; the computer goes by the personality's name.
    """

    def __init__(
        self,
        io_interface: IOInterface,
        personality: Optional[Personality] = None,
        rng: Optional[random.Random] = None,
    ):
        self._rng = rng or random.Random()
        self._personality = personality or self._rng.choice(PERSONALITIES)
        super().__init__(self._personality.name, io_interface)

    @property
    def personality(self) -> Personality:
        return self._personality

    def pick_move(self, valid_moves: Sequence[Move]) -> Move:
        return self._personality.pick(self._rng)
