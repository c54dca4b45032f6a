"""
Rock-paper-scissors-lizard-spock: a human against a computer personality.

A round is one pair of moves; the winner of the round scores a point and a tie
scores nothing. A game ends the moment either party reaches the winning score.
A rematch resets both scores but not the move histories.
"""

import argparse
import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from parlor.common.io_interface import (
    ConsoleIOInterface,
    DummyIOInterface,
    IOInterface,
    LoggingIOInterface,
)
from parlor.events import EngineEventType, EventBus
from parlor.rps.move import Move
from parlor.rps.personality import Personality
from parlor.rps.player import Computer, Human, RPSPlayer
from parlor.rps.rules import RPSRules

logger = logging.getLogger(__name__)

RULES_TEXT = (
    "Rock crushes lizard and scissors. Paper covers rock and disproves Spock. "
    "Scissors cut paper and decapitate lizard. Lizard poisons Spock and eats paper. "
    "Spock smashes scissors and vaporizes rock. "
    "Matching moves are a tie. First to {winning_score} points wins the game."
)


@dataclass(frozen=True)
class RoundResult:
    human_move: Move
    computer_move: Move
    winner: Optional[RPSPlayer]

    @property
    def is_tie(self) -> bool:
        return self.winner is None


def decide_winner(first: RPSPlayer, second: RPSPlayer) -> Optional[RPSPlayer]:
    """Return the party whose current move wins, or None on a tie."""
    result = first.move.compare(second.move)
    if result > 0:
        return first
    if result < 0:
        return second
    return None


class RPSGame:
    """
    A session of rock-paper-scissors-lizard-spock games.

    :param io_interface: Interface used for all input and output
    :param rules: Match rules
    :param rng: Random number generator for the computer
    :param personality: Fix the computer's personality instead of picking one
    :param show_rules: Offer to explain the rules before the first game
    """

    def __init__(
        self,
        io_interface: IOInterface,
        rules: Optional[RPSRules] = None,
        rng: Optional[random.Random] = None,
        personality: Optional[Personality] = None,
        show_rules: bool = True,
    ):
        self.io_interface = io_interface
        self.rules = rules or RPSRules()
        self.computer = Computer(io_interface, personality=personality, rng=rng)
        self.human: Optional[Human] = None
        self.show_rules = show_rules
        self.rounds: List[RoundResult] = []
        self.game_winners: List[RPSPlayer] = []
        self.event_bus = EventBus.get_instance()

    @property
    def parties(self):
        return (self.human, self.computer)

    def seat_human(self, name: Optional[str] = None) -> Human:
        if name is None:
            name = self.io_interface.get_player_name(require_letter=True)
        self.human = Human(name, self.io_interface)
        return self.human

    def play_round(self) -> RoundResult:
        """Collect one move from each party and award the point."""
        for party in self.parties:
            party.choose()
            self.event_bus.emit(
                EngineEventType.MOVE_CHOSEN,
                {"party": party.name, "move": party.move.value},
            )
        self.io_interface.report_moves(
            [(party, party.move) for party in self.parties]
        )

        winner = decide_winner(self.human, self.computer)
        if winner is not None:
            winner.add_point()
            logger.debug("%s scores with %s", winner.name, winner.move)
        self.io_interface.report_round_outcome(winner)
        self.io_interface.report_score([(party, party.score) for party in self.parties])
        self.event_bus.emit(
            EngineEventType.SCORE_UPDATED,
            self.scores(),
        )

        self.event_bus.emit(
            EngineEventType.ROUND_ENDED,
            {"winner": winner.name if winner else None},
        )
        result = RoundResult(self.human.move, self.computer.move, winner)
        self.rounds.append(result)
        return result

    def scores(self) -> dict:
        """Current scores keyed by role, so equal names never collide."""
        return {"human": self.human.score, "computer": self.computer.score}

    def game_winner(self) -> Optional[RPSPlayer]:
        for party in self.parties:
            if self.rules.is_winning_score(party.score):
                return party
        return None

    def play_game(self) -> RPSPlayer:
        """Play rounds until one party reaches the winning score."""
        if self.human is None:
            self.seat_human()
        while self.game_winner() is None:
            self.play_round()

        winner = self.game_winner()
        self.game_winners.append(winner)
        self.io_interface.report_match_winner(winner)
        personality = self.computer.personality
        taunt = (
            personality.winning_message
            if winner is self.computer
            else personality.losing_message
        )
        if taunt:
            self.io_interface.output(taunt)
        logger.info(
            "Game over: %s wins (%s %d, %s %d)",
            winner.name,
            self.human.name,
            self.human.score,
            self.computer.name,
            self.computer.score,
        )
        self.event_bus.emit(
            EngineEventType.MATCH_ENDED,
            {"winner": winner.name, **self.scores()},
        )
        return winner

    def show_move_history(self) -> None:
        for party in self.parties:
            moves = ", ".join(move.value for move in party.move_history)
            self.io_interface.output(f"{party.name}'s moves: {moves}")

    def play(self) -> List[RPSPlayer]:
        """Play games until the human declines a rematch."""
        if self.human is None:
            self.seat_human()
        self.io_interface.output(f"Welcome, {self.human.name}!")
        self.io_interface.output(
            f"First to {self.rules.winning_score} points wins. "
            f"Your opponent is {self.computer.name}."
        )
        if self.show_rules and self.io_interface.confirm("Would you like to see the rules?"):
            self.io_interface.output(
                RULES_TEXT.format(winning_score=self.rules.winning_score)
            )
        self.event_bus.emit(
            EngineEventType.GAME_STARTED,
            {"game": "rps", "human": self.human.name, "computer": self.computer.name},
        )

        while True:
            self.play_game()
            if self.io_interface.confirm("Would you like to see the move history?"):
                self.show_move_history()
            if not self.io_interface.request_rematch():
                break
            self.human.reset()
            self.computer.reset()

        self.event_bus.emit(
            EngineEventType.GAME_ENDED,
            {"game": "rps", "games_played": len(self.game_winners)},
        )
        self.io_interface.output(f"Thanks for playing, {self.human.name}. Goodbye!")
        return self.game_winners


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Play rock-paper-scissors-lizard-spock against the computer."
    )
    parser.add_argument(
        "-s",
        "--simulate",
        type=int,
        default=0,
        metavar="GAMES",
        help="play GAMES automated games instead of an interactive session",
    )
    parser.add_argument(
        "-w",
        "--winning-score",
        type=int,
        default=RPSRules().winning_score,
        help="points needed to win a game (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--log-file", default=None, help="append a transcript of the session to this file"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    rng = random.Random(args.seed)

    if args.simulate:
        io_interface = DummyIOInterface(rng=rng)
    else:
        io_interface = ConsoleIOInterface()
    if args.log_file:
        io_interface = LoggingIOInterface(args.log_file, inner=io_interface)

    game = RPSGame(
        io_interface,
        rules=RPSRules(args.winning_score),
        rng=rng,
        show_rules=not args.simulate,
    )

    if not args.simulate:
        game.play()
        return

    game.seat_human()
    for _ in range(args.simulate):
        game.play_game()
        game.human.reset()
        game.computer.reset()
    print(f"Finished playing {args.simulate} games against {game.computer.name}.")
    for party in game.parties:
        wins = sum(1 for winner in game.game_winners if winner is party)
        print(f"{party.name} won {wins} times ({wins / args.simulate * 100:.2f}%).")


if __name__ == "__main__":
    main()
