"""
Twenty-one: one player against the dealer.

`TwentyOneRound` plays a single round on a fresh deck: deal, the player's
turn, the dealer's turn, then resolution. `TwentyOneGame` seats the two
parties and plays rounds until the player declines a rematch. There is no
score carried between rounds.
"""

import argparse
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from parlor.common.deck import Deck
from parlor.common.io_interface import (
    ConsoleIOInterface,
    DummyIOInterface,
    IOInterface,
    LoggingIOInterface,
)
from parlor.events import EngineEventType, EventBus
from parlor.twenty_one.participant import Dealer, Participant, Player
from parlor.twenty_one.rules import TwentyOneRules
from parlor.twenty_one.state import DealerTurn, PlayerTurn, TurnState

logger = logging.getLogger(__name__)

RULES_TEXT = (
    "Get as close to {max_score} as you can without going over. "
    "Number cards are worth their face value, Jacks, Queens and Kings are worth 10, "
    "and an Ace is worth 11 or 1, whichever keeps you in the game. "
    "Hit to take another card or stay to keep what you have. "
    "The dealer draws until reaching {threshold}. Whoever goes over loses at once; "
    "otherwise the higher total wins and equal totals are a tie."
)


class Outcome(Enum):
    PLAYER_WINS = "player_wins"
    DEALER_WINS = "dealer_wins"
    TIE = "tie"


@dataclass(frozen=True)
class RoundResult:
    """
    The result of one round.

    Attributes:
        outcome: Who won, or a tie
        winner: The winning participant, None on a tie
        player_total: The player's final total
        dealer_total: The dealer's final total
        busted: The participant who went over, if any
    """

    outcome: Outcome
    winner: Optional[Participant]
    player_total: int
    dealer_total: int
    busted: Optional[Participant] = None


class TwentyOneRound:
    """
    A single round of twenty-one, played on its own deck.

    :param player: The player
    :param dealer: The dealer
    :param deck: The deck for this round. Never reuse a deck across rounds.
    :param rules: Table rules
    """

    def __init__(
        self,
        player: Player,
        dealer: Dealer,
        deck: Deck,
        rules: Optional[TwentyOneRules] = None,
    ):
        self.player = player
        self.dealer = dealer
        self.deck = deck
        self.rules = rules or TwentyOneRules()
        self.io_interface = player.io_interface
        self.event_bus = EventBus.get_instance()
        self.player_turn: Optional[PlayerTurn] = None
        self.dealer_turn: Optional[DealerTurn] = None

    def deal(self) -> None:
        """Deal the opening cards, the player's first, then the dealer's."""
        for participant in (self.player, self.dealer):
            for card in self.deck.deal(self.rules.initial_cards):
                participant.add_card(card)
                logger.debug("Dealt %s to %s", card, participant.name)
                self.event_bus.emit(
                    EngineEventType.CARD_DEALT,
                    {
                        "participant": participant.name,
                        "role": participant.role.value,
                        "card": str(card),
                        "total": participant.total(),
                    },
                )

    def play(self) -> RoundResult:
        self.event_bus.emit(
            EngineEventType.ROUND_STARTED,
            {"player": self.player.name, "dealer": self.dealer.name},
        )
        self.deal()
        self.player.show_hand()
        self.dealer.show_hand(hide_hole_card=True)

        self.player_turn = PlayerTurn(self.player, self.deck)
        if self.player_turn.run() is TurnState.BUSTED:
            # The dealer does not draw once the player has gone over
            self.io_interface.report_bust(self.player)
            self.dealer.show_hand()
            return self._finish(Outcome.DEALER_WINS, self.dealer, busted=self.player)

        self.dealer_turn = DealerTurn(self.dealer, self.deck)
        if self.dealer_turn.run() is TurnState.BUSTED:
            self.io_interface.report_bust(self.dealer)
            return self._finish(Outcome.PLAYER_WINS, self.player, busted=self.dealer)

        self.player.show_hand()
        self.dealer.show_hand()
        return self._finish(*self.compare())

    def compare(self):
        """Compare the totals of two hands that are both still in play."""
        player_total = self.player.total()
        dealer_total = self.dealer.total()
        if player_total > dealer_total:
            return Outcome.PLAYER_WINS, self.player
        if player_total < dealer_total:
            return Outcome.DEALER_WINS, self.dealer
        return Outcome.TIE, None

    def _finish(
        self,
        outcome: Outcome,
        winner: Optional[Participant],
        busted: Optional[Participant] = None,
    ) -> RoundResult:
        result = RoundResult(
            outcome=outcome,
            winner=winner,
            player_total=self.player.total(),
            dealer_total=self.dealer.total(),
            busted=busted,
        )
        self.io_interface.report_round_outcome(winner)
        logger.info(
            "Round over: %s (%s %d, %s %d)",
            outcome.value,
            self.player.name,
            result.player_total,
            self.dealer.name,
            result.dealer_total,
        )
        self.event_bus.emit(
            EngineEventType.ROUND_ENDED,
            {
                "outcome": outcome.value,
                "winner": winner.name if winner else None,
                "player_total": result.player_total,
                "dealer_total": result.dealer_total,
            },
        )
        return result


class TwentyOneGame:
    """
    A session of twenty-one rounds between one player and the dealer.

    :param io_interface: Interface used for all input and output
    :param rules: Table rules
    :param rng: Random number generator for shuffles and the dealer's name
    :param deck_factory: Builds the deck for each round. Defaults to a freshly
                         shuffled standard deck.
    :param show_rules: Offer to explain the rules before the first round
    """

    def __init__(
        self,
        io_interface: IOInterface,
        rules: Optional[TwentyOneRules] = None,
        rng: Optional[random.Random] = None,
        deck_factory: Optional[Callable[[], Deck]] = None,
        dealer: Optional[Dealer] = None,
        show_rules: bool = True,
    ):
        self.io_interface = io_interface
        self.rules = rules or TwentyOneRules()
        self._rng = rng or random.Random()
        self._deck_factory = deck_factory or (lambda: Deck(rng=self._rng))
        self.dealer = dealer or Dealer(
            io_interface,
            rules=self.rules,
            rng=self._rng,
        )
        self.player: Optional[Player] = None
        self.show_rules = show_rules
        self.results: List[RoundResult] = []
        self.event_bus = EventBus.get_instance()

    def seat_player(self, name: Optional[str] = None) -> Player:
        if name is None:
            name = self.io_interface.get_player_name()
        self.player = Player(name, self.io_interface, rules=self.rules)
        return self.player

    def play_round(self) -> RoundResult:
        """Play one round with fresh hands and a fresh deck."""
        if self.player is None:
            self.seat_player()
        self.player.reset()
        self.dealer.reset()
        round_ = TwentyOneRound(self.player, self.dealer, self._deck_factory(), self.rules)
        result = round_.play()
        self.results.append(result)
        return result

    def play(self) -> List[RoundResult]:
        """Play rounds until the player declines a rematch."""
        self.io_interface.output("Welcome to Twenty-One!")
        self.io_interface.output(f"Your dealer today is {self.dealer.name}.")
        if self.show_rules and self.io_interface.confirm("Would you like to see the rules?"):
            self.io_interface.output(
                RULES_TEXT.format(
                    max_score=self.rules.max_score,
                    threshold=self.rules.dealer_stand_threshold,
                )
            )
        if self.player is None:
            self.seat_player()
        self.event_bus.emit(
            EngineEventType.GAME_STARTED,
            {"game": "twenty_one", "player": self.player.name, "dealer": self.dealer.name},
        )

        while True:
            self.play_round()
            if not self.io_interface.request_rematch():
                break

        self.event_bus.emit(
            EngineEventType.GAME_ENDED,
            {"game": "twenty_one", "rounds_played": len(self.results)},
        )
        self.io_interface.output(f"Thanks for playing Twenty-One, {self.player.name}. Goodbye!")
        return self.results

    def summary(self) -> dict:
        """Count the outcomes of every round played so far."""
        counts = {outcome.value: 0 for outcome in Outcome}
        for result in self.results:
            counts[result.outcome.value] += 1
        counts["rounds_played"] = len(self.results)
        return counts


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play Twenty-One against the dealer.")
    parser.add_argument(
        "-s",
        "--simulate",
        type=int,
        default=0,
        metavar="ROUNDS",
        help="play ROUNDS automated rounds instead of an interactive game",
    )
    parser.add_argument(
        "--stand-on",
        type=int,
        default=17,
        help="total at which the simulated player stands (default: 17)",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--log-file", default=None, help="append a transcript of the game to this file"
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
        io_interface = DummyIOInterface(
            stand_on=args.stand_on, rematches=args.simulate - 1, rng=rng
        )
    else:
        io_interface = ConsoleIOInterface()
    if args.log_file:
        io_interface = LoggingIOInterface(args.log_file, inner=io_interface)

    game = TwentyOneGame(io_interface, rng=rng, show_rules=not args.simulate)
    game.play()

    if args.simulate:
        summary = game.summary()
        rounds = summary["rounds_played"]
        print(f"Finished playing {rounds} rounds.")
        for outcome in Outcome:
            count = summary[outcome.value]
            print(f"{outcome.value}: {count} ({count / rounds * 100:.2f}%)")


if __name__ == "__main__":
    main()
