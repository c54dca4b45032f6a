"""
The two parties at a twenty-one table.

Player and Dealer share everything except how they decide their next action:
the player asks the IO interface, the dealer follows a fixed threshold.
"""

import random
from abc import abstractmethod
from enum import Enum
from typing import Optional, Sequence, Tuple

from parlor.common.actor import Actor
from parlor.common.card import Card
from parlor.common.exceptions import InvalidActionError
from parlor.common.io_interface import IOInterface
from parlor.twenty_one.action import Action
from parlor.twenty_one.hand import TwentyOneHand
from parlor.twenty_one.rules import TwentyOneRules


class Role(Enum):
    PLAYER = "player"
    DEALER = "dealer"


class Participant(Actor):
    """
    A party holding one twenty-one hand.

    :param name: Display name
    :param io_interface: The interface the participant reports through
    :param rules: Table rules used to score the hand
    """

    role: Role

    def __init__(
        self,
        name: str,
        io_interface: IOInterface,
        rules: Optional[TwentyOneRules] = None,
    ):
        super().__init__(name, io_interface)
        self.rules = rules or TwentyOneRules()
        self.hand: TwentyOneHand = self.rules.new_hand()

    def reset(self):
        """Throw the hand away. Called before every new round."""
        self.hand = self.rules.new_hand()

    def add_card(self, card: Card) -> None:
        self.hand.add_card(card)

    @property
    def cards(self) -> Tuple[Card, ...]:
        return self.hand.cards

    def total(self) -> int:
        return self.hand.total()

    @property
    def is_busted(self) -> bool:
        return self.hand.is_busted

    def show_hand(self, hide_hole_card: bool = False) -> None:
        self.io_interface.report_hand(
            self, self.hand.cards, self.total(), hide_hole_card=hide_hole_card
        )

    @abstractmethod
    def choose_action(self, valid_actions: Sequence[Action]) -> Action:
        """Decide whether to hit or stand."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.hand!r})"


class Player(Participant):
    """The human party. Every decision comes from the IO interface."""

    role = Role.PLAYER

    def choose_action(self, valid_actions: Sequence[Action]) -> Action:
        token = self.io_interface.get_player_action(self, valid_actions)
        action = Action.from_token(token)
        if action not in valid_actions:
            raise InvalidActionError(token, [a.value for a in valid_actions])
        return action


class Dealer(Participant):
    """
    The house. Draws while below the rules' `dealer_stand_threshold` and
    stands at or above it.

    The name is picked from `NAMES` when the dealer sits down and kept for
    the rest of the session.
    """

    role = Role.DEALER
    NAMES = ("Cooper", "Laura", "Donna", "James", "Bobby", "Audrey")

    def __init__(
        self,
        io_interface: IOInterface,
        name: Optional[str] = None,
        rules: Optional[TwentyOneRules] = None,
        rng: Optional[random.Random] = None,
    ):
        if name is None:
            name = (rng or random.Random()).choice(self.NAMES)
        super().__init__(name, io_interface, rules=rules)

    def should_hit(self) -> bool:
        return self.rules.should_dealer_hit(self.hand)

    def choose_action(self, valid_actions: Sequence[Action] = tuple(Action)) -> Action:
        return Action.HIT if self.should_hit() else Action.STAND
