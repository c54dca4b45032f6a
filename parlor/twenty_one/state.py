"""
Turn state machines for twenty-one.

Each turn walks a small set of states until it reaches a terminal one:

PlayerTurn: AWAITING_ACTION -> HIT -> (AWAITING_ACTION | BUSTED), or
            AWAITING_ACTION -> STAND.
DealerTurn: DRAW -> (DRAW | STAND | BUSTED). The dealer starts in DRAW when
            below the stand threshold, otherwise it stands straight away.

The `step` method of each turn performs the work of the current state,
reports to the IO interface, and moves to the next state. `run` steps until
the turn is over and returns the terminal state.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum, auto

from parlor.common.card import Card
from parlor.common.deck import Deck
from parlor.events import EngineEventType, EventBus
from parlor.twenty_one.action import Action
from parlor.twenty_one.participant import Dealer, Participant, Player

logger = logging.getLogger(__name__)


class TurnState(Enum):
    AWAITING_ACTION = auto()
    HIT = auto()
    DRAW = auto()
    STAND = auto()
    BUSTED = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (TurnState.STAND, TurnState.BUSTED)

    def __str__(self) -> str:
        return self.name


class Turn(ABC):
    """
    Abstract base class for one participant's turn.
    """

    def __init__(self, participant: Participant, deck: Deck):
        self.participant = participant
        self.deck = deck
        self.io_interface = participant.io_interface
        self.event_bus = EventBus.get_instance()
        self.history = []
        self.state = self.initial_state()

    @abstractmethod
    def initial_state(self) -> TurnState:
        """The state the turn starts in."""

    @abstractmethod
    def step(self) -> None:
        """Handle the current state and move to the next one."""

    def set_state(self, state: TurnState) -> None:
        logger.debug("%s: %s -> %s", self.participant.name, self.state, state)
        self.history.append(self.state)
        self.state = state

    @property
    def is_over(self) -> bool:
        return self.state.is_terminal

    def run(self) -> TurnState:
        while not self.is_over:
            self.step()
        return self.state

    def draw(self) -> Card:
        card = self.deck.draw()
        self.participant.add_card(card)
        self.event_bus.emit(
            EngineEventType.CARD_DEALT,
            {
                "participant": self.participant.name,
                "role": self.participant.role.value,
                "card": str(card),
                "total": self.participant.total(),
            },
        )
        return card

    def after_draw(self) -> None:
        if self.participant.is_busted:
            self.event_bus.emit(
                EngineEventType.HAND_BUSTED,
                {
                    "participant": self.participant.name,
                    "role": self.participant.role.value,
                    "total": self.participant.total(),
                },
            )


class PlayerTurn(Turn):
    """
    The player's turn, driven by actions from the IO interface.
    """

    VALID_ACTIONS = (Action.HIT, Action.STAND)

    def __init__(self, participant: Player, deck: Deck):
        super().__init__(participant, deck)

    def initial_state(self) -> TurnState:
        return TurnState.AWAITING_ACTION

    def step(self) -> None:
        if self.state is TurnState.AWAITING_ACTION:
            action = self.participant.choose_action(self.VALID_ACTIONS)
            self.event_bus.emit(
                EngineEventType.PLAYER_ACTION,
                {"participant": self.participant.name, "action": action.value},
            )
            self.io_interface.report_action(self.participant, action)
            self.set_state(TurnState.HIT if action is Action.HIT else TurnState.STAND)
        elif self.state is TurnState.HIT:
            self.draw()
            self.participant.show_hand()
            self.after_draw()
            if self.participant.is_busted:
                self.set_state(TurnState.BUSTED)
            else:
                self.set_state(TurnState.AWAITING_ACTION)
        else:
            raise RuntimeError(f"Player turn cannot step from {self.state}")


class DealerTurn(Turn):
    """
    The dealer's turn. No input: the dealer draws until its threshold.
    """

    def __init__(self, participant: Dealer, deck: Deck):
        super().__init__(participant, deck)

    def initial_state(self) -> TurnState:
        return self._next_state()

    def _next_state(self) -> TurnState:
        # Bust check comes before the stand check
        if self.participant.is_busted:
            return TurnState.BUSTED
        action = self.participant.choose_action()
        return TurnState.DRAW if action is Action.HIT else TurnState.STAND

    def step(self) -> None:
        if self.state is not TurnState.DRAW:
            raise RuntimeError(f"Dealer turn cannot step from {self.state}")
        self._announce(Action.HIT)
        self.draw()
        self.participant.show_hand()
        self.after_draw()
        self.set_state(self._next_state())

    def _announce(self, action: Action) -> None:
        self.io_interface.report_action(self.participant, action)
        self.event_bus.emit(
            EngineEventType.DEALER_ACTION,
            {"participant": self.participant.name, "action": action.value},
        )

    def run(self) -> TurnState:
        state = super().run()
        if state is TurnState.STAND:
            self._announce(Action.STAND)
        return state
