"""
This module contains the IOInterface abstract base class and its implementations.

An IOInterface is the only way an engine talks to the outside world. The
input side hands the engine already-validated values (an `Action`, a `Move`,
a name, a yes/no answer); retrying on bad input is the interface's job. The
output side receives reports of game state, which each implementation renders
however it likes.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional, Sequence

import aiofiles

from parlor.common.card import Card
from parlor.rps.move import Move
from parlor.twenty_one.action import Action

if TYPE_CHECKING:
    from parlor.common.actor import Actor


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    Subclasses must implement the input methods and `output`. Each `report_*`
    method sends the plain text line built by its `describe_*` counterpart
    through `output`; richer interfaces override the `report_*` methods.
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""

    @abstractmethod
    def input(self, prompt: str) -> str:
        """Get raw input from the user with a prompt."""

    @abstractmethod
    def get_player_action(self, player: Actor, valid_actions: Sequence[Action]) -> Action:
        """Retrieve a validated action for `player`."""

    @abstractmethod
    def get_player_name(self, require_letter: bool = False) -> str:
        """Retrieve a non-empty player name."""

    @abstractmethod
    def get_move(self, player: Actor, valid_moves: Sequence[Move]) -> Move:
        """Retrieve a validated move for `player`."""

    @abstractmethod
    def confirm(self, prompt: str) -> bool:
        """Ask a yes/no question."""

    @abstractmethod
    def request_rematch(self) -> bool:
        """Ask whether to play again."""

    def describe_hand(
        self,
        participant: Actor,
        cards: Sequence[Card],
        total: Optional[int],
        hide_hole_card: bool = False,
    ) -> str:
        if hide_hole_card:
            shown = f"{cards[0]} and an unknown card"
        else:
            shown = ", ".join(str(card) for card in cards)
        message = f"{participant.name} has: {shown}"
        if total is not None and not hide_hole_card:
            message += f" (total {total})"
        return message

    def describe_action(self, participant: Actor, action: Action) -> str:
        verb = "hits" if action is Action.HIT else "stays"
        return f"{participant.name} {verb}."

    def describe_bust(self, participant: Actor) -> str:
        return f"{participant.name} busted!"

    def describe_round_outcome(self, winner: Optional[Actor]) -> str:
        if winner is None:
            return "It's a tie!"
        return f"{winner.name} wins the round!"

    def describe_moves(self, choices: Sequence[tuple]) -> str:
        return ", ".join(f"{actor.name} chose {move}" for actor, move in choices)

    def describe_score(self, scores: Sequence[tuple]) -> str:
        return ", ".join(f"{actor.name}: {score}" for actor, score in scores)

    def describe_match_winner(self, party: Actor) -> str:
        return f"{party.name} wins the game!"

    def report_hand(
        self,
        participant: Actor,
        cards: Sequence[Card],
        total: Optional[int],
        hide_hole_card: bool = False,
    ) -> None:
        self.output(self.describe_hand(participant, cards, total, hide_hole_card))

    def report_action(self, participant: Actor, action: Action) -> None:
        self.output(self.describe_action(participant, action))

    def report_bust(self, participant: Actor) -> None:
        self.output(self.describe_bust(participant))

    def report_round_outcome(self, winner: Optional[Actor]) -> None:
        self.output(self.describe_round_outcome(winner))

    def report_moves(self, choices: Sequence[tuple]) -> None:
        self.output(self.describe_moves(choices))

    def report_score(self, scores: Sequence[tuple]) -> None:
        self.output(self.describe_score(scores))

    def report_match_winner(self, party: Actor) -> None:
        self.output(self.describe_match_winner(party))


class DummyIOInterface(IOInterface):
    """
    A dummy IO interface for simulation purposes. Does not perform any actual IO.

    The player stands once their hand reaches `stand_on`, moves are picked
    uniformly at random, every question is answered no, and a rematch is
    accepted `rematches` times.
    """

    def __init__(
        self,
        stand_on: int = 17,
        rematches: int = 0,
        rng: Optional[random.Random] = None,
    ):
        self.stand_on = stand_on
        self.rematches = rematches
        self._rng = rng or random.Random()

    def output(self, message: str) -> None:
        """Simulates output operation."""

    def input(self, prompt: str) -> str:
        """Simulates input operation."""
        return ""

    def get_player_action(self, player: Actor, valid_actions: Sequence[Action]) -> Action:
        if not valid_actions:
            raise ValueError("No valid actions available.")
        total = player.hand.total() if hasattr(player, "hand") else self.stand_on
        if total < self.stand_on and Action.HIT in valid_actions:
            return Action.HIT
        return Action.STAND if Action.STAND in valid_actions else valid_actions[0]

    def get_player_name(self, require_letter: bool = False) -> str:
        return "Player"

    def get_move(self, player: Actor, valid_moves: Sequence[Move]) -> Move:
        return self._rng.choice(list(valid_moves))

    def confirm(self, prompt: str) -> bool:
        return False

    def request_rematch(self) -> bool:
        if self.rematches > 0:
            self.rematches -= 1
            return True
        return False


class TestIOInterface(IOInterface):
    """
    A test IO interface. Replays scripted input and records everything reported.

    Every `report_*` call is recorded in `reports` as a tuple whose first
    element is the report name, e.g. ``("bust", "Dealer")``.
    """

    __test__ = False

    def __init__(self, actions=(), moves=(), names=(), confirmations=(), rematches=()):
        self.sent_messages = []
        self.reports = []
        self.player_actions = list(actions)
        self.moves = list(moves)
        self.names = list(names)
        self.confirmations = list(confirmations)
        self.rematches = list(rematches)
        self.input_responses = []

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def input(self, prompt: str) -> str:
        if self.input_responses:
            return self.input_responses.pop(0)
        return "test_input"

    def add_player_action(self, action: Action):
        """Add a player action to the queue."""
        self.player_actions.append(action)

    def get_player_action(self, player: Actor, valid_actions: Sequence[Action]) -> Action:
        if self.player_actions:
            return self.player_actions.pop(0)
        raise ValueError("No more actions left in TestIOInterface queue.")

    def get_player_name(self, require_letter: bool = False) -> str:
        if self.names:
            return self.names.pop(0)
        raise ValueError("No more names left in TestIOInterface queue.")

    def get_move(self, player: Actor, valid_moves: Sequence[Move]) -> Move:
        if self.moves:
            return self.moves.pop(0)
        raise ValueError("No more moves left in TestIOInterface queue.")

    def confirm(self, prompt: str) -> bool:
        if self.confirmations:
            return self.confirmations.pop(0)
        return False

    def request_rematch(self) -> bool:
        if self.rematches:
            return self.rematches.pop(0)
        return False

    def report_hand(self, participant, cards, total, hide_hole_card=False):
        self.reports.append(("hand", participant.name, tuple(cards), total, hide_hole_card))
        super().report_hand(participant, cards, total, hide_hole_card)

    def report_action(self, participant, action):
        self.reports.append(("action", participant.name, action))
        super().report_action(participant, action)

    def report_bust(self, participant):
        self.reports.append(("bust", participant.name))
        super().report_bust(participant)

    def report_round_outcome(self, winner):
        self.reports.append(("round_outcome", winner.name if winner else None))
        super().report_round_outcome(winner)

    def report_moves(self, choices):
        self.reports.append(("moves", tuple((actor.name, move) for actor, move in choices)))
        super().report_moves(choices)

    def report_score(self, scores):
        self.reports.append(("score", tuple((actor.name, score) for actor, score in scores)))
        super().report_score(scores)

    def report_match_winner(self, party):
        self.reports.append(("match_winner", party.name))
        super().report_match_winner(party)

    def reported(self, kind: str) -> list:
        """Return the recorded reports of one kind, in order."""
        return [report[1:] for report in self.reports if report[0] == kind]


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface for interactive gameplay.

    Input methods keep asking until they get an answer they understand, so
    the engines only ever see valid values.
    """

    PROMPT = "=> "
    RED = "\033[31m"
    WHITE = "\033[37m"
    RESET = "\033[0m"

    HIT_WORDS = ("h", "hit")
    STAND_WORDS = ("s", "stay", "stand")
    YES_WORDS = ("y", "yes")
    NO_WORDS = ("n", "no")

    def output(self, message: str) -> None:
        print(f"{self.PROMPT}{message}")

    def input(self, prompt: str) -> str:
        return input(f"{self.PROMPT}{prompt} ").strip()

    def get_player_action(self, player: Actor, valid_actions: Sequence[Action]) -> Action:
        while True:
            answer = self.input("Would you like to (h)it or (s)tay?").lower()
            if answer in self.HIT_WORDS and Action.HIT in valid_actions:
                return Action.HIT
            if answer in self.STAND_WORDS and Action.STAND in valid_actions:
                return Action.STAND
            self.output("Please enter 'h' to hit or 's' to stay.")

    def get_player_name(self, require_letter: bool = False) -> str:
        while True:
            name = self.input("What's your name?")
            if require_letter:
                valid = any(char.isalpha() for char in name)
            else:
                valid = bool(name)
            if valid:
                return name.capitalize()
            self.output("Sorry, that's not a valid name.")

    def get_move(self, player: Actor, valid_moves: Sequence[Move]) -> Move:
        names = ", ".join(move.value for move in valid_moves)
        while True:
            answer = self.input(f"Choose one: {names}").lower()
            for move in valid_moves:
                if answer == move.value:
                    return move
            self.output("Sorry, that's not a valid move.")

    def confirm(self, prompt: str) -> bool:
        while True:
            answer = self.input(f"{prompt} (y/n)").lower()
            if answer in self.YES_WORDS:
                return True
            if answer in self.NO_WORDS:
                return False
            self.output("Please answer 'y' or 'n'.")

    def request_rematch(self) -> bool:
        return self.confirm("Would you like to play again?")

    def _color(self, card: Card) -> str:
        return self.RED if card.suit.is_red else self.WHITE

    def render_card(self, card: Optional[Card]) -> str:
        """Draw a card as a box; `None` draws a face-down card."""
        if card is None:
            color, face, suit = self.WHITE, "?", "?"
        else:
            color, face, suit = self._color(card), card.rank.rank_str, str(card.suit)
        return "\n".join(
            [
                "┌─────────┐",
                f"│{color}{face.ljust(2)}       {self.RESET}│",
                "│         │",
                f"│{color}    {suit}    {self.RESET}│",
                "│         │",
                f"│{color}       {face.rjust(2)}{self.RESET}│",
                "└─────────┘",
            ]
        )

    def report_hand(self, participant, cards, total, hide_hole_card=False):
        self.output(f"{participant.name}'s hand:")
        shown = [cards[0], None] if hide_hole_card else list(cards)
        for card in shown:
            print(self.render_card(card))
        if total is not None and not hide_hole_card:
            self.output(f"Total: {total}")
        print()


class LoggingIOInterface(IOInterface):
    """
    A logging IO interface for recording purposes. Writes output messages to a log file.

    Input and reports are delegated to an inner interface, so a transcript
    can be kept of an interactive game as well as of a simulation. Reports
    go to the file as plain text and to the inner interface in its own style.
    """

    def __init__(self, log_file_path: str, inner: Optional[IOInterface] = None):
        self.log_file_path = log_file_path
        self.inner = inner or DummyIOInterface()

    def _write(self, message: str) -> None:
        with open(self.log_file_path, "a", encoding="utf-8") as log_file:
            log_file.write(message + "\n")

    def output(self, message: str) -> None:
        """Write an output message to the log file."""
        self._write(message)
        self.inner.output(message)

    def input(self, prompt: str) -> str:
        self.output(f"[INPUT PROMPT] {prompt}")
        return self.inner.input(prompt)

    def get_player_action(self, player: Actor, valid_actions: Sequence[Action]) -> Action:
        action = self.inner.get_player_action(player, valid_actions)
        self.output(f"[ACTION] {player.name}: {action.value}")
        return action

    def get_player_name(self, require_letter: bool = False) -> str:
        name = self.inner.get_player_name(require_letter)
        self.output(f"[NAME] {name}")
        return name

    def get_move(self, player: Actor, valid_moves: Sequence[Move]) -> Move:
        move = self.inner.get_move(player, valid_moves)
        self.output(f"[MOVE] {player.name}: {move.value}")
        return move

    def confirm(self, prompt: str) -> bool:
        answer = self.inner.confirm(prompt)
        self.output(f"[CONFIRM] {prompt} {'yes' if answer else 'no'}")
        return answer

    def request_rematch(self) -> bool:
        answer = self.inner.request_rematch()
        self.output(f"[REMATCH] {'yes' if answer else 'no'}")
        return answer

    def report_hand(self, participant, cards, total, hide_hole_card=False):
        self._write(self.describe_hand(participant, cards, total, hide_hole_card))
        self.inner.report_hand(participant, cards, total, hide_hole_card)

    def report_action(self, participant, action):
        self._write(self.describe_action(participant, action))
        self.inner.report_action(participant, action)

    def report_bust(self, participant):
        self._write(self.describe_bust(participant))
        self.inner.report_bust(participant)

    def report_round_outcome(self, winner):
        self._write(self.describe_round_outcome(winner))
        self.inner.report_round_outcome(winner)

    def report_moves(self, choices):
        self._write(self.describe_moves(choices))
        self.inner.report_moves(choices)

    def report_score(self, scores):
        self._write(self.describe_score(scores))
        self.inner.report_score(scores)

    def report_match_winner(self, party):
        self._write(self.describe_match_winner(party))
        self.inner.report_match_winner(party)

    async def output_async(self, message: str) -> None:
        """Async version of output for callers running inside an event loop."""
        async with aiofiles.open(
            self.log_file_path, mode="a", encoding="utf-8"
        ) as log_file:
            await log_file.write(message + "\n")
