"""
This module contains the Actor abstract base class.

Actor serves as a blueprint for any party seated at a table game: it holds the
display name and the IO interface the party reports through. Each game extends
it with the state that game needs (a hand of cards, a score, a move history)
and implements `reset` to clear whatever is scoped to a single round or match.
"""

from abc import ABC, abstractmethod

from parlor.common.io_interface import IOInterface


class Actor(ABC):
    """
    Abstract base class representing an actor in a table game.

    :param name: Name of the actor
    :param io_interface: The interface the actor reports through
    """

    def __init__(self, name: str, io_interface: IOInterface):
        self.name = name
        self.io_interface = io_interface

    @abstractmethod
    def reset(self):
        """
        Clear the state scoped to one round or match.

        :return: None
        """

    def display_message(self, message: str):
        """
        Sends a message from the actor to the IO interface.

        :param message: The message to send
        :return: None
        """
        self.io_interface.output(f"{self.name}: {message}")

    def __str__(self) -> str:
        return self.name
