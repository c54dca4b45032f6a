"""Defines the Action enum for the choices a player has on their turn in twenty-one."""
from enum import Enum

from parlor.common.exceptions import InvalidActionError


class Action(Enum):
    """Enum for the possible actions a player can take in a game of twenty-one."""

    HIT = "hit"
    STAND = "stand"

    @classmethod
    def from_token(cls, token) -> "Action":
        """
        Resolve an already-validated token to an Action.

        :raises InvalidActionError: If the token is not a hit or stand token.
        """
        if isinstance(token, cls):
            return token
        try:
            return cls(token)
        except ValueError:
            raise InvalidActionError(token, [a.value for a in cls]) from None
