"""Exceptions raised by the parlor game engines."""


class ParlorError(Exception):
    """Base class for all engine errors."""


class EmptyDeckError(ParlorError, IndexError):
    """Raised when a card is drawn from a deck with no cards remaining."""


class DeckIntegrityError(ParlorError, ValueError):
    """Raised when a deck is not exactly one of each of the 52 standard cards."""


class InvalidActionError(ParlorError, ValueError):
    """
    Raised when an engine receives an action or move outside its closed set.

    Input interfaces validate and re-prompt before handing a value to an
    engine, so this always indicates a broken caller.
    """

    def __init__(self, token, valid_tokens=()):
        self.token = token
        self.valid_tokens = tuple(valid_tokens)
        expected = ", ".join(str(t) for t in self.valid_tokens)
        message = f"Invalid action token: {token!r}"
        if expected:
            message += f" (expected one of: {expected})"
        super().__init__(message)
