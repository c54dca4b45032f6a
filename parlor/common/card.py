"""
This module defines the `Suit`, `Rank`, and `Card` classes, which are used to represent playing cards.

- `Suit`: An enum representing the four suits of a standard deck of playing
cards: Hearts, Diamonds, Clubs, and Spades.

- `Rank`: An enum representing the thirteen ranks of a standard deck of playing
cards: Two through Ten, Jack, Queen, King, and Ace. Each rank knows its base
point value in a game of twenty-one.

- `Card`: An immutable playing card. Two cards are equal when both suit and rank
match, so cards can be used as set members and dictionary keys.

This module is part of the `parlor` package, a small framework for turn-based table games.
"""

from enum import Enum, unique


@unique
class Suit(Enum):
    """
    Enum for suits in a card deck.
    """

    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"
    SPADES = "♠"

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEARTS, Suit.DIAMONDS)

    def __str__(self) -> str:
        return self.value


@unique
class Rank(Enum):
    """
    Enum for ranks in a card deck.

    Values are the short labels printed on the card face; use `rank_value`
    for scoring.
    """

    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    @property
    def rank_value(self) -> int:
        """The base point value of the rank. Aces count 11 until demoted by a hand."""
        if self == Rank.ACE:
            return 11
        if self.is_court:
            return 10
        return int(self.value)

    @property
    def is_court(self) -> bool:
        return self in (Rank.JACK, Rank.QUEEN, Rank.KING)

    @property
    def rank_str(self) -> str:
        """A string representation of the rank."""
        return self.value

    @property
    def full_name(self) -> str:
        """The rank as written out in card text: "7", "Jack", "Ace"."""
        if self.is_court or self == Rank.ACE:
            return self.name.capitalize()
        return self.value

    def __str__(self) -> str:
        return self.rank_str


class Card:
    """
    Class representing a playing card. Cards are immutable once created.

    >>> card = Card(Suit.HEARTS, Rank.TWO)
    >>> print(card)
    2 of ♥
    >>> card.value
    2
    """

    __slots__ = ("_suit", "_rank")

    def __init__(self, suit: Suit, rank: Rank):
        """
        Initialize a Card instance.

        :param suit: Suit of the card (one of the Suit enums)
        :param rank: Rank of the card (one of the Rank enums)
        """
        if not isinstance(suit, Suit):
            raise TypeError(f"Invalid suit: {suit}")
        if not isinstance(rank, Rank):
            raise TypeError(f"Invalid rank: {rank}")
        object.__setattr__(self, "_suit", suit)
        object.__setattr__(self, "_rank", rank)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def value(self) -> int:
        """The base point value of the card (Ace = 11, court cards = 10)."""
        return self._rank.rank_value

    @property
    def is_ace(self) -> bool:
        return self._rank == Rank.ACE

    def __eq__(self, other):
        """
        Checks if this card is equal to another card.

        :param other: The other card to compare to.
        :return: True if the cards have the same rank and suit, False otherwise.
        """
        if isinstance(other, Card):
            return self.rank == other.rank and self.suit == other.suit
        return NotImplemented

    def __hash__(self):
        return hash((self.suit, self.rank))

    def __repr__(self) -> str:
        return f"Card(Suit.{self.suit.name}, Rank.{self.rank.name})"

    def __str__(self) -> str:
        return f"{self.rank.full_name} of {self.suit}"
