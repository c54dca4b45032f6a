"""
This module contains the Deck class, which represents a single 52-card deck.

A deck is shuffled when it is built and cards are drawn from the top without
replacement. A deck is never refilled: a new round asks for a new deck.

>>> import random
>>> deck = Deck(rng=random.Random(7))
>>> deck.size
52
>>> card = deck.draw()
>>> deck.size
51
"""

import logging
import random
from typing import Iterator, List, Optional

from parlor.common.card import Card, Rank, Suit
from parlor.common.exceptions import DeckIntegrityError, EmptyDeckError

logger = logging.getLogger(__name__)


class Deck:
    """
    A class representing a deck of cards.

    The remaining cards are kept in draw order; the last element of `cards`
    is the top of the deck.
    """

    # Precompute the standard deck
    _default_deck = [Card(suit, rank) for suit in Suit for rank in Rank]

    def __init__(
        self,
        cards: Optional[List[Card]] = None,
        rng: Optional[random.Random] = None,
        shuffle: bool = True,
    ):
        """
        Initialize a Deck instance.

        :param cards: The 52 cards to populate the deck, in draw order (optional).
                      If not provided, a standard deck is constructed.
        :param rng: Random number generator used for shuffling (optional).
        :param shuffle: Shuffle the cards on construction. Pass False to keep a
                        stacked order, e.g. for replaying a known deal.
        :raises DeckIntegrityError: If the cards are not exactly one of each of
                                    the 52 (suit, rank) combinations.
        """
        self._rng = rng or random.Random()
        if cards is None:
            self.cards: List[Card] = self.initialize_default_deck()
        else:
            self.cards = list(cards)
        self._validate()
        if shuffle:
            self.shuffle()

    @classmethod
    def initialize_default_deck(cls) -> List[Card]:
        """
        Construct a standard deck with all possible combinations of suits and ranks.

        :return: A list of Card instances in suit-then-rank order.
        """
        return cls._default_deck.copy()

    def _validate(self) -> None:
        if len(self.cards) != len(self._default_deck):
            raise DeckIntegrityError(
                f"A deck needs {len(self._default_deck)} cards, got {len(self.cards)}"
            )
        unique = set(self.cards)
        if len(unique) != len(self.cards):
            raise DeckIntegrityError("A deck may not contain duplicate cards")
        if unique != set(self._default_deck):
            raise DeckIntegrityError("A deck must hold every (suit, rank) pair")

    def shuffle(self) -> "Deck":
        """
        Shuffle the remaining cards in the deck. Every ordering is equally likely.
        """
        self._rng.shuffle(self.cards)
        logger.debug("Shuffled deck of %d cards", len(self.cards))
        return self

    def draw(self) -> Card:
        """
        Remove and return the top card of the deck.

        :raises EmptyDeckError: If no cards remain.
        """
        if not self.cards:
            raise EmptyDeckError("Cannot draw from an empty deck")
        return self.cards.pop()

    def deal(self, num_cards: int = 1) -> List[Card]:
        """
        Draw `num_cards` cards from the top of the deck.

        >>> len(Deck().deal(5))
        5
        """
        if num_cards > len(self.cards):
            raise EmptyDeckError(
                f"Cannot deal {num_cards} cards from a deck of {len(self.cards)}"
            )
        return [self.draw() for _ in range(num_cards)]

    @property
    def size(self) -> int:
        """
        Return the number of remaining cards in the deck.
        """
        return len(self.cards)

    def is_empty(self) -> bool:
        return len(self.cards) == 0

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __repr__(self) -> str:
        return f"Deck({[repr(card) for card in self.cards]})"

    def __str__(self) -> str:
        return f"Deck of {len(self.cards)} cards"
