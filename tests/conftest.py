"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures shared by every test package: the event
bus reset and helpers for building stacked decks with a known deal order.
"""

import pytest

from parlor.common.card import Card, Rank, Suit
from parlor.common.deck import Deck
from parlor.events import EventBus

RANKS_BY_LABEL = {rank.value: rank for rank in Rank}


# Reset event bus before each test
@pytest.fixture(scope="function", autouse=True)
def reset_event_bus():
    """Reset the event bus singleton before each test."""
    EventBus._instance = None
    yield
    EventBus._instance = None


def cards_from_labels(*labels):
    """
    Build distinct cards from rank labels such as "10", "K" or "A".

    Repeated ranks get the next unused suit.
    """
    used = set()
    cards = []
    for label in labels:
        rank = RANKS_BY_LABEL[label]
        for suit in Suit:
            card = Card(suit, rank)
            if card not in used:
                used.add(card)
                cards.append(card)
                break
        else:
            raise ValueError(f"No {label} left to hand out")
    return cards


def stack(*labels) -> Deck:
    """A full deck whose first draws are the given cards, in order."""
    top = cards_from_labels(*labels)
    rest = [card for card in Deck.initialize_default_deck() if card not in top]
    return Deck(rest + list(reversed(top)), shuffle=False)


@pytest.fixture
def make_cards():
    return cards_from_labels


@pytest.fixture
def stacked_deck():
    return stack
