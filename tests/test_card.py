import pytest

from parlor.common.card import Card, Rank, Suit


def test_card_initialization():
    card = Card(Suit.HEARTS, Rank.EIGHT)
    assert card.suit == Suit.HEARTS
    assert card.rank == Rank.EIGHT


def test_card_repr():
    card = Card(Suit.HEARTS, Rank.EIGHT)
    assert repr(card) == "Card(Suit.HEARTS, Rank.EIGHT)"


def test_card_str():
    assert str(Card(Suit.HEARTS, Rank.EIGHT)) == "8 of ♥"
    assert str(Card(Suit.SPADES, Rank.QUEEN)) == "Queen of ♠"
    assert str(Card(Suit.DIAMONDS, Rank.ACE)) == "Ace of ♦"
    assert str(Card(Suit.CLUBS, Rank.TEN)) == "10 of ♣"


def test_invalid_suit():
    with pytest.raises(TypeError):
        Card("Z", Rank.EIGHT)


def test_invalid_rank():
    with pytest.raises(TypeError):
        Card(Suit.HEARTS, "invalid")


def test_non_string_rank():
    with pytest.raises(TypeError):
        Card(Suit.HEARTS, 8)


def test_card_is_immutable():
    card = Card(Suit.HEARTS, Rank.EIGHT)
    with pytest.raises(AttributeError):
        card.rank = Rank.NINE
    with pytest.raises(AttributeError):
        card.suit = Suit.CLUBS
    assert card.rank == Rank.EIGHT


def test_card_equality():
    assert Card(Suit.HEARTS, Rank.ACE) == Card(Suit.HEARTS, Rank.ACE)
    assert Card(Suit.HEARTS, Rank.ACE) != Card(Suit.SPADES, Rank.ACE)
    assert Card(Suit.HEARTS, Rank.ACE) != Card(Suit.HEARTS, Rank.KING)
    assert Card(Suit.HEARTS, Rank.ACE) != "Ace of ♥"


def test_card_hash():
    cards = {Card(Suit.HEARTS, Rank.ACE), Card(Suit.HEARTS, Rank.ACE)}
    assert len(cards) == 1


def test_ranks_are_distinct():
    # Court cards share a point value but must stay separate ranks
    assert len(Rank) == 13
    assert Rank.JACK is not Rank.TEN


@pytest.mark.parametrize(
    "rank, value",
    [
        (Rank.TWO, 2),
        (Rank.NINE, 9),
        (Rank.TEN, 10),
        (Rank.JACK, 10),
        (Rank.QUEEN, 10),
        (Rank.KING, 10),
        (Rank.ACE, 11),
    ],
)
def test_card_value(rank, value):
    assert Card(Suit.CLUBS, rank).value == value


def test_is_ace():
    assert Card(Suit.CLUBS, Rank.ACE).is_ace
    assert not Card(Suit.CLUBS, Rank.KING).is_ace


def test_red_suits():
    assert Suit.HEARTS.is_red and Suit.DIAMONDS.is_red
    assert not Suit.CLUBS.is_red and not Suit.SPADES.is_red


def test_full_name():
    assert Rank.KING.full_name == "King"
    assert Rank.ACE.full_name == "Ace"
    assert Rank.SEVEN.full_name == "7"
