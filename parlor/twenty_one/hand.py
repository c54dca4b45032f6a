"""
TwentyOneHand: a hand scored under the soft-ace rule.
"""

from parlor.common.hand import Hand

MAX_SCORE = 21
ACE_ADJUSTMENT = 10


class TwentyOneHand(Hand):
    """
    A hand in the game of twenty-one.

    Every Ace is first counted as 11. While the total is over `max_score` and
    an Ace is still counted high, one Ace at a time is demoted by
    `ace_adjustment` (to 1 by default) and the total is checked again.

    >>> from parlor.common.card import Card, Rank, Suit
    >>> hand = TwentyOneHand([Card(suit, Rank.ACE) for suit in Suit])
    >>> hand.total()
    14
    """

    def __init__(
        self, cards=(), max_score: int = MAX_SCORE, ace_adjustment: int = ACE_ADJUSTMENT
    ):
        super().__init__(cards)
        self.max_score = max_score
        self.ace_adjustment = ace_adjustment

    @property
    def num_aces(self) -> int:
        return sum(1 for card in self._cards if card.is_ace)

    def _score(self):
        total = sum(card.value for card in self._cards)
        soft_aces = self.num_aces
        while total > self.max_score and soft_aces > 0:
            total -= self.ace_adjustment
            soft_aces -= 1
        return total, soft_aces

    def total(self) -> int:
        """Calculate the best total of the hand with ace handling."""
        return self._score()[0]

    @property
    def is_soft(self) -> bool:
        """True when at least one Ace is still counted as 11."""
        return self._score()[1] > 0

    @property
    def is_busted(self) -> bool:
        return self.total() > self.max_score
