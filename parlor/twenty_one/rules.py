from parlor.common.card import Rank
from parlor.twenty_one.hand import ACE_ADJUSTMENT, MAX_SCORE, TwentyOneHand


class TwentyOneRules:
    """
    Table rules for twenty-one.

    :param max_score: Highest total a hand may reach without busting
    :param dealer_stand_threshold: The dealer draws while below this total
    :param initial_cards: Cards dealt to each party at the start of a round
    :param ace_adjustment: How much a soft Ace loses when it is counted low
    """

    def __init__(
        self,
        max_score: int = MAX_SCORE,
        dealer_stand_threshold: int = 17,
        initial_cards: int = 2,
        ace_adjustment: int = ACE_ADJUSTMENT,
    ):
        if initial_cards < 1:
            raise ValueError("At least one card must be dealt to each party")
        if dealer_stand_threshold > max_score:
            raise ValueError("The dealer must be able to stand without busting")
        if not 0 < ace_adjustment < Rank.ACE.rank_value:
            raise ValueError(
                f"Ace adjustment must be between 1 and {Rank.ACE.rank_value - 1}"
            )
        self.max_score = max_score
        self.dealer_stand_threshold = dealer_stand_threshold
        self.initial_cards = initial_cards
        self.ace_adjustment = ace_adjustment

    def new_hand(self, cards=()) -> TwentyOneHand:
        """Build an empty (or pre-filled) hand scored under these rules."""
        return TwentyOneHand(
            cards, max_score=self.max_score, ace_adjustment=self.ace_adjustment
        )

    def should_dealer_hit(self, hand: TwentyOneHand) -> bool:
        """The dealer draws while below the stand threshold and not busted."""
        return not hand.is_busted and hand.total() < self.dealer_stand_threshold

    def to_dict(self) -> dict:
        """Convert rules to a dictionary for serialization."""
        return {
            "max_score": self.max_score,
            "dealer_stand_threshold": self.dealer_stand_threshold,
            "initial_cards": self.initial_cards,
            "ace_adjustment": self.ace_adjustment,
        }

    def __repr__(self) -> str:
        return f"TwentyOneRules({self.to_dict()})"
