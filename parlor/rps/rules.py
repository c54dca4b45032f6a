WINNING_SCORE = 8


class RPSRules:
    """
    Match rules for rock-paper-scissors-lizard-spock.

    :param winning_score: Points needed to win a game
    """

    def __init__(self, winning_score: int = WINNING_SCORE):
        if winning_score < 1:
            raise ValueError("The winning score must be at least 1")
        self.winning_score = winning_score

    def is_winning_score(self, score: int) -> bool:
        return score >= self.winning_score

    def to_dict(self) -> dict:
        """Convert rules to a dictionary for serialization."""
        return {"winning_score": self.winning_score}

    def __repr__(self) -> str:
        return f"RPSRules({self.to_dict()})"
