"""Five-card poker hand classification."""

from collections import Counter
from collections.abc import Sequence

from poker_hand_evaluator.models.hand import Card, HandRank, Rank

HAND_SIZE = 5

# Ace plays low: A-2-3-4-5
WHEEL_VALUES = [2, 3, 4, 5, int(Rank.ACE)]


class HandClassifier:
    """Stateless classifier mapping five cards to a HandRank.

    Categories are tested strongest first and the first match wins, so a
    hand satisfying several predicates (e.g. flush and straight) always
    gets the highest one.
    """

    HAND_SIZE = HAND_SIZE

    @staticmethod
    def sorted_values(cards: Sequence[Card]) -> list[int]:
        """Return rank values (2-14) in ascending order."""
        return sorted(int(card.rank) for card in cards)

    @staticmethod
    def rank_counts(cards: Sequence[Card]) -> list[int]:
        """Return rank frequencies in descending order, e.g. [3, 2]."""
        return sorted(Counter(card.rank for card in cards).values(), reverse=True)

    @staticmethod
    def is_flush(cards: Sequence[Card]) -> bool:
        """Check if some suit covers the whole hand."""
        suit_counts = Counter(card.suit for card in cards)
        return any(count == HAND_SIZE for count in suit_counts.values())

    @staticmethod
    def is_wheel(values: Sequence[int]) -> bool:
        """Check for the ace-low straight."""
        return list(values) == WHEEL_VALUES

    @classmethod
    def is_straight(cls, values: Sequence[int]) -> bool:
        """Check if sorted values are consecutive or form the wheel."""
        consecutive = all(values[i] == values[i - 1] + 1 for i in range(1, len(values)))
        return consecutive or cls.is_wheel(values)

    def classify(self, cards: Sequence[Card]) -> HandRank | None:
        """
        Classify a poker hand.

        Args:
            cards: Exactly five cards, in any order. Duplicates are accepted.

        Returns:
            The highest HandRank the cards satisfy, or None when the hand
            does not hold exactly five cards.
        """
        if len(cards) != HAND_SIZE:
            return None

        values = self.sorted_values(cards)
        counts = self.rank_counts(cards)
        flush = self.is_flush(cards)
        straight = self.is_straight(values)

        if flush and straight and values[-1] == Rank.ACE and not self.is_wheel(values):
            return HandRank.ROYAL_FLUSH
        if flush and straight:
            return HandRank.STRAIGHT_FLUSH
        if counts[0] == 4:
            return HandRank.FOUR_OF_A_KIND
        if counts[0] == 3 and counts[1] == 2:
            return HandRank.FULL_HOUSE
        if flush:
            return HandRank.FLUSH
        if straight:
            return HandRank.STRAIGHT
        if counts[0] == 3:
            return HandRank.THREE_OF_A_KIND
        if counts[0] == 2 and counts[1] == 2:
            return HandRank.TWO_PAIR
        if counts[0] == 2:
            return HandRank.PAIR
        return HandRank.HIGH_CARD


_default_classifier = HandClassifier()


def classify_hand(cards: Sequence[Card]) -> HandRank | None:
    """Classify cards with a shared HandClassifier."""
    return _default_classifier.classify(cards)
