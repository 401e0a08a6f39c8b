"""Card selection state for building a hand one card at a time."""

import logging

from poker_hand_evaluator.evaluation.hand_classifier import HAND_SIZE, HandClassifier
from poker_hand_evaluator.models.hand import Card, HandRank, Rank, Suit

logger = logging.getLogger(__name__)

# Grid order: suits outer, ranks inner
DECK_SUITS = (Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS, Suit.SPADES)


class SelectionLimitError(ValueError):
    """Raised when selecting a card would exceed the selection cap."""


def create_deck() -> list[Card]:
    """Create all 52 cards in grid order."""
    return [Card(rank=rank, suit=suit) for suit in DECK_SUITS for rank in Rank]


def limit_message(max_cards: int) -> str:
    """Message shown when the selection cap is hit."""
    return f"You can only select {max_cards} cards"


def remaining_message(remaining: int) -> str:
    """Prompt shown while the hand is incomplete."""
    return f"Select {remaining} more card(s)"


class HandSelection:
    """Ordered set of selected cards, capped at ``max_cards``.

    The selection owns card identity (rank + suit) for toggling and only
    asks the classifier for a rank once it is complete.
    """

    def __init__(
        self,
        max_cards: int = HAND_SIZE,
        classifier: HandClassifier | None = None,
    ):
        if not 1 <= max_cards <= HAND_SIZE:
            raise ValueError(f"max_cards must be between 1 and {HAND_SIZE}, got {max_cards}")
        self.max_cards = max_cards
        self.classifier = classifier or HandClassifier()
        self.error = ""
        self._cards: list[Card] = []

    def __len__(self) -> int:
        return len(self._cards)

    @property
    def cards(self) -> tuple[Card, ...]:
        """Selected cards in selection order."""
        return tuple(self._cards)

    @property
    def remaining(self) -> int:
        return self.max_cards - len(self._cards)

    @property
    def is_complete(self) -> bool:
        return len(self._cards) == self.max_cards

    @property
    def status_message(self) -> str:
        """'Select N more card(s)' while partially selected, else empty."""
        if 0 < len(self._cards) < self.max_cards:
            return remaining_message(self.remaining)
        return ""

    def is_selected(self, card: Card) -> bool:
        return card in self._cards

    def is_disabled(self, card: Card) -> bool:
        """Unselected cards cannot be picked once the selection is full."""
        return self.is_complete and not self.is_selected(card)

    def select(self, card: Card) -> None:
        """Add a card.

        Raises:
            SelectionLimitError: If the selection is already full
        """
        if self.is_selected(card):
            return
        if self.is_complete:
            raise SelectionLimitError(limit_message(self.max_cards))
        self._cards.append(card)
        logger.debug(f"Selected {card} ({len(self._cards)}/{self.max_cards})")

    def deselect(self, card: Card) -> None:
        """Remove a card if present."""
        if self.is_selected(card):
            self._cards.remove(card)
            logger.debug(f"Deselected {card} ({len(self._cards)}/{self.max_cards})")

    def toggle(self, card: Card) -> bool:
        """Select or deselect a card, recording a message when full.

        Returns:
            True if the selection changed
        """
        self.error = ""
        if self.is_selected(card):
            self.deselect(card)
            return True

        try:
            self.select(card)
        except SelectionLimitError as e:
            logger.info(f"Rejected {card}: {e}")
            self.error = str(e)
            return False
        return True

    def reset(self) -> None:
        """Clear selected cards and any error."""
        self._cards.clear()
        self.error = ""
        logger.debug("Selection reset")

    def evaluate(self) -> HandRank | None:
        """Classify the selection once it is complete."""
        if not self.is_complete:
            return None
        return self.classifier.classify(self._cards)
