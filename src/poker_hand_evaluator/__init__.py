"""Poker Hand Evaluator - five-card poker hand classification."""

__version__ = "1.0.0"

from poker_hand_evaluator.evaluation.hand_classifier import HandClassifier, classify_hand
from poker_hand_evaluator.models.hand import Card, HandRank, Rank, Suit

__all__ = [
    "__version__",
    "Card",
    "HandClassifier",
    "HandRank",
    "Rank",
    "Suit",
    "classify_hand",
]
