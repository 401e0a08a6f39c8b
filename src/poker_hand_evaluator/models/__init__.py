"""Data models for poker hand evaluation."""

from poker_hand_evaluator.models.hand import SUIT_SYMBOLS, Card, HandRank, Rank, Suit

__all__ = [
    "Card",
    "HandRank",
    "Rank",
    "Suit",
    "SUIT_SYMBOLS",
]
