"""Hand evaluation: five-card category classification."""

from poker_hand_evaluator.evaluation.hand_classifier import HandClassifier, classify_hand

__all__ = ["HandClassifier", "classify_hand"]
