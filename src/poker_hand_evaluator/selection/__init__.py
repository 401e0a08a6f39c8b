"""Card selection state."""

from poker_hand_evaluator.selection.hand_selection import (
    HandSelection,
    SelectionLimitError,
    create_deck,
)

__all__ = ["HandSelection", "SelectionLimitError", "create_deck"]
