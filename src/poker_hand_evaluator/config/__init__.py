"""Configuration for the poker hand evaluator."""

from poker_hand_evaluator.config.settings import (
    GUISettings,
    Settings,
    get_settings,
    load_settings,
)

__all__ = ["GUISettings", "Settings", "get_settings", "load_settings"]
