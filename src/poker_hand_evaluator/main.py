"""Poker Hand Evaluator - classify five cards from the command line.

Usage:
    poker-hand-evaluator Ah Kh Qh Jh Th
    python -m poker_hand_evaluator.main 2c 2d 5h 5s Kc
    poker-hand-evaluator --config path/to/config.env 7c 7d 7h 7s 2c
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from poker_hand_evaluator import __version__
from poker_hand_evaluator.config.settings import load_settings
from poker_hand_evaluator.evaluation.hand_classifier import HAND_SIZE, classify_hand
from poker_hand_evaluator.models.hand import Card, HandRank
from poker_hand_evaluator.selection.hand_selection import limit_message, remaining_message

logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "INFO") -> None:
    """Configure logging for command-line use."""
    level = getattr(logging, log_level.upper())
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    # basicConfig is a no-op once handlers exist
    logging.getLogger().setLevel(level)


def parse_cards(card_strings: Sequence[str]) -> list[Card]:
    """Parse card strings such as 'Ah' or '10s'.

    Raises:
        ValueError: If any string is not a card
    """
    return [Card.from_string(s) for s in card_strings]


def evaluate_hand_strings(card_strings: Sequence[str]) -> HandRank | None:
    """Parse and classify a hand given as card strings."""
    return classify_hand(parse_cards(card_strings))


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="poker-hand-evaluator",
        description="Classify a five-card poker hand (e.g. Ah Kh Qh Jh Th)",
    )
    parser.add_argument(
        "cards",
        nargs="*",
        metavar="CARD",
        help="Card as rank + suit: 2-9, 10/T, J, Q, K, A followed by h, d, c, s or a suit glyph",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        help="Path to config.env file",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override LOG_LEVEL",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"Poker Hand Evaluator {__version__}",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the evaluator and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings(args.config)
    setup_logging(args.log_level or settings.log_level)

    try:
        cards = parse_cards(args.cards)
    except ValueError as e:
        logger.debug(f"Card parsing failed: {e}")
        parser.error(str(e))

    hand_rank = classify_hand(cards)
    if hand_rank is None:
        if len(cards) < HAND_SIZE:
            message = remaining_message(HAND_SIZE - len(cards))
        else:
            message = limit_message(HAND_SIZE)
        logger.warning(f"Cannot classify {len(cards)} card(s)")
        print(message)
        return 1

    logger.info(f"{' '.join(str(c) for c in cards)} -> {hand_rank.display_name}")
    print(hand_rank.display_name)
    return 0


def cli() -> None:
    """Command-line interface."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
