"""Data models for poker hand evaluation."""

from dataclasses import dataclass
from enum import Enum, IntEnum


class Suit(Enum):
    """Card suits. No ordering beyond identity."""

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"

    @property
    def symbol(self) -> str:
        """Return the suit glyph."""
        return SUIT_SYMBOLS[self]

    @property
    def is_red(self) -> bool:
        """Hearts and diamonds are drawn in red."""
        return self in (Suit.HEARTS, Suit.DIAMONDS)

    @classmethod
    def from_string(cls, text: str) -> "Suit":
        """Parse suit from letter ('h'), glyph ('♥') or name ('hearts')."""
        key = text.strip().lower()
        for suit in cls:
            if key in (suit.value, suit.value[0], suit.value[:-1], suit.symbol):
                return suit
        raise ValueError(f"Invalid suit: {text}")


class Rank(IntEnum):
    """Card ranks valued by game strength (Ace high = 14)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def symbol(self) -> str:
        """Return display symbol: '2'-'10', 'J', 'Q', 'K', 'A'."""
        if self <= Rank.TEN:
            return str(self.value)
        return self.name[0]

    @classmethod
    def from_string(cls, text: str) -> "Rank":
        """Parse rank from symbol, accepting 'T' for ten."""
        key = text.strip().upper()
        if key == "T":
            return cls.TEN
        for rank in cls:
            if rank.symbol == key:
                return rank
        raise ValueError(f"Invalid rank: {text}")


SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}


class HandRank(Enum):
    """Poker hand rankings from strongest to weakest."""

    ROYAL_FLUSH = 1
    STRAIGHT_FLUSH = 2
    FOUR_OF_A_KIND = 3
    FULL_HOUSE = 4
    FLUSH = 5
    STRAIGHT = 6
    THREE_OF_A_KIND = 7
    TWO_PAIR = 8
    PAIR = 9
    HIGH_CARD = 10

    @property
    def display_name(self) -> str:
        """Return human-readable name."""
        return self.name.replace("_", " ").title().replace(" Of A ", " of a ")


@dataclass(frozen=True)
class Card:
    """Represents a playing card. Equal cards share rank and suit."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank.symbol}{self.suit.symbol}"

    @property
    def key(self) -> str:
        """Identity string such as 'A-spades'."""
        return f"{self.rank.symbol}-{self.suit.value}"

    @classmethod
    def from_string(cls, card_str: str) -> "Card":
        """Parse card from string like 'Ah', 'Kd', '10s', 'Th' or 'A♠'."""
        text = card_str.strip()
        if len(text) not in (2, 3):
            raise ValueError(f"Invalid card string: {card_str}")
        try:
            return cls(rank=Rank.from_string(text[:-1]), suit=Suit.from_string(text[-1]))
        except ValueError as e:
            raise ValueError(f"Invalid card string: {card_str} ({e})") from e
