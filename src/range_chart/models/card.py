"""Card, Rank, and Suit models."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Suit(str, Enum):
    CLUBS = "c"
    DIAMONDS = "d"
    HEARTS = "h"
    SPADES = "s"

    @classmethod
    def from_symbol(cls, s: str) -> "Suit":
        mapping = {
            "c": cls.CLUBS, "♣": cls.CLUBS,
            "d": cls.DIAMONDS, "♦": cls.DIAMONDS,
            "h": cls.HEARTS, "♥": cls.HEARTS,
            "s": cls.SPADES, "♠": cls.SPADES,
        }
        key = s if s in mapping else s.lower()
        if key in mapping:
            return mapping[key]
        raise ValueError(f"Unknown suit: {s}")

    @property
    def symbol(self) -> str:
        return {"c": "♣", "d": "♦", "h": "♥", "s": "♠"}[self.value]


class Rank(str, Enum):
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "T"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    @property
    def numeric_value(self) -> int:
        values = {
            "2": 2, "3": 3, "4": 4, "5": 5, "6": 6, "7": 7, "8": 8,
            "9": 9, "T": 10, "J": 11, "Q": 12, "K": 13, "A": 14,
        }
        return values[self.value]

    @classmethod
    def from_char(cls, c: str) -> "Rank":
        for r in cls:
            if r.value == c.upper():
                return r
        if c == "10":
            return cls.TEN
        raise ValueError(f"Unknown rank: {c}")


@dataclass(frozen=True)
class Card:
    """A single playing card. Immutable, compared by rank and suit."""

    rank: Rank
    suit: Suit

    @classmethod
    def parse(cls, s: str) -> "Card":
        """Parse a card string like 'Ah', 'Ts', '2c'."""
        s = s.strip()
        if len(s) == 2:
            return cls(Rank.from_char(s[0]), Suit.from_symbol(s[1]))
        elif len(s) == 3 and s[:2] == "10":
            return cls(Rank.TEN, Suit.from_symbol(s[2]))
        raise ValueError(f"Cannot parse card: {s}")

    @property
    def sort_key(self) -> Tuple[int, int]:
        """Total order over the deck: rank first, then suit."""
        return self.rank.numeric_value, list(Suit).index(self.suit)

    def __repr__(self) -> str:
        return f"Card('{self.rank.value}{self.suit.value}')"

    def __str__(self) -> str:
        return f"{self.rank.value}{self.suit.value}"

    def pretty(self) -> str:
        """Return the card with its suit glyph, like 'A♠'."""
        return f"{self.rank.value}{self.suit.symbol}"
