"""Starting hand model: two ranks plus suitedness, e.g. AKs, T9o, QQ."""

from dataclasses import dataclass
from typing import Tuple

from range_chart.models.card import Card, Rank, Suit


@dataclass(frozen=True)
class StartingHand:
    """One of the 169 distinct preflop hand classes.

    ``high`` is never lower than ``low``. Pairs are never suited.
    """
    high: Rank
    low: Rank
    suited: bool = False

    def __post_init__(self):
        if self.high.numeric_value < self.low.numeric_value:
            high, low = self.low, self.high
            object.__setattr__(self, "high", high)
            object.__setattr__(self, "low", low)
        if self.suited and self.is_pair:
            raise ValueError(f"A pair cannot be suited: {self.high.value}{self.low.value}")

    @property
    def is_pair(self) -> bool:
        return self.high == self.low

    @property
    def notation(self) -> str:
        if self.is_pair:
            return f"{self.high.value}{self.low.value}"
        return f"{self.high.value}{self.low.value}{'s' if self.suited else 'o'}"

    @classmethod
    def parse(cls, s: str) -> "StartingHand":
        """Parse notation like 'AA', 'AKs', 'kqo'. Two ranks alone mean offsuit."""
        s = s.strip()
        if len(s) not in (2, 3):
            raise ValueError(f"Cannot parse hand: {s}")
        high = Rank.from_char(s[0])
        low = Rank.from_char(s[1])
        suited = False
        if len(s) == 3:
            flag = s[2].lower()
            if flag not in ("s", "o"):
                raise ValueError(f"Cannot parse hand: {s}")
            suited = flag == "s"
        return cls(high, low, suited)

    @classmethod
    def from_cards(cls, first: Card, second: Card) -> "StartingHand":
        suited = first.rank != second.rank and first.suit == second.suit
        return cls(first.rank, second.rank, suited=suited)

    @classmethod
    def for_cell(cls, row: Rank, col: Rank, row_index: int, col_index: int) -> "StartingHand":
        """Hand shown at a grid cell: suited right of the diagonal, offsuit left of it."""
        return cls(row, col, suited=col_index > row_index)

    def representative_cards(self) -> Tuple[Card, Card]:
        """Concrete cards standing in for the class: high card in clubs,
        low card in clubs when suited and in spades otherwise."""
        low_suit = Suit.CLUBS if self.suited else Suit.SPADES
        return Card(self.high, Suit.CLUBS), Card(self.low, low_suit)

    def __str__(self) -> str:
        return self.notation
