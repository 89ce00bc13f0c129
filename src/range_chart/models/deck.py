"""The standard 52-card deck."""

from typing import Iterator, List

from range_chart.models.card import Card, Rank, Suit


class Deck:
    """A standard 52-card deck in a fixed order (suit by suit, Two to Ace)."""

    def __init__(self):
        self.cards: List[Card] = [Card(rank, suit) for suit in Suit for rank in Rank]

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __contains__(self, card: object) -> bool:
        return card in self.cards

    def __repr__(self) -> str:
        return f"Deck(cards={len(self.cards)})"
