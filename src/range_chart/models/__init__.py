"""Data models for the range chart."""

from range_chart.models.card import Card, Rank, Suit
from range_chart.models.deck import Deck
from range_chart.models.hand import StartingHand
from range_chart.models.position import Position, PositionTable, DEFAULT_POSITIONS

__all__ = [
    "Card", "Rank", "Suit",
    "Deck",
    "StartingHand",
    "Position", "PositionTable", "DEFAULT_POSITIONS",
]
