"""Scored table of every unordered two-card combination."""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, Optional, Tuple

from range_chart.analysis.scorer import HeuristicScorer
from range_chart.models.card import Card
from range_chart.models.deck import Deck

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComboKey:
    """Unordered pair of distinct cards. Build with ``ComboKey.of``."""
    first: Card
    second: Card

    @classmethod
    def of(cls, a: Card, b: Card) -> "ComboKey":
        if a == b:
            raise ValueError(f"A combo needs two distinct cards, got {a} twice")
        if a.sort_key > b.sort_key:
            a, b = b, a
        return cls(a, b)

    def __contains__(self, card: object) -> bool:
        return card == self.first or card == self.second

    def shares_card(self, other: "ComboKey") -> bool:
        return other.first in self or other.second in self

    def __str__(self) -> str:
        return f"{self.first}{self.second}"


class ComboTable:
    """Read-only mapping from ComboKey to heuristic score."""

    def __init__(self, scores: Dict[ComboKey, float]):
        self._scores = MappingProxyType(dict(scores))

    @classmethod
    def build(cls, scorer: Optional[HeuristicScorer] = None,
              deck: Optional[Deck] = None) -> "ComboTable":
        """Score every distinct pair drawn from two passes over the deck."""
        scorer = scorer or HeuristicScorer()
        deck = deck or Deck()

        scores: Dict[ComboKey, float] = {}
        for card1 in deck:
            for card2 in deck:
                if card1 == card2:
                    continue
                key = ComboKey.of(card1, card2)
                if key in scores:
                    continue
                scores[key] = scorer.score(card1, card2)

        logger.debug("Built combo table with %d entries", len(scores))
        return cls(scores)

    def score_of(self, a: Card, b: Card) -> float:
        return self._scores[ComboKey.of(a, b)]

    def items(self) -> Iterator[Tuple[ComboKey, float]]:
        return iter(self._scores.items())

    def __contains__(self, key: object) -> bool:
        return key in self._scores

    def __len__(self) -> int:
        return len(self._scores)
