"""Relative-rank win probability of a hand against the combo table."""

from dataclasses import dataclass

from range_chart import config
from range_chart.analysis.combos import ComboKey, ComboTable
from range_chart.models.card import Card


@dataclass(frozen=True)
class HandComparison:
    """How a hand's score compares with every combo it can face."""
    score: float
    better: int
    tied: int
    scanned: int

    def win_probability(self, include_ties: bool = False) -> float:
        """Fraction of the OPPONENT_COMBOS hands that score below this one.

        Ties count as wins only with ``include_ties``. The divisor is the
        constant C(50, 2), not ``scanned``.
        """
        beaten_by = self.better if include_ties else self.better + self.tied
        return 1 - beaten_by / config.OPPONENT_COMBOS


class WinProbabilityEstimator:
    """Compare hands against a shared, prebuilt ComboTable."""

    def __init__(self, table: ComboTable):
        self.table = table

    def compare(self, first: Card, second: Card) -> HandComparison:
        target = ComboKey.of(first, second)
        hand_score = self.table.score_of(first, second)

        better = tied = scanned = 0
        for key, score in self.table.items():
            # Combos holding one of our cards cannot be dealt to an opponent
            if key.shares_card(target):
                continue
            scanned += 1
            if score > hand_score:
                better += 1
            elif score == hand_score:
                tied += 1

        return HandComparison(score=hand_score, better=better, tied=tied, scanned=scanned)

    def estimate(self, first: Card, second: Card, include_ties: bool = False) -> float:
        return self.compare(first, second).win_probability(include_ties)
