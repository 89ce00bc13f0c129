"""Heuristic strength score for a two-card starting hand.

Scoring rules:
    * Base: the higher of the two cards' point values.
    * Pairs: double the base, floored at 5. Nothing else applies.
    * Suited: +2.
    * Gap between the ranks: -0/-1/-2/-4/-5 for gaps 0/1/2/3/4+.
    * Connector: +1 when the gap penalty is under 2 and both ranks
      are below Ten.
    * Non-pair scores are rounded to the nearest integer, halves away
      from zero.
"""

import math

from range_chart.analysis.rank_values import DEFAULT_RANK_VALUES, RankValueTable
from range_chart.models.card import Card


PAIR_FLOOR = 5
SUITED_BONUS = 2
CONNECTOR_BONUS = 1
CONNECTOR_MAX_PENALTY = 2
CONNECTOR_RANK_LIMIT = 10


def rank_gap(first: Card, second: Card) -> int:
    """Number of ranks strictly between the two cards (0 when adjacent)."""
    diff = abs(first.rank.numeric_value - second.rank.numeric_value)
    return max(diff - 1, 0)


def gap_penalty(gap: int) -> float:
    if gap <= 0:
        return 0
    if gap == 1:
        return 1
    if gap == 2:
        return 2
    if gap == 3:
        return 4
    return 5


def round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


class HeuristicScorer:
    """Score two distinct cards using a rank value table."""

    def __init__(self, rank_values: RankValueTable = DEFAULT_RANK_VALUES):
        self.rank_values = rank_values

    def score(self, first: Card, second: Card) -> float:
        if first == second:
            raise ValueError(f"Cannot score {first} paired with itself")

        base = max(self.rank_values.value_of(first.rank),
                   self.rank_values.value_of(second.rank))

        if first.rank == second.rank:
            return max(PAIR_FLOOR, base * 2)

        score = base
        if first.suit == second.suit:
            score += SUITED_BONUS

        penalty = gap_penalty(rank_gap(first, second))
        score -= penalty

        if (penalty < CONNECTOR_MAX_PENALTY
                and first.rank.numeric_value < CONNECTOR_RANK_LIMIT
                and second.rank.numeric_value < CONNECTOR_RANK_LIMIT):
            score += CONNECTOR_BONUS

        return round_half_away(score)
