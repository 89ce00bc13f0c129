"""Build the 13x13 starting-hand chart."""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from range_chart.analysis.combos import ComboTable
from range_chart.analysis.projection import project
from range_chart.analysis.rank_values import RANK_SEQUENCE
from range_chart.analysis.win_probability import WinProbabilityEstimator
from range_chart.models.card import Rank
from range_chart.models.hand import StartingHand
from range_chart.models.position import DEFAULT_POSITIONS, PositionTable

logger = logging.getLogger(__name__)


@dataclass
class ChartCell:
    """One grid cell: the hand class and its probabilities."""
    hand: StartingHand
    probability: float
    projected: float

    @property
    def percentage(self) -> float:
        return self.projected * 100


@dataclass
class RangeChart:
    """Rows and columns follow ``ranks``; rows[i][j] is row rank i, column rank j."""
    position: str
    include_ties: bool
    ranks: Tuple[Rank, ...] = RANK_SEQUENCE
    rows: List[List[ChartCell]] = field(default_factory=list)

    def cell(self, row: Rank, col: Rank) -> ChartCell:
        return self.rows[self.ranks.index(row)][self.ranks.index(col)]

    def cells(self) -> Iterator[ChartCell]:
        for row in self.rows:
            yield from row

    def best(self) -> ChartCell:
        return max(self.cells(), key=lambda c: c.projected)


class ChartBuilder:
    """Compute every cell of the chart from one shared combo table."""

    def __init__(self, table: Optional[ComboTable] = None,
                 positions: PositionTable = DEFAULT_POSITIONS,
                 ranks: Tuple[Rank, ...] = RANK_SEQUENCE):
        self.table = table or ComboTable.build()
        self.estimator = WinProbabilityEstimator(self.table)
        self.positions = positions
        self.ranks = ranks

    def evaluate(self, hand: StartingHand, position: Optional[str],
                 include_ties: bool = False) -> ChartCell:
        first, second = hand.representative_cards()
        probability = self.estimator.estimate(first, second, include_ties)
        projected = project(probability, position, self.positions)
        return ChartCell(hand=hand, probability=probability, projected=projected)

    def build(self, position: Optional[str], include_ties: bool = False) -> RangeChart:
        chart = RangeChart(position=position or "", include_ties=include_ties, ranks=self.ranks)
        for i, row in enumerate(self.ranks):
            cells = []
            for j, col in enumerate(self.ranks):
                hand = StartingHand.for_cell(row, col, i, j)
                cells.append(self.evaluate(hand, position, include_ties))
            chart.rows.append(cells)

        logger.debug("Built %dx%d chart for position=%r include_ties=%s",
                     len(self.ranks), len(self.ranks), position, include_ties)
        return chart
