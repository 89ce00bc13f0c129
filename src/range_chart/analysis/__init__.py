"""Hand scoring, win probability, and chart construction."""

from range_chart.analysis.rank_values import RankValueTable, DEFAULT_RANK_VALUES, RANK_SEQUENCE
from range_chart.analysis.scorer import HeuristicScorer
from range_chart.analysis.combos import ComboKey, ComboTable
from range_chart.analysis.win_probability import HandComparison, WinProbabilityEstimator
from range_chart.analysis.projection import project
from range_chart.analysis.chart import ChartBuilder, ChartCell, RangeChart

__all__ = [
    "RankValueTable", "DEFAULT_RANK_VALUES", "RANK_SEQUENCE",
    "HeuristicScorer",
    "ComboKey", "ComboTable",
    "HandComparison", "WinProbabilityEstimator",
    "project",
    "ChartBuilder", "ChartCell", "RangeChart",
]
