"""Tests for the rank value table and the heuristic scorer."""

import pytest

from range_chart.analysis.rank_values import DEFAULT_RANK_VALUES, RANK_SEQUENCE, RankValueTable
from range_chart.analysis.scorer import HeuristicScorer, gap_penalty, rank_gap, round_half_away
from range_chart.models.card import Card, Rank


def score(a: str, b: str) -> float:
    return HeuristicScorer().score(Card.parse(a), Card.parse(b))


class TestRankValues:

    def test_literal_values(self):
        assert DEFAULT_RANK_VALUES[Rank.ACE] == 10
        assert DEFAULT_RANK_VALUES[Rank.KING] == 8
        assert DEFAULT_RANK_VALUES[Rank.TEN] == 5
        assert DEFAULT_RANK_VALUES[Rank.NINE] == 4.5
        assert DEFAULT_RANK_VALUES[Rank.TWO] == 1

    def test_monotonic_in_rank_order(self):
        values = [DEFAULT_RANK_VALUES.value_of(r) for r in RANK_SEQUENCE]
        assert values == sorted(values, reverse=True)
        assert len(set(values)) == 13

    def test_rank_sequence(self):
        assert "".join(r.value for r in RANK_SEQUENCE) == "AKQJT98765432"

    def test_incomplete_table_rejected(self):
        with pytest.raises(ValueError):
            RankValueTable({Rank.ACE: 10})


class TestGap:

    def test_rank_gap(self):
        assert rank_gap(Card.parse("7c"), Card.parse("6d")) == 0
        assert rank_gap(Card.parse("7c"), Card.parse("5d")) == 1
        assert rank_gap(Card.parse("Ac"), Card.parse("2d")) == 11
        assert rank_gap(Card.parse("Ac"), Card.parse("Ad")) == 0

    @pytest.mark.parametrize("gap,penalty", [(0, 0), (1, 1), (2, 2), (3, 4), (4, 5), (11, 5)])
    def test_gap_penalty(self, gap, penalty):
        assert gap_penalty(gap) == penalty

    def test_round_half_away(self):
        assert round_half_away(4.5) == 5
        assert round_half_away(6.5) == 7
        assert round_half_away(-1.5) == -2
        assert round_half_away(3.0) == 3


class TestHeuristicScorer:

    def test_identical_cards_rejected(self):
        with pytest.raises(ValueError):
            score("As", "As")

    @pytest.mark.parametrize("rank", list(Rank))
    def test_pair_flooring(self, rank):
        expected = max(5, 2 * DEFAULT_RANK_VALUES[rank])
        assert score(f"{rank.value}c", f"{rank.value}d") == expected

    def test_pair_examples(self):
        assert score("2c", "2d") == 5
        assert score("5c", "5d") == 5
        assert score("6c", "6d") == 6
        assert score("Ac", "Ah") == 20

    def test_gap_monotonicity(self):
        scores = [score("Ac", f"{r}d") for r in "KQJT9"]
        assert scores == [10, 9, 8, 6, 5]
        assert all(a > b for a, b in zip(scores, scores[1:]))

    def test_suited_bonus(self):
        assert score("Ac", "Kc") == score("Ac", "Kd") + 2
        assert score("Qh", "8h") == score("Qh", "8s") + 2

    def test_connector_bonus(self):
        assert score("7c", "6d") == 5
        assert score("7c", "6c") == 7
        assert score("7c", "5d") == 4
        # one-gap still qualifies, two-gap does not
        assert score("7c", "4d") == 2

    def test_no_connector_bonus_with_ten(self):
        assert score("Tc", "Jd") == 6
        assert score("Tc", "Jc") == 8
        assert score("9c", "Td") == 5

    def test_order_independent(self):
        assert score("Kc", "9s") == score("9s", "Kc")

    def test_negative_scores(self):
        assert score("7c", "2d") == -2
