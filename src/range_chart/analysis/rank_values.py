"""Point values per rank and the display order of ranks."""

from types import MappingProxyType
from typing import Mapping, Tuple

from range_chart.models.card import Rank

# Highest to lowest; drives both grid axes
RANK_SEQUENCE: Tuple[Rank, ...] = tuple(sorted(Rank, key=lambda r: r.numeric_value, reverse=True))


class RankValueTable:
    """Read-only mapping from rank to heuristic points."""

    def __init__(self, points: Mapping[Rank, float]):
        missing = set(Rank) - set(points)
        if missing:
            raise ValueError(f"Missing point values for: {sorted(r.value for r in missing)}")
        self._points = MappingProxyType(dict(points))

    def value_of(self, rank: Rank) -> float:
        return self._points[rank]

    def __getitem__(self, rank: Rank) -> float:
        return self._points[rank]

    def __len__(self) -> int:
        return len(self._points)


DEFAULT_RANK_VALUES = RankValueTable({
    Rank.ACE: 10,
    Rank.KING: 8,
    Rank.QUEEN: 7,
    Rank.JACK: 6,
    Rank.TEN: 5,
    Rank.NINE: 4.5,
    Rank.EIGHT: 4,
    Rank.SEVEN: 3.5,
    Rank.SIX: 3,
    Rank.FIVE: 2.5,
    Rank.FOUR: 2,
    Rank.THREE: 1.5,
    Rank.TWO: 1,
})
