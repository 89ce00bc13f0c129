"""Project a heads-up win probability across several opponents."""

from typing import Optional

from range_chart.models.position import DEFAULT_POSITIONS, PositionTable


def project(probability: float, position: Optional[str],
            positions: PositionTable = DEFAULT_POSITIONS) -> float:
    """Raise ``probability`` to the seat's exponent.

    Treats each opponent as an independent draw, which ignores card
    removal between opponents. Unknown seats leave the value unchanged.
    """
    exponent = positions.exponent_for(position)
    if exponent == 1:
        return probability
    return probability ** exponent
