"""Table positions and the opponent-count exponent attached to each seat."""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

logger = logging.getLogger(__name__)


class Position(str, Enum):
    """Seats ordered from the last to act preflop to the first."""

    SB = "SB"
    D = "D"
    CO = "CO"
    HJ = "HJ"
    LJ = "LJ"
    UTG2 = "UTG2"
    UTG1 = "UTG1"
    UTG = "UTG"

    @classmethod
    def from_label(cls, label: Optional[str]) -> Optional["Position"]:
        """Case-insensitive lookup. Returns None for empty or unknown labels."""
        if not label:
            return None
        try:
            return cls(label.strip().upper())
        except ValueError:
            return None

    @property
    def category(self) -> str:
        if self in (Position.UTG, Position.UTG1, Position.UTG2):
            return "Early"
        if self in (Position.LJ, Position.HJ):
            return "Middle"
        if self in (Position.CO, Position.D):
            return "Late"
        return "Blinds"


class PositionTable:
    """Maps seats to the number of opponents a hand has to beat.

    The exponent approximates surviving N independent opponent hands.
    Anything that does not resolve to a known seat gets exponent 1.
    """

    DEFAULT_EXPONENT = 1

    def __init__(self, exponents: Mapping[Position, int]):
        self._exponents = MappingProxyType(dict(exponents))

    def exponent_for(self, label: Optional[str]) -> int:
        position = Position.from_label(label)
        if position is None or position not in self._exponents:
            if label:
                logger.debug("Unrecognised position %r, using exponent %d",
                             label, self.DEFAULT_EXPONENT)
            return self.DEFAULT_EXPONENT
        return self._exponents[position]

    def items(self):
        return self._exponents.items()

    def __len__(self) -> int:
        return len(self._exponents)


DEFAULT_POSITIONS = PositionTable({
    Position.SB: 1,
    Position.D: 2,
    Position.CO: 3,
    Position.HJ: 4,
    Position.LJ: 5,
    Position.UTG2: 6,
    Position.UTG1: 7,
    Position.UTG: 8,
})
