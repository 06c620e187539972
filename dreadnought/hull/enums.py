"""
Hull Enumerations

Bow and stern forms, and the tags for the hull's mutually exclusive
length and displacement inputs.
"""

from enum import Enum
from typing import Tuple


class SternType(str, Enum):
    """Stern form, selecting waterplane coefficients and effective length."""
    TRANSOM_SM = "transom_sm"
    TRANSOM_LG = "transom_lg"
    CRUISER = "cruiser"
    ROUND = "round"

    def wp_calc(self) -> Tuple[float, float]:
        """Waterplane coefficient (a, f) pair for this stern."""
        if self == SternType.TRANSOM_SM:
            return (0.262, 0.79)
        if self == SternType.TRANSOM_LG:
            return (0.262, 0.81)
        return (0.262, 0.76)

    def leff(self, lwl: float, bb: float, cs: float) -> float:
        """
        Effective length for wave resistance.

        Transom sterns lengthen the hull's effective run; other sterns use
        the waterline length unchanged. A hull with no sharpness
        coefficient has no effective length.
        """
        if cs == 0.0:
            return 0.0
        if self == SternType.TRANSOM_SM:
            return bb * 0.5 / cs + lwl
        if self == SternType.TRANSOM_LG:
            return bb / cs + lwl
        return lwl

    @property
    def description(self) -> str:
        return _STERN_DESC[self]


_STERN_DESC = {
    SternType.TRANSOM_SM: "a small transom stern",
    SternType.TRANSOM_LG: "a large transom stern",
    SternType.CRUISER: "a cruiser stern",
    SternType.ROUND: "a round stern",
}


class BowType(str, Enum):
    """Bow form. A ram bow carries its length in Hull.ram_len."""
    RAM = "ram"
    BULB_STRAIGHT = "bulb_straight"
    BULB_FORWARD = "bulb_forward"
    NORMAL = "normal"

    @property
    def description(self) -> str:
        return _BOW_DESC[self]


_BOW_DESC = {
    BowType.RAM: "a ram bow",
    BowType.BULB_STRAIGHT: "a straight bulbous bow",
    BowType.BULB_FORWARD: "an extended bulbous bow",
    BowType.NORMAL: "a normal bow",
}


class LengthKind(str, Enum):
    """Which hull length the designer entered."""
    WATERLINE = "waterline"
    OVERALL = "overall"


class FormKind(str, Enum):
    """Whether the designer entered block coefficient or displacement."""
    BLOCK = "block"
    DISPLACEMENT = "displacement"
