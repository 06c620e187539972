"""
Side Armour and Conning Towers

Belt armour (main, end, upper, bulge and torpedo bulkhead) and conning
tower weights.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict

from dreadnought.core.constants import INCH


class BeltType(str, Enum):
    """Location of a belt; fixed when the belt is created."""
    MAIN = "main"
    END = "end"
    UPPER = "upper"
    BULGE = "bulge"
    BULKHEAD = "bulkhead"

    @property
    def tapers(self) -> bool:
        """Main and upper belts taper into the unarmoured ends."""
        return self in (BeltType.MAIN, BeltType.UPPER)


class BulkheadType(str, Enum):
    """How the torpedo bulkhead is built."""
    STRENGTHENED = "strengthened"
    ADDITIONAL = "additional"

    @property
    def description(self) -> str:
        if self == BulkheadType.STRENGTHENED:
            return "Strengthened structural bulkheads"
        return "Additional damage containing bulkheads"


@dataclass
class Belt:
    """
    One belt of side armour.

    Attributes:
        kind: Belt location (read-only)
        thick: Thickness (in)
        len: Length (ft)
        hgt: Height (ft)
    """
    _kind: BeltType = field(default=BeltType.MAIN, repr=False)
    thick: float = 0.0
    len: float = 0.0
    hgt: float = 0.0

    @property
    def kind(self) -> BeltType:
        return self._kind

    @classmethod
    def new(cls, kind: BeltType) -> "Belt":
        return cls(_kind=kind)

    def wgt(self, lwl: float, cwp: float, b: float) -> float:
        """
        Belt weight (tons), both sides.

        Main and upper belts add a taper allowance where they run into the
        finer ends of the hull.

        Args:
            lwl: Waterline length (ft)
            cwp: Waterplane coefficient
            b: Beam (ft)
        """
        extra = 0.0
        if self._kind.tapers and lwl != 0.0:
            extra = max(1.0 - self.len / lwl, 0.0) ** (1.0 - cwp) * b

        return (self.len + extra) * self.hgt * self.thick * INCH * 2.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self._kind.value,
            "thick": self.thick,
            "len": self.len,
            "hgt": self.hgt,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], kind: BeltType) -> "Belt":
        """Rebuild a belt; the location comes from its slot, not the file."""
        return cls(
            _kind=kind,
            thick=data.get("thick", 0.0),
            len=data.get("len", 0.0),
            hgt=data.get("hgt", 0.0),
        )


@dataclass
class CT:
    """Conning tower."""
    thick: float = 0.0

    def wgt(self, d: float) -> float:
        """Conning tower weight (tons) for a displacement."""
        return 10.0 * (max(d, 0.0) / 10000.0) ** (2.0 / 3.0) * self.thick

    def to_dict(self) -> Dict[str, Any]:
        return {"thick": self.thick}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CT":
        return cls(thick=data.get("thick", 0.0))
