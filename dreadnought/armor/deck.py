"""
Deck Armour

Armoured and protective deck schemes. Four deck types cover the hull's
waterplane less the forecastle and quarterdeck; the three box schemes
only roof over the machinery and/or magazines.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, TYPE_CHECKING

from dreadnought.core.constants import INCH

if TYPE_CHECKING:
    from dreadnought.hull.hull import Hull


class DeckType(str, Enum):
    """Deck armour scheme."""
    MULTIPLE_ARMORED = "multiple_armored"
    SINGLE_ARMORED = "single_armored"
    MULTIPLE_PROTECTED = "multiple_protected"
    SINGLE_PROTECTED = "single_protected"
    BOX_OVER_MACHINERY = "box_over_machinery"
    BOX_OVER_MAGAZINE = "box_over_magazine"
    BOX_OVER_BOTH = "box_over_both"

    @property
    def is_box(self) -> bool:
        return self in (
            DeckType.BOX_OVER_MACHINERY,
            DeckType.BOX_OVER_MAGAZINE,
            DeckType.BOX_OVER_BOTH,
        )

    def wgt_factor(
        self,
        d: float,
        lwl: float,
        b: float,
        fc_len: float,
        qd_len: float,
        wp: float,
        cwp: float,
        wgt_engine: float,
        wgt_mag: float,
    ) -> float:
        """
        Armoured area of the main deck (sq ft).

        Args:
            d: Normal displacement (tons)
            lwl: Waterline length (ft)
            b: Beam (ft)
            fc_len: Forecastle length fraction
            qd_len: Quarterdeck length fraction
            wp: Waterplane area (sq ft)
            cwp: Waterplane coefficient
            wgt_engine: Machinery weight (tons)
            wgt_mag: Magazine weight (tons)
        """
        if not self.is_box:
            fc_area = (fc_len * 2.0) ** (1.0 - cwp ** 2) * b * lwl * fc_len / 2.0
            qd_area = (
                qd_len ** (1.0 - cwp) * b * lwl * qd_len * 0.25
                + (qd_len ** (1.0 - cwp) + (qd_len * 2.0) ** (1.0 - cwp)) * b * lwl * qd_len * 0.25
            )
            return (wp - fc_area - qd_area) * 1.01

        if d == 0.0:
            return 0.0

        if self == DeckType.BOX_OVER_MACHINERY:
            covered = wgt_engine * 3.0
        elif self == DeckType.BOX_OVER_MAGAZINE:
            covered = wgt_mag
        else:
            covered = wgt_engine * 3.0 + wgt_mag

        return (covered / (d * 0.94) * 0.65 * lwl + 16.0) * (b + 16.0) - 256.0

    @property
    def description(self) -> str:
        return _DECK_DESC[self]


_DECK_DESC = {
    DeckType.MULTIPLE_ARMORED: "Armoured deck - multiple decks",
    DeckType.SINGLE_ARMORED: "Armoured deck - single deck",
    DeckType.MULTIPLE_PROTECTED: "Protected deck - multiple decks",
    DeckType.SINGLE_PROTECTED: "Protected deck - single deck",
    DeckType.BOX_OVER_MACHINERY: "Box over machinery",
    DeckType.BOX_OVER_MAGAZINE: "Box over magazines",
    DeckType.BOX_OVER_BOTH: "Box over machinery & magazines",
}


@dataclass
class Deck:
    """
    Deck armour thicknesses (in).

    Attributes:
        fc: Forecastle deck
        md: Main deck
        qd: Quarterdeck
        ends: Deck beyond the vital spaces (descriptive only)
        kind: Deck armour scheme
    """
    fc: float = 0.0
    md: float = 0.0
    qd: float = 0.0
    ends: float = 0.0
    kind: DeckType = DeckType.MULTIPLE_ARMORED

    def wgt(self, hull: "Hull", wgt_mag: float, wgt_engine: float) -> float:
        """Deck armour weight (tons)."""
        lwl = hull.lwl()
        cwp = hull.cwp()
        b = hull.b

        main = self.kind.wgt_factor(
            hull.d(), lwl, b, hull.fc_len, hull.qd_len, hull.wp(), cwp, wgt_engine, wgt_mag,
        )
        fc_deck = (hull.fc_len * 2.0) ** (1.0 - cwp ** 2) * b * lwl * hull.fc_len * 0.5
        qd_deck = hull.qd_len ** (1.0 - cwp) * b * lwl * hull.qd_len / 4.0 * (2.0 + 2.0 ** (1.0 - cwp))

        return (main * self.md + fc_deck * self.fc + qd_deck * self.qd) * INCH

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fc": self.fc,
            "md": self.md,
            "qd": self.qd,
            "ends": self.ends,
            "kind": self.kind.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Deck":
        return cls(
            fc=data.get("fc", 0.0),
            md=data.get("md", 0.0),
            qd=data.get("qd", 0.0),
            ends=data.get("ends", 0.0),
            kind=DeckType(data.get("kind", DeckType.MULTIPLE_ARMORED.value)),
        )
