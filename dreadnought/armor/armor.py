"""
dreadnought Armour Scheme

Belts, torpedo bulkhead, deck and conning towers, with the geometry the
report needs: belt coverage of the vitals and the tallest belt the hull can
carry at a given incline.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, TYPE_CHECKING
import math

from dreadnought.armor.belts import Belt, BeltType, BulkheadType, CT
from dreadnought.armor.deck import Deck

if TYPE_CHECKING:
    from dreadnought.hull.hull import Hull


# Fraction of the waterline occupied by the vital spaces
VITAL_LENGTH = 0.65


@dataclass
class Armor:
    """
    Complete armour scheme.

    Attributes:
        main, end, upper, bulge, bulkhead: Side belts by location
        incline: Belt incline (degrees)
        bh_beam: Beam between torpedo bulkheads (ft)
        bh_kind: Torpedo bulkhead construction
        deck: Deck armour
        ct_fwd, ct_aft: Conning towers
    """
    main: Belt = field(default_factory=lambda: Belt.new(BeltType.MAIN))
    end: Belt = field(default_factory=lambda: Belt.new(BeltType.END))
    upper: Belt = field(default_factory=lambda: Belt.new(BeltType.UPPER))
    bulge: Belt = field(default_factory=lambda: Belt.new(BeltType.BULGE))
    bulkhead: Belt = field(default_factory=lambda: Belt.new(BeltType.BULKHEAD))

    incline: float = 0.0
    bh_beam: float = 0.0
    bh_kind: BulkheadType = BulkheadType.ADDITIONAL

    deck: Deck = field(default_factory=Deck)
    ct_fwd: CT = field(default_factory=CT)
    ct_aft: CT = field(default_factory=CT)

    def belts(self) -> Dict[BeltType, Belt]:
        return {
            BeltType.MAIN: self.main,
            BeltType.END: self.end,
            BeltType.UPPER: self.upper,
            BeltType.BULGE: self.bulge,
            BeltType.BULKHEAD: self.bulkhead,
        }

    # ==================== Weights ====================

    def wgt_belts(self, hull: "Hull") -> float:
        """Weight of all five belts (tons)."""
        lwl, cwp, b = hull.lwl(), hull.cwp(), hull.b
        return sum(belt.wgt(lwl, cwp, b) for belt in self.belts().values())

    def wgt_deck(self, hull: "Hull", wgt_mag: float, wgt_engine: float) -> float:
        """Deck armour weight (tons)."""
        return self.deck.wgt(hull, wgt_mag, wgt_engine)

    def wgt_ct(self, d: float) -> float:
        """Weight of both conning towers (tons)."""
        return self.ct_fwd.wgt(d) + self.ct_aft.wgt(d)

    def wgt(self, hull: "Hull", wgt_mag: float, wgt_engine: float) -> float:
        """
        Total armour weight (tons).

        Args:
            hull: Hull the armour is fitted to
            wgt_mag: Magazine weight (tons), used by box decks
            wgt_engine: Machinery weight (tons), used by box decks
        """
        return (
            self.wgt_belts(hull)
            + self.wgt_deck(hull, wgt_mag, wgt_engine)
            + self.wgt_ct(hull.d())
        )

    # ==================== Geometry ====================

    def belt_coverage(self, lwl: float) -> float:
        """Fraction of the vital length covered by the main belt."""
        if lwl == 0.0:
            return 0.0
        return self.main.len / (lwl * VITAL_LENGTH)

    def max_belt_hgt(self, t: float, dist: float) -> float:
        """
        Tallest belt that fits between the bottom of the draft and the deck.

        Args:
            t: Draft (ft)
            dist: Freeboard over the belt (ft)
        """
        return (t + dist) / abs(math.cos(math.radians(self.incline))) + 0.02

    # ==================== Serialization ====================

    def to_dict(self) -> Dict[str, Any]:
        data = {kind.value: belt.to_dict() for kind, belt in self.belts().items()}
        data.update({
            "incline": self.incline,
            "bh_beam": self.bh_beam,
            "bh_kind": self.bh_kind.value,
            "deck": self.deck.to_dict(),
            "ct_fwd": self.ct_fwd.to_dict(),
            "ct_aft": self.ct_aft.to_dict(),
        })
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Armor":
        belts = {
            kind.value: Belt.from_dict(data.get(kind.value, {}), kind)
            for kind in BeltType
        }
        return cls(
            incline=data.get("incline", 0.0),
            bh_beam=data.get("bh_beam", 0.0),
            bh_kind=BulkheadType(data.get("bh_kind", BulkheadType.ADDITIONAL.value)),
            deck=Deck.from_dict(data.get("deck", {})),
            ct_fwd=CT.from_dict(data.get("ct_fwd", {})),
            ct_aft=CT.from_dict(data.get("ct_aft", {})),
            **belts,
        )
