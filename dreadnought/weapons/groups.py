"""
Gun Groups

A battery's mounts are split into two groups, each with its own layout
across the mount and its own placement along the hull. Placement decides
how many mounts sit forward and which deck heights the guns stand on.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from dreadnought.hull.hull import Hull


class GunLayoutType(str, Enum):
    """Arrangement of the guns within one mount."""
    SIDE_BY_SIDE = "side_by_side"
    TWO_ROW = "two_row"
    SUPERPOSED = "superposed"

    def across(self, guns: float) -> float:
        """Number of guns abreast in a mount of `guns` guns."""
        if self == GunLayoutType.SIDE_BY_SIDE:
            return guns
        if self == GunLayoutType.TWO_ROW:
            return float(math.ceil(guns / 2.0))
        return 1.0

    @property
    def description(self) -> str:
        return {
            GunLayoutType.SIDE_BY_SIDE: "side by side",
            GunLayoutType.TWO_ROW: "in two rows",
            GunLayoutType.SUPERPOSED: "superposed",
        }[self]


class GunDistributionType(str, Enum):
    """Placement of a group's mounts along the hull."""
    CENTRE_EVEN = "centre_even"
    CENTRE_ENDS_EVEN = "centre_ends_even"
    CENTRE_ENDS_FWD = "centre_ends_fwd"
    CENTRE_ENDS_AFT = "centre_ends_aft"
    CENTRE_FWD_EVEN = "centre_fwd_even"
    CENTRE_AFT_EVEN = "centre_aft_even"
    CENTRE_ALL_FWD = "centre_all_fwd"
    CENTRE_ALL_AFT = "centre_all_aft"
    CENTRE_FDECK = "centre_fdeck"
    CENTRE_ADECK = "centre_adeck"
    SIDES_EVEN = "sides_even"
    SIDES_ENDS_EVEN = "sides_ends_even"
    SIDES_ENDS_FWD = "sides_ends_fwd"
    SIDES_ENDS_AFT = "sides_ends_aft"
    SIDES_FWD_EVEN = "sides_fwd_even"
    SIDES_AFT_EVEN = "sides_aft_even"
    SIDES_FDECK = "sides_fdeck"
    SIDES_ADECK = "sides_adeck"

    def mounts_fwd(self, n: int, hull: "Hull") -> int:
        """
        Number of the group's mounts placed forward of amidships.

        Args:
            n: Mounts in the group
            hull: Hull the group is mounted on

        Returns:
            Mounts forward, between 0 and n
        """
        D = GunDistributionType

        if self in (D.CENTRE_EVEN, D.CENTRE_ENDS_EVEN, D.SIDES_EVEN, D.SIDES_ENDS_EVEN):
            if hull.fc_len + hull.fd_len >= 0.5:
                return math.ceil(n / 2)
            return n // 2
        if self in (D.CENTRE_ENDS_FWD, D.SIDES_ENDS_FWD):
            return min(n, n // 2 + 1)
        if self in (D.CENTRE_ENDS_AFT, D.SIDES_ENDS_AFT):
            return n - min(n, n // 2 + 1)
        if self in (
            D.CENTRE_FWD_EVEN,
            D.CENTRE_ALL_FWD,
            D.CENTRE_FDECK,
            D.SIDES_FWD_EVEN,
            D.SIDES_FDECK,
        ):
            return n
        return 0

    def heights(self, hull: "Hull") -> Tuple[float, float]:
        """Deck heights (fwd, aft) the forward and aft mounts stand on (ft)."""
        D = GunDistributionType

        if self == D.CENTRE_EVEN:
            return hull.fwd_deck_hgt(), hull.aft_deck_hgt()
        if self in (D.CENTRE_ENDS_EVEN, D.CENTRE_ENDS_FWD, D.CENTRE_ENDS_AFT):
            return hull.fc(), hull.qd()
        if self == D.CENTRE_FWD_EVEN:
            return hull.fwd_deck_hgt(), 0.0
        if self == D.CENTRE_AFT_EVEN:
            return 0.0, hull.aft_deck_hgt()
        if self == D.CENTRE_ALL_FWD:
            return hull.fc(), 0.0
        if self == D.CENTRE_ALL_AFT:
            return 0.0, hull.qd()
        if self == D.CENTRE_FDECK:
            return hull.fd(), 0.0
        if self == D.CENTRE_ADECK:
            return 0.0, hull.ad()
        if self == D.SIDES_EVEN:
            return hull.fd_aft, hull.ad_fwd
        if self in (D.SIDES_ENDS_EVEN, D.SIDES_ENDS_FWD, D.SIDES_ENDS_AFT):
            return hull.fd(), hull.ad()
        if self == D.SIDES_FWD_EVEN:
            return hull.fwd_deck_hgt(), 0.0
        if self == D.SIDES_AFT_EVEN:
            return 0.0, hull.aft_deck_hgt()
        if self == D.SIDES_FDECK:
            return hull.fd_aft, 0.0
        return 0.0, hull.ad_fwd

    def free(self, n: int, hull: "Hull") -> float:
        """Average height of the group's mounts above the waterline (ft)."""
        if n == 0:
            return 0.0

        fwd = self.mounts_fwd(n, hull)
        fwd_hgt, aft_hgt = self.heights(hull)
        return (fwd * fwd_hgt + (n - fwd) * aft_hgt) / n

    @property
    def description(self) -> str:
        return _DISTRIBUTION_DESC[self]


_DISTRIBUTION_DESC = {
    GunDistributionType.CENTRE_EVEN: "on centreline, evenly spread",
    GunDistributionType.CENTRE_ENDS_EVEN: "on centreline ends, evenly spread",
    GunDistributionType.CENTRE_ENDS_FWD: "on centreline ends, majority forward",
    GunDistributionType.CENTRE_ENDS_AFT: "on centreline ends, majority aft",
    GunDistributionType.CENTRE_FWD_EVEN: "on centreline, forward evenly spread",
    GunDistributionType.CENTRE_AFT_EVEN: "on centreline, aft evenly spread",
    GunDistributionType.CENTRE_ALL_FWD: "on centreline, all forward",
    GunDistributionType.CENTRE_ALL_AFT: "on centreline, all aft",
    GunDistributionType.CENTRE_FDECK: "on centreline, forward deck",
    GunDistributionType.CENTRE_ADECK: "on centreline, aft deck",
    GunDistributionType.SIDES_EVEN: "on side, evenly spread",
    GunDistributionType.SIDES_ENDS_EVEN: "on side ends, evenly spread",
    GunDistributionType.SIDES_ENDS_FWD: "on side ends, majority forward",
    GunDistributionType.SIDES_ENDS_AFT: "on side ends, majority aft",
    GunDistributionType.SIDES_FWD_EVEN: "on side, forward evenly spread",
    GunDistributionType.SIDES_AFT_EVEN: "on side, aft evenly spread",
    GunDistributionType.SIDES_FDECK: "on side, forward deck",
    GunDistributionType.SIDES_ADECK: "on side, aft deck",
}


@dataclass
class SubBattery:
    """
    One group of a battery's mounts.

    Attributes:
        layout: Arrangement of the guns within each mount
        distribution: Placement along the hull
        above: Mounts superfiring above the deck
        on: Mounts on the deck
        below: Mounts below the deck
        two_mounts_up: Superfiring mounts are two levels up
        lower_deck: Mounts below the deck are on the lower deck
    """
    layout: GunLayoutType = GunLayoutType.SIDE_BY_SIDE
    distribution: GunDistributionType = GunDistributionType.CENTRE_EVEN
    above: int = 0
    on: int = 0
    below: int = 0
    two_mounts_up: bool = False
    lower_deck: bool = False

    def num_mounts(self) -> int:
        return self.above + self.on + self.below

    def super_(self, guns_per: float) -> float:
        """Net number of guns raised above (positive) or sunk below the deck."""
        up = self.above * (2 if self.two_mounts_up else 1)
        down = self.below * (2 if self.lower_deck else 1)
        return (up - down) * guns_per

    def mounts_fwd(self, hull: "Hull") -> int:
        return self.distribution.mounts_fwd(self.num_mounts(), hull)

    def free(self, hull: "Hull") -> float:
        return self.distribution.free(self.num_mounts(), hull)

    def to_dict(self) -> Dict[str, Any]:
        data = {k: getattr(self, k) for k in self.__dataclass_fields__}
        data["layout"] = self.layout.value
        data["distribution"] = self.distribution.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SubBattery":
        values = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        if "layout" in values:
            values["layout"] = GunLayoutType(values["layout"])
        if "distribution" in values:
            values["distribution"] = GunDistributionType(values["distribution"])
        return cls(**values)
