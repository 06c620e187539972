"""
Torpedo Armament

Torpedo and launcher weight, plus the hull volume and deck area the
launchers take up.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from dreadnought.core.constants import DEFAULT_YEAR

# Year at which the torpedo size term vanishes, and its scale
TORPEDO_YEAR_ZERO = 1932
TORPEDO_SIZE_SCALE = 937.0

# Launcher weight per torpedo per year after 1890 (tons)
TORPEDO_MOUNT_RATE = 0.004
TORPEDO_MOUNT_BASE_YEAR = 1890


class TorpedoType(str, Enum):
    """Torpedo launcher arrangement."""
    FIXED_TUBES = "fixed_tubes"
    DECK_SIDE_TUBES = "deck_side_tubes"
    CENTER_TUBES = "center_tubes"
    DECK_RELOADS = "deck_reloads"
    BOW_TUBES = "bow_tubes"
    STERN_TUBES = "stern_tubes"
    BOW_AND_STERN_TUBES = "bow_and_stern_tubes"
    SUBMERGED_SIDE_TUBES = "submerged_side_tubes"
    SUBMERGED_RELOADS = "submerged_reloads"

    @property
    def mount_factor(self) -> float:
        """Launcher weight relative to the torpedoes carried."""
        if self in (TorpedoType.FIXED_TUBES, TorpedoType.DECK_RELOADS, TorpedoType.SUBMERGED_RELOADS):
            return 0.25
        return 1.0

    @property
    def is_submerged(self) -> bool:
        return self in (
            TorpedoType.BOW_TUBES,
            TorpedoType.STERN_TUBES,
            TorpedoType.BOW_AND_STERN_TUBES,
            TorpedoType.SUBMERGED_SIDE_TUBES,
            TorpedoType.SUBMERGED_RELOADS,
        )

    @property
    def description(self) -> str:
        return _TORPEDO_DESC[self]


_TORPEDO_DESC = {
    TorpedoType.FIXED_TUBES: "in deck mounted fixed tubes",
    TorpedoType.DECK_SIDE_TUBES: "in deck mounted side rotating tubes",
    TorpedoType.CENTER_TUBES: "in deck mounted centre rotating tubes",
    TorpedoType.DECK_RELOADS: "in deck mounted reloads",
    TorpedoType.BOW_TUBES: "in bow tubes below water",
    TorpedoType.STERN_TUBES: "in stern tubes below water",
    TorpedoType.BOW_AND_STERN_TUBES: "in bow and stern tubes below water",
    TorpedoType.SUBMERGED_SIDE_TUBES: "in submerged side tubes",
    TorpedoType.SUBMERGED_RELOADS: "in below water reloads",
}


@dataclass
class Torpedoes:
    """
    One torpedo installation.

    Attributes:
        year: Year of the torpedo model
        num: Number of torpedoes
        mounts: Number of launchers
        diam: Torpedo diameter (in)
        len: Torpedo length (ft)
        kind: Launcher arrangement
    """
    year: int = DEFAULT_YEAR
    num: int = 0
    mounts: int = 0
    diam: float = 0.0
    len: float = 0.0
    kind: TorpedoType = TorpedoType.FIXED_TUBES

    def wgt_weaps(self) -> float:
        """
        Weight of the torpedoes (tons).

        Falls with the year of the model and is 0.0 from 1932 on.
        """
        denom = (TORPEDO_YEAR_ZERO - self.year) * TORPEDO_SIZE_SCALE
        if denom <= 0.0:
            return 0.0
        return math.pi * self.diam ** 2 * self.len / denom

    def wgt_mounts(self) -> float:
        """Weight of the launchers (tons), growing with the year of the model."""
        return (
            TORPEDO_MOUNT_RATE * (self.year - TORPEDO_MOUNT_BASE_YEAR) * self.num * self.kind.mount_factor
        )

    def wgt(self) -> float:
        return self.wgt_weaps() + self.wgt_mounts()

    def _across(self) -> float:
        """Width of one launcher (ft)."""
        per_mount = self.num // self.mounts
        return per_mount * self.diam / 12.0 + (per_mount - 1) * 0.5

    def deck_space(self, b: float) -> float:
        """
        Deck area taken by the launchers (sq ft).

        Args:
            b: Beam (ft), swept by centreline launchers
        """
        kind = self.kind

        if kind == TorpedoType.FIXED_TUBES:
            return self.len * self.diam / 12.0 * self.num
        if kind == TorpedoType.DECK_RELOADS:
            return self.len * 1.5 * (self.diam + 6.0) / 12.0 * self.num
        if kind not in (TorpedoType.DECK_SIDE_TUBES, TorpedoType.CENTER_TUBES):
            return 0.0

        if self.mounts == 0:
            return 0.0

        w = self._across()
        sweep = math.sqrt(self.len ** 2 + w ** 2)
        if kind == TorpedoType.DECK_SIDE_TUBES:
            return (sweep * 0.5) ** 2 * math.pi + w * 0.5 * self.len
        return sweep * b * self.mounts

    def hull_space(self) -> float:
        """Hull volume taken by below-water tubes and reloads (cu ft)."""
        if self.kind == TorpedoType.SUBMERGED_RELOADS:
            return self.len * 1.5 * (self.diam * 1.5 / 12.0) ** 2 * self.num
        if self.kind.is_submerged:
            return self.len * 2.5 * (self.diam * 2.75 / 12.0) ** 2 * self.num
        return 0.0

    def to_dict(self) -> Dict[str, Any]:
        data = {k: getattr(self, k) for k in self.__dataclass_fields__}
        data["kind"] = self.kind.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Torpedoes":
        values = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        if "kind" in values:
            values["kind"] = TorpedoType(values["kind"])
        return cls(**values)
