"""
Mines and Anti-Submarine Weapons

Both are counted as a number of weapons ready plus reloads, each of a
given weight; the launcher weight is a fixed share of the weapons.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from dreadnought.core.constants import DEFAULT_YEAR, POUND2TON


class MineType(str, Enum):
    """How mines are laid."""
    STERN_RAILS = "stern_rails"
    BOW_TUBES = "bow_tubes"
    STERN_TUBES = "stern_tubes"
    SIDE_TUBES = "side_tubes"

    @property
    def mount_factor(self) -> float:
        return 0.25 if self == MineType.STERN_RAILS else 1.0

    @property
    def description(self) -> str:
        return {
            MineType.STERN_RAILS: "in Stern racks/rails",
            MineType.BOW_TUBES: "in Bow tubes",
            MineType.STERN_TUBES: "in Stern tubes",
            MineType.SIDE_TUBES: "in Side tubes",
        }[self]


class ASWType(str, Enum):
    """Anti-submarine weapon launcher."""
    STERN_RACKS = "stern_racks"
    THROWERS = "throwers"
    HEDGEHOGS = "hedgehogs"
    SQUID_MORTARS = "squid_mortars"

    @property
    def mount_factor(self) -> float:
        return _ASW_FACTORS[self]

    @property
    def description(self) -> str:
        return {
            ASWType.STERN_RACKS: "Stern depth charge racks",
            ASWType.THROWERS: "Depth charge throwers",
            ASWType.HEDGEHOGS: "Ahead throwing AS Mortars",
            ASWType.SQUID_MORTARS: "Trainable AS Mortars",
        }[self]


_ASW_FACTORS = {
    ASWType.STERN_RACKS: 0.25,
    ASWType.THROWERS: 0.5,
    ASWType.HEDGEHOGS: 0.5,
    ASWType.SQUID_MORTARS: 10.0,
}


@dataclass
class _Stowed(ABC):
    """
    Weapons carried ready plus reloads.

    Attributes:
        year: Year of the weapon model
        num: Weapons ready to launch
        reload: Reloads carried
        wgt: Weight of one weapon (lbs)
    """
    year: int = DEFAULT_YEAR
    num: int = 0
    reload: int = 0
    wgt: float = 0.0

    @abstractmethod
    def _mount_factor(self) -> float:
        """Launcher weight relative to the weapons carried."""

    def wgt_weaps(self) -> float:
        """Weight of the weapons and reloads (tons)."""
        return (self.num + self.reload) * self.wgt / POUND2TON

    def wgt_mounts(self) -> float:
        return self.wgt_weaps() * self._mount_factor()

    def total_wgt(self) -> float:
        return self.wgt_weaps() + self.wgt_mounts()


@dataclass
class Mines(_Stowed):
    kind: MineType = MineType.STERN_RAILS

    def _mount_factor(self) -> float:
        return self.kind.mount_factor

    def to_dict(self) -> Dict[str, Any]:
        data = {k: getattr(self, k) for k in self.__dataclass_fields__}
        data["kind"] = self.kind.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Mines":
        values = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        if "kind" in values:
            values["kind"] = MineType(values["kind"])
        return cls(**values)


@dataclass
class ASW(_Stowed):
    kind: ASWType = ASWType.STERN_RACKS

    def _mount_factor(self) -> float:
        return self.kind.mount_factor

    def to_dict(self) -> Dict[str, Any]:
        data = {k: getattr(self, k) for k in self.__dataclass_fields__}
        data["kind"] = self.kind.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ASW":
        values = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        if "kind" in values:
            values["kind"] = ASWType(values["kind"])
        return cls(**values)
