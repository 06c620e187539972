"""
Gun and Mount Types

Coefficient tables for the gun types and mount types. Gun types scale the
mount weight through a small-mount and a large-mount multiplier; mount
types set the mount weight, gunhouse height and how much of the gunhouse
face, back and barbette is armoured.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, NamedTuple


class GunType(str, Enum):
    """Gun construction and role."""
    MUZZLE_LOADING = "muzzle_loading"
    BREECH_LOADING = "breech_loading"
    QUICK_FIRING = "quick_firing"
    ANTI_AIR = "anti_air"
    DUAL_PURPOSE = "dual_purpose"
    RAPID_FIRE = "rapid_fire"
    MACHINE_GUN = "machine_gun"

    @property
    def wgt_sm(self) -> float:
        """Mount weight multiplier for light mounts."""
        return _GUN_COEFFS[self][0]

    @property
    def wgt_lg(self) -> float:
        """Mount weight multiplier for heavy mounts."""
        return _GUN_COEFFS[self][1]

    @property
    def description(self) -> str:
        return _GUN_COEFFS[self][2]


_GUN_COEFFS = {
    GunType.MUZZLE_LOADING: (1.0, 0.85, "Muzzle loading"),
    GunType.BREECH_LOADING: (1.0, 1.0, "Breech loading"),
    GunType.QUICK_FIRING: (1.1, 1.0, "Quick firing"),
    GunType.ANTI_AIR: (1.4, 1.2, "Anti-air"),
    GunType.DUAL_PURPOSE: (1.6, 1.3, "Dual purpose"),
    GunType.RAPID_FIRE: (1.2, 1.1, "Rapid fire"),
    GunType.MACHINE_GUN: (1.0, 1.0, "Machine gun"),
}


class _MountCoeffs(NamedTuple):
    wgt_adj: float
    gunhouse: float
    face: float
    back: float
    barb: float
    barb_cap: int
    description: str


class MountKind(str, Enum):
    """How the guns are mounted."""
    BROADSIDE = "broadside"
    COLES_TURRET = "coles_turret"
    OPEN_BARBETTE = "open_barbette"
    CLOSED_BARBETTE = "closed_barbette"
    DECK_AND_HOIST = "deck_and_hoist"
    DECK = "deck"
    CASEMATE = "casemate"

    @property
    def wgt_adj(self) -> float:
        """Mount weight relative to the gun weight."""
        return _MOUNT_COEFFS[self].wgt_adj

    @property
    def gunhouse(self) -> float:
        """Gunhouse height relative to a full turret."""
        return _MOUNT_COEFFS[self].gunhouse

    @property
    def face(self) -> float:
        return _MOUNT_COEFFS[self].face

    @property
    def back(self) -> float:
        return _MOUNT_COEFFS[self].back

    @property
    def barb(self) -> float:
        return _MOUNT_COEFFS[self].barb

    @property
    def barb_cap(self) -> int:
        """Most guns per mount the barbette is sized for."""
        return _MOUNT_COEFFS[self].barb_cap

    @property
    def description(self) -> str:
        return _MOUNT_COEFFS[self].description


_MOUNT_COEFFS = {
    MountKind.BROADSIDE: _MountCoeffs(0.83, 1.0, 0.0, 0.0, 0.0, 4, "broadside"),
    MountKind.COLES_TURRET: _MountCoeffs(3.5, 1.0, 0.5, 0.5, 0.0, 4, "Coles/Ericsson turrets"),
    MountKind.OPEN_BARBETTE: _MountCoeffs(1.0, 0.5, 0.1, 0.0, 1.0, 4, "open barbettes"),
    MountKind.CLOSED_BARBETTE: _MountCoeffs(3.0, 1.0, 0.35, 0.65, 1.0, 5, "turrets"),
    MountKind.DECK_AND_HOIST: _MountCoeffs(0.55, 0.6, 0.25, 0.1, 0.5, 5, "deck and hoist mounts"),
    MountKind.DECK: _MountCoeffs(0.5, 0.6, 0.25, 0.0, 0.0, 5, "deck mounts"),
    MountKind.CASEMATE: _MountCoeffs(0.75, 0.75, 0.5, 0.0, 0.0, 4, "casemates"),
}


@dataclass
class MountType:
    """
    Mount fitted to every gun of a battery.

    Attributes:
        num: Guns per mount
        kind: Mount type
        armor_face: Gunhouse face armour (in)
        armor_back: Gunhouse side and back armour (in)
        armor_barb: Barbette armour (in)
    """
    num: int = 1
    kind: MountKind = MountKind.BROADSIDE
    armor_face: float = 0.0
    armor_back: float = 0.0
    armor_barb: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "num": self.num,
            "kind": self.kind.value,
            "armor_face": self.armor_face,
            "armor_back": self.armor_back,
            "armor_barb": self.armor_barb,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MountType":
        values = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        if "kind" in values:
            values["kind"] = MountKind(values["kind"])
        return cls(**values)
