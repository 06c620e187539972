"""
dreadnought Weapons Module

Gun batteries with their mounts and gunhouse armour, torpedoes, mines and
anti-submarine weapons.
"""

from .guns import (
    GunType,
    MountKind,
    MountType,
)

from .groups import (
    GunLayoutType,
    GunDistributionType,
    SubBattery,
)

from .battery import Battery

from .torpedoes import (
    Torpedoes,
    TorpedoType,
)

from .mines import (
    Mines,
    MineType,
    ASW,
    ASWType,
)

__all__ = [
    # Guns
    "Battery",
    "GunType",
    "MountKind",
    "MountType",
    "GunLayoutType",
    "GunDistributionType",
    "SubBattery",
    # Torpedoes
    "Torpedoes",
    "TorpedoType",
    # Mines and ASW
    "Mines",
    "MineType",
    "ASW",
    "ASWType",
]
