"""
dreadnought Gun Battery Calculator

Gun, mount, gunhouse armour and magazine weights for one battery of
identical guns.

Shell weight is estimated from calibre, barrel length and year unless the
designer fixes it. Gunhouse and barbette armour is sized from the mount
diameter, which depends on how many guns sit abreast in each mount.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from dreadnought.core.constants import DEFAULT_YEAR, INCH, POUND2TON
from dreadnought.core.history import date_factor
from dreadnought.weapons.guns import GunType, MountType
from dreadnought.weapons.groups import GunLayoutType, SubBattery

if TYPE_CHECKING:
    from dreadnought.hull.hull import Hull


# =============================================================================
# CONSTANTS
# =============================================================================

# Barrel length (calibres) the shell estimate is centred on
BASELINE_LEN = 45.0

# Empirical shell and gun weight fits
SHELL_DIVISOR = 1.9830943211886
GUN_LEN_DIVISOR = 812.289434917877
GUN_CAL_EXPONENT = 2.3297949327695

# Guns heavier than this calibre (in) get a mount weight reduction
HEAVY_CAL = 10.0
HEAVY_CAL_REDUCTION = 0.035

# Mount weight adjustment below which the small-mount multiplier applies
LIGHT_MOUNT_ADJ = 0.6

# Lowest gunhouse height (ft)
MIN_HOUSE_HGT = 7.5

NUM_GROUPS = 2


def _default_groups() -> List[SubBattery]:
    return [SubBattery() for _ in range(NUM_GROUPS)]


@dataclass
class Battery:
    """
    A battery of identical guns.

    Attributes:
        num: Number of guns
        cal: Calibre (in)
        len: Barrel length (calibres)
        year: Year of the gun model
        kind: Gun type
        shells: Rounds stowed per gun
        shell_wgt: Fixed shell weight (lbs), None to estimate; read through
            shell_wgt() and changed with set_shell_wgt()/clear_shell_wgt()
        mount: Mount fitted to every gun
        groups: The two mount groups
    """
    num: int = 0
    cal: float = 0.0
    len: int = 0
    year: int = DEFAULT_YEAR
    kind: GunType = GunType.BREECH_LOADING
    shells: int = 0
    _shell_wgt: Optional[float] = field(default=None, repr=False)
    mount: MountType = field(default_factory=MountType)
    groups: List[SubBattery] = field(default_factory=_default_groups)

    # ==================== Shells ====================

    def set_shell_wgt(self, wgt: float) -> None:
        self._shell_wgt = wgt

    def clear_shell_wgt(self) -> None:
        self._shell_wgt = None

    def shell_wgt_est(self) -> float:
        """Estimated shell weight (lbs)."""
        ratio = math.sqrt(abs(BASELINE_LEN - self.len)) / BASELINE_LEN
        if self.len > BASELINE_LEN:
            length_adj = 1.0 + ratio
        else:
            length_adj = 1.0 - ratio

        return self.cal ** 3 / SHELL_DIVISOR * date_factor(self.year) * length_adj

    def shell_wgt(self) -> float:
        """Shell weight (lbs): the fixed value if set, else the estimate."""
        if self._shell_wgt is not None:
            return self._shell_wgt
        return self.shell_wgt_est()

    # ==================== Guns and Mounts ====================

    def gun_wgt(self) -> float:
        """Weight of all guns of the battery (tons)."""
        if self.cal <= 0.0:
            return 0.0

        per_gun = self.len / GUN_LEN_DIVISOR * (1.0 + (1.0 / self.cal) ** GUN_CAL_EXPONENT)
        return self.shell_wgt_est() * per_gun * self.num

    def mount_wgt(self) -> float:
        """
        Weight of all mounts of the battery, excluding armour (tons).

        Guns of 1 in and under are hand-worked; the gun weight stands in
        for the mount.
        """
        gun_wgt = self.gun_wgt()
        if self.cal <= 1.0:
            return gun_wgt

        wgt_adj = self.mount.kind.wgt_adj
        mult = self.kind.wgt_sm if wgt_adj < LIGHT_MOUNT_ADJ else self.kind.wgt_lg

        wgt = gun_wgt * (wgt_adj * mult + 1.0 / self.cal)
        if self.cal > HEAVY_CAL:
            wgt -= gun_wgt * (self.cal - HEAVY_CAL) * HEAVY_CAL_REDUCTION

        return max(wgt, 0.0)

    # ==================== Mount Geometry ====================

    def diameter_calc(self, layout: GunLayoutType, guns: float) -> float:
        """
        Outside diameter of one mount (ft).

        Args:
            layout: Arrangement of guns in the mount
            guns: Guns per mount
        """
        if guns <= 0 or self.cal == 0.0:
            return 0.0
        return self.cal * (0.875 * layout.across(guns) + 0.625) + 6.0

    def house_hgt(self) -> float:
        """Gunhouse height (ft)."""
        return max(MIN_HOUSE_HGT, 0.625 * self.cal * self.mount.kind.gunhouse)

    def num_mounts(self) -> int:
        return sum(group.num_mounts() for group in self.groups)

    def super_(self) -> float:
        """Net superfiring guns over both groups."""
        return sum(group.super_(self.mount.num) for group in self.groups)

    def mounts_fwd(self, hull: "Hull") -> int:
        return sum(group.mounts_fwd(hull) for group in self.groups)

    def free(self, hull: "Hull") -> float:
        """Mount-weighted average height of the guns above the waterline (ft)."""
        num_mounts = self.num_mounts()
        if num_mounts == 0:
            return 0.0
        return sum(group.free(hull) * group.num_mounts() for group in self.groups) / num_mounts

    # ==================== Armour ====================

    def _house_area(self, guns: float) -> float:
        return sum(
            self.diameter_calc(group.layout, guns) * group.num_mounts()
            for group in self.groups
        ) * self.house_hgt()

    def armor_face_wgt(self) -> float:
        """Gunhouse face armour weight (tons)."""
        return self.mount.kind.face * self._house_area(self.mount.num) * self.mount.armor_face * INCH

    def armor_back_wgt(self) -> float:
        """Gunhouse side and back armour weight (tons)."""
        return self.mount.kind.back * self._house_area(self.mount.num) * self.mount.armor_back * INCH

    def armor_barb_wgt(self) -> float:
        """
        Barbette armour weight (tons).

        Barbettes are sized for at most the mount type's cap of guns, and
        deepen with every superfiring gun.
        """
        num_mounts = self.num_mounts()
        if num_mounts == 0 or self.num == 0:
            return 0.0

        kind = self.mount.kind
        guns = min(self.num / num_mounts, kind.barb_cap)
        super_adj = 1.0 + max(self.super_(), 0.0) / self.num

        return kind.barb * self._house_area(guns) * self.mount.armor_barb * INCH * super_adj

    def armor_wgt(self) -> float:
        return self.armor_face_wgt() + self.armor_back_wgt() + self.armor_barb_wgt()

    # ==================== Totals ====================

    def wgt_borne(self) -> float:
        """Guns, mounts and gunhouse armour (tons)."""
        return self.gun_wgt() + self.mount_wgt() + self.armor_wgt()

    def mag_wgt(self) -> float:
        """Magazine weight (tons)."""
        return self.num * self.shells * self.shell_wgt() / POUND2TON

    def broadside_wgt(self) -> float:
        """Weight of one salvo (lbs)."""
        return self.num * self.shell_wgt()

    # ==================== Serialization ====================

    def to_dict(self) -> Dict[str, Any]:
        return {
            "num": self.num,
            "cal": self.cal,
            "len": self.len,
            "year": self.year,
            "kind": self.kind.value,
            "shells": self.shells,
            "shell_wgt": self._shell_wgt,
            "mount": self.mount.to_dict(),
            "groups": [group.to_dict() for group in self.groups],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Battery":
        groups = [SubBattery.from_dict(g) for g in data.get("groups", [])]
        groups += [SubBattery() for _ in range(NUM_GROUPS - len(groups))]

        return cls(
            num=data.get("num", 0),
            cal=data.get("cal", 0.0),
            len=data.get("len", 0),
            year=data.get("year", DEFAULT_YEAR),
            kind=GunType(data.get("kind", GunType.BREECH_LOADING.value)),
            shells=data.get("shells", 0),
            _shell_wgt=data.get("shell_wgt"),
            mount=MountType.from_dict(data.get("mount", {})),
            groups=groups[:NUM_GROUPS],
        )
