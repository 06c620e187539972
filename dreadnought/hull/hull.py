"""
dreadnought Hull Calculator

Hydrostatics and deck geometry of the hull.

The designer enters either waterline or overall length, and either block
coefficient or normal displacement; the other member of each pair is
derived. Every accessor is a pure function of the stored fields.

Freeboard is modelled as four deck segments (forecastle, foredeck,
afterdeck, quarterdeck), each with a height at its forward and aft end. The
afterdeck length fraction is whatever remains of the waterline length.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional
import math

from dreadnought.core.constants import FT3_PER_TON_SEA
from dreadnought.hull.enums import SternType, BowType, LengthKind, FormKind


# =============================================================================
# CONSTANTS
# =============================================================================

# Waterplane coefficients for boxy or very full hulls
BOXY_WP_COEFFS = (0.175, 0.875)

# Block coefficient at which a hull is treated as full-bodied
FULL_BLOCK = 0.75

# Below this block coefficient the waterplane tapers further
FINE_BLOCK = 0.4

# Height a broadside gun port sits below the deck
BROADSIDE_PORT_DROP = 6.0


# =============================================================================
# MUTUALLY EXCLUSIVE INPUTS
# =============================================================================

@dataclass(frozen=True)
class LengthSpec:
    """The one hull length the designer entered."""
    kind: LengthKind
    value: float

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "value": self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LengthSpec":
        return cls(kind=LengthKind(data["kind"]), value=float(data["value"]))


@dataclass(frozen=True)
class FormSpec:
    """Either block coefficient or normal displacement, as entered."""
    kind: FormKind
    value: float

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "value": self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FormSpec":
        return cls(kind=FormKind(data["kind"]), value=float(data["value"]))


# =============================================================================
# HULL
# =============================================================================

@dataclass
class Hull:
    """
    Hull dimensions and freeboard geometry.

    Attributes:
        length: Entered waterline or overall length (ft)
        form: Entered block coefficient or displacement (tons)
        b: Beam (ft)
        bb: Beam at the bulges (ft), at least b
        t: Draft at normal displacement (ft)
        boxy: Boxy hull form; maintained by the caller (fewer than 2 shafts)
        bow_type: Bow form
        ram_len: Ram length (ft), used only with a ram bow
        stern_type: Stern form
        stern_overhang: Stern overhang past the waterline (ft)
        bow_angle: Bow rake in degrees, positive angles forward
        fc_len, fd_len, qd_len: Forecastle, foredeck and quarterdeck length
            as fractions of the waterline length
        *_fwd, *_aft: Deck height at the forward and aft end of each segment
    """
    length: Optional[LengthSpec] = None
    form: Optional[FormSpec] = None

    b: float = 0.0
    bb: float = 0.0
    t: float = 0.0
    boxy: bool = False

    bow_type: BowType = BowType.NORMAL
    ram_len: float = 0.0
    stern_type: SternType = SternType.CRUISER
    stern_overhang: float = 0.0
    bow_angle: float = 0.0

    # Deck segments
    fc_len: float = 0.0
    fc_fwd: float = 0.0
    fc_aft: float = 0.0

    fd_len: float = 0.0
    fd_fwd: float = 0.0
    fd_aft: float = 0.0

    ad_fwd: float = 0.0
    ad_aft: float = 0.0

    qd_len: float = 0.0
    qd_fwd: float = 0.0
    qd_aft: float = 0.0

    # ==================== Length ====================

    def set_lwl(self, lwl: float) -> None:
        """Enter waterline length; overall length becomes derived."""
        self.length = LengthSpec(LengthKind.WATERLINE, lwl)

    def set_loa(self, loa: float) -> None:
        """Enter overall length; waterline length becomes derived."""
        self.length = LengthSpec(LengthKind.OVERALL, loa)

    def ram_length(self) -> float:
        """Ram length, zero unless the bow is a ram."""
        if self.bow_type == BowType.RAM:
            return self.ram_len
        return 0.0

    def stem_len(self) -> float:
        """Horizontal length of the raked stem above the waterline."""
        if abs(self.bow_angle) >= 90.0:
            return 0.0
        return self.fc_fwd * math.tan(math.radians(self.bow_angle))

    def _overhangs(self) -> float:
        bow = max(max(self.ram_length(), self.stem_len()), 0.0)
        return bow + max(self.stern_overhang, 0.0)

    def lwl(self) -> float:
        """Waterline length (ft)."""
        if self.length is None:
            return 0.0
        if self.length.kind == LengthKind.WATERLINE:
            return self.length.value
        return self.length.value - self._overhangs()

    def loa(self) -> float:
        """Overall length (ft)."""
        if self.length is None:
            return 0.0
        if self.length.kind == LengthKind.OVERALL:
            return self.length.value
        return self.length.value + self._overhangs()

    def leff(self) -> float:
        """Effective length for wave resistance (ft)."""
        return self.stern_type.leff(self.lwl(), self.bb, self.cs())

    def len2beam(self) -> float:
        """Length to beam ratio."""
        if self.bb == 0.0:
            return 0.0
        return self.lwl() / self.bb

    def vn(self) -> float:
        """'Natural speed' for the hull's length (kts)."""
        return math.sqrt(self.leff())

    # ==================== Displacement & Coefficients ====================

    def set_cb(self, cb: float) -> None:
        """Enter block coefficient; displacement becomes derived."""
        self.form = FormSpec(FormKind.BLOCK, cb)

    def set_d(self, d: float) -> None:
        """Enter normal displacement; block coefficient becomes derived."""
        self.form = FormSpec(FormKind.DISPLACEMENT, d)

    def cb(self) -> float:
        """Block coefficient at normal displacement."""
        if self.form is None:
            return 0.0
        if self.form.kind == FormKind.BLOCK:
            return self.form.value
        return self.cb_calc(self.form.value, self.t)

    def cb_calc(self, d: float, t: float) -> float:
        """
        Block coefficient for a displacement at a draft.

        Args:
            d: Displacement (tons)
            t: Draft (ft)

        Returns:
            Block coefficient clamped to [0, 1], 0 for a zero hull volume
        """
        volume = self.lwl() * self.bb * t
        if volume == 0.0:
            return 0.0
        return min(max(d * FT3_PER_TON_SEA / volume, 0.0), 1.0)

    def d(self) -> float:
        """Normal displacement (tons)."""
        if self.form is None:
            return 0.0
        if self.form.kind == FormKind.DISPLACEMENT:
            return self.form.value
        return self.d_calc(self.form.value)

    def d_calc(self, cb: float) -> float:
        """Displacement for a block coefficient at the normal draft."""
        return cb * self.lwl() * self.bb * self.t / FT3_PER_TON_SEA

    @staticmethod
    def cm(block: float) -> float:
        """Midships coefficient for a block coefficient."""
        if block == 0.0:
            return 1.006
        return 1.006 - 0.0056 * block ** -3.56

    @staticmethod
    def cp(block: float) -> float:
        """Prismatic coefficient for a block coefficient."""
        return block / Hull.cm(block)

    def cs(self) -> float:
        """Sharpness coefficient."""
        lwl = self.lwl()
        if lwl == 0.0:
            return 0.0
        return 0.4 * (self.bb / lwl * 6.0) ** (1.0 / 3.0) * math.sqrt(self.cb() / 0.52)

    def cwp(self) -> float:
        """Waterplane area coefficient."""
        cb = self.cb()

        if self.boxy or cb >= FULL_BLOCK:
            a, f = BOXY_WP_COEFFS
        else:
            a, f = self.stern_type.wp_calc()

        cwp = min(a + f * Hull.cp(max(cb, FINE_BLOCK)), 1.0)
        if cb < FINE_BLOCK:
            cwp -= 0.0281 - max(cb - 0.3, 0.0) ** 1.55

        return cwp

    def wp(self) -> float:
        """Waterplane area (sq ft)."""
        return self.cwp() * self.lwl() * self.b

    def ws(self) -> float:
        """Wetted surface (sq ft), Mumford's approximation."""
        if self.t == 0.0:
            return 0.0
        return self.lwl() * self.t * 1.7 + self.d() * FT3_PER_TON_SEA / self.t

    def t_calc(self, d: float) -> float:
        """Draft at a displacement other than normal."""
        wp = self.wp()
        if wp == 0.0:
            return self.t
        return self.t + (d - self.d()) / (wp / FT3_PER_TON_SEA)

    def ts(self) -> float:
        """Draft at the side."""
        return (Hull.cm(self.cb()) * 2.0 - 1.0) * self.t

    # ==================== Freeboard ====================

    def ad_len(self) -> float:
        """Afterdeck length fraction: the remainder of the waterline, never negative."""
        return max(1.0 - self.fc_len - self.fd_len - self.qd_len, 0.0)

    def fc(self) -> float:
        """Average forecastle height, weighted toward the forward end."""
        return self.fc_aft + (self.fc_fwd - self.fc_aft) * 0.4

    def fd(self) -> float:
        """Average foredeck height."""
        return self.fd_fwd + (self.fd_aft - self.fd_fwd) * 0.5

    def ad(self) -> float:
        """Average afterdeck height."""
        return self.ad_fwd + (self.ad_aft - self.ad_fwd) * 0.5

    def qd(self) -> float:
        """Average quarterdeck height."""
        return self.qd_fwd + (self.qd_aft - self.qd_fwd) * 0.5

    def freeboard(self) -> float:
        """Length-weighted average freeboard (ft)."""
        return (
            self.fc() * self.fc_len
            + self.fd() * self.fd_len
            + self.ad() * self.ad_len()
            + self.qd() * self.qd_len
        )

    def freeboard_dist(self) -> float:
        """Average freeboard over the foredeck and afterdeck (ft)."""
        ad_len = self.ad_len()
        span = self.fd_len + ad_len
        if span == 0.0:
            return 0.0
        return (self.fd() * self.fd_len + self.ad() * ad_len) / span

    def fwd_deck_hgt(self) -> float:
        """Average height over the forecastle and foredeck (ft)."""
        span = self.fc_len + self.fd_len
        if span == 0.0:
            return 0.0
        return (self.fc() * self.fc_len + self.fd() * self.fd_len) / span

    def aft_deck_hgt(self) -> float:
        """Average height over the afterdeck and quarterdeck (ft)."""
        ad_len = self.ad_len()
        span = ad_len + self.qd_len
        if span == 0.0:
            return 0.0
        return (self.ad() * ad_len + self.qd() * self.qd_len) / span

    def free_cap(self, broadside: bool) -> float:
        """
        Freeboard capped for disproportionately tall hulls.

        Args:
            broadside: Measure to broadside gun ports rather than the deck

        Returns:
            Effective freeboard (ft)
        """
        freeboard = self.freeboard()

        if self.b > 0.0 and freeboard > self.b / 3.0:
            return freeboard ** 2 * 3.0 / self.b
        if broadside:
            return freeboard - BROADSIDE_PORT_DROP
        return freeboard

    def is_wet_fwd(self) -> bool:
        """Whether the bow is low enough to ship water forward."""
        return self.fc_fwd < 1.1 * math.sqrt(max(self.lwl(), 0.0))

    # ==================== Descriptions ====================

    def freeboard_desc(self) -> str:
        """Describe the deck steps between segments."""
        if (self.fc_aft == self.fd_fwd
                and self.fd_aft == self.ad_fwd
                and self.ad_aft == self.qd_fwd):
            return "flush deck"

        parts = []

        if self.fc_aft > self.fd_fwd:
            parts.append("raised forecastle")
        elif self.fc_aft < self.fd_fwd:
            parts.append("low forecastle")

        if self.fd_aft > self.ad_fwd:
            parts.append("rise forward of midbreak")
        elif self.fd_aft < self.ad_fwd:
            parts.append("rise aft of midbreak")

        if self.ad_aft > self.qd_fwd:
            parts.append("low quarterdeck")
        elif self.ad_aft < self.qd_fwd:
            parts.append("raised quarterdeck")

        return ", ".join(parts)

    # ==================== Serialization ====================

    def to_dict(self) -> Dict[str, Any]:
        data = {k: getattr(self, k) for k in self.__dataclass_fields__}
        data["length"] = self.length.to_dict() if self.length else None
        data["form"] = self.form.to_dict() if self.form else None
        data["bow_type"] = self.bow_type.value
        data["stern_type"] = self.stern_type.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Hull":
        values = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        if values.get("length") is not None:
            values["length"] = LengthSpec.from_dict(values["length"])
        if values.get("form") is not None:
            values["form"] = FormSpec.from_dict(values["form"])
        if "bow_type" in values:
            values["bow_type"] = BowType(values["bow_type"])
        if "stern_type" in values:
            values["stern_type"] = SternType(values["stern_type"])
        return cls(**values)
