"""
dreadnought Machinery Calculator

Power, resistance, bunkerage and machinery weight.

The power curve separates wave-making and frictional resistance. Wave
resistance uses an effective length that moves from below the waterline
length at low speed to the full effective length above 25 knots. Hull
quantities are passed in by the caller; the engine holds no hull state.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict

from dreadnought.core.constants import DEFAULT_YEAR
from dreadnought.core.history import early_factor
from dreadnought.propulsion.plant import FuelType, BoilerType, DriveType


# =============================================================================
# CONSTANTS
# =============================================================================

# Reference range (nm) the bunker formula is normalised to
RANGE = 7000.0

# Speeds bounding the effective-length interpolation (kts)
LOW_SPEED = 15.0
HIGH_SPEED = 25.0

# Converts the resistance terms to horsepower
HP_DIVISOR = 184.1666667

# Bunker carried at maximum displacement relative to normal
BUNKER_MAX_RATIO = 1.8


@dataclass
class Engine:
    """
    Propulsion plant and speed/endurance requirements.

    Attributes:
        year: Year the machinery was built
        fuel: Fuels burned
        boiler: Steam engine types present
        drive: Transmission to the shafts
        vmax: Maximum speed (kts)
        vcruise: Cruising speed (kts)
        range: Range at cruising speed (nm)
        shafts: Number of propeller shafts
        pct_coal: Fraction of the bunker that is coal
    """
    year: int = DEFAULT_YEAR
    fuel: FuelType = field(default_factory=lambda: FuelType(0))
    boiler: BoilerType = field(default_factory=lambda: BoilerType(0))
    drive: DriveType = field(default_factory=lambda: DriveType(0))
    vmax: float = 0.0
    vcruise: float = 0.0
    range: int = 0
    shafts: int = 0
    pct_coal: float = 0.0

    # ==================== Power ====================

    def hp(self, v: float, d: float, lwl: float, leff: float, cs: float, ws: float) -> float:
        """
        Horsepower required for a speed.

        Args:
            v: Speed (kts)
            d: Displacement (tons)
            lwl: Waterline length (ft)
            leff: Effective length (ft)
            cs: Sharpness coefficient
            ws: Wetted surface (sq ft)

        Returns:
            Horsepower, 0 when the resistance length is 0
        """
        if v <= LOW_SPEED:
            len_hp = lwl - (leff - lwl)
        elif v >= HIGH_SPEED:
            len_hp = leff
        else:
            len_hp = (leff - lwl) * ((v - 20.0) / 5.0) + lwl

        if len_hp == 0.0:
            return 0.0

        hp = (d ** (2.0 / 3.0) / len_hp * cs * v ** 4 + 0.01 * ws * v ** 1.83) * v / HP_DIVISOR

        return hp * early_factor(self.year)

    def hp_max(self, d: float, lwl: float, leff: float, cs: float, ws: float) -> float:
        """Horsepower at maximum speed."""
        return self.hp(self.vmax, d, lwl, leff, cs, ws)

    def hp_cruise(self, d: float, lwl: float, leff: float, cs: float, ws: float) -> float:
        """Horsepower at cruising speed (never above maximum speed)."""
        return self.hp(min(self.vcruise, self.vmax), d, lwl, leff, cs, ws)

    def hp_type(self) -> str:
        return self.boiler.hp_type()

    # ==================== Resistance ====================

    @staticmethod
    def rf(v: float, ws: float) -> float:
        """Frictional resistance."""
        return 0.01 * ws * v ** 1.83

    def rf_max(self, ws: float) -> float:
        return Engine.rf(self.vmax, ws)

    def rf_cruise(self, ws: float) -> float:
        return Engine.rf(self.vcruise, ws)

    @staticmethod
    def rw(v: float, d: float, lwl: float, cs: float) -> float:
        """Wave-making resistance."""
        if lwl == 0.0:
            return 0.0
        return d ** (2.0 / 3.0) / lwl * cs * v ** 4

    def rw_max(self, d: float, lwl: float, cs: float) -> float:
        return Engine.rw(self.vmax, d, lwl, cs)

    def rw_cruise(self, d: float, lwl: float, cs: float) -> float:
        return Engine.rw(self.vcruise, d, lwl, cs)

    @staticmethod
    def pw(rw: float, rf: float) -> float:
        """Share of resistance that is wave-making."""
        total = rw + rf
        if total == 0.0:
            return 0.0
        return rw / total

    def pw_max(self, d: float, lwl: float, cs: float, ws: float) -> float:
        return Engine.pw(self.rw_max(d, lwl, cs), self.rf_max(ws))

    def pw_cruise(self, d: float, lwl: float, cs: float, ws: float) -> float:
        return Engine.pw(self.rw_cruise(d, lwl, cs), self.rf_cruise(ws))

    # ==================== Bunkerage ====================

    def bunker(self, d: float, lwl: float, leff: float, cs: float, ws: float) -> float:
        """
        Bunker weight at normal displacement (tons).

        Returns 0 without a cruising speed. The fuel term drops out when
        cruising power or the machinery's fuel economy is 0.
        """
        if self.vcruise == 0.0:
            return 0.0

        hp_cruise = self.hp_cruise(d, lwl, leff, cs, ws)
        factor = self.boiler.bunker_factor(self.year)

        fuel = 0.0
        if hp_cruise != 0.0 and factor != 0.0:
            fuel = self.range / (1.0 + 0.4 * (1.0 - self.pct_coal))
            fuel /= factor
            fuel /= 1.8 / hp_cruise * RANGE * self.vcruise * 0.1

        return fuel + d * 0.005

    def bunker_max(self, d: float, lwl: float, leff: float, cs: float, ws: float) -> float:
        """Bunker weight at maximum displacement (tons)."""
        return self.bunker(d, lwl, leff, cs, ws) * BUNKER_MAX_RATIO

    # ==================== Machinery Weight ====================

    def num_engines(self) -> int:
        return self.boiler.num_engines()

    def d_engine(self, d: float, lwl: float, leff: float, cs: float, ws: float) -> float:
        """
        Machinery weight (tons).

        Maximum power divided by the plant's power-to-weight factor, shared
        across engine units and penalised for coal firing and pre-1890
        construction.
        """
        factor = self.boiler.d_engine_factor(self.year, self.fuel)
        num = self.num_engines()
        if factor == 0.0 or num == 0:
            return 0.0

        early = early_factor(self.year)
        return self.hp_max(d, lwl, leff, cs, ws) / (factor / num * (1.1 - self.pct_coal / 10.0)) / early

    # ==================== Serialization ====================

    def to_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "fuel": self.fuel.names(),
            "boiler": self.boiler.names(),
            "drive": self.drive.names(),
            "vmax": self.vmax,
            "vcruise": self.vcruise,
            "range": self.range,
            "shafts": self.shafts,
            "pct_coal": self.pct_coal,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Engine":
        return cls(
            year=data.get("year", DEFAULT_YEAR),
            fuel=FuelType.from_names(data.get("fuel", [])),
            boiler=BoilerType.from_names(data.get("boiler", [])),
            drive=DriveType.from_names(data.get("drive", [])),
            vmax=data.get("vmax", 0.0),
            vcruise=data.get("vcruise", 0.0),
            range=data.get("range", 0),
            shafts=data.get("shafts", 0),
            pct_coal=data.get("pct_coal", 0.0),
        )
