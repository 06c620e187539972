"""
dreadnought Ship Aggregate

The complete design and every figure derived from it.

The ship owns its hull, armour, machinery, armament and miscellaneous
weights, and threads hull quantities into the component calculators.
Derived figures are single-pass formulas over the current normal
displacement; nothing is iterated to convergence and nothing is cached.

Every division is guarded: a degenerate design gives 0.0, never an
exception or NaN.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple
import logging
import math

from dreadnought.core.constants import (
    COST_PER_TON_LB,
    DEFAULT_TRIM,
    DEFAULT_YEAR,
    DOLLARS_PER_POUND_STERLING,
    FT3_PER_TON_SEA,
    NUM_ASW_MOUNTS,
    NUM_BATTERIES,
    NUM_TORPEDO_MOUNTS,
)
from dreadnought.core.history import year_adjustment
from dreadnought.core.units import Units
from dreadnought.hull.hull import Hull
from dreadnought.armor.armor import Armor
from dreadnought.propulsion.engine import Engine
from dreadnought.weapons.battery import Battery
from dreadnought.weapons.torpedoes import Torpedoes
from dreadnought.weapons.mines import Mines, ASW
from dreadnought.weight.misc import MiscWgts

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Share of normal displacement that is stores and crew
LOAD_FRACTION = 0.02

# Bunker added between normal and full load, relative to the normal bunker
FULL_LOAD_BUNKER = 0.8

# Stability index above which the ship is stable
STABLE = 1.0

# Steadiness at which seakeeping reaches its full seaboat value
STEADY = 50.0


def _default_batteries() -> List[Battery]:
    return [Battery() for _ in range(NUM_BATTERIES)]


def _default_torps() -> List[Torpedoes]:
    return [Torpedoes() for _ in range(NUM_TORPEDO_MOUNTS)]


def _default_asw() -> List[ASW]:
    return [ASW() for _ in range(NUM_ASW_MOUNTS)]


@dataclass
class Ship:
    """
    A complete warship design.

    Attributes:
        name: Ship name
        country: Country of origin
        kind: Ship type (battleship, cruiser, ...)
        year: Year laid down
        trim: Design trim, 0 (stable) to 100 (steady)
        units: Units the design is presented in
        hull, armor, engine: Main components
        batteries: Gun batteries (main, secondary, ...)
        torps: Torpedo installations
        mines: Mine installation
        asw: Anti-submarine installations
        wgts: Miscellaneous weights
    """
    name: str = "NAME"
    country: str = "COUNTRY"
    kind: str = "TYPE"
    year: int = DEFAULT_YEAR
    trim: int = DEFAULT_TRIM
    units: Units = Units.IMPERIAL

    hull: Hull = field(default_factory=Hull)
    armor: Armor = field(default_factory=Armor)
    engine: Engine = field(default_factory=Engine)
    batteries: List[Battery] = field(default_factory=_default_batteries)
    torps: List[Torpedoes] = field(default_factory=_default_torps)
    mines: Mines = field(default_factory=Mines)
    asw: List[ASW] = field(default_factory=_default_asw)
    wgts: MiscWgts = field(default_factory=MiscWgts)

    # ==================== Hull Context ====================

    def _resistance_args(self) -> Tuple[float, float, float, float, float]:
        """(d, lwl, leff, cs, ws) as taken by the engine calculators."""
        hull = self.hull
        return hull.d(), hull.lwl(), hull.leff(), hull.cs(), hull.ws()

    def hp_max(self) -> float:
        return self.engine.hp_max(*self._resistance_args())

    def hp_cruise(self) -> float:
        return self.engine.hp_cruise(*self._resistance_args())

    def pw_max(self) -> float:
        hull = self.hull
        return self.engine.pw_max(hull.d(), hull.lwl(), hull.cs(), hull.ws())

    # ==================== Weights ====================

    def wgt_guns(self) -> float:
        return sum(battery.gun_wgt() for battery in self.batteries)

    def wgt_gun_mounts(self) -> float:
        return sum(battery.mount_wgt() for battery in self.batteries)

    def wgt_gun_armor(self) -> float:
        return sum(battery.armor_wgt() for battery in self.batteries)

    def wgt_borne(self) -> float:
        """Guns, mounts and gunhouse armour (tons)."""
        return self.wgt_guns() + self.wgt_gun_mounts() + self.wgt_gun_armor()

    def wgt_mag(self) -> float:
        return sum(battery.mag_wgt() for battery in self.batteries)

    def wgt_torps(self) -> float:
        return sum(torp.wgt() for torp in self.torps)

    def wgt_mines(self) -> float:
        return self.mines.total_wgt()

    def wgt_asw(self) -> float:
        return sum(asw.total_wgt() for asw in self.asw)

    def wgt_weaps(self) -> float:
        """All armament weight (tons)."""
        return self.wgt_borne() + self.wgt_torps() + self.wgt_mines() + self.wgt_asw()

    def wgt_engine(self) -> float:
        return self.engine.d_engine(*self._resistance_args())

    def bunker(self) -> float:
        return self.engine.bunker(*self._resistance_args())

    def bunker_max(self) -> float:
        return self.engine.bunker_max(*self._resistance_args())

    def wgt_armor(self) -> float:
        return self.armor.wgt(self.hull, self.wgt_mag(), self.wgt_engine())

    def wgt_misc(self) -> float:
        return float(self.wgts.wgt())

    def wgt_load(self) -> float:
        """Stores, fuel and ammunition (tons)."""
        return self.hull.d() * LOAD_FRACTION + self.bunker() + self.wgt_mag()

    def wgt_hull(self) -> float:
        """Hull structure: whatever the light ship leaves over (tons)."""
        d_lite = self.d_lite()
        wgt = d_lite - (
            self.wgt_weaps() + self.wgt_armor() + self.wgt_engine() + self.wgt_misc()
        )
        logger.debug(f"wgt_hull = {wgt:.2f} t (d_lite = {d_lite:.2f} t)")
        return wgt

    # ==================== Displacement ====================

    def d_lite(self) -> float:
        return self.hull.d() - self.wgt_load()

    def d_std(self) -> float:
        return self.hull.d() - self.bunker()

    def d_max(self) -> float:
        return self.hull.d() + FULL_LOAD_BUNKER * self.bunker()

    def t_max(self) -> float:
        """Draft at full load (ft)."""
        return self.hull.t_calc(self.d_max())

    def cb_max(self) -> float:
        """Block coefficient at full load."""
        d_max = self.d_max()
        return self.hull.cb_calc(d_max, self.hull.t_calc(d_max))

    # ==================== Weight Concentration ====================

    def gun_super_factor(self) -> float:
        """
        Borne-weight-weighted superfiring multiplier.

        Raised guns count for more in stability; guns sunk below the deck
        for less.
        """
        total = 0.0
        weighted = 0.0
        for battery in self.batteries:
            borne = battery.wgt_borne()
            factor = 1.0
            if battery.num > 0:
                factor += 0.25 * battery.super_() / battery.num
            total += borne
            weighted += borne * factor

        if total == 0.0:
            return 1.0
        return weighted / total

    def super_factor_long(self) -> float:
        """Borne-weight-weighted multiplier for guns concentrated at one end."""
        total = 0.0
        weighted = 0.0
        for battery in self.batteries:
            borne = battery.wgt_borne()
            n = battery.num_mounts()
            factor = 1.0
            if n > 0:
                fwd = battery.mounts_fwd(self.hull)
                factor += 0.3 * abs(2 * fwd - n) / n
            total += borne
            weighted += borne * factor

        if total == 0.0:
            return 1.0
        return weighted / total

    # ==================== Stability ====================

    def _stability_moment(self) -> float:
        """Height-weighted sum of the weights carried high in the ship."""
        armor = self.armor
        hull = self.hull
        d = hull.d()
        lwl, cwp, b = hull.lwl(), hull.cwp(), hull.b

        side_belts = sum(
            belt.wgt(lwl, cwp, b)
            for belt in (armor.main, armor.end, armor.bulge, armor.bulkhead)
        )

        return (
            5.0 * armor.wgt_ct(d)
            + 2.5 * self.wgt_borne() * self.gun_super_factor()
            + self.wgt_hull()
            + self.wgts.hull
            + 2.0 * self.wgts.on
            + 3.0 * self.wgts.above
            + 0.6 * side_belts
            + 1.5 * armor.upper.wgt(lwl, cwp, b)
            + 1.5 * armor.wgt_deck(hull, self.wgt_mag(), self.wgt_engine())
        )

    def stability(self) -> float:
        """Stability index; 1.0 and above is stable."""
        hull = self.hull
        total = self._stability_moment()
        len2beam = hull.len2beam()
        if hull.t <= 0.0 or total <= 0.0 or len2beam <= 0.0:
            return 0.0

        value = hull.d() * hull.bb / hull.t / total * 0.5
        return math.sqrt(max(value, 0.0)) * (8.0 / len2beam) ** 0.25

    def stability_adj(self) -> float:
        """Stability corrected for trim."""
        return self.stability() * ((50.0 - self.trim) / 150.0 + 1.0)

    def is_unstable(self) -> bool:
        return self.stability_adj() < STABLE

    def metacenter(self) -> float:
        """Metacentric height (ft)."""
        return self.hull.bb * self.stability_adj() / 20.0

    def roll_period(self) -> float:
        """Roll period (s)."""
        metacenter = self.metacenter()
        if metacenter <= 0.0:
            return 0.0
        return 0.42 * self.hull.bb / math.sqrt(metacenter)

    # ==================== Space ====================

    def deck_space(self) -> float:
        """Fraction of the waterplane taken by deck launchers."""
        wp = self.hull.wp()
        if wp == 0.0:
            return 0.0
        return sum(torp.deck_space(self.hull.b) for torp in self.torps) / wp

    def hull_space(self) -> float:
        """Fraction of the hull volume taken by underwater launchers."""
        d = self.hull.d()
        if d == 0.0:
            return 0.0
        return sum(torp.hull_space() for torp in self.torps) / d * FT3_PER_TON_SEA

    def room(self) -> float:
        """Internal room for crew and equipment; 1.0 and above is adequate."""
        d = self.hull.d()
        if d == 0.0:
            return 0.0

        used = (self.wgt_engine() + self.wgt_mag() + 0.5 * self.bunker()) / d
        room = (1.0 - self.hull_space() - used) * (1.0 - self.deck_space()) / 0.6
        return max(room, 0.0)

    # ==================== Strength ====================

    def str_cross(self) -> float:
        """Cross-sectional hull strength index."""
        hull = self.hull
        d = hull.d()
        depth = hull.t + hull.freeboard_dist()
        if d == 0.0 or hull.b == 0.0 or depth <= 0.0:
            return 0.0
        return self.wgt_hull() / (0.4 * d * math.sqrt(depth / (0.6 * hull.b)))

    def str_long(self) -> float:
        """Longitudinal hull strength index."""
        hull = self.hull
        d = hull.d()
        depth = hull.t + hull.freeboard_dist()
        lwl = hull.lwl()
        if d == 0.0 or depth <= 0.0 or lwl <= 0.0:
            return 0.0
        return self.wgt_hull() / (
            0.4 * d * math.sqrt(lwl / (15.0 * depth)) * self.super_factor_long()
        )

    def str_comp(self) -> float:
        """
        Composite strength.

        Cross-sectional weakness is more tolerable than longitudinal
        weakness, hence the asymmetric exponents.
        """
        cross = self.str_cross()
        long = self.str_long()
        if cross <= 0.0 or long <= 0.0:
            return min(cross, long)
        if cross > long:
            return long * (cross / long) ** 0.25
        return cross * (long / cross) ** 0.1

    # ==================== Survivability and Seakeeping ====================

    def flotation(self) -> float:
        """Reserve buoyancy against flooding (tons)."""
        hull = self.hull
        if hull.freeboard() > hull.b / 3.0:
            fb = hull.free_cap(False)
        else:
            fb = hull.freeboard_dist()

        reserve = fb * hull.wp() / FT3_PER_TON_SEA * 0.5

        stab = max(self.stability_adj(), 0.0)
        if stab >= STABLE:
            reserve *= stab ** 0.5
        else:
            reserve *= stab ** 4

        reserve *= min(self.str_comp(), 1.0)

        room = self.room()
        reserve *= room if room >= 1.0 else room ** 2

        reserve *= year_adjustment(self.year)

        return max(reserve, 0.0)

    def seaboat(self) -> float:
        """Seaboat quality; 1.0 is a good seaboat."""
        hull = self.hull
        d = hull.d()
        lwl = hull.lwl()
        if d <= 0.0 or lwl <= 0.0:
            return 0.0

        value = math.sqrt(max(hull.free_cap(True), 0.0) / (2.4 * d ** 0.2))
        value *= math.sqrt(max(self.stability_adj() * 5.0 * hull.bb / lwl, 0.0))

        cwp, b = hull.cwp(), hull.b
        end_wgt = self.armor.end.wgt(lwl, cwp, b) + self.armor.upper.wgt(lwl, cwp, b)
        value *= max(1.0 - 2.0 * end_wgt / d, 0.5)

        value *= min(1.0, math.sqrt(max(hull.t, 0.0) / (0.03 * lwl)))

        value *= min(max(1.2 - 0.4 * self.pw_max(), 0.5), 1.0)

        return value

    def steadiness(self) -> float:
        """Steadiness as a gun platform, up to 100."""
        return min(self.trim * self.seaboat(), 100.0)

    def seakeeping(self) -> float:
        return self.seaboat() * min(self.steadiness(), STEADY) / STEADY

    def is_wet_fwd(self) -> bool:
        return self.hull.is_wet_fwd()

    # ==================== Crew and Cost ====================

    def crew_max(self) -> int:
        return int(max(self.hull.d(), 0.0) ** 0.75 * 0.56)

    def crew_min(self) -> int:
        return int(self.crew_max() * 0.7692)

    def cost_lb(self) -> float:
        """Cost in millions of pounds sterling."""
        return (
            self.hull.d()
            + self.wgt_armor()
            + 2.0 * self.wgt_borne()
            + self.wgt_engine()
        ) * COST_PER_TON_LB / 1_000_000.0

    def cost_dollar(self) -> float:
        """Cost in millions of dollars."""
        return self.cost_lb() * DOLLARS_PER_POUND_STERLING

    # ==================== Debug ====================

    def internals(self) -> Dict[str, Any]:
        """Intermediate values of the hull and machinery calculations."""
        hull = self.hull
        engine = self.engine
        d, lwl, leff, cs, ws = self._resistance_args()
        cb = hull.cb()

        values: Dict[str, Any] = {
            "Cs": cs,
            "Cm": Hull.cm(cb),
            "Cp": Hull.cp(cb),
            "Cwp": hull.cwp(),
            "WP": hull.wp(),
            "WS": ws,
            "Ts": hull.ts(),
            "Stem length": hull.stem_len(),
        }
        if hull.ram_length():
            values["Ram length"] = hull.ram_length()
        values.update({
            "Freeboard dist": hull.freeboard_dist(),
            "Leff": leff,
            "Rf max": engine.rf_max(ws),
            "Rf cruise": engine.rf_cruise(ws),
            "Rw max": engine.rw_max(d, lwl, cs),
            "Rw cruise": engine.rw_cruise(d, lwl, cs),
            "Pw max": engine.pw_max(d, lwl, cs, ws),
            "Pw cruise": engine.pw_cruise(d, lwl, cs, ws),
            "hp max": engine.hp_max(d, lwl, leff, cs, ws),
            "hp cruise": engine.hp_cruise(d, lwl, leff, cs, ws),
            "fuel": engine.fuel.names(),
            "boiler": engine.boiler.names(),
            "drive": engine.drive.names(),
            "num_engines": engine.num_engines(),
            "gun_super_factor": self.gun_super_factor(),
            "super_factor_long": self.super_factor_long(),
            "stability": self.stability(),
            "str_cross": self.str_cross(),
            "str_long": self.str_long(),
            "room": self.room(),
        })
        return values

    # ==================== Persistence ====================

    @classmethod
    def load(cls, path: str) -> "Ship":
        from dreadnought.ship.persistence import load_ship
        return load_ship(path)

    def save(self, path: str) -> None:
        from dreadnought.ship.persistence import save_ship
        save_ship(self, path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "country": self.country,
            "kind": self.kind,
            "year": self.year,
            "trim": self.trim,
            "units": self.units.value,
            "hull": self.hull.to_dict(),
            "armor": self.armor.to_dict(),
            "engine": self.engine.to_dict(),
            "batteries": [battery.to_dict() for battery in self.batteries],
            "torps": [torp.to_dict() for torp in self.torps],
            "mines": self.mines.to_dict(),
            "asw": [asw.to_dict() for asw in self.asw],
            "wgts": self.wgts.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Ship":
        ship = cls(
            name=data.get("name", "NAME"),
            country=data.get("country", "COUNTRY"),
            kind=data.get("kind", "TYPE"),
            year=data.get("year", DEFAULT_YEAR),
            trim=data.get("trim", DEFAULT_TRIM),
            units=Units.from_str(data.get("units", Units.IMPERIAL.value)),
            hull=Hull.from_dict(data.get("hull", {})),
            armor=Armor.from_dict(data.get("armor", {})),
            engine=Engine.from_dict(data.get("engine", {})),
            mines=Mines.from_dict(data.get("mines", {})),
            wgts=MiscWgts.from_dict(data.get("wgts", {})),
        )
        if "batteries" in data:
            ship.batteries = [Battery.from_dict(b) for b in data["batteries"]]
        if "torps" in data:
            ship.torps = [Torpedoes.from_dict(t) for t in data["torps"]]
        if "asw" in data:
            ship.asw = [ASW.from_dict(a) for a in data["asw"]]

        logger.debug(
            f"Built ship '{ship.name}' with {len(ship.batteries)} batteries, "
            f"{len(ship.torps)} torpedo mounts"
        )
        return ship
