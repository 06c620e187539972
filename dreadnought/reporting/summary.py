"""
reporting/summary.py - Design report builder

Collects every reported figure from a design into a `ShipReport`,
converting quantities to the requested unit system.
"""

from __future__ import annotations
from typing import Optional
import logging

from dreadnought.core.units import Units, UnitType, display, unit_label
from dreadnought.ship.ship import Ship
from dreadnought.reporting.schema import (
    Armament,
    BatteryLine,
    BeltLine,
    Dimensions,
    Displacements,
    HullForm,
    Machinery,
    Protection,
    ShipReport,
    SpaceStrength,
    StowedLine,
    Survivability,
    TorpedoLine,
    UnitLabels,
    WeightDistribution,
)

logger = logging.getLogger(__name__)


def _labels(units: Units) -> UnitLabels:
    return UnitLabels(
        system=units.value,
        length_small=unit_label(UnitType.LENGTH_SMALL, units),
        length_long=unit_label(UnitType.LENGTH_LONG, units),
        area=unit_label(UnitType.AREA, units),
        weight=unit_label(UnitType.WEIGHT, units),
        power=unit_label(UnitType.POWER, units),
    )


def build_report(ship: Ship, units: Optional[Units] = None) -> ShipReport:
    """
    Build the design report for a ship.

    Args:
        ship: Design to report on
        units: Unit system to report in; defaults to the design's own

    Returns:
        ShipReport with every figure evaluated
    """
    units = units or ship.units
    hull = ship.hull
    armor = ship.armor
    engine = ship.engine

    def inch(value: float) -> float:
        return display(value, UnitType.LENGTH_SMALL, units)

    def ft(value: float) -> float:
        return display(value, UnitType.LENGTH_LONG, units)

    logger.debug(f"Building report for '{ship.name}' in {units.value} units")

    d = hull.d()
    lwl, b = hull.lwl(), hull.b
    wgt_mag = ship.wgt_mag()
    wgt_engine = ship.wgt_engine()

    # Armament
    batteries = []
    for battery in ship.batteries:
        if battery.num == 0:
            continue
        batteries.append(BatteryLine(
            num=battery.num,
            cal=inch(battery.cal),
            len=battery.len,
            kind=battery.kind.description,
            mount=battery.mount.kind.description,
            guns_per_mount=battery.mount.num,
            shell_wgt=display(battery.shell_wgt(), UnitType.WEIGHT, units),
            shells=battery.shells,
            distribution=[
                f"{group.num_mounts()} x {group.layout.description}, {group.distribution.description}"
                for group in battery.groups
                if group.num_mounts() > 0
            ],
        ))

    torpedoes = [
        TorpedoLine(
            num=torp.num,
            mounts=torp.mounts,
            diam=inch(torp.diam),
            len=ft(torp.len),
            description=torp.kind.description,
        )
        for torp in ship.torps
        if torp.num > 0
    ]

    mines = []
    if ship.mines.num > 0:
        mines.append(StowedLine(
            num=ship.mines.num,
            reload=ship.mines.reload,
            wgt=display(ship.mines.wgt, UnitType.WEIGHT, units),
            description=ship.mines.kind.description,
        ))

    asw = [
        StowedLine(
            num=a.num,
            reload=a.reload,
            wgt=display(a.wgt, UnitType.WEIGHT, units),
            description=a.kind.description,
        )
        for a in ship.asw
        if a.num > 0
    ]

    armament = Armament(
        batteries=batteries,
        broadside_wgt=display(
            sum(battery.broadside_wgt() for battery in ship.batteries), UnitType.WEIGHT, units
        ),
        torpedoes=torpedoes,
        mines=mines,
        asw=asw,
    )

    # Protection
    belts = [
        BeltLine(name=name, thick=inch(belt.thick), len=ft(belt.len), hgt=ft(belt.hgt))
        for name, belt in (("Main", armor.main), ("Ends", armor.end), ("Upper", armor.upper), ("Bulge", armor.bulge))
    ]
    bulkhead = armor.bulkhead
    protection = Protection(
        belts=belts,
        bulkhead=BeltLine(
            name="Bulkhead",
            thick=inch(bulkhead.thick),
            len=ft(bulkhead.len),
            hgt=ft(bulkhead.hgt),
        ),
        bulkhead_kind=armor.bh_kind.description,
        bulkhead_beam=ft(armor.bh_beam),
        deck_kind=armor.deck.kind.description,
        deck_md=inch(armor.deck.md),
        deck_fc=inch(armor.deck.fc),
        deck_qd=inch(armor.deck.qd),
        deck_ends=inch(armor.deck.ends),
        ct_fwd=inch(armor.ct_fwd.thick),
        ct_aft=inch(armor.ct_aft.thick),
        belt_coverage=armor.belt_coverage(lwl),
        max_belt_hgt=ft(armor.max_belt_hgt(hull.t, hull.freeboard_dist())),
    )

    # Machinery
    machinery = Machinery(
        fuel=engine.fuel.description,
        engines=engine.boiler.description,
        drive=engine.drive.description,
        shafts=engine.shafts,
        hp_max=display(ship.hp_max(), UnitType.POWER, units),
        hp_type=engine.hp_type() if units == Units.IMPERIAL else "kW",
        vmax=engine.vmax,
        vcruise=engine.vcruise,
        range=engine.range,
        bunker=ship.bunker(),
        bunker_max=ship.bunker_max(),
        pct_coal=engine.pct_coal,
    )

    weights = WeightDistribution(
        armament=ship.wgt_weaps(),
        guns=ship.wgt_guns(),
        gun_mounts=ship.wgt_gun_mounts(),
        gun_armor=ship.wgt_gun_armor(),
        torpedoes=ship.wgt_torps(),
        mines=ship.wgt_mines(),
        asw=ship.wgt_asw(),
        armor=ship.wgt_armor(),
        belts=armor.wgt_belts(hull),
        deck=armor.wgt_deck(hull, wgt_mag, wgt_engine),
        conning_towers=armor.wgt_ct(d),
        machinery=wgt_engine,
        hull=ship.wgt_hull(),
        misc=ship.wgt_misc(),
        load=ship.wgt_load(),
        magazines=wgt_mag,
        bunker=ship.bunker(),
    )

    survivability = Survivability(
        flotation=ship.flotation(),
        stability=ship.stability_adj(),
        is_unstable=ship.is_unstable(),
        metacenter=ft(ship.metacenter()),
        roll_period=ship.roll_period(),
        seaboat=ship.seaboat(),
        steadiness=ship.steadiness(),
        seakeeping=ship.seakeeping(),
        is_wet_fwd=ship.is_wet_fwd(),
    )

    decks = [
        {"name": "Forecastle", "pct": hull.fc_len * 100.0, "fwd": ft(hull.fc_fwd), "aft": ft(hull.fc_aft)},
        {"name": "Forward deck", "pct": hull.fd_len * 100.0, "fwd": ft(hull.fd_fwd), "aft": ft(hull.fd_aft)},
        {"name": "Aft deck", "pct": hull.ad_len() * 100.0, "fwd": ft(hull.ad_fwd), "aft": ft(hull.ad_aft)},
        {"name": "Quarter deck", "pct": hull.qd_len * 100.0, "fwd": ft(hull.qd_fwd), "aft": ft(hull.qd_aft)},
    ]

    hull_form = HullForm(
        cb=hull.cb(),
        cb_max=ship.cb_max(),
        len2beam=hull.len2beam(),
        vn=hull.vn(),
        bow=hull.bow_type.description,
        bow_angle=hull.bow_angle,
        stern=hull.stern_type.description,
        stern_overhang=ft(hull.stern_overhang),
        freeboard=ft(hull.freeboard()),
        freeboard_desc=hull.freeboard_desc(),
        decks=decks,
    )

    space = SpaceStrength(
        wp=display(hull.wp(), UnitType.AREA, units),
        room=ship.room(),
        str_cross=ship.str_cross(),
        str_long=ship.str_long(),
        str_comp=ship.str_comp(),
        deck_space=ship.deck_space(),
        hull_space=ship.hull_space(),
    )

    return ShipReport(
        name=ship.name,
        country=ship.country,
        kind=ship.kind,
        year=ship.year,
        units=_labels(units),
        displacement=Displacements(
            light=ship.d_lite(),
            standard=ship.d_std(),
            normal=d,
            full_load=ship.d_max(),
        ),
        dimensions=Dimensions(
            loa=ft(hull.loa()),
            lwl=ft(lwl),
            beam=ft(b),
            beam_bulges=ft(hull.bb),
            draft=ft(hull.t),
            draft_max=ft(ship.t_max()),
        ),
        armament=armament,
        protection=protection,
        machinery=machinery,
        crew_min=ship.crew_min(),
        crew_max=ship.crew_max(),
        cost_lb=ship.cost_lb(),
        cost_dollar=ship.cost_dollar(),
        weights=weights,
        survivability=survivability,
        hull_form=hull_form,
        space=space,
    )
