"""
reporting/text.py - Plain text report renderer

Lays out a `ShipReport` in the traditional section order: displacement,
dimensions, armament, armour, machinery, complement, cost, weights,
survivability, hull form, then space and strength.
"""

from __future__ import annotations
from typing import List

from dreadnought.reporting.schema import ShipReport


def _tons(value: float) -> str:
    return f"{int(value):,}"


def render_text(report: ShipReport, precision: int = 2) -> str:
    """
    Render a report as plain text.

    Args:
        report: Report to render
        precision: Decimal places for non-integer figures

    Returns:
        Report text, one line per entry
    """
    p = precision
    u = report.units
    lines: List[str] = []

    def f(value: float) -> str:
        return f"{value:.{p}f}"

    lines.append(f"{report.name}, {report.country} {report.kind} laid down {report.year}")
    lines.append("")

    d = report.displacement
    lines.append("Displacement:")
    lines.append(
        f"\t{_tons(d.light)} t light; {_tons(d.standard)} t standard; "
        f"{_tons(d.normal)} t normal; {_tons(d.full_load)} t full load"
    )
    lines.append("")

    dim = report.dimensions
    lines.append("Dimensions: Length (overall / waterline) x beam x draft (normal/deep)")
    lines.append(
        f"\t({f(dim.loa)} {u.length_long} / {f(dim.lwl)} {u.length_long}) x "
        f"{f(dim.beam)} {u.length_long} x ({f(dim.draft)} / {f(dim.draft_max)} {u.length_long})"
    )
    lines.append("")

    arm = report.armament
    lines.append("Armament:")
    for battery in arm.batteries:
        lines.append(
            f"\t{battery.num} - {f(battery.cal)}{u.length_small} / {battery.len} cal "
            f"{battery.kind} guns ({f(battery.shell_wgt)} {u.weight} shells, {battery.shells} per gun)"
        )
        lines.append(f"\t  in {battery.mount}, {battery.guns_per_mount} per mount")
        for group in battery.distribution:
            lines.append(f"\t  {group}")
    if arm.batteries:
        lines.append(f"\tWeight of broadside {f(arm.broadside_wgt)} {u.weight}")
    for torp in arm.torpedoes:
        lines.append(
            f"\t{torp.num} - {f(torp.diam)}{u.length_small} torpedoes, "
            f"{f(torp.len)} {u.length_long} long, {torp.mounts} mounts {torp.description}"
        )
    for mine in arm.mines:
        lines.append(
            f"\t{mine.num} - {f(mine.wgt)} {u.weight} mines, {mine.reload} reloads {mine.description}"
        )
    for asw in arm.asw:
        lines.append(
            f"\t{asw.num} - {asw.description}, {asw.reload} reloads of {f(asw.wgt)} {u.weight}"
        )
    lines.append("")

    prot = report.protection
    lines.append("Armour:")
    lines.append(" - Belts:\tWidth (max)\tLength (avg)\tHeight (avg)")
    for belt in prot.belts:
        lines.append(
            f"\t{belt.name}:\t{f(belt.thick)}{u.length_small}\t"
            f"{f(belt.len)} {u.length_long}\t{f(belt.hgt)} {u.length_long}"
        )
    lines.append(f"\tMain belt covers {prot.belt_coverage * 100.0:.0f}% of normal length")
    lines.append("")
    lines.append(f" - Torpedo Bulkhead - {prot.bulkhead_kind}")
    bh = prot.bulkhead
    lines.append(
        f"\t\t{f(bh.thick)}{u.length_small}\t{f(bh.len)} {u.length_long}\t{f(bh.hgt)} {u.length_long}"
    )
    lines.append(f"\tBeam between torpedo bulkheads {f(prot.bulkhead_beam)} {u.length_long}")
    lines.append("")
    lines.append(
        f" - Armour deck: {prot.deck_kind}: {f(prot.deck_md)}{u.length_small} main, "
        f"{f(prot.deck_fc)}{u.length_small} forecastle, {f(prot.deck_qd)}{u.length_small} quarterdeck, "
        f"{f(prot.deck_ends)}{u.length_small} ends"
    )
    lines.append("")
    lines.append(
        f" - Conning towers: Forward {f(prot.ct_fwd)}{u.length_small}, Aft {f(prot.ct_aft)}{u.length_small}"
    )
    lines.append("")

    m = report.machinery
    lines.append("Machinery:")
    lines.append(f"\t{m.fuel}, {m.engines},")
    lines.append(f"\t{m.drive}, {m.shafts} shafts, {_tons(m.hp_max)} {m.hp_type} = {f(m.vmax)} kts")
    lines.append(f"\tRange {m.range:,} nm at {f(m.vcruise)} kts")
    lines.append(f"\tBunker at max displacement = {_tons(m.bunker_max)} tons")
    lines.append("")

    lines.append("Complement:")
    lines.append(f"\t{report.crew_min} - {report.crew_max}")
    lines.append("")

    lines.append("Cost:")
    lines.append(f"\t£{report.cost_lb:.3f} million / ${report.cost_dollar:.3f} million")
    lines.append("")

    w = report.weights
    lines.append("Distribution of weights at normal displacement:")
    for label, value in (
        ("Armament", w.armament),
        ("  - Guns", w.guns),
        ("  - Gun mountings", w.gun_mounts),
        ("  - Gun armour", w.gun_armor),
        ("  - Torpedoes", w.torpedoes),
        ("  - Mines", w.mines),
        ("  - ASW", w.asw),
        ("Armour", w.armor),
        ("  - Belts", w.belts),
        ("  - Armour deck", w.deck),
        ("  - Conning towers", w.conning_towers),
        ("Machinery", w.machinery),
        ("Hull, fittings & equipment", w.hull),
        ("Miscellaneous weights", w.misc),
        ("Fuel, ammunition & stores", w.load),
    ):
        lines.append(f"\t{label}: {_tons(value)} tons, {_share(value, d.normal)}%")
    lines.append("")

    s = report.survivability
    lines.append("Overall survivability and seakeeping ability:")
    lines.append(f"\tSurvivability (Non-critical penetrating hits needed to sink ship): {_tons(s.flotation)} tons")
    lines.append(f"\tStability (Unstable if below 1.00): {f(s.stability)}")
    lines.append(f"\tMetacentric height {f(s.metacenter)} {u.length_long}")
    lines.append(f"\tRoll period: {f(s.roll_period)} seconds")
    lines.append(f"\tSteadiness - As gun platform (Average = 50 %): {s.steadiness:.0f} %")
    lines.append(f"\tSeaboat quality (Average = 1.00): {f(s.seaboat)}")
    if s.is_unstable:
        lines.append("\tDESIGN FAILS: Ship is unstable")
    if s.is_wet_fwd:
        lines.append("\tCaution: Lacks seaworthiness - very limited seakeeping ability")
    lines.append("")

    h = report.hull_form
    lines.append("Hull form characteristics:")
    lines.append(f"\tHull has {h.freeboard_desc}, {h.bow} and {h.stern}")
    lines.append(f"\tBlock coefficient (normal/deep): {f(h.cb)} / {f(h.cb_max)}")
    lines.append(f"\tLength to Beam Ratio: {f(h.len2beam)} : 1")
    lines.append(f"\t'Natural speed' for length: {f(h.vn)} kts")
    lines.append(f"\tBow angle (Positive = bow angles forward): {f(h.bow_angle)} degrees")
    lines.append(f"\tStern overhang: {f(h.stern_overhang)} {u.length_long}")
    lines.append("\tFreeboard % = length of deck as a percentage of waterline length")
    lines.append("\t\t\tFore end, Aft end")
    for deck in h.decks:
        lines.append(
            f"\t- {deck['name']}:\t{f(deck['pct'])}%, {f(deck['fwd'])} {u.length_long}, "
            f"{f(deck['aft'])} {u.length_long}"
        )
    lines.append(f"\t- Average freeboard:\t\t{f(h.freeboard)} {u.length_long}")
    lines.append("")

    sp = report.space
    lines.append("Ship space, strength and comments:")
    lines.append(f"\tSpace - Hull room (Average = 1.00): {f(sp.room)}")
    lines.append(f"\tWaterplane Area: {int(sp.wp):,} {u.area}")
    lines.append(f"\tStructure weight / hull surface area: cross {f(sp.str_cross)}, longitudinal {f(sp.str_long)}")
    lines.append(f"\tHull strength (Relative): {f(sp.str_comp)}")

    return "\n".join(lines)


def _share(value: float, total: float) -> str:
    if total == 0.0:
        return "0.0"
    return f"{value / total * 100.0:.1f}"
