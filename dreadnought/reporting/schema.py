"""
reporting/schema.py - Pydantic report models

The design report as a value tree. Lengths, areas, thicknesses and power
are already converted to the report's unit system; the matching labels
travel in `UnitLabels`. Weights in tons are long tons in both systems.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field


# =============================================================================
# Units
# =============================================================================


class UnitLabels(BaseModel):
    """Unit labels used throughout a report."""

    system: str = Field(..., description="Unit system name")
    length_small: str = Field(..., description="Armour thickness and calibre unit")
    length_long: str = Field(..., description="Hull dimension unit")
    area: str = Field(..., description="Area unit")
    weight: str = Field(..., description="Shell weight unit")
    power: str = Field(..., description="Power unit")


# =============================================================================
# Principal Characteristics
# =============================================================================


class Displacements(BaseModel):
    """Displacement at each loading condition (tons)."""

    light: float
    standard: float
    normal: float
    full_load: float


class Dimensions(BaseModel):
    """Principal dimensions."""

    loa: float = Field(..., description="Length overall")
    lwl: float = Field(..., description="Length on the waterline")
    beam: float
    beam_bulges: float
    draft: float = Field(..., description="Draft at normal displacement")
    draft_max: float = Field(..., description="Draft at full load")


# =============================================================================
# Armament
# =============================================================================


class BatteryLine(BaseModel):
    """One gun battery."""

    num: int
    cal: float
    len: int
    kind: str
    mount: str
    guns_per_mount: int
    shell_wgt: float
    shells: int
    distribution: List[str] = Field(default_factory=list)


class TorpedoLine(BaseModel):
    num: int
    mounts: int
    diam: float
    len: float
    description: str


class StowedLine(BaseModel):
    """Mines or anti-submarine weapons."""

    num: int
    reload: int
    wgt: float
    description: str


class Armament(BaseModel):
    batteries: List[BatteryLine] = Field(default_factory=list)
    broadside_wgt: float = Field(0.0, description="Weight of one salvo from every gun")
    torpedoes: List[TorpedoLine] = Field(default_factory=list)
    mines: List[StowedLine] = Field(default_factory=list)
    asw: List[StowedLine] = Field(default_factory=list)


# =============================================================================
# Protection
# =============================================================================


class BeltLine(BaseModel):
    name: str
    thick: float
    len: float
    hgt: float


class Protection(BaseModel):
    belts: List[BeltLine] = Field(default_factory=list)
    bulkhead: BeltLine
    bulkhead_kind: str
    bulkhead_beam: float
    deck_kind: str
    deck_md: float
    deck_fc: float
    deck_qd: float
    deck_ends: float
    ct_fwd: float
    ct_aft: float
    belt_coverage: float = Field(..., description="Share of the vital length under the main belt")
    max_belt_hgt: float


# =============================================================================
# Machinery
# =============================================================================


class Machinery(BaseModel):
    fuel: str
    engines: str
    drive: str
    shafts: int
    hp_max: float
    hp_type: str
    vmax: float
    vcruise: float
    range: int
    bunker: float
    bunker_max: float
    pct_coal: float


# =============================================================================
# Weights and Figures of Merit
# =============================================================================


class WeightDistribution(BaseModel):
    """Distribution of weights at normal displacement (tons)."""

    armament: float
    guns: float
    gun_mounts: float
    gun_armor: float
    torpedoes: float
    mines: float
    asw: float
    armor: float
    belts: float
    deck: float
    conning_towers: float
    machinery: float
    hull: float
    misc: float
    load: float
    magazines: float
    bunker: float


class Survivability(BaseModel):
    """Overall survivability and seakeeping ability."""

    flotation: float = Field(..., description="Reserve buoyancy against flooding (tons)")
    stability: float
    is_unstable: bool
    metacenter: float
    roll_period: float
    seaboat: float
    steadiness: float
    seakeeping: float
    is_wet_fwd: bool


class HullForm(BaseModel):
    """Hull form characteristics."""

    cb: float
    cb_max: float
    len2beam: float
    vn: float = Field(..., description="'Natural speed' for length (kts)")
    bow: str
    bow_angle: float
    stern: str
    stern_overhang: float
    freeboard: float
    freeboard_desc: str
    decks: List[Dict[str, Any]] = Field(default_factory=list)


class SpaceStrength(BaseModel):
    """Ship space, strength and comments."""

    wp: float = Field(..., description="Waterplane area")
    room: float
    str_cross: float
    str_long: float
    str_comp: float
    deck_space: float
    hull_space: float


# =============================================================================
# Report
# =============================================================================


class ShipReport(BaseModel):
    """Complete design report."""

    name: str
    country: str
    kind: str
    year: int
    units: UnitLabels
    displacement: Displacements
    dimensions: Dimensions
    armament: Armament
    protection: Protection
    machinery: Machinery
    crew_min: int
    crew_max: int
    cost_lb: float = Field(..., description="Millions of pounds sterling")
    cost_dollar: float = Field(..., description="Millions of dollars")
    weights: WeightDistribution
    survivability: Survivability
    hull_form: HullForm
    space: SpaceStrength

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
