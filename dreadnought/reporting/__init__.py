"""
reporting/ - Design reports

Builds a structured report from a design and renders it as text or JSON.
"""

from .schema import (
    UnitLabels,
    Displacements,
    Dimensions,
    BatteryLine,
    TorpedoLine,
    StowedLine,
    Armament,
    BeltLine,
    Protection,
    Machinery,
    WeightDistribution,
    Survivability,
    HullForm,
    SpaceStrength,
    ShipReport,
)

from .summary import build_report

from .text import render_text

__all__ = [
    # Schema
    "UnitLabels",
    "Displacements",
    "Dimensions",
    "BatteryLine",
    "TorpedoLine",
    "StowedLine",
    "Armament",
    "BeltLine",
    "Protection",
    "Machinery",
    "WeightDistribution",
    "Survivability",
    "HullForm",
    "SpaceStrength",
    "ShipReport",
    # Builders
    "build_report",
    "render_text",
]
