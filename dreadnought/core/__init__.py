"""
dreadnought Core Module

Constants, display units and historical adjustment curves shared by every
calculator.
"""

from .constants import (
    FT3_PER_TON_SEA,
    POUND2TON,
    INCH,
)

from .units import (
    Units,
    UnitType,
    metric,
    display,
    unit_label,
)

from .history import (
    year_adjustment,
    date_factor,
    early_factor,
)

__all__ = [
    # Constants
    "FT3_PER_TON_SEA",
    "POUND2TON",
    "INCH",
    # Units
    "Units",
    "UnitType",
    "metric",
    "display",
    "unit_label",
    # History
    "year_adjustment",
    "date_factor",
    "early_factor",
]
