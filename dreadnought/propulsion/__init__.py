"""
dreadnought Propulsion Module

Machinery capability sets and the power, bunkerage and machinery weight
model.
"""

from .plant import (
    FuelType,
    BoilerType,
    DriveType,
)

from .engine import Engine

__all__ = [
    "Engine",
    "FuelType",
    "BoilerType",
    "DriveType",
]
