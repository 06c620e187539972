"""
dreadnought Ship Module

The complete design, its derived figures and its design file format.
"""

from .ship import Ship

from .persistence import (
    load_ship,
    save_ship,
)

__all__ = [
    "Ship",
    "load_ship",
    "save_ship",
]
