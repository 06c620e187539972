"""
dreadnought Armour Module

Side belts, torpedo bulkhead, deck armour and conning towers.
"""

from .belts import (
    Belt,
    BeltType,
    BulkheadType,
    CT,
)

from .deck import (
    Deck,
    DeckType,
)

from .armor import Armor

__all__ = [
    "Armor",
    "Belt",
    "BeltType",
    "BulkheadType",
    "CT",
    "Deck",
    "DeckType",
]
