"""
dreadnought - Warship pre-design calculator

Derives displacement, weights, stability, strength and seakeeping figures
from a sparse set of hull, armour, machinery and armament inputs.
"""

__version__ = "0.3.0"

from dreadnought.ship import Ship

__all__ = [
    "Ship",
    "__version__",
]
