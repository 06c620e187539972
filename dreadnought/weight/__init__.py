"""
dreadnought Weight Module
"""

from .misc import MiscWgts

__all__ = [
    "MiscWgts",
]
