"""
dreadnought Hull Module

Hull dimensions, form coefficients and freeboard geometry.
"""

from .enums import (
    SternType,
    BowType,
    LengthKind,
    FormKind,
)

from .hull import (
    Hull,
    LengthSpec,
    FormSpec,
)

__all__ = [
    "SternType",
    "BowType",
    "LengthKind",
    "FormKind",
    "Hull",
    "LengthSpec",
    "FormSpec",
]
