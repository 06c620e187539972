"""
Miscellaneous Weights

Weight the designer sets aside outside the calculated groups, by where it
sits in the ship. Where it sits matters to stability: weight carried high
counts for more.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class MiscWgts:
    """
    Miscellaneous weights (tons).

    Attributes:
        vital: Extra weight in the vital spaces
        hull: Extra weight in the hull
        on: Extra weight on the deck
        above: Extra weight above the deck
        void: Extra displacement given to void space
    """
    vital: int = 0
    hull: int = 0
    on: int = 0
    above: int = 0
    void: int = 0

    def wgt(self) -> int:
        """Total of the miscellaneous weights."""
        return self.vital + self.hull + self.on + self.above + self.void

    def to_dict(self) -> Dict[str, Any]:
        return {k: getattr(self, k) for k in self.__dataclass_fields__}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MiscWgts":
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
