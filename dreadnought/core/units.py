"""
Display units and imperial-to-metric conversion.

Designs are always computed in imperial units; conversion happens only when
values are presented.
"""

from enum import Enum

from dreadnought.core.constants import (
    INCH2MM,
    FEET2METERS,
    SQFEET2SQMETERS,
    POUND2KG,
    HP2KW,
)


class Units(str, Enum):
    """Unit system used to present a design."""
    IMPERIAL = "imperial"
    METRIC = "metric"

    @classmethod
    def from_str(cls, value: str) -> "Units":
        """Parse a unit system name or legacy index ("0" imperial, "1" metric)."""
        text = str(value).strip().lower()
        if text == "1":
            return cls.METRIC
        if text in ("", "0"):
            return cls.IMPERIAL
        return cls(text)

    def __str__(self) -> str:
        return self.value


class UnitType(Enum):
    """Physical quantity being converted."""
    LENGTH_SMALL = "length_small"      # inches
    LENGTH_LONG = "length_long"        # feet
    AREA = "area"                      # square feet
    WEIGHT = "weight"                  # pounds
    POWER = "power"                    # horsepower
    WEIGHT_PER_AREA = "weight_per_area"  # pounds per square foot


_LABELS = {
    UnitType.LENGTH_SMALL: ("in", "mm"),
    UnitType.LENGTH_LONG: ("ft", "m"),
    UnitType.AREA: ("sq ft", "sq m"),
    UnitType.WEIGHT: ("lbs", "kg"),
    UnitType.POWER: ("hp", "kW"),
    UnitType.WEIGHT_PER_AREA: ("lbs/sq ft", "kg/sq m"),
}


def metric(imperial: float, unit_type: UnitType, units: Units) -> float:
    """
    Convert an imperial value to metric.

    Values already held in metric are returned unchanged.

    Args:
        imperial: Value in imperial units
        unit_type: Quantity being converted
        units: Unit system the value is currently held in

    Returns:
        Value in metric units
    """
    if units == Units.METRIC:
        return imperial

    if unit_type == UnitType.LENGTH_SMALL:
        return imperial * INCH2MM
    if unit_type == UnitType.LENGTH_LONG:
        return imperial * FEET2METERS
    if unit_type == UnitType.AREA:
        return imperial * SQFEET2SQMETERS
    if unit_type == UnitType.WEIGHT:
        return imperial * POUND2KG
    if unit_type == UnitType.POWER:
        return imperial * HP2KW
    return imperial / SQFEET2SQMETERS * POUND2KG


def display(imperial: float, unit_type: UnitType, units: Units) -> float:
    """Value as it should be shown in the requested unit system."""
    if units == Units.METRIC:
        return metric(imperial, unit_type, Units.IMPERIAL)
    return imperial


def unit_label(unit_type: UnitType, units: Units) -> str:
    """Short unit label for a quantity in the requested unit system."""
    imperial, metric_label = _LABELS[unit_type]
    return metric_label if units == Units.METRIC else imperial
