"""
Machinery Capability Sets

Fuel, steam engine and drive types. Each is a set of capabilities rather
than a single choice: a ship may burn coal and oil, or pair turbines with
reciprocating cruising engines. Combinations the model has no description
for render as an "ERROR: ..." string instead of failing.
"""

from __future__ import annotations
from enum import Flag
from typing import List


def _count(flags: Flag) -> int:
    return bin(flags.value).count("1")


def _names(flags: Flag) -> List[str]:
    return [member.name for member in type(flags) if member in flags]


class FuelType(Flag):
    """Fuels burned by the machinery."""
    COAL = 1 << 0
    OIL = 1 << 1
    DIESEL = 1 << 2
    GASOLINE = 1 << 3
    BATTERY = 1 << 4

    def is_steam(self) -> bool:
        """Whether the fuel raises steam."""
        return bool(self & (FuelType.COAL | FuelType.OIL))

    def count(self) -> int:
        return _count(self)

    def names(self) -> List[str]:
        return _names(self)

    @classmethod
    def from_names(cls, names: List[str]) -> "FuelType":
        flags = cls(0)
        for name in names:
            flags |= cls[name.upper()]
        return flags

    @property
    def description(self) -> str:
        return _FUEL_DESC.get(self.value, "ERROR: Revise fuels")


_FUEL_DESC = {
    FuelType.COAL.value: "Coal fired boilers",
    FuelType.OIL.value: "Oil fired boilers",
    (FuelType.COAL | FuelType.OIL).value: "Coal and oil fired boilers",
    (FuelType.COAL | FuelType.DIESEL).value: "Coal fired boilers plus diesel motors",
    (FuelType.OIL | FuelType.DIESEL).value: "Oil fired boilers plus diesel motors",
    (FuelType.COAL | FuelType.OIL | FuelType.DIESEL).value: "Coal and oil fired boilers plus diesel motors",
    FuelType.DIESEL.value: "Diesel internal combustion motors",
    (FuelType.DIESEL | FuelType.BATTERY).value: "Diesel internal combustion engines plus batteries",
    FuelType.GASOLINE.value: "Gasoline internal combustion motors",
    (FuelType.GASOLINE | FuelType.BATTERY).value: "Gasoline internal combustion motors plus batteries",
    FuelType.BATTERY.value: "Battery powered",
}


class BoilerType(Flag):
    """Steam engine types; each type present is one engine unit."""
    SIMPLE = 1 << 0
    COMPLEX = 1 << 1
    TURBINE = 1 << 2

    def is_simple(self) -> bool:
        return bool(self & BoilerType.SIMPLE)

    def is_complex(self) -> bool:
        return bool(self & BoilerType.COMPLEX)

    def is_reciprocating(self) -> bool:
        return self.is_simple() or self.is_complex()

    def is_turbine(self) -> bool:
        return bool(self & BoilerType.TURBINE)

    def num_engines(self) -> int:
        """Number of engine units, one per engine type."""
        return _count(self)

    def hp_type(self) -> str:
        """Horsepower measure: indicated for reciprocating engines, shaft otherwise."""
        return "ihp" if self.is_reciprocating() else "shp"

    def d_engine_factor(self, year: int, fuel: FuelType) -> float:
        """
        Power-to-weight factor of the machinery.

        Sums one piecewise-linear year curve per engine type present.
        Non-steam plants follow the turbine curve.

        Args:
            year: Year the machinery was built
            fuel: Fuels burned

        Returns:
            Horsepower per ton, summed over engine types
        """
        a = 0.0
        if self.is_simple():
            if year <= 1884:
                a = 1.2 + (year - 1860) * 0.05
            elif year <= 1949:
                a = 2.45 + (year - 1885) * 0.025
            else:
                a = 4.075

        b = 0.0
        if self.is_complex():
            if year <= 1905:
                b = 1.2 + (year - 1860) * 0.05
            elif year <= 1910:
                b = 3.5 + (year - 1906)
            elif year <= 1949:
                b = 7.5 + (year - 1910) * 0.025
            else:
                b = 8.5

        c = 0.0
        if self.is_turbine() or not fuel.is_steam():
            if year <= 1897:
                c = 1.2 + (year - 1860) * 0.05
            elif year <= 1902:
                c = 1.0 + (year - 1898) * 0.5
            elif year <= 1909:
                c = 4.0 + (year - 1903)
            elif year <= 1949:
                c = 11.0 + (year - 1910) * 0.2
            else:
                c = 19.0

        return a + b + c

    def bunker_factor(self, year: int) -> float:
        """Fuel economy of the machinery for its year."""
        if self.is_reciprocating() or year < 1898:
            return 1.0 - (1910 - year) / 70.0
        if year < 1920:
            return 1.0 + (year - 1910) / 20.0
        if year < 1950:
            return 1.5 + (year - 1920) / 60.0
        return 2.0

    def count(self) -> int:
        return _count(self)

    def names(self) -> List[str]:
        return _names(self)

    @classmethod
    def from_names(cls, names: List[str]) -> "BoilerType":
        flags = cls(0)
        for name in names:
            flags |= cls[name.upper()]
        return flags

    @property
    def description(self) -> str:
        return _BOILER_DESC.get(self.value, "ERROR: No steam engines")


_BOILER_DESC = {
    BoilerType.SIMPLE.value: "simple receiprocating steam engines",
    BoilerType.COMPLEX.value: "complex receiprocating steam engines",
    BoilerType.TURBINE.value: "steam turbines",
    (BoilerType.SIMPLE | BoilerType.COMPLEX).value: "reciprocating steam engines",
    (BoilerType.SIMPLE | BoilerType.TURBINE).value: "reciprocating cruising steam engines and steam turbines",
    (BoilerType.SIMPLE | BoilerType.COMPLEX | BoilerType.TURBINE).value: "ERROR: Too many types of steam engines",
}


class DriveType(Flag):
    """Transmission from engines to shafts."""
    DIRECT = 1 << 0
    GEARED = 1 << 1
    ELECTRIC = 1 << 2
    HYDRAULIC = 1 << 3

    def count(self) -> int:
        return _count(self)

    def names(self) -> List[str]:
        return _names(self)

    @classmethod
    def from_names(cls, names: List[str]) -> "DriveType":
        flags = cls(0)
        for name in names:
            flags |= cls[name.upper()]
        return flags

    @property
    def description(self) -> str:
        if self.value == 0:
            return "ERROR: No drive to shaft"
        return _DRIVE_DESC.get(self.value, "ERROR: Revise drives")


_DRIVE_DESC = {
    DriveType.DIRECT.value: "Direct drive",
    DriveType.GEARED.value: "Geared drive",
    DriveType.ELECTRIC.value: "Electric motors",
    DriveType.HYDRAULIC.value: "Hydraulic drive",
    (DriveType.GEARED | DriveType.ELECTRIC).value: "Electric cruising motors plus geared drives",
}
