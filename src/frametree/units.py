"""
Length and angle units for frame-tagged quantities.

The frame algebra itself is unitless; positions carry a `LengthUnit` and
orientations accept angles in any `AngleUnit`. This module is the only place
where conversion factors live.

Units are singletons compared by identity:

>>> from frametree.units import meter, millimeter, Quantity
>>> Quantity(1500.0, millimeter).convert(meter).value
1.5
"""
from __future__ import annotations

from typing import Generic, TypeVar

import numpy as np

from frametree.utils.validation import validate_positive


class LengthUnit:
    """
    A unit of length, defined by its size in meters.

    Parameters
    ----------
    name : str
        Human readable name, e.g. "meter"
    symbol : str
        Short symbol, e.g. "m"
    meters : float
        Size of one unit in meters
    """

    __slots__ = ("name", "symbol", "meters")

    def __init__(self, name: str, symbol: str, meters: float) -> None:
        validate_positive(meters, "meters")
        self.name = name
        self.symbol = symbol
        self.meters = float(meters)

    def convert(self, value: float, unit: LengthUnit) -> float:
        """Convert `value` expressed in `unit` into `self`."""
        return value * converter(unit, self)

    def __repr__(self) -> str:
        return f"LengthUnit({self.name!r})"


class AngleUnit:
    """A unit of angle, defined by its size in radians."""

    __slots__ = ("name", "symbol", "radians")

    def __init__(self, name: str, symbol: str, radians: float) -> None:
        validate_positive(radians, "radians")
        self.name = name
        self.symbol = symbol
        self.radians = float(radians)

    def convert(self, value: float, unit: AngleUnit) -> float:
        """Convert `value` expressed in `unit` into `self`."""
        return value * unit.radians / self.radians

    def __repr__(self) -> str:
        return f"AngleUnit({self.name!r})"


meter = LengthUnit("meter", "m", 1.0)
millimeter = LengthUnit("millimeter", "mm", 1e-3)
centimeter = LengthUnit("centimeter", "cm", 1e-2)
kilometer = LengthUnit("kilometer", "km", 1e3)

radian = AngleUnit("radian", "rad", 1.0)
degree = AngleUnit("degree", "deg", np.pi / 180.0)


def converter(source: LengthUnit, target: LengthUnit) -> float:
    """
    Factor that converts a value in `source` into `target`.

    Returns exactly 1.0 when the units are the same object.
    """
    if source is target:
        return 1.0
    return source.meters / target.meters


def to_radians(value: float, unit: AngleUnit) -> float:
    """Convert an angle in `unit` to radians."""
    return radian.convert(value, unit)


def as_radians(angle: Quantity | float) -> float:
    """Radians from an angle Quantity, or from a bare float already in radians."""
    if isinstance(angle, Quantity):
        return to_radians(angle.value, angle.unit)
    return float(angle)


U = TypeVar("U", LengthUnit, AngleUnit)


class Quantity(Generic[U]):
    """
    A value tagged with a unit.

    Parameters
    ----------
    value : float
        Magnitude in `unit`
    unit : LengthUnit | AngleUnit
        Unit of `value`
    """

    __slots__ = ("value", "unit")

    def __init__(self, value: float, unit: U) -> None:
        self.value = float(value)
        self.unit = unit

    def convert(self, unit: U) -> Quantity[U]:
        """Return the same quantity expressed in `unit`."""
        if unit is self.unit:
            return self
        return Quantity(unit.convert(self.value, self.unit), unit)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.unit is other.unit and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.value, id(self.unit)))

    def __repr__(self) -> str:
        return f"Quantity({self.value!r}, {self.unit.symbol})"


__all__ = [
    "LengthUnit",
    "AngleUnit",
    "Quantity",
    "converter",
    "to_radians",
    "as_radians",
    "meter",
    "millimeter",
    "centimeter",
    "kilometer",
    "radian",
    "degree",
]
