from __future__ import annotations

import tokenize
from math import radians

from pint import DefinitionSyntaxError, DimensionalityError, Quantity, UndefinedUnitError, UnitRegistry


ureg = UnitRegistry()
Q_ = ureg.Quantity

# Lengths are carried in meters; the picometer is the output grid unit.
PICOMETER: float = Q_(1.0, "pm").to("m").magnitude
BOHR_RADIUS: float = 52.9177210903 * PICOMETER


def _parse(text: str) -> float | Quantity:
    try:
        return float(text)
    except ValueError:
        pass
    try:
        return ureg.Quantity(text)
    except UndefinedUnitError as exc:
        raise ValueError(f"Unknown unit in '{text}'.") from exc
    # pint asserts on dangling operators such as "1 +".
    except (DefinitionSyntaxError, tokenize.TokenError, AssertionError) as exc:
        raise ValueError(f"Cannot parse quantity '{text}'.") from exc


def _convert(value: float | str | Quantity, target: str, default_unit: str) -> float:
    if isinstance(value, str):
        value = _parse(value)
    if not isinstance(value, ureg.Quantity):
        value = Q_(float(value), default_unit)
    elif value.unitless:
        value = Q_(value.magnitude, default_unit)
    try:
        return float(value.to(target).magnitude)
    except DimensionalityError as exc:
        raise ValueError(f"Cannot convert {value} to {target}.") from exc


def to_meters(value: float | str | Quantity, default_unit: str = "pm") -> float:
    """Convert a length to meters.

    Bare numbers are read in ``default_unit``; strings are parsed by pint, so
    ``"1.3 nm"`` and ``"1300 pm"`` give the same result.
    """
    return _convert(value, "m", default_unit)


def to_radians(value: float | str | Quantity, default_unit: str = "deg") -> float:
    """Convert an angle to radians, reading bare numbers in ``default_unit``."""
    if default_unit == "deg" and isinstance(value, (int, float)):
        return radians(value)
    return _convert(value, "radian", default_unit)
