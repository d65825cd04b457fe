"""
Sampling configuration.

All tunables of a generation run live in one immutable ``SamplingConfig`` so
that several configurations can be used side by side. Lengths are stored in
meters and angles in radians; ``from_quantities`` accepts pint quantities or
strings such as ``"1.3 nm"`` and ``"4 deg"``.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from math import radians
from typing import Any

from orbcloud.units import BOHR_RADIUS, PICOMETER, to_meters, to_radians


STRATEGIES = ("spherical", "cartesian")

_LENGTH_FIELDS = ("length_unit", "bohr_radius", "radial_step", "max_radius", "cube_extent", "cube_step")
_ANGLE_FIELDS = ("angular_step",)


@dataclass(frozen=True)
class SamplingConfig:
    strategy: str = "spherical"
    length_unit: float = PICOMETER
    bohr_radius: float = BOHR_RADIUS
    angular_step: float = radians(4)
    radial_step: float = 1.0 * PICOMETER
    max_radius: float = 1300.0 * PICOMETER
    full_inclination: bool = False
    cube_extent: float = 1200.0 * PICOMETER
    cube_step: float = 20.0 * PICOMETER
    threshold: float = 1.0e-11

    def __post_init__(self) -> None:
        if self.strategy not in STRATEGIES:
            raise ValueError(f"Unknown sampling strategy '{self.strategy}'; expected one of {STRATEGIES}.")
        for name in ("length_unit", "bohr_radius", "angular_step", "radial_step", "cube_step"):
            if not getattr(self, name) > 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}.")
        for name in ("max_radius", "cube_extent", "threshold"):
            if not getattr(self, name) >= 0:
                raise ValueError(f"{name} must not be negative, got {getattr(self, name)!r}.")

    @classmethod
    def from_quantities(cls, **kwargs: Any) -> SamplingConfig:
        """Build a config from unit-aware values.

        Bare numbers for lengths are read in picometers and bare numbers for
        angles in degrees.
        """
        values: dict[str, Any] = {}
        for name, value in kwargs.items():
            if value is None:
                continue
            if name in _LENGTH_FIELDS:
                values[name] = to_meters(value)
            elif name in _ANGLE_FIELDS:
                values[name] = to_radians(value)
            else:
                values[name] = value
        return cls(**values)

    @property
    def grid_unit(self) -> float:
        """Length of one output grid unit for the selected strategy."""
        if self.strategy == "cartesian":
            return self.cube_step
        return self.length_unit

    def with_strategy(self, strategy: str) -> SamplingConfig:
        return replace(self, strategy=strategy)
