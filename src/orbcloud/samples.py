from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, NamedTuple

import numpy as np


class CartesianPoint(NamedTuple):
    x: int
    y: int
    z: int
    probability: float


@dataclass
class SphericalSamples:
    """Samples on a spherical grid; rho in meters, angles in radians."""

    rho: np.ndarray
    theta: np.ndarray
    phi: np.ndarray
    probability: np.ndarray

    def __post_init__(self) -> None:
        _check_lengths(self.rho, self.theta, self.phi, self.probability)

    def __len__(self) -> int:
        return int(self.probability.shape[0])

    def argmax(self) -> int:
        return int(np.argmax(self.probability))


@dataclass
class CartesianSamples:
    """Samples at integer grid coordinates."""

    x: np.ndarray
    y: np.ndarray
    z: np.ndarray
    probability: np.ndarray

    def __post_init__(self) -> None:
        _check_lengths(self.x, self.y, self.z, self.probability)

    def __len__(self) -> int:
        return int(self.probability.shape[0])

    def __iter__(self) -> Iterator[CartesianPoint]:
        for x, y, z, p in zip(self.x, self.y, self.z, self.probability):
            yield CartesianPoint(int(x), int(y), int(z), float(p))

    def points(self) -> np.ndarray:
        """(N, 3) integer coordinate array."""
        return np.column_stack((self.x, self.y, self.z))

    def argmax(self) -> int:
        return int(np.argmax(self.probability))


def _check_lengths(*arrays: np.ndarray) -> None:
    if any(np.ndim(array) != 1 for array in arrays) or len({len(array) for array in arrays}) != 1:
        raise ValueError("Sample arrays must be one-dimensional and of equal length.")
