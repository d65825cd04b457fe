from __future__ import annotations

from typing import Union

import numpy as np


ArrayLike = Union[float, np.ndarray]


def to_cartesian(rho: ArrayLike, theta: ArrayLike, phi: ArrayLike) -> tuple[ArrayLike, ArrayLike, ArrayLike]:
    """Map (rho, theta, phi) to (x, y, z).

    theta is the inclination from the +z axis and phi the azimuth in the
    xy-plane, measured from +x.
    """
    sin_theta = np.sin(theta)
    x = rho * sin_theta * np.cos(phi)
    y = rho * sin_theta * np.sin(phi)
    z = rho * np.cos(theta)
    return x, y, z


def to_spherical(x: ArrayLike, y: ArrayLike, z: ArrayLike) -> tuple[ArrayLike, ArrayLike, ArrayLike]:
    """Map (x, y, z) to (rho, theta, phi) with theta in [0, pi], phi in (-pi, pi].

    Both angles come from arctan2, so points on the axes and in every octant
    land on the right branch. The origin maps to (0, 0, 0).
    """
    planar = np.hypot(x, y)
    rho = np.sqrt(x**2 + y**2 + z**2)
    theta = np.arctan2(planar, z)
    phi = np.arctan2(y, x)
    return rho, theta, phi
