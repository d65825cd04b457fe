from __future__ import annotations

import logging
from dataclasses import dataclass
from math import pi

import numpy as np

from orbcloud.config import SamplingConfig
from orbcloud.coordinates import to_spherical
from orbcloud.orbitals import OrbitalEvaluator
from orbcloud.probability import normalize_array, radial_probability
from orbcloud.samples import CartesianSamples, SphericalSamples

logger = logging.getLogger(__name__)

# Tolerance for deciding whether a range end falls on a grid step.
_EPS = 1e-9


def _axis(stop: float, step: float, inclusive: bool) -> np.ndarray:
    """Values 0, step, 2*step, ... up to ``stop``; ``stop`` itself only when inclusive."""
    count = int(np.floor(stop / step + _EPS))
    values = step * np.arange(count + 1, dtype=float)
    if not inclusive and values.size and np.isclose(values[-1], stop, rtol=_EPS, atol=0.0):
        values = values[:-1]
    return values


def spherical_axes(config: SamplingConfig) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Theta, phi and rho axes of the spherical-shell grid.

    theta covers [0, pi], or [0, 2 pi) with ``full_inclination``; phi covers
    [0, 2 pi) and rho [0, max_radius).
    """
    if config.full_inclination:
        thetas = _axis(2 * pi, config.angular_step, inclusive=False)
    else:
        thetas = _axis(pi, config.angular_step, inclusive=True)
    phis = _axis(2 * pi, config.angular_step, inclusive=False)
    rhos = _axis(config.max_radius, config.radial_step, inclusive=False)
    return thetas, phis, rhos


def cube_axis(config: SamplingConfig) -> np.ndarray:
    """Coordinates of the cube grid along one axis, covering [-extent, extent]."""
    half = _axis(config.cube_extent, config.cube_step, inclusive=True)
    return np.concatenate((-half[:0:-1], half))


def sample_spherical(psi: OrbitalEvaluator, config: SamplingConfig) -> SphericalSamples:
    """Evaluate the radial probability at every (rho, theta, phi) of the shell grid.

    Samples are ordered with theta outermost and rho innermost.
    """
    thetas, phis, rhos = spherical_axes(config)
    theta, phi, rho = np.meshgrid(thetas, phis, rhos, indexing="ij")
    amplitude = np.broadcast_to(psi(rho, theta, phi), rho.shape)
    probability = radial_probability(rho, amplitude)
    logger.debug(f"Sampled {probability.size} points on a {thetas.size}x{phis.size}x{rhos.size} spherical grid.")
    return SphericalSamples(
        rho=rho.ravel(),
        theta=theta.ravel(),
        phi=phi.ravel(),
        probability=np.array(probability, dtype=float).ravel(),
    )


def sample_cartesian(psi: OrbitalEvaluator, config: SamplingConfig) -> CartesianSamples:
    """Evaluate the radial probability on the cube grid.

    Each point is converted to spherical coordinates before evaluation and
    stored under its integer grid index (coordinate / cube_step, rounded).
    Samples are ordered with x outermost and z innermost.
    """
    axis = cube_axis(config)
    x, y, z = np.meshgrid(axis, axis, axis, indexing="ij")
    rho, theta, phi = to_spherical(x, y, z)
    amplitude = np.broadcast_to(psi(rho, theta, phi), rho.shape)
    probability = radial_probability(rho, amplitude)
    logger.debug(f"Sampled {probability.size} points on a {axis.size}^3 cube grid.")
    step = config.cube_step
    return CartesianSamples(
        x=np.rint(x / step).astype(np.int64).ravel(),
        y=np.rint(y / step).astype(np.int64).ravel(),
        z=np.rint(z / step).astype(np.int64).ravel(),
        probability=np.array(probability, dtype=float).ravel(),
    )


def sample(psi: OrbitalEvaluator, config: SamplingConfig) -> SphericalSamples | CartesianSamples:
    if config.strategy == "cartesian":
        return sample_cartesian(psi, config)
    return sample_spherical(psi, config)


@dataclass(frozen=True)
class RadialProfile:
    radius: np.ndarray
    probability: np.ndarray

    def most_probable_radius(self) -> float:
        return float(self.radius[int(np.argmax(self.probability))])


def radial_profile(
    psi: OrbitalEvaluator,
    config: SamplingConfig,
    theta: float = 15.0,
    phi: float = 30.0,
) -> RadialProfile:
    """Normalized radial probability along one direction (angles in radians).

    Radii are returned in ``config.length_unit``.
    """
    rho = _axis(config.max_radius, config.radial_step, inclusive=False)
    amplitude = np.broadcast_to(psi(rho, theta, phi), rho.shape)
    probability = normalize_array(np.array(radial_probability(rho, amplitude), dtype=float))
    return RadialProfile(radius=rho / config.length_unit, probability=probability)
