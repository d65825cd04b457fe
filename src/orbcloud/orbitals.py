from __future__ import annotations

from math import pi, sqrt
from typing import Callable, Union

import numpy as np

from orbcloud.quantum import QuantumState, UnsupportedOrbital, validate_quantum_numbers
from orbcloud.units import BOHR_RADIUS


ArrayLike = Union[float, np.ndarray]
OrbitalEvaluator = Callable[[ArrayLike, ArrayLike, ArrayLike], ArrayLike]
FormulaFactory = Callable[[int, float], OrbitalEvaluator]

_SQRT_PI = sqrt(pi)


def angular_phase(m: int, phi: ArrayLike) -> ArrayLike:
    """Complex azimuthal factor e^{i m phi}; the evaluators keep its real part."""
    return np.exp(1j * m * phi)


def _real_phase(m: int, phi: ArrayLike) -> ArrayLike:
    return np.real(angular_phase(m, phi))


# s-orbitals


def _psi_1s(m: int, a0: float) -> OrbitalEvaluator:
    def psi(rho, theta, phi):
        return (1.0 / _SQRT_PI) * (1.0 / a0) ** 1.5 * np.exp(-rho / a0)

    return psi


def _psi_2s(m: int, a0: float) -> OrbitalEvaluator:
    def psi(rho, theta, phi):
        return (
            (1.0 / (sqrt(32) * _SQRT_PI))
            * (1.0 / a0) ** 1.5
            * (2.0 - rho / a0)
            * np.exp(-rho / (2 * a0))
        )

    return psi


def _psi_3s(m: int, a0: float) -> OrbitalEvaluator:
    def psi(rho, theta, phi):
        return (
            (1.0 / (81 * sqrt(3) * _SQRT_PI))
            * (1.0 / a0) ** 1.5
            * (27.0 - (18.0 * rho) / a0 + (2 * rho**2) / a0**2)
            * np.exp(-rho / (3 * a0))
        )

    return psi


# p-orbitals


def _psi_2p(m: int, a0: float) -> OrbitalEvaluator:
    if m == 0:

        def psi(rho, theta, phi):
            return (
                (1.0 / (sqrt(32) * _SQRT_PI))
                * (1.0 / a0) ** 1.5
                * (rho / a0)
                * np.exp(-rho / (2 * a0))
                * np.cos(theta)
            )

    else:

        def psi(rho, theta, phi):
            return (
                (1.0 / (sqrt(64) * _SQRT_PI))
                * (1.0 / a0) ** 1.5
                * (rho / a0)
                * np.exp(-rho / (2 * a0))
                * np.sin(theta)
                * _real_phase(m, phi)
            )

    return psi


def _psi_3p(m: int, a0: float) -> OrbitalEvaluator:
    if m == 0:

        def psi(rho, theta, phi):
            return (
                (1.0 / 81.0)
                * (sqrt(2) / _SQRT_PI)
                * (1.0 / a0) ** 1.5
                * (6 * rho / a0 - rho**2 / a0**2)
                * np.exp(-rho / (3 * a0))
                * np.cos(theta)
            )

    else:

        def psi(rho, theta, phi):
            return (
                (1.0 / (81.0 * _SQRT_PI))
                * (1.0 / a0) ** 1.5
                * (6 * rho / a0 - rho**2 / a0**2)
                * np.exp(-rho / (3 * a0))
                * np.sin(theta)
                * _real_phase(m, phi)
            )

    return psi


# d-orbitals


def _psi_3d(m: int, a0: float) -> OrbitalEvaluator:
    if m == 0:

        def psi(rho, theta, phi):
            return (
                (1.0 / (81.0 * sqrt(6) * _SQRT_PI))
                * (1.0 / a0) ** 1.5
                * (rho / a0) ** 2
                * np.exp(-rho / (3 * a0))
                * (3 * np.cos(theta) ** 2 - 1)
            )

    elif abs(m) == 1:

        def psi(rho, theta, phi):
            return (
                (1.0 / (81.0 * _SQRT_PI))
                * (1.0 / a0) ** 1.5
                * (rho / a0) ** 2
                * np.exp(-rho / (3 * a0))
                * np.sin(theta)
                * np.cos(theta)
                * _real_phase(m, phi)
            )

    else:

        def psi(rho, theta, phi):
            return (
                (1.0 / (162.0 * _SQRT_PI))
                * (1.0 / a0) ** 1.5
                * (rho / a0) ** 2
                * np.exp(-rho / (3 * a0))
                * np.sin(theta) ** 2
                * _real_phase(m, phi)
            )

    return psi


_FORMULAS: dict[tuple[int, int], FormulaFactory] = {
    (1, 0): _psi_1s,
    (2, 0): _psi_2s,
    (3, 0): _psi_3s,
    (2, 1): _psi_2p,
    (3, 1): _psi_3p,
    (3, 2): _psi_3d,
}


def is_supported(state: QuantumState) -> bool:
    return (state.n, state.l) in _FORMULAS


def resolve(state: QuantumState, bohr_radius: float = BOHR_RADIUS) -> OrbitalEvaluator:
    """Return the wave function psi(rho, theta, phi) of the given orbital.

    rho is the radial distance in meters, theta the inclination and phi the
    azimuth, both in radians. Evaluators accept floats or equally shaped
    arrays.

    Raises:
        InvalidQuantumNumbers: n, l or m are out of bounds.
        UnsupportedOrbital: no closed form exists for the (n, l) subshell.
    """
    validate_quantum_numbers(state.n, state.l, state.m)
    factory = _FORMULAS.get((state.n, state.l))
    if factory is None:
        raise UnsupportedOrbital(state)
    return factory(state.m, bohr_radius)


def resolve_numbers(n: int, l: int, m: int, bohr_radius: float = BOHR_RADIUS) -> OrbitalEvaluator:
    return resolve(QuantumState(n, l, m), bohr_radius)
