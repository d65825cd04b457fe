from __future__ import annotations

from dataclasses import dataclass
from math import sqrt
from typing import Sequence

from orbcloud.orbitals import OrbitalEvaluator, resolve
from orbcloud.quantum import QuantumState
from orbcloud.units import BOHR_RADIUS


# Base orbitals of the second shell: 2s and the three 2p orientations.
S_2 = QuantumState(2, 0, 0)
P_Z = QuantumState(2, 1, 0)
P_X = QuantumState(2, 1, +1)
P_Y = QuantumState(2, 1, -1)


@dataclass(frozen=True)
class HybridRecipe:
    """prefactor * sum(coefficient * psi) over the listed base orbitals."""

    prefactor: float
    terms: tuple[tuple[float, QuantumState], ...]


# ref: https://winter.group.shef.ac.uk/orbitron/AO-hybrids/
HYBRID_RECIPES: dict[str, tuple[HybridRecipe, ...]] = {
    "sp": (
        HybridRecipe(1.0 / sqrt(2), ((1.0, S_2), (+1.0, P_Z))),
        HybridRecipe(1.0 / sqrt(2), ((1.0, S_2), (-1.0, P_Z))),
    ),
    "sp^2": (
        HybridRecipe(1.0 / sqrt(3), ((1.0, S_2), (+sqrt(2), P_Z))),
        HybridRecipe(1.0 / sqrt(3), ((1.0, S_2), (-1.0 / sqrt(2), P_X), (+sqrt(3.0 / 2.0), P_Y))),
        HybridRecipe(1.0 / sqrt(3), ((1.0, S_2), (-1.0 / sqrt(2), P_X), (-sqrt(3.0 / 2.0), P_Y))),
    ),
    "sp^3": (
        HybridRecipe(1.0 / 2.0, ((1.0, S_2), (+1.0, P_X), (+1.0, P_Y), (+1.0, P_Z))),
        HybridRecipe(1.0 / 2.0, ((1.0, S_2), (+1.0, P_X), (-1.0, P_Y), (-1.0, P_Z))),
        HybridRecipe(1.0 / 2.0, ((1.0, S_2), (-1.0, P_X), (+1.0, P_Y), (-1.0, P_Z))),
        HybridRecipe(1.0 / 2.0, ((1.0, S_2), (-1.0, P_X), (-1.0, P_Y), (+1.0, P_Z))),
    ),
}

_ALIASES = {"sp2": "sp^2", "sp3": "sp^3"}


def compose(prefactor: float, terms: Sequence[tuple[float, OrbitalEvaluator]]) -> OrbitalEvaluator:
    """Linear combination prefactor * (c_1 psi_1 + c_2 psi_2 + ...)."""
    terms = tuple(terms)
    if not terms:
        raise ValueError("A hybrid orbital needs at least one base orbital.")

    def psi(rho, theta, phi):
        (first_coefficient, first), rest = terms[0], terms[1:]
        total = first_coefficient * first(rho, theta, phi)
        for coefficient, base in rest:
            total = total + coefficient * base(rho, theta, phi)
        return prefactor * total

    return psi


def build_hybrid(recipe: HybridRecipe, bohr_radius: float = BOHR_RADIUS) -> OrbitalEvaluator:
    terms = [(coefficient, resolve(state, bohr_radius)) for coefficient, state in recipe.terms]
    return compose(recipe.prefactor, terms)


def hybrid_kinds() -> list[str]:
    return list(HYBRID_RECIPES)


def hybrid_aliases() -> list[str]:
    return list(_ALIASES)


def canonical_kind(kind: str) -> str:
    """Map "sp2"/"sp3" onto "sp^2"/"sp^3"; raise ValueError for unknown kinds."""
    key = _ALIASES.get(kind, kind)
    if key not in HYBRID_RECIPES:
        raise ValueError(f"Unknown hybrid kind '{kind}'; expected one of {hybrid_kinds()}.")
    return key


def hybrid_orbitals(kind: str, bohr_radius: float = BOHR_RADIUS) -> list[OrbitalEvaluator]:
    """Evaluators of every hybrid orbital of ``kind`` ("sp", "sp^2"/"sp2", "sp^3"/"sp3")."""
    recipes = HYBRID_RECIPES[canonical_kind(kind)]
    return [build_hybrid(recipe, bohr_radius) for recipe in recipes]
