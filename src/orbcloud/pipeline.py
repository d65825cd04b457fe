from __future__ import annotations

import logging

from orbcloud.config import SamplingConfig
from orbcloud.hybrids import canonical_kind, hybrid_orbitals
from orbcloud.orbitals import OrbitalEvaluator, resolve
from orbcloud.probability import normalize, prune
from orbcloud.quantum import QuantumState
from orbcloud.samples import CartesianSamples
from orbcloud.sampling import RadialProfile, radial_profile, sample

logger = logging.getLogger(__name__)


def point_cloud(psi: OrbitalEvaluator, config: SamplingConfig | None = None) -> CartesianSamples:
    """Sample, normalize and prune the probability field of ``psi``."""
    config = config or SamplingConfig()
    samples = sample(psi, config)
    normalize(samples)
    points = prune(samples, config.threshold, length_unit=config.length_unit)
    logger.info(f"Kept {len(points)} of {len(samples)} {config.strategy} samples (threshold {config.threshold:g}).")
    return points


def orbital_point_cloud(state: QuantumState, config: SamplingConfig | None = None) -> CartesianSamples:
    config = config or SamplingConfig()
    psi = resolve(state, config.bohr_radius)
    logger.info(f"Generating {state} point cloud.")
    return point_cloud(psi, config)


def hybrid_point_clouds(kind: str, config: SamplingConfig | None = None) -> list[CartesianSamples]:
    config = config or SamplingConfig()
    kind = canonical_kind(kind)
    clouds = []
    for index, psi in enumerate(hybrid_orbitals(kind, config.bohr_radius)):
        logger.info(f"Generating {kind} hybrid orbital {index} point cloud.")
        clouds.append(point_cloud(psi, config))
    return clouds


def orbital_profile(state: QuantumState, config: SamplingConfig | None = None) -> RadialProfile:
    config = config or SamplingConfig()
    return radial_profile(resolve(state, config.bohr_radius), config)


def orbital_file_name(state: QuantumState, extension: str = "obj") -> str:
    return f"{state.orbital_name}.{extension.lstrip('.')}"


def hybrid_file_name(kind: str, index: int, extension: str = "obj") -> str:
    return f"hybrid_orbital_{canonical_kind(kind)}_{index}.{extension.lstrip('.')}"
