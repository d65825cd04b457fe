from __future__ import annotations

import logging

import numpy as np

from orbcloud.coordinates import to_cartesian
from orbcloud.samples import CartesianSamples, SphericalSamples
from orbcloud.units import PICOMETER

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 1.0e-11


def radial_probability(rho, psi):
    """Probability of the electron in a thin shell of radius rho: 4 pi rho^2 psi^2.

    The result is not normalized. NaN and inf inputs propagate.
    """
    area = 4.0 * np.pi * np.power(rho, 2)
    return area * np.power(psi, 2)


def normalize_array(probability: np.ndarray) -> np.ndarray:
    """Divide ``probability`` by its sum in place, unless the sum is exactly zero."""
    total = float(np.sum(probability))
    if total != 0:
        probability /= total
    else:
        logger.debug("Probabilities sum to zero; skipping normalization.")
    return probability


def normalize(samples: SphericalSamples | CartesianSamples) -> SphericalSamples | CartesianSamples:
    """Rescale the probabilities of a sample set in place so that they sum to 1.

    Grid resolution changes the raw magnitudes but not the normalized shape.
    A set whose probabilities sum to exactly zero is returned unmodified.
    """
    normalize_array(samples.probability)
    return samples


def prune(
    samples: SphericalSamples | CartesianSamples,
    threshold: float = DEFAULT_THRESHOLD,
    length_unit: float = PICOMETER,
) -> CartesianSamples:
    """Keep samples with probability >= threshold, preserving their order.

    Spherical samples are converted to Cartesian coordinates and rounded to
    integer multiples of ``length_unit``; Cartesian samples are already on
    their integer grid.
    """
    keep = samples.probability >= threshold
    if isinstance(samples, SphericalSamples):
        x, y, z = to_cartesian(samples.rho[keep], samples.theta[keep], samples.phi[keep])
        pruned = CartesianSamples(
            x=np.rint(x / length_unit).astype(np.int64),
            y=np.rint(y / length_unit).astype(np.int64),
            z=np.rint(z / length_unit).astype(np.int64),
            probability=samples.probability[keep],
        )
    else:
        pruned = CartesianSamples(
            x=samples.x[keep],
            y=samples.y[keep],
            z=samples.z[keep],
            probability=samples.probability[keep],
        )
    logger.debug(f"Pruned {len(samples) - len(pruned)} of {len(samples)} samples below {threshold:g}.")
    return pruned
