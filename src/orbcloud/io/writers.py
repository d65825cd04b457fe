"""
Point-cloud writers.

Each writer consumes pruned ``CartesianSamples`` and serializes them; the
format is picked from the file extension by ``write_points``.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path

import numpy as np
import pyvista as pv

from orbcloud.samples import CartesianSamples
from orbcloud.sampling import RadialProfile

logger = logging.getLogger(__name__)

VTK_EXTENSIONS = {".vtk", ".vtp", ".ply"}


def write_obj(path: str | Path, points: CartesianSamples) -> Path:
    """One ``v X Y Z`` vertex line per point."""
    path = Path(path)
    logger.info(f"creating {str(path)!r}")
    with path.open("w", encoding="utf-8") as handle:
        for point in points:
            handle.write(f"v {float(point.x):.1f} {float(point.y):.1f} {float(point.z):.1f}\n")
    return path


def write_json(path: str | Path, points: CartesianSamples) -> Path:
    """One JSON record per line: {"X": .., "Y": .., "Z": .., "Prob": ..}."""
    path = Path(path)
    logger.info(f"creating {str(path)!r}")
    with path.open("w", encoding="utf-8") as handle:
        for point in points:
            record = {"X": point.x, "Y": point.y, "Z": point.z, "Prob": point.probability}
            handle.write(json.dumps(record) + "\n")
    return path


def to_polydata(points: CartesianSamples) -> pv.PolyData:
    cloud = pv.PolyData(points.points().astype(float))
    cloud["probability"] = np.asarray(points.probability, dtype=float)
    return cloud


def write_vtk(path: str | Path, points: CartesianSamples) -> Path:
    """Save as a pyvista point cloud with a 'probability' point-data array."""
    path = Path(path)
    if path.suffix.lower() not in VTK_EXTENSIONS:
        raise ValueError(f"Unsupported point-cloud extension '{path.suffix}'; expected one of {sorted(VTK_EXTENSIONS)}.")
    logger.info(f"creating {str(path)!r}")
    to_polydata(points).save(path)
    return path


def write_points(path: str | Path, points: CartesianSamples) -> Path:
    suffix = Path(path).suffix.lower()
    if suffix == ".obj":
        return write_obj(path, points)
    if suffix in {".json", ".jsonl"}:
        return write_json(path, points)
    if suffix in VTK_EXTENSIONS:
        return write_vtk(path, points)
    raise ValueError(f"Unsupported output format '{suffix}'.")


def write_profile_csv(path: str | Path, profile: RadialProfile) -> Path:
    path = Path(path)
    logger.info(f"creating {str(path)!r}")
    data = np.column_stack((profile.radius, profile.probability))
    np.savetxt(path, data, delimiter=",", header="radius,probability", comments="")
    return path
