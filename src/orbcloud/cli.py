from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from orbcloud.config import STRATEGIES, SamplingConfig
from orbcloud.hybrids import canonical_kind, hybrid_aliases, hybrid_kinds
from orbcloud.io.writers import write_points, write_profile_csv
from orbcloud.logging_config import setup_logging
from orbcloud.pipeline import (
    hybrid_file_name,
    hybrid_point_clouds,
    orbital_file_name,
    orbital_point_cloud,
    orbital_profile,
)
from orbcloud.quantum import OrbitalError, QuantumState, parse_state, supported_states

logger = logging.getLogger("orbcloud.cli")


def _add_sampling_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_argument_group("sampling")
    group.add_argument("--strategy", choices=STRATEGIES, default="spherical")
    group.add_argument("--angular-step", help="angle step, e.g. '4 deg' (bare numbers in degrees)")
    group.add_argument("--radial-step", help="radius step, e.g. '1 pm' (bare numbers in pm)")
    group.add_argument("--max-radius", help="spherical sampling radius, e.g. '1.3 nm'")
    group.add_argument("--full-inclination", action="store_true", help="sample theta over [0, 2 pi)")
    group.add_argument("--cube-extent", help="half width of the Cartesian cube")
    group.add_argument("--cube-step", help="step of the Cartesian cube (also its grid unit)")
    group.add_argument("--threshold", type=float, help="probability threshold for pruning")


def config_from_args(args: argparse.Namespace) -> SamplingConfig:
    return SamplingConfig.from_quantities(
        strategy=args.strategy,
        angular_step=args.angular_step,
        radial_step=args.radial_step,
        max_radius=args.max_radius,
        full_inclination=args.full_inclination,
        cube_extent=args.cube_extent,
        cube_step=args.cube_step,
        threshold=args.threshold,
    )


def _selected_states(args: argparse.Namespace) -> list[QuantumState]:
    if args.orbital:
        return [parse_state(text) for text in args.orbital]
    return supported_states()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orbcloud",
        description="Generate point clouds of hydrogen-like atomic orbitals.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    parser.add_argument("--log-file", help="also write the log to this file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="write one point cloud per orbital")
    generate.add_argument("-o", "--output-dir", type=Path, default=Path("."))
    generate.add_argument("--format", default="obj", choices=("obj", "json", "vtk", "vtp", "ply"))
    generate.add_argument(
        "--orbital",
        action="append",
        metavar="N,L,M",
        help="orbital to generate (repeatable); defaults to every supported orbital",
    )
    generate.add_argument(
        "--hybrid",
        action="append",
        choices=hybrid_kinds() + hybrid_aliases(),
        help="also generate the hybrid orbitals of this kind (repeatable)",
    )
    generate.add_argument(
        "--skip-unsupported",
        action="store_true",
        help="log and skip orbitals without a closed form instead of aborting",
    )
    _add_sampling_arguments(generate)

    profile = subparsers.add_parser("profile", help="write radial probability profiles as CSV")
    profile.add_argument("-o", "--output-dir", type=Path, default=Path("."))
    profile.add_argument("--orbital", action="append", metavar="N,L,M")
    _add_sampling_arguments(profile)
    return parser


def run_generate(args: argparse.Namespace) -> int:
    config = config_from_args(args)
    args.output_dir.mkdir(parents=True, exist_ok=True)
    for state in _selected_states(args):
        try:
            points = orbital_point_cloud(state, config)
        except OrbitalError as exc:
            if not args.skip_unsupported:
                logger.error(f"Aborting: {exc}")
                return 1
            logger.warning(f"Skipping {state}: {exc}")
            continue
        write_points(args.output_dir / orbital_file_name(state, args.format), points)
    kinds = list(dict.fromkeys(canonical_kind(kind) for kind in args.hybrid or []))
    for kind in kinds:
        for index, points in enumerate(hybrid_point_clouds(kind, config)):
            write_points(args.output_dir / hybrid_file_name(kind, index, args.format), points)
    return 0


def run_profile(args: argparse.Namespace) -> int:
    config = config_from_args(args)
    args.output_dir.mkdir(parents=True, exist_ok=True)
    for state in _selected_states(args):
        profile = orbital_profile(state, config)
        logger.info(f"{state}: most probable radius {profile.most_probable_radius():.1f}")
        write_profile_csv(args.output_dir / f"{state.orbital_name}_radial.csv", profile)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)
    try:
        if args.command == "generate":
            return run_generate(args)
        return run_profile(args)
    except (OrbitalError, ValueError) as exc:
        logger.error(str(exc))
        return 1


if __name__ == "__main__":
    sys.exit(main())
