"""Command-line interface."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from spritemesh.builders import build_shape
from spritemesh.config import DEFAULT_PRESETS_PATH, DEFAULT_SIDES
from spritemesh.logging_config import setup_logging
from spritemesh.model.io import IOManager
from spritemesh.model.params import QuadrangleParams, EllipseParams, PointedCircleParams, ShapeParams

logger = logging.getLogger("spritemesh.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spritemesh",
        description="Build a procedural 2D sprite mesh and its collider",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s ellipse --rh 2 --rv 1 --sides 24 --plot
  %(prog)s pointed-circle --radius 1 --sides 16 --shift 3 0 --export drop.vtp
  %(prog)s quadrangle --points 0 0 1 0 1 1 0 1 --save quad.h5
  %(prog)s preset teardrop
        """
    )
    parser.add_argument("--save", metavar="PATH", help="Save parameters and geometry to an HDF5 file")
    parser.add_argument("--export", metavar="PATH", help="Export the mesh through PyVista (.vtp, .vtk, .ply, ...)")
    parser.add_argument("--plot", action="store_true", help="Show a matplotlib preview")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    parser.add_argument(
        "--builder-log-level", default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Level of the builder loggers (default: same as --log-level)"
    )

    shapes = parser.add_subparsers(dest="shape", required=True)

    quad = shapes.add_parser("quadrangle", help="Four arbitrary points")
    quad.add_argument(
        "--points", nargs=8, type=float, metavar="C",
        default=[0.0, 0.0, 1.0, 0.0, 1.0, 1.0, 0.0, 1.0],
        help="x0 y0 x1 y1 x2 y2 x3 y3 (default: unit square)"
    )

    ellipse = shapes.add_parser("ellipse", help="Ellipse or circle fan")
    ellipse.add_argument("--rh", type=float, default=1.0, help="Horizontal radius")
    ellipse.add_argument("--rv", type=float, default=1.0, help="Vertical radius")
    ellipse.add_argument("--sides", type=int, default=DEFAULT_SIDES)

    pointed = shapes.add_parser("pointed-circle", help="Circle fan with a shifted apex")
    pointed.add_argument("--radius", type=float, default=1.0)
    pointed.add_argument("--sides", type=int, default=DEFAULT_SIDES)
    pointed.add_argument("--shift", nargs=2, type=float, metavar=("X", "Y"), default=[0.0, 0.0])

    preset = shapes.add_parser("preset", help="Named shape from a preset catalog")
    preset.add_argument("name")
    preset.add_argument("--presets", default=DEFAULT_PRESETS_PATH, help="JSON preset catalog")

    return parser


def params_from_args(args: argparse.Namespace) -> ShapeParams:
    match args.shape:
        case "quadrangle":
            c = args.points
            return QuadrangleParams(vertices=tuple(zip(c[0::2], c[1::2])))
        case "ellipse":
            return EllipseParams(radius_horizontal=args.rh, radius_vertical=args.rv, sides=args.sides)
        case "pointed-circle":
            return PointedCircleParams(radius=args.radius, sides=args.sides, shift=tuple(args.shift))
        case "preset":
            presets = IOManager.load_presets(args.presets)
            if args.name not in presets:
                raise KeyError(f"Unknown preset '{args.name}'. Available: {', '.join(sorted(presets))}")
            return presets[args.name]
    raise ValueError(f"Unknown shape '{args.shape}'")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(
        level=getattr(logging, args.log_level),
        log_file=args.log_file,
        builder_level=getattr(logging, args.builder_log_level) if args.builder_log_level else None,
    )

    try:
        params = params_from_args(args)
    except (KeyError, IOError) as e:
        logger.error(f"Nothing built: {e}")
        return 1

    result = build_shape(params)
    if not result.ok:
        logger.error(f"Nothing built: {result.error} [{result.error.issue}]")
        return 1

    mesh, collider = result.unwrap()
    logger.info(
        f"Built {params.kind}: {mesh.vertex_count} vertices, {mesh.triangle_count} triangles, "
        f"area {mesh.area:.4f}, collider '{collider.kind}'."
    )

    if args.save:
        IOManager.save_shape(result.params, args.save, result)
    if args.export:
        # Delayed import: PyVista pulls in VTK, only needed here
        from spritemesh.view.vtk_utils import VtkUtils
        VtkUtils.export(mesh, args.export)
    if args.plot:
        from spritemesh.view.plot import plot_shape
        plot_shape(mesh, collider, title=str(params.kind))

    return 0


if __name__ == "__main__":
    sys.exit(main())
