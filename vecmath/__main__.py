import argparse
import logging
import math
from typing import List, Optional, Sequence, Tuple

from vecmath import (
    AlgebraConfig,
    Matrix,
    Point,
    VecmathError,
    apply_as_column,
    apply_as_row,
    available_backends,
    circle3pts,
    circle_radius,
    resolve_dtype,
    run_benchmarks,
    set_algebra_config,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_triple(value: str, *, default_z: Optional[float] = None) -> Tuple[float, float, float]:
    parts = [part.strip() for part in value.split(",") if part.strip()]
    if len(parts) == 2 and default_z is not None:
        parts.append(str(default_z))
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"expected X,Y,Z but got {value!r}")
    try:
        x, y, z = (float(part) for part in parts)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid coordinates {value!r}") from exc
    return x, y, z


def _parse_planar(value: str) -> Tuple[float, float, float]:
    return _parse_triple(value, default_z=0.0)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m vecmath",
        description="3D vector and matrix utilities",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--backend",
        choices=available_backends(),
        default="scalar",
        help="Algebra backend used for matrix products (default: scalar)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    circle = sub.add_parser("circle", help="Center of the circle through three points")
    circle.add_argument("points", nargs=3, type=_parse_planar, metavar="X,Y[,Z]")
    circle.add_argument(
        "--precision",
        choices=["single", "double"],
        default="double",
        help="Floating point precision (default: double)",
    )

    transform = sub.add_parser("transform", help="Apply rotations, scale and translation to a point")
    transform.add_argument("point", type=_parse_triple, metavar="X,Y,Z")
    transform.add_argument("--rotate-x", type=float, metavar="DEG", help="Rotation about X in degrees")
    transform.add_argument("--rotate-y", type=float, metavar="DEG", help="Rotation about Y in degrees")
    transform.add_argument("--rotate-z", type=float, metavar="DEG", help="Rotation about Z in degrees")
    transform.add_argument("--scale", type=_parse_triple, metavar="SX,SY,SZ")
    transform.add_argument("--translate", type=_parse_triple, metavar="DX,DY,DZ")
    transform.add_argument(
        "--row",
        action="store_true",
        help="Use the row-vector convention (v x M) instead of M x v",
    )

    bench = sub.add_parser("bench", help="Time the matrix products")
    bench.add_argument(
        "--iterations",
        type=int,
        default=10000,
        help="Calls per measurement (default: 10000)",
    )
    bench.add_argument(
        "--only",
        action="append",
        choices=available_backends(),
        help="Restrict to the given backend (repeatable)",
    )
    return parser


def _transform_steps(args: argparse.Namespace) -> List[Tuple[str, Matrix]]:
    steps: List[Tuple[str, Matrix]] = []
    if args.scale:
        steps.append(("scale", Matrix.scale(*args.scale)))
    if args.rotate_x is not None:
        steps.append(("rotate-x", Matrix.rotate_x(math.radians(args.rotate_x))))
    if args.rotate_y is not None:
        steps.append(("rotate-y", Matrix.rotate_y(math.radians(args.rotate_y))))
    if args.rotate_z is not None:
        steps.append(("rotate-z", Matrix.rotate_z(math.radians(args.rotate_z))))
    if args.translate:
        steps.append(("translate", Matrix.translation(*args.translate)))
    return steps


def _run_circle(args: argparse.Namespace) -> None:
    dtype = resolve_dtype(args.precision)
    a, b, c = (Point(*coords, dtype=dtype) for coords in args.points)
    center = circle3pts(a, b, c)
    print(f"center: {center}")
    print(f"radius: {float(circle_radius(a, b, c)):.8f}")


def _run_transform(args: argparse.Namespace) -> None:
    point = Point(*args.point)
    steps = _transform_steps(args)
    total = Matrix()
    for name, step in steps:
        logger.info("Applying %s", name)
        # steps apply in command-line order; row vectors use the transposed steps
        total = total @ step.transposed() if args.row else step @ total
    if args.row:
        result = apply_as_row(point, total)
    else:
        result = apply_as_column(total, point)
    print(f"matrix:\n{total}")
    print(f"result: {result}")


def _run_bench(args: argparse.Namespace) -> None:
    for result in run_benchmarks(args.iterations, args.only):
        print(result.describe())


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    set_algebra_config(AlgebraConfig(backend=args.backend))
    logger.info("Using %s backend", args.backend)

    handlers = {
        "circle": _run_circle,
        "transform": _run_transform,
        "bench": _run_bench,
    }
    try:
        handlers[args.command](args)
    except VecmathError as exc:
        logger.error("%s", exc)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
