"""Circle through three points in the X-Y plane."""

from __future__ import annotations

import logging
from typing import Tuple, Union

from .errors import DegenerateInputError
from .logging_utils import debug_log_call
from .tolerance import approx_equal
from .vector import Point, Vector, cross, midpoint

logger = logging.getLogger(__name__)

Location = Union[Point, Vector]


def _as_point(value: Location) -> Point:
    if isinstance(value, Point):
        return value
    return Point.from_homogeneous(value.as_array())


def _implicit_line(mid: Point, direction: Vector) -> Tuple[float, float, float]:
    # -ydir*x + xdir*y + (x0*ydir - y0*xdir) = 0
    return (
        -direction.y,
        direction.x,
        mid.x * direction.y - mid.y * direction.x,
    )


@debug_log_call(logger)
def circle3pts(a: Location, b: Location, c: Location) -> Point:
    """Return the center of the circle through ``a``, ``b`` and ``c``.

    The points are taken to lie in the X-Y plane: their Z coordinates are read
    but not used, and the returned center has ``z = 0``.  The colinearity test
    uses the full 3D cross product, so points colinear in X-Y but apart in Z
    are not rejected and yield a non-finite center.

    Raises:
        DegenerateInputError: the points are colinear (or coincide), so no
            circle passes through them.
    """

    a, b, c = _as_point(a), _as_point(b), _as_point(c)
    dirab = b - a
    dirbc = c - b
    if approx_equal(cross(dirab, dirbc).length(), 0.0):
        logger.debug("circle3pts: colinear input %s, %s, %s", a, b, c)
        raise DegenerateInputError("circle3pts: points a, b, c are colinear")

    midab = midpoint(a, b)
    midbc = midpoint(b, c)

    # perpendicular bisector directions
    midabdir = Vector(dirab.y, -dirab.x, 0.0, dtype=dirab.dtype).normalize()
    midbcdir = Vector(dirbc.y, -dirbc.x, 0.0, dtype=dirbc.dtype).normalize()

    l1 = _implicit_line(midab, midabdir)
    l2 = _implicit_line(midbc, midbcdir)

    # Cramer's rule on the two implicit line equations
    d = l1[0] * l2[1] - l2[0] * l1[1]
    x = (l1[1] * l2[2] - l2[1] * l1[2]) / d
    y = (l2[0] * l1[2] - l1[0] * l2[2]) / d
    return Point(x, y, 0.0, dtype=midab.dtype)


def circle_radius(a: Location, b: Location, c: Location):
    """Return the radius of the circle through ``a``, ``b`` and ``c``."""

    center = circle3pts(a, b, c)
    a = _as_point(a)
    return (Point(a.x, a.y, 0.0, dtype=a.dtype) - center).length()


__all__ = ["circle3pts", "circle_radius"]
