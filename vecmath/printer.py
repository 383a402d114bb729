"""Fixed-format text rendering of vectors, points and matrices."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Union

from .precision import display_precision

if TYPE_CHECKING:  # pragma: no cover
    from .matrix import Matrix
    from .vector import Point, Vector


def _fixed(values: Iterable[float], digits: int) -> str:
    return ", ".join(f"{value:.{digits}f}" for value in values)


def format_vector(v: "Union[Vector, Point]") -> str:
    """Render ``v`` as ``[x, y, z, w]`` (5 digits for single, 8 for double precision)."""

    digits = display_precision(v.dtype)
    return f"[{_fixed(v, digits)}]"


def format_matrix(m: "Matrix") -> str:
    """Render ``m`` as a bracketed grid, one row per line."""

    digits = display_precision(m.dtype)
    lines = [f"[{_fixed(row, digits)}]" for row in m.rows()]
    return "[" + ",\n ".join(lines) + "]"


__all__ = ["format_vector", "format_matrix"]
