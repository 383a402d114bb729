"""Raw 4x4 grids for the transform factories.

Both :class:`vecmath.matrix.Matrix` and the packed matrix of the SIMD backend
are built from these arrays, so the entries each factory overrides live in one
place.
"""

from __future__ import annotations

import math
import operator
from typing import Tuple

import numpy as np

from .errors import IndexRangeError


def identity_array(dtype: np.dtype) -> np.ndarray:
    return np.identity(4, dtype=dtype)


def translation_array(dx: float, dy: float, dz: float, dtype: np.dtype) -> np.ndarray:
    r = identity_array(dtype)
    r[0, 3] = dx  # | 1 0 0 x |
    r[1, 3] = dy  # | 0 1 0 y |
    r[2, 3] = dz  # | 0 0 1 z |
    return r


def scale_array(sx: float, sy: float, sz: float, dtype: np.dtype) -> np.ndarray:
    r = identity_array(dtype)
    r[0, 0] = sx
    r[1, 1] = sy
    r[2, 2] = sz
    return r


def _cos_sin(theta: float) -> Tuple[float, float]:
    return math.cos(theta), math.sin(theta)


def rotate_x_array(theta: float, dtype: np.dtype) -> np.ndarray:
    ct, st = _cos_sin(theta)
    r = identity_array(dtype)
    r[1, 1] = r[2, 2] = ct
    r[1, 2] = -st
    r[2, 1] = st
    return r


def rotate_y_array(theta: float, dtype: np.dtype) -> np.ndarray:
    ct, st = _cos_sin(theta)
    r = identity_array(dtype)
    r[0, 0] = r[2, 2] = ct
    r[0, 2] = st
    r[2, 0] = -st
    return r


def rotate_z_array(theta: float, dtype: np.dtype) -> np.ndarray:
    ct, st = _cos_sin(theta)
    r = identity_array(dtype)
    r[0, 0] = r[1, 1] = ct
    r[0, 1] = -st
    r[1, 0] = st
    return r


def check_element_index(row: int, col: int) -> Tuple[int, int]:
    """Validate a ``(row, col)`` pair against the fixed ``[0, 3]`` range."""

    r = operator.index(row)
    c = operator.index(col)
    if not (0 <= r <= 3 and 0 <= c <= 3):
        raise IndexRangeError(f"Matrix.get({row}, {col}): indices must be within [0, 3]")
    return r, c


__all__ = [
    "identity_array",
    "translation_array",
    "scale_array",
    "rotate_x_array",
    "rotate_y_array",
    "rotate_z_array",
    "check_element_index",
]
