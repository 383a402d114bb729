"""4x4 homogeneous transforms and the matrix/vector products."""

from __future__ import annotations

from typing import Any, Optional, Tuple, TypeVar

import numpy as np

from .config import get_backend
from .factories import (
    check_element_index,
    identity_array,
    rotate_x_array,
    rotate_y_array,
    rotate_z_array,
    scale_array,
    translation_array,
)
from .precision import resolve_dtype
from .printer import format_matrix
from .tolerance import EPS
from .vector import Point, Vector

H = TypeVar("H", Vector, Point)


class Matrix:
    """A 4x4 transform in homogeneous coordinates.

    The default value is the identity.  Instances are built by the factory
    class methods or by composing other matrices and are never modified
    afterwards; :meth:`get` is the only element accessor.
    """

    __slots__ = ("_m",)

    def __init__(self, *, dtype: Any = None) -> None:
        self._m = identity_array(resolve_dtype(dtype))

    @classmethod
    def _wrap(cls, grid: np.ndarray) -> "Matrix":
        obj = cls.__new__(cls)
        obj._m = grid
        return obj

    @classmethod
    def translation(cls, dx: float, dy: float, dz: float, *, dtype: Any = None) -> "Matrix":
        return cls._wrap(translation_array(dx, dy, dz, resolve_dtype(dtype)))

    @classmethod
    def scale(cls, sx: float, sy: float, sz: float, *, dtype: Any = None) -> "Matrix":
        return cls._wrap(scale_array(sx, sy, sz, resolve_dtype(dtype)))

    @classmethod
    def rotate_x(cls, theta: float, *, dtype: Any = None) -> "Matrix":
        """Rotation by ``theta`` radians about the X axis."""

        return cls._wrap(rotate_x_array(theta, resolve_dtype(dtype)))

    @classmethod
    def rotate_y(cls, theta: float, *, dtype: Any = None) -> "Matrix":
        """Rotation by ``theta`` radians about the Y axis."""

        return cls._wrap(rotate_y_array(theta, resolve_dtype(dtype)))

    @classmethod
    def rotate_z(cls, theta: float, *, dtype: Any = None) -> "Matrix":
        """Rotation by ``theta`` radians about the Z axis."""

        return cls._wrap(rotate_z_array(theta, resolve_dtype(dtype)))

    @property
    def dtype(self) -> np.dtype:
        return self._m.dtype

    def get(self, row: int, col: int):
        """Return the element at ``(row, col)``; both indices must be in ``[0, 3]``."""

        r, c = check_element_index(row, col)
        return self._m[r, c]

    def rows(self) -> Tuple[Tuple[float, float, float, float], ...]:
        return tuple(tuple(row) for row in self._m.tolist())

    def to_array(self) -> np.ndarray:
        return self._m.copy()

    def copy(self) -> "Matrix":
        return Matrix._wrap(self._m.copy())

    __copy__ = copy

    def __deepcopy__(self, memo) -> "Matrix":
        return self.copy()

    def transposed(self, *, backend: Optional[str] = None) -> "Matrix":
        return Matrix._wrap(get_backend(backend).transpose(self._m))

    def isclose(self, other: "Matrix", epsilon: float = EPS) -> bool:
        return bool(np.all(np.abs(self._m - other._m) < epsilon))

    def compose(self, other: "Matrix", *, backend: Optional[str] = None) -> "Matrix":
        """Return ``self x other``."""

        return compose(self, other, backend=backend)

    def apply_as_row(self, v: H, *, backend: Optional[str] = None) -> H:
        """Return ``v x self`` with ``v`` read as a 1x4 row."""

        return apply_as_row(v, self, backend=backend)

    def apply_as_column(self, v: H, *, backend: Optional[str] = None) -> H:
        """Return ``self x v`` with ``v`` read as a 4x1 column."""

        return apply_as_column(self, v, backend=backend)

    def __matmul__(self, other: Any) -> "Matrix":
        # vectors go through apply_as_row / apply_as_column explicitly
        if not isinstance(other, Matrix):
            return NotImplemented
        return compose(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix(rows={self._m.tolist()!r}, dtype={self.dtype})"

    def __str__(self) -> str:
        return format_matrix(self)


def compose(a: Matrix, b: Matrix, *, backend: Optional[str] = None) -> Matrix:
    """Matrix x Matrix product ``a x b`` (not commutative)."""

    return Matrix._wrap(get_backend(backend).mat_mat(a._m, b._m))


def apply_as_row(v: H, m: Matrix, *, backend: Optional[str] = None) -> H:
    """Row-vector product: ``r[j] = sum_i v[i] * m[i][j]``.

    Transforms compose left to right, ``v x M1 x M2``.  The result keeps the
    role of ``v`` and the computed ``w``.
    """

    result = get_backend(backend).row_vec_mat(v.as_array(), m._m)
    return type(v).from_homogeneous(result)


def apply_as_column(m: Matrix, v: H, *, backend: Optional[str] = None) -> H:
    """Column-vector product: ``r[i] = sum_j m[i][j] * v[j]``.

    Transforms compose right to left, ``M2 x (M1 x v)``.  The result keeps the
    role of ``v`` and the computed ``w``.
    """

    result = get_backend(backend).mat_col_vec(m._m, v.as_array())
    return type(v).from_homogeneous(result)


__all__ = [
    "Matrix",
    "compose",
    "apply_as_row",
    "apply_as_column",
]
