"""Packed 4-lane backend.

Each matrix row is held as one 4-wide lane array and the products are written
in terms of the packed primitives of an SSE3 register file: broadcast
(``set1``), lane-wise ``mul``/``add``, horizontal add (``hadd``) and the
``unpack``/``move`` shuffles used to transpose four rows in place.  numpy
performs each primitive as a single vectorized operation over the four lanes.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from ..factories import (
    check_element_index,
    identity_array,
    rotate_x_array,
    rotate_y_array,
    rotate_z_array,
    scale_array,
    translation_array,
)
from ..precision import DOUBLE, SINGLE, resolve_dtype
from .base import AlgebraBackend

Lane = np.ndarray


def set1(value, dtype: np.dtype) -> Lane:
    return np.full(4, value, dtype=dtype)


def mul(a: Lane, b: Lane) -> Lane:
    return np.multiply(a, b)


def add(a: Lane, b: Lane) -> Lane:
    return np.add(a, b)


def hadd(a: Lane, b: Lane) -> Lane:
    """``[a0+a1, a2+a3, b0+b1, b2+b3]``"""

    return np.concatenate((a[0::2] + a[1::2], b[0::2] + b[1::2]))


def unpacklo(a: Lane, b: Lane) -> Lane:
    """``[a0, b0, a1, b1]``"""

    return np.stack((a[:2], b[:2]), axis=1).reshape(4)


def unpackhi(a: Lane, b: Lane) -> Lane:
    """``[a2, b2, a3, b3]``"""

    return np.stack((a[2:], b[2:]), axis=1).reshape(4)


def movelh(a: Lane, b: Lane) -> Lane:
    """``[a0, a1, b0, b1]``"""

    return np.concatenate((a[:2], b[:2]))


def movehl(a: Lane, b: Lane) -> Lane:
    """``[b2, b3, a2, a3]``"""

    return np.concatenate((b[2:], a[2:]))


def vm_mult(v: Lane, rows: Sequence[Lane]) -> Lane:
    # broadcast each component of v across a row, then add across
    r0 = mul(set1(v[0], rows[0].dtype), rows[0])
    r1 = mul(set1(v[1], rows[1].dtype), rows[1])
    r2 = mul(set1(v[2], rows[2].dtype), rows[2])
    r3 = mul(set1(v[3], rows[3].dtype), rows[3])
    return add(add(r0, r1), add(r2, r3))


def mv_mult(rows: Sequence[Lane], v: Lane) -> Lane:
    # each row times v, then horizontal adds complete the dot products
    r0 = mul(rows[0], v)
    r1 = mul(rows[1], v)
    r2 = mul(rows[2], v)
    r3 = mul(rows[3], v)
    return hadd(hadd(r0, r1), hadd(r2, r3))


class PackedMatrix:
    """A 4x4 matrix stored as four packed rows.

    Defaults to identity.  Unlike :class:`vecmath.matrix.Matrix` this type is
    a working register set: :meth:`transpose` rewrites the rows in place.
    """

    __slots__ = ("rows",)

    def __init__(self, rows: Optional[Sequence[Lane]] = None, *, dtype=SINGLE) -> None:
        dtype = resolve_dtype(dtype)
        if rows is None:
            rows = identity_array(dtype)
        # lanes always hold floating values of one width
        self.rows: List[Lane] = [np.array(row, dtype=dtype) for row in rows]

    @classmethod
    def from_array(cls, grid: np.ndarray, dtype=None) -> "PackedMatrix":
        """Pack ``grid``; without ``dtype`` float grids keep their width, others become single."""

        arr = np.asarray(grid)
        if dtype is None:
            dtype = arr.dtype if arr.dtype in (SINGLE, DOUBLE) else SINGLE
        return cls([arr[i] for i in range(4)], dtype=dtype)

    @classmethod
    def translation(cls, dx: float, dy: float, dz: float, *, dtype=SINGLE) -> "PackedMatrix":
        return cls.from_array(translation_array(dx, dy, dz, dtype), dtype)

    @classmethod
    def scale(cls, sx: float, sy: float, sz: float, *, dtype=SINGLE) -> "PackedMatrix":
        return cls.from_array(scale_array(sx, sy, sz, dtype), dtype)

    @classmethod
    def rotate_x(cls, theta: float, *, dtype=SINGLE) -> "PackedMatrix":
        return cls.from_array(rotate_x_array(theta, dtype), dtype)

    @classmethod
    def rotate_y(cls, theta: float, *, dtype=SINGLE) -> "PackedMatrix":
        return cls.from_array(rotate_y_array(theta, dtype), dtype)

    @classmethod
    def rotate_z(cls, theta: float, *, dtype=SINGLE) -> "PackedMatrix":
        return cls.from_array(rotate_z_array(theta, dtype), dtype)

    @property
    def dtype(self) -> np.dtype:
        return self.rows[0].dtype

    def get(self, row: int, col: int) -> float:
        r, c = check_element_index(row, col)
        return float(self.rows[r][c])

    def transpose(self) -> "PackedMatrix":
        r0, r1, r2, r3 = self.rows
        tmp0 = unpacklo(r0, r1)
        tmp1 = unpackhi(r0, r1)
        tmp2 = unpacklo(r2, r3)
        tmp3 = unpackhi(r2, r3)
        self.rows = [
            movelh(tmp0, tmp2),
            movehl(tmp2, tmp0),
            movelh(tmp1, tmp3),
            movehl(tmp3, tmp1),
        ]
        return self

    def to_array(self) -> np.ndarray:
        return np.stack(self.rows)

    def __repr__(self) -> str:
        return f"PackedMatrix(rows={[row.tolist() for row in self.rows]!r}, dtype={self.dtype})"


class SimdBackend(AlgebraBackend):
    name = "simd"

    def mat_mat(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        dtype = np.result_type(a, b)
        columns = PackedMatrix.from_array(b, dtype).transpose()
        rows = PackedMatrix.from_array(a, dtype).rows
        return np.stack([mv_mult(columns.rows, row) for row in rows])

    def row_vec_mat(self, v: np.ndarray, m: np.ndarray) -> np.ndarray:
        dtype = np.result_type(v, m)
        packed = PackedMatrix.from_array(m, dtype)
        return vm_mult(np.asarray(v, dtype=dtype), packed.rows)

    def mat_col_vec(self, m: np.ndarray, v: np.ndarray) -> np.ndarray:
        dtype = np.result_type(m, v)
        columns = PackedMatrix.from_array(m, dtype).transpose()
        return vm_mult(np.asarray(v, dtype=dtype), columns.rows)

    def transpose(self, m: np.ndarray) -> np.ndarray:
        return PackedMatrix.from_array(m).transpose().to_array()


__all__ = [
    "PackedMatrix",
    "SimdBackend",
    "set1",
    "mul",
    "add",
    "hadd",
    "unpacklo",
    "unpackhi",
    "movelh",
    "movehl",
    "vm_mult",
    "mv_mult",
]
