"""Homogeneous 4-component directions (:class:`Vector`) and locations (:class:`Point`).

Both roles store ``(x, y, z, w)`` in one numpy array of shape ``(4,)``; they
differ only in which operations they allow.  ``w`` is 1 for every value built
by a constructor or by the arithmetic below; only the matrix products may
produce another ``w``.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Union

import numpy as np

from .precision import combine, resolve_dtype
from .printer import format_vector
from .tolerance import EPS, approx_equal, snap_zero


def _storage(x: float, y: float, z: float, w: float, dtype: np.dtype) -> np.ndarray:
    return np.array([x, y, z, w], dtype=dtype)


def _coerce_homogeneous(values: Iterable[float], dtype: Any) -> np.ndarray:
    arr = np.array(values, dtype=None if dtype is None else resolve_dtype(dtype))
    if arr.shape != (4,):
        raise ValueError(f"homogeneous coordinates need 4 components, got shape {arr.shape}")
    if dtype is None and arr.dtype not in (np.float32, np.float64):
        arr = arr.astype(np.float64)
    return arr


def _component(index: int, doc: str) -> property:
    def getter(self):
        return self._v[index]

    return property(getter, doc=doc)


def _components(value: Any) -> np.ndarray:
    if isinstance(value, (Vector, Point)):
        return value._v
    return np.asarray(value, dtype=float)


def _offset(a: np.ndarray, b: np.ndarray, sign: float) -> np.ndarray:
    out = np.empty(4, dtype=combine(a.dtype, b.dtype))
    out[:3] = a[:3] + b[:3] if sign > 0 else a[:3] - b[:3]
    out[3] = 1
    return out


def _isclose(a: np.ndarray, b: Any, epsilon: float) -> bool:
    diff = np.abs(a - _components(b))
    return bool(np.all(diff < epsilon))


class Vector:
    """A direction in 3D space."""

    __slots__ = ("_v",)

    x = _component(0, "X component.")
    y = _component(1, "Y component.")
    z = _component(2, "Z component.")
    w = _component(3, "Homogeneous W component.")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, *, dtype: Any = None) -> None:
        self._v = _storage(x, y, z, 1.0, resolve_dtype(dtype))

    @classmethod
    def from_homogeneous(cls, values: Iterable[float], dtype: Any = None) -> "Vector":
        """Build a vector from four components, keeping ``w`` as given."""

        return cls._wrap(_coerce_homogeneous(values, dtype))

    @classmethod
    def _wrap(cls, arr: np.ndarray) -> "Vector":
        obj = cls.__new__(cls)
        obj._v = arr
        return obj

    @classmethod
    def x_unit(cls, dtype: Any = None) -> "Vector":
        return cls(1.0, 0.0, 0.0, dtype=dtype)

    @classmethod
    def y_unit(cls, dtype: Any = None) -> "Vector":
        return cls(0.0, 1.0, 0.0, dtype=dtype)

    @classmethod
    def z_unit(cls, dtype: Any = None) -> "Vector":
        return cls(0.0, 0.0, 1.0, dtype=dtype)

    @property
    def dtype(self) -> np.dtype:
        return self._v.dtype

    def as_array(self) -> np.ndarray:
        return self._v.copy()

    def copy(self) -> "Vector":
        return Vector._wrap(self._v.copy())

    __copy__ = copy

    def __deepcopy__(self, memo) -> "Vector":
        return self.copy()

    def length(self):
        """Return the length of the vector.

        A squared length already within tolerance of 1 is returned without
        taking the square root, and a result within tolerance of 0 is snapped
        to exactly 0.
        """

        x, y, z = self._v[0], self._v[1], self._v[2]
        result = x * x + y * y + z * z
        if not approx_equal(result, 1.0):
            result = np.sqrt(result)
        return snap_zero(result)

    def normalize(self) -> "Vector":
        """Scale the vector to unit length in place and return it.

        A zero-length vector becomes ``(0, 0, 0, 1)``; a vector whose length is
        already within tolerance of 1 is left untouched.
        """

        length = self.length()
        if length == 0:
            self._v[:] = (0.0, 0.0, 0.0, 1.0)
        elif not approx_equal(length, 1.0):
            self._v[:3] /= length
            self._v[3] = 1.0
        return self

    def isclose(self, other: Any, epsilon: float = EPS) -> bool:
        return _isclose(self._v, other, epsilon)

    def __iter__(self) -> Iterator[float]:
        return iter(self._v.tolist())

    def __add__(self, other: Any):
        if isinstance(other, Vector):
            return Vector._wrap(_offset(self._v, other._v, 1.0))
        if isinstance(other, Point):
            return Point._wrap(_offset(other._v, self._v, 1.0))
        return NotImplemented

    def __sub__(self, other: Any):
        if isinstance(other, Vector):
            return Vector._wrap(_offset(self._v, other._v, -1.0))
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None  # normalize() mutates

    def __repr__(self) -> str:
        x, y, z, w = self._v.tolist()
        return f"Vector(x={x!r}, y={y!r}, z={z!r}, w={w!r}, dtype={self.dtype})"

    def __str__(self) -> str:
        return format_vector(self)


class Point:
    """A location in 3D space."""

    __slots__ = ("_v",)

    x = _component(0, "X coordinate.")
    y = _component(1, "Y coordinate.")
    z = _component(2, "Z coordinate.")
    w = _component(3, "Homogeneous W component.")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, *, dtype: Any = None) -> None:
        self._v = _storage(x, y, z, 1.0, resolve_dtype(dtype))

    @classmethod
    def from_homogeneous(cls, values: Iterable[float], dtype: Any = None) -> "Point":
        return cls._wrap(_coerce_homogeneous(values, dtype))

    @classmethod
    def _wrap(cls, arr: np.ndarray) -> "Point":
        obj = cls.__new__(cls)
        obj._v = arr
        return obj

    @property
    def dtype(self) -> np.dtype:
        return self._v.dtype

    def as_array(self) -> np.ndarray:
        return self._v.copy()

    def copy(self) -> "Point":
        return Point._wrap(self._v.copy())

    __copy__ = copy

    def __deepcopy__(self, memo) -> "Point":
        return self.copy()

    def isclose(self, other: Any, epsilon: float = EPS) -> bool:
        return _isclose(self._v, other, epsilon)

    def __iter__(self) -> Iterator[float]:
        return iter(self._v.tolist())

    def __add__(self, other: Any):
        if isinstance(other, Vector):
            return Point._wrap(_offset(self._v, other._v, 1.0))
        return NotImplemented

    def __sub__(self, other: Any):
        # a location minus a location is a displacement
        if isinstance(other, Point):
            return Vector._wrap(_offset(self._v, other._v, -1.0))
        if isinstance(other, Vector):
            return Point._wrap(_offset(self._v, other._v, -1.0))
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __hash__(self) -> int:
        return hash(("Point", tuple(self._v.tolist())))

    def __repr__(self) -> str:
        x, y, z, w = self._v.tolist()
        return f"Point(x={x!r}, y={y!r}, z={z!r}, w={w!r}, dtype={self.dtype})"

    def __str__(self) -> str:
        return format_vector(self)


Homogeneous = Union[Vector, Point]


def length(v: Vector):
    return v.length()


def normalize(v: Vector) -> Vector:
    """Normalize ``v`` in place and return it."""

    return v.normalize()


def normalized(v: Vector) -> Vector:
    """Return a normalized copy of ``v``, leaving ``v`` untouched."""

    return v.copy().normalize()


def dot(a: Vector, b: Vector):
    """Dot product of ``a`` and ``b`` (``w`` ignored, operands not normalized)."""

    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vector, b: Vector) -> Vector:
    """Right-handed cross product; the result has ``w = 1``."""

    out = np.empty(4, dtype=combine(a.dtype, b.dtype))
    out[0] = a.y * b.z - a.z * b.y
    out[1] = a.z * b.x - a.x * b.z
    out[2] = a.x * b.y - a.y * b.x
    out[3] = 1
    return Vector._wrap(out)


def midpoint(a: Homogeneous, b: Homogeneous) -> Homogeneous:
    """Component-wise average of two values of the same role."""

    if type(a) is not type(b):
        raise TypeError(f"midpoint needs two values of the same role, got {type(a).__name__} and {type(b).__name__}")
    out = np.empty(4, dtype=combine(a.dtype, b.dtype))
    out[:3] = (a._v[:3] + b._v[:3]) / 2
    out[3] = 1
    return type(a)._wrap(out)


__all__ = [
    "Vector",
    "Point",
    "Homogeneous",
    "length",
    "normalize",
    "normalized",
    "dot",
    "cross",
    "midpoint",
]
