"""Floating point precision helpers shared by vectors and matrices."""

from __future__ import annotations

from typing import Any, Dict

import numpy as np

SINGLE = np.dtype(np.float32)
DOUBLE = np.dtype(np.float64)

_ALIASES: Dict[str, np.dtype] = {
    "single": SINGLE,
    "float": SINGLE,
    "float32": SINGLE,
    "f4": SINGLE,
    "double": DOUBLE,
    "float64": DOUBLE,
    "f8": DOUBLE,
}

# fractional digits used when rendering values
_DISPLAY_DIGITS = {SINGLE: 5, DOUBLE: 8}


def resolve_dtype(precision: Any = None) -> np.dtype:
    """Return the numpy dtype for ``precision`` (``None`` means double precision)."""

    if precision is None:
        return DOUBLE
    if isinstance(precision, str):
        try:
            return _ALIASES[precision.lower()]
        except KeyError:
            raise ValueError(f"unknown precision {precision!r}") from None
    try:
        dtype = np.dtype(precision)
    except TypeError as exc:
        raise ValueError(f"unknown precision {precision!r}") from exc
    if dtype not in _DISPLAY_DIGITS:
        raise ValueError(f"unsupported precision {dtype}; expected float32 or float64")
    return dtype


def combine(*dtypes: np.dtype) -> np.dtype:
    return np.result_type(*dtypes)


def display_precision(dtype: np.dtype) -> int:
    return _DISPLAY_DIGITS.get(np.dtype(dtype), 8)


__all__ = [
    "SINGLE",
    "DOUBLE",
    "resolve_dtype",
    "combine",
    "display_precision",
]
