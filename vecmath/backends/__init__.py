"""Interchangeable implementations of the matrix/vector products."""

from __future__ import annotations

from typing import Dict, List

from .base import AlgebraBackend
from .scalar import ScalarBackend
from .simd import PackedMatrix, SimdBackend

_REGISTRY: Dict[str, AlgebraBackend] = {
    ScalarBackend.name: ScalarBackend(),
    SimdBackend.name: SimdBackend(),
}


def available_backends() -> List[str]:
    return sorted(_REGISTRY)


def lookup_backend(name: str) -> AlgebraBackend:
    """Return the registered backend called ``name``."""

    try:
        return _REGISTRY[name]
    except KeyError:
        raise ValueError(
            f"unknown backend {name!r}; expected one of {', '.join(available_backends())}"
        ) from None


__all__ = [
    "AlgebraBackend",
    "ScalarBackend",
    "SimdBackend",
    "PackedMatrix",
    "available_backends",
    "lookup_backend",
]
