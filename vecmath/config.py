"""Process-wide algebra configuration."""

from __future__ import annotations

import copy
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from .backends import AlgebraBackend, lookup_backend

logger = logging.getLogger(__name__)


@dataclass
class AlgebraConfig:
    backend: str = "scalar"


_ALGEBRA_CONFIG = AlgebraConfig()


def get_algebra_config() -> AlgebraConfig:
    return copy.deepcopy(_ALGEBRA_CONFIG)


def set_algebra_config(config: AlgebraConfig) -> None:
    global _ALGEBRA_CONFIG
    lookup_backend(config.backend)
    if config.backend != _ALGEBRA_CONFIG.backend:
        logger.debug("Switching algebra backend %s -> %s", _ALGEBRA_CONFIG.backend, config.backend)
    _ALGEBRA_CONFIG = copy.deepcopy(config)


def get_backend(name: Optional[str] = None) -> AlgebraBackend:
    """Return the backend called ``name``, or the configured one."""

    return lookup_backend(name or _ALGEBRA_CONFIG.backend)


@contextmanager
def use_backend(name: str) -> Iterator[AlgebraBackend]:
    """Temporarily select backend ``name``; the previous config is restored on exit."""

    previous = get_algebra_config()
    set_algebra_config(AlgebraConfig(backend=name))
    try:
        yield get_backend()
    finally:
        set_algebra_config(previous)


__all__ = [
    "AlgebraConfig",
    "get_algebra_config",
    "set_algebra_config",
    "get_backend",
    "use_backend",
]
