"""Exception types raised by the vecmath kernel."""


class VecmathError(Exception):
    """Base class for errors raised by vecmath."""


class DegenerateInputError(VecmathError, ValueError):
    """Raised when geometric input has no unique solution (e.g. colinear points)."""


class IndexRangeError(VecmathError, IndexError):
    """Raised when a matrix element is requested outside ``[0, 3]``."""


__all__ = [
    "VecmathError",
    "DegenerateInputError",
    "IndexRangeError",
]
