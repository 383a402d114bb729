from .errors import DegenerateInputError, IndexRangeError, VecmathError
from .tolerance import EPS, approx_equal, snap_zero
from .precision import SINGLE, DOUBLE, resolve_dtype
from .vector import Vector, Point, length, normalize, normalized, dot, cross, midpoint
from .matrix import Matrix, compose, apply_as_row, apply_as_column
from .circle import circle3pts, circle_radius
from .config import AlgebraConfig, get_algebra_config, set_algebra_config, get_backend, use_backend
from .backends import AlgebraBackend, PackedMatrix, available_backends
from .printer import format_vector, format_matrix
from .timing import Stopwatch, BenchmarkResult, benchmark, run_benchmarks

__version__ = "0.1.0"

__all__ = [
    'VecmathError',
    'DegenerateInputError',
    'IndexRangeError',
    'EPS',
    'approx_equal',
    'snap_zero',
    'SINGLE',
    'DOUBLE',
    'resolve_dtype',
    'Vector',
    'Point',
    'length',
    'normalize',
    'normalized',
    'dot',
    'cross',
    'midpoint',
    'Matrix',
    'compose',
    'apply_as_row',
    'apply_as_column',
    'circle3pts',
    'circle_radius',
    'AlgebraConfig',
    'get_algebra_config',
    'set_algebra_config',
    'get_backend',
    'use_backend',
    'AlgebraBackend',
    'PackedMatrix',
    'available_backends',
    'format_vector',
    'format_matrix',
    'Stopwatch',
    'BenchmarkResult',
    'benchmark',
    'run_benchmarks',
    '__version__',
]
