"""Reference backend: explicit per-element sums."""

from __future__ import annotations

import numpy as np

from .base import AlgebraBackend


class ScalarBackend(AlgebraBackend):
    name = "scalar"

    def mat_mat(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        result = np.empty((4, 4), dtype=np.result_type(a, b))
        for i in range(4):
            for j in range(4):
                result[i, j] = (
                    a[i, 0] * b[0, j]
                    + a[i, 1] * b[1, j]
                    + a[i, 2] * b[2, j]
                    + a[i, 3] * b[3, j]
                )
        return result

    def row_vec_mat(self, v: np.ndarray, m: np.ndarray) -> np.ndarray:
        result = np.empty(4, dtype=np.result_type(v, m))
        for j in range(4):
            result[j] = v[0] * m[0, j] + v[1] * m[1, j] + v[2] * m[2, j] + v[3] * m[3, j]
        return result

    def mat_col_vec(self, m: np.ndarray, v: np.ndarray) -> np.ndarray:
        result = np.empty(4, dtype=np.result_type(m, v))
        for i in range(4):
            result[i] = m[i, 0] * v[0] + m[i, 1] * v[1] + m[i, 2] * v[2] + m[i, 3] * v[3]
        return result

    def transpose(self, m: np.ndarray) -> np.ndarray:
        result = np.empty((4, 4), dtype=m.dtype)
        for i in range(4):
            for j in range(4):
                result[j, i] = m[i, j]
        return result


__all__ = ["ScalarBackend"]
