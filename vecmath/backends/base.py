"""Interface shared by the algebra backends."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class AlgebraBackend(ABC):
    """Strategy computing the 4x4 / 4x1 products on raw numpy arrays.

    Every method takes and returns plain arrays: matrices have shape ``(4, 4)``
    and vectors shape ``(4,)``.  Results use the common dtype of the operands.
    """

    name: str = "abstract"

    @abstractmethod
    def mat_mat(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        """Return ``a x b``."""

    @abstractmethod
    def row_vec_mat(self, v: np.ndarray, m: np.ndarray) -> np.ndarray:
        """Return the row-vector product ``r[j] = sum_i v[i] * m[i][j]``."""

    @abstractmethod
    def mat_col_vec(self, m: np.ndarray, v: np.ndarray) -> np.ndarray:
        """Return the column-vector product ``r[i] = sum_j m[i][j] * v[j]``."""

    @abstractmethod
    def transpose(self, m: np.ndarray) -> np.ndarray:
        """Return the transpose of ``m`` as a new array."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
