from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

import numpy as np
import scipy.sparse as sparse

from sparsesolve.linalg.vector import Vector
from sparsesolve.types import FloatArray
from sparsesolve.utils.checks import require_square


class LinearOperator(Protocol):
    """Square operator API consumed by the Krylov kernels.

    ``mult`` writes ``y <- A x``; it never accumulates into ``y`` and is
    never called with ``x is y``.
    """

    def dimension(self) -> int:
        """Square dimension, constant for the lifetime of the operator."""

    def mult(self, x: Vector, y: Vector) -> None:
        """Write the product ``A x`` into ``y``."""


class DenseMatrix:
    """Operator over an explicit square NumPy array."""

    def __init__(self, data: Any) -> None:
        array = np.asarray(data, dtype=np.float64)
        require_square("data", array.shape)
        self.data: FloatArray = array

    def dimension(self) -> int:
        return int(self.data.shape[0])

    def mult(self, x: Vector, y: Vector) -> None:
        y.assign(self.data @ np.asarray(x.as_array()))


class SparseMatrix:
    """Operator over a ``scipy.sparse`` matrix, stored as CSR."""

    def __init__(self, data: Any) -> None:
        csr = sparse.csr_matrix(data, dtype=np.float64)
        require_square("data", csr.shape)
        self.data = csr

    def dimension(self) -> int:
        return int(self.data.shape[0])

    def mult(self, x: Vector, y: Vector) -> None:
        y.assign(self.data @ np.asarray(x.as_array()))


class FunctionMatrix:
    """Matrix-free operator wrapping a ``matvec`` callable."""

    def __init__(self, matvec: Callable[[FloatArray], FloatArray], n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._matvec = matvec
        self._n = n

    def dimension(self) -> int:
        return self._n

    def mult(self, x: Vector, y: Vector) -> None:
        y.assign(self._matvec(np.asarray(x.as_array())))


class CountingMatrix:
    """Delegating operator that counts ``mult`` calls."""

    def __init__(self, inner: LinearOperator) -> None:
        self.inner = inner
        self.mult_calls = 0

    def dimension(self) -> int:
        return self.inner.dimension()

    def mult(self, x: Vector, y: Vector) -> None:
        self.mult_calls += 1
        self.inner.mult(x, y)


def mult(A: LinearOperator, x: Vector, y: Vector) -> None:
    """``y <- A x``."""

    A.mult(x, y)


def residual_norm_sq(A: LinearOperator, b: Vector, x: Vector) -> float:
    """Independent ``||A x - b||^2`` for verifying solver output."""

    ax = x.new_zeros(x.dimension())
    A.mult(x, ax)
    ax.add_scaled(-1.0, b)
    return ax.dot(ax)
