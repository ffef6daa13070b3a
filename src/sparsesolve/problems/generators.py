from __future__ import annotations

import numpy as np
import scipy.sparse as sparse

from sparsesolve.linalg.matrix import LinearOperator
from sparsesolve.linalg.vector import DenseVector
from sparsesolve.types import FloatArray


def poisson_1d(n: int) -> sparse.csr_matrix:
    """Dirichlet finite-difference Laplacian ``tridiag(-1, 2, -1)`` (SPD)."""

    if n < 1:
        raise ValueError("n must be >= 1")
    main = np.full(n, 2.0)
    off = np.full(n - 1, -1.0)
    return sparse.diags([off, main, off], offsets=[-1, 0, 1], shape=(n, n), format="csr")


def convection_diffusion_1d(n: int, peclet: float = 0.5) -> sparse.csr_matrix:
    """Central-difference convection-diffusion operator (non-symmetric).

    ``peclet`` is the cell Peclet number; values below 1 keep the matrix
    diagonally dominant.
    """

    if n < 1:
        raise ValueError("n must be >= 1")
    if peclet < 0.0:
        raise ValueError("peclet must be non-negative")
    main = np.full(n, 2.0)
    lower = np.full(n - 1, -1.0 - peclet)
    upper = np.full(n - 1, -1.0 + peclet)
    return sparse.diags([lower, main, upper], offsets=[-1, 0, 1], shape=(n, n), format="csr")


def random_spd(n: int, rng: np.random.Generator, shift: float = 1.0) -> FloatArray:
    """Dense ``M^T M + shift I`` with Gaussian ``M``."""

    if n < 1:
        raise ValueError("n must be >= 1")
    if shift <= 0.0:
        raise ValueError("shift must be positive")
    m = rng.normal(size=(n, n))
    return np.asarray(m.T @ m + shift * np.eye(n), dtype=np.float64)


def manufactured_rhs(A: LinearOperator, x_true: FloatArray) -> FloatArray:
    """Right-hand side ``b = A x_true`` for a known solution."""

    x = DenseVector.from_array(x_true)
    b = x.new_zeros(x.dimension())
    A.mult(x, b)
    return np.array(b.as_array(), dtype=np.float64, copy=True)
