from __future__ import annotations

from typing import Any, Protocol

import numpy as np

from sparsesolve.types import DTypeLike, FloatArray
from sparsesolve.utils.checks import require_floating, require_rank1


class Vector(Protocol):
    """Dense vector API consumed by the Krylov kernels.

    All mutating methods work in place. Operands of a binary method must
    share the receiver's dimension and representation.
    """

    @property
    def dtype(self) -> np.dtype[Any]:
        """Scalar type used to pick the near-zero threshold."""

    def dimension(self) -> int:
        """Number of entries."""

    def new_zeros(self, n: int) -> Vector:
        """Zero vector of the same representation and dtype."""

    def copy_from(self, src: Vector) -> None:
        """Overwrite entries with ``src``; copying onto itself is a no-op."""

    def scale(self, alpha: float) -> None:
        """``self <- alpha * self``."""

    def add_scaled(self, alpha: float, x: Vector) -> None:
        """``self <- self + alpha * x``."""

    def dot(self, other: Vector) -> float:
        """Euclidean inner product."""

    def as_array(self) -> Any:
        """Read-only view of the underlying storage."""

    def assign(self, values: Any) -> None:
        """Overwrite entries from an array of matching length."""


class DenseVector:
    """NumPy-backed vector with in-place BLAS-1 updates."""

    __slots__ = ("values",)

    def __init__(self, values: FloatArray) -> None:
        require_rank1("values", values)
        require_floating("values", values)
        self.values = values

    @classmethod
    def zeros(cls, n: int, dtype: DTypeLike = np.float64) -> DenseVector:
        return cls(np.zeros(n, dtype=dtype))

    @classmethod
    def from_array(cls, values: Any, dtype: DTypeLike = np.float64) -> DenseVector:
        """Copy ``values`` into fresh storage."""

        return cls(np.array(values, dtype=dtype, copy=True))

    @property
    def dtype(self) -> np.dtype[Any]:
        return self.values.dtype

    def dimension(self) -> int:
        return int(self.values.shape[0])

    def new_zeros(self, n: int) -> DenseVector:
        return DenseVector(np.zeros(n, dtype=self.values.dtype))

    def copy_from(self, src: Vector) -> None:
        if src is self:
            return
        np.copyto(self.values, src.as_array())

    def scale(self, alpha: float) -> None:
        if alpha == 0.0:
            self.values.fill(0.0)
        else:
            self.values *= alpha

    def add_scaled(self, alpha: float, x: Vector) -> None:
        if alpha == 0.0:
            return
        if alpha == 1.0:
            self.values += x.as_array()
        elif alpha == -1.0:
            self.values -= x.as_array()
        else:
            self.values += alpha * x.as_array()

    def dot(self, other: Vector) -> float:
        return float(np.dot(self.values, other.as_array()))

    def as_array(self) -> FloatArray:
        return self.values

    def assign(self, values: Any) -> None:
        np.copyto(self.values, np.asarray(values))

    def __repr__(self) -> str:
        return f"DenseVector(n={self.dimension()}, dtype={self.values.dtype})"


def dimension(v: Vector) -> int:
    return v.dimension()


def zeros_like(v: Vector, n: int | None = None) -> Vector:
    """Zero vector shaped like ``v`` (or of length ``n``)."""

    return v.new_zeros(v.dimension() if n is None else n)


def copy(src: Vector, dst: Vector) -> None:
    """``dst <- src``."""

    dst.copy_from(src)


def scal(alpha: float, v: Vector) -> None:
    """``v <- alpha * v``."""

    v.scale(alpha)


def axpy(alpha: float, x: Vector, y: Vector) -> None:
    """``y <- y + alpha * x``."""

    y.add_scaled(alpha, x)


def dot(x: Vector, y: Vector) -> float:
    return x.dot(y)
