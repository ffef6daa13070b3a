from __future__ import annotations

from typing import Any

import numpy as np
from jax import Array
from jax import numpy as jnp

from sparsesolve.linalg.vector import Vector
from sparsesolve.utils.checks import require_floating, require_square


class JaxVector:
    """Vector over an immutable ``jax.Array``.

    In-place semantics are obtained by rebinding ``data`` after each
    update, so aliases of the old array are never modified.
    """

    __slots__ = ("data",)

    def __init__(self, data: Any, dtype: Any = None) -> None:
        array = jnp.asarray(data, dtype=dtype)
        if array.ndim != 1:
            raise ValueError(f"data must be rank-1, received shape {array.shape}")
        require_floating("data", array)
        self.data: Array = array

    @classmethod
    def zeros(cls, n: int, dtype: Any = jnp.float32) -> JaxVector:
        return cls(jnp.zeros(n, dtype=dtype))

    @property
    def dtype(self) -> np.dtype[Any]:
        return np.dtype(self.data.dtype)

    def dimension(self) -> int:
        return int(self.data.shape[0])

    def new_zeros(self, n: int) -> JaxVector:
        return JaxVector(jnp.zeros(n, dtype=self.data.dtype))

    def copy_from(self, src: Vector) -> None:
        self.data = jnp.asarray(src.as_array(), dtype=self.data.dtype)

    def scale(self, alpha: float) -> None:
        if alpha == 0.0:
            self.data = jnp.zeros_like(self.data)
        else:
            self.data = self.data * alpha

    def add_scaled(self, alpha: float, x: Vector) -> None:
        if alpha == 0.0:
            return
        self.data = self.data + alpha * jnp.asarray(x.as_array())

    def dot(self, other: Vector) -> float:
        return float(jnp.dot(self.data, jnp.asarray(other.as_array())))

    def as_array(self) -> Array:
        return self.data

    def assign(self, values: Any) -> None:
        self.data = jnp.asarray(values, dtype=self.data.dtype)

    def __repr__(self) -> str:
        return f"JaxVector(n={self.dimension()}, dtype={self.data.dtype})"


class JaxMatrix:
    """Dense operator evaluated with ``jax.numpy``."""

    def __init__(self, data: Any, dtype: Any = jnp.float32) -> None:
        array = jnp.asarray(data, dtype=dtype)
        require_square("data", tuple(array.shape))
        self.data: Array = array

    def dimension(self) -> int:
        return int(self.data.shape[0])

    def mult(self, x: Vector, y: Vector) -> None:
        y.assign(self.data @ jnp.asarray(x.as_array(), dtype=self.data.dtype))
