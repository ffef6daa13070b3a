from __future__ import annotations

import numpy as np
import pytest
from jax import numpy as jnp

from sparsesolve.config.schemas import SolverConfig
from sparsesolve.linalg.jax_backend import JaxMatrix, JaxVector
from sparsesolve.solvers.bicgstab import BicgstabSolver


def test_jax_vector_blas_updates_rebind_storage() -> None:
    v = JaxVector(jnp.asarray([1.0, 2.0, 3.0], dtype=jnp.float32))
    original = v.as_array()

    v.add_scaled(2.0, JaxVector(jnp.ones(3, dtype=jnp.float32)))
    np.testing.assert_allclose(np.asarray(v.as_array()), [3.0, 4.0, 5.0])
    np.testing.assert_allclose(np.asarray(original), [1.0, 2.0, 3.0])

    v.scale(0.0)
    np.testing.assert_array_equal(np.asarray(v.as_array()), np.zeros(3))
    assert v.dtype == np.float32
    assert v.new_zeros(4).dimension() == 4


def test_float32_jax_system_converges() -> None:
    A = JaxMatrix(np.diag([1.0, 2.0, 4.0]))
    b = JaxVector(jnp.asarray([1.0, 2.0, 4.0], dtype=jnp.float32))
    x = JaxVector.zeros(3)

    solver = BicgstabSolver(SolverConfig(epsilon=1.0e-4))
    assert solver.solve(A, b, x)
    np.testing.assert_allclose(np.asarray(x.as_array()), [1.0, 1.0, 1.0], rtol=1.0e-3, atol=1.0e-3)


def test_jax_vector_rejects_integer_storage() -> None:
    with pytest.raises(ValueError):
        JaxVector(jnp.arange(3))
