from __future__ import annotations

import numpy as np
import pytest

from sparsesolve.linalg.matrix import SparseMatrix
from sparsesolve.problems.generators import (
    convection_diffusion_1d,
    manufactured_rhs,
    poisson_1d,
    random_spd,
)


def test_poisson_is_symmetric_positive_definite() -> None:
    dense = poisson_1d(6).toarray()
    np.testing.assert_array_equal(dense, dense.T)
    assert np.all(np.linalg.eigvalsh(dense) > 0.0)
    assert poisson_1d(1).toarray().tolist() == [[2.0]]


def test_convection_diffusion_is_non_symmetric() -> None:
    dense = convection_diffusion_1d(5, peclet=0.5).toarray()
    assert not np.allclose(dense, dense.T)
    symmetric = convection_diffusion_1d(5, peclet=0.0).toarray()
    np.testing.assert_allclose(symmetric, poisson_1d(5).toarray())


def test_random_spd_is_positive_definite() -> None:
    a = random_spd(6, rng=np.random.default_rng(1), shift=0.5)
    np.testing.assert_allclose(a, a.T)
    assert np.min(np.linalg.eigvalsh(a)) >= 0.5 - 1.0e-10


def test_manufactured_rhs_applies_operator() -> None:
    x_true = np.arange(4, dtype=np.float64)
    b = manufactured_rhs(SparseMatrix(poisson_1d(4)), x_true)
    np.testing.assert_allclose(b, poisson_1d(4) @ x_true)


def test_generators_reject_bad_arguments() -> None:
    with pytest.raises(ValueError):
        poisson_1d(0)
    with pytest.raises(ValueError):
        convection_diffusion_1d(3, peclet=-1.0)
    with pytest.raises(ValueError):
        random_spd(3, rng=np.random.default_rng(0), shift=0.0)
