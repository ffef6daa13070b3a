from __future__ import annotations

import numpy as np
import pytest

from sparsesolve.linalg.vector import DenseVector, axpy, copy, dimension, dot, scal, zeros_like


def test_axpy_handles_special_coefficients() -> None:
    x = DenseVector.from_array([1.0, 2.0, 3.0])
    y = DenseVector.from_array([10.0, 20.0, 30.0])

    axpy(0.0, x, y)
    np.testing.assert_array_equal(y.values, [10.0, 20.0, 30.0])

    axpy(1.0, x, y)
    np.testing.assert_array_equal(y.values, [11.0, 22.0, 33.0])

    axpy(-1.0, x, y)
    np.testing.assert_array_equal(y.values, [10.0, 20.0, 30.0])

    axpy(0.5, x, y)
    np.testing.assert_allclose(y.values, [10.5, 21.0, 31.5])


def test_scal_by_zero_clears_non_finite_entries() -> None:
    v = DenseVector.from_array([np.inf, -2.0, 4.0])
    scal(0.0, v)
    np.testing.assert_array_equal(v.values, np.zeros(3))

    w = DenseVector.from_array([1.0, -2.0])
    scal(-3.0, w)
    np.testing.assert_array_equal(w.values, [-3.0, 6.0])


def test_copy_overwrites_and_tolerates_self_alias() -> None:
    src = DenseVector.from_array([1.0, -1.0, 2.0])
    dst = DenseVector.zeros(3)
    copy(src, dst)
    np.testing.assert_array_equal(dst.values, src.values)
    assert dst.values is not src.values

    copy(src, src)
    np.testing.assert_array_equal(src.values, [1.0, -1.0, 2.0])


def test_dot_dimension_and_zero_construction() -> None:
    rng = np.random.default_rng(4)
    a = rng.normal(size=7)
    b = rng.normal(size=7)

    assert dot(DenseVector.from_array(a), DenseVector.from_array(b)) == float(np.dot(a, b))
    assert dimension(DenseVector(a)) == 7

    z = zeros_like(DenseVector(a))
    assert z.dimension() == 7
    np.testing.assert_array_equal(z.as_array(), np.zeros(7))
    assert zeros_like(DenseVector(a), 3).dimension() == 3


def test_from_array_does_not_alias_input() -> None:
    source = np.array([1.0, 2.0])
    v = DenseVector.from_array(source)
    v.scale(2.0)
    np.testing.assert_array_equal(source, [1.0, 2.0])


def test_integer_storage_is_rejected() -> None:
    with pytest.raises(ValueError):
        DenseVector(np.zeros(2, dtype=np.int64))
    with pytest.raises(ValueError):
        DenseVector.zeros(3, dtype=np.int32)
    with pytest.raises(ValueError):
        DenseVector(np.array([True, False]))

    assert DenseVector.zeros(2, dtype=np.float32).dtype == np.float32
