from __future__ import annotations

from typing import TypeAlias

import numpy as np
import numpy.typing as npt

FloatArray: TypeAlias = npt.NDArray[np.float64]
DTypeLike: TypeAlias = npt.DTypeLike


def near_zero_threshold(dtype: DTypeLike = np.float64) -> float:
    """Smallest magnitude a divisor of ``dtype`` may have: ``10 * tiny``."""

    return 10.0 * float(np.finfo(dtype).tiny)


def is_near_zero(value: float, dtype: DTypeLike = np.float64) -> bool:
    """Divide-by-zero guard, not a convergence test."""

    return abs(float(value)) < near_zero_threshold(dtype)
