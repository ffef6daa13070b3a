from __future__ import annotations

import numpy as np


def require_rank1(name: str, array: np.ndarray) -> None:
    """Raise a clear error if an array is not a vector."""

    if array.ndim != 1:
        raise ValueError(f"{name} must be rank-1, received shape {array.shape}")


def require_square(name: str, shape: tuple[int, ...]) -> None:
    """Raise a clear error if a matrix shape is not square."""

    if len(shape) != 2 or shape[0] != shape[1]:
        raise ValueError(f"{name} must be square, received shape {shape}")


def require_finite(name: str, array: np.ndarray) -> None:
    """Guard against NaN/Inf entering a solve."""

    if not np.all(np.isfinite(array)):
        raise ValueError(f"{name} contains NaN or Inf values")


def require_floating(name: str, array: np.ndarray) -> None:
    """Reject integer/bool storage that cannot hold in-place float updates."""

    if not np.issubdtype(array.dtype, np.floating):
        raise ValueError(f"{name} must have a floating dtype, received {array.dtype}")
