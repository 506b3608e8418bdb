"""
Numerical precision constants and utilities.

Provides machine epsilon and the half-up rounding used for reported
results.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any


# Machine epsilon for float64
EPSILON_64: float = np.finfo(np.float64).eps  # ~2.22e-16


def round_half_up(
    value: ArrayLike,
    digits: int | None,
) -> float | NDArray[np.floating[Any]]:
    """
    Round to a fixed number of decimals, ties toward +inf.

    Computes floor(value * 10**digits + 0.5) / 10**digits. Unlike
    np.round (ties to even), 0.125 rounds to 0.13 and -0.125 to -0.12.
    NaN and Inf pass through unchanged.

    Args:
        value: Scalar or array to round
        digits: Number of decimals, or None to return the value unrounded

    Returns:
        float for scalar input, ndarray otherwise
    """
    arr = np.asarray(value, dtype=np.float64)
    if digits is not None:
        scale = 10.0 ** digits
        with np.errstate(invalid='ignore', over='ignore'):
            rounded = np.floor(arr * scale + 0.5) / scale
        arr = np.where(np.isfinite(arr), rounded, arr)
    if arr.ndim == 0:
        return float(arr)
    return arr
