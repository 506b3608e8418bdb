"""
Input validation utilities for PyNumerics.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pynumerics.core.exceptions import (
    ValidationError,
    DimensionError,
    InvalidDimensionError,
    InsufficientSampleSizeError,
    LengthMismatchError,
    NotSquareError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    The result is always a fresh copy, so callers may modify it freely.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    return result.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_rectangular(rows: ArrayLike, name: str) -> None:
    """
    Verify a nested sequence has rows of equal length.

    NumPy arrays are rectangular by construction and pass unchecked.
    Lists of lists are inspected before conversion so that a ragged
    input is reported as a shape problem rather than a dtype problem.

    Args:
        rows: Matrix-like input
        name: Parameter name for error messages

    Raises:
        DimensionError: If rows have differing lengths
    """
    if isinstance(rows, np.ndarray) or not isinstance(rows, (list, tuple)):
        return
    lengths = [len(row) if isinstance(row, (list, tuple, np.ndarray)) else None
               for row in rows]
    if len(set(lengths)) > 1:
        raise DimensionError(
            f"{name}: rows have inconsistent lengths {lengths}"
        )


def check_matrix(matrix: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate a rectangular, finite, 2D numeric matrix.

    Args:
        matrix: Matrix-like input
        name: Parameter name for error messages

    Returns:
        float64 copy of the input
    """
    check_rectangular(matrix, name)
    result = check_array(matrix, name)
    check_2d(result, name)
    check_finite(result, name)
    return result


def check_vector(vector: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate a finite 1D numeric sequence.

    Args:
        vector: Sequence input
        name: Parameter name for error messages

    Returns:
        float64 copy of the input
    """
    result = check_array(vector, name)
    check_1d(result, name)
    check_finite(result, name)
    return result


def check_square(matrix: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array has as many rows as columns.

    Raises:
        NotSquareError: If rows != columns
    """
    n_rows, n_cols = matrix.shape
    if n_rows != n_cols:
        raise NotSquareError(
            f"{name}: matrix must be square, got shape {matrix.shape}"
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        LengthMismatchError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise LengthMismatchError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Args:
        array: Array to check
        min_samples: Minimum required samples (first dimension)
        name: Parameter name for error messages

    Raises:
        InsufficientSampleSizeError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise InsufficientSampleSizeError(
            f"{name}: requires at least {min_samples} samples, got {n}",
            n_samples=n,
            min_samples=min_samples,
        )


def check_integer(value: Any, name: str) -> int:
    """
    Verify a scalar is an integer (bool excluded) and return it as int.

    Raises:
        ValidationError: If value is not an integral number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        )
    return int(value)


def check_non_negative_integer(value: Any, name: str) -> int:
    """
    Verify a scalar is an integer >= 0.

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    n = check_integer(value, name)
    if n < 0:
        raise ValidationError(f"{name}: must be non-negative, got {n}")
    return n


def check_positive_integer(value: Any, name: str) -> int:
    """
    Verify a scalar is an integer > 0.

    Raises:
        ValidationError: If value is not an integer or is not positive
    """
    n = check_integer(value, name)
    if n <= 0:
        raise ValidationError(f"{name}: must be positive, got {n}")
    return n


def check_shape_dimension(value: Any, name: str) -> int:
    """
    Verify a requested matrix dimension is a positive integer.

    Raises:
        InvalidDimensionError: If value is not a positive integer
    """
    try:
        return check_positive_integer(value, name)
    except ValidationError as e:
        raise InvalidDimensionError(str(e)) from e


def check_positive(value: float, name: str) -> float:
    """
    Verify a scalar is a finite number > 0.

    Raises:
        ValidationError: If value is not finite and positive
    """
    if not np.isfinite(value) or value <= 0:
        raise ValidationError(f"{name}: must be a positive finite number, got {value}")
    return float(value)
