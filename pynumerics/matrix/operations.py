"""
Dense matrix construction and algebra.

Matrices are 2D float64 numpy arrays. Every function validates its
operands and returns a new array; inputs are never modified.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumerics.core.exceptions import (
    DimensionMismatchError,
    UnsupportedDimensionError,
)
from pynumerics.core.validation import (
    check_matrix,
    check_shape_dimension,
    check_square,
)


MAX_DETERMINANT_ORDER = 3


def zeros(rows: int, cols: int) -> NDArray[np.floating[Any]]:
    """
    Matrix of the given shape filled with 0.0.

    Raises
    ------
    InvalidDimensionError
        If rows or cols is not a positive integer.
    """
    n_rows = check_shape_dimension(rows, "rows")
    n_cols = check_shape_dimension(cols, "cols")
    return np.zeros((n_rows, n_cols), dtype=np.float64)


def identity(n: int) -> NDArray[np.floating[Any]]:
    """n x n identity matrix."""
    matrix = zeros(n, n)
    for i in range(matrix.shape[0]):
        matrix[i, i] = 1.0
    return matrix


def _check_same_shape(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    operation: str,
) -> None:
    if a.shape != b.shape:
        raise DimensionMismatchError(
            f"{operation}: matrices must have the same dimensions, "
            f"got {a.shape} and {b.shape}",
            left_shape=a.shape,
            right_shape=b.shape,
        )


def add(a: ArrayLike, b: ArrayLike) -> NDArray[np.floating[Any]]:
    """Element-wise sum a + b."""
    a_arr = check_matrix(a, "a")
    b_arr = check_matrix(b, "b")
    _check_same_shape(a_arr, b_arr, "add")
    return a_arr + b_arr


def subtract(a: ArrayLike, b: ArrayLike) -> NDArray[np.floating[Any]]:
    """Element-wise difference a - b."""
    a_arr = check_matrix(a, "a")
    b_arr = check_matrix(b, "b")
    _check_same_shape(a_arr, b_arr, "subtract")
    return a_arr - b_arr


def multiply(a: ArrayLike, b: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Matrix product a @ b.

    Computed with the textbook triple loop, accumulating over the inner
    index in ascending order, so results are reproducible independent of
    the BLAS library numpy is linked against.

    Parameters
    ----------
    a : array-like, shape (m, k)
    b : array-like, shape (k, n)

    Returns
    -------
    ndarray, shape (m, n)

    Raises
    ------
    DimensionMismatchError
        If the column count of a differs from the row count of b.
    """
    a_arr = check_matrix(a, "a")
    b_arr = check_matrix(b, "b")
    if a_arr.shape[1] != b_arr.shape[0]:
        raise DimensionMismatchError(
            f"multiply: a has {a_arr.shape[1]} columns but b has "
            f"{b_arr.shape[0]} rows",
            left_shape=a_arr.shape,
            right_shape=b_arr.shape,
        )

    n_rows, n_inner = a_arr.shape
    n_cols = b_arr.shape[1]
    result = np.zeros((n_rows, n_cols), dtype=np.float64)
    for i in range(n_rows):
        for j in range(n_cols):
            total = 0.0
            for k in range(n_inner):
                total += a_arr[i, k] * b_arr[k, j]
            result[i, j] = total
    return result


def transpose(a: ArrayLike) -> NDArray[np.floating[Any]]:
    """New matrix with rows and columns swapped."""
    a_arr = check_matrix(a, "a")
    return np.ascontiguousarray(a_arr.T)


def determinant(a: ArrayLike) -> float:
    """
    Determinant of a square matrix of order 1, 2 or 3.

    Uses the closed-form cofactor expansion along the first row.

    Raises
    ------
    NotSquareError
        If the matrix is not square.
    UnsupportedDimensionError
        If the order is greater than 3.
    """
    m = check_matrix(a, "a")
    check_square(m, "a")
    n = m.shape[0]

    if n == 1:
        return float(m[0, 0])
    if n == 2:
        return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])
    if n == 3:
        return float(
            m[0, 0] * (m[1, 1] * m[2, 2] - m[1, 2] * m[2, 1])
            - m[0, 1] * (m[1, 0] * m[2, 2] - m[1, 2] * m[2, 0])
            + m[0, 2] * (m[1, 0] * m[2, 1] - m[1, 1] * m[2, 0])
        )

    raise UnsupportedDimensionError(
        f"determinant: supports matrices up to {MAX_DETERMINANT_ORDER}x"
        f"{MAX_DETERMINANT_ORDER}, got {n}x{n}"
    )
