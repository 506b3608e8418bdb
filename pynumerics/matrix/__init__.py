"""
Matrix module.

Dense matrix construction and algebra on 2D float64 arrays.

Public API:
    zeros(rows, cols)   - Zero matrix
    identity(n)         - Identity matrix
    add(a, b)           - Element-wise sum
    subtract(a, b)      - Element-wise difference
    multiply(a, b)      - Matrix product
    transpose(a)        - Transpose
    determinant(a)      - Determinant (orders 1 to 3)
"""

from pynumerics.matrix.operations import (
    zeros,
    identity,
    add,
    subtract,
    multiply,
    transpose,
    determinant,
)

__all__ = [
    "zeros",
    "identity",
    "add",
    "subtract",
    "multiply",
    "transpose",
    "determinant",
]
