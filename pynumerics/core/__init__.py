"""
Core infrastructure for PyNumerics.

This module provides shared abstractions and utilities used by all
subpackages (matrix, numerical, statistics, finance, mathutils).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, rounding, default tolerances
"""

from pynumerics.core.result import Result
from pynumerics.core.exceptions import (
    PyNumericsError,
    ValidationError,
    InvalidDimensionError,
    InsufficientSampleSizeError,
    DimensionError,
    DimensionMismatchError,
    NotSquareError,
    UnsupportedDimensionError,
    LengthMismatchError,
    NumericalError,
    SingularMatrixError,
    DerivativeTooSmallError,
    DivisionByZeroError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyNumericsError",
    "ValidationError",
    "InvalidDimensionError",
    "InsufficientSampleSizeError",
    "DimensionError",
    "DimensionMismatchError",
    "NotSquareError",
    "UnsupportedDimensionError",
    "LengthMismatchError",
    "NumericalError",
    "SingularMatrixError",
    "DerivativeTooSmallError",
    "DivisionByZeroError",
]
