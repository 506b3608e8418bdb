"""
Exception hierarchy for PyNumerics.

All exceptions inherit from PyNumericsError to allow catching any
library-specific error. Subpackage-specific exceptions inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyNumericsError(Exception):
    """Base exception for all PyNumerics errors."""
    pass


class ValidationError(PyNumericsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class InvalidDimensionError(ValidationError):
    """
    A requested shape is not a positive integer.

    Raised by matrix constructors (zeros, identity) when asked for
    zero, negative or non-integer row/column counts.
    """
    pass


class InsufficientSampleSizeError(ValidationError):
    """
    Too few observations for the requested statistic.

    Attributes:
        n_samples: Number of observations supplied
        min_samples: Minimum number required
    """

    def __init__(
        self,
        message: str,
        n_samples: int | None = None,
        min_samples: int | None = None
    ):
        super().__init__(message)
        self.n_samples = n_samples
        self.min_samples = min_samples


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Operand shapes are incompatible for a binary matrix operation.

    Attributes:
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotSquareError(DimensionError):
    """Matrix must be square but has rows != columns."""
    pass


class UnsupportedDimensionError(DimensionError):
    """
    Matrix order is outside the range an operation supports.

    Raised by determinant() for orders other than 1, 2 and 3.
    """
    pass


class LengthMismatchError(DimensionError):
    """Paired sequences have different lengths."""
    pass


class NumericalError(PyNumericsError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when elimination finds no usable pivot in a column.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Column at which elimination failed
        pivot_value: Best pivot candidate found in that column
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        pivot_value: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.pivot_value = pivot_value


class DerivativeTooSmallError(NumericalError):
    """
    Newton-Raphson step would divide by a near-zero derivative.

    Attributes:
        x: Point at which the derivative was evaluated
        derivative: The derivative value
        iteration: Zero-based iteration index at which the guard fired
    """

    def __init__(
        self,
        message: str,
        x: float | None = None,
        derivative: float | None = None,
        iteration: int | None = None
    ):
        super().__init__(message)
        self.x = x
        self.derivative = derivative
        self.iteration = iteration


class DivisionByZeroError(NumericalError):
    """
    Result is undefined because it requires dividing by zero.

    Raised by lcm(0, 0).
    """
    pass
