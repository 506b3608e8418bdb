"""
Tests for PyNumerics exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyNumericsError)
    - Diagnostic attributes on SingularMatrixError, DerivativeTooSmallError,
      DimensionMismatchError, InsufficientSampleSizeError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pynumerics.core.exceptions import (
    DerivativeTooSmallError,
    DimensionError,
    DimensionMismatchError,
    DivisionByZeroError,
    InsufficientSampleSizeError,
    InvalidDimensionError,
    LengthMismatchError,
    NotSquareError,
    NumericalError,
    PyNumericsError,
    SingularMatrixError,
    UnsupportedDimensionError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyNumericsError."""

    @pytest.mark.parametrize("exc_type", [
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
    ])
    def test_catchable_as_base(self, exc_type):
        with pytest.raises(PyNumericsError):
            raise exc_type("failure")

    @pytest.mark.parametrize("exc_type", [
        DimensionMismatchError,
        NotSquareError,
        UnsupportedDimensionError,
        LengthMismatchError,
    ])
    def test_shape_errors_are_dimension_errors(self, exc_type):
        with pytest.raises(DimensionError):
            raise exc_type("bad shape")

    @pytest.mark.parametrize("exc_type", [
        InvalidDimensionError,
        InsufficientSampleSizeError,
        DimensionError,
    ])
    def test_input_errors_are_validation_errors(self, exc_type):
        with pytest.raises(ValidationError):
            raise exc_type("bad input")

    @pytest.mark.parametrize("exc_type", [
        SingularMatrixError,
        DerivativeTooSmallError,
        DivisionByZeroError,
    ])
    def test_computation_errors_are_numerical_errors(self, exc_type):
        err = exc_type("failed")
        assert isinstance(err, NumericalError)
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestSingularMatrixError:

    def test_all_attributes(self):
        err = SingularMatrixError(
            "no pivot",
            matrix_name="matrix",
            pivot_index=1,
            pivot_value=0.0,
        )
        assert str(err) == "no pivot"
        assert err.matrix_name == "matrix"
        assert err.pivot_index == 1
        assert err.pivot_value == 0.0

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.pivot_index is None
        assert err.pivot_value is None


class TestDerivativeTooSmallError:

    def test_all_attributes(self):
        err = DerivativeTooSmallError(
            "flat", x=0.0, derivative=1e-9, iteration=3
        )
        assert err.x == 0.0
        assert err.derivative == 1e-9
        assert err.iteration == 3

    def test_defaults_are_none(self):
        err = DerivativeTooSmallError("flat")
        assert err.x is None
        assert err.derivative is None
        assert err.iteration is None


class TestDimensionMismatchError:

    def test_shapes(self):
        err = DimensionMismatchError(
            "shapes differ", left_shape=(2, 2), right_shape=(3, 3)
        )
        assert err.left_shape == (2, 2)
        assert err.right_shape == (3, 3)


class TestInsufficientSampleSizeError:

    def test_counts(self):
        with pytest.raises(InsufficientSampleSizeError) as exc_info:
            raise InsufficientSampleSizeError("too few", n_samples=1, min_samples=2)
        assert exc_info.value.n_samples == 1
        assert exc_info.value.min_samples == 2
