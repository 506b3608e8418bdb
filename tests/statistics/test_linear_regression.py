"""
Tests for linear_regression(): closed-form OLS with R-squared.
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from pynumerics.core.exceptions import (
    InsufficientSampleSizeError,
    LengthMismatchError,
    ValidationError,
)
from pynumerics.statistics import RegressionSolution, linear_regression


class TestFit:

    def test_exact_line(self):
        result = linear_regression([1, 2, 3, 4, 5], [3, 5, 7, 9, 11])
        assert isinstance(result, RegressionSolution)
        assert result.slope == pytest.approx(2.0)
        assert result.intercept == pytest.approx(1.0)
        assert result.r_squared == pytest.approx(1.0)
        assert result.equation == "y = 2.0000x + 1.0000"

    def test_matches_scipy(self, linear_data):
        x, y = linear_data
        result = linear_regression(x, y, digits=None)
        ref = sp_stats.linregress(x, y)
        assert result.slope == pytest.approx(ref.slope, rel=1e-10)
        assert result.intercept == pytest.approx(ref.intercept, rel=1e-10)
        assert result.r_squared == pytest.approx(ref.rvalue ** 2, rel=1e-10)

    def test_rounded_to_four_decimals(self, linear_data):
        x, y = linear_data
        result = linear_regression(x, y)
        for value in (result.slope, result.intercept, result.r_squared):
            assert value == round(value, 4)

    def test_predict_uses_unrounded_coefficients(self, linear_data):
        x, y = linear_data
        result = linear_regression(x, y)
        ref = sp_stats.linregress(x, y)
        assert result.predict(2.0) == pytest.approx(ref.slope * 2.0 + ref.intercept, rel=1e-10)

    def test_info_and_summary(self):
        result = linear_regression([0, 1, 2], [1, 3, 2])
        assert result.info['n'] == 3
        assert result.info['method'] == 'ols_closed_form'
        assert result.info['rss'] >= 0.0
        summary = result.summary()
        assert "R-squared" in summary
        assert result.equation in summary


class TestDegenerate:

    def test_constant_y_gives_nan_r_squared(self):
        result = linear_regression([1, 2, 3], [4, 4, 4])
        assert result.slope == 0.0
        assert result.intercept == 4.0
        assert np.isnan(result.r_squared)
        assert any("R-squared is undefined" in w for w in result.warnings)

    def test_constant_x_rejected(self):
        with pytest.raises(ValidationError, match="zero variance"):
            linear_regression([2, 2, 2], [1, 2, 3])


class TestValidation:

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatchError):
            linear_regression([1, 2, 3], [1, 2])

    def test_single_point(self):
        with pytest.raises(InsufficientSampleSizeError):
            linear_regression([1], [1])
