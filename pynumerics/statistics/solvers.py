"""
Point estimates over paired and independent numeric samples.

Provides correlation(), linear_regression() and t_test(). No p-values or
confidence intervals are computed.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pynumerics.core.compute.precision import round_half_up
from pynumerics.core.compute.tolerances import STATISTICS_DIGITS
from pynumerics.core.exceptions import ValidationError
from pynumerics.core.result import Result
from pynumerics.core.validation import (
    check_consistent_length,
    check_min_samples,
    check_vector,
)
from pynumerics.statistics.solution import (
    RegressionParams,
    RegressionSolution,
    TTestParams,
    TTestSolution,
)


def correlation(x: ArrayLike, y: ArrayLike) -> float:
    """
    Pearson correlation coefficient of two paired samples.

    Uses the sum-of-products form
        (n*Sxy - Sx*Sy) / sqrt((n*Sxx - Sx^2) * (n*Syy - Sy^2)).

    Returns 0.0 when the denominator is zero, i.e. when either series
    is constant.

    Raises
    ------
    LengthMismatchError
        If x and y differ in length.
    InsufficientSampleSizeError
        If the samples are empty.
    """
    x_arr = check_vector(x, "x")
    y_arr = check_vector(y, "y")
    check_consistent_length(x_arr, y_arr, names=("x", "y"))
    check_min_samples(x_arr, 1, "x")

    n = x_arr.shape[0]
    sum_x = np.sum(x_arr)
    sum_y = np.sum(y_arr)
    sum_xy = np.sum(x_arr * y_arr)
    sum_x2 = np.sum(x_arr * x_arr)
    sum_y2 = np.sum(y_arr * y_arr)

    numerator = n * sum_xy - sum_x * sum_y
    # Rounding can push a zero spread slightly negative
    spread_x = max(n * sum_x2 - sum_x * sum_x, 0.0)
    spread_y = max(n * sum_y2 - sum_y * sum_y, 0.0)
    denominator = np.sqrt(spread_x * spread_y)

    if denominator == 0:
        return 0.0
    return float(numerator / denominator)


def linear_regression(
    x: ArrayLike,
    y: ArrayLike,
    *,
    digits: int | None = STATISTICS_DIGITS,
) -> RegressionSolution:
    """
    Ordinary least squares fit of y = slope * x + intercept.

    Parameters
    ----------
    x, y : array-like
        Paired observations.
    digits : int or None
        Decimals slope, intercept and R-squared are rounded to (half-up).
        Default 4. None keeps full precision.

    Returns
    -------
    RegressionSolution
        slope, intercept, r_squared and the fitted equation. r_squared is
        NaN, with a warning recorded, when y is constant.

    Raises
    ------
    LengthMismatchError
        If x and y differ in length.
    InsufficientSampleSizeError
        If fewer than 2 points are given.
    ValidationError
        If x is constant (the slope is undefined).
    """
    x_arr = check_vector(x, "x")
    y_arr = check_vector(y, "y")
    check_consistent_length(x_arr, y_arr, names=("x", "y"))
    check_min_samples(x_arr, 2, "x")

    if np.all(x_arr == x_arr[0]):
        raise ValidationError("x: has zero variance (constant); slope is undefined")

    warnings_list: list[str] = []
    n = x_arr.shape[0]
    sum_x = np.sum(x_arr)
    sum_y = np.sum(y_arr)
    sum_xy = np.sum(x_arr * y_arr)
    sum_x2 = np.sum(x_arr * x_arr)

    slope = float((n * sum_xy - sum_x * sum_y) / (n * sum_x2 - sum_x * sum_x))
    intercept = float((sum_y - slope * sum_x) / n)

    mean_y = sum_y / n
    total_ss = float(np.sum((y_arr - mean_y) ** 2))
    residual_ss = float(np.sum((y_arr - (slope * x_arr + intercept)) ** 2))

    if total_ss == 0.0:
        warnings_list.append("y is constant: R-squared is undefined")
        r_squared = np.nan
    else:
        r_squared = 1.0 - residual_ss / total_ss

    result = Result(
        params=RegressionParams(
            slope=round_half_up(slope, digits),
            intercept=round_half_up(intercept, digits),
            r_squared=round_half_up(r_squared, digits),
        ),
        info={
            'method': 'ols_closed_form',
            'n': n,
            'rss': residual_ss,
            'tss': total_ss,
            'unrounded_slope': slope,
            'unrounded_intercept': intercept,
        },
        timing=None,
        backend_name='cpu_ols',
        warnings=tuple(warnings_list),
    )
    return RegressionSolution(_result=result)


def t_test(
    sample1: ArrayLike,
    sample2: ArrayLike,
    *,
    digits: int | None = STATISTICS_DIGITS,
) -> TTestSolution:
    """
    Pooled-variance two-sample t-statistic.

    Sample variances are Bessel-corrected (divisor n - 1) and pooled as
        sp^2 = ((n1 - 1) * s1^2 + (n2 - 1) * s2^2) / (n1 + n2 - 2).

    Parameters
    ----------
    sample1, sample2 : array-like
        Independent samples, each with at least 2 values.
    digits : int or None
        Decimals the means, statistic and standard error are rounded to
        (half-up). Default 4. None keeps full precision.

    Returns
    -------
    TTestSolution

    Raises
    ------
    InsufficientSampleSizeError
        If either sample has fewer than 2 values.
    """
    x = check_vector(sample1, "sample1")
    y = check_vector(sample2, "sample2")
    check_min_samples(x, 2, "sample1")
    check_min_samples(y, 2, "sample2")

    warnings_list: list[str] = []
    n1, n2 = len(x), len(y)
    mean1, mean2 = float(np.mean(x)), float(np.mean(y))
    var1, var2 = np.var(x, ddof=1), np.var(y, ddof=1)
    df = n1 + n2 - 2

    pooled_var = ((n1 - 1) * var1 + (n2 - 1) * var2) / df
    se = float(np.sqrt(pooled_var * (1.0 / n1 + 1.0 / n2)))

    if se == 0.0:
        warnings_list.append("data are essentially constant")
        t_stat = np.nan
    else:
        t_stat = (mean1 - mean2) / se

    result = Result(
        params=TTestParams(
            mean1=round_half_up(mean1, digits),
            mean2=round_half_up(mean2, digits),
            t_statistic=round_half_up(t_stat, digits),
            degrees_of_freedom=df,
            standard_error=round_half_up(se, digits),
        ),
        info={
            'method': 'pooled_two_sample_t',
            'n1': n1,
            'n2': n2,
            'pooled_variance': float(pooled_var),
        },
        timing=None,
        backend_name='cpu_t_test',
        warnings=tuple(warnings_list),
    )
    return TTestSolution(_result=result)
