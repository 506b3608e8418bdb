"""
Statistics module.

Point estimates over numeric samples.

Public API:
    correlation(x, y)          - Pearson correlation coefficient
    linear_regression(x, y)    - Simple OLS with R-squared
    t_test(sample1, sample2)   - Pooled two-sample t-statistic
"""

from pynumerics.statistics.solvers import correlation, linear_regression, t_test
from pynumerics.statistics.solution import (
    RegressionParams,
    RegressionSolution,
    TTestParams,
    TTestSolution,
)

__all__ = [
    "correlation",
    "linear_regression",
    "t_test",
    "RegressionParams",
    "RegressionSolution",
    "TTestParams",
    "TTestSolution",
]
