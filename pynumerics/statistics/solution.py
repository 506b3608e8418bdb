"""
Statistics solution types.

RegressionSolution wraps Result[RegressionParams]; TTestSolution wraps
Result[TTestParams]. Both provide a summary() report.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pynumerics.core.result import Result


@dataclass(frozen=True)
class RegressionParams:
    """
    Parameter payload for simple linear regression.

    Attributes
    ----------
    slope : float
    intercept : float
    r_squared : float
        Coefficient of determination, 1 - RSS/TSS. NaN when y is constant.
    """
    slope: float
    intercept: float
    r_squared: float


@dataclass(frozen=True)
class TTestParams:
    """
    Parameter payload for the pooled two-sample t-test.

    Attributes
    ----------
    mean1, mean2 : float
        Sample means.
    t_statistic : float
        (mean1 - mean2) / standard_error. NaN when both samples are constant.
    degrees_of_freedom : int
        n1 + n2 - 2.
    standard_error : float
        sqrt(pooled_variance * (1/n1 + 1/n2)).
    """
    mean1: float
    mean2: float
    t_statistic: float
    degrees_of_freedom: int
    standard_error: float


class _SolutionBase:
    """Shared metadata accessors."""
    _result: Result[Any]

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings


@dataclass
class RegressionSolution(_SolutionBase):
    """User-facing linear regression results."""
    _result: Result[RegressionParams]

    @property
    def slope(self) -> float:
        return self._result.params.slope

    @property
    def intercept(self) -> float:
        return self._result.params.intercept

    @property
    def r_squared(self) -> float:
        return self._result.params.r_squared

    @property
    def equation(self) -> str:
        """Fitted line, e.g. 'y = 2.0000x + 1.0000'."""
        slope = self._result.info['unrounded_slope']
        intercept = self._result.info['unrounded_intercept']
        return f"y = {slope:.4f}x + {intercept:.4f}"

    def predict(self, x: float) -> float:
        """Evaluate the fitted line at x using the unrounded coefficients."""
        return (self._result.info['unrounded_slope'] * float(x)
                + self._result.info['unrounded_intercept'])

    def summary(self) -> str:
        lines = [
            "Simple linear regression (ordinary least squares)",
            "",
            f"n = {self.info['n']}",
            self.equation,
            f"R-squared = {self.r_squared:.4f}",
        ]
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"RegressionSolution(slope={self.slope!r}, "
            f"intercept={self.intercept!r}, r_squared={self.r_squared!r})"
        )


@dataclass
class TTestSolution(_SolutionBase):
    """User-facing two-sample t-test results."""
    _result: Result[TTestParams]

    @property
    def mean1(self) -> float:
        return self._result.params.mean1

    @property
    def mean2(self) -> float:
        return self._result.params.mean2

    @property
    def t_statistic(self) -> float:
        return self._result.params.t_statistic

    @property
    def degrees_of_freedom(self) -> int:
        return self._result.params.degrees_of_freedom

    @property
    def standard_error(self) -> float:
        return self._result.params.standard_error

    def summary(self) -> str:
        p = self._result.params
        lines = [
            "\tTwo Sample t-test (pooled variance)",
            "",
            f"t = {p.t_statistic:.5g}, df = {p.degrees_of_freedom}, "
            f"standard error = {p.standard_error:.5g}",
            "sample estimates:",
            f"mean of sample1 = {p.mean1:.5g}, mean of sample2 = {p.mean2:.5g}",
        ]
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"TTestSolution(t_statistic={self.t_statistic!r}, "
            f"degrees_of_freedom={self.degrees_of_freedom})"
        )
