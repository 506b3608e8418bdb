"""
Finance solution types.

Contains parameter payloads and user-facing wrappers for the internal
rate of return and compound interest calculations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pynumerics.core.result import Result


@dataclass(frozen=True)
class IRRParams:
    """
    Parameter payload for the internal rate of return search.

    Attributes
    ----------
    rate : float
        Final rate estimate.
    iterations : int
        Bisection steps evaluated.
    converged : bool
        Whether |NPV(rate)| fell below the requested precision.
    npv : float
        Net present value at the final (unrounded) rate.
    """
    rate: float
    iterations: int
    converged: bool
    npv: float


@dataclass(frozen=True)
class CompoundInterestParams:
    """
    Parameter payload for compound interest.

    Attributes
    ----------
    final_amount : float
        principal * (1 + rate/m)^(m*t)
    interest_earned : float
        final_amount - principal
    effective_rate : float
        Effective annual rate (1 + rate/m)^m - 1
    """
    final_amount: float
    interest_earned: float
    effective_rate: float


@dataclass
class IRRSolution:
    """User-facing internal rate of return result."""
    _result: Result[IRRParams]

    @property
    def rate(self) -> float:
        return self._result.params.rate

    @property
    def iterations(self) -> int:
        return self._result.params.iterations

    @property
    def converged(self) -> bool:
        return self._result.params.converged

    @property
    def npv(self) -> float:
        return self._result.params.npv

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        status = "converged" if self.converged else "did NOT converge"
        lines = [
            "Internal rate of return (bisection)",
            "",
            f"rate = {self.rate:.4%}",
            f"NPV at rate = {self.npv:.6g}",
            f"iterations = {self.iterations} ({status})",
        ]
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __float__(self) -> float:
        return float(self.rate)

    def __repr__(self) -> str:
        return (
            f"IRRSolution(rate={self.rate!r}, iterations={self.iterations}, "
            f"converged={self.converged})"
        )


@dataclass
class CompoundInterestSolution:
    """User-facing compound interest result."""
    _result: Result[CompoundInterestParams]

    @property
    def final_amount(self) -> float:
        return self._result.params.final_amount

    @property
    def interest_earned(self) -> float:
        return self._result.params.interest_earned

    @property
    def effective_rate(self) -> float:
        return self._result.params.effective_rate

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    def summary(self) -> str:
        return "\n".join([
            "Compound interest",
            "",
            f"principal = {self.info['principal']:.2f}",
            f"final amount = {self.final_amount:.2f}",
            f"interest earned = {self.interest_earned:.2f}",
            f"effective annual rate = {self.effective_rate:.4%}",
        ])

    def __repr__(self) -> str:
        return (
            f"CompoundInterestSolution(final_amount={self.final_amount!r}, "
            f"interest_earned={self.interest_earned!r}, "
            f"effective_rate={self.effective_rate!r})"
        )
