"""
Root-finding solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pynumerics.core.result import Result


@dataclass(frozen=True)
class RootParams:
    """
    Parameter payload for root finding.

    Attributes
    ----------
    root : float
        Final estimate of the root.
    iterations : int
        Number of Newton steps taken.
    converged : bool
        Whether the step size fell below the tolerance.
    """
    root: float
    iterations: int
    converged: bool


@dataclass
class RootSolution:
    """
    User-facing root-finding results.

    Wraps Result[RootParams]; check `converged` before trusting `root`.
    """
    _result: Result[RootParams]

    @property
    def root(self) -> float:
        return self._result.params.root

    @property
    def iterations(self) -> int:
        return self._result.params.iterations

    @property
    def converged(self) -> bool:
        return self._result.params.converged

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

    def summary(self) -> str:
        """Human-readable report."""
        status = "converged" if self.converged else "did NOT converge"
        lines = [
            "Newton-Raphson root finding",
            "",
            f"root = {self.root:.10g}",
            f"iterations = {self.iterations} ({status}, "
            f"tolerance = {self.info.get('tolerance'):g})",
        ]
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"RootSolution(root={self.root!r}, iterations={self.iterations}, "
            f"converged={self.converged})"
        )
