"""
Generic result container for PyNumerics computations.

The Result class provides a standardized envelope that the structured
outputs (root finding, regression, t-test, IRR, compound interest) use.
This enables shared tooling for timing, warnings and reporting while
allowing each subpackage to define its own parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (converged, iterations, method)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for numerical computations.

    Type Parameters:
        P: The subpackage-specific parameter payload type

    Attributes:
        params: Computed values (root, slope, rate, ...)
        info: Structured metadata (method, convergence, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the routine that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> # Direct method (no convergence notion)
        >>> Result(
        ...     params=RegressionParams(slope=2.0, intercept=0.0, r_squared=1.0),
        ...     info={'method': 'ols_closed_form', 'n': 5},
        ...     timing=None,
        ...     backend_name='cpu_ols'
        ... )

        >>> # Iterative method
        >>> Result(
        ...     params=RootParams(root=1.41421, iterations=5, converged=True),
        ...     info={'method': 'newton_raphson', 'tolerance': 1e-4},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_newton'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
