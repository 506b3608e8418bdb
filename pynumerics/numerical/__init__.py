"""
Numerical methods module.

Public API:
    newton_raphson(f, f_prime, x0)          - Scalar root finding
    integrate(f, a, b)                      - Composite Simpson's rule
    gaussian_elimination(matrix, constants) - Linear systems, partial pivoting
"""

from pynumerics.numerical.solvers import (
    newton_raphson,
    integrate,
    gaussian_elimination,
)
from pynumerics.numerical.solution import RootParams, RootSolution

__all__ = [
    "newton_raphson",
    "integrate",
    "gaussian_elimination",
    "RootParams",
    "RootSolution",
]
