"""
PyNumerics: a small numerical-computation toolkit for Python.

Deterministic, stateless routines over numeric sequences and dense
matrices. Each submodule is independent; import the one you need.

Submodules:
    matrix: Dense matrix construction and algebra
    numerical: Newton-Raphson, Simpson integration, Gaussian elimination
    statistics: Correlation, simple linear regression, pooled t-test
    finance: Present/future value, NPV, IRR, loan payment, compound interest
    mathutils: GCD/LCM, primality, Fibonacci, factorial, combinatorics
"""

__version__ = "0.1.0"

from pynumerics import matrix
from pynumerics import numerical
from pynumerics import statistics
from pynumerics import finance
from pynumerics import mathutils

__all__ = [
    "__version__",
    "matrix",
    "numerical",
    "statistics",
    "finance",
    "mathutils",
]
