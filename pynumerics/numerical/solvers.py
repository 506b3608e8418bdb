"""
Iterative and direct numerical methods.

Provides newton_raphson() for scalar root finding, integrate() for
composite Simpson quadrature and gaussian_elimination() for square
linear systems.
"""

from __future__ import annotations

import warnings
from typing import Any, Callable
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumerics.core.compute.precision import EPSILON_64, round_half_up
from pynumerics.core.compute.timing import timed
from pynumerics.core.compute.tolerances import (
    NEWTON_TOLERANCE,
    NEWTON_MAX_ITERATIONS,
    NEWTON_DIGITS,
    SIMPSON_INTERVALS,
    ELIMINATION_DIGITS,
)
from pynumerics.core.exceptions import DerivativeTooSmallError, SingularMatrixError
from pynumerics.core.result import Result
from pynumerics.core.validation import (
    check_consistent_length,
    check_matrix,
    check_positive,
    check_positive_integer,
    check_square,
    check_vector,
)
from pynumerics.numerical.solution import RootParams, RootSolution


ScalarFunction = Callable[[float], float]


def newton_raphson(
    f: ScalarFunction,
    f_prime: ScalarFunction,
    x0: float,
    tolerance: float = NEWTON_TOLERANCE,
    max_iterations: int = NEWTON_MAX_ITERATIONS,
    *,
    digits: int | None = NEWTON_DIGITS,
) -> RootSolution:
    """
    Find a root of f by Newton-Raphson iteration.

    Iterates x_{n+1} = x_n - f(x_n) / f'(x_n) until two successive
    estimates differ by less than `tolerance`.

    Parameters
    ----------
    f : callable
        Function whose root is sought.
    f_prime : callable
        Derivative of f.
    x0 : float
        Starting point.
    tolerance : float
        Step-size stopping threshold. Also the smallest derivative
        magnitude the iteration is allowed to divide by. Default 1e-4.
    max_iterations : int
        Maximum number of steps. Default 100.
    digits : int or None
        Decimals the reported root is rounded to (half-up). Default 5.
        None reports the unrounded estimate.

    Returns
    -------
    RootSolution
        root, iterations and converged flag. When the iteration cap is
        reached the last estimate is returned with converged=False and
        a RuntimeWarning is emitted.

    Raises
    ------
    DerivativeTooSmallError
        If |f'(x)| < tolerance at any step.
    """
    tolerance = check_positive(tolerance, "tolerance")
    max_iterations = check_positive_integer(max_iterations, "max_iterations")

    x = float(x0)
    converged = False
    iterations = max_iterations
    step = np.nan

    with timed() as timer, timer.section('iterate'):
        for i in range(max_iterations):
            fx = float(f(x))
            fpx = float(f_prime(x))

            if abs(fpx) < tolerance:
                raise DerivativeTooSmallError(
                    f"Derivative too small at iteration {i}: "
                    f"|f'({x:.6g})| = {abs(fpx):.3g} < tolerance {tolerance:g}",
                    x=x,
                    derivative=fpx,
                    iteration=i,
                )

            x_new = x - fx / fpx
            step = abs(x_new - x)

            if step < tolerance:
                x = x_new
                converged = True
                iterations = i + 1
                break

            x = x_new

    warnings_list: list[str] = []
    if not converged:
        msg = (
            f"Newton-Raphson did not converge after {max_iterations} iterations "
            f"(last step {step:.3g}, tolerance {tolerance:g})"
        )
        warnings_list.append(msg)
        warnings.warn(msg, RuntimeWarning, stacklevel=2)

    result = Result(
        params=RootParams(
            root=round_half_up(x, digits),
            iterations=iterations,
            converged=converged,
        ),
        info={
            'method': 'newton_raphson',
            'x0': float(x0),
            'tolerance': tolerance,
            'max_iterations': max_iterations,
            'final_step': float(step),
            'unrounded_root': x,
        },
        timing=timer.result(),
        backend_name='cpu_newton',
        warnings=tuple(warnings_list),
    )
    return RootSolution(_result=result)


def integrate(
    f: ScalarFunction,
    a: float,
    b: float,
    n: int = SIMPSON_INTERVALS,
) -> float:
    """
    Approximate the integral of f over [a, b] with composite Simpson's rule.

    Parameters
    ----------
    f : callable
        Integrand, evaluated at n + 1 equally spaced points.
    a, b : float
        Integration limits. b < a gives the negated integral.
    n : int
        Number of subintervals. An odd n is increased by one, since
        Simpson's rule needs an even count. Default 1000.

    Returns
    -------
    float
    """
    n = check_positive_integer(n, "n")
    if n % 2 != 0:
        n += 1

    a = float(a)
    b = float(b)
    h = (b - a) / n
    total = float(f(a)) + float(f(b))

    for i in range(1, n):
        x = a + i * h
        weight = 2.0 if i % 2 == 0 else 4.0
        total += weight * float(f(x))

    return (h / 3.0) * total


def gaussian_elimination(
    matrix: ArrayLike,
    constants: ArrayLike,
    *,
    digits: int | None = ELIMINATION_DIGITS,
    pivot_tolerance: float | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Solve matrix @ x = constants by Gaussian elimination with partial pivoting.

    For each column the row with the largest absolute coefficient at or
    below the diagonal is swapped into the pivot position; ties go to
    the topmost such row. Elimination and back substitution run on an
    augmented copy, so the inputs are left untouched.

    Parameters
    ----------
    matrix : array-like, shape (n, n)
        Coefficient matrix.
    constants : array-like, shape (n,)
        Right-hand side.
    digits : int or None
        Decimals the solution is rounded to (half-up). Default 5.
        None returns the unrounded solution.
    pivot_tolerance : float or None
        Pivots with magnitude at or below this value are treated as zero.
        Default n * eps * max|matrix|, so the threshold follows the scale
        of the coefficients.

    Returns
    -------
    ndarray, shape (n,)

    Raises
    ------
    NotSquareError
        If matrix is not square.
    LengthMismatchError
        If constants does not have one entry per row.
    SingularMatrixError
        If a column has no usable pivot.
    """
    coefficients = check_matrix(matrix, "matrix")
    check_square(coefficients, "matrix")
    rhs = check_vector(constants, "constants")
    check_consistent_length(coefficients, rhs, names=("matrix", "constants"))

    n = coefficients.shape[0]
    if pivot_tolerance is None:
        scale = float(np.max(np.abs(coefficients))) if n > 0 else 0.0
        pivot_tolerance = n * EPSILON_64 * scale
    augmented = np.column_stack([coefficients, rhs])

    # Forward elimination
    for i in range(n):
        max_row = i + int(np.argmax(np.abs(augmented[i:, i])))
        if max_row != i:
            augmented[[i, max_row]] = augmented[[max_row, i]]

        pivot = augmented[i, i]
        if abs(pivot) <= pivot_tolerance:
            raise SingularMatrixError(
                f"matrix is singular: no usable pivot in column {i} "
                f"(largest |coefficient| = {abs(pivot):.3g})",
                matrix_name="matrix",
                pivot_index=i,
                pivot_value=float(pivot),
            )

        for k in range(i + 1, n):
            factor = augmented[k, i] / pivot
            augmented[k, i:] -= factor * augmented[i, i:]

    # Back substitution
    solution = np.empty(n, dtype=np.float64)
    for i in range(n - 1, -1, -1):
        value = augmented[i, n]
        for j in range(i + 1, n):
            value -= augmented[i, j] * solution[j]
        solution[i] = value / augmented[i, i]

    return round_half_up(solution, digits)
