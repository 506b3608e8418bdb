"""
Time value of money.

Provides present_value(), future_value(), net_present_value(),
internal_rate_of_return(), loan_payment() and compound_interest().
Rates are per-period decimal fractions (0.05 for 5%).
"""

from __future__ import annotations

import warnings
import numpy as np
from numpy.typing import ArrayLike

from pynumerics.core.compute.precision import round_half_up
from pynumerics.core.compute.timing import timed
from pynumerics.core.compute.tolerances import (
    IRR_PRECISION,
    IRR_MAX_ITERATIONS,
    IRR_INITIAL_RATE,
    IRR_BRACKET,
    IRR_DIGITS,
    CURRENCY_DIGITS,
    PERIODS_PER_YEAR,
)
from pynumerics.core.result import Result
from pynumerics.core.validation import (
    check_positive,
    check_positive_integer,
    check_vector,
)
from pynumerics.finance.solution import (
    CompoundInterestParams,
    CompoundInterestSolution,
    IRRParams,
    IRRSolution,
)


def _growth(rate: float, periods: float) -> np.float64:
    """(1 + rate)^periods in float64; overflow gives inf rather than raising."""
    return np.power(np.float64(1.0 + rate), periods)


def present_value(future_value: float, rate: float, periods: float) -> float:
    """Value today of `future_value` received after `periods` periods."""
    with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
        return float(np.float64(future_value) / _growth(rate, periods))


def future_value(present_value: float, rate: float, periods: float) -> float:
    """Value after `periods` periods of `present_value` invested today."""
    with np.errstate(over='ignore', invalid='ignore'):
        return float(present_value * _growth(rate, periods))


def net_present_value(rate: float, cash_flows: ArrayLike) -> float:
    """
    Sum of cash flows discounted to period 0.

    The flow at index i is divided by (1 + rate)^i, so the first flow
    is undiscounted. An empty series has NPV 0.
    """
    flows = check_vector(cash_flows, "cash_flows")
    periods = np.arange(flows.shape[0], dtype=np.float64)
    with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
        return float(np.sum(flows / _growth(rate, periods)))


def internal_rate_of_return(
    cash_flows: ArrayLike,
    precision: float = IRR_PRECISION,
    *,
    max_iterations: int = IRR_MAX_ITERATIONS,
    digits: int | None = IRR_DIGITS,
) -> IRRSolution:
    """
    Rate at which the net present value of `cash_flows` is zero.

    Bisection over [0, 1] starting from 0.1. At each step the NPV at the
    current rate decides which half of the bracket to keep: a positive
    NPV means the rate is too low.

    Parameters
    ----------
    cash_flows : array-like
        Flows by period, typically a negative investment followed by
        positive returns.
    precision : float
        Stop once |NPV| < precision. Default 1e-4.
    max_iterations : int
        Bisection cap. Default 1000.
    digits : int or None
        Decimals the rate is rounded to (half-up). Default 4.

    Returns
    -------
    IRRSolution
        If the cap is reached the last rate is returned with
        converged=False and a RuntimeWarning is emitted. Roots outside
        [0, 1] cannot be found; the search then drifts to a bracket end.
    """
    flows = check_vector(cash_flows, "cash_flows")
    precision = check_positive(precision, "precision")
    max_iterations = check_positive_integer(max_iterations, "max_iterations")

    rate = IRR_INITIAL_RATE
    low, high = IRR_BRACKET
    converged = False
    iterations = max_iterations
    npv = np.nan

    with timed() as timer, timer.section('bisection'):
        for i in range(max_iterations):
            npv = net_present_value(rate, flows)

            if abs(npv) < precision:
                converged = True
                iterations = i + 1
                break

            if npv > 0:
                low = rate
                rate = (rate + high) / 2.0
            else:
                high = rate
                rate = (low + rate) / 2.0

    if not converged:
        npv = net_present_value(rate, flows)

    warnings_list: list[str] = []
    if not converged:
        msg = (
            f"IRR bisection did not converge after {max_iterations} iterations "
            f"(|NPV| = {abs(npv):.3g}, precision {precision:g})"
        )
        warnings_list.append(msg)
        warnings.warn(msg, RuntimeWarning, stacklevel=2)

    result = Result(
        params=IRRParams(
            rate=round_half_up(rate, digits),
            iterations=iterations,
            converged=converged,
            npv=float(npv),
        ),
        info={
            'method': 'bisection',
            'precision': precision,
            'max_iterations': max_iterations,
            'bracket': (float(low), float(high)),
            'unrounded_rate': float(rate),
        },
        timing=timer.result(),
        backend_name='cpu_bisection',
        warnings=tuple(warnings_list),
    )
    return IRRSolution(_result=result)


def loan_payment(
    principal: float,
    rate: float,
    periods: int,
    *,
    periods_per_year: int = PERIODS_PER_YEAR,
    digits: int | None = CURRENCY_DIGITS,
) -> float:
    """
    Level payment that amortizes `principal` over `periods` payments.

    Parameters
    ----------
    principal : float
        Amount borrowed.
    rate : float
        Annual interest rate; the per-payment rate is rate / periods_per_year.
    periods : int
        Number of payments.
    periods_per_year : int
        Payments per year. Default 12 (monthly).
    digits : int or None
        Decimals the amortized payment is rounded to (half-up). Default 2.

    Returns
    -------
    float
        P * r * (1 + r)^n / ((1 + r)^n - 1), or the unrounded
        principal / periods when rate is 0. A growth factor that
        overflows float64 gives NaN rather than raising.
    """
    periods = check_positive_integer(periods, "periods")
    periods_per_year = check_positive_integer(periods_per_year, "periods_per_year")

    if rate == 0:
        return float(principal / periods)

    r = rate / periods_per_year
    with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
        growth = _growth(r, periods)
        payment = principal * (r * growth) / (growth - 1.0)
    return round_half_up(payment, digits)


def compound_interest(
    principal: float,
    rate: float,
    compounding_periods: int,
    time: float,
    *,
    digits: int | None = CURRENCY_DIGITS,
) -> CompoundInterestSolution:
    """
    Balance and interest after compounding `compounding_periods` times a year.

    Parameters
    ----------
    principal : float
        Starting balance.
    rate : float
        Nominal annual rate.
    compounding_periods : int
        Compounding events per year (12 for monthly).
    time : float
        Duration in years.
    digits : int or None
        Decimals money amounts are rounded to (half-up). Default 2; the
        effective rate keeps two more decimals.

    Returns
    -------
    CompoundInterestSolution
    """
    m = check_positive_integer(compounding_periods, "compounding_periods")

    with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
        amount = principal * _growth(rate / m, m * time)
        interest = amount - principal
        effective = _growth(rate / m, m) - 1.0
    rate_digits = None if digits is None else digits + 2

    result = Result(
        params=CompoundInterestParams(
            final_amount=round_half_up(amount, digits),
            interest_earned=round_half_up(interest, digits),
            effective_rate=round_half_up(effective, rate_digits),
        ),
        info={
            'method': 'discrete_compounding',
            'principal': float(principal),
            'rate': float(rate),
            'compounding_periods': m,
            'time': float(time),
        },
        timing=None,
        backend_name='cpu_finance',
    )
    return CompoundInterestSolution(_result=result)
