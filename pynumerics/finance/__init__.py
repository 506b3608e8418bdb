"""
Finance module.

Time-value-of-money calculations.

Public API:
    present_value(fv, rate, periods)        - Discount a single amount
    future_value(pv, rate, periods)         - Grow a single amount
    net_present_value(rate, cash_flows)     - NPV of a cash-flow series
    internal_rate_of_return(cash_flows)     - IRR by bisection
    loan_payment(principal, rate, periods)  - Amortizing payment
    compound_interest(p, rate, m, t)        - Balance, interest, effective rate
"""

from pynumerics.finance.solvers import (
    present_value,
    future_value,
    net_present_value,
    internal_rate_of_return,
    loan_payment,
    compound_interest,
)
from pynumerics.finance.solution import (
    IRRParams,
    IRRSolution,
    CompoundInterestParams,
    CompoundInterestSolution,
)

__all__ = [
    "present_value",
    "future_value",
    "net_present_value",
    "internal_rate_of_return",
    "loan_payment",
    "compound_interest",
    "IRRParams",
    "IRRSolution",
    "CompoundInterestParams",
    "CompoundInterestSolution",
]
