"""
Default tolerances, iteration caps and rounding for numerical routines.

Every routine takes its threshold as a keyword argument; the constants
here are the defaults.
"""


# Newton-Raphson
NEWTON_TOLERANCE = 1e-4
NEWTON_MAX_ITERATIONS = 100
NEWTON_DIGITS = 5

# Simpson's rule
SIMPSON_INTERVALS = 1000

# Gaussian elimination
ELIMINATION_DIGITS = 5

# Statistics
STATISTICS_DIGITS = 4

# Internal rate of return (bisection over [0, 1])
IRR_PRECISION = 1e-4
IRR_MAX_ITERATIONS = 1000
IRR_INITIAL_RATE = 0.1
IRR_BRACKET = (0.0, 1.0)
IRR_DIGITS = 4

# Money amounts
CURRENCY_DIGITS = 2
PERIODS_PER_YEAR = 12
