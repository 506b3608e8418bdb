"""
Integer utilities module.

Public API:
    gcd(a, b)              - Greatest common divisor
    lcm(a, b)              - Least common multiple
    is_prime(n)            - Primality by trial division
    fibonacci(n)           - First n Fibonacci numbers
    factorial(n)           - n!
    combinations(n, k)     - n choose k
    permutations(n, k)     - n!/(n-k)!
"""

from pynumerics.mathutils.integers import (
    gcd,
    lcm,
    is_prime,
    fibonacci,
    factorial,
    combinations,
    permutations,
)

__all__ = [
    "gcd",
    "lcm",
    "is_prime",
    "fibonacci",
    "factorial",
    "combinations",
    "permutations",
]
