"""
Number-theoretic and combinatorial helpers on exact integers.

All results are Python ints, so factorials and binomial coefficients
never overflow. Arguments must be integers; bools and floats are
rejected.
"""

from __future__ import annotations

import math

from pynumerics.core.exceptions import DivisionByZeroError
from pynumerics.core.validation import check_integer, check_non_negative_integer


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor by the Euclidean algorithm.

    Works on absolute values, so the result is never negative:
    gcd(a, 0) == |a| and gcd(0, 0) == 0. The sign of the inputs is
    dropped, so gcd(-4, 0) is 4 where a bare remainder loop gives -4.
    """
    a = abs(check_integer(a, "a"))
    b = abs(check_integer(b, "b"))
    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """
    Least common multiple |a * b| / gcd(a, b).

    Raises
    ------
    DivisionByZeroError
        If both a and b are 0.
    """
    divisor = gcd(a, b)
    if divisor == 0:
        raise DivisionByZeroError("lcm(0, 0) is undefined: gcd(0, 0) == 0")
    return abs(int(a) * int(b)) // divisor


def is_prime(n: int) -> bool:
    """Trial division by 2 and odd candidates up to isqrt(n)."""
    n = check_integer(n, "n")
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    for candidate in range(3, math.isqrt(n) + 1, 2):
        if n % candidate == 0:
            return False
    return True


def fibonacci(n: int) -> list[int]:
    """
    First n Fibonacci numbers, starting 0, 1.

    fibonacci(0) == [] (also for negative n), fibonacci(1) == [0].
    """
    n = check_integer(n, "n")
    sequence: list[int] = []
    current, following = 0, 1
    for _ in range(max(n, 0)):
        sequence.append(current)
        current, following = following, current + following
    return sequence


def factorial(n: int) -> int:
    """n! for n >= 0 (0! == 1)."""
    n = check_non_negative_integer(n, "n")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def combinations(n: int, k: int) -> int:
    """
    Number of k-element subsets of an n-element set.

    Returns 0 when k > n.
    """
    n = check_non_negative_integer(n, "n")
    k = check_non_negative_integer(k, "k")
    if k > n:
        return 0
    if k == 0 or k == n:
        return 1
    return factorial(n) // (factorial(k) * factorial(n - k))


def permutations(n: int, k: int) -> int:
    """
    Number of ordered k-element selections from n elements.

    Returns 0 when k > n.
    """
    n = check_non_negative_integer(n, "n")
    k = check_non_negative_integer(k, "k")
    if k > n:
        return 0
    return factorial(n) // factorial(n - k)
