"""
Tests for integer utilities: gcd/lcm, primality, Fibonacci, combinatorics.
"""

import math

import numpy as np
import pytest

from pynumerics.core.exceptions import DivisionByZeroError, ValidationError
from pynumerics.mathutils import (
    combinations,
    factorial,
    fibonacci,
    gcd,
    is_prime,
    lcm,
    permutations,
)


class TestGcdLcm:

    @pytest.mark.parametrize("a, b, expected", [
        (48, 18, 6),
        (18, 48, 6),
        (17, 5, 1),
        (7, 0, 7),
        (0, 7, 7),
        (0, 0, 0),
        (-48, 18, 6),
        (-4, 0, 4),
        (0, -4, 4),
    ])
    def test_gcd(self, a, b, expected):
        assert gcd(a, b) == expected

    def test_gcd_matches_math(self, rng):
        for a, b in rng.integers(0, 10_000, size=(20, 2)):
            assert gcd(a, b) == math.gcd(int(a), int(b))

    @pytest.mark.parametrize("a, b, expected", [
        (4, 6, 12),
        (21, 6, 42),
        (5, 0, 0),
        (-4, 6, 12),
    ])
    def test_lcm(self, a, b, expected):
        assert lcm(a, b) == expected

    def test_lcm_of_zeros_undefined(self):
        with pytest.raises(DivisionByZeroError):
            lcm(0, 0)

    def test_rejects_floats(self):
        with pytest.raises(ValidationError):
            gcd(4.0, 2)


class TestIsPrime:

    @pytest.mark.parametrize("n", [2, 3, 5, 17, 97, 7919, 2_147_483_647])
    def test_primes(self, n):
        assert is_prime(n) is True

    @pytest.mark.parametrize("n", [-7, 0, 1, 4, 9, 25, 91, 7917])
    def test_non_primes(self, n):
        assert is_prime(n) is False

    def test_square_of_prime(self):
        assert is_prime(101 * 101) is False

    def test_numpy_integer(self):
        assert is_prime(np.int64(13)) is True


class TestFibonacci:

    @pytest.mark.parametrize("n, expected", [
        (-3, []),
        (0, []),
        (1, [0]),
        (2, [0, 1]),
        (10, [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]),
    ])
    def test_prefixes(self, n, expected):
        assert fibonacci(n) == expected

    def test_large_terms_exact(self):
        seq = fibonacci(101)
        assert seq[100] == 354224848179261915075

    def test_restartable(self):
        assert fibonacci(15) == fibonacci(15)


class TestCombinatorics:

    @pytest.mark.parametrize("n, expected", [(0, 1), (1, 1), (5, 120), (10, 3628800)])
    def test_factorial(self, n, expected):
        assert factorial(n) == expected

    def test_factorial_is_exact_for_large_n(self):
        assert factorial(200) == math.factorial(200)

    def test_factorial_negative(self):
        with pytest.raises(ValidationError):
            factorial(-1)

    @pytest.mark.parametrize("n, k, expected", [
        (5, 2, 10),
        (5, 0, 1),
        (5, 5, 1),
        (3, 4, 0),
        (52, 5, 2598960),
    ])
    def test_combinations(self, n, k, expected):
        assert combinations(n, k) == expected

    def test_combinations_large(self):
        assert combinations(300, 150) == math.comb(300, 150)

    @pytest.mark.parametrize("n, k, expected", [
        (5, 2, 20),
        (5, 0, 1),
        (5, 5, 120),
        (3, 4, 0),
    ])
    def test_permutations(self, n, k, expected):
        assert permutations(n, k) == expected

    def test_negative_k(self):
        with pytest.raises(ValidationError):
            combinations(5, -1)
        with pytest.raises(ValidationError):
            permutations(5, -1)
