"""
Tests for numtasks/number_theory.py

Primality is checked against a brute-force divisor count over a range of
integers; the other helpers use small hand-checked values.
"""

import numpy as np
import pytest

from numtasks.number_theory import (
    get_count_of_odd_numbers,
    get_fibonacci_number,
    get_last_digit,
    get_sum_of_digits,
    get_sum_to_n,
    is_power_of_two,
    is_prime,
)
from numtasks.utils.errors import InvalidValueError, TypeMismatchError


def _is_prime_by_divisor_count(n: int) -> bool:
    """Ground truth: n > 1 with no divisor in [2, n)."""
    return n > 1 and all(n % d for d in range(2, n))


def test_is_prime_matches_ground_truth():
    """is_prime agrees with brute force for every integer in [-10, 10000]."""
    # Brute force is quadratic, so compare against a sieve past 1000
    sieve = np.ones(10001, dtype=bool)
    sieve[:2] = False
    for i in range(2, 101):
        if sieve[i]:
            sieve[i * i :: i] = False

    for n in range(-10, 10001):
        expected = bool(sieve[n]) if n >= 0 else False
        assert is_prime(n) == expected, n

    for n in range(-10, 200):
        assert is_prime(n) == _is_prime_by_divisor_count(n), n


@pytest.mark.parametrize(
    "n, expected",
    [(2, True), (1, False), (9, False), (4, False), (5, True), (6, False),
     (7, True), (11, True), (12, False), (16, False), (17, True)],
)
def test_is_prime_known_values(n, expected):
    assert is_prime(n) is expected


@pytest.mark.parametrize("value", [2.5, 7.0001, "7", None, float("nan"), float("inf")])
def test_is_prime_never_raises(value):
    """Non-integers are simply not prime."""
    assert is_prime(value) is False


def test_is_prime_accepts_integer_valued_floats_and_large_values():
    assert is_prime(7.0) is True
    assert is_prime(1_000_000_007) is True
    assert is_prime(10007 * 10009) is False


@pytest.mark.parametrize("index, expected", [(0, 0), (1, 1), (2, 1), (3, 2), (10, 55)])
def test_get_fibonacci_number_known_values(index, expected):
    assert get_fibonacci_number(index) == expected


def test_get_fibonacci_number_is_exact_for_large_index():
    """Python ints keep large Fibonacci numbers exact."""
    assert get_fibonacci_number(100) == 354224848179261915075


@pytest.mark.parametrize("index", [-1, 2.5])
def test_get_fibonacci_number_rejects_invalid_index(index):
    with pytest.raises(InvalidValueError):
        get_fibonacci_number(index)


def test_get_fibonacci_number_rejects_non_numbers():
    with pytest.raises(TypeMismatchError):
        get_fibonacci_number("10")


@pytest.mark.parametrize("n, expected", [(5, 15), (10, 55), (1, 1)])
def test_get_sum_to_n(n, expected):
    assert get_sum_to_n(n) == expected


@pytest.mark.parametrize("n", [0, -3, 1.5])
def test_get_sum_to_n_rejects_non_positive_integers(n):
    with pytest.raises(InvalidValueError):
        get_sum_to_n(n)


@pytest.mark.parametrize("num, expected", [(123, 6), (202, 4), (5, 5), (0, 0)])
def test_get_sum_of_digits(num, expected):
    assert get_sum_of_digits(num) == expected


def test_get_sum_of_digits_validation():
    with pytest.raises(InvalidValueError):
        get_sum_of_digits(-12)
    with pytest.raises(TypeMismatchError):
        get_sum_of_digits("12")


def test_get_sum_of_digits_beyond_str_conversion_limit():
    """Integers longer than 4300 digits are summed without str()."""
    assert get_sum_of_digits(10**5000 - 1) == 9 * 5000
    assert get_sum_of_digits(10**5000) == 1


@pytest.mark.parametrize("num", [1, 2, 4, 16, 1024, 2**100, 0.5, 0.25, 8.0])
def test_is_power_of_two_true(num):
    assert is_power_of_two(num) is True


@pytest.mark.parametrize("num", [0, -4, 3, 15, 0.3, 2**100 + 1, "4", None, float("nan"), float("inf")])
def test_is_power_of_two_false(num):
    assert is_power_of_two(num) is False


@pytest.mark.parametrize("value, expected", [(100, 0), (37, 7), (5, 5), (0, 0)])
def test_get_last_digit(value, expected):
    assert get_last_digit(value) == expected


@pytest.mark.parametrize("value", [-1, 3.5])
def test_get_last_digit_rejects_invalid_values(value):
    with pytest.raises(InvalidValueError):
        get_last_digit(value)


@pytest.mark.parametrize("number", [4, 5, 10, 15])
def test_get_count_of_odd_numbers_is_not_implemented(number):
    """The stub must fail until it is implemented."""
    with pytest.raises(NotImplementedError):
        get_count_of_odd_numbers(number)
