"""
Integer and number-theory helpers.

This module provides primality testing, Fibonacci numbers, triangular sums,
digit sums, a power-of-two check and the last decimal digit of an integer.

**Integers**: Python ints have arbitrary precision, so results such as
get_fibonacci_number(100) are exact rather than rounded to a double. Arguments
may also be integer-valued floats (10.0) or NumPy integers; they are converted
to int after validation.
"""

import math
import numbers

from numtasks.utils.validation import is_integral_number, is_real_number, require_integer


def is_prime(n) -> bool:
    """
    Return True if n is a prime number, False otherwise.

    **Conceptual**: A prime has exactly two divisors, 1 and itself. This never
    raises: anything that is not an integer > 1 (negative numbers, floats with
    a fraction, strings, None) is simply "not prime".

    **Mathematical**: Trial division. If n has a divisor d > 1 then it has one
    with d <= sqrt(n), so only candidates up to floor(sqrt(n)) are checked.
    After ruling out 2, only odd candidates are tried.

    **Functionally**:
    - O(sqrt(n)) divisions; fine for n up to ~10^12.
    - math.isqrt gives an exact integer square root, so very large n do not
      suffer from float rounding in the bound.

    Args:
        n: Candidate value.

    Returns:
        True if n is prime.

    Example:
        >>> [k for k in range(20) if is_prime(k)]
        [2, 3, 5, 7, 11, 13, 17, 19]
    """
    if not is_integral_number(n):
        return False

    n = int(n)
    if n <= 1:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False

    for divisor in range(3, math.isqrt(n) + 1, 2):
        if n % divisor == 0:
            return False
    return True


def get_fibonacci_number(index) -> int:
    """
    Return the Fibonacci number at the given index (F0 = 0, F1 = 1).

    **Mathematical**: F(n) = F(n-1) + F(n-2). Computed iteratively in O(n)
    time and O(1) space; no recursion, so large indices are fine.

    Raises:
        TypeMismatchError: If index is not a number.
        InvalidValueError: If index is not a non-negative integer.

    Example:
        >>> get_fibonacci_number(10)
        55
    """
    index = require_integer(index, "index", minimum=0)

    previous, current = 0, 1
    for _ in range(index):
        previous, current = current, previous + current
    return previous


def get_sum_to_n(n) -> int:
    """
    Return 1 + 2 + ... + n.

    Uses the closed form n * (n + 1) / 2 (Gauss); integer division keeps the
    result exact since n * (n + 1) is always even.

    Raises:
        TypeMismatchError: If n is not a number.
        InvalidValueError: If n is not a positive integer.
    """
    n = require_integer(n, "n", minimum=1)
    return n * (n + 1) // 2


def get_sum_of_digits(num) -> int:
    """
    Return the sum of the decimal digits of a non-negative integer.

    Digits are peeled off with divmod, so integers longer than the
    int-to-str conversion limit are summed too.

    Example:
        >>> get_sum_of_digits(202)
        4
    """
    num = require_integer(num, "num", minimum=0)
    total = 0
    while num:
        num, digit = divmod(num, 10)
        total += digit
    return total


def is_power_of_two(num) -> bool:
    """
    Return True if num is an integral power of two (2^k for any integer k).

    Fractional powers count as well: 0.5, 0.25 are 2^-1, 2^-2. Never raises;
    non-numbers and values <= 0 are not powers of two.

    **Mathematical**: For ints, a power of two has exactly one bit set, so
    n & (n - 1) == 0. For floats, math.frexp splits x into m * 2^e with
    0.5 <= m < 1; x is a power of two exactly when m == 0.5. Both checks are
    exact, unlike testing whether log2(x) has a fractional part.
    """
    if not is_real_number(num) or not num > 0:
        return False
    if isinstance(num, numbers.Integral):
        num = int(num)
        return num & (num - 1) == 0
    mantissa, _ = math.frexp(num)
    return mantissa == 0.5


def get_last_digit(value) -> int:
    """
    Return the last decimal digit of a non-negative integer.

    Raises:
        TypeMismatchError: If value is not a number.
        InvalidValueError: If value is not a non-negative integer.
    """
    value = require_integer(value, "value", minimum=0)
    return value % 10


def get_count_of_odd_numbers(number):
    """
    Return the count of odd numbers from zero up to number (inclusive).

    Not implemented yet: always raises NotImplementedError.

    Intended examples:
        4  => 2
        5  => 3
        10 => 5
        15 => 8
    """
    raise NotImplementedError("Not implemented")
