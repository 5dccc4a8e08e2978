"""
Rounding helpers: floor, ceiling, nearest, truncation and rounding to a
power of ten.

**Rounding to nearest**: ties round toward +infinity ("round half up"), so
5.5 -> 6 and -5.5 -> -5. This differs from Python's built-in round(), which
uses banker's rounding (round(2.5) == 2). The halfway test compares
value - floor(value) against 0.5, which is exact for floats, instead of
computing floor(value + 0.5), which misrounds 0.49999999999999994 to 1.

**Return types**: finite inputs return a Python int (exact for arbitrarily
large values). Infinite inputs pass through unchanged since no integer
represents them. NaN is rejected with InvalidValueError.
"""

import math
import numbers

from numtasks.utils.validation import (
    is_finite_number,
    require_finite,
    require_integer,
    require_not_nan,
)


def _round_half_up(value):
    """Round a finite number to the nearest integer, ties toward +infinity."""
    floor_value = math.floor(value)
    if value - floor_value >= 0.5:
        return floor_value + 1
    return floor_value


def round_to_power_of_ten(num, power):
    """
    Return num rounded to the given power of ten.

    **Mathematical**: round(num / 10^power) * 10^power, ties rounding up.

    **Functionally**:
    - power = 0 rounds to units, power = 2 to hundreds, power = -1 to tenths.
    - Integer num with non-negative integer power is computed exactly with
      integer arithmetic; any other combination uses float arithmetic and
      inherits its rounding error.
    - A power so large that 10^power overflows rounds every value to 0.0;
      a power so small that 10^power underflows, or whose quotient
      overflows, returns num unchanged.

    Args:
        num: Value to round (not NaN). Infinite values are returned unchanged.
        power: Power of ten to round to (finite).

    Returns:
        The rounded value.

    Raises:
        TypeMismatchError: If num or power is not a number.
        InvalidValueError: If num is NaN or power is NaN / infinite.

    Example:
        >>> round_to_power_of_ten(1678, 2)
        1700
        >>> round_to_power_of_ten(1234, 3)
        1000
    """
    require_not_nan(num, "num")
    require_finite(power, "power")

    if not is_finite_number(num):
        return num

    if isinstance(num, numbers.Integral) and float(power).is_integer() and power >= 0:
        num = int(num)
        factor = 10 ** require_integer(power, "power")
        quotient, remainder = divmod(num, factor)
        if 2 * remainder >= factor:
            quotient += 1
        return quotient * factor

    try:
        factor = 10.0**power
    except OverflowError:
        factor = math.inf
    if math.isinf(factor):
        # 10^power exceeds every double, so any finite num rounds to zero
        return math.copysign(0.0, num)
    if factor == 0.0:
        # Steps finer than the smallest double leave num unchanged
        return num

    try:
        quotient = num / factor
    except OverflowError:
        # int num too large for a float; the step is below its precision
        return num
    if not math.isfinite(quotient):
        return num
    return _round_half_up(quotient) * factor


def round_to_smallest_integer(number):
    """
    Return the largest integer less than or equal to number (floor).

    Example:
        >>> round_to_smallest_integer(-5.1)
        -6
    """
    require_not_nan(number, "number")
    if not is_finite_number(number):
        return number
    return math.floor(number)


def round_to_largest_integer(number):
    """
    Return the smallest integer greater than or equal to number (ceiling).

    Example:
        >>> round_to_largest_integer(-5.9)
        -5
    """
    require_not_nan(number, "number")
    if not is_finite_number(number):
        return number
    return math.ceil(number)


def round_to_nearest_integer(number):
    """
    Return number rounded to the nearest integer, ties toward +infinity.

    Example:
        >>> round_to_nearest_integer(5.5), round_to_nearest_integer(-5.5)
        (6, -5)
    """
    require_not_nan(number, "number")
    if not is_finite_number(number):
        return number
    return _round_half_up(number)


def get_integer_part_number(number):
    """
    Return the integer part of number, dropping any fractional digits (truncation).

    Example:
        >>> get_integer_part_number(-5.5)
        -5
    """
    require_not_nan(number, "number")
    if not is_finite_number(number):
        return number
    return math.trunc(number)
