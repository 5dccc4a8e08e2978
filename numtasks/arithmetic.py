"""
Basic arithmetic helpers: averages, sums, maxima, cubes, sines and the root
of a linear equation.
"""

import math

from numtasks.utils.errors import InvalidValueError
from numtasks.utils.validation import (
    is_finite_number,
    is_nan,
    require_finite,
    require_number,
)


def get_average(number1, number2):
    """
    Return the average of two numbers.

    The sum is halved when it is finite, which keeps subnormal inputs exact.
    When the sum overflows, each operand is halved before adding instead,
    so two values near the float maximum average to a finite result.

    Raises:
        TypeMismatchError: If either argument is not a number.

    Example:
        >>> get_average(10, 0)
        5.0
    """
    require_number(number1, "number1")
    require_number(number2, "number2")
    total = number1 + number2
    if is_finite_number(total) or is_nan(total):
        return total / 2
    return number1 / 2 + number2 / 2


def get_linear_equation_root(a, b):
    """
    Return the root of the linear equation a*x + b = 0.

    **Mathematical**: x = -b / a

    Raises:
        TypeMismatchError: If a or b is not a number.
        InvalidValueError: If a is zero (not a linear equation).

    Example:
        >>> get_linear_equation_root(5, -10)
        2.0
    """
    require_number(a, "a")
    require_number(b, "b")
    if a == 0:
        raise InvalidValueError(
            'Coefficient "a" cannot be zero, as this is not a valid linear equation'
        )
    return -b / a


def get_cube(num):
    """
    Return num cubed.

    Float results beyond the double range overflow to infinity, like any
    other float product, rather than raising OverflowError as float ** int
    does.

    Raises:
        TypeMismatchError: If num is not a number.
        InvalidValueError: If num is NaN or infinite.
    """
    require_finite(num, "num")
    return num * num * num


def get_sine(num):
    """
    Return the sine of num (radians).

    Infinities are rejected along with NaN: sin has no value there.

    Raises:
        TypeMismatchError: If num is not a number.
        InvalidValueError: If num is NaN or infinite.
    """
    require_finite(num, "num")
    return math.sin(num)


def get_sum_of_numbers(x1, x2, x3):
    """Return x1 + x2 + x3."""
    for name, value in (("x1", x1), ("x2", x2), ("x3", x3)):
        require_number(value, name)
    return x1 + x2 + x3


def get_max_number(first_number, second_number):
    """
    Return the larger of two numbers.

    Raises:
        TypeMismatchError: If either argument is not a number.
    """
    require_number(first_number, "first_number")
    require_number(second_number, "second_number")
    # NaN propagates, as it does for any arithmetic on NaN
    if is_nan(first_number) or is_nan(second_number):
        return math.nan
    return max(first_number, second_number)
