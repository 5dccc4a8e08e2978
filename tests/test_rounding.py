"""
Tests for numtasks/rounding.py
"""

import math
import sys

import pytest

from numtasks.rounding import (
    get_integer_part_number,
    round_to_largest_integer,
    round_to_nearest_integer,
    round_to_power_of_ten,
    round_to_smallest_integer,
)
from numtasks.utils.errors import InvalidValueError, TypeMismatchError


@pytest.mark.parametrize(
    "num, power, expected",
    [
        (1234, 0, 1234),
        (1234, 1, 1230),
        (1234, 2, 1200),
        (1234, 3, 1000),
        (1678, 0, 1678),
        (1678, 1, 1680),
        (1678, 2, 1700),
        (1678, 3, 2000),
        (1650, 2, 1700),  # tie rounds up
        (-1650, 2, -1600),  # tie rounds toward +infinity
    ],
)
def test_round_to_power_of_ten_integers(num, power, expected):
    """Integer inputs are rounded exactly and stay ints."""
    result = round_to_power_of_ten(num, power)
    assert result == expected
    assert isinstance(result, int)


def test_round_to_power_of_ten_floats_and_negative_powers():
    assert round_to_power_of_ten(1678.9, 2) == 1700
    assert math.isclose(round_to_power_of_ten(3.14159, -2), 3.14)


def test_round_to_power_of_ten_huge_power_rounds_to_zero():
    """10^400 exceeds every double, so finite values round to a signed zero."""
    assert round_to_power_of_ten(5.5, 400) == 0.0
    assert math.copysign(1.0, round_to_power_of_ten(-5.5, 400)) == -1.0
    assert round_to_power_of_ten(1e308, 309) == 0.0


@pytest.mark.parametrize(
    "num, power",
    [
        (5.5, -400),  # 10^-400 underflows to zero
        (1e308, -10),  # quotient overflows to infinity
        (sys.float_info.max, -1),
        (10**400, -2),  # int too large for a float
    ],
)
def test_round_to_power_of_ten_below_precision_returns_num(num, power):
    """Rounding steps finer than num's precision leave it unchanged."""
    assert round_to_power_of_ten(num, power) == num


def test_round_to_power_of_ten_subnormals():
    assert round_to_power_of_ten(5e-324, -300) == 0.0
    assert round_to_power_of_ten(5e-324, 0) == 0


def test_round_to_power_of_ten_validation():
    with pytest.raises(InvalidValueError):
        round_to_power_of_ten(math.nan, 2)
    with pytest.raises(InvalidValueError):
        round_to_power_of_ten(1234, math.nan)
    with pytest.raises(TypeMismatchError):
        round_to_power_of_ten("1234", 2)


@pytest.mark.parametrize("number, expected", [(5.9, 5), (-5.1, -6), (5, 5)])
def test_round_to_smallest_integer(number, expected):
    assert round_to_smallest_integer(number) == expected


@pytest.mark.parametrize("number, expected", [(5.1, 6), (-5.9, -5), (5, 5)])
def test_round_to_largest_integer(number, expected):
    assert round_to_largest_integer(number) == expected


@pytest.mark.parametrize(
    "number, expected",
    [(5.5, 6), (5.4, 5), (-5.5, -5), (-5.6, -6), (2.5, 3), (0.49999999999999994, 0)],
)
def test_round_to_nearest_integer_rounds_half_up(number, expected):
    """Ties go toward +infinity, unlike Python's banker's rounding."""
    assert round_to_nearest_integer(number) == expected


@pytest.mark.parametrize("number, expected", [(5.5, 5), (5.4, 5), (-5.5, -5)])
def test_get_integer_part_number(number, expected):
    assert get_integer_part_number(number) == expected


@pytest.mark.parametrize(
    "func",
    [round_to_smallest_integer, round_to_largest_integer, round_to_nearest_integer, get_integer_part_number],
)
def test_rounding_functions_share_validation(func):
    """NaN is rejected, infinities pass through, non-numbers are type errors."""
    with pytest.raises(InvalidValueError):
        func(math.nan)
    with pytest.raises(TypeMismatchError):
        func("5.5")
    assert func(math.inf) == math.inf
    assert func(-math.inf) == -math.inf
