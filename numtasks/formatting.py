"""
Number-to-string formatting: radix conversion and fixed, exponential and
significant-digit notation.

**Conceptual**: Python's format mini-language covers the same ground
(f"{x:.2f}", f"{x:.2e}", f"{x:.3g}") but differs in three ways that matter
for these helpers:
  - Ties. format() rounds the exact binary value half-to-even; here ties
    round half up (away from zero on the magnitude), so 0.5 -> "1" and
    1.25 -> "1.3e+0".
  - Exponent layout. format() pads to two digits ("1.23e+04"); here the
    exponent is written with its sign and no padding ("1.23e+4").
  - Significant digits. "g" strips trailing zeros; to_precision keeps them
    ("12345.00" for 7 significant digits).

**Implementation**: Every float converts exactly to decimal.Decimal, so
rounding is done on the true binary value with ROUND_HALF_UP under a
high-precision context. to_fixed(1.005, 2) is "1.00" because the double
closest to 1.005 is 1.00499999999999989...

NaN and infinities format as "NaN", "Infinity" and "-Infinity".
"""

import decimal
import math
import numbers
from fractions import Fraction

import numpy as np

from numtasks.utils.validation import (
    is_finite_number,
    is_integral_number,
    is_nan,
    require_integer,
    require_number,
    require_radix,
)

MAX_FRACTION_DIGITS = 100
MAX_PRECISION = 100

# Values at or above this magnitude are not expanded by to_fixed
FIXED_NOTATION_LIMIT = 1e21

# Exact decimal expansions of doubles run to 767 significant digits
_CONTEXT = decimal.Context(prec=800, rounding=decimal.ROUND_HALF_UP)

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_HALF = Fraction(1, 2)
_SMALLEST_DOUBLE = Fraction(math.ulp(0.0))


def _format_non_finite(number) -> str:
    if is_nan(number):
        return "NaN"
    return "Infinity" if number > 0 else "-Infinity"


def _to_decimal(number) -> decimal.Decimal:
    """Convert a finite number to the Decimal holding its exact value."""
    if isinstance(number, numbers.Integral):
        return decimal.Decimal(int(number))
    return decimal.Decimal(float(number))


def _round_significant(magnitude: decimal.Decimal, fraction_digits: int):
    """
    Round a positive Decimal to 1 + fraction_digits significant digits.

    Returns:
        (mantissa, exponent) with 1 <= mantissa < 10 carrying exactly
        fraction_digits decimals, such that mantissa * 10^exponent is the
        rounded value.
    """
    quantum = decimal.Decimal(1).scaleb(-fraction_digits)
    exponent = magnitude.adjusted()
    mantissa = magnitude.scaleb(-exponent, context=_CONTEXT).quantize(
        quantum, context=_CONTEXT
    )
    if mantissa >= 10:
        # 9.99 rounded up to 10.0: shift one place
        exponent += 1
        mantissa = mantissa.scaleb(-1, context=_CONTEXT).quantize(quantum, context=_CONTEXT)
    return mantissa, exponent


def _exponent_suffix(exponent: int) -> str:
    return f"e{'+' if exponent >= 0 else '-'}{abs(exponent)}"


def _radix_fraction(value: float, base: int):
    """
    Split a positive non-integral float into its integer part and the
    shortest run of fractional digits in base that reads back as value.

    **Mathematical**: Digits are generated with exact Fraction arithmetic
    while tracking delta, half the gap to the next double scaled along with
    the fraction. Generation stops once the remaining fraction is below
    delta, since no further digit can change which double the string
    denotes. When the remainder is past the halfway point and rounding up
    stays within delta, the last digit is incremented instead, carrying
    through trailing (base - 1) digits and into the integer part if needed.

    Returns:
        (integer_part, digits) with digits a list of ints in [0, base).
        digits is empty when rounding carried into the integer part.
    """
    integer_part = int(value)
    fraction = Fraction(value) - integer_part
    delta = max(Fraction(math.ulp(value)) / 2, _SMALLEST_DOUBLE)
    digits = []
    if fraction < delta:
        return integer_part, digits

    while True:
        fraction *= base
        delta *= base
        digit = math.floor(fraction)
        digits.append(digit)
        fraction -= digit
        if fraction > _HALF or (fraction == _HALF and digit % 2):
            if fraction + delta > 1:
                while digits and digits[-1] == base - 1:
                    digits.pop()
                if digits:
                    digits[-1] += 1
                else:
                    integer_part += 1
                break
        if fraction < delta:
            break
    return integer_part, digits


def number_to_string_in_base(number, base) -> str:
    """
    Return the string representation of number in the given base (radix).

    **Functionally**:
    - Digits above 9 are lowercase letters: 255 in base 16 is "ff".
    - Integers (including integer-valued floats) convert exactly via
      numpy.base_repr.
    - Non-integers get the shortest fractional digits that read back as the
      same double (0.5 in base 2 is "0.1", 0.1 in base 2 is 55 digits). In
      bases that are powers of two this is the exact binary expansion.

    Args:
        number: Value to convert.
        base: Radix, an integer between 2 and 36.

    Returns:
        The value written in the given base.

    Raises:
        TypeMismatchError: If number or base is not a number.
        InvalidValueError: If base is not an integer in [2, 36].

    Example:
        >>> number_to_string_in_base(255, 16)
        'ff'
        >>> number_to_string_in_base(-10, 2)
        '-1010'
    """
    require_number(number, "number")
    base = require_radix(base)

    if not is_finite_number(number):
        return _format_non_finite(number)

    sign = "-" if number < 0 else ""
    magnitude = abs(number)

    if is_integral_number(magnitude):
        return sign + np.base_repr(int(magnitude), base).lower()

    integer_part, digits = _radix_fraction(float(magnitude), base)
    head = np.base_repr(integer_part, base).lower()
    if not digits:
        return sign + head
    return f"{sign}{head}.{''.join(_DIGITS[digit] for digit in digits)}"


def to_exponential(number, fraction_digits) -> str:
    """
    Return number in exponential notation with fraction_digits decimals.

    Example:
        >>> to_exponential(12345, 2)
        '1.23e+4'
        >>> to_exponential(0.00015, 1)
        '1.5e-4'

    Raises:
        TypeMismatchError: If an argument is not a number.
        InvalidValueError: If fraction_digits is not an integer in [0, 100].
    """
    require_number(number, "number")
    fraction_digits = require_integer(
        fraction_digits, "fraction_digits", minimum=0, maximum=MAX_FRACTION_DIGITS
    )

    if not is_finite_number(number):
        return _format_non_finite(number)

    if number == 0:
        zeros = "." + "0" * fraction_digits if fraction_digits else ""
        return f"0{zeros}e+0"

    sign = "-" if number < 0 else ""
    mantissa, exponent = _round_significant(abs(_to_decimal(number)), fraction_digits)
    return f"{sign}{format(mantissa, 'f')}{_exponent_suffix(exponent)}"


def to_fixed(number, fraction_digits) -> str:
    """
    Return number in fixed-point notation with fraction_digits decimals.

    **Edge cases**:
    - Magnitudes of 1e21 and above are returned in their shortest float form
      ("1e+21") rather than expanded to 22+ digits.
    - Negative zero prints as "0"; small negatives that round to zero keep
      their sign ("-0.00").

    Example:
        >>> to_fixed(12345, 2)
        '12345.00'
        >>> to_fixed(12.345, 1)
        '12.3'

    Raises:
        TypeMismatchError: If an argument is not a number.
        InvalidValueError: If fraction_digits is not an integer in [0, 100].
    """
    require_number(number, "number")
    fraction_digits = require_integer(
        fraction_digits, "fraction_digits", minimum=0, maximum=MAX_FRACTION_DIGITS
    )

    if not is_finite_number(number):
        return _format_non_finite(number)

    if abs(number) >= FIXED_NOTATION_LIMIT:
        return repr(float(number))

    if number == 0:
        number = 0

    quantum = decimal.Decimal(1).scaleb(-fraction_digits)
    rounded = _to_decimal(number).quantize(quantum, context=_CONTEXT)
    return format(rounded, "f")


def to_precision(number, precision) -> str:
    """
    Return number rounded to `precision` significant digits.

    **Functionally**: With e the decimal exponent of the rounded value,
    exponential notation is used when e < -6 or e >= precision; otherwise
    fixed notation with precision - 1 - e decimals. Trailing zeros are kept.

    Example:
        >>> to_precision(12345, 7)
        '12345.00'
        >>> to_precision(12.345, 4)
        '12.35'
        >>> to_precision(123456, 2)
        '1.2e+5'

    Raises:
        TypeMismatchError: If an argument is not a number.
        InvalidValueError: If precision is not an integer in [1, 100].
    """
    require_number(number, "number")
    precision = require_integer(precision, "precision", minimum=1, maximum=MAX_PRECISION)

    if not is_finite_number(number):
        return _format_non_finite(number)

    if number == 0:
        return "0" if precision == 1 else "0." + "0" * (precision - 1)

    sign = "-" if number < 0 else ""
    mantissa, exponent = _round_significant(abs(_to_decimal(number)), precision - 1)

    if exponent < -6 or exponent >= precision:
        return f"{sign}{format(mantissa, 'f')}{_exponent_suffix(exponent)}"

    fixed = mantissa.scaleb(exponent, context=_CONTEXT)
    return sign + format(fixed, "f")
