"""
Parsing and coercion helpers: numbers from strings, lenient conversion with a
default, unwrapping boxed numbers and numeric predicates.

**Number literals**: parse_number_from_string and to_number accept one
grammar for whole-string literals:
  - surrounding whitespace is ignored; an empty or blank string is 0,
  - decimal literals with optional sign, fraction and exponent
    ("-525.5", ".5", "1.", "1e-7"),
  - "Infinity" with optional sign,
  - unsigned hexadecimal, octal and binary integers ("0x1f", "0o17", "0b101").
Python-only spellings accepted by float() ("inf", "nan", "1_000") are not
literals. Integer literals come back as int, everything else as float.

**Prefix parsers**: get_float_on_string and get_integer_on_string read the
longest valid prefix instead ("4.567abc" -> 4.567) and return NaN when no
prefix parses. They never raise for unparseable text; NaN is the contract.

**Boxed numbers**: a NumPy scalar (np.float64(5.0)) or 0-d array
(np.array(5)) wraps a single number. get_number_value unwraps either into a
plain Python number.
"""

import logging
import math
import numbers
import re

import numpy as np
import pandas as pd

from numtasks.utils.errors import InvalidValueError, TypeMismatchError
from numtasks.utils.validation import (
    MAX_SAFE_INTEGER,
    is_finite_number,
    is_integral_number,
    is_nan,
    is_real_number,
    require_number,
    require_radix,
    require_string,
)

logger = logging.getLogger(__name__)

_DECIMAL_BODY = r"(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"

# Whole-string literals
_DECIMAL_LITERAL = re.compile(rf"[+-]?{_DECIMAL_BODY}", re.ASCII)
_INTEGER_LITERAL = re.compile(r"[+-]?\d+", re.ASCII)
_PREFIXED_LITERAL = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")

# Leading-prefix float, as read by get_float_on_string
_FLOAT_PREFIX = re.compile(rf"[+-]?{_DECIMAL_BODY}", re.ASCII)

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _parse_number_literal(text: str):
    """Parse a whole-string number literal; return NaN if text is not one."""
    text = text.strip()
    if not text:
        return 0
    if _INTEGER_LITERAL.fullmatch(text):
        return int(text)
    if _DECIMAL_LITERAL.fullmatch(text):
        return float(text)
    if _PREFIXED_LITERAL.fullmatch(text):
        return int(text, 0)
    return math.nan


def _coerce_to_number(value):
    """
    Convert an arbitrary value to a number, or NaN when no conversion exists.

    None is 0 and booleans are 0/1. Strings follow the literal grammar. Boxed
    numbers are unwrapped. Missing-value markers (np.nan, pd.NA, pd.NaT) are
    NaN. Other real-valued numeric types that are not registered as
    numbers.Real (decimal.Decimal) convert through float(); complex values
    have no real conversion and are NaN.
    """
    if value is None:
        return 0
    if isinstance(value, (bool, np.bool_)):
        return int(value)
    if isinstance(value, np.ndarray):
        if value.ndim == 0:
            return _coerce_to_number(value.item())
        return math.nan
    if isinstance(value, str):
        return _parse_number_literal(value)
    if isinstance(value, np.generic):
        return _coerce_to_number(value.item())
    if is_real_number(value):
        return value
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return math.nan
    if isinstance(value, numbers.Number) and not isinstance(value, numbers.Complex):
        return float(value)
    return math.nan


def parse_number_from_string(value):
    """
    Return the number written in the string value.

    Args:
        value: A number literal, e.g. "100", "-525.5", "1e3", "0xff".

    Returns:
        int for integer literals, float otherwise.

    Raises:
        TypeMismatchError: If value is not a string.
        InvalidValueError: If value is not a valid number literal.

    Example:
        >>> parse_number_from_string("-525.5")
        -525.5
    """
    require_string(value, "value")
    parsed = _parse_number_literal(value)
    if is_nan(parsed):
        raise InvalidValueError(f"Input string is not a valid number: {value!r}")
    return parsed


def to_number(value, default):
    """
    Convert value to a number, returning default if the conversion yields NaN.

    Never raises. Note that None converts to 0, not to the default, and that a
    NaN input yields the default.

    Example:
        >>> to_number("1", 0), to_number("test", 0), to_number(None, 7)
        (1, 0, 0)
    """
    result = _coerce_to_number(value)
    if is_nan(result):
        logger.debug("Could not convert %r to a number; using default %r", value, default)
        return default
    return result


def get_number_value(number):
    """
    Return the plain Python number held by a boxed or primitive number.

    Raises:
        TypeMismatchError: If number is neither a number nor a boxed number.

    Example:
        >>> get_number_value(np.float64(5.0)), get_number_value(-5)
        (5.0, -5)
    """
    if isinstance(number, np.ndarray) and number.ndim == 0:
        number = number[()]
    if isinstance(number, np.generic):
        if not is_real_number(number):
            raise TypeMismatchError(
                f"Invalid input: {type(number).__name__} is not a numeric type"
            )
        return number.item()
    if is_real_number(number):
        return number
    raise TypeMismatchError(
        "Invalid input: The input must be a number or a boxed (NumPy) number."
    )


def is_number(value) -> bool:
    """Return True if value is a finite number (not NaN, not infinite, not a bool or string)."""
    return is_finite_number(value)


def is_integer(value) -> bool:
    """Return True if value is a number with no fractional part (5 and 5.0, not 5.1 or "5")."""
    return is_integral_number(value)


def get_float_on_string(text):
    """
    Return the floating point number at the start of text, or NaN.

    Leading whitespace is skipped; parsing stops at the first character that
    cannot continue the literal.

    Raises:
        TypeMismatchError: If text is not a string.

    Example:
        >>> get_float_on_string("4.567abcdefgh")
        4.567
        >>> get_float_on_string("abcdefgh")
        nan
    """
    require_string(text, "text")
    match = _FLOAT_PREFIX.match(text.lstrip())
    if match is None:
        return math.nan
    return float(match.group())


def get_integer_on_string(text, base):
    """
    Return the integer in the given base at the start of text, or NaN.

    **Functionally**:
    - Leading whitespace and one sign character are accepted.
    - In base 16 a "0x"/"0X" prefix is skipped.
    - Digits are read until the first character that is not a valid digit in
      the base, so "1.234" in base 2 is 1 and "4.567abc" in base 10 is 4.

    Raises:
        TypeMismatchError: If text is not a string or base is not a number.
        InvalidValueError: If base is not an integer between 2 and 36.

    Example:
        >>> get_integer_on_string("10", 8)
        8
    """
    require_string(text, "text")
    base = require_radix(base)

    remainder = text.lstrip()
    sign = 1
    if remainder[:1] in ("+", "-"):
        sign = -1 if remainder[0] == "-" else 1
        remainder = remainder[1:]
    if base == 16 and remainder[:2].lower() == "0x":
        remainder = remainder[2:]

    valid_digits = _DIGITS[:base]
    length = 0
    for char in remainder:
        if not char.isascii() or char.lower() not in valid_digits:
            break
        length += 1

    if length == 0:
        return math.nan
    return sign * int(remainder[:length], base)


def is_safe_integer(number) -> bool:
    """
    Return True if number is an integer that a double represents exactly.

    Safe integers satisfy |n| <= 2^53 - 1; 2^53 itself is not safe because
    2^53 + 1 rounds to it.

    Raises:
        TypeMismatchError: If number is not a number.
    """
    require_number(number, "number")
    return is_integral_number(number) and abs(int(number)) <= MAX_SAFE_INTEGER
