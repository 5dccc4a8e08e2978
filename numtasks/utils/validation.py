"""
Argument validators shared by the numeric utilities.

**Conceptual**: Each public function checks its arguments at the very top and
fails fast. These helpers keep those checks short and the error messages
consistent. Every helper returns the (possibly normalized) value so it can be
used inline:

    width = require_number(width, "width")

**What counts as a number**: any real, non-boolean scalar. That covers Python
int and float as well as NumPy numeric scalars (np.float64, np.int32, ...),
since NumPy registers them with the numbers.Real ABC. Booleans are rejected
even though bool subclasses int: passing True as a width is almost always a
bug.

**Integers**: integer-valued floats (5.0) are accepted wherever an integer is
required and are returned as a Python int.
"""

import logging
import math
import numbers

import numpy as np

from numtasks.utils.errors import InvalidValueError, TypeMismatchError

logger = logging.getLogger(__name__)

# Largest integer n such that n and n + 1 are both exactly representable as a
# double (Number.MAX_SAFE_INTEGER in IEEE-754 terms).
MAX_SAFE_INTEGER = 2**53 - 1

MIN_RADIX = 2
MAX_RADIX = 36


def _reject(error_cls, message: str):
    logger.debug("Rejected argument: %s", message)
    return error_cls(message)


def is_real_number(value) -> bool:
    """
    Return True if value is a real, non-boolean numeric scalar.

    NaN and infinities are numbers here; use is_finite_number to exclude them.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Real)


def is_nan(value) -> bool:
    """Return True if the number value is NaN. Integers never are."""
    if isinstance(value, numbers.Integral):
        return False
    return math.isnan(value)


def is_finite_number(value) -> bool:
    """Return True if value is a real number that is neither NaN nor infinite."""
    if not is_real_number(value):
        return False
    # Python ints can exceed the float range, so they skip math.isfinite
    if isinstance(value, numbers.Integral):
        return True
    return math.isfinite(value)


def is_integral_number(value) -> bool:
    """Return True if value is a finite number with no fractional part."""
    if not is_finite_number(value):
        return False
    if isinstance(value, numbers.Integral):
        return True
    return float(value).is_integer()


def require_number(value, name: str):
    """
    Ensure value is a real number (NaN and infinities allowed).

    Raises:
        TypeMismatchError: If value is not a number.
    """
    if not is_real_number(value):
        raise _reject(
            TypeMismatchError,
            f"{name} must be a number, got {type(value).__name__}: {value!r}",
        )
    return value


def require_not_nan(value, name: str):
    """
    Ensure value is a number and not NaN (infinities allowed).

    Raises:
        TypeMismatchError: If value is not a number.
        InvalidValueError: If value is NaN.
    """
    require_number(value, name)
    if is_nan(value):
        raise _reject(InvalidValueError, f"{name} must be a valid number, got NaN")
    return value


def require_finite(value, name: str):
    """
    Ensure value is a finite number.

    Raises:
        TypeMismatchError: If value is not a number.
        InvalidValueError: If value is NaN or infinite.
    """
    require_number(value, name)
    if not is_finite_number(value):
        raise _reject(
            InvalidValueError, f"{name} must be a finite number, got {value!r}"
        )
    return value


def require_positive(value, name: str):
    """
    Ensure value is a number strictly greater than zero.

    Raises:
        TypeMismatchError: If value is not a number.
        InvalidValueError: If value is NaN, zero or negative.
    """
    require_not_nan(value, name)
    if value <= 0:
        raise _reject(
            InvalidValueError, f"{name} must be a positive number, got {value!r}"
        )
    return value


def require_non_negative(value, name: str):
    """
    Ensure value is a number greater than or equal to zero.

    Raises:
        TypeMismatchError: If value is not a number.
        InvalidValueError: If value is NaN or negative.
    """
    require_not_nan(value, name)
    if value < 0:
        raise _reject(
            InvalidValueError,
            f"{name} must be a non-negative number, got {value!r}",
        )
    return value


def require_integer(value, name: str, minimum=None, maximum=None) -> int:
    """
    Ensure value is an integer (integer-valued floats allowed) within bounds.

    Args:
        value: Candidate integer.
        name: Argument name used in error messages.
        minimum: Inclusive lower bound, or None for no bound.
        maximum: Inclusive upper bound, or None for no bound.

    Returns:
        value converted to a Python int.

    Raises:
        TypeMismatchError: If value is not a number.
        InvalidValueError: If value is not integral or lies outside the bounds.
    """
    require_number(value, name)
    if not is_integral_number(value):
        raise _reject(
            InvalidValueError, f"{name} must be an integer, got {value!r}"
        )
    result = int(value)
    if minimum is not None and result < minimum:
        raise _reject(
            InvalidValueError, f"{name} must be >= {minimum}, got {result}"
        )
    if maximum is not None and result > maximum:
        raise _reject(
            InvalidValueError, f"{name} must be <= {maximum}, got {result}"
        )
    return result


def require_radix(base, name: str = "base") -> int:
    """
    Ensure base is an integer radix between 2 and 36 inclusive.

    Raises:
        TypeMismatchError: If base is not a number.
        InvalidValueError: If base is not an integer in [2, 36].
    """
    return require_integer(base, name, minimum=MIN_RADIX, maximum=MAX_RADIX)


def require_string(value, name: str) -> str:
    """
    Ensure value is a str.

    Raises:
        TypeMismatchError: If value is not a string.
    """
    if not isinstance(value, str):
        raise _reject(
            TypeMismatchError,
            f"{name} must be a string, got {type(value).__name__}: {value!r}",
        )
    return value
