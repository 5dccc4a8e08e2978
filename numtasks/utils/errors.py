"""
Exception classes raised by the numeric utilities.

**Conceptual**: Every utility rejects bad input immediately, before doing any
computation. Two kinds of failure are distinguished:
  - TypeMismatchError: the argument is of the wrong kind (a string where a
    number is expected, a bool, None, ...).
  - InvalidValueError: the argument has the right kind but lies outside the
    allowed domain (negative radius, zero coefficient, min > max, NaN, ...).

Both derive from NumericTaskError so callers can catch everything the library
raises in one clause. They also derive from the matching built-in
(TypeError / ValueError), so code written against the built-ins keeps working.
"""


class NumericTaskError(Exception):
    """
    Base exception for argument validation errors in numtasks.

    **Usage**:
        try:
            area = get_rectangle_area(width, height)
        except NumericTaskError as e:
            print(f"Bad input: {e}")
    """
    pass


class TypeMismatchError(NumericTaskError, TypeError):
    """
    Raised when an argument is not of the expected kind.

    **Examples**: get_rectangle_area("5", 10), get_sine(None),
    get_float_on_string(42).
    """
    pass


class InvalidValueError(NumericTaskError, ValueError):
    """
    Raised when an argument has the right kind but an out-of-domain value.

    **Examples**: get_circle_circumference(-1), get_linear_equation_root(0, 3),
    get_random_integer(5, 1), number_to_string_in_base(10, 40).
    """
    pass
