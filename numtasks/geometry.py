"""
Geometry and trigonometry helpers.

This module provides small formulas on plane and solid figures: rectangle
area, circle circumference, distance between points, the angle between two
vectors, the diagonal of a rectangular box and the hypotenuse of a right
triangle.

Every function checks that its arguments are numbers before computing and
raises TypeMismatchError otherwise; functions with a restricted domain
(positive sides, non-negative radius, non-zero vectors) raise
InvalidValueError outside it.
"""

import math

from numtasks.utils.errors import InvalidValueError
from numtasks.utils.validation import (
    require_non_negative,
    require_number,
    require_positive,
)


def get_rectangle_area(width, height):
    """
    Return the area of a rectangle given by its width and height.

    **Mathematical**: area = width * height

    **Edge cases**:
    - Both sides must be strictly positive; a degenerate rectangle
      (zero side) is rejected rather than reported as area 0.

    Args:
        width: Length of one side (> 0).
        height: Length of the other side (> 0).

    Returns:
        The rectangle's area.

    Raises:
        TypeMismatchError: If width or height is not a number.
        InvalidValueError: If width or height is <= 0.

    Example:
        >>> get_rectangle_area(5, 10)
        50
    """
    # Type checks first so get_rectangle_area("5", -1) reports the type problem
    require_number(width, "width")
    require_number(height, "height")
    require_positive(width, "width")
    require_positive(height, "height")
    return width * height


def get_circle_circumference(radius):
    """
    Return the circumference of a circle given by its radius.

    **Mathematical**: C = 2 * pi * r

    Args:
        radius: Circle radius (>= 0). A zero radius gives circumference 0.

    Returns:
        The circumference as a float.

    Raises:
        TypeMismatchError: If radius is not a number.
        InvalidValueError: If radius is negative or NaN.

    Example:
        >>> get_circle_circumference(5)
        31.41592653589793
    """
    require_non_negative(radius, "radius")
    return 2 * math.pi * radius


def get_distance_between_points(x1, y1, x2, y2):
    """
    Return the Euclidean distance between points (x1, y1) and (x2, y2).

    **Mathematical**: d = sqrt((x2 - x1)^2 + (y2 - y1)^2)

    math.hypot is used instead of squaring by hand; it avoids intermediate
    overflow for very large coordinates.

    Example:
        >>> get_distance_between_points(-5, 0, 10, -10)
        18.027756377319946
    """
    for name, value in (("x1", x1), ("y1", y1), ("x2", x2), ("y2", y2)):
        require_number(value, name)
    return math.hypot(x2 - x1, y2 - y1)


def get_angle_between_vectors(x1, y1, x2, y2):
    """
    Return the angle in radians between vectors (x1, y1) and (x2, y2).

    **Mathematical**:
        cos(theta) = (v1 . v2) / (|v1| * |v2|)
        theta = acos(cos(theta)), in [0, pi]

    **Edge cases**:
    - The angle is undefined for a zero-length vector, which is rejected.
    - Rounding can push the cosine slightly outside [-1, 1] for (anti)parallel
      vectors; it is clamped so acos always has a valid argument.

    Args:
        x1, y1: Components of the first vector.
        x2, y2: Components of the second vector.

    Returns:
        The angle between the vectors in radians.

    Raises:
        TypeMismatchError: If any component is not a number.
        InvalidValueError: If either vector has zero length.

    Example:
        >>> get_angle_between_vectors(1, 0, 0, 1)  # pi / 2
        1.5707963267948966
    """
    for name, value in (("x1", x1), ("y1", y1), ("x2", x2), ("y2", y2)):
        require_number(value, name)

    magnitude1 = math.hypot(x1, y1)
    magnitude2 = math.hypot(x2, y2)
    if magnitude1 == 0 or magnitude2 == 0:
        raise InvalidValueError(
            "The angle is undefined for a zero-length vector"
        )

    dot_product = x1 * x2 + y1 * y2
    cosine = dot_product / (magnitude1 * magnitude2)
    return math.acos(max(-1.0, min(1.0, cosine)))


def get_parallelepiped_diagonal(a, b, c):
    """
    Return the diagonal length of a rectangular parallelepiped with sides a, b, c.

    **Mathematical**: d = sqrt(a^2 + b^2 + c^2)

    Example:
        >>> get_parallelepiped_diagonal(1, 2, 3)
        3.7416573867739413
    """
    for name, value in (("a", a), ("b", b), ("c", c)):
        require_number(value, name)
    return math.sqrt(a * a + b * b + c * c)


def get_hypotenuse(a, b):
    """
    Return the hypotenuse of a right triangle with legs a and b.

    Raises:
        TypeMismatchError: If a or b is not a number.
        InvalidValueError: If a or b is not positive.

    Example:
        >>> get_hypotenuse(3, 4)
        5.0
    """
    require_number(a, "a")
    require_number(b, "b")
    require_positive(a, "a")
    require_positive(b, "b")
    return math.hypot(a, b)
