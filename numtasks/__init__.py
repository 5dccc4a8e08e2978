"""
numtasks – a collection of small, independent numeric utilities.

Functions are grouped by purpose: geometry, arithmetic, number theory,
rounding, string formatting, parsing/coercion and random integers. Each one
validates its arguments up front and raises a TypeMismatchError or
InvalidValueError (see numtasks.utils.errors) on bad input.
"""
