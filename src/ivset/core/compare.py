"""Tolerance-aware comparisons of floats.

Every predicate accepts ``None`` for either operand. A present value is never
equal to, greater than or less than an absent one, and the sign predicates are
False for an absent value.
"""

from collections.abc import Callable

from ivset.core.tolerance import STANDARD_TOLERANCE, validate_tolerance

_Predicate = Callable[[float, float, float], bool]


def _equal(value: float, other: float, tolerance: float) -> bool:
    return abs(value - other) <= tolerance


def _greater(value: float, other: float, tolerance: float) -> bool:
    return value - other > tolerance


def _greater_or_equal(value: float, other: float, tolerance: float) -> bool:
    return value - other >= -tolerance


def _less(value: float, other: float, tolerance: float) -> bool:
    return other - value > tolerance


def _less_or_equal(value: float, other: float, tolerance: float) -> bool:
    return other - value >= -tolerance


def _compare(
    predicate: _Predicate,
    value: float | None,
    other: float | None,
    tolerance: float,
    *,
    both_absent: bool = False,
) -> bool:
    validate_tolerance(tolerance)
    if value is None and other is None:
        return both_absent
    if value is None or other is None:
        return False
    return predicate(value, other, tolerance)


def is_equal_to(
    value: float | None,
    other: float | None,
    tolerance: float = STANDARD_TOLERANCE,
) -> bool:
    """True if the values differ by at most tolerance.

    Two absent values are equal; an absent and a present value are not.
    """
    return _compare(_equal, value, other, tolerance, both_absent=True)


def is_greater_than(
    value: float | None,
    other: float | None,
    tolerance: float = STANDARD_TOLERANCE,
) -> bool:
    return _compare(_greater, value, other, tolerance)


def is_greater_than_or_equal_to(
    value: float | None,
    other: float | None,
    tolerance: float = STANDARD_TOLERANCE,
) -> bool:
    return _compare(_greater_or_equal, value, other, tolerance)


def is_less_than(
    value: float | None,
    other: float | None,
    tolerance: float = STANDARD_TOLERANCE,
) -> bool:
    return _compare(_less, value, other, tolerance)


def is_less_than_or_equal_to(
    value: float | None,
    other: float | None,
    tolerance: float = STANDARD_TOLERANCE,
) -> bool:
    return _compare(_less_or_equal, value, other, tolerance)


def is_negative(
    value: float | None, tolerance: float = STANDARD_TOLERANCE
) -> bool:
    return is_less_than(value, 0.0, tolerance)


def is_positive(
    value: float | None, tolerance: float = STANDARD_TOLERANCE
) -> bool:
    return is_greater_than(value, 0.0, tolerance)


def is_zero(value: float | None, tolerance: float = STANDARD_TOLERANCE) -> bool:
    return is_equal_to(value, 0.0, tolerance)
