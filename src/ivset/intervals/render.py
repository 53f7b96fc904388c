from ivset.intervals.interval_set import IntervalSet
from ivset.intervals.models import Interval

BOUND_SEPARATOR = ", "
UNION_SEPARATOR = " U "
EMPTY_SET = "{}"


def _opening(included: bool) -> str:
    return "[" if included else "("


def _closing(included: bool) -> str:
    return "]" if included else ")"


def render_interval(interval: Interval) -> str:
    """Render an interval in bracket notation, e.g. ``[0.0, 1.5)``."""
    return (
        f"{_opening(interval.minimum_included)}"
        f"{interval.minimum}{BOUND_SEPARATOR}{interval.maximum}"
        f"{_closing(interval.maximum_included)}"
    )


def render_interval_set(interval_set: IntervalSet) -> str:
    if interval_set.is_empty:
        return EMPTY_SET
    return UNION_SEPARATOR.join(
        render_interval(interval) for interval in interval_set.intervals
    )
