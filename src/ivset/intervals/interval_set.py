import logging
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field, field_validator

from ivset.core.compare import is_less_than
from ivset.core.tolerance import STANDARD_TOLERANCE, validate_tolerance
from ivset.intervals.models import Interval, bounds_equal

logger = logging.getLogger(__name__)

Bound = tuple[float, bool]


def _sort_key(interval: Interval) -> tuple[float, float]:
    return (interval.minimum, interval.maximum)


def _should_merge(
    current: Interval, following: Interval, tolerance: float
) -> bool:
    if following.minimum < current.maximum:
        return True
    if not bounds_equal(following.minimum, current.maximum, tolerance):
        return False
    return current.maximum_included or following.minimum_included


def _merge_pair(
    current: Interval, following: Interval, tolerance: float
) -> Interval:
    # current sorts first, so its minimum is never the larger one
    minimum = current.minimum
    minimum_included = current.minimum_included
    if bounds_equal(current.minimum, following.minimum, tolerance):
        minimum_included = minimum_included or following.minimum_included

    if bounds_equal(current.maximum, following.maximum, tolerance):
        maximum = max(current.maximum, following.maximum)
        maximum_included = (
            current.maximum_included or following.maximum_included
        )
    elif following.maximum > current.maximum:
        maximum = following.maximum
        maximum_included = following.maximum_included
    else:
        maximum = current.maximum
        maximum_included = current.maximum_included

    return Interval(
        minimum=minimum,
        minimum_included=minimum_included,
        maximum=maximum,
        maximum_included=maximum_included,
    )


def _normalize(
    intervals: Iterable[Interval | None], tolerance: float
) -> tuple[Interval, ...]:
    """Sort intervals and merge every overlapping or touching pair.

    Absent and empty intervals are dropped. Bounds within tolerance of each
    other are treated as touching when at least one of them is included.
    """
    validate_tolerance(tolerance)
    candidates = [
        interval
        for interval in intervals
        if interval is not None and not interval.is_empty
    ]
    if not candidates:
        return ()

    ordered = sorted(candidates, key=_sort_key)
    merged: list[Interval] = [ordered[0]]

    for interval in ordered[1:]:
        if _should_merge(merged[-1], interval, tolerance):
            merged[-1] = _merge_pair(merged[-1], interval, tolerance)
            continue
        merged.append(interval)

    return tuple(merged)


def _lower_bound(one: Interval, other: Interval, tolerance: float) -> Bound:
    if bounds_equal(one.minimum, other.minimum, tolerance):
        return (
            max(one.minimum, other.minimum),
            one.minimum_included and other.minimum_included,
        )
    if one.minimum > other.minimum:
        return (one.minimum, one.minimum_included)
    return (other.minimum, other.minimum_included)


def _upper_bound(one: Interval, other: Interval, tolerance: float) -> Bound:
    if bounds_equal(one.maximum, other.maximum, tolerance):
        return (
            min(one.maximum, other.maximum),
            one.maximum_included and other.maximum_included,
        )
    if one.maximum < other.maximum:
        return (one.maximum, one.maximum_included)
    return (other.maximum, other.maximum_included)


def _overlap(
    one: Interval, other: Interval, tolerance: float
) -> Interval | None:
    lower, lower_included = _lower_bound(one, other, tolerance)
    upper, upper_included = _upper_bound(one, other, tolerance)

    if bounds_equal(lower, upper, tolerance):
        # Touching within tolerance: only a closed sliver can survive.
        if not (lower_included and upper_included):
            return None
        return Interval.closed(min(lower, upper), max(lower, upper))

    if not is_less_than(lower, upper, tolerance):
        return None

    return Interval(
        minimum=lower,
        minimum_included=lower_included,
        maximum=upper,
        maximum_included=upper_included,
    )


class IntervalSet(BaseModel):
    """A sorted union of disjoint intervals, normalized on construction."""

    model_config = {"frozen": True}

    intervals: tuple[Interval, ...] = Field(
        default=(),
        description="Disjoint intervals sorted from lowest to highest",
    )

    @field_validator("intervals", mode="before")
    @classmethod
    def drop_absent_intervals(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, (list, tuple)):
            return tuple(item for item in value if item is not None)
        return value

    @field_validator("intervals")
    @classmethod
    def normalize_intervals(
        cls, value: tuple[Interval, ...]
    ) -> tuple[Interval, ...]:
        return _normalize(value, 0.0)

    @classmethod
    def create(
        cls,
        intervals: Iterable[Interval | None] | None = None,
        tolerance: float = STANDARD_TOLERANCE,
    ) -> "IntervalSet":
        """Build a set from any number of intervals, ignoring absent ones.

        Members are merged under the same tolerance rule as `extended_by`,
        so a created set is unchanged by a union with itself.
        """
        return cls(intervals=_normalize(intervals or (), tolerance))

    @property
    def is_empty(self) -> bool:
        return not self.intervals

    def __len__(self) -> int:
        return len(self.intervals)

    def contains(
        self, value: float, tolerance: float = STANDARD_TOLERANCE
    ) -> bool:
        validate_tolerance(tolerance)
        return any(
            interval.contains(value, tolerance) for interval in self.intervals
        )

    def __contains__(self, value: float) -> bool:
        return self.contains(value)

    def extended_by(
        self,
        intervals: "Interval | IntervalSet | Iterable[Interval | None] | None",
        tolerance: float = STANDARD_TOLERANCE,
    ) -> "IntervalSet":
        """Return the union of this set and the given interval(s).

        Accepts a single interval, another set, or an iterable of intervals.
        Absent input leaves the set unchanged.
        """
        validate_tolerance(tolerance)

        if intervals is None:
            additions: tuple[Interval | None, ...] = ()
        elif isinstance(intervals, Interval):
            additions = (intervals,)
        elif isinstance(intervals, IntervalSet):
            additions = intervals.intervals
        else:
            additions = tuple(intervals)

        merged = _normalize((*self.intervals, *additions), tolerance)
        logger.debug(
            "extended %d intervals by %d: %d after merging",
            len(self.intervals),
            len(additions),
            len(merged),
        )
        return IntervalSet(intervals=merged)

    def intersect_with(
        self,
        other: "IntervalSet | None",
        tolerance: float = STANDARD_TOLERANCE,
    ) -> "IntervalSet":
        """Return the values present in both sets, within tolerance.

        A missing or empty operand yields the empty set.
        """
        validate_tolerance(tolerance)

        if other is None or self.is_empty or other.is_empty:
            return IntervalSet()

        ours = self.intervals
        theirs = other.intervals
        overlaps: list[Interval] = []
        i = 0
        j = 0

        while i < len(ours) and j < len(theirs):
            one = ours[i]
            two = theirs[j]
            overlap = _overlap(one, two, tolerance)
            if overlap is not None:
                overlaps.append(overlap)

            if one.maximum < two.maximum:
                i += 1
            elif two.maximum < one.maximum:
                j += 1
            else:
                i += 1
                j += 1

        logger.debug(
            "intersected %d and %d intervals: %d overlaps",
            len(ours),
            len(theirs),
            len(overlaps),
        )
        return IntervalSet(intervals=overlaps)
