import math
import random

from ivset.intervals.interval_set import IntervalSet
from ivset.intervals.models import Interval

TOLERANCES = (1e-9, 1e-6, 1e-3, 0.25)


def sample_interval(
    rng: random.Random,
    endpoint_range: tuple[int, int] = (-10, 10),
    infinite_prob: float = 0.1,
) -> Interval:
    """Sample an interval with integer endpoints and random bound flags.

    Integer endpoints make exact touching and nesting common.
    """
    lo, hi = endpoint_range
    a = rng.randint(lo, hi)
    b = rng.randint(lo, hi)
    minimum = float(min(a, b))
    maximum = float(max(a, b))
    if rng.random() < infinite_prob:
        minimum = -math.inf
    if rng.random() < infinite_prob:
        maximum = math.inf
    return Interval(
        minimum=minimum,
        minimum_included=math.isfinite(minimum) and rng.random() < 0.5,
        maximum=maximum,
        maximum_included=math.isfinite(maximum) and rng.random() < 0.5,
    )


def sample_interval_set(
    rng: random.Random,
    n_intervals_range: tuple[int, int] = (0, 6),
) -> IntervalSet:
    count = rng.randint(*n_intervals_range)
    return IntervalSet.create(sample_interval(rng) for _ in range(count))


def probe_points(*interval_sets: IntervalSet) -> list[float]:
    """Points that exercise every bound: endpoints, midpoints and outliers."""
    endpoints: set[float] = {-math.inf, math.inf, -1e6, 1e6}
    for interval_set in interval_sets:
        for interval in interval_set.intervals:
            endpoints.add(interval.minimum)
            endpoints.add(interval.maximum)
    finite = sorted(value for value in endpoints if math.isfinite(value))
    midpoints = [
        (left + right) / 2 for left, right in zip(finite, finite[1:])
    ]
    return sorted(endpoints) + midpoints
