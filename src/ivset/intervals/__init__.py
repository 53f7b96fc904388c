"""intervals: tolerance-aware intervals and normalized interval sets."""

from ivset.intervals.interval_set import IntervalSet
from ivset.intervals.models import Interval, are_equal
from ivset.intervals.parse import parse_interval, parse_interval_set
from ivset.intervals.render import render_interval, render_interval_set

__all__ = [
    "Interval",
    "IntervalSet",
    "are_equal",
    "parse_interval",
    "parse_interval_set",
    "render_interval",
    "render_interval_set",
]
