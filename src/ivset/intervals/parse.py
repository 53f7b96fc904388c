"""Parse the bracket notation produced by ``ivset.intervals.render``."""

from ivset.intervals.interval_set import IntervalSet
from ivset.intervals.models import Interval
from ivset.intervals.render import EMPTY_SET, UNION_SEPARATOR

_OPENING = {"[": True, "(": False}
_CLOSING = {"]": True, ")": False}


def _parse_bound(token: str, text: str) -> float:
    stripped = token.strip()
    if not stripped:
        raise ValueError(f"Invalid interval '{text}': missing bound")
    try:
        return float(stripped)
    except ValueError as err:
        raise ValueError(
            f"Invalid interval '{text}': '{stripped}' is not a number"
        ) from err


def parse_interval(text: str) -> Interval:
    """Parse '[lo, hi]', '(lo, hi)' or a mixed form into an interval.

    Bounds may be written as inf, -inf or +inf. Raises ValueError on
    malformed notation or on bounds the interval factories reject.
    """
    stripped = text.strip()
    if len(stripped) < 2:
        raise ValueError(
            f"Invalid interval '{text}': expected '[LO, HI]' (e.g., '[0, 1)')"
        )

    opening, body, closing = stripped[0], stripped[1:-1], stripped[-1]
    if opening not in _OPENING or closing not in _CLOSING:
        raise ValueError(
            f"Invalid interval '{text}': must start with '[' or '(' "
            "and end with ']' or ')'"
        )

    parts = body.split(",")
    if len(parts) != 2:
        raise ValueError(
            f"Invalid interval '{text}': expected exactly two bounds"
        )

    return Interval(
        minimum=_parse_bound(parts[0], text),
        minimum_included=_OPENING[opening],
        maximum=_parse_bound(parts[1], text),
        maximum_included=_CLOSING[closing],
    )


def parse_interval_set(text: str) -> IntervalSet:
    """Parse intervals joined with 'U' into a normalized set.

    Empty text and '{}' denote the empty set.
    """
    stripped = text.strip()
    if not stripped or stripped == EMPTY_SET:
        return IntervalSet()
    pieces = stripped.split(UNION_SEPARATOR.strip())
    return IntervalSet.create(parse_interval(piece) for piece in pieces)
