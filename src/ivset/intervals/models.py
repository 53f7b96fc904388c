import math

from pydantic import BaseModel, Field, model_validator

from ivset.core.compare import (
    is_equal_to,
    is_greater_than,
    is_greater_than_or_equal_to,
    is_less_than,
    is_less_than_or_equal_to,
)
from ivset.core.tolerance import STANDARD_TOLERANCE, validate_tolerance


class Interval(BaseModel):
    """A contiguous range of reals with independently inclusive bounds."""

    model_config = {"frozen": True}

    minimum: float = Field(description="Lower bound (may be -inf)")
    minimum_included: bool = Field(
        description="Whether the lower bound belongs to the interval"
    )
    maximum: float = Field(description="Upper bound (may be +inf)")
    maximum_included: bool = Field(
        description="Whether the upper bound belongs to the interval"
    )

    @model_validator(mode="after")
    def validate_bounds(self) -> "Interval":
        if math.isnan(self.minimum):
            raise ValueError("minimum must be a valid number")
        if math.isnan(self.maximum):
            raise ValueError("maximum must be a valid number")
        if self.minimum > self.maximum:
            raise ValueError(
                f"minimum ({self.minimum}) must be <= "
                f"maximum ({self.maximum})"
            )
        if self.minimum_included and math.isinf(self.minimum):
            raise ValueError("an included minimum cannot be infinite")
        if self.maximum_included and math.isinf(self.maximum):
            raise ValueError("an included maximum cannot be infinite")
        return self

    @classmethod
    def open(cls, minimum: float, maximum: float) -> "Interval":
        return cls(
            minimum=minimum,
            minimum_included=False,
            maximum=maximum,
            maximum_included=False,
        )

    @classmethod
    def open_closed(cls, minimum: float, maximum: float) -> "Interval":
        return cls(
            minimum=minimum,
            minimum_included=False,
            maximum=maximum,
            maximum_included=True,
        )

    @classmethod
    def closed_open(cls, minimum: float, maximum: float) -> "Interval":
        return cls(
            minimum=minimum,
            minimum_included=True,
            maximum=maximum,
            maximum_included=False,
        )

    @classmethod
    def closed(cls, minimum: float, maximum: float) -> "Interval":
        return cls(
            minimum=minimum,
            minimum_included=True,
            maximum=maximum,
            maximum_included=True,
        )

    @property
    def length(self) -> float:
        if math.isinf(self.minimum) or math.isinf(self.maximum):
            return math.inf
        return self.maximum - self.minimum

    @property
    def is_empty(self) -> bool:
        """True for a zero-width interval that excludes one of its bounds."""
        return self.minimum == self.maximum and not (
            self.minimum_included and self.maximum_included
        )

    def contains(
        self, value: float, tolerance: float = STANDARD_TOLERANCE
    ) -> bool:
        """Check whether value lies in the interval, within tolerance.

        An infinite value is contained when the matching bound is the same
        infinity, even though that bound itself is always excluded.
        """
        validate_tolerance(tolerance)

        if value == -math.inf and self.minimum == -math.inf:
            return True
        if value == math.inf and self.maximum == math.inf:
            return True

        if self.minimum_included:
            above_minimum = is_greater_than_or_equal_to(
                value, self.minimum, tolerance
            )
        else:
            above_minimum = is_greater_than(value, self.minimum, tolerance)
        if not above_minimum:
            return False

        if self.maximum_included:
            return is_less_than_or_equal_to(value, self.maximum, tolerance)
        return is_less_than(value, self.maximum, tolerance)

    def __contains__(self, value: float) -> bool:
        return self.contains(value)


def bounds_equal(value: float, other: float, tolerance: float) -> bool:
    """Tolerance equality that also matches two equal infinities."""
    return value == other or is_equal_to(value, other, tolerance)


def are_equal(
    one: Interval | None,
    other: Interval | None,
    tolerance: float = STANDARD_TOLERANCE,
) -> bool:
    """Compare two intervals bound by bound within tolerance.

    Inclusion flags must match exactly. An absent interval only equals
    another absent interval.
    """
    validate_tolerance(tolerance)

    if one is other:
        return True
    if one is None or other is None:
        return False

    if one.minimum_included != other.minimum_included:
        return False
    if one.maximum_included != other.maximum_included:
        return False

    if not bounds_equal(one.minimum, other.minimum, tolerance):
        return False
    return bounds_equal(one.maximum, other.maximum, tolerance)
