import logging
from typing import Annotated

import typer
from pydantic import ValidationError

from ivset.core.tolerance import STANDARD_TOLERANCE, validate_tolerance
from ivset.intervals.interval_set import IntervalSet
from ivset.intervals.models import Interval, are_equal
from ivset.intervals.parse import parse_interval
from ivset.intervals.render import render_interval_set

app = typer.Typer(help="Combine and query tolerance-aware interval sets.")

ToleranceOption = Annotated[
    float,
    typer.Option(
        "--tolerance",
        "-t",
        help="Slack used when comparing bounds (finite, >= 0)",
    ),
]


def _parse_interval_option(value: str) -> Interval:
    """Parse one interval. Raises typer.BadParameter on invalid input."""
    try:
        return parse_interval(value)
    except ValidationError as err:
        reasons = "; ".join(error["msg"] for error in err.errors())
        raise typer.BadParameter(
            f"Invalid interval '{value}': {reasons}"
        ) from err
    except ValueError as err:
        raise typer.BadParameter(str(err)) from err


def _parse_interval_options(values: list[str] | None) -> list[Interval]:
    return [_parse_interval_option(value) for value in values or []]


def _check_tolerance(tolerance: float) -> float:
    try:
        return validate_tolerance(tolerance)
    except ValueError as err:
        raise typer.BadParameter(str(err), param_hint="--tolerance") from err


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log merge and intersect steps"),
    ] = False,
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@app.command(context_settings={"ignore_unknown_options": True})
def contains(
    value: Annotated[float, typer.Argument(help="Value to look up")],
    intervals: Annotated[
        list[str] | None,
        typer.Option("--interval", "-i", help="Interval of the set"),
    ] = None,
    tolerance: ToleranceOption = STANDARD_TOLERANCE,
) -> None:
    """Print whether the set built from the intervals contains VALUE."""
    tolerance = _check_tolerance(tolerance)
    interval_set = IntervalSet.create(
        _parse_interval_options(intervals), tolerance
    )
    found = interval_set.contains(value, tolerance)
    typer.echo("true" if found else "false")


@app.command()
def union(
    intervals: Annotated[
        list[str] | None,
        typer.Option("--interval", "-i", help="Interval to add to the set"),
    ] = None,
    tolerance: ToleranceOption = STANDARD_TOLERANCE,
) -> None:
    """Print the normalized union of the given intervals."""
    tolerance = _check_tolerance(tolerance)
    interval_set = IntervalSet().extended_by(
        _parse_interval_options(intervals), tolerance
    )
    typer.echo(render_interval_set(interval_set))


@app.command()
def intersect(
    left: Annotated[
        list[str] | None,
        typer.Option("--left", "-a", help="Interval of the first set"),
    ] = None,
    right: Annotated[
        list[str] | None,
        typer.Option("--right", "-b", help="Interval of the second set"),
    ] = None,
    tolerance: ToleranceOption = STANDARD_TOLERANCE,
) -> None:
    """Print the intersection of two interval sets."""
    tolerance = _check_tolerance(tolerance)
    left_set = IntervalSet.create(_parse_interval_options(left), tolerance)
    right_set = IntervalSet.create(_parse_interval_options(right), tolerance)
    typer.echo(
        render_interval_set(left_set.intersect_with(right_set, tolerance))
    )


@app.command()
def equal(
    left: Annotated[str, typer.Argument(help="First interval")],
    right: Annotated[str, typer.Argument(help="Second interval")],
    tolerance: ToleranceOption = STANDARD_TOLERANCE,
) -> None:
    """Print whether two intervals are equal within the tolerance."""
    tolerance = _check_tolerance(tolerance)
    same = are_equal(
        _parse_interval_option(left),
        _parse_interval_option(right),
        tolerance,
    )
    typer.echo("true" if same else "false")
