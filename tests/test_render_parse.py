import math

import pytest

from ivset.intervals import (
    Interval,
    IntervalSet,
    parse_interval,
    parse_interval_set,
    render_interval,
    render_interval_set,
)

INF = math.inf


class TestRenderInterval:
    @pytest.mark.parametrize(
        "interval,expected",
        [
            (Interval.closed(2, 5.5), "[2.0, 5.5]"),
            (Interval.open(0, 1), "(0.0, 1.0)"),
            (Interval.open_closed(-1.5, 0), "(-1.5, 0.0]"),
            (Interval.closed_open(0, 0.25), "[0.0, 0.25)"),
            (Interval.open(-INF, INF), "(-inf, inf)"),
        ],
    )
    def test_brackets_follow_inclusion(
        self, interval: Interval, expected: str
    ) -> None:
        assert render_interval(interval) == expected


class TestRenderIntervalSet:
    def test_empty(self) -> None:
        assert render_interval_set(IntervalSet()) == "{}"

    def test_union_of_intervals(self) -> None:
        interval_set = IntervalSet.create(
            [Interval.closed_open(3, INF), Interval.open_closed(-INF, -2)]
        )
        assert render_interval_set(interval_set) == "(-inf, -2.0] U [3.0, inf)"


class TestParseInterval:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("[0, 1]", Interval.closed(0, 1)),
            ("(0,1)", Interval.open(0, 1)),
            ("  (-inf, 2.5]  ", Interval.open_closed(-INF, 2.5)),
            ("[1e-3, +inf)", Interval.closed_open(0.001, INF)),
            ("[-2, -2]", Interval.closed(-2, -2)),
        ],
    )
    def test_valid(self, text: str, expected: Interval) -> None:
        assert parse_interval(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["", "[", "0, 1", "{0, 1}", "[0 1]", "[0, 1, 2]", "[a, 1]", "[, 1]"],
    )
    def test_malformed(self, text: str) -> None:
        with pytest.raises(ValueError, match="Invalid interval"):
            parse_interval(text)

    @pytest.mark.parametrize(
        "text", ["[2, 1]", "[-inf, 0]", "(0, inf]", "(nan, 1)"]
    )
    def test_rejected_bounds(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_interval(text)

    @pytest.mark.parametrize(
        "interval",
        [
            Interval.closed(-1.25, 3),
            Interval.open(-INF, 0.1),
            Interval.closed_open(1e-7, 2e10),
        ],
    )
    def test_reads_rendered_notation(self, interval: Interval) -> None:
        assert parse_interval(render_interval(interval)) == interval


class TestParseIntervalSet:
    @pytest.mark.parametrize("text", ["", "  ", "{}"])
    def test_empty(self, text: str) -> None:
        assert parse_interval_set(text).is_empty

    def test_union_is_normalized(self) -> None:
        interval_set = parse_interval_set("[2, 3] U [0, 1] U (1, 2)")
        assert interval_set.intervals == (Interval.closed(0, 3),)

    def test_malformed_member(self) -> None:
        with pytest.raises(ValueError):
            parse_interval_set("[0, 1] U oops")
