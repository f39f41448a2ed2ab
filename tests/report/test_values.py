# topmark:header:start
#
#   project      : SymReport
#   file         : test_values.py
#   file_relpath : tests/report/test_values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the immutable report value model and its markup."""

from __future__ import annotations

import dataclasses

import pytest

from symreport.report import File, Function, Location, Message, Notes, Point, Range, State, Trace
from tests.conftest import LOC1, LOC1_MARKUP, LOC1_RANGE, parametrize


def test_point_markup() -> None:
    assert Point(120, 0).to_markup() == '<point column="120" line="0"/>'


@parametrize("column,line", [(-1, 0), (0, -1), (-5, -5)])
def test_point_rejects_negative_coordinates(column: int, line: int) -> None:
    with pytest.raises(ValueError, match="non-negative"):
        Point(column, line)


def test_range_markup_lists_start_then_end() -> None:
    assert LOC1_RANGE.to_markup() == (
        "<range>\n"
        '<point column="120" line="0"/>\n'
        '<point column="150" line="0"/>\n'
        "</range>"
    )


def test_file_and_function_markup() -> None:
    assert File("a/b/c").to_markup() == '<file given-path="a/b/c"/>'
    assert Function("f1").to_markup() == '<function name="f1"/>'


def test_attribute_values_are_escaped() -> None:
    assert File('x"<y>&z').to_markup() == '<file given-path="x&quot;&lt;y&gt;&amp;z"/>'


def test_location_with_all_parts() -> None:
    assert LOC1.to_markup() == LOC1_MARKUP


def test_location_with_file_only_omits_optional_parts() -> None:
    loc = Location(file=File("a/b/c"))

    assert loc.to_markup() == '<location>\n<file given-path="a/b/c"/>\n</location>'


def test_location_with_point_span() -> None:
    loc = Location(file=File("x.c"), span=Point(3, 4))

    assert loc.point == Point(3, 4)
    assert loc.range is None
    assert loc.to_markup() == (
        '<location>\n<file given-path="x.c"/>\n<point column="3" line="4"/>\n</location>'
    )


def test_location_range_accessor() -> None:
    assert LOC1.range == LOC1_RANGE
    assert LOC1.point is None


def test_message_and_notes_markup() -> None:
    assert Message("out of bounds").to_markup() == "<message>out of bounds</message>"
    assert Notes("i > 10").to_markup() == "<notes>i &gt; 10</notes>"
    assert str(Message("abc")) == "abc"


def test_state_markup_places_notes_after_location() -> None:
    state = State(location=LOC1, notes=Notes("note"))

    assert state.to_markup() == f"<state>\n{LOC1_MARKUP}\n<notes>note</notes>\n</state>"


def test_state_without_notes() -> None:
    assert State(location=LOC1).to_markup() == f"<state>\n{LOC1_MARKUP}\n</state>"


def test_trace_keeps_execution_order() -> None:
    first = State(location=Location(file=File("first.c")))
    second = State(location=Location(file=File("second.c")))
    trace = Trace.of(first, second)

    assert list(trace) == [first, second]
    assert len(trace) == 2
    markup = trace.to_markup()
    assert markup.startswith("<trace>\n<state>")
    assert markup.index("first.c") < markup.index("second.c")
    assert markup.endswith("</state>\n</trace>")


def test_empty_trace_renders_empty_block() -> None:
    assert Trace().to_markup() == "<trace>\n</trace>"


def test_values_are_immutable_and_compare_structurally() -> None:
    assert Location(file=File("f")) == Location(file=File("f"))
    assert Point(1, 2) != Point(2, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        Point(1, 2).column = 3  # type: ignore[misc]
