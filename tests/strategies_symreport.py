# topmark:header:start
#
#   project      : SymReport
#   file         : strategies_symreport.py
#   file_relpath : tests/strategies_symreport.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating SymReport report trees.

Text payloads deliberately include markup-significant characters and blank
strings so property tests exercise escaping and the omission rule.
"""

from __future__ import annotations

from hypothesis import strategies as st

from symreport.report import (
    Failure,
    FailureKind,
    File,
    Function,
    Info,
    Issue,
    Location,
    Message,
    Notes,
    Point,
    Range,
    ResultType,
    Results,
    State,
    Trace,
)

BLACKLIST_CATEGORIES: tuple[str, ...] = ("Cs",)

# May be empty and may contain line breaks and other control characters
texts: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(blacklist_categories=BLACKLIST_CATEGORIES) | st.sampled_from("\n\r"),
    max_size=20,
)

coords: st.SearchStrategy[int] = st.integers(min_value=0, max_value=10_000)

points: st.SearchStrategy[Point] = st.builds(Point, coords, coords)
ranges: st.SearchStrategy[Range] = st.builds(Range, points, points)

locations: st.SearchStrategy[Location] = st.builds(
    Location,
    file=st.builds(File, texts),
    function=st.none() | st.builds(Function, texts),
    span=st.none() | points | ranges,
)

states: st.SearchStrategy[State] = st.builds(
    State,
    location=locations,
    notes=st.none() | st.builds(Notes, texts),
)

traces: st.SearchStrategy[Trace] = st.lists(states, max_size=3).map(
    lambda xs: Trace(states=tuple(xs))
)

messages: st.SearchStrategy[Message] = st.builds(Message, texts)

issues: st.SearchStrategy[Issue] = st.builds(
    Issue, message=messages, location=locations, trace=st.none() | traces
)
failures: st.SearchStrategy[Failure] = st.builds(
    Failure,
    kind=st.sampled_from(list(FailureKind)),
    message=messages,
    location=st.none() | locations,
)
infos: st.SearchStrategy[Info] = st.builds(Info, taxonomy_id=texts, message=messages)

result_items: st.SearchStrategy[ResultType] = st.one_of(issues, failures, infos)

results: st.SearchStrategy[Results] = st.lists(result_items, max_size=5).map(
    lambda xs: Results(items=tuple(xs))
)
