# topmark:header:start
#
#   project      : SymReport
#   file         : test_markup_property.py
#   file_relpath : tests/report/test_markup_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for report markup.

Invariants:
- No rendering ever contains an empty line (the omission rule).
- Rendering is deterministic and equal trees render identically.
- Every opened container tag is closed.
"""

from __future__ import annotations

from hypothesis import HealthCheck, given, settings

from symreport.report import Analysis, Results
from tests.conftest import mark_hypothesis_slow
from tests.strategies_symreport import result_items, results


def _assert_no_blank_lines(markup: str) -> None:
    assert "\n\n" not in markup
    assert not markup.startswith("\n")
    assert not markup.endswith("\n")


@settings(max_examples=100)
@given(results=results)
def test_results_markup_has_no_blank_lines(results: Results) -> None:
    _assert_no_blank_lines(results.to_markup())


@mark_hypothesis_slow
@settings(max_examples=2000, suppress_health_check=[HealthCheck.too_slow])
@given(results=results)
def test_results_markup_has_no_blank_lines_exhaustive(results: Results) -> None:
    _assert_no_blank_lines(Analysis(results=results).to_markup())


@settings(max_examples=100)
@given(results=results)
def test_rendering_is_deterministic(results: Results) -> None:
    copy = Results(items=tuple(results.items))

    assert copy == results
    assert Analysis(results=copy).to_markup() == Analysis(results=results).to_markup()


@settings(max_examples=100)
@given(item=result_items)
def test_result_tags_are_balanced(item: object) -> None:
    markup: str = item.to_markup()  # type: ignore[attr-defined]
    tag = type(item).__name__.lower()

    assert markup.startswith(f"<{tag}")
    assert markup.endswith(f"</{tag}>")
    for name in ("location", "trace", "state", "range"):
        assert markup.count(f"<{name}>") == markup.count(f"</{name}>")
