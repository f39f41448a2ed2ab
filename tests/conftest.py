# topmark:header:start
#
#   project      : SymReport
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the SymReport test suite.

This file sets up global fixtures, typed pytest helpers and the logging
configuration for test runs, plus a few report values shared across modules.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from symreport.config import logging
from symreport.report import File, Function, Location, Point, Range

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_hypothesis_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis_slow)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.fixture`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.fixture`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.fixture(*args, **kwargs))


# Report values shared by the report and reporter tests
LOC1_FILE = File("a/b/c")
LOC1_FUNCTION = Function("f1")
LOC1_RANGE = Range(Point(120, 0), Point(150, 0))
LOC1 = Location(file=LOC1_FILE, function=LOC1_FUNCTION, span=LOC1_RANGE)
LOC2 = Location(file=File("d/e/f"), function=Function("f2"), span=Point(7, 3))

LOC1_MARKUP = (
    "<location>\n"
    '<file given-path="a/b/c"/>\n'
    '<function name="f1"/>\n'
    "<range>\n"
    '<point column="120" line="0"/>\n'
    '<point column="150" line="0"/>\n'
    "</range>\n"
    "</location>"
)


@pytest.fixture(autouse=True)
def silence_symreport_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure SymReport's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    SYMREPORT_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


def pytest_configure(config: pytest.Config) -> None:
    """Configure logging for pytest runs.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
