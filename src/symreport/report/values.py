# topmark:header:start
#
#   project      : SymReport
#   file         : values.py
#   file_relpath : src/symreport/report/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable value model for report anchors and execution traces.

Sections:
    * Point / Range: source positions and spans.
    * File / Function: what a location points into.
    * Location: file, optional function and an optional span (range *or* point).
    * Text / Message / Notes: free-form text payloads.
    * State / Trace: ordered execution-path steps.

Optional fields are typed ``X | None``; ``None`` is the only representation of
"not provided" and renders to nothing (see
[`symreport.report.markup.serialize`][symreport.report.markup.serialize]).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from symreport.report.markup import element, empty_element, serialize, text_element

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True, slots=True)
class Point:
    """A column/line position in a source file."""

    column: int
    line: int

    def __post_init__(self) -> None:
        if self.column < 0 or self.line < 0:
            raise ValueError(
                f"Point coordinates must be non-negative (column={self.column}, line={self.line})"
            )

    def to_markup(self) -> str:
        """Render as ``<point column=".." line=".."/>``."""
        return empty_element("point", (("column", str(self.column)), ("line", str(self.line))))


@dataclass(frozen=True, slots=True)
class Range:
    """A span between two points."""

    start: Point
    end: Point

    def to_markup(self) -> str:
        """Render as a ``<range>`` block holding both points."""
        return element("range", (self.start.to_markup(), self.end.to_markup()))


@dataclass(frozen=True, slots=True)
class File:
    """A source file reference (the path as given to the tool)."""

    path: str

    def to_markup(self) -> str:
        """Render as ``<file given-path=".."/>``."""
        return empty_element("file", (("given-path", self.path),))


@dataclass(frozen=True, slots=True)
class Function:
    """A function reference."""

    name: str

    def to_markup(self) -> str:
        """Render as ``<function name=".."/>``."""
        return empty_element("function", (("name", self.name),))


@dataclass(frozen=True, slots=True)
class Location:
    """A diagnostic anchor.

    A location always names a file. The function and the span are optional;
    the span is either a `Range` or a single `Point`, so a location can never
    carry both at once.

    Attributes:
        file: The file the location points into.
        function: The enclosing function, if known.
        span: A `Range` or a `Point` within the file, if known.
    """

    file: File
    function: Function | None = None
    span: Range | Point | None = None

    @property
    def range(self) -> Range | None:
        """Return the span if it is a `Range`, else ``None``."""
        return self.span if isinstance(self.span, Range) else None

    @property
    def point(self) -> Point | None:
        """Return the span if it is a `Point`, else ``None``."""
        return self.span if isinstance(self.span, Point) else None

    def to_markup(self) -> str:
        """Render as a ``<location>`` block (file, function, span)."""
        return element(
            "location",
            (self.file.to_markup(), serialize(self.function), serialize(self.span)),
        )


@dataclass(frozen=True, slots=True)
class Text:
    """Free-form text payload shared by `Message` and `Notes`."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Message(Text):
    """User-facing diagnostic text."""

    def to_markup(self) -> str:
        """Render as ``<message>..</message>``."""
        return text_element("message", self.text)


@dataclass(frozen=True, slots=True)
class Notes(Text):
    """Auxiliary commentary attached to a trace `State`."""

    def to_markup(self) -> str:
        """Render as ``<notes>..</notes>``."""
        return text_element("notes", self.text)


@dataclass(frozen=True, slots=True)
class State:
    """One step of an execution trace."""

    location: Location
    notes: Notes | None = None

    def to_markup(self) -> str:
        """Render as a ``<state>`` block (location, then notes)."""
        return element("state", (self.location.to_markup(), serialize(self.notes)))


@dataclass(frozen=True, slots=True)
class Trace:
    """An ordered execution path.

    An empty trace is a present value and renders as an empty ``<trace>``
    block; use ``None`` on the owning `Issue` to omit the trace entirely.
    """

    states: tuple[State, ...] = ()

    @classmethod
    def of(cls, *states: State) -> Trace:
        """Build a trace from states given in execution order."""
        return cls(states=tuple(states))

    def __iter__(self) -> Iterator[State]:
        """Iterate over states in execution order."""
        return iter(self.states)

    def __len__(self) -> int:
        """Return the number of states in the trace."""
        return len(self.states)

    def to_markup(self) -> str:
        """Render as a ``<trace>`` block holding every state in order."""
        return element("trace", (state.to_markup() for state in self.states))
