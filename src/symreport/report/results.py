# topmark:header:start
#
#   project      : SymReport
#   file         : results.py
#   file_relpath : src/symreport/report/results.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Report tree: result variants, the result collection and the analysis document.

Sections:
    * ResultKind: the closed tag set of result variants (issue, failure, info).
    * FailureKind: the closed set of sanctioned failure identifiers.
    * Finding: shared ``(taxonomy_id, message)`` payload of failures and infos.
    * Issue / Failure / Info: the three result variants.
    * Results: append-only, insertion-ordered collection of results.
    * Generator / Metadata / Analysis: report provenance and the whole document.

Design:
    - Variants are sibling frozen dataclasses tagged with a ``result_kind``
      class attribute; there is no shared base class.
    - A `Failure` can only name one of the `FailureKind` members, so an
      unsanctioned failure identifier is unrepresentable.
    - `Results` is immutable; `append()` returns a new collection.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from symreport.core.enum_mixins import KeyedStrEnum
from symreport.report.markup import element, empty_element, serialize

if TYPE_CHECKING:
    from collections.abc import Iterator

    from symreport.report.values import Location, Message, Trace


class ResultKind(Enum):
    """Tag identifying which result variant a node is."""

    ISSUE = "issue"
    FAILURE = "failure"
    INFO = "info"


class FailureKind(KeyedStrEnum):
    """Sanctioned failure identifiers; `.value` is the ``failure-id`` markup key."""

    SYMBOL_LOADING = ("symbol-loading", "Unable to load a symbol", ("symbol",))
    EXTERNAL_CALL = ("external-call", "Failed external call", ("external",))


@dataclass(frozen=True, slots=True)
class Finding:
    """Classification payload shared by `Failure` and `Info`."""

    taxonomy_id: str
    message: Message


@dataclass(frozen=True, slots=True)
class Issue:
    """A located defect report, optionally with the execution trace leading to it."""

    result_kind: ClassVar[ResultKind] = ResultKind.ISSUE

    message: Message
    location: Location
    trace: Trace | None = None

    def to_markup(self) -> str:
        """Render as an ``<issue>`` block (message, location, trace)."""
        return element(
            "issue",
            (self.message.to_markup(), self.location.to_markup(), serialize(self.trace)),
        )


@dataclass(frozen=True, slots=True)
class Failure:
    """A hard failure of the analysis (e.g. a symbol that could not be loaded)."""

    result_kind: ClassVar[ResultKind] = ResultKind.FAILURE

    kind: FailureKind
    message: Message
    location: Location | None = None

    def __post_init__(self) -> None:
        assert isinstance(self.kind, FailureKind), f"unsanctioned failure kind: {self.kind!r}"

    @property
    def taxonomy_id(self) -> str:
        """Return the failure identifier as rendered in markup."""
        return self.kind.key

    @property
    def finding(self) -> Finding:
        """Return the shared classification payload."""
        return Finding(taxonomy_id=self.taxonomy_id, message=self.message)

    def to_markup(self) -> str:
        """Render as ``<failure failure-id="..">`` (location, then message)."""
        return element(
            "failure",
            (serialize(self.location), self.message.to_markup()),
            (("failure-id", self.taxonomy_id),),
        )


@dataclass(frozen=True, slots=True)
class Info:
    """An informational classification of a diagnostic; never carries a location."""

    result_kind: ClassVar[ResultKind] = ResultKind.INFO

    taxonomy_id: str
    message: Message

    @property
    def finding(self) -> Finding:
        """Return the shared classification payload."""
        return Finding(taxonomy_id=self.taxonomy_id, message=self.message)

    def to_markup(self) -> str:
        """Render as ``<info info-id="..">`` wrapping the message."""
        return element("info", (self.message.to_markup(),), (("info-id", self.taxonomy_id),))


ResultType = Issue | Failure | Info


@dataclass(frozen=True, slots=True)
class Results:
    """Insertion-ordered collection of results.

    The order reflects the temporal order in which results were discovered
    and is preserved verbatim when rendering. An empty collection is a present
    value and renders as an empty ``<results>`` block.
    """

    items: tuple[ResultType, ...] = ()

    def append(self, item: ResultType) -> Results:
        """Return a new collection with ``item`` appended."""
        return Results(items=(*self.items, item))

    @property
    def issues(self) -> tuple[Issue, ...]:
        """Return only the `Issue` entries, in order."""
        return tuple(item for item in self.items if isinstance(item, Issue))

    def __iter__(self) -> Iterator[ResultType]:
        """Iterate over results in insertion order."""
        return iter(self.items)

    def __len__(self) -> int:
        """Return the number of results."""
        return len(self.items)

    def to_markup(self) -> str:
        """Render as a ``<results>`` block holding each result in order."""
        return element("results", (item.to_markup() for item in self.items))


@dataclass(frozen=True, slots=True)
class Generator:
    """Identity of the tool that produced the report."""

    name: str
    version: str

    def to_markup(self) -> str:
        """Render as ``<generator name=".." version=".."/>``."""
        return empty_element("generator", (("name", self.name), ("version", self.version)))


@dataclass(frozen=True, slots=True)
class Metadata:
    """Report provenance.

    Only the generator is modelled; the subject-under-test description is
    left to downstream post-processing.
    """

    generator: Generator | None = None

    def to_markup(self) -> str:
        """Render as a ``<metadata>`` block."""
        return element("metadata", (serialize(self.generator),))


@dataclass(frozen=True, slots=True)
class Analysis:
    """The complete report document: metadata followed by results."""

    metadata: Metadata | None = None
    results: Results | None = None

    def to_markup(self) -> str:
        """Render the whole document as an ``<analysis>`` block."""
        return element("analysis", (serialize(self.metadata), serialize(self.results)))
