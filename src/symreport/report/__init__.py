# topmark:header:start
#
#   project      : SymReport
#   file         : __init__.py
#   file_relpath : src/symreport/report/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Report value model, report tree and markup rendering.

Design:
    - Value types (`Point`, `Location`, `Trace`, ...) and report-tree nodes
      (`Issue`, `Failure`, `Info`, `Results`, `Analysis`, ...) are immutable
      frozen dataclasses with structural equality.
    - An optional field that is not provided is ``None`` and renders to
      nothing; composite nodes drop empty children when joining.
    - [`ReportStream`][symreport.report.stream.ReportStream] renders a document
      incrementally into a caller-owned text sink.
"""

from __future__ import annotations

from symreport.report.markup import Markup, join_nonempty, serialize
from symreport.report.results import (
    Analysis,
    Failure,
    FailureKind,
    Finding,
    Generator,
    Info,
    Issue,
    Metadata,
    Results,
    ResultKind,
    ResultType,
)
from symreport.report.stream import ReportStream, StreamState, StreamStateError
from symreport.report.values import (
    File,
    Function,
    Location,
    Message,
    Notes,
    Point,
    Range,
    State,
    Text,
    Trace,
)

__all__ = [
    "Analysis",
    "Failure",
    "FailureKind",
    "File",
    "Finding",
    "Function",
    "Generator",
    "Info",
    "Issue",
    "Location",
    "Markup",
    "Message",
    "Metadata",
    "Notes",
    "Point",
    "Range",
    "ReportStream",
    "ResultKind",
    "ResultType",
    "Results",
    "State",
    "StreamState",
    "StreamStateError",
    "Text",
    "Trace",
    "join_nonempty",
    "serialize",
]
