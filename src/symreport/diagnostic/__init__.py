# topmark:header:start
#
#   project      : SymReport
#   file         : __init__.py
#   file_relpath : src/symreport/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic classification, deduplication and reporting.

Design:
    - [`classify`][symreport.diagnostic.taxonomy.classify] maps a message to a
      stable taxonomy identifier and severity; it is pure and total.
    - [`WarningOnceCache`][symreport.diagnostic.once.WarningOnceCache]
      suppresses repeated "warn once" warnings per origin.
    - [`DiagnosticReporter`][symreport.diagnostic.reporter.DiagnosticReporter]
      owns the mutable state of a run and turns events into report nodes.
"""

from __future__ import annotations

from symreport.diagnostic.model import DiagnosticEvent, EventLevel, parse_event_line
from symreport.diagnostic.once import WarningOnceCache, normalize_once_message
from symreport.diagnostic.reporter import (
    DiagnosticReporter,
    ReporterState,
    ReporterStateError,
)
from symreport.diagnostic.taxonomy import (
    Classification,
    Severity,
    classify,
    taxonomy_id,
)

__all__ = [
    "Classification",
    "DiagnosticEvent",
    "DiagnosticReporter",
    "EventLevel",
    "ReporterState",
    "ReporterStateError",
    "Severity",
    "WarningOnceCache",
    "classify",
    "normalize_once_message",
    "parse_event_line",
    "taxonomy_id",
]
