# topmark:header:start
#
#   project      : SymReport
#   file         : reporter.py
#   file_relpath : src/symreport/diagnostic/reporter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Long-lived reporting context for one analysis run.

`DiagnosticReporter` owns all mutable reporting state of a run: the
"warn once" cache, the accumulated `Results`, and optionally a `ReportStream`
writing the document into a caller-owned text sink. Call sites receive the
reporter explicitly; there is no module-level singleton.

Lifecycle:
    ``open()`` -> ``note()`` / ``warning()`` / ``warning_once()`` / ``error()``
    / ``report_issue()`` -> ``close()``. The reporter is also a context manager.

Routing:
    Each reportable event is classified with
    [`classify`][symreport.diagnostic.taxonomy.classify]. A failure
    classification produces a `Failure`, anything else an `Info`. Plain
    messages are logged but never reported. Produced nodes are streamed
    immediately when a sink was given; issues always join the `Results`
    aggregate, failures and infos only under `ResultsPolicy.ALL`.

Thread safety:
    A single lock serializes access to the cache, the aggregate and the
    stream, so "first insertion wins" holds across threads.
"""

from __future__ import annotations

import threading
from enum import Enum
from typing import TYPE_CHECKING

from symreport.config.logging import get_logger
from symreport.config.model import ReportConfig, ResultsPolicy
from symreport.diagnostic.model import DiagnosticEvent, EventLevel
from symreport.diagnostic.once import WarningOnceCache
from symreport.diagnostic.taxonomy import classify
from symreport.report.results import (
    Analysis,
    Failure,
    Generator,
    Info,
    Issue,
    Metadata,
    Results,
)
from symreport.report.stream import ReportStream
from symreport.report.values import Message

if TYPE_CHECKING:
    from collections.abc import Hashable
    from types import TracebackType
    from typing import TextIO

    from symreport.config.logging import SymreportLogger
    from symreport.diagnostic.taxonomy import Classification
    from symreport.report.results import ResultType

logger: SymreportLogger = get_logger(__name__)


class ReporterState(Enum):
    """Lifecycle of a `DiagnosticReporter`."""

    NEW = "new"
    OPEN = "open"
    CLOSED = "closed"


class ReporterStateError(RuntimeError):
    """Raised when events are recorded outside of the reporter's open state."""


def format_message(msg: str, args: tuple[object, ...]) -> str:
    """Apply printf-style substitution the way `logging` does (only when args are given)."""
    return msg % args if args else msg


class DiagnosticReporter:
    """Reporting context owning the dedup cache, the report tree and the stream.

    Args:
        config (ReportConfig | None): Report configuration; defaults to `ReportConfig()`.
        sink (TextIO | None): Optional text stream receiving the incrementally
            rendered document. The reporter never closes it.

    Attributes:
        config (ReportConfig): The effective configuration.
        state (ReporterState): Current lifecycle state.
    """

    config: ReportConfig
    state: ReporterState

    def __init__(self, config: ReportConfig | None = None, *, sink: TextIO | None = None) -> None:
        self.config = config or ReportConfig()
        self.state = ReporterState.NEW
        self._lock = threading.Lock()
        self._once = WarningOnceCache()
        self._results = Results()
        self._stream: ReportStream | None = None
        if sink is not None and self.config.enabled:
            self._stream = ReportStream(sink, self.metadata)

    # --- Lifecycle ---------------------------------------------------------

    def open(self) -> None:
        """Start the run; writes the stream prologue when streaming."""
        with self._lock:
            if self.state is not ReporterState.NEW:
                raise ReporterStateError(f"Cannot open a reporter in state '{self.state.value}'")
            if self._stream is not None:
                self._stream.open()
            self.state = ReporterState.OPEN
        logger.debug("Reporter opened (enabled=%s)", self.config.enabled)

    def close(self) -> None:
        """End the run; writes the stream epilogue once. Further calls are no-ops."""
        with self._lock:
            if self.state is ReporterState.CLOSED:
                return
            if self._stream is not None:
                self._stream.close()
            self.state = ReporterState.CLOSED
        logger.debug(
            "Reporter closed: %d result(s), %d once-key(s)", len(self._results), len(self._once)
        )

    def __enter__(self) -> DiagnosticReporter:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # --- Recording ---------------------------------------------------------

    def message(self, msg: str, *args: object) -> None:
        """Record a plain progress message (logged, never reported)."""
        self.record(DiagnosticEvent(EventLevel.MESSAGE, format_message(msg, args)))

    def note(self, msg: str, *args: object) -> ResultType | None:
        """Record a note."""
        return self.record(DiagnosticEvent(EventLevel.NOTE, format_message(msg, args)))

    def warning(self, msg: str, *args: object) -> ResultType | None:
        """Record a warning."""
        return self.record(DiagnosticEvent(EventLevel.WARNING, format_message(msg, args)))

    def warning_once(self, origin: Hashable, msg: str, *args: object) -> ResultType | None:
        """Record a warning at most once per ``(origin, normalized template)``.

        The key is built from ``msg`` before substitution, so a warning raised
        in a loop with changing arguments is still reported once.

        Args:
            origin: Opaque token identifying the call site.
            msg: Message template, optionally with printf-style placeholders.
            *args: Substitution arguments for ``msg``.

        Returns:
            The produced node, or ``None`` when the warning was already reported.
        """
        event = DiagnosticEvent(
            EventLevel.WARNING_ONCE, format_message(msg, args), origin, template=msg
        )
        return self.record(event)

    def error(self, msg: str, *args: object) -> ResultType | None:
        """Record an error.

        Terminating the process afterwards is up to the caller.
        """
        return self.record(DiagnosticEvent(EventLevel.ERROR, format_message(msg, args)))

    def record(self, event: DiagnosticEvent) -> ResultType | None:
        """Classify and report one event.

        Args:
            event: The event to record.

        Returns:
            The produced `Failure` or `Info`, or ``None`` when the event is a
            plain message, a repeated "warn once" warning, or reporting is disabled.

        Raises:
            ReporterStateError: If the reporter is not open.
        """
        with self._lock:
            self._require_open()
            if not event.level.is_reportable:
                logger.trace("Message: %s", event.message)
                return None
            if event.level is EventLevel.WARNING_ONCE and not self._once.should_emit(
                event.origin, event.once_text
            ):
                return None
            if not self.config.enabled:
                logger.trace("Reporting disabled; dropping %s", event.render())
                return None

            classification: Classification = classify(event.message)
            node: ResultType = self._build_node(classification, event.message)
            self._emit(node, collect=self.config.results_policy is ResultsPolicy.ALL)
        logger.debug("Recorded %s as %s", event.level.value, classification.taxonomy_id)
        return node

    def report_issue(self, issue: Issue) -> Issue:
        """Record a structured, located defect.

        Issues always join the `Results` aggregate.

        Raises:
            ReporterStateError: If the reporter is not open.
        """
        with self._lock:
            self._require_open()
            if self.config.enabled:
                self._emit(issue, collect=True)
        logger.debug("Recorded issue: %s", issue.message.text)
        return issue

    def _require_open(self) -> None:
        if self.state is not ReporterState.OPEN:
            raise ReporterStateError(
                f"Cannot record events on a reporter in state '{self.state.value}'"
            )

    @staticmethod
    def _build_node(classification: Classification, text: str) -> ResultType:
        if classification.failure_kind is not None:
            return Failure(kind=classification.failure_kind, message=Message(text))
        return Info(taxonomy_id=classification.taxonomy_id, message=Message(text))

    def _emit(self, node: ResultType, *, collect: bool) -> None:
        if self._stream is not None:
            self._stream.write(node)
        if collect:
            self._results = self._results.append(node)

    # --- Report tree -------------------------------------------------------

    @property
    def metadata(self) -> Metadata:
        """Return the report metadata derived from the configuration."""
        return Metadata(
            generator=Generator(
                name=self.config.generator_name, version=self.config.generator_version
            )
        )

    @property
    def results(self) -> Results:
        """Return a snapshot of the accumulated results."""
        with self._lock:
            return self._results

    @property
    def once_keys(self) -> int:
        """Return the number of distinct "warn once" keys seen so far."""
        with self._lock:
            return len(self._once)

    def analysis(self) -> Analysis:
        """Return the complete report tree accumulated so far."""
        return Analysis(metadata=self.metadata, results=self.results)

    def serialize(self) -> str:
        """Render the accumulated report tree to markup."""
        return self.analysis().to_markup()
