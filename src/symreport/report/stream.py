# topmark:header:start
#
#   project      : SymReport
#   file         : stream.py
#   file_relpath : src/symreport/report/stream.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Incremental rendering of a report document into a text sink.

A long-running analysis cannot wait for the whole report tree before writing
anything: results are written one by one as they are classified. The stream
therefore renders the document in three parts:

1. ``open()`` writes the prologue: ``<analysis>``, the metadata block and
   ``<results>``.
2. ``write()`` renders one result node per call.
3. ``close()`` writes the epilogue ``</results>`` / ``</analysis>``, exactly
   once and only if the prologue was written.

The stream never opens or closes the sink itself; the owner of the file does.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from symreport.config.logging import get_logger
from symreport.report.markup import MARKUP_SEPARATOR, join_nonempty, serialize

if TYPE_CHECKING:
    from types import TracebackType
    from typing import TextIO

    from symreport.config.logging import SymreportLogger
    from symreport.report.markup import Markup
    from symreport.report.results import Metadata

logger: SymreportLogger = get_logger(__name__)

RESULTS_OPEN_TAG: str = "<results>"
RESULTS_CLOSE_TAG: str = "</results>"
ANALYSIS_OPEN_TAG: str = "<analysis>"
ANALYSIS_CLOSE_TAG: str = "</analysis>"


class StreamState(Enum):
    """Lifecycle of a `ReportStream`."""

    NEW = "new"
    OPEN = "open"
    CLOSED = "closed"


class StreamStateError(RuntimeError):
    """Raised when a stream is written to outside of its open state."""


class ReportStream:
    """File-backed report document rendered incrementally.

    Args:
        sink (TextIO): Destination text stream; owned by the caller.
        metadata (Metadata | None): Metadata rendered in the prologue, if any.

    Attributes:
        sink (TextIO): Destination text stream.
        metadata (Metadata | None): Metadata rendered in the prologue.
        state (StreamState): Current lifecycle state.
        written (int): Number of result nodes written so far.
    """

    sink: TextIO
    metadata: Metadata | None
    state: StreamState
    written: int

    def __init__(self, sink: TextIO, metadata: Metadata | None = None) -> None:
        self.sink = sink
        self.metadata = metadata
        self.state = StreamState.NEW
        self.written = 0

    def _emit(self, text: str) -> None:
        self.sink.write(text + MARKUP_SEPARATOR)
        self.sink.flush()

    def open(self) -> None:
        """Write the document prologue. Calling it again is a no-op."""
        if self.state is not StreamState.NEW:
            return
        self._emit(join_nonempty([ANALYSIS_OPEN_TAG, serialize(self.metadata), RESULTS_OPEN_TAG]))
        self.state = StreamState.OPEN
        logger.debug("Report stream opened")

    def write(self, node: Markup) -> None:
        """Render one result node into the document.

        Args:
            node: The node to render (typically an `Issue`, `Failure` or `Info`).

        Raises:
            StreamStateError: If the stream is not open.
        """
        if self.state is not StreamState.OPEN:
            raise StreamStateError(f"Cannot write to a report stream in state '{self.state.value}'")
        markup: str = node.to_markup()
        if not markup:
            return
        self._emit(markup)
        self.written += 1
        logger.trace("Streamed result #%d", self.written)

    def close(self) -> None:
        """Write the document epilogue.

        The closing tags are written exactly once, and only when the prologue
        was written. Subsequent calls are no-ops.
        """
        if self.state is StreamState.OPEN:
            self._emit(join_nonempty([RESULTS_CLOSE_TAG, ANALYSIS_CLOSE_TAG]))
            logger.debug("Report stream closed after %d result(s)", self.written)
        self.state = StreamState.CLOSED

    def __enter__(self) -> ReportStream:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
