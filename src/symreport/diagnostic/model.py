# topmark:header:start
#
#   project      : SymReport
#   file         : model.py
#   file_relpath : src/symreport/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic events as emitted by the analysis tool.

Sections:
    * EventLevel: the kinds of diagnostic the tool prints, with their prefixes.
    * DiagnosticEvent: immutable event payload (level + formatted message + origin).
    * parse_event_line: parse a captured ``KLEE: LEVEL: message`` line.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum

from symreport.constants import TOOL_LINE_PREFIX


class EventLevel(Enum):
    """Kinds of diagnostic event.

    Plain messages are progress output and never enter the report; every other
    level is classified and reported.
    """

    MESSAGE = "message"
    NOTE = "note"
    WARNING = "warning"
    WARNING_ONCE = "warning-once"
    ERROR = "error"

    @property
    def prefix(self) -> str:
        """Return the prefix the tool prints in front of the message."""
        return _PREFIXES[self]

    @property
    def is_reportable(self) -> bool:
        """Return True if events of this level belong in the report."""
        return self is not EventLevel.MESSAGE


_PREFIXES: dict[EventLevel, str] = {
    EventLevel.MESSAGE: "",
    EventLevel.NOTE: "NOTE",
    EventLevel.WARNING: "WARNING",
    EventLevel.WARNING_ONCE: "WARNING ONCE",
    EventLevel.ERROR: "ERROR",
}

# "WARNING ONCE" must be tried before "WARNING"
_PARSE_ORDER: tuple[EventLevel, ...] = (
    EventLevel.WARNING_ONCE,
    EventLevel.WARNING,
    EventLevel.ERROR,
    EventLevel.NOTE,
)


@dataclass(frozen=True)
class DiagnosticEvent:
    """A single diagnostic event.

    Attributes:
        level: The event kind.
        message: Fully formatted message text (prefixes stripped).
        origin: Opaque call-site token; required for `EventLevel.WARNING_ONCE`.
        template: The message before argument substitution, when known.
    """

    level: EventLevel
    message: str
    origin: Hashable | None = None
    template: str | None = None

    @property
    def once_text(self) -> str:
        """Return the text a "warn once" key is built from (the template if known)."""
        return self.message if self.template is None else self.template

    def render(self) -> str:
        """Return the event as the tool would print it (without the tool prefix)."""
        if not self.level.prefix:
            return self.message
        return f"{self.level.prefix}: {self.message}"


def parse_event_line(line: str, *, origin: Hashable | None = None) -> DiagnosticEvent:
    """Parse one captured diagnostic line.

    Accepts ``[KLEE: ]LEVEL: message`` where ``LEVEL`` is one of ``NOTE``,
    ``WARNING``, ``WARNING ONCE`` or ``ERROR``. Lines without a level prefix
    are plain messages.

    Args:
        line: The captured line; a trailing newline is ignored.
        origin: Origin token attached to the event.

    Returns:
        The parsed event.
    """
    text: str = line.rstrip("\r\n")
    if text.startswith(TOOL_LINE_PREFIX):
        text = text[len(TOOL_LINE_PREFIX) :]
    for level in _PARSE_ORDER:
        marker: str = f"{level.prefix}: "
        if text.startswith(marker):
            return DiagnosticEvent(level=level, message=text[len(marker) :], origin=origin)
    return DiagnosticEvent(level=EventLevel.MESSAGE, message=text, origin=origin)
