# topmark:header:start
#
#   project      : SymReport
#   file         : once.py
#   file_relpath : src/symreport/diagnostic/once.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Suppress repeated "warn once" diagnostics.

A warning that fires in a hot loop should be reported once, not thousands of
times. `WarningOnceCache` remembers every ``(origin, normalized message)`` key
it has seen and only lets the first occurrence through.

The origin is an opaque, hashable token identifying the call site (not the
message content), so the same message raised from two call sites is reported
twice.

Capacity:
    The cache never evicts: it grows by one entry per distinct key for the
    lifetime of its owner. Keys are low-cardinality in practice; `len()` is
    exposed so owners can watch the size on long runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from symreport.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Hashable

    from symreport.config.logging import SymreportLogger

logger: SymreportLogger = get_logger(__name__)

# "calling external" warnings embed the actual call arguments after this prefix
CALLING_EXTERNAL_PREFIX: Final[str] = "calling external"


def normalize_once_message(message: str) -> str:
    """Return the message part of a dedup key.

    Messages starting with ``calling external`` collapse to exactly that
    prefix, so calls to external functions with different arguments count as
    the same warning. Any other message is used verbatim.
    """
    if message.startswith(CALLING_EXTERNAL_PREFIX):
        return CALLING_EXTERNAL_PREFIX
    return message


class WarningOnceCache:
    """Insert-only set of warning keys seen so far.

    Not thread-safe on its own; `DiagnosticReporter` serializes access.
    """

    def __init__(self) -> None:
        self._keys: set[tuple[Hashable, str]] = set()

    def should_emit(self, origin: Hashable, message: str) -> bool:
        """Record a candidate warning and tell whether it is new.

        Call this at most once per candidate warning.

        Args:
            origin: Opaque token identifying the call site.
            message: The raw warning message.

        Returns:
            True the first time the ``(origin, normalized message)`` key is seen,
            False for every later occurrence.
        """
        key: tuple[Hashable, str] = (origin, normalize_once_message(message))
        if key in self._keys:
            logger.trace("Suppressing repeated warning from %r: %r", origin, message)
            return False
        self._keys.add(key)
        return True

    def __contains__(self, key: object) -> bool:
        """Return True if ``(origin, message)`` has already been emitted."""
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        origin, message = key
        return (origin, normalize_once_message(str(message))) in self._keys

    def __len__(self) -> int:
        """Return the number of distinct keys recorded."""
        return len(self._keys)
