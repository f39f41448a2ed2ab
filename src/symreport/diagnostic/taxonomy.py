# topmark:header:start
#
#   project      : SymReport
#   file         : taxonomy.py
#   file_relpath : src/symreport/diagnostic/taxonomy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Classify diagnostic messages into stable taxonomy identifiers.

The classifier maps a fully formatted diagnostic message to a short,
hyphenated identifier (e.g. ``calling-external``) plus a severity class. The
identifier is stable across runs, so aggregation tooling can deduplicate and
triage diagnostics without looking at their free-text arguments.

Algorithm:
    1. Scan `PREFIX_RULES` top to bottom; the first prefix the message starts
       with wins. Order is priority: keep more specific prefixes first.
    2. Otherwise scan `SUBSTRING_RULES` for a fragment anywhere in the message.
    3. Otherwise the identifier is `OTHER_ID` (an informational diagnostic).

The module holds no mutable state; `classify` is total and re-entrant.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from symreport.report.results import FailureKind


class Severity(Enum):
    """Severity class implied by the rule that matched a message."""

    INFO = "info"
    FAILURE = "failure"


@dataclass(frozen=True, slots=True)
class TaxonomyRule:
    """One classification rule.

    Attributes:
        fragment: Literal text to look for (prefix or substring, depending on the table).
        taxonomy_id: Identifier assigned on match.
        failure_kind: The failure kind for failure rules, ``None`` for info rules.
    """

    fragment: str
    taxonomy_id: str
    failure_kind: FailureKind | None = None


def _failure_rule(fragment: str, kind: FailureKind) -> TaxonomyRule:
    return TaxonomyRule(fragment=fragment, taxonomy_id=kind.key, failure_kind=kind)


PREFIX_RULES: Final[tuple[TaxonomyRule, ...]] = (
    # infos
    TaxonomyRule("undefined reference to function", "undefined-function-reference"),
    TaxonomyRule("undefined reference to variable", "undefined-variable-reference"),
    TaxonomyRule("calling external", "calling-external"),
    TaxonomyRule("calling __user_main with extra arguments", "calling-user-main"),
    TaxonomyRule("Large alloc", "large-alloc"),
    TaxonomyRule("execve", "execve"),
    TaxonomyRule("executable has module level assembly", "module-level-assembly"),
    # failures
    _failure_rule("unable to load symbol", FailureKind.SYMBOL_LOADING),
    _failure_rule("failed external call", FailureKind.EXTERNAL_CALL),
)

SUBSTRING_RULES: Final[tuple[TaxonomyRule, ...]] = (
    TaxonomyRule("has inline asm", "inline-asm"),
    TaxonomyRule("silently ignoring", "silently-ignoring"),
    # Not a sanctioned failure kind, so it is reported as an info
    TaxonomyRule("when main() has less than two arguments", "posix-runtime"),
)

OTHER_ID: Final[str] = "other"


@dataclass(frozen=True, slots=True)
class Classification:
    """Result of classifying one diagnostic message.

    Attributes:
        taxonomy_id: Stable short identifier of the diagnostic's category.
        failure_kind: The failure kind when the message is a failure, else ``None``.
    """

    taxonomy_id: str
    failure_kind: FailureKind | None = None

    @property
    def severity(self) -> Severity:
        """Return the severity class (failure iff a failure kind is set)."""
        return Severity.INFO if self.failure_kind is None else Severity.FAILURE

    @property
    def is_failure(self) -> bool:
        """Return True if the message classifies as a failure."""
        return self.failure_kind is not None


UNCLASSIFIED: Final[Classification] = Classification(taxonomy_id=OTHER_ID)


def _to_classification(rule: TaxonomyRule) -> Classification:
    return Classification(taxonomy_id=rule.taxonomy_id, failure_kind=rule.failure_kind)


def classify(message: str) -> Classification:
    """Classify a fully formatted diagnostic message.

    Args:
        message: The diagnostic text after argument substitution.

    Returns:
        The matching classification; `UNCLASSIFIED` (``other``, info) when no rule matches.
    """
    for rule in PREFIX_RULES:
        if message.startswith(rule.fragment):
            return _to_classification(rule)
    for rule in SUBSTRING_RULES:
        if rule.fragment in message:
            return _to_classification(rule)
    return UNCLASSIFIED


def taxonomy_id(message: str) -> str:
    """Return only the taxonomy identifier of ``message``."""
    return classify(message).taxonomy_id
