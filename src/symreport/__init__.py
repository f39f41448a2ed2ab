# topmark:header:start
#
#   project      : SymReport
#   file         : __init__.py
#   file_relpath : src/symreport/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SymReport package.

SymReport turns the free-text diagnostics a symbolic-analysis tool prints while
it runs into a structured Firehose-style report: each diagnostic is classified
into a stable taxonomy identifier, repeated "warn once" warnings are
suppressed, and the results are assembled into an immutable report tree that
renders to nested markup.
"""

from __future__ import annotations
