# topmark:header:start
#
#   project      : SymReport
#   file         : __init__.py
#   file_relpath : src/symreport/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for SymReport (Click-based)."""

from __future__ import annotations
