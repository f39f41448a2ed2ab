# topmark:header:start
#
#   project      : SymReport
#   file         : __init__.py
#   file_relpath : src/symreport/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SymReport CLI subcommands."""

from __future__ import annotations
