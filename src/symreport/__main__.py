# topmark:header:start
#
#   project      : SymReport
#   file         : __main__.py
#   file_relpath : src/symreport/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running SymReport via ``python -m symreport``.

It delegates directly to :func:`symreport.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how SymReport is launched.

Examples:
    Render a report from a captured diagnostics log::

        python -m symreport render warnings.txt -o report.xml
"""

from __future__ import annotations

from symreport.cli.main import cli

if __name__ == "__main__":
    cli()
