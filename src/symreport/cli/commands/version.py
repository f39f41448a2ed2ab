# topmark:header:start
#
#   project      : SymReport
#   file         : version.py
#   file_relpath : src/symreport/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SymReport `version` command.

Prints the current SymReport version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from symreport.constants import SYMREPORT_VERSION


@click.command(
    name="version",
    help="Show the current version of SymReport.",
)
def version_command() -> None:
    """Show the current version of SymReport."""
    click.echo(SYMREPORT_VERSION)
