# topmark:header:start
#
#   project      : SymReport
#   file         : classify.py
#   file_relpath : src/symreport/cli/commands/classify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SymReport `classify` command.

Prints the taxonomy identifier and severity of each given diagnostic message,
one line per message (tab-separated), or a JSON array with ``--format json``.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import TYPE_CHECKING

import click

from symreport.diagnostic.taxonomy import classify

if TYPE_CHECKING:
    from symreport.diagnostic.taxonomy import Classification


class OutputFormat(str, Enum):
    """Output format for the `classify` command.

    Members:
      TEXT: ``<taxonomy-id>\\t<severity>`` per message.
      JSON: A single JSON array of objects (machine-readable).
    """

    TEXT = "text"
    JSON = "json"


@click.command(
    name="classify",
    help="Classify diagnostic messages into taxonomy identifiers.",
)
@click.argument("messages", nargs=-1, required=True)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.TEXT.value,
    show_default=True,
    help="Output format.",
)
def classify_command(*, messages: tuple[str, ...], output_format: str) -> None:
    """Classify each message and print the result.

    Args:
        messages (tuple[str, ...]): Fully formatted diagnostic messages.
        output_format (str): One of the `OutputFormat` values.
    """
    results: list[tuple[str, Classification]] = [(m, classify(m)) for m in messages]

    if OutputFormat(output_format) is OutputFormat.JSON:
        payload = [
            {
                "message": message,
                "taxonomy_id": c.taxonomy_id,
                "severity": c.severity.value,
            }
            for message, c in results
        ]
        click.echo(json.dumps(payload, indent=2))
        return

    for _, c in results:
        click.echo(f"{c.taxonomy_id}\t{c.severity.value}")
