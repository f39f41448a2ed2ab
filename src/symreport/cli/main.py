# topmark:header:start
#
#   project      : SymReport
#   file         : main.py
#   file_relpath : src/symreport/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the SymReport CLI.

Key ideas:
- Internal logging is configured once at group level from ``SYMREPORT_LOG_LEVEL``.
- Subcommands are plain Click commands registered on the group.
"""

from __future__ import annotations

import click

from symreport.cli.commands.classify import classify_command
from symreport.cli.commands.render import render_command
from symreport.cli.commands.version import version_command
from symreport.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="SymReport CLI: classify analysis diagnostics and render Firehose-style reports.",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Entry point for the SymReport CLI."""
    ctx.ensure_object(dict)
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)


cli.add_command(version_command)

cli.add_command(classify_command)

cli.add_command(render_command)

if __name__ == "__main__":
    cli()
