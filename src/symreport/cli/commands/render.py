# topmark:header:start
#
#   project      : SymReport
#   file         : render.py
#   file_relpath : src/symreport/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SymReport `render` command.

Reads captured diagnostic lines (``KLEE: WARNING: ...``), feeds them through a
`DiagnosticReporter` and writes the resulting report.

By default the report is streamed: every reportable line becomes a
``<failure>`` or ``<info>`` element as soon as it is read. With ``--tree`` the
in-memory report tree is rendered once at the end instead; what it contains
depends on ``--results-policy``.
"""

from __future__ import annotations

import sys
from contextlib import ExitStack
from pathlib import Path
from typing import TYPE_CHECKING

import click

from symreport.cli.errors import (
    SymreportConfigError,
    SymreportFileNotFoundError,
    SymreportIOError,
)
from symreport.config.loaders import resolve_config
from symreport.config.logging import get_logger
from symreport.config.model import ConfigError, ResultsPolicy, parse_results_policy
from symreport.diagnostic.model import parse_event_line
from symreport.diagnostic.reporter import DiagnosticReporter

if TYPE_CHECKING:
    from typing import TextIO

    from symreport.config.logging import SymreportLogger
    from symreport.config.model import ReportConfig

logger: SymreportLogger = get_logger(__name__)

STDIN_MARKER: str = "-"


def _read_lines(input_path: Path) -> list[str]:
    if str(input_path) == STDIN_MARKER:
        return sys.stdin.read().splitlines()
    if not input_path.is_file():
        raise SymreportFileNotFoundError(f"Input file not found: {input_path}")
    try:
        return input_path.read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        raise SymreportIOError(f"Cannot read {input_path}: {exc}") from exc


def _effective_config(
    config_path: Path | None,
    *,
    results_policy: str | None,
    generator_name: str | None,
    generator_version: str | None,
) -> ReportConfig:
    try:
        config: ReportConfig = resolve_config(config_path, Path.cwd())
        policy: ResultsPolicy | None = (
            parse_results_policy(results_policy) if results_policy is not None else None
        )
    except ConfigError as exc:
        raise SymreportConfigError(str(exc)) from exc
    return config.with_overrides(
        results_policy=policy,
        generator_name=generator_name,
        generator_version=generator_version,
    )


@click.command(
    name="render",
    help="Render a structured report from captured diagnostic lines.",
)
@click.argument(
    "input_path",
    type=click.Path(dir_okay=False, allow_dash=True, path_type=Path),
    default=STDIN_MARKER,
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write the report to this file instead of STDOUT.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file (symreport.toml or pyproject.toml).",
)
@click.option(
    "--results-policy",
    type=click.Choice([p.key for p in ResultsPolicy]),
    default=None,
    help="Which results join the report tree (only relevant with --tree).",
)
@click.option("--generator-name", default=None, help="Override the generator name.")
@click.option("--generator-version", default=None, help="Override the generator version.")
@click.option(
    "--tree",
    is_flag=True,
    default=False,
    help="Render the accumulated report tree at the end instead of streaming.",
)
def render_command(
    *,
    input_path: Path,
    output_path: Path | None,
    config_path: Path | None,
    results_policy: str | None,
    generator_name: str | None,
    generator_version: str | None,
    tree: bool,
) -> None:
    """Render a report from captured diagnostic lines.

    Args:
        input_path (Path): Diagnostics file, or ``-`` for STDIN.
        output_path (Path | None): Report destination; STDOUT when ``None``.
        config_path (Path | None): Explicit configuration file.
        results_policy (str | None): Results policy override.
        generator_name (str | None): Generator name override.
        generator_version (str | None): Generator version override.
        tree (bool): Render the report tree once instead of streaming.
    """
    config: ReportConfig = _effective_config(
        config_path,
        results_policy=results_policy,
        generator_name=generator_name,
        generator_version=generator_version,
    )
    lines: list[str] = _read_lines(input_path)
    if not config.enabled:
        logger.info("Structured report output is disabled by configuration")
        return

    origin: str = str(input_path)
    with ExitStack() as stack:
        sink: TextIO = sys.stdout
        if output_path is not None:
            try:
                sink = stack.enter_context(output_path.open("w", encoding="utf-8"))
            except OSError as exc:
                raise SymreportIOError(f"Cannot write {output_path}: {exc}") from exc

        reporter = DiagnosticReporter(config, sink=None if tree else sink)
        with reporter:
            for line in lines:
                reporter.record(parse_event_line(line, origin=origin))
        if tree:
            sink.write(reporter.serialize() + "\n")

    logger.info("Rendered %d input line(s) from %s", len(lines), origin)
