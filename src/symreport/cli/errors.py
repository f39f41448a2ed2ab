# topmark:header:start
#
#   project      : SymReport
#   file         : errors.py
#   file_relpath : src/symreport/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for SymReport CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Click prints the message to stderr and exits with
    the class's ``exit_code``.
"""

from __future__ import annotations

import click

from symreport.cli.exit_codes import ExitCode


class SymreportError(click.ClickException):
    """Base class for all SymReport CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (no color)."""
        return str(getattr(self, "message", ""))


class SymreportConfigError(SymreportError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class SymreportFileNotFoundError(SymreportError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SymreportIOError(SymreportError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR
