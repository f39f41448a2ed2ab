# topmark:header:start
#
#   project      : SymReport
#   file         : constants.py
#   file_relpath : src/symreport/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SymReport Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

SYMREPORT_VERSION: str = get_version("symreport")

# Generator identity rendered in report metadata unless configured otherwise
DEFAULT_GENERATOR_NAME: str = "klee"
DEFAULT_GENERATOR_VERSION: str = "unknown"

CONFIG_FILE_NAME: str = "symreport.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_TABLE: str = "tool.symreport"

# Prefix the analysis tool puts in front of every diagnostic line it prints
TOOL_LINE_PREFIX: str = "KLEE: "
