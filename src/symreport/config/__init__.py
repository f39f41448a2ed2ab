# topmark:header:start
#
#   project      : SymReport
#   file         : __init__.py
#   file_relpath : src/symreport/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Report configuration and logging setup.

Design:
    - `ReportConfig` is an immutable snapshot; overrides return new instances.
    - TOML sources are parsed with `tomlkit` in
      [`symreport.config.loaders`][symreport.config.loaders].
    - Internal logging lives in
      [`symreport.config.logging`][symreport.config.logging].
"""

from __future__ import annotations

from symreport.config.loaders import (
    discover_config_file,
    load_config_file,
    resolve_config,
)
from symreport.config.model import (
    ConfigError,
    ReportConfig,
    ResultsPolicy,
    parse_results_policy,
)

__all__ = [
    "ConfigError",
    "ReportConfig",
    "ResultsPolicy",
    "discover_config_file",
    "load_config_file",
    "parse_results_policy",
    "resolve_config",
]
