# topmark:header:start
#
#   project      : SymReport
#   file         : loaders.py
#   file_relpath : src/symreport/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load report configuration from TOML sources.

Two file shapes are supported:
- ``symreport.toml``: keys live at the top level of the document.
- ``pyproject.toml``: keys live under the ``[tool.symreport]`` table.

Parsing is done with `tomlkit` and unwrapped into plain `dict` structures
before validation by
[`ReportConfig.from_mapping`][symreport.config.model.ReportConfig.from_mapping].
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from symreport.config.logging import get_logger
from symreport.config.model import ConfigError, ReportConfig
from symreport.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_TABLE

if TYPE_CHECKING:
    from pathlib import Path

    from symreport.config.logging import SymreportLogger

logger: SymreportLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document.

    Returns:
        The parsed TOML content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration file {path}: {exc}") from exc
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    data: Any = doc.unwrap()
    return cast("TomlTable", data) if isinstance(data, dict) else {}


def extract_report_table(path: Path, data: TomlTable) -> TomlTable:
    """Return the table holding report settings for a parsed TOML document.

    For ``pyproject.toml`` this is ``[tool.symreport]`` (empty when absent);
    for any other file name it is the document itself.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    table: Any = data
    for part in PYPROJECT_TOOL_TABLE.split("."):
        table = table.get(part, {}) if isinstance(table, dict) else {}
    if not isinstance(table, dict):
        raise ConfigError(f"[{PYPROJECT_TOOL_TABLE}] in {path} must be a table")
    return cast("TomlTable", table)


def load_config_file(path: Path) -> ReportConfig:
    """Load and validate a report configuration file.

    Args:
        path: A ``symreport.toml`` or ``pyproject.toml`` file.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: On I/O, TOML syntax or validation errors.
    """
    table: TomlTable = extract_report_table(path, load_toml_dict(path))
    logger.debug("Loaded %d configuration key(s) from %s", len(table), path)
    return ReportConfig.from_mapping(table)


def discover_config_file(directory: Path) -> Path | None:
    """Find a configuration file in ``directory``.

    ``symreport.toml`` wins over ``pyproject.toml``; a ``pyproject.toml``
    only counts when it has a ``[tool.symreport]`` table.

    Returns:
        The configuration file path, or ``None`` if none applies.
    """
    candidate: Path = directory / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    pyproject: Path = directory / PYPROJECT_FILE_NAME
    if pyproject.is_file():
        try:
            if extract_report_table(pyproject, load_toml_dict(pyproject)):
                return pyproject
        except ConfigError as exc:
            logger.warning("Skipping %s: %s", pyproject, exc)
    return None


def resolve_config(path: Path | None, directory: Path) -> ReportConfig:
    """Resolve the effective configuration.

    Args:
        path: Explicit configuration file, or ``None`` to discover one.
        directory: Directory searched when ``path`` is ``None``.

    Returns:
        The loaded configuration, or defaults when no file applies.
    """
    source: Path | None = path or discover_config_file(directory)
    if source is None:
        logger.debug("No configuration file found in %s; using defaults", directory)
        return ReportConfig()
    return load_config_file(source)
