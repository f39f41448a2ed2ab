# topmark:header:start
#
#   project      : SymReport
#   file         : model.py
#   file_relpath : src/symreport/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Report configuration model.

`ReportConfig` is an immutable snapshot of everything a `DiagnosticReporter`
needs to know about the report it produces. It is built from defaults, from a
TOML table (see [`symreport.config.loaders`][symreport.config.loaders]) and from
CLI overrides, in that order of precedence (last wins).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from symreport.config.logging import get_logger
from symreport.constants import DEFAULT_GENERATOR_NAME, DEFAULT_GENERATOR_VERSION
from symreport.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from collections.abc import Mapping

    from symreport.config.logging import SymreportLogger

logger: SymreportLogger = get_logger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration source is malformed or holds invalid values."""


class ResultsPolicy(KeyedStrEnum):
    """Which result variants are collected in the in-memory `Results` aggregate.

    Failures and infos are always streamed individually as they are classified;
    this policy only decides whether they *also* land in the aggregate.
    """

    ISSUES_ONLY = ("issues", "Collect issues only", ("issues-only", "issue"))
    ALL = ("all", "Collect issues, failures and infos", ("everything",))


class ConfigKey:
    """TOML keys understood in a ``[tool.symreport]`` / ``symreport.toml`` table."""

    ENABLED = "enabled"
    GENERATOR_NAME = "generator-name"
    GENERATOR_VERSION = "generator-version"
    RESULTS_POLICY = "results-policy"

    ALL: tuple[str, ...] = (ENABLED, GENERATOR_NAME, GENERATOR_VERSION, RESULTS_POLICY)


@dataclass(frozen=True, slots=True)
class ReportConfig:
    """Immutable report configuration.

    Attributes:
        enabled: Whether structured report output is produced at all.
        generator_name: Tool name rendered in ``<generator name="..">``.
        generator_version: Tool version rendered in ``<generator version="..">``.
        results_policy: Which result variants join the `Results` aggregate.
    """

    enabled: bool = True
    generator_name: str = DEFAULT_GENERATOR_NAME
    generator_version: str = DEFAULT_GENERATOR_VERSION
    results_policy: ResultsPolicy = ResultsPolicy.ISSUES_ONLY

    @classmethod
    def from_mapping(cls, table: Mapping[str, Any]) -> ReportConfig:
        """Build a configuration from a plain TOML-like table.

        Unknown keys are ignored with a warning; missing keys keep their defaults.

        Args:
            table: Mapping of config keys (see `ConfigKey`) to values.

        Returns:
            The validated configuration.

        Raises:
            ConfigError: If a value has the wrong type or an unknown policy.
        """
        for key in table:
            if key not in ConfigKey.ALL:
                logger.warning("Ignoring unknown configuration key: %s", key)

        defaults = cls()
        enabled = table.get(ConfigKey.ENABLED, defaults.enabled)
        if not isinstance(enabled, bool):
            raise ConfigError(f"'{ConfigKey.ENABLED}' must be a boolean, got {enabled!r}")

        name = _require_str(table, ConfigKey.GENERATOR_NAME, defaults.generator_name)
        version = _require_str(table, ConfigKey.GENERATOR_VERSION, defaults.generator_version)

        policy: ResultsPolicy = defaults.results_policy
        raw_policy = table.get(ConfigKey.RESULTS_POLICY)
        if raw_policy is not None:
            policy = parse_results_policy(str(raw_policy))

        return cls(
            enabled=enabled,
            generator_name=name,
            generator_version=version,
            results_policy=policy,
        )

    def with_overrides(
        self,
        *,
        enabled: bool | None = None,
        generator_name: str | None = None,
        generator_version: str | None = None,
        results_policy: ResultsPolicy | None = None,
    ) -> ReportConfig:
        """Return a copy with the given non-``None`` values replaced."""
        changes: dict[str, Any] = {
            "enabled": enabled,
            "generator_name": generator_name,
            "generator_version": generator_version,
            "results_policy": results_policy,
        }
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def parse_results_policy(raw: str) -> ResultsPolicy:
    """Parse a results policy token.

    Raises:
        ConfigError: If the token names no policy.
    """
    policy: ResultsPolicy | None = ResultsPolicy.parse(raw)
    if policy is None:
        choices = ", ".join(p.key for p in ResultsPolicy)
        raise ConfigError(f"Unknown results policy {raw!r} (expected one of: {choices})")
    return policy


def _require_str(table: Mapping[str, Any], key: str, default: str) -> str:
    value = table.get(key, default)
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a string, got {value!r}")
    return value
