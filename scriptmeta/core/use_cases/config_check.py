"""
Config check use case — validate scriptmeta.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from scriptmeta.core.config.loader import ConfigError, find_config_file, load_settings
from scriptmeta.core.models.settings import Settings


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    settings: Settings | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "settings": self.settings.model_dump() if self.settings else None,
        }


def check_settings(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate tool configuration and report issues.

    Args:
        config_path: Optional explicit path to scriptmeta.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()
    result.config_path = config_path

    try:
        settings = load_settings(config_path)
        result.settings = settings
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    if config_path is None:
        result.warnings.append("No scriptmeta.yml found. Using defaults.")

    if not settings.scan.include:
        result.warnings.append("scan.include is empty. Directory checks will find nothing.")

    overlap = set(settings.scan.include) & set(settings.scan.exclude)
    if overlap:
        result.errors.append(
            f"Patterns both included and excluded: {', '.join(sorted(overlap))}"
        )

    result.valid = len(result.errors) == 0
    return result
