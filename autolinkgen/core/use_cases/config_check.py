"""
Config check use case — validate an autolinking config and report issues.

Nothing is written; this is the dry-run counterpart of ``generate``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from autolinkgen.core.config.loader import ConfigError, load_autolinking_config
from autolinkgen.core.models.autolinking import AndroidDependency, AutolinkingConfig
from autolinkgen.core.services.platform_filter import filter_android_packages
from autolinkgen.core.services.validation import validate_descriptors


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: AutolinkingConfig | None = None
    config_path: Path | None = None
    packages: list[AndroidDependency] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        deps = (self.config.dependencies or {}) if self.config else {}
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "react_native_version": self.config.react_native_version if self.config else None,
            "dependency_count": len(deps),
            "android_package_count": len(self.packages),
            "module_provider_count": sum(1 for p in self.packages if p.has_module_provider),
            "cxx_module_count": sum(1 for p in self.packages if p.has_cxx_module),
            "component_descriptor_count": sum(
                len(p.component_descriptors) for p in self.packages if p.has_component_descriptors
            ),
        }


def check_config(config_path: Path) -> ConfigCheckResult:
    """Validate an autolinking config and report issues.

    Args:
        config_path: Path to the JSON config.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult(config_path=config_path)

    try:
        result.config = load_autolinking_config(config_path)
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    result.packages = filter_android_packages(result.config)

    for issue in validate_descriptors(result.packages):
        result.errors.append(issue.message)

    if not result.config.dependencies:
        result.warnings.append("No dependencies declared.")
    elif not result.packages:
        result.warnings.append("No dependency has an android platform section.")

    for pkg in result.packages:
        if pkg.component_descriptors and pkg.library_name is None:
            result.warnings.append(
                f"{pkg.source_dir}: componentDescriptors ignored without libraryName."
            )

    result.valid = len(result.errors) == 0
    return result
