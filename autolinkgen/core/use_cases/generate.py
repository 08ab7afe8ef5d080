"""
Generate use case — config file in, autolinking artifacts out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from autolinkgen.core.config.loader import ConfigError, load_autolinking_config
from autolinkgen.core.models.settings import GeneratorSettings
from autolinkgen.core.services.autolinking_generate import generate_files, write_generated_file
from autolinkgen.core.services.platform_filter import filter_android_packages
from autolinkgen.core.services.validation import ValidationIssue, validate_descriptors

logger = logging.getLogger(__name__)


@dataclass
class GenerateResult:
    """Outcome of one generation run."""

    config_path: Path | None = None
    output_dir: Path | None = None
    package_count: int = 0
    files: list[dict] = field(default_factory=list)
    issues: list[ValidationIssue] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        result: dict = {
            "ok": self.ok,
            "config_path": str(self.config_path) if self.config_path else None,
            "output_dir": str(self.output_dir) if self.output_dir else None,
            "package_count": self.package_count,
            "files": self.files,
            "issues": [issue.to_dict() for issue in self.issues],
        }
        if self.error:
            result["error"] = self.error
        return result


def run_generate(
    config_path: Path | None = None,
    output_dir: Path | None = None,
    *,
    strict: bool | None = None,
    settings: GeneratorSettings | None = None,
) -> GenerateResult:
    """Load the config, validate the descriptors, and write all artifacts.

    Args:
        config_path: Autolinking config; defaults to ``settings.input``.
        output_dir: Destination; defaults to ``settings.output_dir``.
        strict: Abort on partially configured C++ modules; defaults to
            ``settings.strict``.
        settings: Generator settings (defaults if None).

    Returns:
        GenerateResult. ``error`` is set when nothing was written.
    """
    settings = settings or GeneratorSettings()
    config_path = config_path or Path(settings.input)
    output_dir = output_dir or Path(settings.output_dir)
    if strict is None:
        strict = settings.strict

    result = GenerateResult(config_path=config_path, output_dir=output_dir)

    try:
        config = load_autolinking_config(config_path)
    except ConfigError as e:
        result.error = str(e)
        return result

    packages = filter_android_packages(config)
    result.package_count = len(packages)

    result.issues = validate_descriptors(packages)
    if result.issues:
        if strict:
            result.error = (
                f"{len(result.issues)} dependency descriptor(s) are invalid "
                "(rerun with --no-strict to generate anyway)"
            )
            return result
        for issue in result.issues:
            logger.warning("%s", issue.message)

    for generated in generate_files(packages, settings):
        outcome = write_generated_file(output_dir, generated)
        result.files.append(outcome)
        if "error" in outcome:
            result.error = outcome["error"]
            return result

    logger.info(
        "Generated autolinking files for %d packages in %s", result.package_count, output_dir
    )
    return result
