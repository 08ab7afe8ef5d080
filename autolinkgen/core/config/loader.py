"""
Configuration loader — reads the autolinking config and generator settings.

Two files are involved:

    autolinking.json   Dependency descriptors, produced by discovery.
    autolinkgen.yml    Optional generator settings (paths, strictness).

Both are parsed, validated against Pydantic schemas, and returned as
typed models. Any failure surfaces as ``ConfigError``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from autolinkgen.core.models.autolinking import AutolinkingConfig
from autolinkgen.core.models.settings import GeneratorSettings

logger = logging.getLogger(__name__)

# Default settings filename
SETTINGS_FILE = "autolinkgen.yml"


class ConfigError(Exception):
    """Raised when a config or settings file is missing or invalid."""


def _read_text(path: Path) -> str:
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e


def load_autolinking_config(path: Path) -> AutolinkingConfig:
    """Load and validate an autolinking config document.

    Args:
        path: Path to the JSON config.

    Returns:
        Validated AutolinkingConfig model.

    Raises:
        ConfigError: If the file is missing, not JSON, or invalid.
    """
    logger.debug("Loading autolinking config from %s", path)
    raw = _read_text(path)

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a JSON object in {path}, got {type(data).__name__}")

    try:
        config = AutolinkingConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid autolinking configuration: {e}") from e

    logger.info(
        "Loaded autolinking config (react-native %s) with %d dependencies",
        config.react_native_version or "?",
        len(config.dependencies or {}),
    )
    return config


def find_settings_file(start_dir: Path | None = None) -> Path | None:
    """Search for autolinkgen.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to autolinkgen.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / SETTINGS_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_settings(path: Path | None = None) -> GeneratorSettings:
    """Load generator settings.

    Args:
        path: Explicit path to autolinkgen.yml. If None, searches upward
            and falls back to defaults when nothing is found.

    Returns:
        Validated GeneratorSettings model.

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    if path is None:
        path = find_settings_file()
        if path is None:
            logger.debug("No %s found, using default settings", SETTINGS_FILE)
            return GeneratorSettings()

    raw = _read_text(path)

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        settings = GeneratorSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {path}: {e}") from e

    # Relative paths in the settings file are relative to the file itself
    base = path.parent
    settings = settings.model_copy(
        update={
            "input": str(base / settings.input),
            "output_dir": str(base / settings.output_dir),
        }
    )

    logger.debug("Loaded settings from %s", path)
    return settings
