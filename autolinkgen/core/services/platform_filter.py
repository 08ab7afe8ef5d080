"""Platform filter — pick the Android descriptors out of an autolinking config."""

from __future__ import annotations

import logging

from autolinkgen.core.models.autolinking import AndroidDependency, AutolinkingConfig

logger = logging.getLogger(__name__)


def filter_android_packages(config: AutolinkingConfig | None) -> list[AndroidDependency]:
    """Return the Android descriptor of every dependency that has one.

    Order follows the config's ``dependencies`` mapping. Dependencies
    without an Android section are skipped; ``None`` or an empty
    mapping gives an empty list.
    """
    if config is None or not config.dependencies:
        return []

    packages: list[AndroidDependency] = []
    for name, dep in config.dependencies.items():
        android = dep.platforms.android if dep.platforms else None
        if android is None:
            logger.debug("Skipping %s: no android platform", name)
            continue
        packages.append(android)

    logger.debug("Filtered %d android packages", len(packages))
    return packages
