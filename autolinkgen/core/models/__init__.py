"""
Domain models — Pydantic types for the generator.

All models are re-exported here for convenient access:

    from autolinkgen.core.models import AutolinkingConfig, AndroidDependency
"""

from autolinkgen.core.models.autolinking import (
    CXX_MODULE_FIELDS,
    AndroidDependency,
    AndroidProject,
    AutolinkingConfig,
    Dependency,
    DependencyPlatforms,
    ProjectConfig,
)
from autolinkgen.core.models.settings import GeneratorSettings
from autolinkgen.core.models.template import GeneratedFile

__all__ = [
    # autolinking.py
    "AndroidDependency",
    "AndroidProject",
    "AutolinkingConfig",
    "CXX_MODULE_FIELDS",
    "Dependency",
    "DependencyPlatforms",
    # template.py
    "GeneratedFile",
    # settings.py
    "GeneratorSettings",
    "ProjectConfig",
]
