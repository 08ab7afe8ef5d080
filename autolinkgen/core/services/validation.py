"""
Descriptor validation — catch descriptors the generators cannot render cleanly.

Two problems are reported:

    partial_cxx_module     A C++ TurboModule needs its header name (for
                           registration), CMake module name (for linking)
                           and CMakeLists path (for building). With only
                           some of them the generators emit a build entry
                           without a registration or the other way round.
    unnamed_build_target   A CMakeLists path is set but ``libraryName`` is
                           not, so the ``add_subdirectory`` build directory
                           has no unique name.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from autolinkgen.core.models.autolinking import CXX_MODULE_FIELDS, AndroidDependency

logger = logging.getLogger(__name__)

PARTIAL_CXX_MODULE = "partial_cxx_module"
UNNAMED_BUILD_TARGET = "unnamed_build_target"

# JSON key for each field, used in messages
_JSON_KEYS = {
    "cxx_module_header_name": "cxxModuleHeaderName",
    "cxx_module_cmake_lists_module_name": "cxxModuleCMakeListsModuleName",
    "cxx_module_cmake_lists_path": "cxxModuleCMakeListsPath",
    "cmake_lists_path": "cmakeListsPath",
    "library_name": "libraryName",
}


@dataclass
class ValidationIssue:
    """One problem found on one descriptor."""

    source_dir: str
    library_name: str | None
    problem: str = PARTIAL_CXX_MODULE
    present: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        label = self.library_name or self.source_dir
        if self.problem == UNNAMED_BUILD_TARGET:
            return (
                f"{label}: {', '.join(self.present)} set without libraryName "
                "(build directory has no target name)"
            )
        return (
            f"{label}: C++ module is partially configured "
            f"(set: {', '.join(self.present)}; missing: {', '.join(self.missing)})"
        )

    def to_dict(self) -> dict:
        return {
            "source_dir": self.source_dir,
            "library_name": self.library_name,
            "problem": self.problem,
            "present": self.present,
            "missing": self.missing,
            "message": self.message,
        }


class DescriptorValidationError(Exception):
    """Raised when one or more descriptors fail validation."""

    def __init__(self, issues: list[ValidationIssue]):
        self.issues = issues
        lines = "\n".join(f"  - {issue.message}" for issue in issues)
        super().__init__(f"{len(issues)} invalid dependency descriptor(s):\n{lines}")


def validate_cxx_modules(packages: Iterable[AndroidDependency]) -> list[ValidationIssue]:
    """Report every descriptor whose C++ module fields are set only in part.

    Descriptors with all three fields, or none, are fine.
    """
    issues = []
    for dep in packages:
        present = dep.cxx_module_fields_set()
        if not present or len(present) == len(CXX_MODULE_FIELDS):
            continue
        issues.append(
            ValidationIssue(
                source_dir=dep.source_dir,
                library_name=dep.library_name,
                present=[_JSON_KEYS[name] for name in present],
                missing=[_JSON_KEYS[name] for name in CXX_MODULE_FIELDS if name not in present],
            )
        )
    return issues


def validate_build_targets(packages: Iterable[AndroidDependency]) -> list[ValidationIssue]:
    """Report descriptors with a CMakeLists path but no ``libraryName``."""
    issues = []
    for dep in packages:
        if dep.library_name is not None:
            continue
        present = [
            _JSON_KEYS[name]
            for name in ("cmake_lists_path", "cxx_module_cmake_lists_path")
            if getattr(dep, name) is not None
        ]
        if present:
            issues.append(
                ValidationIssue(
                    source_dir=dep.source_dir,
                    library_name=None,
                    problem=UNNAMED_BUILD_TARGET,
                    present=present,
                    missing=[_JSON_KEYS["library_name"]],
                )
            )
    return issues


def validate_descriptors(packages: Iterable[AndroidDependency]) -> list[ValidationIssue]:
    """Run every check, in descriptor order per check."""
    packages = list(packages)
    return validate_cxx_modules(packages) + validate_build_targets(packages)


def ensure_valid(packages: Iterable[AndroidDependency]) -> None:
    """Raise DescriptorValidationError if any descriptor is inconsistent."""
    issues = validate_descriptors(packages)
    if issues:
        for issue in issues:
            logger.debug("Validation issue: %s", issue.message)
        raise DescriptorValidationError(issues)
