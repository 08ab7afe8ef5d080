"""
CMake generator — produce Android-autolinking.cmake.

The file adds each dependency's native build as a subdirectory and
collects the resulting targets in ``AUTOLINKED_LIBRARIES`` for the app
to link against.
"""

from __future__ import annotations

import posixpath
from collections.abc import Iterable

from autolinkgen.core.models.autolinking import AndroidDependency

CODEGEN_LIB_PREFIX = "react_codegen_"

CMAKE_TEMPLATE = """\
# This code was generated by [React Native](https://www.npmjs.com/package/@react-native/gradle-plugin)
cmake_minimum_required(VERSION 3.13)
set(CMAKE_VERBOSE_MAKEFILE on)

{{ libraryIncludes }}

set(AUTOLINKED_LIBRARIES
  {{ libraryModules }}
)"""


def cmake_lists_dir(cmake_lists_path: str) -> str:
    """Directory holding a CMakeLists.txt, with a trailing ``/``.

    >>> cmake_lists_dir("./a/directory/CMakeLists.txt")
    './a/directory/'
    """
    parent = posixpath.dirname(cmake_lists_path.replace("\\", "/"))
    return (parent or ".") + "/"


def _subdirectories(dep: AndroidDependency) -> str:
    # Without libraryName the primary build has no target name and is
    # skipped; the cxx build falls back to its CMake module name.
    lines = ""
    if dep.cmake_lists_path is not None and dep.library_name is not None:
        lines += (
            f"add_subdirectory({cmake_lists_dir(dep.cmake_lists_path)} "
            f"{dep.library_name}_autolinked_build)"
        )
    cxx_target = dep.library_name or dep.cxx_module_cmake_lists_module_name
    if dep.cxx_module_cmake_lists_path is not None and cxx_target is not None:
        lines += (
            f"\nadd_subdirectory({cmake_lists_dir(dep.cxx_module_cmake_lists_path)} "
            f"{cxx_target}_cxxmodule_autolinked_build)"
        )
    return lines


def _libraries(dep: AndroidDependency) -> str:
    # The cxx module name follows a bare newline, so it lands unindented.
    names = ""
    if dep.library_name is not None:
        names += f"{CODEGEN_LIB_PREFIX}{dep.library_name}"
    if dep.cxx_module_cmake_lists_module_name is not None:
        names += f"\n{dep.cxx_module_cmake_lists_module_name}"
    return names


def generate_cmake_file_content(packages: Iterable[AndroidDependency]) -> str:
    """Render Android-autolinking.cmake for the given descriptors.

    Args:
        packages: Android descriptors, in dependency order.

    Returns:
        The file text (no trailing newline).
    """
    packages = list(packages)
    library_includes = "\n".join(_subdirectories(dep) for dep in packages)
    library_modules = "\n  ".join(_libraries(dep) for dep in packages)

    return CMAKE_TEMPLATE.replace("{{ libraryIncludes }}", library_includes).replace(
        "{{ libraryModules }}", library_modules
    )
