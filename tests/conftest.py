"""
Shared test fixtures and configuration.
"""

import json
import logging
from pathlib import Path

import pytest

from autolinkgen.core.models import AndroidDependency


@pytest.fixture
def a_package() -> AndroidDependency:
    """Dependency with a Java module provider and a CMake build."""
    return AndroidDependency(
        source_dir="./a/directory",
        package_import_path="import com.facebook.react.aPackage;",
        package_instance="new APackage()",
        build_types=[],
        library_name="aPackage",
        component_descriptors=[],
        cmake_lists_path="./a/directory/CMakeLists.txt",
    )


@pytest.fixture
def another_package() -> AndroidDependency:
    """Dependency with a module provider, a component and a C++ module."""
    return AndroidDependency(
        source_dir="./another/directory",
        package_import_path="import com.facebook.react.anotherPackage;",
        package_instance="new AnotherPackage()",
        build_types=[],
        library_name="anotherPackage",
        component_descriptors=["AnotherPackageComponentDescriptor"],
        cmake_lists_path="./another/directory/CMakeLists.txt",
        cxx_module_cmake_lists_path="./another/directory/cxx/CMakeLists.txt",
        cxx_module_header_name="AnotherCxxModule",
        cxx_module_cmake_lists_module_name="another_cxxModule",
    )


@pytest.fixture
def test_dependencies(a_package, another_package) -> list[AndroidDependency]:
    return [a_package, another_package]


@pytest.fixture
def autolinking_json() -> dict:
    """A config document as written by the dependency discovery step."""
    return {
        "reactNativeVersion": "1000.0.0",
        "dependencies": {
            "a-dependency": {
                "root": "./a",
                "name": "a-dependency",
                "platforms": {
                    "android": {
                        "sourceDir": "./a/directory",
                        "packageImportPath": "import com.facebook.react.aPackage;",
                        "packageInstance": "new APackage()",
                        "buildTypes": [],
                        "libraryName": "aPackage",
                        "componentDescriptors": [],
                        "cmakeListsPath": "./a/directory/CMakeLists.txt",
                    }
                },
            },
            "ios-only": {
                "root": "./ios-only",
                "name": "ios-only",
                "platforms": {"android": None},
            },
            "another-dependency": {
                "root": "./another",
                "name": "another-dependency",
                "platforms": {
                    "android": {
                        "sourceDir": "./another/directory",
                        "packageImportPath": "import com.facebook.react.anotherPackage;",
                        "packageInstance": "new AnotherPackage()",
                        "buildTypes": [],
                        "libraryName": "anotherPackage",
                        "componentDescriptors": ["AnotherPackageComponentDescriptor"],
                        "cmakeListsPath": "./another/directory/CMakeLists.txt",
                        "cxxModuleCMakeListsPath": "./another/directory/cxx/CMakeLists.txt",
                        "cxxModuleHeaderName": "AnotherCxxModule",
                        "cxxModuleCMakeListsModuleName": "another_cxxModule",
                    }
                },
            },
        },
        "project": {
            "android": {
                "sourceDir": "./android",
                "appName": "app",
                "packageName": "com.example.app",
            }
        },
    }


@pytest.fixture
def config_file(tmp_path: Path, autolinking_json: dict) -> Path:
    """Write the sample config to a temp file."""
    path = tmp_path / "autolinking.json"
    path.write_text(json.dumps(autolinking_json))
    return path


@pytest.fixture(autouse=True)
def _restore_package_logger():
    """Undo handlers and levels that setup_logging put on ``autolinkgen``."""
    logger = logging.getLogger("autolinkgen")
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    yield
    for h in logger.handlers:
        if h not in handlers:
            h.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
