"""
Tests for the CMake generator — Android-autolinking.cmake.

Pure unit tests: descriptor list in → exact file text out.
"""

from autolinkgen.core.models import AndroidDependency
from autolinkgen.core.services.generators.cmake import (
    cmake_lists_dir,
    generate_cmake_file_content,
)

_HEADER = (
    "# This code was generated by [React Native](https://www.npmjs.com/package/@react-native/gradle-plugin)\n"
    "cmake_minimum_required(VERSION 3.13)\n"
    "set(CMAKE_VERBOSE_MAKEFILE on)\n"
)


class TestCmakeListsDir:
    def test_relative(self):
        assert cmake_lists_dir("./a/directory/CMakeLists.txt") == "./a/directory/"

    def test_absolute(self):
        assert cmake_lists_dir("/abs/lib/android/CMakeLists.txt") == "/abs/lib/android/"

    def test_windows_separators(self):
        assert cmake_lists_dir("C:\\lib\\android\\CMakeLists.txt") == "C:/lib/android/"

    def test_bare_filename(self):
        assert cmake_lists_dir("CMakeLists.txt") == "./"


class TestGenerateCmakeFileContent:
    def test_no_packages(self):
        expected = (
            _HEADER
            + "\n"
            + "\n"
            + "\n"
            + "set(AUTOLINKED_LIBRARIES\n"
            + "  \n"
            + ")"
        )
        assert generate_cmake_file_content([]) == expected

    def test_with_packages(self, test_dependencies):
        expected = (
            _HEADER
            + "\n"
            + "add_subdirectory(./a/directory/ aPackage_autolinked_build)\n"
            + "add_subdirectory(./another/directory/ anotherPackage_autolinked_build)\n"
            + "add_subdirectory(./another/directory/cxx/ anotherPackage_cxxmodule_autolinked_build)\n"
            + "\n"
            + "set(AUTOLINKED_LIBRARIES\n"
            + "  react_codegen_aPackage\n"
            + "  react_codegen_anotherPackage\n"
            + "another_cxxModule\n"
            + ")"
        )
        assert generate_cmake_file_content(test_dependencies) == expected

    def test_three_subdirectories_and_library_order(self, test_dependencies):
        content = generate_cmake_file_content(test_dependencies)
        lines = content.splitlines()
        assert len([l for l in lines if l.startswith("add_subdirectory(")]) == 3

        libs = lines[lines.index("set(AUTOLINKED_LIBRARIES") + 1 : -1]
        assert [l.strip() for l in libs] == [
            "react_codegen_aPackage",
            "react_codegen_anotherPackage",
            "another_cxxModule",
        ]

    def test_primary_before_cxx_subdirectory(self, another_package):
        lines = generate_cmake_file_content([another_package]).splitlines()
        primary = lines.index(
            "add_subdirectory(./another/directory/ anotherPackage_autolinked_build)"
        )
        cxx = lines.index(
            "add_subdirectory(./another/directory/cxx/ anotherPackage_cxxmodule_autolinked_build)"
        )
        assert primary < cxx

    def test_no_cmake_lists_no_subdirectory(self):
        dep = AndroidDependency(source_dir="./plain", library_name="plain")
        content = generate_cmake_file_content([dep])
        assert "add_subdirectory" not in content
        assert "  react_codegen_plain\n)" in content

    def test_bare_descriptor_contributes_nothing(self):
        dep = AndroidDependency(source_dir="./bare")
        assert generate_cmake_file_content([dep]) == generate_cmake_file_content([])

    def test_idempotent(self, test_dependencies):
        first = generate_cmake_file_content(test_dependencies)
        assert generate_cmake_file_content(test_dependencies) == first

    def test_accepts_generator(self, test_dependencies):
        assert generate_cmake_file_content(iter(test_dependencies)) == (
            generate_cmake_file_content(test_dependencies)
        )


class TestUnnamedBuildTargets:
    def test_cxx_build_named_after_module(self):
        deps = [
            AndroidDependency(
                source_dir=f"./{name}",
                cxx_module_header_name=f"{name.title()}Cxx",
                cxx_module_cmake_lists_module_name=f"{name}_cxx",
                cxx_module_cmake_lists_path=f"./{name}/cxx/CMakeLists.txt",
            )
            for name in ("one", "two")
        ]
        content = generate_cmake_file_content(deps)
        assert "None" not in content
        assert "add_subdirectory(./one/cxx/ one_cxx_cxxmodule_autolinked_build)" in content
        assert "add_subdirectory(./two/cxx/ two_cxx_cxxmodule_autolinked_build)" in content

    def test_primary_build_skipped_without_library_name(self):
        dep = AndroidDependency(source_dir="./x", cmake_lists_path="./x/CMakeLists.txt")
        content = generate_cmake_file_content([dep])
        assert "None" not in content
        assert "add_subdirectory" not in content

    def test_cxx_build_skipped_without_any_name(self):
        dep = AndroidDependency(
            source_dir="./x", cxx_module_cmake_lists_path="./x/cxx/CMakeLists.txt"
        )
        assert "add_subdirectory" not in generate_cmake_file_content([dep])
