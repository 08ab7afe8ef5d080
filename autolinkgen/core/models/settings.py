"""
Generator settings — loaded from autolinkgen.yml.

Every field has a default, so a missing settings file is the same as
an empty one. CLI options override whatever is set here.
"""

from __future__ import annotations

from pydantic import BaseModel

DEFAULT_INPUT = "autolinking.json"
DEFAULT_OUTPUT_DIR = "build/generated/autolinking/src/main/jni"

CMAKE_FILENAME = "Android-autolinking.cmake"
CPP_FILENAME = "autolinking.cpp"
H_FILENAME = "autolinking.h"


class GeneratorSettings(BaseModel):
    """Where to read the config from and where to write the artifacts.

    ``strict`` controls what happens when a dependency declares only part
    of a C++ module (header name, CMake module name, CMakeLists path):
    abort generation when True, log a warning and carry on when False.
    """

    input: str = DEFAULT_INPUT
    output_dir: str = DEFAULT_OUTPUT_DIR
    strict: bool = True

    cmake_filename: str = CMAKE_FILENAME
    cpp_filename: str = CPP_FILENAME
    header_filename: str = H_FILENAME
