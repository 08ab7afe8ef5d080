"""Autolinking file generation — render artifacts and write them to disk."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from autolinkgen.core.models.autolinking import AndroidDependency
from autolinkgen.core.models.settings import GeneratorSettings
from autolinkgen.core.models.template import GeneratedFile
from autolinkgen.core.services.generators.cmake import generate_cmake_file_content
from autolinkgen.core.services.generators.cpp import (
    generate_cpp_file_content,
    generate_header_file_content,
)

logger = logging.getLogger(__name__)


def generate_files(
    packages: Iterable[AndroidDependency],
    settings: GeneratorSettings | None = None,
) -> list[GeneratedFile]:
    """Render the CMake, C++ source and header artifacts.

    Args:
        packages: Filtered Android descriptors.
        settings: Supplies the output filenames (defaults if None).

    Returns:
        One GeneratedFile per artifact, paths relative to the output dir.
    """
    settings = settings or GeneratorSettings()
    packages = list(packages)
    count = len(packages)

    return [
        GeneratedFile(
            path=settings.cmake_filename,
            content=generate_cmake_file_content(packages),
            reason=f"CMake subdirectories and link targets for {count} dependencies",
        ),
        GeneratedFile(
            path=settings.cpp_filename,
            content=generate_cpp_file_content(packages),
            reason=f"Module and component providers for {count} dependencies",
        ),
        GeneratedFile(
            path=settings.header_filename,
            content=generate_header_file_content(),
            reason="Provider function declarations",
        ),
    ]


def write_generated_file(output_dir: Path, file_data: GeneratedFile) -> dict:
    """Write a GeneratedFile to disk.

    Args:
        output_dir: Directory the file path is relative to.
        file_data: The rendered file.

    Returns:
        {"ok": True, "path": "...", "written": bool, "changed": bool}
        or {"error": "...", "path": "...", "written": False}
    """
    target = output_dir / file_data.path

    if target.exists() and not file_data.overwrite:
        return {
            "error": f"File already exists: {file_data.path} (overwrite disabled)",
            "path": str(target),
            "written": False,
        }

    old_content = None
    if target.is_file():
        try:
            old_content = target.read_text(encoding="utf-8")
        except OSError:
            logger.debug("Could not read existing %s, rewriting it", target)

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(file_data.content, encoding="utf-8")
    except OSError as e:
        logger.error("Failed to write %s: %s", target, e)
        return {"error": f"Cannot write {target}: {e}", "path": str(target), "written": False}

    changed = old_content != file_data.content
    logger.info("Wrote generated file: %s%s", target, "" if changed else " (unchanged)")
    return {"ok": True, "path": str(target), "written": True, "changed": changed}
