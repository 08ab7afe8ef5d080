"""
CLI commands for autolinking generation.

Thin wrappers over ``autolinkgen.core.use_cases`` and the generators.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from autolinkgen.core.models.settings import GeneratorSettings


def _settings(ctx: click.Context) -> GeneratorSettings:
    return ctx.obj.get("settings") or GeneratorSettings()


def _input_path(ctx: click.Context, input_path: str | None) -> Path:
    return Path(input_path) if input_path else Path(_settings(ctx).input)


_input_option = click.option(
    "--input",
    "-i",
    "input_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Autolinking config JSON (default: from settings, else autolinking.json).",
)


# ── Generate ────────────────────────────────────────────────────


@click.command()
@_input_option
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory for the generated files.",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Fail on partially configured C++ modules (default: from settings, on).",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def generate(
    ctx: click.Context,
    input_path: str | None,
    output_dir: str | None,
    strict: bool | None,
    as_json: bool,
) -> None:
    """Generate Android-autolinking.cmake, autolinking.cpp and autolinking.h."""
    from autolinkgen.core.use_cases.generate import run_generate

    result = run_generate(
        config_path=_input_path(ctx, input_path),
        output_dir=Path(output_dir) if output_dir else None,
        strict=strict,
        settings=_settings(ctx),
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if not result.ok:
            sys.exit(1)
        return

    if not result.ok:
        click.secho(f"❌ {result.error}", fg="red")
        for issue in result.issues:
            click.echo(f"   • {issue.message}")
        sys.exit(1)

    for issue in result.issues:
        click.secho(f"⚠️  {issue.message}", fg="yellow")

    if ctx.obj.get("quiet"):
        return

    click.secho(
        f"🔗 Autolinked {result.package_count} package(s) → {result.output_dir}",
        fg="cyan",
        bold=True,
    )
    for f in result.files:
        marker = "✏️ " if f.get("changed") else "✓ "
        click.echo(f"   {marker} {f['path']}")


# ── Check ───────────────────────────────────────────────────────


@click.command()
@_input_option
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def check(ctx: click.Context, input_path: str | None, as_json: bool) -> None:
    """Validate an autolinking config without writing anything."""
    from autolinkgen.core.use_cases.config_check import check_config

    result = check_config(_input_path(ctx, input_path))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if not result.valid:
            sys.exit(1)
        return

    if result.valid:
        summary = result.to_dict()
        click.secho(f"✅ Config valid: {result.config_path}", fg="green")
        click.echo(f"   Dependencies:           {summary['dependency_count']}")
        click.echo(f"   Android packages:       {summary['android_package_count']}")
        click.echo(f"   Module providers:       {summary['module_provider_count']}")
        click.echo(f"   C++ modules:            {summary['cxx_module_count']}")
        click.echo(f"   Component descriptors:  {summary['component_descriptor_count']}")
    else:
        click.secho(f"❌ Config invalid: {result.config_path}", fg="red")
        for err in result.errors:
            click.echo(f"   • {err}")

    for warn in result.warnings:
        click.secho(f"   ⚠️  {warn}", fg="yellow")

    if not result.valid:
        sys.exit(1)


# ── Render ──────────────────────────────────────────────────────


@click.command()
@click.argument("artifact", type=click.Choice(["cmake", "cpp", "header"]))
@_input_option
@click.pass_context
def render(ctx: click.Context, artifact: str, input_path: str | None) -> None:
    """Print one generated artifact to stdout (no validation, no files)."""
    from autolinkgen.core.config.loader import ConfigError, load_autolinking_config
    from autolinkgen.core.services.generators.cmake import generate_cmake_file_content
    from autolinkgen.core.services.generators.cpp import (
        generate_cpp_file_content,
        generate_header_file_content,
    )
    from autolinkgen.core.services.platform_filter import filter_android_packages

    if artifact == "header":
        click.echo(generate_header_file_content())
        return

    try:
        config = load_autolinking_config(_input_path(ctx, input_path))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    packages = filter_android_packages(config)
    if artifact == "cmake":
        click.echo(generate_cmake_file_content(packages))
    else:
        click.echo(generate_cpp_file_content(packages))
