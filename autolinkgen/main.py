"""
autolinkgen — CLI entrypoint.

Usage:
    autolinkgen --help
    autolinkgen generate -i autolinking.json -o build/generated/autolinking/src/main/jni
    autolinkgen check -i autolinking.json
    autolinkgen render cmake -i autolinking.json
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click

from autolinkgen import __version__
from autolinkgen.core.observability.logging_config import setup_logging
from autolinkgen.ui.cli.autolinking import check, generate, render


@click.group()
@click.version_option(version=__version__, prog_name="autolinkgen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--settings",
    "-s",
    "settings_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Path to autolinkgen.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    settings_path: str | None,
) -> None:
    """autolinkgen — generate native autolinking sources for Android builds."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("AUTOLINKGEN_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("AUTOLINKGEN_LOG_FILE"),
        log_file_level=os.environ.get("AUTOLINKGEN_LOG_FILE_LEVEL"),
    )

    # ── Settings ────────────────────────────────────────────────
    from autolinkgen.core.config.loader import ConfigError, load_settings

    try:
        ctx.obj["settings"] = load_settings(Path(settings_path) if settings_path else None)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)


cli.add_command(generate)
cli.add_command(check)
cli.add_command(render)


def main() -> None:
    """Console-script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
