"""
scriptmeta — CLI entrypoint.

Usage:
    python -m scriptmeta.main --help
    python -m scriptmeta.main blocks script.py
    python -m scriptmeta.main deps list script.py
    python -m scriptmeta.main deps check scripts/
    python -m scriptmeta.main config check
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from scriptmeta.core.observability.logging_config import setup_logging

from scriptmeta import __version__


@click.group()
@click.version_option(version=__version__, prog_name="scriptmeta")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to scriptmeta.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """scriptmeta — read metadata blocks embedded in single-file scripts."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("SCRIPTMETA_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("SCRIPTMETA_LOG_FILE"),
        log_file_level=os.environ.get("SCRIPTMETA_LOG_FILE_LEVEL"),
    )


@cli.group()
def config() -> None:
    """Tool configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate scriptmeta.yml configuration."""
    from scriptmeta.core.use_cases.config_check import check_settings

    result = check_settings(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)
        return

    if result.valid:
        assert result.settings is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        if result.config_path:
            click.echo(f"   File: {result.config_path}")
        click.echo(f"   Validator: {result.settings.dependencies.validator}")
        click.echo(f"   First block only: {result.settings.dependencies.first_block_only}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)


# ── Register sub-commands from scriptmeta/ui/cli/ ─────────────────

from scriptmeta.ui.cli.blocks import blocks
from scriptmeta.ui.cli.deps import deps

cli.add_command(blocks)
cli.add_command(deps)


if __name__ == "__main__":
    cli()
