"""
Shared helpers for CLI commands.
"""

from __future__ import annotations

import sys

import click

from scriptmeta.core.config.loader import ConfigError, load_settings
from scriptmeta.core.models.settings import Settings


def load_cli_settings(ctx: click.Context) -> Settings:
    """Load settings from the --config path (or auto-detect), exiting on error."""
    try:
        return load_settings(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)
