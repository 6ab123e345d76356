"""
CLI command for listing every metadata block in a script.

Thin wrapper over ``scriptmeta.core.services.script_meta``.
"""

from __future__ import annotations

import json
import sys

import click

from scriptmeta.ui.cli.helpers import load_cli_settings


@click.command()
@click.argument("script", type=click.Path(dir_okay=False, allow_dash=True))
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def blocks(ctx: click.Context, script: str, as_json: bool) -> None:
    """List every ## metadata block in SCRIPT ('-' for stdin)."""
    from scriptmeta.core.services.script_meta import ScriptMetadataError, scan_script

    settings = load_cli_settings(ctx)

    try:
        found = list(
            scan_script(script, honor_declaration=settings.encoding.honor_declaration)
        )
    except (OSError, UnicodeDecodeError, ScriptMetadataError) as e:
        click.secho(f"❌ Cannot read {script}: {e}", fg="red", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps([b.to_dict() for b in found], indent=2))
        return

    if not found:
        click.secho("No metadata blocks found", fg="yellow")
        return

    for block in found:
        extra = f" {block.header_extra.strip()}" if block.header_extra.strip() else ""
        click.secho(f"## {block.block_type}:{extra}", fg="cyan", bold=True, nl=False)
        click.echo(f"  (line {block.lineno})")
        for line in block.body_lines:
            click.echo(f"   {line}")
