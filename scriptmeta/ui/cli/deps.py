"""
CLI commands for the Script Dependencies block.

Thin wrappers over ``scriptmeta.core.services.script_meta`` and
``scriptmeta.core.use_cases.check``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from scriptmeta.ui.cli.helpers import load_cli_settings


@click.group()
def deps() -> None:
    """Dependencies — list and check Script Dependencies blocks."""


@deps.command("list")
@click.argument("script", type=click.Path(dir_okay=False, allow_dash=True))
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option(
    "--validator",
    type=click.Choice(["pep508", "name"]),
    default=None,
    help="Specifier validator (default: from config).",
)
@click.option(
    "--first-only/--all-blocks",
    "first_only",
    default=None,
    help="Use only the first dependency block (default: from config).",
)
@click.pass_context
def list_deps(
    ctx: click.Context,
    script: str,
    as_json: bool,
    validator: str | None,
    first_only: bool | None,
) -> None:
    """List the dependencies declared in SCRIPT ('-' for stdin)."""
    from scriptmeta.core.services.script_meta import (
        ScriptMetadataError,
        get_validator,
        read_dependencies,
    )

    settings = load_cli_settings(ctx)
    dep_settings = settings.dependencies

    specs = []
    try:
        for spec in read_dependencies(
            script,
            validator=get_validator(validator or dep_settings.validator),
            first_block_only=dep_settings.first_block_only if first_only is None else first_only,
            honor_declaration=settings.encoding.honor_declaration,
        ):
            specs.append(spec)
    except (OSError, UnicodeDecodeError, ScriptMetadataError) as e:
        if as_json:
            click.echo(json.dumps({"error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {script}: {e}", fg="red", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps([s.model_dump() for s in specs], indent=2))
        return

    if not specs:
        if not ctx.obj.get("quiet"):
            click.secho("No dependencies declared", fg="yellow", err=True)
        return

    for spec in specs:
        click.echo(spec.raw)


@deps.command("check")
@click.argument("paths", nargs=-1, required=True, type=click.Path(allow_dash=True))
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def check(ctx: click.Context, paths: tuple[str, ...], as_json: bool) -> None:
    """Check scripts (or every script under a directory)."""
    from scriptmeta.core.use_cases.check import check_script, check_tree

    settings = load_cli_settings(ctx)

    results = []
    for raw in paths:
        path = Path(raw)
        if raw != "-" and path.is_dir():
            results.extend(check_tree(path, settings).scripts)
        else:
            results.append(check_script(raw, settings))

    all_valid = all(r.valid for r in results)

    if as_json:
        click.echo(json.dumps({
            "valid": all_valid,
            "scripts": [r.to_dict() for r in results],
        }, indent=2))
        sys.exit(0 if all_valid else 1)
        return

    verbose = ctx.obj.get("verbose", False)
    for result in results:
        if not result.valid:
            click.secho(f"   ✗ {result.path}", fg="red")
            for err in result.errors:
                click.echo(f"      • {err}")
        elif result.has_metadata or verbose:
            click.secho(f"   ✓ {result.path}", fg="green", nl=False)
            click.echo(f"  ({len(result.dependencies)} dependencies)")
        for warn in result.warnings:
            click.secho(f"      ⚠️  {warn}", fg="yellow")

    failed = sum(1 for r in results if not r.valid)
    click.echo()
    if failed:
        click.secho(f"❌ {failed} of {len(results)} scripts failed", fg="red", bold=True)
        sys.exit(1)
    click.secho(f"✅ {len(results)} scripts checked", fg="green", bold=True)
