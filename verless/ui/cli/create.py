"""
CLI commands for creating projects and themes.

Thin wrappers over ``verless.core.services.create``.
"""

from __future__ import annotations

import json
import sys

import click


@click.group()
def create() -> None:
    """Create a new project or theme."""


@create.command("project")
@click.argument("path", type=click.Path())
@click.option("--overwrite", is_flag=True, help="Remove existing content at PATH first.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def create_project_cmd(ctx: click.Context, path: str, overwrite: bool, as_json: bool) -> None:
    """Create a new verless project at PATH."""
    from verless.core.services.create import CreateError, create_project

    try:
        spec = create_project(path, overwrite=overwrite)
    except CreateError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(spec.to_dict(), indent=2))
        return

    click.secho(f"✅ Created project: {path}", fg="green", bold=True)
    if not ctx.obj.get("quiet"):
        for f in spec.files:
            click.echo(f"   • {f}")


@create.command("theme")
@click.argument("name")
@click.option(
    "--project",
    "-p",
    type=click.Path(file_okay=False),
    default=None,
    help="Project to create the theme in (default: the enclosing project).",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def create_theme_cmd(ctx: click.Context, name: str, project: str | None, as_json: bool) -> None:
    """Create a new theme NAME inside a project."""
    from verless.core.config.loader import resolve_project_root
    from verless.core.services.create import CreateError, create_theme

    try:
        spec = create_theme(resolve_project_root(project), name)
    except CreateError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(spec.to_dict(), indent=2))
        return

    click.secho(f"✅ Created theme: {name}", fg="green", bold=True)
    if not ctx.obj.get("quiet"):
        for f in spec.files:
            click.echo(f"   • {f}")
