"""
CLI commands for project content.

Streams the content directory through ``verless.core.services.fs`` and
prints each file as soon as the walk finds it.
"""

from __future__ import annotations

import json
import sys

import click

from verless.core.config.constants import CONTENT_DIR


@click.group()
def content() -> None:
    """Inspect project content."""


@content.command("list")
@click.argument("project", type=click.Path(file_okay=False), required=False)
@click.option("--all", "list_all", is_flag=True, help="Include every file, not just Markdown pages.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def list_content(project: str | None, list_all: bool, as_json: bool) -> None:
    """List the content files of PROJECT (default: the enclosing project)."""
    from verless.core.config.loader import resolve_project_root
    from verless.core.services.fs import FileStream, WalkError, markdown_only, no_underscores

    root = resolve_project_root(project) / CONTENT_DIR
    filters = () if list_all else (markdown_only, no_underscores)
    stream = FileStream(root, *filters).start()

    paths: list[str] = []
    for path in stream:
        paths.append(path)
        if not as_json:
            click.echo(path)

    try:
        stream.wait()
    except WalkError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps({"root": str(root), "files": paths}, indent=2))
        return

    if not paths:
        click.secho(f"No content files in {root}.", fg="yellow")
