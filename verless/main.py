"""
verless — CLI entrypoint.

Usage:
    verless --help
    verless create project my-blog
    verless create theme dark --project my-blog
    verless content list my-blog
    verless config check my-blog
"""

from __future__ import annotations

import json
import os
import sys

import click

from verless import __version__
from verless.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="verless")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool, debug: bool) -> None:
    """verless — create and manage static site projects."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("VERLESS_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("VERLESS_LOG_FILE"),
        log_file_level=os.environ.get("VERLESS_LOG_FILE_LEVEL"),
        quiet_third_party=not debug,
    )


@cli.group()
def config() -> None:
    """Project configuration commands."""


@config.command("check")
@click.argument("project", type=click.Path(file_okay=False), required=False)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def config_check(project: str | None, as_json: bool) -> None:
    """Validate a project's verless.yml.

    Without PROJECT, the nearest enclosing project of the current
    directory is checked.
    """
    from verless.core.config.loader import ConfigError, load_config, resolve_project_root

    try:
        cfg = load_config(resolve_project_root(project))
    except ConfigError as e:
        if as_json:
            click.echo(json.dumps({"valid": False, "error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps({"valid": True, "config": cfg.model_dump(mode="json")}, indent=2))
        return

    click.secho("✅ Configuration is valid", fg="green", bold=True)
    if cfg.site.meta.title:
        click.echo(f"   Title:   {cfg.site.meta.title}")
    click.echo(f"   Theme:   {cfg.theme}")
    click.echo(f"   Plugins: {', '.join(cfg.plugins) if cfg.plugins else '(none)'}")


# ── Register sub-command groups from verless/ui/cli/ ──────────────

from verless.ui.cli.content import content  # noqa: E402
from verless.ui.cli.create import create  # noqa: E402

cli.add_command(create)
cli.add_command(content)


if __name__ == "__main__":
    cli()
