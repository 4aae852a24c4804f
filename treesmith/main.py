"""
Treesmith — CLI entrypoint.

Usage:
    treesmith --help
    treesmith templates
    treesmith create template go-project myservice
    treesmith create tree layout.txt
    treesmith web --port 8080
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from treesmith import __version__
from treesmith.core.observability.logging_config import configure_from_flags


@click.group()
@click.version_option(version=__version__, prog_name="treesmith")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Path to treesmith.yml (default: auto-detect).",
)
@click.option(
    "--directory",
    "-C",
    "directory",
    type=click.Path(file_okay=False),
    default=None,
    help="Create structures under this directory (overrides base_dir).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
    directory: str | None,
) -> None:
    """Treesmith — create directory structures from templates and trees."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug

    # ── Logging setup (once, at process start) ──────────────────
    configure_from_flags(debug=debug, verbose=verbose, quiet=quiet)

    # ── Configuration and catalog ───────────────────────────────
    from treesmith.core.config.loader import ConfigError, load_settings
    from treesmith.core.data import load_catalog

    try:
        settings = load_settings(Path(config_path) if config_path else None)
        catalog = load_catalog(Path(p) for p in settings.catalogs)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    ctx.obj["settings"] = settings
    ctx.obj["catalog"] = catalog
    ctx.obj["base_dir"] = Path(directory).resolve() if directory else Path(settings.base_dir)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def templates(ctx: click.Context, as_json: bool) -> None:
    """List available project templates."""
    catalog = ctx.obj["catalog"]
    infos = catalog.list_templates()

    if as_json:
        click.echo(json.dumps(
            [{"name": t.id, "description": t.description} for t in infos],
            indent=2,
        ))
        return

    click.secho(f"\n📦 Templates ({len(infos)})", fg="cyan", bold=True)
    click.echo()
    for i, info in enumerate(infos, start=1):
        click.secho(f"   {i:>2}. {info.id}", fg="white", bold=True, nl=False)
        click.echo(f"  — {info.description}")
    click.echo()


@cli.command()
@click.option("--host", default=None, help="Bind address (default: from config).")
@click.option("--port", "-p", type=int, default=None, help="Port (default: from config).")
@click.option("--mock", is_flag=True, help="Record operations instead of writing to disk.")
@click.pass_context
def web(ctx: click.Context, host: str | None, port: int | None, mock: bool) -> None:
    """Serve the JSON API."""
    from treesmith.ui.web.server import create_app, run_server

    settings = ctx.obj["settings"]
    app = create_app(
        base_dir=ctx.obj["base_dir"],
        catalog=ctx.obj["catalog"],
        mock_mode=mock,
    )

    host = host or settings.web.host
    port = port or settings.web.port

    click.secho(f"\n🌐 Treesmith API on http://{host}:{port}/api", fg="cyan", bold=True)
    if mock:
        click.secho("   [mock] nothing will be written to disk", fg="yellow")
    click.echo()

    run_server(app, host=host, port=port, debug=ctx.obj.get("debug", False))


# ── Command groups ───────────────────────────────────────────────

from treesmith.ui.cli.create import create  # noqa: E402

cli.add_command(create)


if __name__ == "__main__":
    cli()
