"""
CLI commands for structure creation — templates, flat lists and trees.

Thin wrappers over ``treesmith.core.use_cases.synthesize``. Each command
plans first, then either prints the plan (``--dry-run``) or executes it.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import NoReturn

import click

from treesmith.adapters.base import FilesystemProvider
from treesmith.core.errors import SynthesisError
from treesmith.core.models.structure import CreationPlan


def _resolve_base_dir(ctx: click.Context) -> Path:
    """Base directory from context, else CWD."""
    base_dir: Path | None = ctx.obj.get("base_dir")
    return base_dir or Path.cwd()


def _provider(ctx: click.Context, mock: bool) -> FilesystemProvider:
    if mock:
        from treesmith.adapters.mock import MockFilesystemProvider

        return MockFilesystemProvider()

    from treesmith.adapters.local import LocalFilesystemProvider

    return LocalFilesystemProvider(_resolve_base_dir(ctx))


def _fail(message: str, as_json: bool) -> NoReturn:
    if as_json:
        click.echo(json.dumps({"error": message}, indent=2))
    else:
        click.secho(f"❌ {message}", fg="red")
    sys.exit(1)


def _finish(
    ctx: click.Context,
    plan: CreationPlan,
    title: str,
    as_json: bool,
    dry_run: bool,
    mock: bool,
) -> None:
    """Print or execute a plan and report the outcome."""
    from treesmith.core.engine.executor import execute_plan

    if dry_run:
        if as_json:
            click.echo(json.dumps({
                "dry_run": True,
                "total": plan.total,
                "entries": [e.model_dump(mode="json") for e in plan.entries],
            }, indent=2))
            return
        click.secho(f"\n🔎 [dry-run] {title} — {plan.total} entries", fg="cyan", bold=True)
        click.echo(plan.to_flat_list())
        click.echo()
        return

    report = execute_plan(plan, _provider(ctx, mock))

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))
        if not report.all_ok:
            sys.exit(1)
        return

    quiet = ctx.obj.get("quiet", False)
    mode_label = "[mock] " if mock else ""

    if not quiet:
        click.secho(f"\n🔨 {mode_label}{title}", fg="cyan", bold=True)
        for outcome in report.outcomes:
            icon = "📁" if outcome.kind == "directory" else "📄"
            if outcome.succeeded:
                click.secho("  ✅ ", fg="green", nl=False)
                click.echo(f"{icon} {outcome.path}")
            else:
                click.secho("  ❌ ", fg="red", nl=False)
                click.echo(f"{outcome.path}: {outcome.detail}")

    click.echo()
    status_color = {"ok": "green", "partial": "yellow", "failed": "red"}.get(
        report.status, "white"
    )
    click.secho(
        f"📊 Summary: {report.success_count} succeeded, {report.failure_count} failed",
        fg=status_color,
        bold=True,
    )

    if not report.all_ok:
        click.echo()
        sys.exit(1)

    if not quiet:
        click.secho("✨ Structure created successfully!", fg="green")
    click.echo()


_common_options = [
    click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON."),
    click.option("--dry-run", is_flag=True, help="Print the plan but don't create anything."),
    click.option("--mock", is_flag=True, help="Use the mock provider (no disk writes)."),
]


def common_options(fn):  # type: ignore[no-untyped-def]
    for option in reversed(_common_options):
        fn = option(fn)
    return fn


@click.group()
def create() -> None:
    """Create directory structures from templates, lists or trees."""


# ── Template ─────────────────────────────────────────────────────


@create.command("template")
@click.argument("template_id")
@click.argument("root")
@common_options
@click.pass_context
def create_template(
    ctx: click.Context,
    template_id: str,
    root: str,
    as_json: bool,
    dry_run: bool,
    mock: bool,
) -> None:
    """Create a project from a template under ROOT.

    Examples:

        treesmith create template go-project myservice

        treesmith create template python-flask webapp --dry-run
    """
    from treesmith.core.use_cases.synthesize import plan_from_template

    try:
        plan = plan_from_template(template_id, root, catalog=ctx.obj.get("catalog"))
    except SynthesisError as e:
        _fail(str(e), as_json)

    _finish(ctx, plan, f"{template_id} → {root}", as_json, dry_run, mock)


# ── Flat list ────────────────────────────────────────────────────


@create.command("custom")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--root", "-r", default=None, help="Directory to place every entry under.")
@common_options
@click.pass_context
def create_custom(
    ctx: click.Context,
    source,  # type: ignore[no-untyped-def]
    root: str | None,
    as_json: bool,
    dry_run: bool,
    mock: bool,
) -> None:
    """Create entries from a d:/f: list (SOURCE file, or stdin).

    Format, one entry per line:

    \b
        d:src
        d:src/api
        f:src/api/users.go
        f:README.md
    """
    from treesmith.core.use_cases.synthesize import plan_from_flat_list

    try:
        plan = plan_from_flat_list(root, source.read())
    except SynthesisError as e:
        _fail(str(e), as_json)

    _finish(ctx, plan, "custom structure", as_json, dry_run, mock)


# ── Tree ─────────────────────────────────────────────────────────


@create.command("tree")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@common_options
@click.pass_context
def create_tree(
    ctx: click.Context,
    source,  # type: ignore[no-untyped-def]
    as_json: bool,
    dry_run: bool,
    mock: bool,
) -> None:
    """Create the structure drawn in a tree diagram (SOURCE file, or stdin).

    The first line names the root directory:

    \b
        myapp/
        ├── src/
        │   ├── main.go
        │   └── utils.go
        └── README.md
    """
    from treesmith.core.use_cases.synthesize import plan_from_tree

    try:
        plan = plan_from_tree(source.read())
    except SynthesisError as e:
        _fail(str(e), as_json)

    _finish(ctx, plan, f"tree {plan.entries[0].path}", as_json, dry_run, mock)
