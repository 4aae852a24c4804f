"""
Engine executor — plan building and plan execution.

Every input form ends up here. The planner turns a ParsedStructure or a
Template into a CreationPlan whose directories are ordered parents
first; the executor walks that plan through a FilesystemProvider and
collects one outcome per entry.

Flow:
    structure/template → build_plan → CreationPlan → execute_plan → OutcomeReport

Execution is best-effort: a failed entry is recorded and the walk goes
on, so a structure with a few bad paths still creates everything else.
"""

from __future__ import annotations

import logging

from treesmith.adapters.base import FilesystemProvider
from treesmith.core.errors import EmptyPlanError
from treesmith.core.models.outcome import OperationOutcome, OutcomeReport
from treesmith.core.models.structure import CreationEntry, CreationPlan, ParsedStructure
from treesmith.core.models.template import Template

logger = logging.getLogger(__name__)


def _join(root: str | None, path: str) -> str:
    """Prefix ``path`` with ``root`` using ``/``."""
    if not root:
        return path
    return f"{root.rstrip('/')}/{path.lstrip('/')}"


def _depth_key(path: str) -> tuple[int, str]:
    return path.count("/"), path


def build_plan(
    structure: ParsedStructure | Template,
    root: str | None = None,
) -> CreationPlan:
    """Build an ordered creation plan.

    Args:
        structure: Parsed input or a catalog template.
        root: Optional directory every path is placed under. It becomes
            the first entry of the plan.

    Returns:
        CreationPlan: root first, then directories by ascending depth
        (ties broken lexicographically), then files in encounter order.
        Template files keep their content.

    Raises:
        EmptyPlanError: If there is nothing to create and no root.
    """
    root = (root.strip().rstrip("/") or None) if root else None
    directories = list(structure.directories)
    files = dict(structure.files)

    if not directories and not files and not root:
        raise EmptyPlanError()

    entries: list[CreationEntry] = []
    if root:
        entries.append(CreationEntry(path=root, kind="directory"))

    dir_paths = {_join(root, d.rstrip("/")) for d in directories if d.strip("/")}
    dir_paths.discard(root)
    for path in sorted(dir_paths, key=_depth_key):
        entries.append(CreationEntry(path=path, kind="directory"))

    for path, content in files.items():
        entries.append(CreationEntry(
            path=_join(root, path),
            kind="file",
            content=content or None,
        ))

    plan = CreationPlan(entries=entries, root=root)
    logger.debug(
        "Built plan: %d directories, %d files (root=%s)",
        len(plan.directories), len(plan.files), root,
    )
    return plan


def _attempt(entry: CreationEntry, provider: FilesystemProvider) -> OperationOutcome:
    """Apply one entry; a raising provider counts as a failed entry."""
    try:
        if entry.is_directory:
            result = provider.create_directory(entry.path)
        else:
            result = provider.create_file(entry.path)
            if result.success and entry.content:
                result = provider.write_file(entry.path, entry.content)
    except Exception as e:
        # Contract says providers return failures; count a raise as one
        logger.error("Provider %s raised on %s: %s", provider.name, entry.path, e)
        return OperationOutcome(
            path=entry.path,
            kind=entry.kind,
            succeeded=False,
            detail=f"Unexpected error: {e}",
        )

    return OperationOutcome(
        path=entry.path,
        kind=entry.kind,
        succeeded=result.success,
        detail=result.message,
    )


def execute_plan(
    plan: CreationPlan,
    provider: FilesystemProvider,
) -> OutcomeReport:
    """Execute every entry of a plan, in order.

    Args:
        plan: The creation plan.
        provider: Filesystem provider to dispatch to.

    Returns:
        OutcomeReport with exactly one outcome per plan entry.
    """
    report = OutcomeReport()

    for entry in plan.entries:
        outcome = _attempt(entry, provider)
        report.outcomes.append(outcome)

        icon = "📁" if entry.is_directory else "📄"
        if outcome.succeeded:
            logger.info("✓ %s %s", icon, entry.path)
        else:
            logger.info("✗ %s %s: %s", icon, entry.path, outcome.detail)

    logger.info(
        "Plan executed via %s: %d succeeded, %d failed",
        provider.name, report.success_count, report.failure_count,
    )
    return report
