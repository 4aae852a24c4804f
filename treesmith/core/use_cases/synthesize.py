"""
Synthesize use case — the engine's entry points for CLI and web.

Each input form has a ``plan_*`` function (parse + plan, no side
effects) and a ``synthesize_*`` function (plan + execute). Request-fatal
problems raise a SynthesisError before the provider is ever called:

    - unknown template id   → TemplateNotFoundError
    - nothing to create     → EmptyPlanError
    - blank template root   → SynthesisError
"""

from __future__ import annotations

import logging

from treesmith.adapters.base import FilesystemProvider
from treesmith.core.data import TemplateCatalog, default_catalog
from treesmith.core.engine.executor import build_plan, execute_plan
from treesmith.core.errors import SynthesisError
from treesmith.core.models.outcome import OutcomeReport
from treesmith.core.models.structure import CreationPlan
from treesmith.core.services.flat_list import parse_flat_list
from treesmith.core.services.tree_parser import parse_tree_text

logger = logging.getLogger(__name__)


# ── Planning ─────────────────────────────────────────────────────────


def plan_from_template(
    template_id: str,
    root: str,
    catalog: TemplateCatalog | None = None,
) -> CreationPlan:
    """Expand a catalog template under ``root``."""
    template = (catalog or default_catalog()).get_template(template_id)

    root = (root or "").strip().rstrip("/")
    if not root:
        raise SynthesisError("Root directory is required")

    logger.debug("Planning template '%s' under %s", template.id, root)
    return build_plan(template, root=root)


def plan_from_flat_list(root: str | None, raw_text: str) -> CreationPlan:
    """Plan a ``d:``/``f:`` list, optionally placed under ``root``."""
    structure = parse_flat_list(raw_text)
    return build_plan(structure, root=root)


def plan_from_tree(raw_text: str) -> CreationPlan:
    """Plan a tree diagram. Its first line is the root."""
    structure = parse_tree_text(raw_text)
    return build_plan(structure)


# ── Synthesis ────────────────────────────────────────────────────────


def synthesize_from_template(
    template_id: str,
    root: str,
    provider: FilesystemProvider,
    catalog: TemplateCatalog | None = None,
) -> OutcomeReport:
    """Create a template's structure under ``root``.

    Raises:
        TemplateNotFoundError: If ``template_id`` is not in the catalog.
        SynthesisError: If ``root`` is blank.
    """
    plan = plan_from_template(template_id, root, catalog=catalog)
    return execute_plan(plan, provider)


def synthesize_from_flat_list(
    root: str | None,
    raw_text: str,
    provider: FilesystemProvider,
) -> OutcomeReport:
    """Create the entries of a ``d:``/``f:`` list.

    Raises:
        EmptyPlanError: If the list has no entries and no root is given.
    """
    plan = plan_from_flat_list(root, raw_text)
    return execute_plan(plan, provider)


def synthesize_from_tree(
    raw_text: str,
    provider: FilesystemProvider,
) -> OutcomeReport:
    """Create the structure drawn in a tree diagram.

    Raises:
        EmptyPlanError: If the text has no named lines.
    """
    plan = plan_from_tree(raw_text)
    return execute_plan(plan, provider)
