"""
Domain models — Pydantic types for the synthesis engine.

All models are re-exported here for convenient access:

    from treesmith.core.models import ParsedStructure, CreationPlan, OutcomeReport
"""

from treesmith.core.models.outcome import (
    OperationOutcome,
    OperationResult,
    OutcomeReport,
)
from treesmith.core.models.settings import Settings, WebSettings
from treesmith.core.models.structure import (
    CreationEntry,
    CreationPlan,
    ParsedStructure,
    parent_paths,
)
from treesmith.core.models.template import Template, TemplateInfo

__all__ = [
    # outcome.py
    "OperationOutcome",
    "OperationResult",
    "OutcomeReport",
    # settings.py
    "Settings",
    "WebSettings",
    # structure.py
    "CreationEntry",
    "CreationPlan",
    "ParsedStructure",
    "parent_paths",
    # template.py
    "Template",
    "TemplateInfo",
]
