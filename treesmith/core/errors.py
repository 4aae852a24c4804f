"""
Synthesis errors — request-fatal failures.

These abort a single synthesis request before any filesystem call is
made. Per-entry failures are never raised: they are recorded as failed
outcomes in the report.
"""

from __future__ import annotations


class SynthesisError(Exception):
    """Raised when a synthesis request cannot produce a plan."""


class TemplateNotFoundError(SynthesisError):
    """Raised when a template id is not in the catalog."""

    def __init__(self, template_id: str):
        self.template_id = template_id
        super().__init__(f"Template not found: {template_id}")


class EmptyPlanError(SynthesisError):
    """Raised when the input describes nothing to create."""

    def __init__(self, message: str = "Nothing to create"):
        super().__init__(message)
