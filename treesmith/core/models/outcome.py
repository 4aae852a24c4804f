"""
Outcome models — what happened when a plan was executed.

OperationResult is the provider's raw answer to a single call.
OperationOutcome is the executor's per-entry record, and OutcomeReport
aggregates them for the caller. Providers NEVER raise: failures come
back as results with success=False.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from pydantic import BaseModel


class OperationResult(BaseModel):
    """Answer of one filesystem provider call."""

    success: bool
    message: str = ""

    @classmethod
    def ok(cls, message: str = "") -> OperationResult:
        return cls(success=True, message=message)

    @classmethod
    def failure(cls, message: str) -> OperationResult:
        return cls(success=False, message=message)


class OperationOutcome(BaseModel):
    """Result of attempting one plan entry."""

    path: str
    kind: Literal["directory", "file"] = "directory"
    succeeded: bool
    detail: str = ""


@dataclass
class OutcomeReport:
    """Aggregated outcomes of one plan execution."""

    outcomes: list[OperationOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def success_count(self) -> int:
        return sum(1 for o in self.outcomes if o.succeeded)

    @property
    def failure_count(self) -> int:
        return sum(1 for o in self.outcomes if not o.succeeded)

    @property
    def all_ok(self) -> bool:
        return self.failure_count == 0

    @property
    def status(self) -> str:
        if self.failure_count == 0:
            return "ok"
        if self.success_count > 0:
            return "partial"
        return "failed"

    def failures(self) -> list[OperationOutcome]:
        return [o for o in self.outcomes if not o.succeeded]

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "total": self.total,
            "succeeded": self.success_count,
            "failed": self.failure_count,
            "outcomes": [o.model_dump(mode="json") for o in self.outcomes],
        }
