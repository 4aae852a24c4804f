"""
Structure models — parsed input and the ordered creation plan.

ParsedStructure is what every parser produces. CreationPlan is what the
plan builder produces from a ParsedStructure or a Template, and is the
only thing the executor consumes.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


def parent_paths(path: str) -> list[str]:
    """Proper ancestors of a '/'-separated path, nearest last.

    >>> parent_paths("a/b/c.txt")
    ['a', 'a/b']
    """
    parts = [p for p in path.split("/") if p]
    return ["/".join(parts[:i]) for i in range(1, len(parts))]


class ParsedStructure(BaseModel):
    """Directories and files extracted from one parse.

    Directory order carries no meaning. File order is encounter order.
    """

    model_config = ConfigDict(frozen=True)

    directories: frozenset[str] = frozenset()
    files: dict[str, str] = Field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.directories and not self.files

    def to_flat_list(self) -> str:
        """Render as ``d:``/``f:`` lines."""
        from treesmith.core.services.flat_list import render_flat_list

        return render_flat_list(sorted(self.directories), self.files)


class CreationEntry(BaseModel):
    """One directory or file to create."""

    model_config = ConfigDict(frozen=True)

    path: str
    kind: Literal["directory", "file"]
    content: str | None = None

    @property
    def is_directory(self) -> bool:
        return self.kind == "directory"


class CreationPlan(BaseModel):
    """Ordered entries with every directory before its descendants.

    The ordering is checked on construction: an entry whose ancestor
    directory appears later in the plan is rejected.
    """

    entries: list[CreationEntry] = Field(default_factory=list)
    root: str | None = None

    @model_validator(mode="after")
    def _check_parent_order(self) -> CreationPlan:
        dir_index = {
            e.path: i for i, e in enumerate(self.entries) if e.is_directory
        }
        for i, entry in enumerate(self.entries):
            for parent in parent_paths(entry.path):
                j = dir_index.get(parent)
                if j is not None and j >= i:
                    raise ValueError(
                        f"Directory '{parent}' must precede '{entry.path}' in the plan"
                    )
        return self

    @property
    def total(self) -> int:
        return len(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[CreationEntry]:  # type: ignore[override]
        return iter(self.entries)

    @property
    def directories(self) -> list[CreationEntry]:
        return [e for e in self.entries if e.is_directory]

    @property
    def files(self) -> list[CreationEntry]:
        return [e for e in self.entries if not e.is_directory]

    def to_flat_list(self) -> str:
        """Render as ``d:``/``f:`` lines, in plan order."""
        from treesmith.core.services.flat_list import render_flat_list

        return render_flat_list(
            [e.path for e in self.directories],
            {e.path: e.content or "" for e in self.files},
        )
