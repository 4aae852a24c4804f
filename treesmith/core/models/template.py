"""
Template model — a named, fixed project skeleton.

Templates are loaded from YAML catalogs at startup and never change
afterwards. A template lists directories and files relative to the
root the user chooses when instantiating it.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TemplateInfo(BaseModel):
    """The listing view of a template (used for numbered menus)."""

    model_config = ConfigDict(frozen=True)

    id: str
    description: str = ""


class Template(BaseModel):
    """A project skeleton.

    Attributes:
        id:          Lookup key (e.g. 'go-project').
        description: Human-readable label.
        directories: Relative directory paths, in catalog order.
        files:       Relative file path → initial content.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    description: str = ""
    directories: tuple[str, ...] = ()
    files: dict[str, str] = Field(default_factory=dict)

    @property
    def info(self) -> TemplateInfo:
        return TemplateInfo(id=self.id, description=self.description)

    @property
    def item_count(self) -> int:
        """Directories plus files, excluding the root."""
        return len(self.directories) + len(self.files)
