"""
Settings model — the optional treesmith.yml configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class WebSettings(BaseModel):
    """Bind address for the HTTP API."""

    host: str = "127.0.0.1"
    port: int = 8080


class Settings(BaseModel):
    """Process configuration.

    Attributes:
        base_dir: Directory that relative plan paths are created under.
        catalogs: Extra template catalog files, loaded after the bundled one.
        web:      HTTP server settings.
    """

    base_dir: str = "."
    catalogs: list[str] = Field(default_factory=list)
    web: WebSettings = Field(default_factory=WebSettings)
