"""
Shared test fixtures and configuration.
"""

import pytest

from treesmith.adapters.mock import MockFilesystemProvider
from treesmith.core.data import TemplateCatalog
from treesmith.core.models.template import Template


@pytest.fixture
def mock_provider() -> MockFilesystemProvider:
    """A provider that records every call and succeeds."""
    return MockFilesystemProvider()


@pytest.fixture
def small_catalog() -> TemplateCatalog:
    """A two-template catalog with predictable contents."""
    return TemplateCatalog([
        Template(
            id="tiny",
            description="Tiny Project",
            directories=("src", "src/lib", "docs"),
            files={"README.md": "# Tiny\n", "src/main.py": ""},
        ),
        Template(
            id="empty",
            description="Nothing but a root",
        ),
    ])
