"""Adapters — filesystem providers the engine executes plans through.

Public re-exports for convenient access.
"""

from treesmith.adapters.base import FilesystemProvider
from treesmith.adapters.local import LocalFilesystemProvider
from treesmith.adapters.mock import MockFilesystemProvider, ProviderCall

__all__ = [
    "FilesystemProvider",
    "LocalFilesystemProvider",
    "MockFilesystemProvider",
    "ProviderCall",
]
