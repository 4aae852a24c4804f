"""
Filesystem provider base — the contract between the executor and disk.

The plan executor only talks to a FilesystemProvider, never to the
filesystem directly. That keeps the engine testable with a mock and lets
the web server run in mock mode without touching disk.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from treesmith.core.models.outcome import OperationResult


class FilesystemProvider(ABC):
    """Abstract base class for directory and file creation.

    Providers perform side effects and return results. They NEVER raise:
    failures are returned as ``OperationResult(success=False, ...)``.

    Paths are plan paths: ``/``-separated and usually relative. Each
    provider decides what they are relative to.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider identifier (e.g. 'local', 'mock')."""

    def is_available(self) -> bool:
        """Whether the provider can currently act. Must not raise."""
        return True

    @abstractmethod
    def create_directory(self, path: str) -> OperationResult:
        """Create a directory and any missing ancestors.

        An already existing directory is a success.
        """

    @abstractmethod
    def create_file(self, path: str) -> OperationResult:
        """Create (or truncate) a file, creating missing ancestor directories."""

    @abstractmethod
    def write_file(self, path: str, content: str) -> OperationResult:
        """Write ``content`` to an already created file."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
