"""
Mock filesystem provider — records calls instead of touching disk.

Used by tests and by ``--mock`` mode. Succeeds for everything unless a
path has been configured to fail.
"""

from __future__ import annotations

from dataclasses import dataclass

from treesmith.adapters.base import FilesystemProvider
from treesmith.core.models.outcome import OperationResult


@dataclass(frozen=True)
class ProviderCall:
    """One recorded provider call."""

    operation: str  # 'create_directory' | 'create_file' | 'write_file'
    path: str
    content: str | None = None


class MockFilesystemProvider(FilesystemProvider):
    """Universal provider double.

    Failures are keyed by ``(operation, path)``; passing no operation to
    :meth:`set_failure` fails every operation on that path.
    """

    def __init__(self, provider_name: str = "mock", available: bool = True):
        self._name = provider_name
        self._available = available
        self._failures: dict[tuple[str | None, str], str] = {}
        self._call_log: list[ProviderCall] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[ProviderCall]:
        """Every call this mock has received, in order."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    def is_available(self) -> bool:
        return self._available

    def set_failure(
        self,
        path: str,
        message: str = "Mock failure",
        operation: str | None = None,
    ) -> None:
        """Make calls on ``path`` fail (optionally only one operation)."""
        self._failures[(operation, path)] = message

    def _answer(self, operation: str, path: str, content: str | None = None) -> OperationResult:
        self._call_log.append(ProviderCall(operation=operation, path=path, content=content))
        message = self._failures.get((operation, path)) or self._failures.get((None, path))
        if message is not None:
            return OperationResult.failure(message)
        return OperationResult.ok(f"[mock] {operation} {path}")

    def create_directory(self, path: str) -> OperationResult:
        return self._answer("create_directory", path)

    def create_file(self, path: str) -> OperationResult:
        return self._answer("create_file", path)

    def write_file(self, path: str, content: str) -> OperationResult:
        return self._answer("write_file", path, content)

    def paths(self, operation: str | None = None) -> list[str]:
        """Paths called, optionally filtered by operation."""
        return [c.path for c in self._call_log if operation in (None, c.operation)]

    def reset(self) -> None:
        """Clear call log and configured failures."""
        self._call_log.clear()
        self._failures.clear()
