"""
Local filesystem provider — creates entries on disk with pathlib.
"""

from __future__ import annotations

import logging
from pathlib import Path

from treesmith.adapters.base import FilesystemProvider
from treesmith.core.models.outcome import OperationResult

logger = logging.getLogger(__name__)


class LocalFilesystemProvider(FilesystemProvider):
    """Directory and file creation on the local disk.

    Relative plan paths are resolved against ``base_dir``; absolute ones
    are used as given.
    """

    def __init__(self, base_dir: Path | str | None = None):
        self._base_dir = Path(base_dir) if base_dir else Path.cwd()

    @property
    def name(self) -> str:
        return "local"

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def is_available(self) -> bool:
        return self._base_dir.is_dir()

    def resolve(self, path: str) -> Path:
        target = Path(path)
        if not target.is_absolute():
            target = self._base_dir / target
        return target

    def create_directory(self, path: str) -> OperationResult:
        target = self.resolve(path)
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.debug("mkdir %s failed: %s", target, e)
            return OperationResult.failure(f"Cannot create directory {target}: {e}")
        return OperationResult.ok("Directory created successfully")

    def create_file(self, path: str) -> OperationResult:
        target = self.resolve(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(b"")
        except OSError as e:
            logger.debug("create %s failed: %s", target, e)
            return OperationResult.failure(f"Cannot create file {target}: {e}")
        return OperationResult.ok("File created successfully")

    def write_file(self, path: str, content: str) -> OperationResult:
        target = self.resolve(path)
        try:
            target.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.debug("write %s failed: %s", target, e)
            return OperationResult.failure(f"Cannot write {target}: {e}")
        return OperationResult.ok(f"Written {len(content)} bytes")
