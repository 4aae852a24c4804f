"""
Configuration loader — reads treesmith.yml into a Settings model.

The config file is optional. When present it is found by walking up
from the working directory (or passed explicitly with --config), read
as YAML and validated against the Pydantic schema. Relative paths in
it are resolved against the directory holding the file.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from treesmith.core.models.settings import Settings

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "treesmith.yml"


class ConfigError(Exception):
    """Raised when configuration is invalid or unreadable."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for treesmith.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to treesmith.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_settings(path: Path | None = None) -> Settings:
    """Load and validate configuration.

    Args:
        path: Explicit path to treesmith.yml. If None, searches upward
            and falls back to defaults when nothing is found.

    Returns:
        Validated Settings with absolute ``base_dir`` and ``catalogs``.

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No %s found, using defaults", CONFIG_FILE)
            return _resolve_paths(Settings(), Path.cwd())
    elif not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    return _resolve_paths(settings, path.parent.resolve())


def _resolve_paths(settings: Settings, anchor: Path) -> Settings:
    """Make base_dir and catalog paths absolute, relative to ``anchor``."""
    return settings.model_copy(update={
        "base_dir": str((anchor / settings.base_dir).resolve()),
        "catalogs": [str((anchor / c).resolve()) for c in settings.catalogs],
    })
