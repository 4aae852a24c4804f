"""
Template catalog — the registry of project templates.

Loads the bundled catalog from ``treesmith/core/data/catalogs/`` plus
any extra catalog files named in configuration, once at startup. The
resulting :class:`TemplateCatalog` is read-only and is handed to
whoever needs it (CLI context, Flask app config, tests).

Usage::

    from treesmith.core.data import default_catalog

    catalog = default_catalog()
    for info in catalog.list_templates():
        print(info.id, info.description)
    template = catalog.get_template("go-project")

Catalog files are YAML::

    templates:
      - id: go-project
        description: Standard Go Project Structure
        directories: [cmd/app, internal/handler]
        files:
          go.mod: |
            module myproject
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

import yaml
from pydantic import ValidationError

from treesmith.core.config.loader import ConfigError
from treesmith.core.errors import TemplateNotFoundError
from treesmith.core.models.template import Template, TemplateInfo

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent
BUNDLED_CATALOG = _DATA_DIR / "catalogs" / "templates.yml"


class TemplateCatalog:
    """Read-only lookup table of templates, in catalog order.

    A template whose id was already seen replaces the earlier one but
    keeps its position in the listing.
    """

    def __init__(self, templates: Iterable[Template] = ()):
        ordered: dict[str, Template] = {}
        for template in templates:
            if template.id in ordered:
                logger.warning("Overriding template: %s", template.id)
            ordered[template.id] = template
        self._templates = MappingProxyType(ordered)

    def list_templates(self) -> list[TemplateInfo]:
        """All templates as ``(id, description)`` pairs, in stable order."""
        return [t.info for t in self._templates.values()]

    def get_template(self, template_id: str) -> Template:
        """Look up a template by id.

        Raises:
            TemplateNotFoundError: If the id is unknown.
        """
        try:
            return self._templates[template_id]
        except KeyError:
            raise TemplateNotFoundError(template_id) from None

    @property
    def ids(self) -> list[str]:
        return list(self._templates)

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._templates

    def __iter__(self) -> Iterator[Template]:
        return iter(self._templates.values())

    def __len__(self) -> int:
        return len(self._templates)


def load_catalog_file(path: Path) -> list[Template]:
    """Load the templates defined in one YAML catalog file.

    Raises:
        ConfigError: If the file is unreadable or malformed.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read template catalog {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("templates"), list):
        raise ConfigError(f"Expected a 'templates' list in {path}")

    templates: list[Template] = []
    for i, entry in enumerate(data["templates"]):
        try:
            templates.append(Template.model_validate(entry))
        except ValidationError as e:
            raise ConfigError(f"Invalid template #{i + 1} in {path}: {e}") from e

    logger.debug("Loaded %d templates from %s", len(templates), path)
    return templates


def load_catalog(extra_paths: Iterable[Path] = ()) -> TemplateCatalog:
    """Build a catalog from the bundled file plus ``extra_paths``, in order."""
    templates = load_catalog_file(BUNDLED_CATALOG)
    for path in extra_paths:
        templates.extend(load_catalog_file(Path(path)))

    catalog = TemplateCatalog(templates)
    logger.info("Template catalog ready: %d templates", len(catalog))
    return catalog


@lru_cache(maxsize=1)
def default_catalog() -> TemplateCatalog:
    """The bundled catalog, loaded once per process."""
    return load_catalog()
