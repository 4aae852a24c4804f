"""
Flat-list parser — ``d:``/``f:`` prefixed path definitions.

Format, one entry per line::

    d:src
    d:src/api
    f:src/api/users.go
    f:README.md

Lines with any other prefix are ignored. Ordering is left to the plan
builder.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from treesmith.core.models.structure import ParsedStructure

logger = logging.getLogger(__name__)

DIR_PREFIX = "d:"
FILE_PREFIX = "f:"


def parse_flat_list(text: str) -> ParsedStructure:
    """Parse ``d:``/``f:`` lines into a ParsedStructure.

    File contents are always empty. Trailing slashes are dropped, so
    ``d:a`` and ``d:a/`` name the same directory.
    """
    directories: set[str] = set()
    files: dict[str, str] = {}

    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue

        if line.startswith(DIR_PREFIX):
            path = line[len(DIR_PREFIX):].strip().rstrip("/")
            if path:
                directories.add(path)
        elif line.startswith(FILE_PREFIX):
            path = line[len(FILE_PREFIX):].strip().rstrip("/")
            if path:
                files[path] = ""
        else:
            logger.debug("Ignoring line %d: %r", line_number, line)

    return ParsedStructure(directories=frozenset(directories), files=files)


def render_flat_list(
    directories: Iterable[str],
    files: Mapping[str, str] | Iterable[str],
) -> str:
    """Render paths back into ``d:``/``f:`` lines (contents are dropped)."""
    lines = [f"{DIR_PREFIX}{d}" for d in directories]
    lines += [f"{FILE_PREFIX}{f}" for f in files]
    return "\n".join(lines)
