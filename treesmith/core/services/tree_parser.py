"""
Tree-text parser — turns a pasted ASCII tree into a ParsedStructure.

Accepts the output of ``tree`` and hand-drawn listings::

    myapp/
    ├── src/
    │   ├── main.go
    │   └── utils.go
    └── README.md       # project readme

Parsing happens in two steps. A tokenizer reduces each line to a
``(depth, name)`` token, then a path stack turns tokens into full paths.
Depth is inferred purely from the ``│`` continuation markers:

    - the first named line is the root (depth 0), whatever its indent
    - every later line is ``verticalRuns + 1``, with or without a
      ``├``/``└`` connector

A plain-indented line after the root therefore always lands at depth 1.
Directories and files are told apart by :func:`has_file_extension`.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from treesmith.core.models.structure import ParsedStructure

logger = logging.getLogger(__name__)

VERTICAL = "│"

# Stripped repeatedly, in this order, until the line stops changing.
_CONNECTORS = ("│", "├──", "├─", "└──", "└─")

# ``tree`` pads with no-break spaces.
_BLANKS = " \t\u00a0"

_GENERIC_EXT_RE = re.compile(r"[A-Za-z0-9]{2,10}")

FILE_EXTENSIONS: tuple[str, ...] = (
    ".java", ".go", ".py", ".js", ".ts", ".jsx", ".tsx",
    ".c", ".cpp", ".h", ".hpp", ".cs", ".rb", ".php",
    ".html", ".css", ".scss", ".sass", ".json", ".xml",
    ".yaml", ".yml", ".md", ".txt", ".sh", ".bat", ".ps1",
    ".sql", ".rs", ".kt", ".swift", ".m", ".mm", ".r",
    ".pl", ".lua", ".dart", ".vue", ".svelte", ".class",
    ".exe", ".dll", ".so", ".jar", ".war", ".properties",
    ".toml", ".ini", ".conf", ".lock", ".log",
)


@dataclass(frozen=True)
class TreeToken:
    """One named line of a tree diagram."""

    depth: int
    name: str
    line_number: int

    @property
    def is_file(self) -> bool:
        return has_file_extension(self.name)


def has_file_extension(name: str) -> bool:
    """Whether a tree entry name looks like a file.

    Known extensions match case-insensitively. Anything else counts as a
    file when its last ``.``-segment is 2–10 alphanumerics and the dot is
    not the first character, so ``archive.tar.gz`` is a file while
    ``src``, ``Makefile`` and ``.github`` are directories.
    """
    lowered = name.lower()
    if lowered.endswith(FILE_EXTENSIONS):
        return True

    idx = name.rfind(".")
    if 0 < idx < len(name) - 1:
        return _GENERIC_EXT_RE.fullmatch(name[idx + 1:]) is not None
    return False


def _count_vertical_runs(content: str) -> int:
    """Count leading ``│`` markers, each optionally followed by blanks."""
    runs = 0
    rest = content
    while rest.startswith(VERTICAL):
        runs += 1
        rest = rest[len(VERTICAL):].lstrip(_BLANKS)
    return runs


def _strip_connectors(content: str) -> str:
    while True:
        before = content
        for connector in _CONNECTORS:
            if content.startswith(connector):
                content = content[len(connector):]
        content = content.lstrip(_BLANKS)
        if content == before:
            return content


def _clean_name(content: str) -> str:
    name = _strip_connectors(content)
    name = name.split("#", 1)[0].strip(_BLANKS)
    return name.rstrip("/").strip(_BLANKS)


def tokenize_tree(text: str) -> list[TreeToken]:
    """Reduce tree text to ``(depth, name)`` tokens.

    Blank lines, lines made only of connectors and comment-only lines
    produce no token.
    """
    tokens: list[TreeToken] = []

    for line_number, raw in enumerate(text.splitlines(), start=1):
        if not raw.strip():
            continue

        content = raw.lstrip(_BLANKS)
        name = _clean_name(content)
        if not name:
            continue

        if not tokens:
            depth = 0
        else:
            # Same depth rule with or without a ├/└ connector.
            depth = _count_vertical_runs(content) + 1

        tokens.append(TreeToken(depth=depth, name=name, line_number=line_number))

    return tokens


def _place(
    stack: tuple[str, ...], token: TreeToken
) -> tuple[str, tuple[str, ...]]:
    """Resolve a token against the ancestor stack.

    Returns the token's full path and the stack to use for the next
    token. Files never extend the stack.
    """
    parents = stack[: token.depth]
    full_path = "/".join((*parents, token.name))
    if token.is_file:
        return full_path, parents
    return full_path, (*parents, token.name)


def parse_tree_text(text: str) -> ParsedStructure:
    """Parse a tree diagram into directories and (empty) files."""
    directories: set[str] = set()
    files: dict[str, str] = {}
    stack: tuple[str, ...] = ()

    for token in tokenize_tree(text):
        full_path, stack = _place(stack, token)
        if token.is_file:
            files[full_path] = ""
        else:
            directories.add(full_path)

    logger.debug(
        "Parsed tree: %d directories, %d files", len(directories), len(files)
    )
    return ParsedStructure(directories=frozenset(directories), files=files)
