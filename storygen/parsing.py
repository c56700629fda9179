"""Tree-sitter parsing of TypeScript component sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

from .logging import get_logger
from .tree import FileTree

_LOGGER = get_logger("parsing")

TYPESCRIPT = Language(tree_sitter_typescript.language_typescript())


class SourceUnavailableError(RuntimeError):
    """Raised when a component source file cannot be read or parsed."""


@dataclass
class SourceTree:
    """A parsed source file."""

    path: str
    source: bytes
    root: Node


def parse_typescript(source: bytes, path: str = "<memory>") -> SourceTree:
    """Parse TypeScript ``source`` into a syntax tree."""
    parser = Parser(TYPESCRIPT)
    tree = parser.parse(source)
    if tree.root_node.has_error:
        # tree-sitter recovers from syntax errors; the partial tree is still usable.
        _LOGGER.debug("Syntax errors while parsing %s", path)
    return SourceTree(path=path, source=source, root=tree.root_node)


def get_ts_source_file(tree: FileTree, path: str) -> SourceTree:
    """Read ``path`` from ``tree`` and parse it as TypeScript."""
    try:
        content = tree.read(path)
        content.decode("utf-8")
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        raise SourceUnavailableError(f"Could not read TS file ({path}).") from exc
    return parse_typescript(content, path)


def iter_descendants(node: Node) -> Iterator[Node]:
    """Yield every descendant of ``node`` in source (pre-order) order."""
    for child in node.children:
        yield child
        yield from iter_descendants(child)


def find_descendants(node: Node, node_type: str) -> List[Node]:
    """Return descendants of ``node`` whose grammar type is ``node_type``."""
    return [child for child in iter_descendants(node) if child.type == node_type]


def node_text(node: Node) -> str:
    text = node.text
    return text.decode("utf-8", errors="ignore") if text is not None else ""


__all__ = [
    "SourceTree",
    "SourceUnavailableError",
    "find_descendants",
    "get_ts_source_file",
    "iter_descendants",
    "node_text",
    "parse_typescript",
]
