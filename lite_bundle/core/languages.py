"""Dialect loader and parse entry point built on tree-sitter grammars."""

from __future__ import annotations

import functools
import importlib
from dataclasses import dataclass
from typing import Optional, Tuple

from tree_sitter import Language, Node as TSNode, Parser, Tree  # type: ignore

from ..errors import ParseFailure


SUPPORTED_DIALECTS = {
    "javascript": "javascript",
    "js": "javascript",
    "jsx": "javascript",
    "typescript": "typescript",
    "ts": "typescript",
    "tsx": "typescript",
}

# dialect -> (provider module, language factory)
# TSX is a superset of TS that also accepts JSX, which matches how bundles are written.
LANGUAGE_PROVIDER = {
    "javascript": ("tree_sitter_javascript", "language"),
    "typescript": ("tree_sitter_typescript", "language_tsx"),
}


@dataclass(frozen=True)
class ParsedSource:
    tree: Tree
    source: bytes
    dialect: str

    @property
    def root(self) -> TSNode:
        return self.tree.root_node


def normalize_dialect(value: Optional[str]) -> str:
    key = (value or "javascript").lower()
    if key not in SUPPORTED_DIALECTS:
        raise ValueError(f"Unsupported dialect: {value}")
    return SUPPORTED_DIALECTS[key]


@functools.lru_cache(maxsize=None)
def load_language(dialect: str) -> Language:
    module_name, factory = LANGUAGE_PROVIDER[normalize_dialect(dialect)]
    mod = importlib.import_module(module_name)
    return Language(getattr(mod, factory)())


@functools.lru_cache(maxsize=None)
def create_parser(dialect: str) -> Parser:
    """Create (and memoize) a parser for the given dialect."""
    return Parser(load_language(dialect))


def parse_source(text: str, *, dialect: Optional[str] = None) -> ParsedSource:
    """Parse ``text`` and reject trees that contain syntax errors.

    tree-sitter recovers from bad input by inserting ERROR/MISSING nodes; those
    trees are reported as ``ParseFailure`` so callers see a hard failure the
    way a strict parser would report it.
    """
    dialect = normalize_dialect(dialect)
    source = text.encode("utf-8")
    tree = create_parser(dialect).parse(source)
    root = tree.root_node
    if root.has_error:
        line, col = _first_error_point(root)
        raise ParseFailure(f"Unexpected token ({line}:{col})", line=line)
    return ParsedSource(tree=tree, source=source, dialect=dialect)


def _first_error_point(root: TSNode) -> Tuple[int, int]:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            row, col = node.start_point
            return row + 1, col
        if node.has_error:
            stack.extend(reversed(node.children))
    row, col = root.start_point
    return row + 1, col
