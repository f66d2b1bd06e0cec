"""Locate the source span of a single declared symbol."""

from __future__ import annotations

from typing import Optional

from tree_sitter import Node as TSNode  # type: ignore

from ..errors import SymbolNotFound
from .ast_utils import (
    CLASS_DECLARATION_TYPES,
    FUNCTION_DECLARATION_TYPES,
    VARIABLE_DECLARATION_TYPES,
    declaration_keyword,
    declarator_name,
    declared_name,
    iter_preorder,
    node_text,
    span_for,
)
from .languages import ParsedSource
from .models import SymbolSpan


def find_symbol(parsed: ParsedSource, name: str) -> SymbolSpan:
    """Return the first declaration of ``name`` in pre-order.

    Matches function declarations, class declarations and variable declarators
    bound to a plain identifier. A declarator match is widened to its
    declaration statement so the keyword is part of the returned text.
    """
    for node in iter_preorder(parsed.root):
        if node.type in FUNCTION_DECLARATION_TYPES or node.type in CLASS_DECLARATION_TYPES:
            if declared_name(node) == name:
                kind = "class" if node.type in CLASS_DECLARATION_TYPES else "function"
                return SymbolSpan(name=name, kind=kind, span=span_for(node), text=node_text(node))
        elif node.type == "variable_declarator":
            if declarator_name(node) == name:
                return _declaration_span(name, node)
        elif node.type == "for_in_statement":
            # for (const item of items): the binding has no variable_declarator
            kind = node.child_by_field_name("kind")
            left = node.child_by_field_name("left")
            if kind is not None and left is not None and left.type == "identifier" and node_text(left) == name:
                return _loop_binding_span(name, kind, left)
    raise SymbolNotFound(name)


def _loop_binding_span(name: str, kind: TSNode, left: TSNode) -> SymbolSpan:
    start, end = span_for(kind), span_for(left)
    span = (start[0], start[1], end[2], end[3])
    return SymbolSpan(name=name, kind="variable", span=span, text=f"{node_text(kind)} {node_text(left)}")


def _declaration_span(name: str, declarator: TSNode) -> SymbolSpan:
    statement: Optional[TSNode] = declarator.parent
    if statement is None or statement.type not in VARIABLE_DECLARATION_TYPES:
        return SymbolSpan(name=name, kind="variable", span=span_for(declarator), text=node_text(declarator))

    declarators = [c for c in statement.named_children if c.type == "variable_declarator"]
    if len(declarators) == 1:
        return SymbolSpan(name=name, kind="variable", span=span_for(statement), text=node_text(statement))

    # const a = 1, b = 2; -> only the requested binding, keyword kept
    text = f"{declaration_keyword(declarator)} {node_text(declarator)};"
    return SymbolSpan(name=name, kind="variable", span=span_for(declarator), text=text)
