"""Whole-document structural summary (a table of contents, not the code)."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .ast_utils import (
    CLASS_DECLARATION_TYPES,
    FUNCTION_DECLARATION_TYPES,
    VARIABLE_DECLARATION_TYPES,
    declarator_name,
    declared_name,
    iter_preorder,
)
from .languages import parse_source


def analyze_structure(text: str, limit: int, *, dialect: Optional[str] = None) -> Dict[str, Any]:
    """Summarize functions, classes, named exports and variable counts.

    Raises ``ParseFailure`` when the document does not parse.
    """
    parsed = parse_source(text, dialect=dialect)
    functions: List[str] = []
    classes: List[str] = []
    exports: List[str] = []
    variables: List[str] = []

    for node in iter_preorder(parsed.root):
        if node.type in FUNCTION_DECLARATION_TYPES:
            name = declared_name(node)
            if name:
                functions.append(name)
        elif node.type in CLASS_DECLARATION_TYPES:
            name = declared_name(node)
            if name:
                classes.append(name)
        elif node.type in VARIABLE_DECLARATION_TYPES:
            variables.extend(_bound_names(node))
        elif node.type == "export_statement":
            exports.extend(_exported_names(node))

    return {
        "functions": functions[:limit],
        "classes": classes[:limit],
        "exports": exports[:limit],
        "total_functions": len(functions),
        "total_variables": len(variables),
        "message": "Summary generated. Use get_module or get_symbol_source for specific parts.",
    }


def _bound_names(declaration) -> List[str]:
    names = []
    for child in declaration.named_children:
        if child.type == "variable_declarator":
            name = declarator_name(child)
            if name:
                names.append(name)
    return names


def _exported_names(export) -> List[str]:
    # default exports are not named exports
    if any(child.type == "default" for child in export.children):
        return []
    decl = export.child_by_field_name("declaration")
    if decl is None:
        return []
    if decl.type in FUNCTION_DECLARATION_TYPES:
        name = declared_name(decl)
        return [name] if name else []
    if decl.type in VARIABLE_DECLARATION_TYPES:
        return _bound_names(decl)
    return []
