"""Symbol inventory across cached units."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from tree_sitter import Node as TSNode  # type: ignore

from .ast_utils import (
    CLASS_DECLARATION_TYPES,
    FUNCTION_DECLARATION_TYPES,
    declaration_keyword,
    declarator_function,
    declarator_name,
    declared_name,
    end_line,
    iter_preorder,
    node_text,
    parameter_nodes,
    start_line,
)
from .languages import ParsedSource, parse_source
from .models import SymbolDescriptor, Unit, UnitError

logger = logging.getLogger(__name__)


DESTRUCTURED = "{destructured}"
PATTERN_TYPES = {"object_pattern", "array_pattern"}


def render_parameter(node: TSNode) -> str:
    t = node.type
    if t == "identifier":
        return node_text(node)
    if t in PATTERN_TYPES:
        return DESTRUCTURED
    if t == "assignment_pattern":
        left = node.child_by_field_name("left")
        if left is not None and left.type == "identifier":
            return node_text(left) + "?"
        return DESTRUCTURED
    if t == "rest_pattern":
        inner = [c for c in node.named_children if c.type != "comment"]
        return "..." + (render_parameter(inner[0]) if inner else "")
    # TSX wraps every parameter: (a: string = "x", b?: number)
    if t in ("required_parameter", "optional_parameter"):
        pattern = node.child_by_field_name("pattern")
        if pattern is None:
            return node_text(node)
        rendered = render_parameter(pattern)
        if rendered != DESTRUCTURED and (t == "optional_parameter" or node.child_by_field_name("value") is not None):
            rendered += "?"
        return rendered
    return node_text(node)


def render_parameters(fn: TSNode) -> List[str]:
    return [render_parameter(p) for p in parameter_nodes(fn)]


def _function_prefix(fn: TSNode) -> str:
    return "async " if fn.children and fn.children[0].type == "async" else ""


def _is_generator(fn: TSNode) -> bool:
    return fn.type.startswith("generator_function")


def function_signature(node: TSNode, name: str, params: List[str]) -> str:
    star = "*" if _is_generator(node) else ""
    return f"{_function_prefix(node)}function{star} {name}({', '.join(params)})"


def variable_function_signature(declarator: TSNode, fn: TSNode, name: str, params: List[str]) -> str:
    keyword = declaration_keyword(declarator)
    joined = ", ".join(params)
    if fn.type == "arrow_function":
        return f"{keyword} {name} = {_function_prefix(fn)}({joined}) => ..."
    star = "*" if _is_generator(fn) else ""
    return f"{keyword} {name} = {_function_prefix(fn)}function{star}({joined}) ..."


def _descriptor(unit: Unit, node: TSNode, name: str, kind: str, params: List[str], signature: str) -> SymbolDescriptor:
    first = start_line(node)
    return SymbolDescriptor(
        unit_id=unit.id,
        unit_path=unit.path,
        name=name,
        kind=kind,
        start_line=first,
        line_count=end_line(node) - first + 1,
        parameters=tuple(params),
        signature=signature,
    )


def collect_symbols(unit: Unit, parsed: ParsedSource) -> List[SymbolDescriptor]:
    """Collect function, class and function-valued variable declarations in pre-order."""
    symbols: List[SymbolDescriptor] = []
    for node in iter_preorder(parsed.root):
        if node.type in FUNCTION_DECLARATION_TYPES:
            name = declared_name(node)
            if name:
                params = render_parameters(node)
                symbols.append(_descriptor(unit, node, name, "function", params, function_signature(node, name, params)))
        elif node.type in CLASS_DECLARATION_TYPES:
            name = declared_name(node)
            if name:
                symbols.append(_descriptor(unit, node, name, "class", [], f"class {name}"))
        elif node.type == "variable_declarator":
            # const foo = () => {} / var foo = function() {}
            name = declarator_name(node)
            fn = declarator_function(node) if name else None
            if fn is not None:
                params = render_parameters(fn)
                signature = variable_function_signature(node, fn, name, params)
                symbols.append(_descriptor(unit, node, name, "variable_function", params, signature))
    return symbols


def scan_symbols(
    units: Iterable[Unit],
    *,
    limit: Optional[int] = None,
    dialect: Optional[str] = None,
    skipped: Optional[List[UnitError]] = None,
) -> List[SymbolDescriptor]:
    """Inventory symbols over ``units`` in order, truncated at ``limit``.

    Units that fail to parse contribute nothing; they are logged and, when a
    ``skipped`` list is given, recorded there.
    """
    results: List[SymbolDescriptor] = []
    for unit in units:
        if limit is not None and len(results) >= limit:
            break
        try:
            found = collect_symbols(unit, parse_source(unit.text, dialect=dialect))
        except Exception as e:
            logger.warning("Skipping unit %s during symbol scan: %s", unit.id, e)
            if skipped is not None:
                skipped.append(UnitError(unit_id=unit.id, error=str(e)))
            continue
        results.extend(found)
    if limit is not None:
        return results[: max(0, limit)]
    return results
