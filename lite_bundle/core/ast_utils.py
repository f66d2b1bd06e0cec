"""tree-sitter node helpers shared by the locator, inventory and call graph."""

from __future__ import annotations

from typing import Iterator, List, Optional

from tree_sitter import Node as TSNode  # type: ignore

from .models import Span


FUNCTION_DECLARATION_TYPES = {
    "function_declaration",
    "generator_function_declaration",
}

FUNCTION_EXPRESSION_TYPES = {
    "function_expression",
    "function",  # tree-sitter-javascript < 0.21
    "generator_function",
    "arrow_function",
}

CLASS_DECLARATION_TYPES = {
    "class_declaration",
    "abstract_class_declaration",  # TSX
}

VARIABLE_DECLARATION_TYPES = {
    "lexical_declaration",  # let / const
    "variable_declaration",  # var
}

CLASS_FIELD_TYPES = {
    "field_definition",
    "public_field_definition",  # TSX
}

# Anything that opens a new function scope for caller attribution.
FUNCTION_LIKE_TYPES = FUNCTION_DECLARATION_TYPES | FUNCTION_EXPRESSION_TYPES | {"method_definition"}

MEMBER_NAME_TYPES = {"property_identifier", "private_property_identifier", "identifier"}


def node_text(node: Optional[TSNode]) -> str:
    if node is None:
        return ""
    return node.text.decode("utf-8", errors="ignore")


def span_for(node: TSNode) -> Span:
    sl, sc = node.start_point
    el, ec = node.end_point
    return (sl + 1, sc + 1, el + 1, ec + 1)


def start_line(node: TSNode) -> int:
    return node.start_point[0] + 1


def end_line(node: TSNode) -> int:
    return node.end_point[0] + 1


def iter_preorder(root: TSNode) -> Iterator[TSNode]:
    """Depth-first, parent-before-children, left-to-right."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def unwrap_parens(node: Optional[TSNode]) -> Optional[TSNode]:
    while node is not None and node.type == "parenthesized_expression":
        inner = [c for c in node.named_children if c.type != "comment"]
        node = inner[0] if inner else None
    return node


def declarator_name(node: TSNode) -> str:
    """Bound identifier of a variable_declarator ("" for destructuring patterns)."""
    name = node.child_by_field_name("name")
    if name is None or name.type != "identifier":
        return ""
    return node_text(name)


def declarator_function(node: TSNode) -> Optional[TSNode]:
    """Function/arrow initializer of a variable_declarator, if it has one."""
    value = unwrap_parens(node.child_by_field_name("value"))
    if value is not None and value.type in FUNCTION_EXPRESSION_TYPES:
        return value
    return None


def declaration_keyword(declarator: TSNode) -> str:
    parent = declarator.parent
    if parent is not None and parent.type in VARIABLE_DECLARATION_TYPES and parent.children:
        return node_text(parent.children[0])
    return "const"


def declared_name(node: TSNode) -> str:
    """Name of a function/class declaration node, "" when anonymous."""
    return node_text(node.child_by_field_name("name"))


def parameter_nodes(fn: TSNode) -> List[TSNode]:
    single = fn.child_by_field_name("parameter")
    if single is not None:
        # arrow shorthand: x => x + 1
        return [single]
    params = fn.child_by_field_name("parameters")
    if params is None:
        return []
    return [c for c in params.named_children if c.type != "comment"]


def enclosing_function(node: TSNode) -> Optional[TSNode]:
    parent = node.parent
    while parent is not None:
        if parent.type in FUNCTION_LIKE_TYPES:
            return parent
        parent = parent.parent
    return None
