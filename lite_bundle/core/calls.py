"""Call graph extraction for a single named symbol using tree-sitter syntax shapes."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from tree_sitter import Node as TSNode  # type: ignore

from ..errors import UnitNotFound
from .ast_utils import (
    CLASS_DECLARATION_TYPES,
    CLASS_FIELD_TYPES,
    FUNCTION_DECLARATION_TYPES,
    MEMBER_NAME_TYPES,
    declarator_function,
    declarator_name,
    declared_name,
    enclosing_function,
    iter_preorder,
    node_text,
    start_line,
    unwrap_parens,
)
from .languages import ParsedSource, parse_source
from .models import CallGraph, IncomingCall, OutgoingCall, Snapshot, Unit, UnitError

logger = logging.getLogger(__name__)


CALL_NODE_TYPES = {"call_expression"}

TOP_LEVEL = "(top-level)"
ANONYMOUS = "(anonymous function)"


def find_declaration(root: TSNode, name: str) -> Optional[TSNode]:
    """First function, function-valued variable or class declaring ``name``."""
    for node in iter_preorder(root):
        if node.type in FUNCTION_DECLARATION_TYPES or node.type in CLASS_DECLARATION_TYPES:
            if declared_name(node) == name:
                return node
        elif node.type == "variable_declarator":
            if declarator_name(node) == name and declarator_function(node) is not None:
                return node
    return None


def callee_name(call: TSNode) -> str:
    """Render a call's callee: ``name``, ``obj.prop`` or ``.prop``; "" when unsupported."""
    fn = unwrap_parens(call.child_by_field_name("function"))
    if fn is None:
        return ""
    if fn.type == "identifier":
        return node_text(fn)
    if fn.type == "member_expression":
        prop = fn.child_by_field_name("property")
        if prop is None or prop.type != "property_identifier":
            return ""
        obj = unwrap_parens(fn.child_by_field_name("object"))
        if obj is not None and obj.type == "identifier":
            return f"{node_text(obj)}.{node_text(prop)}"
        return f".{node_text(prop)}"
    return ""


def calls_symbol(call: TSNode, name: str) -> bool:
    fn = unwrap_parens(call.child_by_field_name("function"))
    if fn is None:
        return False
    if fn.type == "identifier":
        return node_text(fn) == name
    if fn.type == "member_expression":
        prop = fn.child_by_field_name("property")
        return prop is not None and prop.type == "property_identifier" and node_text(prop) == name
    return False


def caller_label(call: TSNode) -> str:
    """Name the function whose body contains ``call``."""
    fn = enclosing_function(call)
    if fn is None:
        return TOP_LEVEL
    if fn.type in FUNCTION_DECLARATION_TYPES:
        return declared_name(fn) or ANONYMOUS
    parent = fn.parent
    if fn.type == "method_definition":
        if parent is not None and parent.type == "class_body":
            return _member_key(fn.child_by_field_name("name"))
        return ANONYMOUS
    if parent is not None and parent.type == "variable_declarator":
        return declarator_name(parent) or ANONYMOUS
    if parent is not None and parent.type in CLASS_FIELD_TYPES:
        # class Foo { handler = () => { ... } }
        key = parent.child_by_field_name("property") or parent.child_by_field_name("name")
        return _member_key(key)
    return ANONYMOUS


def _member_key(key: Optional[TSNode]) -> str:
    if key is not None and key.type in MEMBER_NAME_TYPES:
        return node_text(key)
    return ANONYMOUS


def outgoing_calls(declaration: TSNode) -> List[OutgoingCall]:
    calls: List[OutgoingCall] = []
    for node in iter_preorder(declaration):
        if node.type in CALL_NODE_TYPES:
            name = callee_name(node)
            if name:
                calls.append(OutgoingCall(name=name, line=start_line(node)))
    return calls


def incoming_calls(unit: Unit, root: TSNode, name: str) -> List[IncomingCall]:
    calls: List[IncomingCall] = []
    for node in iter_preorder(root):
        if node.type in CALL_NODE_TYPES and calls_symbol(node, name):
            calls.append(IncomingCall(caller_unit_id=unit.id, caller_name=caller_label(node), line=start_line(node)))
    return calls


def dedupe(edges):
    return list(dict.fromkeys(edges))


class _ParseMemo:
    """Parse each unit at most once per call-graph build; failures are remembered."""

    def __init__(self, dialect: Optional[str]) -> None:
        self.dialect = dialect
        self.parsed: Dict[str, Optional[ParsedSource]] = {}
        self.skipped: List[UnitError] = []

    def get(self, unit: Unit) -> Optional[ParsedSource]:
        if unit.id not in self.parsed:
            try:
                self.parsed[unit.id] = parse_source(unit.text, dialect=self.dialect)
            except Exception as e:
                logger.warning("Skipping unit %s during call graph build: %s", unit.id, e)
                self.parsed[unit.id] = None
                self.skipped.append(UnitError(unit_id=unit.id, error=str(e)))
        return self.parsed[unit.id]


def build_call_graph(
    snapshot: Snapshot,
    symbol: str,
    unit_id: str,
    *,
    scan_all_units: bool = False,
    dialect: Optional[str] = None,
) -> CallGraph:
    """Outgoing calls made by ``symbol`` in ``unit_id`` and incoming call sites referencing it."""
    if unit_id not in snapshot:
        raise UnitNotFound(unit_id)
    target = snapshot[unit_id]
    memo = _ParseMemo(dialect)
    graph = CallGraph(symbol=symbol, unit_id=unit_id)

    parsed = memo.get(target)
    if parsed is not None:
        decl = find_declaration(parsed.root, symbol)
        if decl is not None:
            graph.outgoing = dedupe(outgoing_calls(decl))
        else:
            logger.debug("No declaration of %s in unit %s", symbol, unit_id)

    if scan_all_units:
        # literal pre-filter before paying for a parse
        candidates = [u for u in snapshot.units() if symbol in u.text]
    else:
        candidates = [target]

    incoming: List[IncomingCall] = []
    for unit in candidates:
        parsed = memo.get(unit)
        if parsed is None:
            continue
        incoming.extend(incoming_calls(unit, parsed.root, symbol))
    graph.incoming = dedupe(incoming)
    graph.skipped = memo.skipped
    return graph
