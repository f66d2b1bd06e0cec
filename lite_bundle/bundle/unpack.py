"""Unpack / deobfuscate raw source into a rewritten text or a set of units.

Two passes:
1) jsbeautifier unpackers (p.a.c.k.e.r, javascriptobfuscator, myobfuscate,
   urlencode) rewrite packed/obfuscated text in place.
2) when unbundling is requested, a tree-sitter pass looks for a webpack module
   table and turns every module factory into a unit.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from jsbeautifier import unpackers
from tree_sitter import Node as TSNode  # type: ignore

from ..core.ast_utils import FUNCTION_EXPRESSION_TYPES, declarator_name, iter_preorder, node_text, unwrap_parens
from ..core.languages import parse_source
from ..core.models import Unit, UnpackResult
from ..errors import ParseFailure, TransformError

logger = logging.getLogger(__name__)


WEBPACK_MODULES_VARS = {"__webpack_modules__"}


def unpack(
    text: str,
    *,
    unbundle: bool = True,
    mangle: bool = False,
    jsx: bool = True,
    dialect: Optional[str] = None,
) -> UnpackResult:
    """Rewrite packed code and, if ``unbundle``, split a webpack bundle into units."""
    if mangle:
        logger.debug("mangle requested; identifier renaming is not available, leaving names as-is")
    if not jsx:
        logger.debug("jsx=False has no effect; both grammars accept JSX")
    try:
        code = unpackers.run(text)
    except unpackers.UnpackingError as e:
        raise TransformError(f"Failed to unpack code: {e}") from e

    if not unbundle:
        return UnpackResult(code=code)

    units = split_webpack(code, dialect=dialect)
    if units is None:
        return UnpackResult(code=code)
    logger.info("Split webpack bundle into %d modules", len(units))
    return UnpackResult(code=code, units=tuple(units))


def split_webpack(code: str, *, dialect: Optional[str] = None) -> Optional[List[Unit]]:
    """Return one unit per module factory, or None when ``code`` is not a webpack bundle."""
    try:
        parsed = parse_source(code, dialect=dialect)
    except ParseFailure as e:
        logger.debug("Not splitting bundle, source does not parse: %s", e)
        return None

    for node in iter_preorder(parsed.root):
        if node.type == "call_expression":
            table = _bootstrap_table(node)
        elif node.type == "variable_declarator" and declarator_name(node) in WEBPACK_MODULES_VARS:
            # webpack 5: var __webpack_modules__ = ({ "./src/a.js": (...) => {...} })
            table = unwrap_parens(node.child_by_field_name("value"))
        else:
            continue
        units = _units_from_table(table)
        if units:
            return units
    return None


def _bootstrap_table(call: TSNode) -> Optional[TSNode]:
    """webpack 4: (function(modules) { ... })([f0, f1, ...]) or ({ "./a.js": f })."""
    fn = unwrap_parens(call.child_by_field_name("function"))
    if fn is None or fn.type not in FUNCTION_EXPRESSION_TYPES:
        return None
    if fn.child_by_field_name("parameter") is None:
        params = fn.child_by_field_name("parameters")
        if params is None or not params.named_children:
            return None
    args = call.child_by_field_name("arguments")
    if args is None:
        return None
    values = [c for c in args.named_children if c.type != "comment"]
    if not values:
        return None
    first = unwrap_parens(values[0])
    if first is not None and first.type in ("array", "object"):
        return first
    return None


def _units_from_table(table: Optional[TSNode]) -> Optional[List[Unit]]:
    if table is None:
        return None
    if table.type == "array":
        entries = _array_entries(table)
    elif table.type == "object":
        entries = _object_entries(table)
    else:
        return None
    if not entries:
        return None

    units: List[Unit] = []
    for module_id, value in entries:
        factory = unwrap_parens(value)
        if factory is None or factory.type not in FUNCTION_EXPRESSION_TYPES:
            return None
        path = module_id if ("/" in module_id or module_id.endswith(".js")) else f"./{module_id}.js"
        units.append(Unit(id=module_id, path=path, text=_factory_body(factory)))
    return units


def _array_entries(array: TSNode):
    entries = []
    index = 0
    for child in array.children:
        if child.type in ("[", "]", "comment"):
            continue
        if child.type == ",":
            index += 1
            continue
        entries.append((str(index), child))
    return entries


def _object_entries(obj: TSNode):
    # a repeated key keeps its first position and its last value, as in a JS object literal
    entries = {}
    for child in obj.named_children:
        if child.type == "comment":
            continue
        if child.type != "pair":
            return None
        key = child.child_by_field_name("key")
        value = child.child_by_field_name("value")
        if key is None or value is None:
            return None
        key_text = node_text(key)
        if key.type == "string":
            key_text = key_text[1:-1]
        entries[key_text] = value
    return list(entries.items())


def _factory_body(factory: TSNode) -> str:
    body = factory.child_by_field_name("body")
    if body is None:
        return ""
    text = node_text(body)
    if body.type == "statement_block":
        text = text[1:-1]
    return text.strip()
