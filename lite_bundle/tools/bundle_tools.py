"""Bundle tool functions (pure Python).

All functions take keyword arguments, return plain text or JSON-serializable
structures, and raise a ``BundleError`` subclass on failure. Everything except
``deobfuscate`` is a read-only query:
1) Run deobfuscate(code=...) to unpack and cache a bundle.
2) Call list/search/inventory/call-graph tools against the cached bundle.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List, Optional

from ..bundle.cache import UnitCache, get_default_cache
from ..bundle.formatting import pretty_print
from ..bundle.search import search_units
from ..bundle.unpack import unpack
from ..bundle.vendor import is_vendor_path, list_units
from ..config import BundleConfig, get_config
from ..core.calls import build_call_graph
from ..core.languages import parse_source
from ..core.locator import find_symbol
from ..core.models import Unit
from ..core.structure import analyze_structure as summarize_structure
from ..core.symbol_index import scan_symbols
from ..errors import MissingInput, UnknownTool
from ..util.file_utils import resolve_source
from .docs import TOOL_DOCS


ENTRY_ID = "(entry)"


def _cache(cache: Optional[UnitCache]) -> UnitCache:
    return cache if cache is not None else get_default_cache()


def _format(text: str, config: BundleConfig, parser: str = "babel") -> str:
    return pretty_print(text, parser=parser, indent_size=config.indent_size)


# ----------------------------
# Unpack (the only writer)
# ----------------------------


def deobfuscate(
    *,
    code: Optional[str] = None,
    file_path: Optional[str] = None,
    unbundle: bool = True,
    return_code: bool = False,
    mangle: bool = False,
    jsx: bool = True,
    skip_vendor: bool = False,
    cache: Optional[UnitCache] = None,
    config: Optional[BundleConfig] = None,
) -> str:
    """Unpack ``code`` and replace the cached bundle with the result."""
    config = config or get_config()
    source = resolve_source(code, file_path, config)
    result = unpack(source, unbundle=unbundle, mangle=mangle, jsx=jsx, dialect=config.dialect)

    if result.units is not None:
        units = list(result.units)
    else:
        units = [Unit(id=ENTRY_ID, path=ENTRY_ID, text=result.code)]
    total = len(units)
    if skip_vendor:
        units = [u for u in units if not is_vendor_path(u.path)]
    skipped = total - len(units)

    response = None
    if return_code:
        banner = ""
        if result.is_bundle:
            banner = (
                f"// Unbundled {total} modules.\n"
                "// Use 'list_modules' to see them all.\n"
                "// Main entry point:\n"
            )
        # format before touching the cache so a failure leaves the old bundle in place
        response = _format(banner + result.code, config)

    snapshot = _cache(cache).replace(units)

    if response is not None:
        return response
    summary = f"Deobfuscation complete. Cached {len(snapshot)} module(s)"
    if skipped:
        summary += f" ({skipped} vendor module(s) skipped)"
    return summary + ". Use 'list_modules' to explore them or set return_code=true to see the code."


# ----------------------------
# Cached bundle queries
# ----------------------------


def list_modules(*, exclude_vendor: bool = False, cache: Optional[UnitCache] = None) -> List[Dict[str, Any]]:
    snapshot = _cache(cache).current()
    return [asdict(row) for row in list_units(snapshot, exclude_vendor=exclude_vendor)]


def get_module(*, id: str, cache: Optional[UnitCache] = None, config: Optional[BundleConfig] = None) -> str:
    """Formatted text of one cached module."""
    unit = _cache(cache).get(id)
    return _format(unit.text, config or get_config())


def search_modules(
    *,
    query: str,
    is_regex: bool = False,
    limit: Optional[int] = None,
    cache: Optional[UnitCache] = None,
    config: Optional[BundleConfig] = None,
) -> List[Dict[str, str]]:
    config = config or get_config()
    snapshot = _cache(cache).current()
    return search_units(snapshot, query, is_regex=is_regex, limit=config.default_limit if limit is None else limit)


def list_functions(
    *,
    module_id: Optional[str] = None,
    limit: Optional[int] = None,
    cache: Optional[UnitCache] = None,
    config: Optional[BundleConfig] = None,
) -> List[Dict[str, Any]]:
    config = config or get_config()
    store = _cache(cache)
    units = [store.get(module_id)] if module_id else store.current().units()
    symbols = scan_symbols(
        units,
        limit=config.default_limit if limit is None else limit,
        dialect=config.dialect,
    )
    return [s.to_dict() for s in symbols]


def get_call_graph(
    *,
    symbol_name: str,
    module_id: str,
    scan_all_modules: bool = False,
    cache: Optional[UnitCache] = None,
    config: Optional[BundleConfig] = None,
) -> Dict[str, Any]:
    config = config or get_config()
    snapshot = _cache(cache).current()
    graph = build_call_graph(
        snapshot,
        symbol_name,
        module_id,
        scan_all_units=scan_all_modules,
        dialect=config.dialect,
    )
    return graph.to_dict()


# ----------------------------
# Single-document tools
# ----------------------------


def analyze_structure(
    *,
    code: Optional[str] = None,
    file_path: Optional[str] = None,
    limit: Optional[int] = None,
    config: Optional[BundleConfig] = None,
) -> Dict[str, Any]:
    config = config or get_config()
    source = resolve_source(code, file_path, config)
    return summarize_structure(source, config.default_limit if limit is None else limit, dialect=config.dialect)


def get_symbol_source(
    *,
    symbol_name: str,
    code: Optional[str] = None,
    file_path: Optional[str] = None,
    module_id: Optional[str] = None,
    cache: Optional[UnitCache] = None,
    config: Optional[BundleConfig] = None,
) -> str:
    """Formatted source of the first declaration of ``symbol_name``.

    ``module_id`` takes precedence over ``code``/``file_path``.
    """
    config = config or get_config()
    if module_id:
        source = _cache(cache).get(module_id).text
    else:
        try:
            source = resolve_source(code, file_path, config)
        except MissingInput:
            raise MissingInput("Either 'code', 'file_path' or 'module_id' must be provided.") from None
    parsed = parse_source(source, dialect=config.dialect)
    found = find_symbol(parsed, symbol_name)
    return _format(found.text, config)


def format_code(
    *,
    code: Optional[str] = None,
    file_path: Optional[str] = None,
    parser: str = "babel",
    config: Optional[BundleConfig] = None,
) -> str:
    config = config or get_config()
    return _format(resolve_source(code, file_path, config), config, parser=parser)


def get_help(*, tool_name: str) -> str:
    doc = TOOL_DOCS.get(tool_name)
    if doc is None:
        raise UnknownTool(tool_name)
    return doc
