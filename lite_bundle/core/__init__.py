"""Core parsing and query components for lite-bundle.

Holds the tree-sitter dialect loader, the unit/snapshot data model, and the
three tree visitors: symbol locator, symbol inventory and call graph builder.
"""

def __getattr__(name):
    """Lazy import to avoid loading grammars on package import."""

    if name in ("Unit", "Snapshot", "SymbolDescriptor", "SymbolSpan", "OutgoingCall", "IncomingCall",
                "CallGraph", "UnitError", "UnitSummary", "UnpackResult"):
        from . import models
        return getattr(models, name)

    if name in ("parse_source", "normalize_dialect", "ParsedSource"):
        from . import languages
        return getattr(languages, name)

    if name == "find_symbol":
        from .locator import find_symbol
        return find_symbol

    if name in ("scan_symbols", "collect_symbols"):
        from . import symbol_index
        return getattr(symbol_index, name)

    if name == "build_call_graph":
        from .calls import build_call_graph
        return build_call_graph

    if name == "analyze_structure":
        from .structure import analyze_structure
        return analyze_structure

    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")

__all__ = [
    "Unit",
    "Snapshot",
    "SymbolDescriptor",
    "SymbolSpan",
    "OutgoingCall",
    "IncomingCall",
    "CallGraph",
    "UnitError",
    "UnitSummary",
    "UnpackResult",
    "parse_source",
    "normalize_dialect",
    "ParsedSource",
    "find_symbol",
    "scan_symbols",
    "collect_symbols",
    "build_call_graph",
    "analyze_structure",
]
