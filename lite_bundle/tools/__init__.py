"""Bundle tools exposed to callers and agents.

``bundle_tools`` holds the plain functions (raise on failure);
``langchain_tools`` wraps them as LangChain tools returning ok/fail envelopes.
"""

from .bundle_tools import (
    analyze_structure,
    deobfuscate,
    format_code,
    get_call_graph,
    get_help,
    get_module,
    get_symbol_source,
    list_functions,
    list_modules,
    search_modules,
)
from .langchain_tools import create_bundle_tools

__all__ = [
    "deobfuscate",
    "list_modules",
    "get_module",
    "search_modules",
    "list_functions",
    "get_call_graph",
    "analyze_structure",
    "get_symbol_source",
    "format_code",
    "get_help",
    "create_bundle_tools",
]
