"""LangChain tool definitions.

Wraps the bundle tool functions as function calls usable by LangGraph agents.
The cache and config are injected through a closure; every tool returns the
``ok``/``fail`` envelope instead of raising.
"""

from typing import Any, Callable, Dict, List, Optional

from langchain_core.tools import BaseTool, tool

from ..bundle.cache import UnitCache, get_default_cache
from ..config import BundleConfig, get_config
from ..errors import BundleError
from . import bundle_tools as ops
from .models import fail_from, ok


def _call(fn: Callable[..., Any], **kwargs: Any) -> Dict[str, Any]:
    try:
        return ok(fn(**kwargs))
    except BundleError as e:
        return fail_from(e)


def create_bundle_tools(
    cache: Optional[UnitCache] = None,
    config: Optional[BundleConfig] = None,
) -> List[BaseTool]:
    """Create the LangChain tool list bound to one cache.

    Args:
        cache: Unit cache shared by all tools. Defaults to the process cache.
        config: Limits and formatter options. Defaults to the process config.

    Returns:
        LangChain tools: deobfuscate, list_modules, get_module, search_modules,
        list_functions, get_call_graph, analyze_structure, get_symbol_source,
        format_code, get_help.
    """
    store = cache if cache is not None else get_default_cache()
    cfg = config or get_config()

    @tool
    async def deobfuscate(
        code: Optional[str] = None,
        file_path: Optional[str] = None,
        unbundle: bool = True,
        return_code: bool = False,
        mangle: bool = False,
        jsx: bool = True,
        skip_vendor: bool = False,
    ) -> Dict[str, Any]:
        """Unpacks/deobfuscates minified code and caches the resulting modules."""
        return _call(
            ops.deobfuscate,
            code=code,
            file_path=file_path,
            unbundle=unbundle,
            return_code=return_code,
            mangle=mangle,
            jsx=jsx,
            skip_vendor=skip_vendor,
            cache=store,
            config=cfg,
        )

    @tool
    async def list_modules(exclude_vendor: bool = False) -> Dict[str, Any]:
        """Lists modules from the cached bundle."""
        return _call(ops.list_modules, exclude_vendor=exclude_vendor, cache=store)

    @tool
    async def get_module(id: str) -> Dict[str, Any]:
        """Gets formatted code for a specific module ID from the cache."""
        return _call(ops.get_module, id=id, cache=store, config=cfg)

    @tool
    async def search_modules(query: str, is_regex: bool = False, limit: Optional[int] = None) -> Dict[str, Any]:
        """Searches text or a case-insensitive regex in cached modules."""
        return _call(ops.search_modules, query=query, is_regex=is_regex, limit=limit, cache=store, config=cfg)

    @tool
    async def list_functions(module_id: Optional[str] = None, limit: Optional[int] = None) -> Dict[str, Any]:
        """Scans cached modules to list defined functions and classes."""
        return _call(ops.list_functions, module_id=module_id, limit=limit, cache=store, config=cfg)

    @tool
    async def get_call_graph(symbol_name: str, module_id: str, scan_all_modules: bool = False) -> Dict[str, Any]:
        """Generates a call graph (outgoing and incoming calls) for a specific function."""
        return _call(
            ops.get_call_graph,
            symbol_name=symbol_name,
            module_id=module_id,
            scan_all_modules=scan_all_modules,
            cache=store,
            config=cfg,
        )

    @tool
    async def analyze_structure(
        code: Optional[str] = None,
        file_path: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Returns a structural summary (AST) of code."""
        return _call(ops.analyze_structure, code=code, file_path=file_path, limit=limit, config=cfg)

    @tool
    async def get_symbol_source(
        symbol_name: str,
        code: Optional[str] = None,
        file_path: Optional[str] = None,
        module_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Extracts specific function/class/variable source code."""
        return _call(
            ops.get_symbol_source,
            symbol_name=symbol_name,
            code=code,
            file_path=file_path,
            module_id=module_id,
            cache=store,
            config=cfg,
        )

    @tool
    async def format_code(
        code: Optional[str] = None,
        file_path: Optional[str] = None,
        parser: str = "babel",
    ) -> Dict[str, Any]:
        """Formats code with jsbeautifier ('babel') or cssbeautifier ('css')."""
        return _call(ops.format_code, code=code, file_path=file_path, parser=parser, config=cfg)

    @tool
    async def get_help(tool_name: str) -> Dict[str, Any]:
        """Get detailed usage info for a specific tool."""
        return _call(ops.get_help, tool_name=tool_name)

    return [
        deobfuscate,
        list_modules,
        get_module,
        search_modules,
        list_functions,
        get_call_graph,
        analyze_structure,
        get_symbol_source,
        format_code,
        get_help,
    ]
