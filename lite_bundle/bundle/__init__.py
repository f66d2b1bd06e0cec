"""Bundle cache and unit-level utilities.

This module holds the single-slot unit cache, the vendor path classifier,
unit search, and the default unpack/format collaborators.
"""

from .cache import UnitCache, get_default_cache
from .search import search_units
from .vendor import VENDOR_PATTERNS, is_vendor_path, list_units

__all__ = [
    "UnitCache",
    "get_default_cache",
    "search_units",
    "VENDOR_PATTERNS",
    "is_vendor_path",
    "list_units",
]
