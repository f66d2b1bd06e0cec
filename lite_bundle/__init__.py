"""lite-bundle: code intelligence over unpacked JavaScript bundles.

Unpack a bundle once, then list, search, inventory symbols, extract single
declarations and build per-symbol call graphs over the cached modules.
"""

from .errors import (
    BundleError,
    InvalidPattern,
    MissingInput,
    NoBundle,
    ParseFailure,
    SymbolNotFound,
    UnitNotFound,
)

__version__ = "0.1.0"

__all__ = [
    "BundleError",
    "InvalidPattern",
    "MissingInput",
    "NoBundle",
    "ParseFailure",
    "SymbolNotFound",
    "UnitNotFound",
    "__version__",
]
