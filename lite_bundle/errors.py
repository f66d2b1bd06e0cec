"""Error taxonomy for bundle queries.

Every failure raised by this package derives from ``BundleError`` and carries a
human-readable message. The tool layer turns these into ``fail(...)`` payloads.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class BundleError(Exception):
    """Base class for all lite-bundle failures."""

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    @property
    def kind(self) -> str:
        return type(self).__name__


class NoBundle(BundleError):
    def __init__(self, message: str = "No bundle found. Run 'deobfuscate' first.") -> None:
        super().__init__(message)


class UnitNotFound(BundleError):
    def __init__(self, unit_id: str) -> None:
        super().__init__(f"Module {unit_id} not found.", details={"id": unit_id})
        self.unit_id = unit_id


class SymbolNotFound(BundleError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Symbol '{name}' not found.", details={"symbol": name})
        self.name = name


class InvalidPattern(BundleError):
    def __init__(self, pattern: str, reason: str = "") -> None:
        super().__init__(f"Invalid regular expression: {pattern}", details={"pattern": pattern, "reason": reason})
        self.pattern = pattern


class MissingInput(BundleError):
    def __init__(self, message: str = "Either 'code' or 'file_path' must be provided.") -> None:
        super().__init__(message)


class InputTooLarge(BundleError):
    def __init__(self, size: int, limit: int) -> None:
        super().__init__(
            f"Input code too large (max {limit // 1024 // 1024}MB)",
            details={"size": size, "limit": limit},
        )


class SourceNotFound(BundleError):
    def __init__(self, path: str) -> None:
        super().__init__(f"File not found: {path}", details={"path": path})
        self.path = path


class SourceUnreadable(BundleError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read file as UTF-8 text: {path}", details={"path": path, "reason": reason})
        self.path = path


class ParseFailure(BundleError):
    def __init__(self, reason: str, *, line: Optional[int] = None) -> None:
        msg = f"Failed to parse AST: {reason}"
        super().__init__(msg, details={"line": line} if line is not None else None)
        self.line = line


class TransformError(BundleError):
    pass


class FormatError(BundleError):
    pass


class UnknownTool(BundleError):
    def __init__(self, tool_name: str) -> None:
        super().__init__(f"No documentation found for tool: {tool_name}", details={"tool_name": tool_name})
