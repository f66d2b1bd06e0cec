"""JSON envelope returned by the LangChain tools.

Every payload has ``ok`` and ``data``; failures add ``error`` with the
``BundleError`` class name as ``type`` so callers can branch on it.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from ..errors import BundleError


@dataclass(frozen=True)
class ToolError:
    message: str
    type: str = "BundleError"
    details: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class ToolResult:
    ok: bool
    data: Any = None
    error: Optional[ToolError] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"ok": self.ok, "data": self.data}
        if self.error is not None:
            payload["error"] = asdict(self.error)
        return payload


def ok(data: Any = None) -> Dict[str, Any]:
    return ToolResult(ok=True, data=data).to_dict()


def fail(message: str, *, type: str = "BundleError", details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return ToolResult(ok=False, error=ToolError(message=message, type=type, details=details)).to_dict()


def fail_from(error: BundleError) -> Dict[str, Any]:
    """Envelope for a ``BundleError`` raised by a tool function."""
    return fail(error.message, type=error.kind, details=error.details or None)
