"""Third-party / build-tooling origin detection for unit paths."""

from __future__ import annotations

from typing import List, Optional

from ..core.models import Snapshot, UnitSummary


VENDOR_PATTERNS = (
    "node_modules",
    "webpack/runtime",
    "webpack/bootstrap",
    "(webpack)",
    "vendor/",
    "bower_components",
    "jspm_packages",
    "shims/",
)


def is_vendor_path(path: Optional[str]) -> bool:
    if not path:
        return False
    normalized = path.replace("\\", "/")
    return any(pattern in normalized for pattern in VENDOR_PATTERNS)


def list_units(snapshot: Snapshot, *, exclude_vendor: bool = False) -> List[UnitSummary]:
    """Listing rows in snapshot order, optionally without vendor units."""
    rows: List[UnitSummary] = []
    for unit in snapshot.units():
        vendor = is_vendor_path(unit.path)
        if exclude_vendor and vendor:
            continue
        rows.append(UnitSummary(id=unit.id, path=unit.path, size=len(unit.text), is_vendor=vendor))
    return rows
