"""Literal / regex search over cached unit texts."""

from __future__ import annotations

import re
from typing import Dict, List

from ..core.models import Snapshot
from ..errors import InvalidPattern


def search_units(snapshot: Snapshot, query: str, *, is_regex: bool = False, limit: int = 50) -> List[Dict[str, str]]:
    """Return ``{id, path}`` of units whose text matches ``query``, in snapshot order.

    Literal queries are case-sensitive substring tests; regex queries are
    compiled case-insensitively before any unit is scanned.
    """
    if is_regex:
        try:
            pattern = re.compile(query, re.IGNORECASE)
        except re.error as e:
            raise InvalidPattern(query, str(e)) from e

        def matches(text: str) -> bool:
            return pattern.search(text) is not None
    else:
        def matches(text: str) -> bool:
            return query in text

    results: List[Dict[str, str]] = []
    if limit <= 0:
        return results
    for unit in snapshot.units():
        if matches(unit.text):
            results.append({"id": unit.id, "path": unit.path})
            if len(results) >= limit:
                break
    return results
