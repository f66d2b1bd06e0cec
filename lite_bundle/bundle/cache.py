"""Process-wide single-slot cache of the most recent unpacked bundle."""

from __future__ import annotations

import itertools
import logging
from typing import Iterable, Optional

from ..core.models import Snapshot, Unit
from ..errors import NoBundle, UnitNotFound

logger = logging.getLogger(__name__)


class UnitCache:
    """Holds at most one live snapshot.

    ``replace`` builds a new immutable snapshot and swaps the handle, so a
    reader that already took ``current()`` keeps a consistent view. There is
    no locking: callers are expected to serialize ``replace`` calls.
    """

    def __init__(self) -> None:
        self._snapshot: Optional[Snapshot] = None
        self._generations = itertools.count(1)

    def replace(self, units: Iterable[Unit]) -> Snapshot:
        snapshot = Snapshot(units, generation=next(self._generations))
        self._snapshot = snapshot
        logger.info("Cached bundle generation=%d units=%d", snapshot.generation, len(snapshot))
        return snapshot

    def current(self) -> Snapshot:
        if self._snapshot is None:
            raise NoBundle()
        return self._snapshot

    def get(self, unit_id: str) -> Unit:
        snapshot = self.current()
        if unit_id not in snapshot:
            raise UnitNotFound(unit_id)
        return snapshot[unit_id]

    def clear(self) -> None:
        self._snapshot = None

    @property
    def is_empty(self) -> bool:
        return self._snapshot is None


_default_cache = UnitCache()


def get_default_cache() -> UnitCache:
    return _default_cache
