"""Core lite-bundle data structures."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple


Span = Tuple[int, int, int, int]  # (start_line, start_col, end_line, end_col), 1-based


@dataclass(frozen=True)
class Unit:
    id: str
    path: str
    text: str


class Snapshot(Mapping[str, Unit]):
    """Immutable, ordered set of units produced by one unpack call."""

    def __init__(self, units: Iterable[Unit], *, generation: int = 0) -> None:
        ordered: Dict[str, Unit] = {}
        for unit in units:
            if unit.id in ordered:
                raise ValueError(f"Duplicate unit id in snapshot: {unit.id}")
            ordered[unit.id] = unit
        self._units = MappingProxyType(ordered)
        self.generation = generation

    def __getitem__(self, unit_id: str) -> Unit:
        return self._units[unit_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def units(self) -> List[Unit]:
        return list(self._units.values())

    def __repr__(self) -> str:
        return f"Snapshot(generation={self.generation}, units={len(self)})"


@dataclass(frozen=True)
class UnitSummary:
    id: str
    path: str
    size: int
    is_vendor: bool


@dataclass(frozen=True)
class UnitError:
    """A unit skipped by a tolerant multi-unit scan."""

    unit_id: str
    error: str


@dataclass(frozen=True)
class SymbolSpan:
    name: str
    kind: str
    span: Span
    text: str


@dataclass(frozen=True)
class SymbolDescriptor:
    unit_id: str
    unit_path: str
    name: str
    kind: str  # function | class | variable_function
    start_line: int
    line_count: int
    parameters: Tuple[str, ...]
    signature: str

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["parameters"] = list(self.parameters)
        return d


@dataclass(frozen=True)
class OutgoingCall:
    name: str
    line: int


@dataclass(frozen=True)
class IncomingCall:
    caller_unit_id: str
    caller_name: str
    line: int


@dataclass
class CallGraph:
    symbol: str
    unit_id: str
    outgoing: List[OutgoingCall] = field(default_factory=list)
    incoming: List[IncomingCall] = field(default_factory=list)
    skipped: List[UnitError] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class UnpackResult:
    code: str
    units: Optional[Tuple[Unit, ...]] = None

    @property
    def is_bundle(self) -> bool:
        return self.units is not None
