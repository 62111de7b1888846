"""Problem definitions for the valve graph abstraction."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from .errors import DanglingEdgeError, DuplicateNodeError, MalformedRecordError, UnknownNodeError


@dataclass(frozen=True)
class Valve:
    id: str
    flow_rate: int


@dataclass(frozen=True)
class ValveRecord:
    """One declared valve as supplied by the scan parser (or built by hand)."""

    id: str
    flow_rate: int
    neighbors: Tuple[str, ...] = ()
    line: Optional[int] = None


@dataclass(frozen=True)
class Tunnels:
    """Directed tunnel graph between valves.

    Adjacency keeps declaration order because the search breaks ties by the
    order in which moves are enumerated.
    """

    valves: Mapping[str, Valve]
    adjacency: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    @classmethod
    def build(cls, records: Iterable[ValveRecord]) -> "Tunnels":
        records = list(records)
        valves: Dict[str, Valve] = {}
        for record in records:
            if not record.id:
                raise MalformedRecordError("valve id must not be empty", line=record.line)
            if isinstance(record.flow_rate, bool) or not isinstance(record.flow_rate, int):
                raise MalformedRecordError(
                    f"flow rate {record.flow_rate!r} is not an integer", node_id=record.id, line=record.line
                )
            if record.flow_rate < 0:
                raise MalformedRecordError(
                    f"flow rate {record.flow_rate} is negative", node_id=record.id, line=record.line
                )
            if record.id in valves:
                raise DuplicateNodeError(record.id, line=record.line)
            valves[record.id] = Valve(id=record.id, flow_rate=record.flow_rate)

        adjacency: Dict[str, Tuple[str, ...]] = {}
        for record in records:
            for target in record.neighbors:
                if target not in valves:
                    raise DanglingEdgeError(record.id, target, line=record.line)
            adjacency[record.id] = tuple(record.neighbors)

        return cls(valves=valves, adjacency=adjacency)

    def node(self, node_id: str) -> Valve:
        try:
            return self.valves[node_id]
        except KeyError:
            raise UnknownNodeError(node_id) from None

    def neighbors(self, node_id: str) -> Tuple[str, ...]:
        try:
            return self.adjacency[node_id]
        except KeyError:
            raise UnknownNodeError(node_id) from None

    def flow_rate(self, node_id: str) -> int:
        return self.node(node_id).flow_rate

    @property
    def ids(self) -> Tuple[str, ...]:
        return tuple(self.valves)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.valves

    def __len__(self) -> int:
        return len(self.valves)

    def __iter__(self) -> Iterator[Valve]:
        return iter(self.valves.values())


__all__ = ["Valve", "ValveRecord", "Tunnels"]
