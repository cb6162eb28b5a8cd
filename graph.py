from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class Edge:
    source: str
    destination: str
    weight: int

    def __str__(self) -> str:
        return f"{self.source} --({self.weight})--> {self.destination}"


@dataclass(frozen=True)
class GraphDescription:
    """
    Named, read-only edge list handed to an MST builder.

    `metadata` is free text (e.g. vertex/edge counts) kept for reporting;
    the builders never look at it.
    """
    name: str
    edges: Tuple[Edge, ...] = ()
    metadata: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "edges", tuple(self.edges))

    @classmethod
    def from_triples(
        cls,
        name: str,
        triples: Iterable[Tuple[str, str, int]],
        metadata: Optional[str] = None,
    ) -> GraphDescription:
        return cls(name=name, edges=tuple(Edge(u, v, w) for u, v, w in triples), metadata=metadata)

    def vertices(self) -> List[str]:
        """Distinct vertex labels in order of first appearance."""
        seen = {}
        for e in self.edges:
            seen.setdefault(e.source, None)
            seen.setdefault(e.destination, None)
        return list(seen)


@dataclass
class MSTResult:
    edges: List[Edge] = field(default_factory=list)
    operation_count: int = 0
    vertex_count: int = 0

    @property
    def total_weight(self) -> int:
        return sum(e.weight for e in self.edges)

    @property
    def is_spanning(self) -> bool:
        # A forest over V vertices is a tree iff it has V-1 edges
        return len(self.edges) == max(self.vertex_count - 1, 0)
