from __future__ import annotations

import heapq
import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Set, Tuple

from graph import Edge, GraphDescription, MSTResult
from mst_logging import get_logger

logger = get_logger(__name__)

DISCONNECTED_WARNING = "MST does not span the entire graph (graph may be disconnected)."


class DisjointSetUnion:
    """
    Disjoint-set union (Union-Find) with path compression.

    No rank/size heuristic: `union` always hangs the first root under the
    second. `operation_count` is a diagnostic tally of set initializations,
    root comparisons and parent updates; it never affects the result.
    """

    def __init__(self):
        self.parent: Dict[str, str] = {}
        self._operation_count = 0

    @property
    def operation_count(self) -> int:
        return self._operation_count

    def make_set(self, vertices: Iterable[str]) -> None:
        for v in vertices:
            self.parent[v] = v
            self._operation_count += 1

    def find(self, v: str) -> str:
        """
        Return the representative of v's set. Raises KeyError if v was never
        registered with `make_set`.
        """
        self._operation_count += 1
        parent = self.parent

        root = v
        while parent[root] != root:
            root = parent[root]

        # Second pass: point every node on the path straight at the root
        while parent[v] != v:
            parent[v], v = root, parent[v]
            self._operation_count += 1

        return root

    def union(self, v1: str, v2: str) -> bool:
        root1 = self.find(v1)
        root2 = self.find(v2)

        self._operation_count += 1
        if root1 == root2:
            return False

        self.parent[root1] = root2
        self._operation_count += 1
        return True


@dataclass(frozen=True)
class CandidateEdge:
    """Frontier half-edge; `source` was already in the tree when it was queued."""
    source: str
    destination: str
    weight: int


# -----------------------------
# Kruskal
# -----------------------------
class KruskalMST:
    """
    Sorted-edge MST builder.

    Notes:
    - Edges are sorted by weight with a stable sort, so equal weights keep
      their input order.
    - Stops as soon as |V|-1 edges are accepted.
    - A disconnected input yields a spanning forest and a logged warning.
    """

    def build_mst(self, graph: GraphDescription) -> MSTResult:
        ops = 0

        vertices: Dict[str, None] = {}
        for e in graph.edges:
            vertices.setdefault(e.source, None)
            vertices.setdefault(e.destination, None)
            ops += 2

        if not vertices:
            return MSTResult(edges=[], operation_count=ops, vertex_count=0)

        sorted_edges = sorted(graph.edges, key=lambda e: e.weight)
        ops += int(len(sorted_edges) * math.log(len(sorted_edges)))

        dsu = DisjointSetUnion()
        dsu.make_set(vertices)

        n = len(vertices)
        mst: List[Edge] = []

        for e in sorted_edges:
            ops += 1
            if dsu.union(e.source, e.destination):
                mst.append(e)
                ops += 2
                if len(mst) == n - 1:
                    break

        ops += dsu.operation_count

        if len(mst) < n - 1:
            logger.warning(DISCONNECTED_WARNING)

        logger.debug("Kruskal on %r: %d/%d edges, %d operations", graph.name, len(mst), n - 1, ops)
        return MSTResult(edges=mst, operation_count=ops, vertex_count=n)


# -----------------------------
# Prim
# -----------------------------
class PrimMST:
    """
    Vertex-growth MST builder using a binary heap with lazy deletion.

    Stale heap entries (both endpoints already in the tree) are discarded
    when popped rather than removed when the tree grows. Heap entries carry
    an insertion sequence number so that equal weights pop in push order.
    """

    def _adjacency(self, graph: GraphDescription) -> Tuple[Dict[str, List[CandidateEdge]], Set[str], int]:
        adj: Dict[str, List[CandidateEdge]] = {}
        vertices: Set[str] = set()
        ops = 0

        for e in graph.edges:
            ops += 4
            adj.setdefault(e.source, []).append(CandidateEdge(e.source, e.destination, e.weight))
            adj.setdefault(e.destination, []).append(CandidateEdge(e.destination, e.source, e.weight))
            vertices.add(e.source)
            vertices.add(e.destination)

        return adj, vertices, ops

    def build_mst(self, graph: GraphDescription, start: str) -> MSTResult:
        adj, vertices, ops = self._adjacency(graph)

        # Nothing to grow: an empty graph has an empty MST whatever the start
        if not vertices:
            return MSTResult(edges=[], operation_count=ops, vertex_count=0)

        ops += 1
        if start not in vertices:
            raise ValueError(f"Start vertex {start} not found in graph.")

        mst: List[Edge] = []
        in_tree: Set[str] = {start}
        ops += 1

        heap: List[Tuple[int, int, CandidateEdge]] = []
        seq = 0

        for half in adj.get(start, []):
            ops += 1
            if half.destination not in in_tree:
                heapq.heappush(heap, (half.weight, seq, half))
                seq += 1
                ops += 1

        while heap and len(in_tree) < len(vertices):
            ops += 2
            _, _, cand = heapq.heappop(heap)
            ops += 1

            ops += 4
            source_in = cand.source in in_tree
            destination_in = cand.destination in in_tree
            if source_in and not destination_in:
                new_vertex = cand.destination
            elif destination_in and not source_in:
                new_vertex = cand.source
            else:
                new_vertex = None

            ops += 1
            if new_vertex is None:
                continue

            mst.append(Edge(cand.source, cand.destination, cand.weight))
            in_tree.add(new_vertex)
            ops += 2

            for half in adj.get(new_vertex, []):
                ops += 1
                if half.destination not in in_tree:
                    heapq.heappush(heap, (half.weight, seq, half))
                    seq += 1
                    ops += 1

        ops += 1
        if len(in_tree) < len(vertices):
            logger.warning(DISCONNECTED_WARNING)

        logger.debug("Prim on %r from %s: %d/%d vertices reached, %d operations",
                     graph.name, start, len(in_tree), len(vertices), ops)
        return MSTResult(edges=mst, operation_count=ops, vertex_count=len(vertices))
