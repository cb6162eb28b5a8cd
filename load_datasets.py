from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional, Tuple

import numpy as np
from scipy.spatial.distance import cdist
from sklearn.datasets import make_blobs

from graph import Edge, GraphDescription
from mst_logging import get_logger

logger = get_logger(__name__)

EDGE_FIELDS = ("source", "destination", "weight")


# -----------------------------
# JSON graph documents
# -----------------------------
def _parse_edge(i: int, raw: Any) -> Edge:
    if not isinstance(raw, dict):
        raise ValueError(f"Edge {i} must be an object. Got {type(raw).__name__}.")
    missing = [f for f in EDGE_FIELDS if f not in raw]
    if missing:
        raise ValueError(f"Edge {i} is missing field(s): {', '.join(missing)}.")

    source, destination, weight = raw["source"], raw["destination"], raw["weight"]
    if not isinstance(source, str) or not isinstance(destination, str):
        raise ValueError(f"Edge {i} endpoints must be strings. Got source={source!r}, destination={destination!r}.")
    # bool is an int subclass; reject it explicitly
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise ValueError(f"Edge {i} weight must be an integer. Got {weight!r}.")
    if weight < 0:
        raise ValueError(f"Edge {i} weight must be non-negative. Got {weight}.")

    return Edge(source, destination, weight)


def parse_graph(document: Any, default_name: str = "graph") -> GraphDescription:
    """
    Build a GraphDescription from a decoded JSON document of the form
    {"graphName": ..., "number_OF_Edge_and_Vertices": ..., "edges": [...]}.
    """
    if not isinstance(document, dict):
        raise ValueError("Graph document must be a JSON object.")
    if "edges" not in document:
        raise ValueError("Graph document has no 'edges' list.")
    raw_edges = document["edges"]
    if not isinstance(raw_edges, list):
        raise ValueError(f"'edges' must be a list. Got {type(raw_edges).__name__}.")

    name = document.get("graphName") or default_name
    metadata = document.get("number_OF_Edge_and_Vertices")
    if metadata is not None and not isinstance(metadata, str):
        metadata = str(metadata)

    edges = [_parse_edge(i, raw) for i, raw in enumerate(raw_edges)]
    return GraphDescription(name=name, edges=tuple(edges), metadata=metadata)


def load_graph(path: str | Path) -> GraphDescription:
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        document = json.load(f)
    graph = parse_graph(document, default_name=path.stem)
    logger.info("Loaded graph %r from %s (%d edges)", graph.name, path, len(graph.edges))
    return graph


def export_to_json(graph: GraphDescription, filename: str | Path) -> None:
    document = {
        "graphName": graph.name,
        "number_OF_Edge_and_Vertices": graph.metadata,
        "edges": [
            {"source": e.source, "destination": e.destination, "weight": e.weight}
            for e in graph.edges
        ],
    }
    with open(filename, "w", encoding="utf-8") as f:
        json.dump(document, f, indent=2, ensure_ascii=False)
        f.write("\n")


# -----------------------------
# Synthetic graphs
# -----------------------------
def get_blobs(n: int = 40, centers: int = 4, random_state: int = 42) -> np.ndarray:
    X, _ = make_blobs(
        n_samples=n,
        n_features=2,
        centers=centers,
        cluster_std=0.8,
        random_state=random_state,
    )
    return X


def calculate_distances(dataset: np.ndarray) -> np.ndarray:
    return cdist(dataset, dataset, metric="euclidean")


def generate_blob_graph(
    n: int = 40,
    centers: int = 4,
    scale: float = 100.0,
    max_distance: Optional[float] = None,
    random_state: int = 42,
    name: Optional[str] = None,
) -> Tuple[GraphDescription, np.ndarray, List[str]]:
    """
    Sample n 2-D blob points and connect every pair (u < v) whose Euclidean
    distance is at most `max_distance` (all pairs when None). Weights are
    round(distance * scale), so they are non-negative integers.

    Returns (graph, points, labels) where labels[i] is the vertex of points[i].
    A small `max_distance` can leave the graph disconnected.
    """
    if n < 1:
        raise ValueError(f"n must be >= 1. Got n={n}.")
    if scale <= 0:
        raise ValueError(f"scale must be positive. Got scale={scale}.")

    X = get_blobs(n=n, centers=centers, random_state=random_state)
    D = calculate_distances(X)
    W = np.rint(D * scale).astype(np.int64)

    iu, ju = np.triu_indices(n, k=1)
    if max_distance is not None:
        keep = D[iu, ju] <= max_distance
        iu, ju = iu[keep], ju[keep]

    labels = [f"N{i + 1}" for i in range(n)]
    edges = [Edge(labels[u], labels[v], int(W[u, v])) for u, v in zip(iu.tolist(), ju.tolist())]

    graph = GraphDescription(
        name=name or f"Blobs_{n}",
        edges=tuple(edges),
        metadata=f"Vertices: {n}, Edges: {len(edges)}",
    )
    logger.info("Generated graph %r: %s", graph.name, graph.metadata)
    return graph, X, labels
