from __future__ import annotations

import argparse
import json
import sys
import time
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import matplotlib.pyplot as plt

from graph import GraphDescription, MSTResult
from load_datasets import export_to_json, generate_blob_graph, load_graph
from mst import KruskalMST, PrimMST
from mst_logging import configure_logging, get_logger

logger = get_logger(__name__)

SEPARATOR = "-" * 36
ALGORITHM_NAMES = {"kruskal": "Kruskal's", "prim": "Prim's"}


# -----------------------------
# Running and reporting
# -----------------------------
def run_algorithm(graph: GraphDescription, algorithm: str, start: Optional[str] = None) -> Tuple[MSTResult, float]:
    """Run one builder and return (result, elapsed milliseconds)."""
    t0 = time.perf_counter()
    if algorithm == "kruskal":
        result = KruskalMST().build_mst(graph)
    elif algorithm == "prim":
        result = PrimMST().build_mst(graph, start)
    else:
        raise ValueError(f"Unknown algorithm {algorithm!r}.")
    elapsed_ms = (time.perf_counter() - t0) * 1000.0
    return result, elapsed_ms


def format_report(
    graph: GraphDescription,
    algorithm: str,
    result: MSTResult,
    elapsed_ms: float,
    start: Optional[str] = None,
) -> str:
    lines = [SEPARATOR, f"Minimum Spanning Tree (MST) for: {graph.name}"]
    if graph.metadata is not None:
        lines.append(graph.metadata)
    lines.append(f"Algorithm: {ALGORITHM_NAMES.get(algorithm, algorithm)}")
    if start is not None:
        lines.append(f"Starting Vertex: {start}")
    lines.append(SEPARATOR)
    lines.extend(f"  - {e}" for e in result.edges)
    lines.append(SEPARATOR)
    lines.append(f"Total MST Weight: {result.total_weight}")
    lines.append(f"Execution Time: {elapsed_ms:.3f} ms")
    lines.append(f"Total Key Operations: {result.operation_count}")
    if not result.is_spanning:
        lines.append("Warning: partial spanning forest")
    lines.append(SEPARATOR)
    return "\n".join(lines)


# -----------------------------
# Plotting
# -----------------------------
def plot_mst(points: np.ndarray, labels: List[str], result: MSTResult, title: str, path: str) -> None:
    index: Dict[str, int] = {label: i for i, label in enumerate(labels)}

    fig = plt.figure()
    plt.scatter(points[:, 0], points[:, 1], s=30, zorder=3)
    for e in result.edges:
        a, b = points[index[e.source]], points[index[e.destination]]
        plt.plot([a[0], b[0]], [a[1], b[1]], color="gray", linewidth=1, zorder=2)
    plt.title(title)
    plt.xlabel("x1")
    plt.ylabel("x2")
    plt.savefig(path)
    plt.close(fig)


# -----------------------------
# Commands
# -----------------------------
def cmd_run(args: argparse.Namespace) -> int:
    try:
        graph = load_graph(args.graph)
    except (OSError, json.JSONDecodeError, ValueError) as exc:
        print(f"Error reading or parsing JSON file: {args.graph}", file=sys.stderr)
        logger.error("%s", exc)
        return 1

    if not graph.edges:
        print("Graph is empty. MST is zero length.")
        return 0

    algorithms = ["kruskal", "prim"] if args.algorithm == "both" else [args.algorithm]
    start = args.start if args.start is not None else graph.edges[0].source

    weights = {}
    for algorithm in algorithms:
        try:
            result, elapsed_ms = run_algorithm(graph, algorithm, start)
        except ValueError as exc:
            print(f"Configuration Error: {exc}", file=sys.stderr)
            return 2
        weights[algorithm] = result.total_weight
        print(format_report(graph, algorithm, result, elapsed_ms, start if algorithm == "prim" else None))

    if len(weights) == 2:
        verdict = "match" if weights["kruskal"] == weights["prim"] else "DIFFER"
        print(f"Total weights {verdict}: Kruskal={weights['kruskal']}, Prim={weights['prim']}")
    return 0


def cmd_generate(args: argparse.Namespace) -> int:
    try:
        graph, X, labels = generate_blob_graph(
            n=args.n,
            centers=args.centers,
            scale=args.scale,
            max_distance=args.max_distance,
            random_state=args.seed,
            name=args.name,
        )
    except ValueError as exc:
        print(f"Configuration Error: {exc}", file=sys.stderr)
        return 2

    export_to_json(graph, args.output)
    print(f"Wrote {graph.name} ({graph.metadata}) to {args.output}")

    if args.plot:
        result, _ = run_algorithm(graph, "kruskal")
        plot_mst(X, labels, result, f"MST ({graph.name}, weight={result.total_weight})", args.plot)
        print(f"Saved MST plot to {args.plot}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="mst-compare", description="Compare Kruskal's and Prim's MST algorithms")
    ap.add_argument("--log-level", default="WARNING", help="Logging level (default WARNING)")
    sub = ap.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Compute the MST of a JSON graph")
    run.add_argument("graph", help="Path to a JSON graph file")
    run.add_argument("--algorithm", choices=["kruskal", "prim", "both"], default="both")
    run.add_argument("--start", default=None, help="Start vertex for Prim (default: source of the first edge)")
    run.set_defaults(func=cmd_run)

    gen = sub.add_parser("generate", help="Generate a random blob graph as JSON")
    gen.add_argument("output", help="Path of the JSON file to write")
    gen.add_argument("--n", type=int, default=40, help="Number of points/vertices (default 40)")
    gen.add_argument("--centers", type=int, default=4, help="Number of blob centers (default 4)")
    gen.add_argument("--scale", type=float, default=100.0, help="Distance-to-weight multiplier (default 100)")
    gen.add_argument("--max-distance", type=float, default=None, help="Drop pairs farther apart than this")
    gen.add_argument("--seed", type=int, default=42)
    gen.add_argument("--name", default=None, help="Graph name (default Blobs_<n>)")
    gen.add_argument("--plot", default=None, help="Save a figure of the points and their MST here")
    gen.set_defaults(func=cmd_generate)
    return ap


# -----------------------------
# Main
# -----------------------------
def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
