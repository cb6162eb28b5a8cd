"""Shared fixtures for the MST tests."""

import os

import numpy as np
import pytest

from graph import GraphDescription
from mst_logging import get_logger


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Deterministic numpy RNG; override the seed with TEST_RNG_SEED."""
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(autouse=True)
def _reset_log_handlers():
    """Drop handlers the CLI attached so they don't outlive captured streams."""
    yield
    root = get_logger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)


@pytest.fixture
def square_graph() -> GraphDescription:
    return GraphDescription.from_triples(
        "square",
        [("A", "B", 1), ("B", "C", 2), ("C", "D", 3), ("A", "D", 10)],
        metadata="Vertices: 4, Edges: 4",
    )


def random_connected_graph(rng: np.random.Generator, n: int, extra: int, distinct: bool = True) -> GraphDescription:
    """Random spanning path plus `extra` random chords over vertices V0..V{n-1}."""
    order = rng.permutation(n)
    pairs = [(int(order[i]), int(order[i + 1])) for i in range(n - 1)]
    for _ in range(extra):
        u, v = rng.choice(n, size=2, replace=False)
        pairs.append((int(u), int(v)))

    if distinct:
        weights = rng.permutation(len(pairs) * 3)[: len(pairs)] + 1
    else:
        weights = rng.integers(1, 5, size=len(pairs))

    triples = [(f"V{u}", f"V{v}", int(w)) for (u, v), w in zip(pairs, weights)]
    return GraphDescription.from_triples(f"random_{n}", triples)


@pytest.fixture
def make_random_graph(rng):
    def _make(n: int, extra: int, distinct: bool = True) -> GraphDescription:
        return random_connected_graph(rng, n, extra, distinct)
    return _make
