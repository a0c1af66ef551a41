"""Pytest configuration and shared fixtures for Graph Conduit tests.

This module provides:
- A deterministic numpy RNG fixture
- Random graph factories built on top of it
"""

import os
from typing import Callable

import numpy as np
import pytest

from gconduit.graphs import Graph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function")
def random_graph(rng: np.random.Generator) -> Callable[..., Graph]:
    """Factory for random graphs with positive integer weights.

    The returned callable takes ``(n, density, directed=False, connected=True,
    max_weight=20)``. With ``connected=True`` a random spanning path is laid
    down first so every vertex is reachable from every other (undirected) or
    from vertex 0 along the path (directed).
    """

    def make(
        n: int,
        density: float,
        directed: bool = False,
        connected: bool = True,
        max_weight: int = 20,
    ) -> Graph:
        graph = Graph(n, directed=directed, weighted=True)
        if connected and n > 1:
            order = rng.permutation(n)
            order = np.concatenate(([0], order[order != 0]))
            for a, b in zip(order[:-1], order[1:]):
                graph.add_edge(a, b, int(rng.integers(1, max_weight + 1)))
        for u in range(n):
            for v in range(n):
                if u != v and rng.random() < density:
                    graph.add_edge(u, v, int(rng.integers(1, max_weight + 1)))
        return graph

    return make


@pytest.fixture
def triangle() -> Graph:
    """Undirected weighted triangle 1-2 (3), 1-3 (1), 3-2 (5); vertex 0 isolated."""
    graph = Graph(4, directed=False, weighted=True)
    graph.add_edge(1, 2, 3)
    graph.add_edge(1, 3, 1)
    graph.add_edge(3, 2, 5)
    return graph
