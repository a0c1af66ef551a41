"""Benchmark shortest path and spanning tree algorithms on random graphs."""

import time
from typing import Callable, Dict

import numpy as np

from gconduit.graphs import (
    Graph,
    dijkstra,
    floyd_warshall,
    kruskal_mst,
    prim_mst,
    reverse_delete_mst,
)


def random_connected_graph(n: int, density: float, seed: int = 0) -> Graph:
    """Random undirected graph with a spanning path and integer weights in [1, 100]."""
    rng = np.random.default_rng(seed)
    graph = Graph(n)
    order = rng.permutation(n)
    for a, b in zip(order[:-1], order[1:]):
        graph.add_edge(a, b, int(rng.integers(1, 101)))
    mask = np.triu(rng.random((n, n)) < density, k=1)
    for u, v in zip(*np.nonzero(mask)):
        graph.add_edge(u, v, int(rng.integers(1, 101)))
    return graph


def _time(fn: Callable[[], object], repeats: int) -> float:
    fn()  # Warmup
    start = time.perf_counter()
    for _ in range(repeats):
        fn()
    return (time.perf_counter() - start) / repeats


def benchmark_algorithms(n: int, density: float = 0.1, repeats: int = 3) -> Dict[str, float]:
    """Time each algorithm on one random graph.

    Args:
        n: Number of vertices.
        density: Probability of each extra edge.
        repeats: Timed runs per algorithm.

    Returns:
        Dictionary with mean seconds per call.
    """
    graph = random_connected_graph(n, density)

    return {
        "n": n,
        "edges": graph.edge_count,
        "dijkstra_sec": _time(lambda: dijkstra(graph, 0), repeats),
        "floyd_warshall_sec": _time(lambda: floyd_warshall(graph), repeats),
        "kruskal_sec": _time(lambda: kruskal_mst(graph), repeats),
        "prim_sec": _time(lambda: prim_mst(graph, 0), repeats),
        "reverse_delete_sec": _time(lambda: reverse_delete_mst(graph), repeats),
    }


if __name__ == "__main__":
    print("Benchmarking graph algorithms...")

    for n in (50, 100, 200):
        results = benchmark_algorithms(n)
        print(f"n={results['n']} edges={results['edges']}:")
        for key, value in results.items():
            if key.endswith("_sec"):
                print(f"  {key[:-4]}: {value * 1e3:.2f} ms")
