"""Minimum spanning trees: Prim's and Kruskal's algorithms."""

from __future__ import annotations

import argparse
import heapq
import math
from operator import attrgetter

from algorithms.front_star import FrontStarGraph
from algorithms.union_find import UnionFindSet


def prim(graph: FrontStarGraph, start: int = 0) -> int:
    """Total weight of a minimum spanning tree grown from ``start``.

    Raises ``ValueError`` if the graph is not connected.
    """
    n = graph.vertex_count
    if not 0 <= start < n:
        raise IndexError(f"start vertex {start} out of range for graph of {n} vertices")
    dist: list[float] = [math.inf] * n
    dist[start] = 0
    visited = [False] * n
    total = 0
    heap: list[tuple[float, int]] = [(0, start)]
    while heap:
        _, u = heapq.heappop(heap)
        if visited[u]:
            continue
        visited[u] = True
        total += dist[u]
        for edge in graph.edges_from(u):
            v = edge.target
            if not visited[v] and edge.weight < dist[v]:
                dist[v] = edge.weight
                heapq.heappush(heap, (edge.weight, v))
    if not all(visited):
        raise ValueError("graph is not connected; no spanning tree exists")
    return int(total)


def kruskal(graph: FrontStarGraph) -> int:
    """Total weight of a minimum spanning tree, choosing edges by weight.

    The graph itself is left untouched. Raises ``ValueError`` if the graph
    is empty or not connected.
    """
    n = graph.vertex_count
    if n == 0:
        raise ValueError("an empty graph has no spanning tree")
    sets = UnionFindSet(n)
    total = 0
    joined = 0
    for edge in sorted(graph.edges, key=attrgetter("weight")):
        if joined == n - 1:
            break
        if sets.union(edge.source, edge.target):
            total += edge.weight
            joined += 1
    if joined != n - 1:
        raise ValueError("graph is not connected; no spanning tree exists")
    return total


def _example_graph() -> FrontStarGraph:
    graph = FrontStarGraph(6)
    for u, v, w in [
        (0, 1, 6),
        (0, 2, 1),
        (0, 3, 5),
        (1, 2, 5),
        (1, 4, 3),
        (2, 3, 5),
        (2, 4, 6),
        (2, 5, 4),
        (3, 5, 2),
        (4, 5, 6),
    ]:
        graph.add_bi(u, v, w)
    return graph


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compute the minimum spanning tree of a sample graph."
    )
    parser.parse_args(argv)
    graph = _example_graph()
    print(f"prim result: {prim(graph, 0)}")
    print(f"kruskal result: {kruskal(graph)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())