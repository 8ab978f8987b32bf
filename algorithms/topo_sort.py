"""Topological ordering: Kahn's algorithm and depth-first search."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Sequence

from algorithms.front_star import FrontStarGraph


class CycleError(ValueError):
    """The graph has a cycle, so no topological order exists."""

    def __init__(self, order: list[int]) -> None:
        super().__init__("graph contains a cycle")
        self.order = order


def kahn(graph: FrontStarGraph, in_degrees: Sequence[int] | None = None) -> list[int]:
    """Order vertices by repeatedly removing those with no incoming edge.

    ``in_degrees`` is computed from the graph when not given. Raises
    ``CycleError`` holding the partial order if some vertices remain.
    """
    n = graph.vertex_count
    if in_degrees is None:
        degrees = [0] * n
        for edge in graph.edges:
            degrees[edge.target] += 1
    else:
        degrees = list(in_degrees)
        if len(degrees) != n:
            raise ValueError(f"expected {n} in-degrees, got {len(degrees)}")
    queue = deque(v for v, d in enumerate(degrees) if d == 0)
    order: list[int] = []
    while queue:
        u = queue.popleft()
        order.append(u)
        for edge in graph.edges_from(u):
            degrees[edge.target] -= 1
            if degrees[edge.target] == 0:
                queue.append(edge.target)
    if len(order) != n:
        raise CycleError(order)
    return order


_WHITE, _GREY, _BLACK = 0, 1, 2


def topo(graph: FrontStarGraph) -> list[int]:
    """Order vertices by reversed depth-first finishing time.

    Raises ``CycleError`` holding the vertices finished so far if a back
    edge is found.
    """
    n = graph.vertex_count
    colour = [_WHITE] * n
    finished: list[int] = []
    for start in range(n):
        if colour[start] != _WHITE:
            continue
        colour[start] = _GREY
        stack = [(start, graph.edges_from(start))]
        while stack:
            u, edges = stack[-1]
            for edge in edges:
                v = edge.target
                if colour[v] == _GREY:
                    raise CycleError(finished)
                if colour[v] == _WHITE:
                    colour[v] = _GREY
                    stack.append((v, graph.edges_from(v)))
                    break
            else:
                stack.pop()
                colour[u] = _BLACK
                finished.append(u)
    finished.reverse()
    return finished


def _example_graph() -> FrontStarGraph:
    graph = FrontStarGraph(6)
    for u, v, w in [(0, 1, 3), (0, 2, 2), (1, 3, 2), (1, 4, 3), (2, 3, 4), (2, 5, 3), (3, 5, 2), (4, 5, 1)]:
        graph.add(u, v, w)
    return graph


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Topologically sort a sample graph.")
    parser.parse_args(argv)
    graph = _example_graph()
    print("Kahn result:")
    print(" ".join(map(str, kahn(graph, [0, 1, 1, 2, 1, 3]))))
    print("DFS result:")
    print(" ".join(map(str, topo(graph))))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())