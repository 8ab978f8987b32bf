"""Strongly connected components: Kosaraju's and Tarjan's algorithms."""

from __future__ import annotations

import argparse

from algorithms.front_star import FrontStarGraph


def _post_order(graph: FrontStarGraph) -> list[int]:
    n = graph.vertex_count
    visited = [False] * n
    order: list[int] = []
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, graph.edges_from(start))]
        while stack:
            u, edges = stack[-1]
            for edge in edges:
                v = edge.target
                if not visited[v]:
                    visited[v] = True
                    stack.append((v, graph.edges_from(v)))
                    break
            else:
                stack.pop()
                order.append(u)
    return order


def _collect(graph: FrontStarGraph, start: int, visited: list[bool]) -> list[int]:
    visited[start] = True
    component = [start]
    stack = [graph.edges_from(start)]
    while stack:
        for edge in stack[-1]:
            v = edge.target
            if not visited[v]:
                visited[v] = True
                component.append(v)
                stack.append(graph.edges_from(v))
                break
        else:
            stack.pop()
    return component


def kosaraju(
    graph: FrontStarGraph, reverse: FrontStarGraph | None = None
) -> list[list[int]]:
    """Components found by two depth-first passes, in topological order.

    ``reverse`` is the transposed graph; it is built from ``graph`` when
    not given.
    """
    if reverse is None:
        reverse = graph.reversed()
    elif reverse.vertex_count != graph.vertex_count:
        raise ValueError("reverse graph must have the same number of vertices")
    visited = [False] * graph.vertex_count
    components = []
    for u in reversed(_post_order(graph)):
        if not visited[u]:
            components.append(_collect(reverse, u, visited))
    return components


def tarjan_scc(graph: FrontStarGraph) -> list[list[int]]:
    """Components found by a single depth-first pass, sinks first."""
    n = graph.vertex_count
    index = [0] * n
    low = [0] * n
    on_stack = [False] * n
    stack: list[int] = []
    components: list[list[int]] = []
    clock = 0

    for start in range(n):
        if index[start]:
            continue
        clock += 1
        index[start] = low[start] = clock
        stack.append(start)
        on_stack[start] = True
        work = [(start, graph.edges_from(start))]
        while work:
            u, edges = work[-1]
            for edge in edges:
                v = edge.target
                if not index[v]:
                    clock += 1
                    index[v] = low[v] = clock
                    stack.append(v)
                    on_stack[v] = True
                    work.append((v, graph.edges_from(v)))
                    break
                if on_stack[v]:
                    low[u] = min(low[u], index[v])
            else:
                work.pop()
                if low[u] == index[u]:
                    component = []
                    while True:
                        w = stack.pop()
                        on_stack[w] = False
                        component.append(w)
                        if w == u:
                            break
                    components.append(component)
                if work:
                    parent = work[-1][0]
                    low[parent] = min(low[parent], low[u])
    return components


def _example_graphs() -> tuple[FrontStarGraph, FrontStarGraph]:
    graph, reverse = FrontStarGraph(8), FrontStarGraph(8)
    for u, v in [(0, 1), (1, 2), (2, 0), (3, 1), (3, 2), (3, 4), (4, 5), (5, 6), (6, 4), (6, 7)]:
        graph.add(u, v, 0)
        reverse.add(v, u, 0)
    return graph, reverse


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="List the strongly connected components of a sample graph."
    )
    parser.parse_args(argv)
    graph, reverse = _example_graphs()
    print("kosaraju result:")
    for component in kosaraju(graph, reverse):
        print(" ".join(map(str, component)))
    print("tarjan result:")
    for component in tarjan_scc(graph):
        print(" ".join(map(str, component)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())