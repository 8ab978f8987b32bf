"""Directed weighted graph stored as a forward-star edge list."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """A directed, weighted edge."""

    source: int
    target: int
    weight: int


class FrontStarGraph:
    """Graph on vertices ``0 .. n-1`` whose edges are kept in insertion order.

    Edges leaving a vertex are visited newest first, the order in which a
    forward-star list links them.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"vertex count must not be negative, got {n}")
        self._n = n
        self._edges: list[Edge] = []
        self._outgoing: list[list[Edge]] = [[] for _ in range(n)]

    @property
    def vertex_count(self) -> int:
        return self._n

    @property
    def edges(self) -> tuple[Edge, ...]:
        """All edges in the order they were added."""
        return tuple(self._edges)

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        return f"FrontStarGraph(n={self._n}, edges={len(self._edges)})"

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError(f"vertex {v} out of range for graph of {self._n} vertices")

    def add(self, u: int, v: int, w: int) -> Edge:
        """Add the directed edge ``u -> v`` with weight ``w``."""
        self._check_vertex(u)
        self._check_vertex(v)
        edge = Edge(u, v, w)
        self._edges.append(edge)
        self._outgoing[u].append(edge)
        return edge

    def add_bi(self, u: int, v: int, w: int) -> None:
        """Add an undirected edge as two opposite directed edges."""
        self.add(u, v, w)
        self.add(v, u, w)

    def edges_from(self, u: int) -> Iterator[Edge]:
        """Yield the edges leaving ``u``, most recently added first."""
        self._check_vertex(u)
        yield from reversed(self._outgoing[u])

    def reversed(self) -> FrontStarGraph:
        """Return a new graph with every edge pointing the other way."""
        result = FrontStarGraph(self._n)
        for edge in self._edges:
            result.add(edge.target, edge.source, edge.weight)
        return result