"""Undirected graph stored as an adjacency multilist.

Each edge is stored once and threaded onto the lists of both its ends.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class EdgeNode:
    """An undirected edge linked into the lists of both endpoints."""

    i_vex: int
    j_vex: int
    weight: int
    i_next: EdgeNode | None = None
    j_next: EdgeNode | None = None

    def other(self, v: int) -> int:
        """The endpoint that is not ``v``."""
        if v == self.i_vex:
            return self.j_vex
        if v == self.j_vex:
            return self.i_vex
        raise ValueError(f"vertex {v} is not an end of this edge")


@dataclass(eq=False)
class VexNode:
    """A vertex and the head of its edge list."""

    data: str
    first_edge: EdgeNode | None = None


class AdjacencyMultilist:
    """Undirected weighted graph whose vertices carry labels."""

    def __init__(self, labels: Iterable[str] = ()) -> None:
        self.vertices = [VexNode(label) for label in labels]

    def __len__(self) -> int:
        return len(self.vertices)

    def _check(self, v: int) -> None:
        if not 0 <= v < len(self.vertices):
            raise IndexError(f"vertex {v} out of range for graph of {len(self.vertices)} vertices")

    def add(self, i: int, j: int, w: int) -> EdgeNode:
        """Add the edge ``i -- j`` of weight ``w`` at the front of both lists."""
        self._check(i)
        self._check(j)
        if i == j:
            raise ValueError("self-loops are not supported")
        edge = EdgeNode(i, j, w, self.vertices[i].first_edge, self.vertices[j].first_edge)
        self.vertices[i].first_edge = edge
        self.vertices[j].first_edge = edge
        return edge

    def edges_of(self, v: int) -> Iterator[EdgeNode]:
        """Yield the edges touching ``v``, most recently added first."""
        self._check(v)
        edge = self.vertices[v].first_edge
        while edge is not None:
            yield edge
            edge = edge.i_next if edge.i_vex == v else edge.j_next