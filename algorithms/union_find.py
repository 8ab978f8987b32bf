"""Disjoint-set forest with path compression and union by rank."""

from __future__ import annotations


class UnionFindSet:
    """Disjoint sets over the elements ``0 .. n-1``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"size must not be negative, got {n}")
        self._parent = list(range(n))
        self._rank = [0] * n

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range for set of {len(self._parent)}")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return whether they were apart."""
        fx, fy = self.find(x), self.find(y)
        if fx == fy:
            return False
        if self._rank[fx] <= self._rank[fy]:
            self._parent[fx] = fy
            if self._rank[fx] == self._rank[fy]:
                self._rank[fy] += 1
        else:
            self._parent[fy] = fx
        return True

    def connected(self, x: int, y: int) -> bool:
        """Whether ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)