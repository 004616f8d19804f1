"""Disjoint-set union with path compression and union by rank."""

from __future__ import annotations


class DisjointSet:
    """Partition of the elements 0..n-1 into disjoint sets."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of elements must not be negative")
        self._parent = list(range(n))
        self._rank = [0] * n

    def _check(self, u: int) -> None:
        if not 0 <= u < len(self._parent):
            raise IndexError(f"element {u} is outside 0..{len(self._parent) - 1}")

    def find(self, u: int) -> int:
        """Representative of the set holding ``u``."""
        self._check(u)
        parent = self._parent
        root = u
        while parent[root] != root:
            root = parent[root]
        while parent[u] != root:
            parent[u], u = root, parent[u]
        return root

    def union(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v``; False if they were already one set."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return False
        rank = self._rank
        if rank[root_u] > rank[root_v]:
            self._parent[root_v] = root_u
        else:
            self._parent[root_u] = root_v
            if rank[root_u] == rank[root_v]:
                rank[root_v] += 1
        return True