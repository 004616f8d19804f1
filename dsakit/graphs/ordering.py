"""Topological orderings of directed graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

Adjacency = Sequence[Sequence[int]]


class CycleError(ValueError):
    """Raised when a graph that must be acyclic contains a cycle."""


def topological_sort(adj: Adjacency) -> list[int]:
    """Topological order by depth-first search; raises CycleError on a cycle."""
    n = len(adj)
    visited = [False] * n
    on_path = [False] * n
    finished: list[int] = []
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = on_path[root] = True
        stack = [(root, iter(adj[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = on_path[neighbour] = True
                    stack.append((neighbour, iter(adj[neighbour])))
                    break
                if on_path[neighbour]:
                    raise CycleError(f"graph has a cycle through vertex {neighbour}")
            else:
                on_path[node] = False
                finished.append(node)
                stack.pop()
    finished.reverse()
    return finished


def kahn_topological_sort(adj: Adjacency) -> list[int]:
    """Topological order by Kahn's in-degree algorithm; raises CycleError on a cycle."""
    n = len(adj)
    in_degree = [0] * n
    for neighbours in adj:
        for neighbour in neighbours:
            in_degree[neighbour] += 1

    queue = deque(node for node in range(n) if in_degree[node] == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adj[node]:
            in_degree[neighbour] -= 1
            if in_degree[neighbour] == 0:
                queue.append(neighbour)

    if len(order) != n:
        raise CycleError("graph has a cycle")
    return order