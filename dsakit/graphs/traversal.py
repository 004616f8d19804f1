"""Traversals over adjacency-list graphs: BFS, bipartiteness, cycles, paths and SCCs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

Adjacency = Sequence[Sequence[int]]


def _bfs_order(adj: Adjacency, start: int) -> list[int]:
    visited = {start}
    order: list[int] = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adj[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


class Graph:
    """Undirected graph stored as adjacency lists over vertices 0..vertices-1."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.vertices = vertices
        self.adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise IndexError(f"vertex {vertex} is outside 0..{self.vertices - 1}")

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._check(u)
        self._check(v)
        self.adjacency[u].append(v)
        self.adjacency[v].append(u)

    def bfs(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        return _bfs_order(self.adjacency, start)


def undirected_adjacency(vertices: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Build undirected adjacency lists from ``(u, v)`` pairs."""
    graph = Graph(vertices)
    for u, v in edges:
        graph.add_edge(u, v)
    return graph.adjacency


def is_bipartite(adj: Adjacency) -> bool:
    """Whether the graph can be two-coloured, checked by BFS over every component."""
    color: list[int | None] = [None] * len(adj)
    for source in range(len(adj)):
        if color[source] is not None:
            continue
        color[source] = 0
        queue = deque([source])
        while queue:
            node = queue.popleft()
            for neighbour in adj[node]:
                if color[neighbour] is None:
                    color[neighbour] = 1 - color[node]
                    queue.append(neighbour)
                elif color[neighbour] == color[node]:
                    return False
    return True


def is_bipartite_dfs(adj: Adjacency) -> bool:
    """Whether the graph can be two-coloured, checked by DFS over every component."""
    color: list[int | None] = [None] * len(adj)
    for root in range(len(adj)):
        if color[root] is not None:
            continue
        color[root] = 0
        stack = [root]
        while stack:
            node = stack.pop()
            for neighbour in adj[node]:
                if color[neighbour] is None:
                    color[neighbour] = 1 - color[node]
                    stack.append(neighbour)
                elif color[neighbour] == color[node]:
                    return False
    return True


def has_cycle_undirected_bfs(adj: Adjacency) -> bool:
    """Whether an undirected graph has a cycle, using BFS with parent tracking."""
    n = len(adj)
    visited = [False] * n
    parent = [-1] * n
    for source in range(n):
        if visited[source]:
            continue
        visited[source] = True
        queue = deque([source])
        while queue:
            node = queue.popleft()
            for neighbour in adj[node]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    parent[neighbour] = node
                    queue.append(neighbour)
                elif parent[node] != neighbour:
                    return True
    return False


def has_cycle_undirected(adj: Adjacency) -> bool:
    """Whether an undirected graph has a cycle, using DFS with parent tracking."""
    n = len(adj)
    visited = [False] * n
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, -1, iter(adj[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, node, iter(adj[neighbour])))
                    break
                if neighbour != parent:
                    return True
            else:
                stack.pop()
    return False


def has_cycle_directed(adj: Adjacency) -> bool:
    """Whether a directed graph has a cycle: a back edge into the current DFS path."""
    n = len(adj)
    visited = [False] * n
    on_path = [False] * n
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
                    return True
            else:
                on_path[node] = False
                stack.pop()
    return False


def all_paths(adj: Adjacency, src: int, dest: int) -> list[list[int]]:
    """Every simple path from ``src`` to ``dest`` in a directed graph, in DFS order."""
    if src == dest:
        return [[src]]
    paths: list[list[int]] = []
    path = [src]
    on_path = {src}
    stack = [iter(adj[src])]
    while stack:
        for neighbour in stack[-1]:
            if neighbour in on_path:
                continue
            if neighbour == dest:
                paths.append([*path, neighbour])
                continue
            path.append(neighbour)
            on_path.add(neighbour)
            stack.append(iter(adj[neighbour]))
            break
        else:
            stack.pop()
            on_path.discard(path.pop())
    return paths


def _finish_order(adj: Adjacency) -> list[int]:
    n = len(adj)
    visited = [False] * n
    order: list[int] = []
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adj[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(adj[neighbour])))
                    break
            else:
                order.append(node)
                stack.pop()
    return order


def count_strongly_connected_components(adj: Adjacency) -> int:
    """Number of strongly connected components, by Kosaraju's two-pass DFS."""
    n = len(adj)
    transposed: list[list[int]] = [[] for _ in range(n)]
    for node, neighbours in enumerate(adj):
        for neighbour in neighbours:
            transposed[neighbour].append(node)

    visited = [False] * n
    components = 0
    for root in reversed(_finish_order(adj)):
        if visited[root]:
            continue
        components += 1
        visited[root] = True
        stack = [root]
        while stack:
            node = stack.pop()
            for neighbour in transposed[node]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append(neighbour)
    return components