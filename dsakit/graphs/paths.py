"""Shortest-path algorithms over weighted and unweighted graphs."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence
from typing import NamedTuple

from dsakit.graphs.ordering import kahn_topological_sort

INF = math.inf


class Edge(NamedTuple):
    """A directed, weighted edge from ``u`` to ``v``."""

    u: int
    v: int
    weight: int


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


def _check_vertex(vertex: int, vertices: int) -> None:
    if not 0 <= vertex < vertices:
        raise IndexError(f"vertex {vertex} is outside 0..{vertices - 1}")


class WeightedGraph:
    """Graph with non-negative edge weights, searched with Dijkstra's algorithm."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.vertices = vertices
        self.adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertices)]

    def _check_edge(self, u: int, v: int, weight: int) -> None:
        _check_vertex(u, self.vertices)
        _check_vertex(v, self.vertices)
        if weight < 0:
            raise ValueError(f"edge weight {weight} is negative")

    def add_edge_undirected(self, u: int, v: int, weight: int) -> None:
        """Connect ``u`` and ``v`` both ways with the given weight."""
        self._check_edge(u, v, weight)
        self.adjacency[u].append((v, weight))
        self.adjacency[v].append((u, weight))

    def add_edge_directed(self, u: int, v: int, weight: int) -> None:
        """Add an edge from ``u`` to ``v`` with the given weight."""
        self._check_edge(u, v, weight)
        self.adjacency[u].append((v, weight))

    def shortest_paths(self, src: int) -> list[float]:
        """Distance from ``src`` to every vertex; ``math.inf`` where unreachable."""
        _check_vertex(src, self.vertices)
        dist: list[float] = [INF] * self.vertices
        dist[src] = 0
        heap = [(0, src)]
        while heap:
            d, node = heapq.heappop(heap)
            if d > dist[node]:
                continue
            for neighbour, weight in self.adjacency[node]:
                candidate = d + weight
                if candidate < dist[neighbour]:
                    dist[neighbour] = candidate
                    heapq.heappush(heap, (candidate, neighbour))
        return dist


def bellman_ford(edges: Iterable[Edge], vertices: int, src: int) -> list[float]:
    """Single-source distances allowing negative weights.

    Unreachable vertices get ``math.inf``. Raises NegativeCycleError if a
    negative cycle is reachable from ``src``.
    """
    _check_vertex(src, vertices)
    edge_list = [Edge(*edge) for edge in edges]
    dist: list[float] = [INF] * vertices
    dist[src] = 0
    for _ in range(vertices - 1):
        changed = False
        for u, v, weight in edge_list:
            if dist[u] != INF and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                changed = True
        if not changed:
            break
    for u, v, weight in edge_list:
        if dist[u] != INF and dist[u] + weight < dist[v]:
            raise NegativeCycleError("graph has a negative cycle reachable from the source")
    return dist


def floyd_warshall(edges: Iterable[Edge], vertices: int) -> list[list[float]]:
    """All-pairs distance matrix; ``math.inf`` where no path exists.

    Raises NegativeCycleError if the graph holds a negative cycle.
    """
    dist: list[list[float]] = [[INF] * vertices for _ in range(vertices)]
    for i in range(vertices):
        dist[i][i] = 0
    for u, v, weight in edges:
        _check_vertex(u, vertices)
        _check_vertex(v, vertices)
        dist[u][v] = min(dist[u][v], weight)

    for k in range(vertices):
        row_k = dist[k]
        for row in dist:
            through = row[k]
            if through == INF:
                continue
            for j, onward in enumerate(row_k):
                if through + onward < row[j]:
                    row[j] = through + onward

    if any(dist[i][i] < 0 for i in range(vertices)):
        raise NegativeCycleError("graph has a negative cycle")
    return dist


def unit_distances(adj: Sequence[Sequence[int]], src: int) -> list[float]:
    """Edge counts from ``src`` in an unweighted graph; ``math.inf`` where unreachable."""
    _check_vertex(src, len(adj))
    dist: list[float] = [INF] * len(adj)
    dist[src] = 0
    queue = deque([src])
    while queue:
        node = queue.popleft()
        for neighbour in adj[node]:
            if dist[neighbour] > dist[node] + 1:
                dist[neighbour] = dist[node] + 1
                queue.append(neighbour)
    return dist


def dag_shortest_path(
    adj: Sequence[Sequence[tuple[int, int]]], src: int, dest: int
) -> float:
    """Shortest distance from ``src`` to ``dest`` in a weighted DAG.

    ``adj[u]`` lists ``(v, weight)`` pairs; weights may be negative. Returns
    ``math.inf`` if ``dest`` is unreachable and raises CycleError if the graph
    is not acyclic.
    """
    _check_vertex(src, len(adj))
    _check_vertex(dest, len(adj))
    order = kahn_topological_sort([[v for v, _ in neighbours] for neighbours in adj])
    dist: list[float] = [INF] * len(adj)
    dist[src] = 0
    for node in order:
        if dist[node] == INF:
            continue
        for neighbour, weight in adj[node]:
            dist[neighbour] = min(dist[neighbour], dist[node] + weight)
    return dist[dest]