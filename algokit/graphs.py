"""Shortest paths, minimum spanning trees and topological ordering.

Graphs are given as square adjacency matrices. For shortest paths a missing
edge is ``INF``. For Prim's algorithm a zero weight means there is no edge.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from operator import attrgetter
from typing import Any

__all__ = [
    "INF",
    "Edge",
    "floyd_warshall",
    "format_distances",
    "kruskal",
    "prim",
    "topological_sort",
]

INF = math.inf


@dataclass(frozen=True)
class Edge:
    """A weighted, undirected edge between vertices ``u`` and ``v``."""

    u: int
    v: int
    weight: float

    def __str__(self) -> str:
        return f"{self.u} - {self.v} \t{self.weight}"


def _square(matrix: Iterable[Sequence[Any]], name: str) -> list[list[Any]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError(f"{name} must be a square matrix")
    return rows


def floyd_warshall(matrix: Iterable[Sequence[float]]) -> list[list[float]]:
    """Return the all-pairs shortest distances; the input is left untouched."""
    dist = _square(matrix, "matrix")
    for k, via in enumerate(dist):
        for row in dist:
            through = row[k]
            if through >= INF:
                continue
            for j, cost in enumerate(via):
                if cost < INF and through + cost < row[j]:
                    row[j] = through + cost
    return dist


def format_distances(matrix: Iterable[Sequence[float]]) -> str:
    """Render a distance matrix in five-character columns, ``INF`` for no path."""
    return "\n".join(
        "".join(f"{'INF':>5}" if value >= INF else f"{value:>5}" for value in row)
        for row in matrix
    )


def kruskal(vertex_count: int, edges: Iterable[Edge | tuple[int, int, float]]) -> list[Edge]:
    """Return the edges of a minimum spanning forest, in the order chosen."""
    if vertex_count < 0:
        raise ValueError("vertex_count must not be negative")
    candidates = [edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges]
    for edge in candidates:
        for end in (edge.u, edge.v):
            if not 0 <= end < vertex_count:
                raise ValueError(f"vertex {end} is out of range in {edge!r}")

    parent = list(range(vertex_count))

    def find(vertex: int) -> int:
        while parent[vertex] != vertex:
            parent[vertex] = parent[parent[vertex]]
            vertex = parent[vertex]
        return vertex

    tree: list[Edge] = []
    for edge in sorted(candidates, key=attrgetter("weight")):
        if len(tree) >= vertex_count - 1:
            break
        root_u, root_v = find(edge.u), find(edge.v)
        if root_u != root_v:
            tree.append(edge)
            parent[root_u] = root_v
    return tree


def prim(graph: Iterable[Sequence[float]]) -> list[Edge]:
    """Return a minimum spanning tree grown from vertex 0.

    Edges are ``Edge(parent, vertex, weight)`` for vertices 1..n-1 in order.
    Raises ``ValueError`` when the graph is not connected.
    """
    weights = _square(graph, "graph")
    n = len(weights)
    if n == 0:
        return []
    key = [INF] * n
    parent: list[int | None] = [None] * n
    in_tree = [False] * n
    key[0] = 0

    for _ in range(n - 1):
        candidates = [v for v in range(n) if not in_tree[v] and key[v] < INF]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=key.__getitem__)
        in_tree[u] = True
        for v, weight in enumerate(weights[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight

    tree = []
    for vertex in range(1, n):
        source = parent[vertex]
        if source is None:
            raise ValueError("graph is not connected")
        tree.append(Edge(source, vertex, weights[vertex][source]))
    return tree


def topological_sort(adjacency: Iterable[Sequence[Any]]) -> list[int]:
    """Order vertices so that every edge ``u -> v`` has ``u`` before ``v``.

    A truthy ``adjacency[u][v]`` is an edge. Vertices are explored depth-first
    in index order and listed by decreasing finishing time.
    """
    matrix = _square(adjacency, "adjacency")
    visited = [False] * len(matrix)
    finished: list[int] = []
    for start in range(len(matrix)):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(enumerate(matrix[start])))]
        while stack:
            vertex, pending = stack[-1]
            for nxt, linked in pending:
                if linked and not visited[nxt]:
                    visited[nxt] = True
                    stack.append((nxt, iter(enumerate(matrix[nxt]))))
                    break
            else:
                stack.pop()
                finished.append(vertex)
    finished.reverse()
    return finished