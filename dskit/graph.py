"""Graph algorithms over adjacency matrices and edge lists.

In a weighted adjacency matrix a zero entry means "no edge". The traversal
functions follow only entries equal to 1.
"""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import permutations
from operator import attrgetter
from typing import Union

Matrix = Sequence[Sequence[int]]


@dataclass(frozen=True)
class Edge:
    """A weighted, undirected edge between two vertices."""

    source: int
    destination: int
    weight: int


@dataclass(frozen=True)
class SpanningTree:
    """The edges picked for a minimum spanning tree, in the order chosen."""

    edges: tuple[Edge, ...]

    @property
    def total_weight(self) -> int:
        return sum(edge.weight for edge in self.edges)


def _size(matrix: Matrix) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return n


def _check_vertex(vertex: int, count: int) -> None:
    if not 0 <= vertex < count:
        raise ValueError(f"vertex {vertex} is out of range 0..{count - 1}")


def dijkstra(matrix: Matrix, source: int = 0) -> list[float]:
    """Return the shortest distance from ``source`` to every vertex.

    Vertices that cannot be reached get ``math.inf``.
    """
    n = _size(matrix)
    _check_vertex(source, n)
    dist: list[float] = [math.inf] * n
    dist[source] = 0
    visited: set[int] = set()
    for _ in range(n - 1):
        u = min((v for v in range(n) if v not in visited), key=dist.__getitem__)
        visited.add(u)
        if dist[u] == math.inf:
            break
        for v, weight in enumerate(matrix[u]):
            if weight and v not in visited and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def tsp_cost(matrix: Matrix, start: int = 0) -> int:
    """Return the cost of the cheapest tour that visits every city once and
    comes back to ``start``; raise ValueError if no such tour exists."""
    n = _size(matrix)
    _check_vertex(start, n)
    others = [v for v in range(n) if v != start]
    best: Union[int, None] = None
    for order in permutations(others):
        route = (start, *order, start)
        legs = [matrix[a][b] for a, b in zip(route, route[1:])]
        if all(legs):
            cost = sum(legs)
            if best is None or cost < best:
                best = cost
    if best is None:
        raise ValueError("no tour visits every city")
    return best


def _neighbours(matrix: Matrix, vertex: int) -> Iterator[int]:
    return (v for v, linked in enumerate(matrix[vertex]) if linked == 1)


def bfs(matrix: Matrix, start: int = 0) -> list[int]:
    """Return the vertices in breadth-first order from ``start``."""
    n = _size(matrix)
    _check_vertex(start, n)
    seen = {start}
    order: list[int] = []
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for neighbour in _neighbours(matrix, vertex):
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)
    return order


def dfs(matrix: Matrix, start: int = 0) -> list[int]:
    """Return the vertices in depth-first order from ``start``, taking the
    lowest-numbered unvisited neighbour first."""
    n = _size(matrix)
    _check_vertex(start, n)
    seen = {start}
    order = [start]
    stack = [_neighbours(matrix, start)]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in seen:
                seen.add(neighbour)
                order.append(neighbour)
                stack.append(_neighbours(matrix, neighbour))
                break
        else:
            stack.pop()
    return order


def prim_mst(matrix: Matrix) -> SpanningTree:
    """Build a minimum spanning tree with Prim's algorithm from vertex 0.

    The edges are listed by their second vertex, 1 to n-1. Raise ValueError
    if the graph is empty or not connected.
    """
    n = _size(matrix)
    if n == 0:
        raise ValueError("graph has no vertices")

    def weight(u: int, v: int) -> float:
        return matrix[u][v] or math.inf

    key: list[float] = [math.inf] * n
    parent: list[int] = [-1] * n
    key[0] = 0
    in_tree: set[int] = set()
    for _ in range(n - 1):
        u = min((v for v in range(n) if v not in in_tree), key=key.__getitem__)
        if key[u] == math.inf:
            raise ValueError("graph is not connected")
        in_tree.add(u)
        for v in range(n):
            if v not in in_tree and weight(u, v) < key[v]:
                parent[v] = u
                key[v] = weight(u, v)
    if any(k == math.inf for k in key):
        raise ValueError("graph is not connected")
    return SpanningTree(
        tuple(Edge(parent[v], v, matrix[v][parent[v]]) for v in range(1, n))
    )


def kruskal_mst(
    vertex_count: int, edges: Iterable[Union[Edge, tuple[int, int, int]]]
) -> SpanningTree:
    """Build a minimum spanning tree (or forest) with Kruskal's algorithm.

    ``edges`` holds Edge objects or (source, destination, weight) tuples.
    Edges are considered in order of weight; ties keep their given order.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    candidates = [edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges]
    for edge in candidates:
        _check_vertex(edge.source, vertex_count)
        _check_vertex(edge.destination, vertex_count)

    parent = list(range(vertex_count))

    def find(vertex: int) -> int:
        while parent[vertex] != vertex:
            vertex = parent[vertex]
        return vertex

    chosen: list[Edge] = []
    for edge in sorted(candidates, key=attrgetter("weight")):
        if len(chosen) >= vertex_count - 1:
            break
        root_u, root_v = find(edge.source), find(edge.destination)
        if root_u != root_v:
            chosen.append(edge)
            parent[root_v] = root_u
    return SpanningTree(tuple(chosen))