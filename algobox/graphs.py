"""Graph algorithms: connected components and minimum spanning trees."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence


class DisjointSet:
    """Union-find over ``0 .. size - 1`` with path compression and ranks."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._parent = [-1] * size
        self._rank = [1] * size

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, i: int) -> None:
        if not 0 <= i < len(self._parent):
            raise IndexError(f"element {i} is out of range")

    def find(self, i: int) -> int:
        """Return the representative of the set that holds ``i``."""
        self._check(i)
        root = i
        while self._parent[root] != -1:
            root = self._parent[root]
        node = i
        while node != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union(self, x: int, y: int) -> bool:
        """Join the sets of ``x`` and ``y``; return False if already joined."""
        s1 = self.find(x)
        s2 = self.find(y)
        if s1 == s2:
            return False
        if self._rank[s1] < self._rank[s2]:
            self._parent[s1] = s2
            self._rank[s2] *= 2
        else:
            self._parent[s2] = s1
            self._rank[s1] *= 2
        return True


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"vertex {vertex} is out of range")


def connected_components(
    vertex_count: int, edges: Iterable[Sequence[int]]
) -> list[list[int]]:
    """Return the components of an undirected graph in depth-first order.

    Each edge is ``(u, v)`` or ``(u, v, weight)``; weights are ignored.
    Components are listed by their smallest vertex, and the vertices of
    each component in the order a depth-first search reaches them.
    """
    if vertex_count < 0:
        raise ValueError("vertex_count must be non-negative")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for edge in edges:
        u, v = edge[0], edge[1]
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        adjacency[u].append(v)
        adjacency[v].append(u)

    visited = [False] * vertex_count
    components: list[list[int]] = []
    for start in range(vertex_count):
        if visited[start]:
            continue
        visited[start] = True
        component = [start]
        stack: list[Iterator[int]] = [iter(adjacency[start])]
        while stack:
            for neighbour in stack[-1]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    component.append(neighbour)
                    stack.append(iter(adjacency[neighbour]))
                    break
            else:
                stack.pop()
        components.append(component)
    return components


def kruskal_mst_weight(
    vertex_count: int, edges: Iterable[tuple[int, int, float]]
) -> float:
    """Return the total weight of a minimum spanning forest.

    Each edge is ``(x, y, weight)``.
    """
    ordered = sorted((w, x, y) for x, y, w in edges)
    for _, x, y in ordered:
        _check_vertex(x, vertex_count)
        _check_vertex(y, vertex_count)
    sets = DisjointSet(vertex_count)
    total = 0
    for weight, x, y in ordered:
        if sets.union(x, y):
            total += weight
    return total


def prim_mst(matrix: Sequence[Sequence[float]]) -> list[tuple[int, int, float]]:
    """Return the edges ``(parent, vertex, weight)`` of a minimum spanning tree.

    ``matrix`` is a square adjacency matrix in which 0 means no edge. The
    tree is grown from vertex 0 and one edge is given for every other
    vertex, in vertex order.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if size == 0:
        return []

    value = [math.inf] * size
    parent = [-1] * size
    in_tree = [False] * size
    value[0] = 0

    for _ in range(size - 1):
        candidates = [
            i for i in range(size) if not in_tree[i] and value[i] < math.inf
        ]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=value.__getitem__)
        in_tree[u] = True
        for j, weight in enumerate(matrix[u]):
            if weight != 0 and not in_tree[j] and weight < value[j]:
                value[j] = weight
                parent[j] = u

    if any(parent[i] == -1 for i in range(1, size)):
        raise ValueError("graph is not connected")
    return [(parent[i], i, matrix[parent[i]][i]) for i in range(1, size)]