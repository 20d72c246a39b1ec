"""Minimum spanning trees: Kruskal's and Prim's algorithms."""

from __future__ import annotations

import math
from typing import Dict, Hashable, Iterable, List, Sequence, Tuple


class DisjointSet:
    """Union-find over hashable items, with union by rank and path compression."""

    def __init__(self, items: Iterable[Hashable] = ()) -> None:
        self._parent: Dict[Hashable, Hashable] = {}
        self._rank: Dict[Hashable, int] = {}
        for item in items:
            self.add(item)

    def add(self, item: Hashable) -> None:
        """Add ``item`` as a singleton set if it is not already present."""
        if item not in self._parent:
            self._parent[item] = item
            self._rank[item] = 0

    def __contains__(self, item: object) -> bool:
        return item in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, item: Hashable) -> Hashable:
        """Return the representative of the set holding ``item``."""
        self.add(item)
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Join the sets of ``a`` and ``b``; return False if they were already one."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        if self._rank[root_a] < self._rank[root_b]:
            self._parent[root_a] = root_b
        elif self._rank[root_a] > self._rank[root_b]:
            self._parent[root_b] = root_a
        else:
            self._parent[root_b] = root_a
            self._rank[root_a] += 1
        return True


def kruskal_cost(edges: Iterable[Tuple[Hashable, Hashable, int]]) -> int:
    """Return the total weight of a minimum spanning forest of ``(u, v, weight)`` edges."""
    sets = DisjointSet()
    total = 0
    for u, v, weight in sorted(edges, key=lambda edge: edge[2]):
        if sets.union(u, v):
            total += weight
    return total


def prim_mst(graph: Sequence[Sequence[int]]) -> List[Tuple[int, int, int]]:
    """Return the MST of an adjacency matrix as ``(parent, vertex, weight)`` edges.

    A zero entry means there is no edge. Edges are listed by vertex, from
    vertex 1 onwards; vertex 0 is the root.
    """
    n = len(graph)
    if any(len(row) != n for row in graph):
        raise ValueError("adjacency matrix must be square")
    if n == 0:
        return []

    key: List[float] = [math.inf] * n
    parent: List[int] = [-1] * n
    in_tree = [False] * n
    key[0] = 0

    for _ in range(n):
        u = min((v for v in range(n) if not in_tree[v]), key=lambda v: key[v])
        if key[u] == math.inf:
            raise ValueError("graph is not connected")
        in_tree[u] = True
        for v in range(n):
            weight = graph[u][v]
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight

    return [(parent[v], v, graph[parent[v]][v]) for v in range(1, n)]