"""Graph algorithms: union-find, cheapest bounded-stop route and minimum spanning cost."""

from __future__ import annotations

import heapq
import math
from collections import defaultdict
from typing import Sequence


class DisjointSet:
    """Union-find over the elements 0..n with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)

    def find(self, x: int) -> int:
        """Return the representative of ``x``'s set."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while x != root:
            following = self._parent[x]
            self._parent[x] = root
            x = following
        return root

    def union(self, u: int, v: int) -> bool:
        """Join the sets of ``u`` and ``v``; return False if they were already one."""
        root_u = self.find(u)
        root_v = self.find(v)
        if root_u == root_v:
            return False
        if self._rank[root_u] < self._rank[root_v]:
            self._parent[root_u] = root_v
        elif self._rank[root_v] < self._rank[root_u]:
            self._parent[root_v] = root_u
        else:
            self._parent[root_v] = root_u
            self._rank[root_u] += 1
        return True


def find_redundant_connection(edges: Sequence[Sequence[int]]) -> list[int]:
    """Return the first edge that closes a cycle, or an empty list if none does."""
    sets = DisjointSet(len(edges))
    for edge in edges:
        u, v = edge[0], edge[1]
        if sets.find(u) == sets.find(v):
            return list(edge)
        sets.union(u, v)
    return []


def find_cheapest_price(
    n: int, flights: Sequence[Sequence[int]], src: int, dst: int, k: int
) -> int:
    """Return the cheapest price from ``src`` to ``dst`` with at most ``k`` stops, or -1."""
    adjacency: dict[int, list[tuple[int, int]]] = defaultdict(list)
    for u, v, w in flights:
        adjacency[u].append((v, w))

    distance = [math.inf] * n
    distance[src] = 0
    frontier = [(src, 0)]
    for _ in range(k + 1):
        if not frontier:
            break
        reached = []
        for node, cost in frontier:
            for neighbour, price in adjacency[node]:
                if distance[neighbour] > cost + price:
                    distance[neighbour] = cost + price
                    reached.append((neighbour, cost + price))
        frontier = reached

    return -1 if distance[dst] == math.inf else int(distance[dst])


def min_cost_connect_points(points: Sequence[Sequence[int]]) -> int:
    """Return the minimum total Manhattan distance connecting all points."""
    count = len(points)
    if count == 0:
        return 0
    visited = [False] * count
    heap = [(0, 0)]
    total = 0
    while heap:
        weight, node = heapq.heappop(heap)
        if visited[node]:
            continue
        visited[node] = True
        total += weight
        x, y = points[node][0], points[node][1]
        for other, point in enumerate(points):
            if not visited[other]:
                distance = abs(x - point[0]) + abs(y - point[1])
                heapq.heappush(heap, (distance, other))
    return total