"""Single-source shortest paths on non-negatively weighted graphs."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence

UNREACHABLE = math.inf

Adjacency = Sequence[Sequence[tuple[int, int]]]


def _check(vertices: int, adjacency: Adjacency, source: int) -> None:
    if len(adjacency) != vertices:
        raise ValueError("adjacency must hold one list of (neighbour, weight) pairs per vertex")
    if not 0 <= source < vertices:
        raise ValueError(f"source {source} is outside the range 0..{vertices - 1}")
    for edges in adjacency:
        for neighbour, _ in edges:
            if not 0 <= neighbour < vertices:
                raise ValueError(f"vertex {neighbour} is outside the range 0..{vertices - 1}")


def dijkstra_brute(vertices: int, adjacency: Adjacency, source: int) -> list[float]:
    """Return distances from source, scanning for the nearest unsettled vertex each round; inf if unreachable."""
    _check(vertices, adjacency, source)
    distances = [UNREACHABLE] * vertices
    distances[source] = 0
    settled = [False] * vertices
    for _ in range(vertices):
        candidates = [
            (distance, node)
            for node, distance in enumerate(distances)
            if not settled[node] and distance < UNREACHABLE
        ]
        if not candidates:
            break
        _, node = min(candidates)
        settled[node] = True
        for neighbour, weight in adjacency[node]:
            if distances[node] + weight < distances[neighbour]:
                distances[neighbour] = distances[node] + weight
    return distances


def dijkstra(vertices: int, adjacency: Adjacency, source: int) -> list[float]:
    """Return distances from source using a binary heap; inf if unreachable."""
    _check(vertices, adjacency, source)
    distances = [UNREACHABLE] * vertices
    distances[source] = 0
    heap = [(0, source)]
    while heap:
        distance, node = heapq.heappop(heap)
        if distance > distances[node]:
            continue
        for neighbour, weight in adjacency[node]:
            candidate = distance + weight
            if candidate < distances[neighbour]:
                distances[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return distances