"""Undirected-graph drills: breadth-first search, components, shortest paths and bipartiteness."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Sequence

UNREACHABLE = -1


def _check_vertex(vertex: int, count: int) -> None:
    if not 0 <= vertex < count:
        raise ValueError(f"vertex {vertex} is outside the range 0..{count - 1}")


def _bfs(count: int, start: int, neighbours_of: Callable[[int], Iterable[int]]) -> list[int]:
    if count == 0:
        return []
    _check_vertex(start, count)
    visited = {start}
    queue = deque([start])
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in neighbours_of(node):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def _matrix_neighbours(matrix: Sequence[Sequence[int]]) -> Callable[[int], Iterable[int]]:
    return lambda node: (j for j, edge in enumerate(matrix[node]) if edge == 1)


def bfs_matrix(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return the breadth-first visiting order from start over an adjacency matrix."""
    return _bfs(len(matrix), start, _matrix_neighbours(matrix))


def bfs_list(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return the breadth-first visiting order from start over adjacency lists."""
    return _bfs(len(adjacency), start, lambda node: adjacency[node])


def count_provinces(is_connected: Sequence[Sequence[int]]) -> int:
    """Return the number of connected components of a graph given as an adjacency matrix."""
    count = len(is_connected)
    visited = [False] * count
    neighbours_of = _matrix_neighbours(is_connected)
    provinces = 0
    for root in range(count):
        if visited[root]:
            continue
        provinces += 1
        visited[root] = True
        stack = [root]
        while stack:
            node = stack.pop()
            for neighbour in neighbours_of(node):
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append(neighbour)
    return provinces


def _undirected_adjacency(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        _check_vertex(u, n)
        _check_vertex(v, n)
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def shortest_path_brute(n: int, edges: Iterable[Sequence[int]], source: int) -> list[int]:
    """Return unit-weight distances from source by exploring every simple path; -1 if unreachable."""
    adjacency = _undirected_adjacency(n, edges)
    _check_vertex(source, n)
    distances: list[int | None] = [None] * n
    on_path = [False] * n

    def explore(node: int, distance: int) -> None:
        known = distances[node]
        if known is not None and distance >= known:
            return
        distances[node] = distance
        on_path[node] = True
        for neighbour in adjacency[node]:
            if not on_path[neighbour]:
                explore(neighbour, distance + 1)
        on_path[node] = False

    explore(source, 0)
    return [UNREACHABLE if d is None else d for d in distances]


def shortest_path(n: int, edges: Iterable[Sequence[int]], source: int) -> list[int]:
    """Return unit-weight distances from source by breadth-first search; -1 if unreachable."""
    adjacency = _undirected_adjacency(n, edges)
    _check_vertex(source, n)
    distances = [UNREACHABLE] * n
    distances[source] = 0
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if distances[neighbour] == UNREACHABLE:
                distances[neighbour] = distances[node] + 1
                queue.append(neighbour)
    return distances


def _two_colourable(vertices: int, neighbours_of: Callable[[int], Iterable[int]]) -> bool:
    colour: list[int | None] = [None] * vertices
    for root in range(vertices):
        if colour[root] is not None:
            continue
        colour[root] = 0
        stack = [root]
        while stack:
            node = stack.pop()
            for neighbour in neighbours_of(node):
                if colour[neighbour] is None:
                    colour[neighbour] = 1 - colour[node]
                    stack.append(neighbour)
                elif colour[neighbour] == colour[node]:
                    return False
    return True


def is_bipartite_matrix(vertices: int, matrix: Sequence[Sequence[int]]) -> bool:
    """Tell whether a graph given as an adjacency matrix can be two-coloured."""
    if len(matrix) != vertices:
        raise ValueError("matrix must hold one row per vertex")
    return _two_colourable(vertices, _matrix_neighbours(matrix))


def is_bipartite(vertices: int, adjacency: Sequence[Sequence[int]]) -> bool:
    """Tell whether a graph given as adjacency lists can be two-coloured."""
    if len(adjacency) != vertices:
        raise ValueError("adjacency must hold one list of neighbours per vertex")
    for neighbours in adjacency:
        for neighbour in neighbours:
            _check_vertex(neighbour, vertices)
    return _two_colourable(vertices, lambda node: adjacency[node])