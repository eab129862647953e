"""Directed-graph drills: topological orders, cycle detection, task scheduling and safe nodes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from itertools import permutations

_NEW, _ACTIVE, _DONE = 0, 1, 2


class CycleError(ValueError):
    """Raised when a topological order is requested for a graph that has a cycle."""


def _check_vertex(vertex: int, count: int, first: int = 0) -> None:
    if not first <= vertex < first + count:
        raise ValueError(
            f"vertex {vertex} is outside the range {first}..{first + count - 1}"
        )


def _kahn(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Return the vertices Kahn's algorithm can order; fewer than all when there is a cycle."""
    in_degree = [0] * len(adjacency)
    for neighbours in adjacency:
        for neighbour in neighbours:
            in_degree[neighbour] += 1

    queue = deque(node for node, degree in enumerate(in_degree) if degree == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            in_degree[neighbour] -= 1
            if in_degree[neighbour] == 0:
                queue.append(neighbour)
    return order


def _visit(
    adjacency: Sequence[Sequence[int]],
    root: int,
    state: list[int],
    finished: list[int],
) -> bool:
    """Depth-first search from root, appending vertices in post-order; True if a cycle is met."""
    state[root] = _ACTIVE
    stack = [(root, iter(adjacency[root]))]
    while stack:
        node, neighbours = stack[-1]
        for neighbour in neighbours:
            if state[neighbour] == _ACTIVE:
                return True
            if state[neighbour] == _NEW:
                state[neighbour] = _ACTIVE
                stack.append((neighbour, iter(adjacency[neighbour])))
                break
        else:
            stack.pop()
            state[node] = _DONE
            finished.append(node)
    return False


class Graph:
    """A directed graph on vertices 0..vertices-1 stored as adjacency lists."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("the number of vertices must not be negative")
        self.vertices = vertices
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def add_edge(self, u: int, v: int) -> None:
        """Add the directed edge u -> v."""
        _check_vertex(u, self.vertices)
        _check_vertex(v, self.vertices)
        self._adjacency[u].append(v)

    def topo_sort_dfs(self) -> list[int]:
        """Return the vertices in reverse depth-first finishing order."""
        visited = [False] * self.vertices
        finished: list[int] = []
        for root in range(self.vertices):
            if visited[root]:
                continue
            visited[root] = True
            stack = [(root, iter(self._adjacency[root]))]
            while stack:
                node, neighbours = stack[-1]
                for neighbour in neighbours:
                    if not visited[neighbour]:
                        visited[neighbour] = True
                        stack.append((neighbour, iter(self._adjacency[neighbour])))
                        break
                else:
                    stack.pop()
                    finished.append(node)
        finished.reverse()
        return finished

    def topo_sort_kahn(self) -> list[int]:
        """Return a topological order by repeatedly removing vertices of in-degree zero."""
        order = _kahn(self._adjacency)
        if len(order) < self.vertices:
            raise CycleError("graph has a cycle; topological sort not possible")
        return order


def _one_based_adjacency(vertices: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(vertices + 1)]
    for u, v in edges:
        _check_vertex(u, vertices, first=1)
        _check_vertex(v, vertices, first=1)
        adjacency[u].append(v)
    return adjacency


def has_cycle_brute(vertices: int, edges: Iterable[Sequence[int]]) -> bool:
    """Tell whether a graph on vertices 1..vertices has a cycle, searching afresh from each vertex."""
    adjacency = _one_based_adjacency(vertices, edges)
    for root in range(1, vertices + 1):
        state = [_NEW] * (vertices + 1)
        if _visit(adjacency, root, state, []):
            return True
    return False


def has_cycle(vertices: int, edges: Iterable[Sequence[int]]) -> bool:
    """Tell whether a graph on vertices 1..vertices has a cycle with one shared search."""
    adjacency = _one_based_adjacency(vertices, edges)
    state = [_NEW] * (vertices + 1)
    return any(
        _visit(adjacency, root, state, [])
        for root in range(1, vertices + 1)
        if state[root] == _NEW
    )


def _check_prerequisites(
    num_tasks: int, prerequisites: Iterable[Sequence[int]]
) -> list[tuple[int, int]]:
    pairs = []
    for task, prerequisite in prerequisites:
        _check_vertex(task, num_tasks)
        _check_vertex(prerequisite, num_tasks)
        pairs.append((task, prerequisite))
    return pairs


def _prerequisite_graph(num_tasks: int, pairs: Iterable[tuple[int, int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(num_tasks)]
    for task, prerequisite in pairs:
        adjacency[prerequisite].append(task)
    return adjacency


def _respects(order: Sequence[int], pairs: Iterable[tuple[int, int]]) -> bool:
    position = {task: index for index, task in enumerate(order)}
    return all(position[task] > position[prerequisite] for task, prerequisite in pairs)


def can_finish_permutations(num_tasks: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Tell whether every task can be done, trying every ordering of the tasks."""
    pairs = _check_prerequisites(num_tasks, prerequisites)
    return any(_respects(order, pairs) for order in permutations(range(num_tasks)))


def find_order_permutations(
    num_tasks: int, prerequisites: Iterable[Sequence[int]]
) -> list[int]:
    """Return the lexicographically first valid task order, or [] when none exists."""
    pairs = _check_prerequisites(num_tasks, prerequisites)
    return next(
        (list(order) for order in permutations(range(num_tasks)) if _respects(order, pairs)),
        [],
    )


def _dfs_order(num_tasks: int, prerequisites: Iterable[Sequence[int]]) -> list[int] | None:
    adjacency = _prerequisite_graph(num_tasks, _check_prerequisites(num_tasks, prerequisites))
    state = [_NEW] * num_tasks
    finished: list[int] = []
    for root in range(num_tasks):
        if state[root] == _NEW and _visit(adjacency, root, state, finished):
            return None
    finished.reverse()
    return finished


def can_finish(num_tasks: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Tell whether every task can be done, i.e. the prerequisites hold no cycle."""
    return _dfs_order(num_tasks, prerequisites) is not None


def find_order(num_tasks: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """Return a valid task order by depth-first topological sort, or [] on a cycle."""
    order = _dfs_order(num_tasks, prerequisites)
    return [] if order is None else order


def find_order_kahn(num_tasks: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """Return a valid task order by Kahn's algorithm, or [] on a cycle."""
    adjacency = _prerequisite_graph(num_tasks, _check_prerequisites(num_tasks, prerequisites))
    order = _kahn(adjacency)
    return order if len(order) == num_tasks else []


def _checked_adjacency(vertices: int, adjacency: Sequence[Sequence[int]]) -> list[list[int]]:
    if len(adjacency) != vertices:
        raise ValueError("adjacency must hold one list of neighbours per vertex")
    checked = [list(neighbours) for neighbours in adjacency]
    for neighbours in checked:
        for neighbour in neighbours:
            _check_vertex(neighbour, vertices)
    return checked


def eventual_safe_nodes_brute(vertices: int, adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Return, ascending, the vertices all of whose paths end at a terminal vertex, checking each anew."""
    graph = _checked_adjacency(vertices, adjacency)

    def is_safe(node: int, path: set[int]) -> bool:
        if not graph[node]:
            return True
        if node in path:
            return False
        path.add(node)
        try:
            return all(is_safe(neighbour, path) for neighbour in graph[node])
        finally:
            path.discard(node)

    return [node for node in range(vertices) if is_safe(node, set())]


def eventual_safe_nodes(vertices: int, adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Return, ascending, the vertices from which every path reaches a terminal vertex."""
    graph = _checked_adjacency(vertices, adjacency)
    state = [_NEW] * vertices
    safe = [False] * vertices

    def visit(node: int) -> bool:
        if state[node] == _ACTIVE:
            return False
        if state[node] == _DONE:
            return safe[node]
        state[node] = _ACTIVE
        safe[node] = all(visit(neighbour) for neighbour in graph[node])
        state[node] = _DONE
        return safe[node]

    for node in range(vertices):
        if state[node] == _NEW:
            visit(node)
    return [node for node in range(vertices) if safe[node]]