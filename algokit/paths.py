"""Hamiltonian paths, strongly connected components and shortest paths in DAGs."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import pairwise, permutations


def _require_square(adjacency: Sequence[Sequence[int]]) -> int:
    size = len(adjacency)
    if size == 0:
        raise ValueError("adjacency matrix must hold at least one vertex")
    if any(len(row) != size for row in adjacency):
        raise ValueError("adjacency must be a square matrix")
    return size


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"vertex {vertex} is outside 0..{vertex_count - 1}")


def _check_count(vertex_count: int) -> None:
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")


def _depth_first(
    adjacency: Sequence[Sequence[int]], root: int, visited: list[bool]
) -> tuple[list[int], list[int]]:
    """Visit from root; return (discovery order, finishing order)."""
    discovered = [root]
    finished: list[int] = []
    visited[root] = True
    stack: list[tuple[int, Iterator[int]]] = [(root, iter(adjacency[root]))]
    while stack:
        vertex, neighbours = stack[-1]
        for neighbour in neighbours:
            if not visited[neighbour]:
                visited[neighbour] = True
                discovered.append(neighbour)
                stack.append((neighbour, iter(adjacency[neighbour])))
                break
        else:
            stack.pop()
            finished.append(vertex)
    return discovered, finished


def hamiltonian_path(adjacency: Sequence[Sequence[int]]) -> list[int] | None:
    """A path starting at vertex 0 that visits every vertex once, by backtracking.

    Non-zero matrix entries are edges. Returns None when no such path exists.
    """
    size = _require_square(adjacency)
    path = [0]
    used = {0}

    def extend() -> bool:
        if len(path) == size:
            return True
        last = path[-1]
        for vertex, edge in enumerate(adjacency[last]):
            if edge != 0 and vertex not in used:
                path.append(vertex)
                used.add(vertex)
                if extend():
                    return True
                path.pop()
                used.discard(vertex)
        return False

    return path if extend() else None


def hamiltonian_path_brute_force(adjacency: Sequence[Sequence[int]]) -> list[int] | None:
    """The first vertex ordering, in lexicographic order, that forms a path.

    Non-zero matrix entries are edges. Returns None when no ordering works.
    """
    size = _require_square(adjacency)
    for order in permutations(range(size)):
        if all(adjacency[a][b] != 0 for a, b in pairwise(order)):
            return list(order)
    return None


def strongly_connected_components(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Strongly connected components of a directed graph on 0..vertex_count-1.

    Uses two depth-first passes (Kosaraju). Components are listed in the
    order the second pass finds them, each in its visiting order.
    """
    _check_count(vertex_count)
    forward: list[list[int]] = [[] for _ in range(vertex_count)]
    for start, end in edges:
        _check_vertex(start, vertex_count)
        _check_vertex(end, vertex_count)
        forward[start].append(end)

    backward: list[list[int]] = [[] for _ in range(vertex_count)]
    for start, targets in enumerate(forward):
        for end in targets:
            backward[end].append(start)

    visited = [False] * vertex_count
    finishing: list[int] = []
    for root in range(vertex_count):
        if not visited[root]:
            finishing.extend(_depth_first(forward, root, visited)[1])

    visited = [False] * vertex_count
    components: list[list[int]] = []
    for vertex in reversed(finishing):
        if not visited[vertex]:
            components.append(_depth_first(backward, vertex, visited)[0])
    return components


def dag_shortest_distances(
    vertex_count: int, edges: Iterable[tuple[int, int, int]], source: int
) -> list[int | None]:
    """Shortest distance from source to every vertex of a weighted DAG.

    Edges are (start, end, weight) and may carry negative weights. Vertices
    that cannot be reached from source get None.
    """
    _check_count(vertex_count)
    _check_vertex(source, vertex_count)
    weighted: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for start, end, weight in edges:
        _check_vertex(start, vertex_count)
        _check_vertex(end, vertex_count)
        weighted[start].append((end, weight))

    targets = [[end for end, _ in out] for out in weighted]
    visited = [False] * vertex_count
    finishing: list[int] = []
    for root in range(vertex_count):
        if not visited[root]:
            finishing.extend(_depth_first(targets, root, visited)[1])

    distance: list[int | None] = [None] * vertex_count
    distance[source] = 0
    for vertex in reversed(finishing):
        base = distance[vertex]
        if base is None:
            continue
        for end, weight in weighted[vertex]:
            candidate = base + weight
            current = distance[end]
            if current is None or candidate < current:
                distance[end] = candidate
    return distance