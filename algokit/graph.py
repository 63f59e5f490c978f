"""Adjacency-list graph with traversals, shortest paths, topological order and cycle checks."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Iterator

Vertex = Hashable


class Graph:
    """A graph stored as adjacency lists, holding directed and undirected edges.

    Vertices are kept in the order they were first named as the start of an
    edge (or as either end of an undirected edge); traversals that sweep over
    all vertices follow that order.
    """

    def __init__(self) -> None:
        self._adjacency: dict[Vertex, list[Vertex]] = {}

    def add_edge(self, start: Vertex, end: Vertex, directed: bool = False) -> None:
        """Add an edge from start to end, and back again unless directed."""
        self._adjacency.setdefault(start, []).append(end)
        if not directed:
            self._adjacency.setdefault(end, []).append(start)

    def _neighbours(self, vertex: Vertex) -> list[Vertex]:
        return self._adjacency.get(vertex, [])

    def _all_vertices(self) -> list[Vertex]:
        seen: dict[Vertex, None] = {}
        for vertex, neighbours in self._adjacency.items():
            seen.setdefault(vertex)
            for neighbour in neighbours:
                seen.setdefault(neighbour)
        return list(seen)

    def format_adjacency(self) -> str:
        """One line per vertex: ``v ----> a, b, c``, each ending in a newline."""
        return "".join(
            f"{vertex} ----> {', '.join(str(n) for n in neighbours)}\n"
            for vertex, neighbours in self._adjacency.items()
        )

    def _bfs(self, start: Vertex, visited: set[Vertex]) -> Iterator[Vertex]:
        queue = deque([start])
        visited.add(start)
        while queue:
            current = queue.popleft()
            yield current
            for neighbour in self._neighbours(current):
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)

    def bfs_traversal(self, start: Vertex) -> list[Vertex]:
        """Breadth-first order from start, then from each unvisited vertex in turn."""
        visited: set[Vertex] = set()
        order = list(self._bfs(start, visited))
        for vertex in self._adjacency:
            if vertex not in visited:
                order.extend(self._bfs(vertex, visited))
        return order

    def dfs_traversal(self) -> list[Vertex]:
        """Stack-based depth-first order covering every component."""
        visited: set[Vertex] = set()
        order: list[Vertex] = []
        for root in self._adjacency:
            if root in visited:
                continue
            stack = [root]
            visited.add(root)
            while stack:
                top = stack.pop()
                order.append(top)
                for neighbour in self._neighbours(top):
                    if neighbour not in visited:
                        visited.add(neighbour)
                        stack.append(neighbour)
        return order

    def shortest_path(self, start: Vertex, end: Vertex) -> list[Vertex]:
        """Fewest-edge path from start to end found by BFS, or [] if none."""
        parent: dict[Vertex, Vertex | None] = {start: None}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbour in self._neighbours(current):
                if neighbour not in parent:
                    parent[neighbour] = current
                    queue.append(neighbour)
            if end in parent:
                path: list[Vertex] = []
                node: Vertex | None = end
                while node is not None or (not path and end is None):
                    path.append(node)
                    if node == start:
                        break
                    node = parent[node]
                path.reverse()
                return path
        return []

    def _walk(self, root: Vertex) -> Iterator[tuple[Vertex, Iterator[Vertex]]]:
        return iter([(root, iter(self._neighbours(root)))])

    def topological_sort(self) -> list[Vertex]:
        """Vertices in reverse DFS finishing order; meaningful for acyclic graphs."""
        visited: set[Vertex] = set()
        finished: list[Vertex] = []
        for root in self._adjacency:
            if root in visited:
                continue
            visited.add(root)
            stack: list[tuple[Vertex, Iterator[Vertex]]] = list(self._walk(root))
            while stack:
                vertex, neighbours = stack[-1]
                for neighbour in neighbours:
                    if neighbour not in visited:
                        visited.add(neighbour)
                        stack.append((neighbour, iter(self._neighbours(neighbour))))
                        break
                else:
                    stack.pop()
                    finished.append(vertex)
        finished.reverse()
        return finished

    def is_cyclic_directed_dfs(self) -> bool:
        """True if following edges as directed can return to a vertex (DFS check)."""
        on_stack: set[Vertex] = set()
        done: set[Vertex] = set()
        for root in self._adjacency:
            if root in on_stack or root in done:
                continue
            on_stack.add(root)
            stack: list[tuple[Vertex, Iterator[Vertex]]] = list(self._walk(root))
            while stack:
                vertex, neighbours = stack[-1]
                for neighbour in neighbours:
                    if neighbour in on_stack:
                        return True
                    if neighbour not in done:
                        on_stack.add(neighbour)
                        stack.append((neighbour, iter(self._neighbours(neighbour))))
                        break
                else:
                    stack.pop()
                    on_stack.discard(vertex)
                    done.add(vertex)
        return False

    def is_cyclic_directed_bfs(self) -> bool:
        """True if Kahn's algorithm cannot remove every vertex."""
        vertices = self._all_vertices()
        in_degree = dict.fromkeys(vertices, 0)
        for neighbours in self._adjacency.values():
            for neighbour in neighbours:
                in_degree[neighbour] += 1
        queue = deque(v for v in vertices if in_degree[v] == 0)
        removed = 0
        while queue:
            current = queue.popleft()
            removed += 1
            for neighbour in self._neighbours(current):
                in_degree[neighbour] -= 1
                if in_degree[neighbour] == 0:
                    queue.append(neighbour)
        return removed != len(vertices)

    def _undirected_search(self, roots: Iterable[Vertex], breadth_first: bool) -> bool:
        visited: set[Vertex] = set()
        for root in roots:
            if root in visited:
                continue
            visited.add(root)
            if breadth_first:
                queue: deque[tuple[Vertex, Vertex | None]] = deque([(root, None)])
                while queue:
                    vertex, parent = queue.popleft()
                    for neighbour in self._neighbours(vertex):
                        if neighbour not in visited:
                            visited.add(neighbour)
                            queue.append((neighbour, vertex))
                        elif neighbour != parent:
                            return True
            else:
                stack = [(root, None, iter(self._neighbours(root)))]
                while stack:
                    vertex, parent, neighbours = stack[-1]
                    for neighbour in neighbours:
                        if neighbour not in visited:
                            visited.add(neighbour)
                            stack.append(
                                (neighbour, vertex, iter(self._neighbours(neighbour)))
                            )
                            break
                        if neighbour != parent:
                            return True
                    else:
                        stack.pop()
        return False

    def is_cyclic_undirected_dfs(self) -> bool:
        """True if the undirected graph holds a cycle (DFS with parent tracking)."""
        return self._undirected_search(self._adjacency, breadth_first=False)

    def is_cyclic_undirected_bfs(self) -> bool:
        """True if the undirected graph holds a cycle (BFS with parent tracking)."""
        return self._undirected_search(self._adjacency, breadth_first=True)