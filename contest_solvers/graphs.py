"""Graph and grid search problems: BFS, DFS, cycle detection, sprinklers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

Edge = tuple[int, int]
Graph = list[list[int]]


def build_graph(n: int, edges: Iterable[Edge]) -> Graph:
    """Build an undirected adjacency list for ``n`` vertices numbered from 0."""
    if n < 0:
        raise ValueError("vertex count must not be negative")
    graph: Graph = [[] for _ in range(n)]
    for a, b in edges:
        if not (0 <= a < n and 0 <= b < n):
            raise ValueError(f"edge ({a}, {b}) is out of range for {n} vertices")
        graph[a].append(b)
        graph[b].append(a)
    return graph


def _check_start(n: int, start: int) -> None:
    if not 0 <= start < n:
        raise ValueError(f"start vertex {start} is out of range for {n} vertices")


def bfs_distances(n: int, edges: Iterable[Edge], start: int = 0) -> list[int]:
    """Return the edge distance from ``start`` to every vertex, -1 if unreachable."""
    graph = build_graph(n, edges)
    _check_start(n, start)
    dist = [-1] * n
    dist[start] = 0
    queue = deque([start])
    while queue:
        v = queue.popleft()
        for nv in graph[v]:
            if dist[nv] == -1:
                dist[nv] = dist[v] + 1
                queue.append(nv)
    return dist


def reachable(n: int, edges: Iterable[Edge], start: int = 0) -> set[int]:
    """Return the set of vertices reached by a depth-first search from ``start``."""
    graph = build_graph(n, edges)
    _check_start(n, start)
    seen = {start}
    stack = [start]
    while stack:
        v = stack.pop()
        for next_v in graph[v]:
            if next_v not in seen:
                seen.add(next_v)
                stack.append(next_v)
    return seen


def is_cycle_graph(n: int, edges: Sequence[Edge]) -> bool:
    """Tell whether the graph is a single cycle through all ``n`` vertices."""
    if n < 1:
        raise ValueError("a graph needs at least one vertex")
    graph = build_graph(n, edges)
    connected = len(reachable(n, edges, 0)) == n
    all_degree_two = all(len(neighbours) == 2 for neighbours in graph)
    return connected and len(edges) == n and all_degree_two


def run_sprinkler(
    n: int,
    edges: Iterable[Edge],
    colors: Sequence[int],
    queries: Iterable[tuple[int, ...]],
) -> list[int]:
    """Process sprinkler queries and return the colour reported by each.

    A query ``(1, x)`` reports the colour of ``x`` and paints every neighbour
    of ``x`` with it; ``(2, x, y)`` reports the colour of ``x`` and repaints
    ``x`` with ``y``. Vertices are numbered from 0.
    """
    graph = build_graph(n, edges)
    if len(colors) != n:
        raise ValueError("there must be exactly one colour per vertex")
    current = list(colors)
    reported: list[int] = []
    for query in queries:
        match query:
            case (1, x):
                reported.append(current[x])
                for v in graph[x]:
                    current[v] = current[x]
            case (2, x, y):
                reported.append(current[x])
                current[x] = y
            case _:
                raise ValueError(f"malformed query: {query!r}")
    return reported


_STEPS = ((1, 0), (0, 1), (-1, 0), (0, -1))


def grid_repaint(grid: Sequence[str]) -> int | None:
    """Count white cells that can be blackened while keeping a shortest path.

    The path runs from the top-left to the bottom-right cell through ``.``
    cells; ``#`` cells are walls. Returns ``None`` when no path exists.
    """
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    height, width = len(grid), len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must all have the same length")

    dist = [[-1] * width for _ in range(height)]
    dist[0][0] = 0
    queue = deque([(0, 0)])
    while queue:
        x, y = queue.popleft()
        for dx, dy in _STEPS:
            x2, y2 = x + dx, y + dy
            if not (0 <= x2 < height and 0 <= y2 < width):
                continue
            if grid[x2][y2] == "#" or dist[x2][y2] != -1:
                continue
            dist[x2][y2] = dist[x][y] + 1
            queue.append((x2, y2))

    target = dist[height - 1][width - 1]
    if target == -1:
        return None
    white = sum(row.count(".") for row in grid)
    return white - (target + 1)