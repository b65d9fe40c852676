from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Hashable, Iterable
from time import perf_counter
from typing import TypeVar

from puzzlekit.graph import AdjacencyGraph
from puzzlekit.grid import in_bounds, neighbors4
from puzzlekit.models import (
    UNREACHABLE,
    DistanceField,
    DistanceVector,
    Grid,
    Point,
    SearchDiagnostics,
    SearchKind,
    T,
)

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)


def bfs_grid_with_diagnostics(
    grid: Grid[T],
    start: Point,
    passable: Callable[[T], bool],
) -> tuple[DistanceField, SearchDiagnostics]:
    """Unit-cost distances from ``start`` over 4-connected passable cells.

    The field mirrors the grid's row lengths. An out-of-bounds start yields an
    all-unreachable field without traversing.
    """

    t0 = perf_counter()
    dist: DistanceField = [[UNREACHABLE] * len(row) for row in grid]

    if not in_bounds(grid, start.x, start.y):
        logger.debug("grid bfs start (%d, %d) out of bounds", start.x, start.y)
        return dist, _diag("grid", 0, t0)

    def enterable(point: Point) -> bool:
        return passable(grid[point.y][point.x])

    expanded = _level_order(
        start,
        _FieldView(dist),
        lambda point: neighbors4(grid, point),
        admit=enterable,
    )
    return dist, _diag("grid", expanded, t0)


def bfs_dist_grid(
    grid: Grid[T],
    start: Point,
    passable: Callable[[T], bool],
) -> DistanceField:
    dist, _ = bfs_grid_with_diagnostics(grid, start, passable)
    return dist


def bfs_graph_with_diagnostics(
    graph: AdjacencyGraph,
    src: int,
) -> tuple[DistanceVector, SearchDiagnostics]:
    t0 = perf_counter()
    if not 0 <= src < len(graph):
        raise IndexError(f"Source node {src} is out of range for a graph with {len(graph)} nodes")

    dist: DistanceVector = [UNREACHABLE] * len(graph)
    expanded = _level_order(src, dist, graph.neighbors)
    return dist, _diag("graph", expanded, t0)


def bfs_dist(graph: AdjacencyGraph, src: int) -> DistanceVector:
    dist, _ = bfs_graph_with_diagnostics(graph, src)
    return dist


def _level_order(
    source: N,
    dist: _FieldView | DistanceVector,
    neighbors: Callable[[N], Iterable[N]],
    admit: Callable[[N], bool] | None = None,
) -> int:
    """FIFO traversal assigning ``parent + 1`` on first discovery.

    ``admit`` is only consulted for unvisited neighbours, never for ``source``.

    Returns the number of dequeued nodes, which equals the number reached.
    """

    dist[source] = 0
    queue: deque[N] = deque([source])
    expanded = 0

    while queue:
        current = queue.popleft()
        expanded += 1
        step = dist[current] + 1
        for nxt in neighbors(current):
            if dist[nxt] != UNREACHABLE:
                continue
            if admit is not None and not admit(nxt):
                continue
            dist[nxt] = step
            queue.append(nxt)

    return expanded


class _FieldView:
    """Point-keyed view over a row-major distance field."""

    def __init__(self, field: DistanceField) -> None:
        self._field = field

    def __getitem__(self, point: Point) -> int:
        return self._field[point.y][point.x]

    def __setitem__(self, point: Point, value: int) -> None:
        self._field[point.y][point.x] = value


def _diag(kind: SearchKind, expanded_nodes: int, started_at: float) -> SearchDiagnostics:
    elapsed_ms = (perf_counter() - started_at) * 1000.0
    logger.debug("%s bfs reached %d nodes in %.3f ms", kind, expanded_nodes, elapsed_ms)
    return SearchDiagnostics(
        kind=kind,
        expanded_nodes=expanded_nodes,
        search_time_ms=round(elapsed_ms, 3),
    )
