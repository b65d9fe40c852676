from __future__ import annotations

from collections.abc import Callable

from puzzlekit.grid import DIR4, in_bounds
from puzzlekit.models import Grid, Point, T


class AdjacencyGraph:
    """Dense-id graph: node ``u`` in ``[0, n)`` maps to its ordered neighbor list."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"Node count must be non-negative, got {n}")
        self._adjacency: list[list[int]] = [[] for _ in range(n)]

    def __len__(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return sum(len(neighbors) for neighbors in self._adjacency)

    def neighbors(self, u: int) -> tuple[int, ...]:
        self._check_node(u)
        return tuple(self._adjacency[u])

    def add_directed_edge(self, u: int, v: int) -> None:
        self._check_node(u)
        self._check_node(v)
        self._adjacency[u].append(v)

    def add_undirected_edge(self, u: int, v: int) -> None:
        # Validate both ends first so a bad id never leaves a half-inserted edge.
        self._check_node(u)
        self._check_node(v)
        self._adjacency[u].append(v)
        self._adjacency[v].append(u)

    def _check_node(self, u: int) -> None:
        if not 0 <= u < len(self._adjacency):
            raise IndexError(
                f"Node {u} is out of range for a graph with {len(self._adjacency)} nodes"
            )


def make_adj_list(n: int) -> AdjacencyGraph:
    return AdjacencyGraph(n)


def grid_to_graph(
    grid: Grid[T],
    passable: Callable[[T], bool],
) -> tuple[AdjacencyGraph, dict[Point, int]]:
    """Build a graph over passable cells with row-major node ids.

    Edges are directed from each passable cell to its passable 4-neighbours
    in ``DIR4`` order, so graph BFS visits cells in the same order as grid BFS.
    """

    index: dict[Point, int] = {}
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if passable(cell):
                index[Point(x, y)] = len(index)

    graph = AdjacencyGraph(len(index))
    for point, node in index.items():
        for step in DIR4:
            nxt = point + step
            if not in_bounds(grid, nxt.x, nxt.y):
                continue
            other = index.get(nxt)
            if other is not None:
                graph.add_directed_edge(node, other)
    return graph, index
