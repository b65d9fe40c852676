from __future__ import annotations

from typing import Any

from puzzlekit.models import Grid, Point, T

# Neighbour order matters: BFS discovery follows it.
DIR4 = (Point(1, 0), Point(-1, 0), Point(0, 1), Point(0, -1))
DIR8 = DIR4 + (Point(1, 1), Point(1, -1), Point(-1, 1), Point(-1, -1))


def in_bounds(grid: Grid, x: int, y: int) -> bool:
    """True iff row ``y`` exists and has a column ``x`` (rows may be jagged)."""

    if y < 0 or y >= len(grid):
        return False
    return 0 <= x < len(grid[y])


def at(grid: Grid[T], point: Point) -> T:
    if not in_bounds(grid, point.x, point.y):
        raise IndexError(f"Point ({point.x}, {point.y}) is outside the grid")
    return grid[point.y][point.x]


def get(grid: Grid[T], point: Point, default: Any = None) -> T | Any:
    if not in_bounds(grid, point.x, point.y):
        return default
    return grid[point.y][point.x]


def set_at(grid: Grid[T], point: Point, value: T) -> None:
    if not in_bounds(grid, point.x, point.y):
        raise IndexError(f"Point ({point.x}, {point.y}) is outside the grid")
    grid[point.y][point.x] = value


def neighbors4(grid: Grid, point: Point) -> list[Point]:
    candidates = [point + step for step in DIR4]
    return [cell for cell in candidates if in_bounds(grid, cell.x, cell.y)]


def grid_shape(grid: Grid) -> list[int]:
    return [len(row) for row in grid]


def find_cells(grid: Grid[T], value: T) -> list[Point]:
    return [
        Point(x, y)
        for y, row in enumerate(grid)
        for x, cell in enumerate(row)
        if cell == value
    ]


def manhattan(a: Point, b: Point) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def render_grid(grid: Grid, width: int = 0, sep: str = "") -> str:
    """Render rows as text, right-aligning each cell to ``width`` characters."""

    return "\n".join(sep.join(str(cell).rjust(width) for cell in row) for row in grid)
