from __future__ import annotations

from puzzlekit.grid import get
from puzzlekit.models import UNREACHABLE, Grid, Point, PuzzleConfig, PuzzleResult
from puzzlekit.parsing import parse_char_grid, parse_int_grid
from puzzlekit.search import bfs_grid_with_diagnostics
from puzzlekit.timing import benchmark


def build_grid(config: PuzzleConfig) -> Grid:
    if config.cell_kind == "digit":
        return parse_int_grid(config.lines)
    return parse_char_grid(config.lines)


def solve_puzzle(config: PuzzleConfig, start: Point | None = None) -> PuzzleResult:
    """Distance field from the configured (or overridden) start plus a summary."""

    grid = build_grid(config)
    origin = config.start if start is None else start
    blocked = set(config.blocked)

    def passable(cell) -> bool:
        return cell not in blocked

    distances, diagnostics = bfs_grid_with_diagnostics(grid, origin, passable)

    reached = [
        (value, Point(x, y))
        for y, row in enumerate(distances)
        for x, value in enumerate(row)
        if value != UNREACHABLE
    ]
    max_distance = max((value for value, _ in reached), default=UNREACHABLE)
    farthest = sorted(cell for value, cell in reached if value == max_distance)

    goal_distance: int | None = None
    if config.goal is not None:
        goal_distance = get(distances, config.goal, UNREACHABLE)

    avg_ms: float | None = None
    if config.benchmark_iterations > 0:
        avg_ms = round(
            benchmark(
                bfs_grid_with_diagnostics,
                config.benchmark_iterations,
                grid,
                origin,
                passable,
            ),
            4,
        )

    return PuzzleResult(
        name=config.name,
        start=origin,
        distances=distances,
        reachable_cells=len(reached),
        max_distance=max_distance,
        farthest_cells=farthest,
        goal=config.goal,
        goal_distance=goal_distance,
        diagnostics=diagnostics,
        benchmark_avg_ms=avg_ms,
    )
