from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeVar

T = TypeVar("T")

Grid = list[list[T]]
DistanceField = list[list[int]]
DistanceVector = list[int]
CellKind = Literal["char", "digit"]
SearchKind = Literal["grid", "graph"]

UNREACHABLE = -1


@dataclass(frozen=True, order=True)
class Point:
    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def to_list(self) -> list[int]:
        return [self.x, self.y]


@dataclass(frozen=True)
class SearchDiagnostics:
    kind: SearchKind
    expanded_nodes: int
    search_time_ms: float

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "expanded_nodes": self.expanded_nodes,
            "search_time_ms": self.search_time_ms,
        }


@dataclass
class PuzzleConfig:
    name: str
    lines: list[str]
    start: Point
    cell_kind: CellKind = "char"
    blocked: set | None = None
    goal: Point | None = None
    benchmark_iterations: int = 0

    def __post_init__(self) -> None:
        # Walls are "#" in character grids and height 9 in digit grids.
        if self.blocked is None:
            self.blocked = {9} if self.cell_kind == "digit" else {"#"}


@dataclass
class PuzzleResult:
    name: str
    start: Point
    distances: DistanceField
    reachable_cells: int
    max_distance: int
    farthest_cells: list[Point]
    goal: Point | None
    goal_distance: int | None
    diagnostics: SearchDiagnostics
    benchmark_avg_ms: float | None = None

    def summary(self) -> dict:
        return {
            "name": self.name,
            "start": self.start.to_list(),
            "reachable_cells": self.reachable_cells,
            "max_distance": self.max_distance,
            "farthest_cells": [cell.to_list() for cell in self.farthest_cells],
            "goal": self.goal.to_list() if self.goal is not None else None,
            "goal_distance": self.goal_distance,
            "diagnostics": self.diagnostics.to_dict(),
            "benchmark_avg_ms": self.benchmark_avg_ms,
        }

    def to_dict(self) -> dict:
        return {**self.summary(), "distances": self.distances}
