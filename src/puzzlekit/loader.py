from __future__ import annotations

import json
import logging
from pathlib import Path

from puzzlekit.models import PuzzleConfig, Point
from puzzlekit.text import split_lines

logger = logging.getLogger(__name__)


def read_file(path: str | Path) -> str:
    # newline="" keeps "\r\n" intact; split_lines owns line-ending handling.
    with Path(path).open(encoding="utf-8", newline="") as fh:
        return fh.read()


def read_lines(path: str | Path, skip_empty: bool = False) -> list[str]:
    lines = split_lines(read_file(path), skip_empty=skip_empty)
    # A file ending in a newline would otherwise yield a phantom empty row.
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def load_puzzle(path: str | Path) -> PuzzleConfig:
    path = Path(path)
    data = json.loads(path.read_text(encoding="utf-8"))

    grid_raw = data["grid"]
    if "lines" in grid_raw:
        lines = [str(line) for line in grid_raw["lines"]]
    elif "input" in grid_raw:
        lines = read_lines(path.parent / grid_raw["input"])
    else:
        raise ValueError(f"Puzzle {path} must define grid.lines or grid.input")

    cell_kind = grid_raw.get("cell_kind", "char")
    if cell_kind not in ("char", "digit"):
        raise ValueError(f"Unknown cell_kind {cell_kind!r} in {path}")

    blocked_raw = grid_raw.get("blocked")
    blocked = None
    if blocked_raw is not None:
        blocked = {int(value) for value in blocked_raw} if cell_kind == "digit" else set(blocked_raw)

    goal_raw = data.get("goal")
    config = PuzzleConfig(
        name=data["name"],
        lines=lines,
        start=_point(data.get("start", [0, 0])),
        cell_kind=cell_kind,
        blocked=blocked,
        goal=_point(goal_raw) if goal_raw is not None else None,
        benchmark_iterations=int(data.get("benchmark", {}).get("iterations", 0)),
    )
    logger.debug("loaded puzzle %s with %d rows from %s", config.name, len(lines), path)
    return config


def _point(raw: list) -> Point:
    if not isinstance(raw, list) or len(raw) != 2:
        raise ValueError(f"Expected an [x, y] pair, got {raw!r}")
    return Point(int(raw[0]), int(raw[1]))
