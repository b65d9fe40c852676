from __future__ import annotations

import argparse
import csv
import json
import logging
from dataclasses import replace
from pathlib import Path

from puzzlekit.graph import grid_to_graph
from puzzlekit.loader import load_puzzle, read_lines
from puzzlekit.models import UNREACHABLE, Point, PuzzleConfig, PuzzleResult
from puzzlekit.search import bfs_dist
from puzzlekit.solver import build_grid, solve_puzzle
from puzzlekit.text import parse_int, split, split_any

logger = logging.getLogger(__name__)


def _write_json(path: Path, payload: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def _write_csv(path: Path, rows: list[dict]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if not rows:
        return
    fieldnames = list(rows[0].keys())
    with path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)


def distance_rows(result: PuzzleResult) -> list[dict]:
    return [
        {"x": x, "y": y, "distance": value}
        for y, row in enumerate(result.distances)
        for x, value in enumerate(row)
    ]


def compare_with_graph(config: PuzzleConfig, result: PuzzleResult) -> bool | None:
    """Re-run the search as graph BFS and check it agrees cell for cell.

    Returns ``None`` when the start is not a passable cell, since such a start
    has no node in the derived graph.
    """

    grid = build_grid(config)
    blocked = set(config.blocked)
    graph, index = grid_to_graph(grid, lambda cell: cell not in blocked)
    src = index.get(result.start)
    if src is None:
        return None

    vector = bfs_dist(graph, src)
    for y, row in enumerate(result.distances):
        for x, value in enumerate(row):
            node = index.get(Point(x, y))
            expected = vector[node] if node is not None else UNREACHABLE
            if value != expected:
                logger.info("graph bfs disagrees at (%d, %d): %d != %d", x, y, expected, value)
                return False
    return True


def run_puzzle(
    config: PuzzleConfig,
    output_dir: str,
    start: Point | None = None,
    compare_graph: bool = False,
) -> dict:
    result = solve_puzzle(config, start=start)
    payload = result.summary()
    if compare_graph:
        payload["graph_agrees"] = compare_with_graph(config, result)

    out_dir = Path(output_dir)
    slug = config.name.lower().replace(" ", "_")
    json_out = out_dir / f"{slug}_distances.json"
    csv_out = out_dir / f"{slug}_distances.csv"
    _write_json(json_out, {**payload, "distances": result.distances})
    _write_csv(csv_out, distance_rows(result))
    payload["json"] = str(json_out)
    payload["csv"] = str(csv_out)

    logger.info(
        "%s: %d reachable cells, max distance %d",
        config.name,
        result.reachable_cells,
        result.max_distance,
    )
    return payload


def _parse_point(raw: str | None) -> Point | None:
    if raw is None:
        return None
    values = [parse_int(part.strip()) for part in split(raw, ",")]
    if len(values) != 2 or None in values:
        raise SystemExit(f"Expected x,y but got {raw!r}")
    return Point(values[0], values[1])


def _parse_blocked(raw: str, cell_kind: str) -> set:
    if cell_kind != "digit":
        return set(raw)
    blocked = set()
    for token in split_any(raw, ", ", skip_empty=True):
        value = parse_int(token)
        if value is None or not 0 <= value <= 9:
            raise SystemExit(f"Expected digits 0-9 for --blocked but got {token!r}")
        blocked.add(value)
    return blocked


def _config_from_args(args: argparse.Namespace) -> PuzzleConfig:
    if args.puzzle:
        config = load_puzzle(args.puzzle)
    elif args.input:
        cell_kind = "digit" if args.digits else "char"
        config = PuzzleConfig(
            name=Path(args.input).stem,
            lines=read_lines(args.input),
            start=Point(0, 0),
            cell_kind=cell_kind,
        )
    else:
        raise SystemExit("--puzzle or --input is required")

    if args.blocked is not None:
        config = replace(config, blocked=_parse_blocked(args.blocked, config.cell_kind))
    if args.goal is not None:
        config = replace(config, goal=_parse_point(args.goal))
    if args.benchmark is not None:
        config = replace(config, benchmark_iterations=args.benchmark)
    return config


def main() -> None:
    parser = argparse.ArgumentParser(description="Grid puzzle BFS runner")
    parser.add_argument("--puzzle", help="Path to puzzle JSON file")
    parser.add_argument("--input", help="Plain text grid file (alternative to --puzzle)")
    parser.add_argument("--digits", action="store_true", help="Parse --input as a digit grid")
    parser.add_argument("--start", default=None, help="Start cell as x,y (overrides puzzle)")
    parser.add_argument("--goal", default=None, help="Goal cell as x,y (overrides puzzle)")
    parser.add_argument(
        "--blocked",
        default=None,
        help="Characters (or digits with --digits) that cannot be entered",
    )
    parser.add_argument("--benchmark", type=int, default=None, help="Benchmark iterations")
    parser.add_argument(
        "--compare-graph",
        action="store_true",
        help="Cross-check grid BFS against graph BFS on the derived adjacency graph",
    )
    parser.add_argument(
        "--output-dir",
        default="results",
        help="Directory for JSON/CSV outputs",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level")

    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    config = _config_from_args(args)
    payload = run_puzzle(
        config=config,
        output_dir=args.output_dir,
        start=_parse_point(args.start),
        compare_graph=args.compare_graph,
    )
    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
