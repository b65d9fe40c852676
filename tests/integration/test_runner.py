import json
import sys
from pathlib import Path

import pytest

from puzzlekit.loader import load_puzzle
from puzzlekit.models import Point
from puzzlekit.runner import compare_with_graph, main, run_puzzle
from puzzlekit.solver import solve_puzzle

PUZZLES = Path(__file__).resolve().parents[2] / "configs" / "puzzles"


def test_maze_goal_distance_and_isolated_cell() -> None:
    config = load_puzzle(PUZZLES / "maze.json")
    result = solve_puzzle(config)

    assert result.goal_distance == 14
    assert result.distances[7][7] == -1
    assert result.distances[1][1] == 0
    assert result.benchmark_avg_ms is not None


def test_heightmap_basin_from_config() -> None:
    result = solve_puzzle(load_puzzle(PUZZLES / "heightmap.json"))

    assert result.reachable_cells == 3
    assert result.max_distance == 1


def test_run_puzzle_writes_json_and_csv(tmp_path: Path) -> None:
    config = load_puzzle(PUZZLES / "open_room.json")

    payload = run_puzzle(config, output_dir=str(tmp_path), compare_graph=True)

    assert payload["goal_distance"] == 4
    assert payload["graph_agrees"] is True
    written = json.loads(Path(payload["json"]).read_text(encoding="utf-8"))
    assert written["distances"] == [[0, 1, 2], [1, -1, 3], [2, 3, 4]]
    csv_lines = Path(payload["csv"]).read_text(encoding="utf-8").splitlines()
    assert csv_lines[0] == "x,y,distance"
    assert len(csv_lines) == 1 + 9


def test_graph_comparison_skips_blocked_start() -> None:
    config = load_puzzle(PUZZLES / "open_room.json")
    result = solve_puzzle(config, start=Point(1, 1))

    assert compare_with_graph(config, result) is None


def test_cli_with_plain_input_file(tmp_path: Path, monkeypatch, capsys) -> None:
    grid_file = tmp_path / "grid.txt"
    grid_file.write_text("..#\n...\n", encoding="utf-8")
    monkeypatch.setattr(
        sys,
        "argv",
        [
            "puzzlekit",
            "--input",
            str(grid_file),
            "--start",
            "0,0",
            "--goal",
            "2,1",
            "--output-dir",
            str(tmp_path / "out"),
        ],
    )

    main()

    payload = json.loads(capsys.readouterr().out)
    assert payload["name"] == "grid"
    assert payload["goal_distance"] == 3
    assert (tmp_path / "out" / "grid_distances.csv").exists()


def test_cli_rejects_malformed_digit_blocked_list(tmp_path: Path, monkeypatch) -> None:
    grid_file = tmp_path / "heights.txt"
    grid_file.write_text("1298\n", encoding="utf-8")
    monkeypatch.setattr(
        sys,
        "argv",
        [
            "puzzlekit",
            "--input",
            str(grid_file),
            "--digits",
            "--blocked",
            "9,x",
            "--output-dir",
            str(tmp_path / "out"),
        ],
    )

    with pytest.raises(SystemExit):
        main()


def test_cli_accepts_comma_separated_digit_blocked_list(tmp_path: Path, monkeypatch, capsys) -> None:
    grid_file = tmp_path / "heights.txt"
    grid_file.write_text("1298\n", encoding="utf-8")
    monkeypatch.setattr(
        sys,
        "argv",
        [
            "puzzlekit",
            "--input",
            str(grid_file),
            "--digits",
            "--blocked",
            "9,8",
            "--start",
            "0, 0",
            "--output-dir",
            str(tmp_path / "out"),
        ],
    )

    main()

    payload = json.loads(capsys.readouterr().out)
    assert payload["reachable_cells"] == 2
