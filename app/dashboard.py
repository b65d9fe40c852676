from __future__ import annotations

import json
from dataclasses import replace
from html import escape
from pathlib import Path
import sys

import streamlit as st

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from puzzlekit.loader import load_puzzle
from puzzlekit.models import UNREACHABLE, Point, PuzzleConfig, PuzzleResult
from puzzlekit.rand import rand_int
from puzzlekit.solver import build_grid, solve_puzzle
from puzzlekit.text import split_lines

RESULTS_DIR = ROOT / "results"
PUZZLE_DIR = ROOT / "configs" / "puzzles"

SUMMARY_DOCS = {
    "reachable_cells": "Cells with a finite distance from the start, start included.",
    "max_distance": "Largest finite distance in the field; -1 when nothing is reachable.",
    "goal_distance": "Distance to the goal cell, -1 if it cannot be reached.",
    "expanded_nodes": "Cells dequeued by the BFS.",
}


def _inject_styles() -> None:
    st.markdown(
        """
        <style>
            .bfs-grid-wrap {
                overflow-x: auto;
                padding: 0.6rem;
                border: 1px solid #dce5f2;
                border-radius: 12px;
                background: #f8fafc;
            }
            .bfs-grid {
                display: grid;
                gap: 3px;
                width: max-content;
            }
            .bfs-cell {
                width: 28px;
                height: 28px;
                border-radius: 6px;
                display: flex;
                align-items: center;
                justify-content: center;
                font-size: 10px;
                font-weight: 700;
                border: 1px solid #d9e3ef;
                color: #334155;
                background: #f8fafc;
            }
            .bfs-cell.blocked { background: #374151; border-color: #374151; color: #f8fafc; }
            .bfs-cell.unreached { background: #e2e8f0; color: #94a3b8; }
            .bfs-cell.start { border: 2px solid #0ea5e9; }
            .bfs-cell.goal { border: 2px solid #f97316; }
            .bfs-cell.pad { visibility: hidden; }
        </style>
        """,
        unsafe_allow_html=True,
    )


def _heat_style(value: int, max_distance: int) -> str:
    if value == UNREACHABLE or max_distance <= 0:
        return ""
    alpha = 0.08 + (value / max_distance) * 0.5
    return f"box-shadow: inset 0 0 0 999px rgba(16, 185, 129, {alpha:.3f});"


def _render_field_html(config: PuzzleConfig, result: PuzzleResult, show_values: bool) -> str:
    grid = build_grid(config)
    width = max((len(row) for row in grid), default=0)
    blocked = set(config.blocked)

    cells: list[str] = []
    for y, row in enumerate(grid):
        for x in range(width):
            if x >= len(row):
                # Jagged rows are padded so the CSS grid stays aligned.
                cells.append("<div class='bfs-cell pad'></div>")
                continue
            cell = row[x]
            value = result.distances[y][x]
            classes = ["bfs-cell"]
            if cell in blocked:
                classes.append("blocked")
            elif value == UNREACHABLE:
                classes.append("unreached")
            point = Point(x, y)
            if point == result.start:
                classes.append("start")
            if result.goal is not None and point == result.goal:
                classes.append("goal")

            style = _heat_style(value, result.max_distance)
            style_attr = f" style='{style}'" if style else ""
            if cell in blocked:
                content = escape(str(cell))
            elif show_values and value != UNREACHABLE:
                content = str(value)
            else:
                content = escape(str(cell))
            cells.append(f"<div class='{' '.join(classes)}'{style_attr}>{content}</div>")

    return (
        f"<div class='bfs-grid-wrap'><div class='bfs-grid' "
        f"style='grid-template-columns: repeat({width}, 28px);'>{''.join(cells)}</div></div>"
    )


def _render_summary(result: PuzzleResult) -> None:
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Reachable", result.reachable_cells)
    c2.metric("Max distance", result.max_distance)
    c3.metric("Goal distance", "-" if result.goal_distance is None else result.goal_distance)
    c4.metric("Expanded", result.diagnostics.expanded_nodes)
    st.caption(
        f"search {result.diagnostics.search_time_ms} ms"
        + (f" | benchmark avg {result.benchmark_avg_ms} ms" if result.benchmark_avg_ms else "")
    )
    with st.expander("Field guide"):
        st.markdown("\n".join([f"- `{k}`: {v}" for k, v in SUMMARY_DOCS.items()]))


def _save_result(result: PuzzleResult) -> Path:
    target = RESULTS_DIR / f"{result.name.lower().replace(' ', '_')}_distances.json"
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(result.to_dict(), indent=2), encoding="utf-8")
    return target


def main() -> None:
    st.set_page_config(page_title="Grid BFS Explorer", layout="wide")
    _inject_styles()

    st.title("Grid BFS Explorer")
    st.caption("Distance fields over character and digit grids")

    puzzle_paths = sorted(PUZZLE_DIR.glob("*.json"))
    if not puzzle_paths:
        st.error("No puzzle files found under configs/puzzles.")
        return

    st.sidebar.subheader("Puzzle")
    selected = Path(st.sidebar.selectbox("Puzzle file", [str(path) for path in puzzle_paths]))
    base_config = load_puzzle(selected)

    if st.session_state.get("selected_puzzle") != str(selected):
        st.session_state["selected_puzzle"] = str(selected)
        st.session_state["grid_text"] = "\n".join(base_config.lines)
        st.session_state["start_x"] = base_config.start.x
        st.session_state["start_y"] = base_config.start.y

    grid_text = st.sidebar.text_area("Grid", key="grid_text", height=220)
    lines = split_lines(grid_text, skip_empty=True)
    height = max(1, len(lines))
    width = max([len(line) for line in lines] + [1])

    if st.sidebar.button("Random start"):
        st.session_state["start_x"] = rand_int(0, width - 1)
        st.session_state["start_y"] = rand_int(0, height - 1)

    start_x = int(st.sidebar.number_input("Start x", min_value=-1, step=1, key="start_x"))
    start_y = int(st.sidebar.number_input("Start y", min_value=-1, step=1, key="start_y"))
    show_values = st.sidebar.checkbox("Show distances", value=True)
    persist = st.sidebar.checkbox("Save result under results/", value=False)

    try:
        config = replace(base_config, lines=lines, start=Point(start_x, start_y))
        result = solve_puzzle(config)
    except (ValueError, IndexError) as exc:
        st.error(f"Search failed: {exc}")
        return

    _render_summary(result)
    st.markdown(_render_field_html(config, result, show_values), unsafe_allow_html=True)

    if persist:
        st.caption(f"Saved: {_save_result(result)}")


if __name__ == "__main__":
    main()
