"""Grid and graph BFS toolkit for line-oriented puzzle input."""

from puzzlekit.graph import AdjacencyGraph, make_adj_list
from puzzlekit.loader import load_puzzle, read_lines
from puzzlekit.models import Point
from puzzlekit.parsing import parse_char_grid, parse_int_grid
from puzzlekit.search import bfs_dist, bfs_dist_grid
from puzzlekit.solver import solve_puzzle

__all__ = [
    "AdjacencyGraph",
    "Point",
    "bfs_dist",
    "bfs_dist_grid",
    "load_puzzle",
    "make_adj_list",
    "parse_char_grid",
    "parse_int_grid",
    "read_lines",
    "solve_puzzle",
]
