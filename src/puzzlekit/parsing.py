from __future__ import annotations

from collections.abc import Iterable

from puzzlekit.models import Grid

_ASCII_DIGITS = "0123456789"


def parse_char_grid(lines: Iterable[str]) -> Grid[str]:
    return [list(line) for line in lines]


def parse_int_grid(lines: Iterable[str]) -> Grid[int]:
    """One row per line, keeping only ASCII digits.

    Non-digit characters are dropped rather than zero-filled, so a row can be
    shorter than its source line.
    """

    return [[int(ch) for ch in line if ch in _ASCII_DIGITS] for line in lines]
