from __future__ import annotations

import random
from typing import Any

_DEFAULT_RNG = random.Random()


def default_rng() -> random.Random:
    return _DEFAULT_RNG


def seed(value: int) -> None:
    _DEFAULT_RNG.seed(value)


def rand_int(lo: int, hi: int, rng: random.Random | None = None) -> int:
    """Uniform integer in the inclusive range ``[lo, hi]``."""

    if lo > hi:
        raise ValueError(f"Empty range [{lo}, {hi}]")
    return (rng or _DEFAULT_RNG).randint(lo, hi)


def shuffle(items: list[Any], rng: random.Random | None = None) -> None:
    (rng or _DEFAULT_RNG).shuffle(items)
