from __future__ import annotations

from collections.abc import Callable
from time import perf_counter
from typing import Any


class Timer:
    """Wall-clock stopwatch reporting milliseconds since construction or reset."""

    def __init__(self) -> None:
        self.start = perf_counter()

    def reset(self) -> None:
        self.start = perf_counter()

    def ms(self) -> float:
        return (perf_counter() - self.start) * 1000.0


def time_call(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> tuple[float, Any]:
    timer = Timer()
    result = fn(*args, **kwargs)
    return timer.ms(), result


def benchmark(fn: Callable[..., Any], iterations: int, *args: Any, **kwargs: Any) -> float:
    """Average milliseconds per call over ``iterations`` runs."""

    if iterations <= 0:
        raise ValueError(f"iterations must be positive, got {iterations}")
    timer = Timer()
    for _ in range(iterations):
        fn(*args, **kwargs)
    return timer.ms() / iterations
