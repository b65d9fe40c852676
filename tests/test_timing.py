import random

import pytest

from puzzlekit.rand import default_rng, rand_int, seed, shuffle
from puzzlekit.timing import Timer, benchmark, time_call


def test_time_call_returns_elapsed_and_result() -> None:
    elapsed, result = time_call(sum, [1, 2, 3])

    assert result == 6
    assert elapsed >= 0.0


def test_benchmark_runs_requested_iterations() -> None:
    calls: list[int] = []

    avg = benchmark(calls.append, 5, 1)

    assert calls == [1] * 5
    assert avg >= 0.0


def test_benchmark_rejects_non_positive_iterations() -> None:
    with pytest.raises(ValueError):
        benchmark(lambda: None, 0)


def test_timer_reset_restarts_clock() -> None:
    timer = Timer()
    before = timer.start
    timer.reset()

    assert timer.start >= before
    assert timer.ms() >= 0.0


def test_rand_int_is_inclusive_and_deterministic_with_seed() -> None:
    rng_a = random.Random(123)
    rng_b = random.Random(123)

    draws_a = [rand_int(0, 2, rng_a) for _ in range(50)]
    draws_b = [rand_int(0, 2, rng_b) for _ in range(50)]

    assert draws_a == draws_b
    assert set(draws_a) == {0, 1, 2}
    with pytest.raises(ValueError):
        rand_int(3, 2)


def test_shared_rng_can_be_seeded() -> None:
    seed(99)
    items_a = list(range(10))
    shuffle(items_a)

    seed(99)
    items_b = list(range(10))
    shuffle(items_b, default_rng())

    assert items_a == items_b
    assert sorted(items_a) == list(range(10))
