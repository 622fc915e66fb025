import random
from datetime import timedelta

from birdclient.backoffs import (
    ExponentialBackOff,
    new_aggressive_exponential_backoff,
    new_exponential_backoff,
)


def test_new_exponential_backoff():
    b = new_exponential_backoff()
    assert b.initial_interval == timedelta(seconds=5)
    assert b.multiplier == 2.0
    assert b.max_interval == timedelta(seconds=320)


def test_new_aggressive_exponential_backoff():
    b = new_aggressive_exponential_backoff()
    assert b.initial_interval == timedelta(minutes=1)
    assert b.multiplier == 2.0
    assert b.max_interval == timedelta(minutes=16)


def test_first_backoff_within_randomization_bounds():
    b = new_exponential_backoff()
    wait = b.next_backoff()
    low = b.initial_interval * (1 - b.randomization_factor)
    high = b.initial_interval * (1 + b.randomization_factor)
    assert low <= wait <= high


def test_backoff_grows_and_is_capped():
    b = new_exponential_backoff()
    b.randomization_factor = 0.0
    waits = [b.next_backoff() for _ in range(20)]
    assert waits[0] == b.initial_interval
    assert waits == sorted(waits)
    assert all(w <= b.max_interval for w in waits)
    assert waits[-1] == b.max_interval


def test_reset_restores_initial_interval():
    b = new_aggressive_exponential_backoff()
    for _ in range(3):
        b.next_backoff()
    assert b.current_interval > b.initial_interval
    b.reset()
    assert b.current_interval == b.initial_interval


def test_same_seed_gives_same_sequence():
    a = ExponentialBackOff(rng=random.Random(7))
    b = ExponentialBackOff(rng=random.Random(7))
    assert [a.next_backoff() for _ in range(5)] == [b.next_backoff() for _ in range(5)]


def test_stops_after_max_elapsed_time():
    now = {"t": 0.0}
    b = ExponentialBackOff(clock=lambda: now["t"])
    b.randomization_factor = 0.0
    assert b.next_backoff() == b.initial_interval
    now["t"] += b.max_elapsed_time.total_seconds() + 1
    assert b.next_backoff() is None
    b.reset()
    assert b.next_backoff() == b.initial_interval


def test_no_stop_without_max_elapsed_time():
    now = {"t": 0.0}
    b = ExponentialBackOff(max_elapsed_time=None, clock=lambda: now["t"])
    b.randomization_factor = 0.0
    now["t"] += 10**9
    assert b.next_backoff() == b.initial_interval