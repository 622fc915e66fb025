"""Exponential back-off policies used when reconnecting."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Callable


@dataclass
class ExponentialBackOff:
    """Randomized exponential back-off.

    ``next_backoff`` returns the wait before the next retry, or None once the
    elapsed time since the last reset exceeds ``max_elapsed_time``.
    """

    initial_interval: timedelta = timedelta(milliseconds=500)
    randomization_factor: float = 0.5
    multiplier: float = 1.5
    max_interval: timedelta = timedelta(seconds=60)
    max_elapsed_time: timedelta | None = timedelta(minutes=15)
    clock: Callable[[], float] = time.monotonic
    rng: random.Random = field(default_factory=random.Random)
    current_interval: timedelta = field(init=False)
    _start: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Restart from the initial interval and restart the elapsed clock."""
        self.current_interval = self.initial_interval
        self._start = self.clock()

    def _elapsed(self) -> timedelta:
        return timedelta(seconds=self.clock() - self._start)

    def _randomized(self) -> timedelta:
        interval = self.current_interval.total_seconds()
        delta = self.randomization_factor * interval
        low = interval - delta
        high = interval + delta
        return timedelta(seconds=low + self.rng.random() * (high - low))

    def _increment(self) -> None:
        if self.current_interval >= self.max_interval / self.multiplier:
            self.current_interval = self.max_interval
        else:
            self.current_interval = self.current_interval * self.multiplier

    def next_backoff(self) -> timedelta | None:
        """Return the next wait, or None when retrying should stop."""
        elapsed = self._elapsed()
        wait = self._randomized()
        self._increment()
        if self.max_elapsed_time and elapsed + wait > self.max_elapsed_time:
            return None
        return wait


def new_exponential_backoff() -> ExponentialBackOff:
    """Back-off for network errors: 5s doubling up to 320s."""
    return ExponentialBackOff(
        initial_interval=timedelta(seconds=5),
        multiplier=2.0,
        max_interval=timedelta(seconds=320),
    )


def new_aggressive_exponential_backoff() -> ExponentialBackOff:
    """Back-off for rate limiting: 1 minute doubling up to 16 minutes."""
    return ExponentialBackOff(
        initial_interval=timedelta(minutes=1),
        multiplier=2.0,
        max_interval=timedelta(minutes=16),
    )