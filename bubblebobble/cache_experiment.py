"""Timing experiment over an array visited with growing step sizes."""

from __future__ import annotations

import time
from statistics import fmean
from typing import Callable, MutableSequence

STEP_MULTIPLIER = 2
MAX_STEP_SIZE = 1024
DEFAULT_NR_OF_OBJECTS = 2**26


def _step_sizes() -> list[int]:
    sizes = []
    step = 1
    while step <= MAX_STEP_SIZE:
        sizes.append(step)
        step *= STEP_MULTIPLIER
    return sizes


class CacheExperiment:
    """Measures how long ``func(array, index)`` takes for every step size.

    Each sample times one pass per step size, in microseconds. The average per
    step size drops the fastest and slowest sample when there are more than two.
    """

    def __init__(
        self,
        nr_of_objects: int = DEFAULT_NR_OF_OBJECTS,
        array_factory: Callable[[int], MutableSequence] = lambda size: [0] * size,
        clock: Callable[[], int] = time.perf_counter_ns,
    ) -> None:
        self.nr_of_objects = nr_of_objects
        self._array_factory = array_factory
        self._clock = clock
        self.results: list[float] = []
        self.x_values: list[float] = []

    def _sample(self, func: Callable[[MutableSequence, int], object]) -> list[int]:
        array = self._array_factory(self.nr_of_objects)
        times = []
        for step in _step_sizes():
            start = self._clock()
            for index in range(0, self.nr_of_objects, step):
                func(array, index)
            end = self._clock()
            times.append((end - start) // 1000)
        return times

    def run(self, nr_of_samples: int, func: Callable[[MutableSequence, int], object]) -> list[float]:
        """Run the experiment and return the average time per step size."""
        self.x_values = [float(step) for step in _step_sizes()]
        samples = [self._sample(func) for _ in range(nr_of_samples)]
        per_step = [sorted(column) for column in zip(*samples)]
        if nr_of_samples > 2:
            per_step = [column[1:-1] for column in per_step]
        self.results = [fmean(column) for column in per_step]
        return self.results