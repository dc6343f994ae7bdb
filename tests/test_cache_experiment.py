import itertools

from bubblebobble.cache_experiment import MAX_STEP_SIZE, CacheExperiment


def _touch(array, index):
    array[index] += 1


def test_x_values_are_doubling_step_sizes():
    experiment = CacheExperiment(nr_of_objects=64)
    experiment.run(1, _touch)
    assert experiment.x_values[0] == 1.0
    assert experiment.x_values[-1] == float(MAX_STEP_SIZE)
    assert all(b == a * 2 for a, b in zip(experiment.x_values, experiment.x_values[1:]))


def test_one_average_per_step_size():
    experiment = CacheExperiment(nr_of_objects=64)
    results = experiment.run(3, _touch)
    assert len(results) == len(experiment.x_values)
    assert results == experiment.results
    assert all(value >= 0 for value in results)


def test_func_visits_every_step():
    visited = []
    experiment = CacheExperiment(nr_of_objects=8)
    experiment.run(1, lambda array, index: visited.append(index))
    assert visited[:8] == list(range(8))
    assert visited[8:12] == [0, 2, 4, 6]


def test_extremes_are_dropped_with_fake_clock():
    durations = [1000, 5000, 3000]  # ns per pass, per sample
    ticks = []
    for duration in durations:
        for _ in range(11):
            ticks.extend([0, duration])
    clock = iter(ticks).__next__
    experiment = CacheExperiment(nr_of_objects=4, clock=clock)
    results = experiment.run(3, _touch)
    assert results == [3.0] * 11


def test_two_samples_are_averaged_without_trimming():
    ticks = itertools.chain.from_iterable([[0, 2000]] * 11 + [[0, 4000]] * 11)
    experiment = CacheExperiment(nr_of_objects=4, clock=ticks.__next__)
    results = experiment.run(2, _touch)
    assert results == [3.0] * 11


def test_zero_samples_give_no_results():
    experiment = CacheExperiment(nr_of_objects=4)
    assert experiment.run(0, _touch) == []