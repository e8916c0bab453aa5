"""
Unit tests for evocgp.run.experiment module.

Tests cover the Results statistics and the Experiment class running
trials serially and in parallel.
"""

import numpy as np
import pytest
from unittest.mock import Mock

from evocgp.data           import Dataset
from evocgp.run.experiment import Experiment, Results
from evocgp.run.trial      import Trial


def trial_results(trial_number, fitness, active_nodes, generations, success):
    return {
        "trial_number"      : trial_number,
        "chromosome"        : Mock(),
        "fitness"           : fitness,
        "active_nodes"      : active_nodes,
        "number_generations": generations,
        "success"           : success,
    }


@pytest.fixture
def results():
    r = Results()
    r.add(trial_results(1, 0.0, 4, 10, True))
    r.add(trial_results(2, 2.0, 6, 50, False))
    r.add(trial_results(3, 4.0, 8, 50, False))
    r.add(trial_results(4, 0.0, 2, 30, True))
    return r


@pytest.fixture
def sum_dataset():
    """y = a + b"""
    inputs = np.array([[0.0, 1.0], [2.0, 3.0], [-1.0, 4.0], [0.5, 0.5]])
    return Dataset(inputs, inputs.sum(axis=1, keepdims=True))


class TestResults:

    def test_num_runs(self, results):
        assert results.num_runs == 4

    def test_fitness_statistics(self, results):
        assert results.average_fitness() == 1.5
        assert results.median_fitness() == 1.0
        assert results.std_fitness() == pytest.approx(np.std([0.0, 2.0, 4.0, 0.0]))

    def test_active_nodes(self, results):
        assert results.average_active_nodes() == 5.0
        assert results.median_active_nodes() == 5.0

    def test_generations(self, results):
        assert results.average_generations() == 35.0

    def test_success_rate(self, results):
        assert results.success_rate() == 0.5

    def test_chromosome(self, results):
        assert results.chromosome(0) is not results.chromosome(1)


class TestExperiment:

    def test_invalid_number_of_trials(self, make_config):
        with pytest.raises(ValueError):
            Experiment(make_config(), num_trials=0)

    def test_runs_every_trial(self, make_config, sum_dataset):
        config = make_config(num_nodes=10, generations=50, update_frequency=0)

        results = Experiment(config, sum_dataset, num_trials=3, suppress_output=True).run()

        assert results.num_runs == 3
        for i in range(3):
            chromosome = results.chromosome(i)
            assert chromosome.fitness is not None
            assert chromosome.num_active_nodes >= 0

    def test_easy_problem_is_solved(self, make_config, sum_dataset):
        config = make_config(num_nodes=10, function_set="add", generations=2000, update_frequency=0)

        results = Experiment(config, sum_dataset, num_trials=3, suppress_output=True).run()

        assert results.success_rate() == 1.0
        assert results.average_fitness() == 0.0

    def test_custom_trial_class(self, make_config):
        prepared = []

        class PerfectTrial(Trial):
            def _evaluate_fitness(self, chromosome):
                return 0.0

        class CountingExperiment(Experiment):
            def _prepare_trial(self, trial, trial_number):
                prepared.append(trial_number)

        config = make_config(num_nodes=5, generations=10)
        results = CountingExperiment(config, num_trials=4, trial_class=PerfectTrial, suppress_output=True).run()

        assert prepared == [1, 2, 3, 4]
        assert results.success_rate() == 1.0
        assert results.average_generations() == 0.0

    def test_parallel_trials(self, make_config, sum_dataset):
        config = make_config(num_nodes=10, generations=20, update_frequency=0)

        results = Experiment(config, sum_dataset, num_trials=4, suppress_output=True).run(num_jobs_trials=2)

        assert results.num_runs == 4
        assert all(results.chromosome(i).fitness is not None for i in range(4))
