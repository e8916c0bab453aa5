"""
Integration tests for basic CGP evolution.

These tests verify that the evolutionary strategy solves small problems
end-to-end, and that evolved chromosomes survive persistence.

NOTE: These tests use a fixed random seed (42) for reproducibility.
"""

import os

import numpy as np
import pytest

from evocgp.data       import Dataset
from evocgp.genotype   import Chromosome
from evocgp.phenotype  import Program
from evocgp.run.config import Config
from evocgp.run.trial  import Trial


CONFIG_DIR = os.path.join(os.path.dirname(__file__), '..', 'unit', 'run', 'test_configs')


# ============================================================================
# Test Basic Evolution - Problem Solving
# ============================================================================

class TestBasicEvolution:
    """Test that CGP solves problems end-to-end."""

    def test_solve_xor_with_logic_gates(self, xor_dataset):
        config = Config.create(2, 20, 1, 2, function_set="and,or,nand,nor",
                               generations=20000, update_frequency=0)
        trial = Trial(config, xor_dataset, suppress_output=True)

        population = trial.run()

        assert not trial.failed
        assert population.parents[0].fitness == 0.0
        assert 0 <= population.trained_generations < 20000

        best = population.parents[0]
        for inputs, expected in zip(xor_dataset.inputs, xor_dataset.outputs):
            assert best.execute(inputs) == [expected[0]]

    def test_solve_parity_with_xor(self, parity3_dataset):
        config = Config.create(3, 30, 1, 2, function_set="xor,xnor,and,or",
                               generations=20000, update_frequency=0)
        trial = Trial(config, parity3_dataset, suppress_output=True)

        trial.run()

        assert not trial.failed

    def test_regression_beats_constant_zero(self, polynomial_dataset):
        config = Config.create(1, 30, 1, 2, function_set="add,sub,mul,div",
                               mu=1, lambda_=4, generations=3000, update_frequency=0)
        population = Trial(config, polynomial_dataset, suppress_output=True).run()

        best = population.get_fittest_chromosome()
        reloaded = Chromosome.from_dict(best.to_dict(), config)

        assert best.fitness < float(np.abs(polynomial_dataset.outputs).sum())
        assert reloaded.set_fitness(polynomial_dataset) == pytest.approx(best.fitness)

    def test_comma_strategy_runs(self, xor_dataset):
        config = Config.create(2, 20, 1, 2, function_set="and,or,nand,nor",
                               mu=2, lambda_=6, evolutionary_strategy="comma",
                               generations=200, update_frequency=0)
        trial = Trial(config, xor_dataset, suppress_output=True)

        population = trial.run()

        assert population.trained_generations <= 200
        assert all(parent.fitness is not None for parent in population.parents)


# ============================================================================
# Test Files End-to-End
# ============================================================================

class TestFilesEndToEnd:

    def test_config_and_dataset_files(self, tmp_path):
        dataset_path = tmp_path / "sum.data"
        dataset_path.write_text("2,1,4\n0,1,1\n2,3,5\n-1,4,3\n0.5,0.5,1\n")

        config  = Config(os.path.join(CONFIG_DIR, 'minimal.ini'))
        dataset = Dataset.from_file(str(dataset_path))
        config.generations = 5000
        config.update_frequency = 0

        trial = Trial(config, dataset, suppress_output=True)
        population = trial.run()

        assert not trial.failed
        assert population.parents[0].fitness == 0.0

    def test_saved_chromosome_scores_the_same(self, xor_dataset, tmp_path):
        config = Config.create(2, 20, 1, 2, function_set="and,or,nand,nor",
                               generations=300, update_frequency=0)
        population = Trial(config, xor_dataset, suppress_output=True).run()
        best = population.get_fittest_chromosome()
        path = tmp_path / "best.json"

        best.save(str(path))
        loaded = Chromosome.load(str(path), config)

        assert loaded.active_nodes == best.active_nodes
        assert loaded.set_fitness(xor_dataset) == best.fitness
        program = Program(loaded)
        assert [program.forward_pass(row) for row in xor_dataset.inputs] == \
               [best.execute(row) for row in xor_dataset.inputs]
