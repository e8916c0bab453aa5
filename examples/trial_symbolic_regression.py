"""
Symbolic Regression for CGP

Evolves an arithmetic expression of one variable fitting the samples of
a target polynomial:

    y = x^2 + x + 1,   x in [-1, 1]

The samples are written to a data file and read back, the way a dataset
produced by another tool would be used.

Two fitness functions are compared:
    - supervised_learning:   sum of absolute errors (the default)
    - mean_squared_error:    registered below, selected with config.fitness_function

Usage:
    python examples/trial_symbolic_regression.py
"""

from pathlib import Path

import numpy as np
from loguru import logger

from evocgp.data           import Dataset
from evocgp.phenotype      import Program
from evocgp.run            import Experiment
from evocgp.run.config     import Config
from evocgp.run.fitness    import fitness_functions
from evocgp.utils          import setup_logger


def target(x):
    return x * x + x + 1.0


def mean_squared_error(config, chromosome, dataset) -> float:
    """Mean squared error of the chromosome's program over the dataset."""
    program = Program(chromosome, decode=False)
    errors  = program.forward_batch(dataset.inputs) - dataset.outputs
    return float(np.mean(errors ** 2))


fitness_functions["mean_squared_error"] = mean_squared_error


def write_samples(path: Path, num_samples: int = 50) -> None:
    x = np.linspace(-1.0, 1.0, num_samples)
    Dataset.from_arrays(1, 1, num_samples, x, target(x)).save(str(path))


if __name__ == "__main__":

    setup_logger()

    here      = Path(__file__).parent
    data_path = here / "polynomial.data"
    write_samples(data_path)

    dataset = Dataset.from_file(str(data_path))
    config  = Config(str(here / "configs" / "config_regression.ini"))
    logger.info("\n{}", dataset)

    for fitness_name in ("supervised_learning", "mean_squared_error"):
        config.fitness_function = fitness_name
        config.update_frequency = 0
        logger.info("Fitness function: {}", Config.hook_name(config.fitness_function))

        results = Experiment(config, dataset, num_trials=5).run(num_jobs_trials=-1)

        best = min(range(results.num_runs), key=lambda i: results.chromosome(i).fitness)
        logger.info("Best chromosome (trial {}):\n{}", best + 1, results.chromosome(best))
