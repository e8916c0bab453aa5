"""
Even Parity Problem for CGP

Evolves a logic circuit computing even parity: the output is 1 when an even
number of the inputs are 1. Only the AND/OR/NAND/NOR gates are available, so
the circuit has to build XOR out of them, which makes parity a classic
benchmark for digital circuit evolution.

Fitness = number of truth table rows the circuit gets wrong.
A trial succeeds when the error reaches zero.

Classes:
    Trial_Parity:      CGP trial printing the truth table of the evolved circuit
    Experiment_Parity: Multi-trial experiment for parity

Usage:
    Single Trial:
        config  = Config("configs/config_parity.ini")
        trial   = Trial_Parity(config, parity_dataset(config.num_inputs))
        trial.run(num_jobs=1)

    Experiment (Multiple Trials):
        experiment = Experiment_Parity(config, parity_dataset(config.num_inputs), num_trials=20)
        experiment.run(num_jobs_trials=-1)
"""

import itertools
from pathlib import Path

import numpy as np
from loguru import logger

from evocgp.data       import Dataset
from evocgp.run        import Experiment, Results, Trial
from evocgp.run.config import Config
from evocgp.utils      import setup_logger


def parity_dataset(num_bits: int) -> Dataset:
    """Full truth table of the even parity function over 'num_bits' inputs."""
    inputs  = np.array(list(itertools.product([0.0, 1.0], repeat=num_bits)))
    outputs = (inputs.sum(axis=1) % 2 == 0).astype(float).reshape(-1, 1)
    return Dataset(inputs, outputs)


class Trial_Parity(Trial):
    """
    CGP trial for the even parity problem.

    Uses the default fitness function (sum of absolute errors), which counts
    the wrong rows of the truth table since every value is 0 or 1.
    """

    def _final_report(self):
        super()._final_report()

        fittest = self._population.get_fittest_chromosome()
        fittest.set_active_nodes()
        logger.info("\n{}", fittest)

        logger.info("inputs      output  target")
        for inputs, target in zip(self._dataset.inputs, self._dataset.outputs):
            output = fittest.execute(inputs)[0]
            logger.info("{}  {:.0f}       {:.0f}", inputs.astype(int).tolist(), output, target[0])


class Experiment_Parity(Experiment):

    def __init__(self, config: Config, dataset: Dataset, num_trials: int):
        super().__init__(config, dataset, num_trials=num_trials, trial_class=Trial_Parity)

    def _final_report(self, results: Results):
        super()._final_report(results)

        # how many gates the successful circuits needed
        active = [results.chromosome(i).num_active_nodes
                  for i in range(results.num_runs) if results.chromosome(i).fitness <= 0]
        if active:
            logger.info("Smallest solution:\t{} active nodes", min(active))
        else:
            logger.info("No successful trials")


if __name__ == "__main__":

    setup_logger()

    config_path = Path(__file__).parent / "configs" / "config_parity.ini"
    config      = Config(str(config_path))
    dataset     = parity_dataset(config.num_inputs)

    logger.info("\n{}", config)

    trial = Trial_Parity(config, dataset)
    trial.run(num_jobs=1)
