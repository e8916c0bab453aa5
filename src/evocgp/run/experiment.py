"""
CGP Experiment Module

This module defines the Experiment class, which repeats a CGP trial a number
of times, with built-in support for CPU-based parallelization using joblib,
and the Results class, which holds the outcome of every trial.

An experiment is used to gather statistical data about the algorithm's
performance on a specific problem across multiple independent runs.
"""

import numpy as np
from joblib import Parallel, delayed
from loguru import logger
from typing import TYPE_CHECKING, Type

from evocgp.run.config import Config
from evocgp.run.trial  import Trial

if TYPE_CHECKING:
    from evocgp.data.dataset        import Dataset
    from evocgp.genotype.chromosome import Chromosome

class Results:
    """
    The outcome of every trial of an experiment.

    Public Properties:
        num_runs: Number of trials

    Public Methods:
        chromosome(i):          Best chromosome of trial i
        average_fitness():      Mean of the best fitness values
        median_fitness():       Median of the best fitness values
        std_fitness():          Standard deviation of the best fitness values
        average_active_nodes(): Mean active node count of the best chromosomes
        median_active_nodes():  Median active node count of the best chromosomes
        average_generations():  Mean number of generations run
        success_rate():         Fraction of trials which found a zero error chromosome
    """

    def __init__(self):
        self._chromosomes : list['Chromosome'] = []
        self._fitness     : list[float]        = []
        self._active_nodes: list[int]          = []
        self._generations : list[int]          = []
        self._successes   : list[bool]         = []

    def add(self, results: dict) -> None:
        """
        Record the results of one trial (see Experiment._extract_trial_results).
        """
        self._chromosomes .append(results["chromosome"])
        self._fitness     .append(results["fitness"])
        self._active_nodes.append(results["active_nodes"])
        self._generations .append(results["number_generations"])
        self._successes   .append(results["success"])

    @property
    def num_runs(self) -> int:
        return len(self._chromosomes)

    def chromosome(self, i: int) -> 'Chromosome':
        return self._chromosomes[i]

    def average_fitness(self) -> float:
        return float(np.mean(self._fitness))

    def median_fitness(self) -> float:
        return float(np.median(self._fitness))

    def std_fitness(self) -> float:
        return float(np.std(self._fitness))

    def average_active_nodes(self) -> float:
        return float(np.mean(self._active_nodes))

    def median_active_nodes(self) -> float:
        return float(np.median(self._active_nodes))

    def average_generations(self) -> float:
        return float(np.mean(self._generations))

    def success_rate(self) -> float:
        return float(np.mean(self._successes))

class Experiment:
    """
    A collection of independent trials on the same problem.

    Subclasses can override:
    - _prepare_trial(trial, trial_number):         Configure each trial before execution
    - _extract_trial_results(trial, trial_number): Extract results after a trial completes
    - _final_report(results):                      Report the aggregated statistics

    Public Methods:
        run(num_jobs_trials=1, num_jobs_fitness=1): Execute the complete experiment

    Parallelization:
        Supports two levels of parallelization:

        Trial-level parallelization (num_jobs_trials):
            1:  Serial trial execution (no parallelization)
           >1:  Use specified number of parallel processes for trials
           -1:  Use all available CPU cores for trials

        Fitness-level parallelization within each trial (num_jobs_fitness):
            1:  Serial fitness evaluation (recommended when num_jobs_trials > 1)
           >1:  Use specified number of parallel processes per trial
           -1:  Use all available CPU cores per trial
    """

    def __init__(self,
                 config         : Config,
                 dataset        : 'Dataset | None' = None,
                 num_trials     : int              = 10,
                 trial_class    : Type[Trial]      = Trial,
                 suppress_output: bool             = False):
        """
        Parameters:
            config:          configuration parameters
            dataset:         the data handed to the fitness function
            num_trials:      number of trials in this experiment
            trial_class:     the class describing the trials in this experiment
            suppress_output: If True, suppress the per-trial and final reports
        """
        if num_trials < 1:
            raise ValueError(f"number of trials must be at least 1, got {num_trials}")

        self._config         : Config           = config
        self._dataset        : 'Dataset | None' = dataset
        self._num_trials     : int              = num_trials
        self._trial_class    : Type[Trial]      = trial_class
        self._suppress_output: bool             = suppress_output

    def run(self, num_jobs_trials: int = 1, num_jobs_fitness: int = 1) -> Results:
        """
        Run the experiment.

        Parameters:
            num_jobs_trials:  Number of parallel processes for running trials
                               1 = serial trial execution (default)
                              -1 = use all available CPU cores for trials
                              >1 = use specified number of processes for trials
            num_jobs_fitness: Number of parallel processes for fitness evaluation within each trial
                               1 = serial (default, recommended when num_jobs_trials > 1 to avoid nested parallelization)
                              -1 = use all available CPU cores
                              >1 = use specified number of processes

        Returns:
            The Results of all trials, in trial order
        """
        serialize = num_jobs_trials == 1

        if serialize:
            trial_results = [self._run_trial(n, num_jobs_fitness) for n in range(1, self._num_trials + 1)]
        else:
            trial_results = Parallel(num_jobs_trials)(
                delayed(self._run_trial)(n, num_jobs_fitness)
                for n in range(1, self._num_trials + 1)
            )

        results = Results()
        for r in trial_results:
            results.add(r)
            if not self._suppress_output:
                logger.info("{}\t{:f}\t{}\t{}",
                            r["trial_number"], r["fitness"], r["number_generations"], r["active_nodes"])

        if not self._suppress_output:
            self._final_report(results)

        return results

    def _run_trial(self, trial_number: int, num_jobs: int = 1) -> dict:
        """
        Prepare, run, analyze one trial.
        Returns the relevant data generated by the trial.

        Parameters:
            trial_number: The trial number (1-indexed)
            num_jobs:     Number of parallel processes for fitness evaluation within this trial
        """
        trial = self._trial_class(self._config, self._dataset, suppress_output=True)

        self._prepare_trial(trial, trial_number)
        trial.run(num_jobs)

        return self._extract_trial_results(trial, trial_number)

    def _prepare_trial(self, trial: Trial, trial_number: int):
        """
        Configure a trial before it runs.
        The default implementation does nothing.
        """
        pass

    def _extract_trial_results(self, trial: Trial, trial_number: int) -> dict:
        """
        Extract relevant results at the end of a trial.
        Derived implementations adding their own results MUST call this method.
        """
        population = trial.population
        fittest    = population.get_fittest_chromosome().clone()

        return {
            "trial_number"      : trial_number,
            "chromosome"        : fittest,
            "fitness"           : fittest.fitness,
            "active_nodes"      : fittest.num_active_nodes,
            "number_generations": population.trained_generations,
            "success"           : not trial.failed,
        }

    def _final_report(self, results: Results):
        """
        Produce the final report, aggregating the data obtained from each trial.
        """
        logger.info("----------------------------------------------------")
        logger.info("Runs:\t\t\t{}", results.num_runs)
        logger.info("Success rate:\t\t{:.2%}", results.success_rate())
        logger.info("Fitness:\t\tmean {:f}, median {:f}, std {:f}",
                    results.average_fitness(), results.median_fitness(), results.std_fitness())
        logger.info("Active nodes:\t\tmean {:f}, median {:f}",
                    results.average_active_nodes(), results.median_active_nodes())
        logger.info("Generations:\t\tmean {:f}", results.average_generations())
        logger.info("----------------------------------------------------")
