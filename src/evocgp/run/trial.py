"""
CGP Trial Module

This module defines the Trial class, which runs the CGP evolutionary strategy,
with built-in support for CPU-based parallelization of fitness evaluation
using joblib.

A trial represents one independent run of the algorithm, evolving a population
through generations until a chromosome with zero error is found or the maximum
number of generations is reached.
"""

from joblib import Parallel, delayed
from loguru import logger
from typing import TYPE_CHECKING

from evocgp.run.config import Config
from evocgp.pool       import Population

if TYPE_CHECKING:
    from evocgp.data.dataset        import Dataset
    from evocgp.genotype.chromosome import Chromosome

class Trial:
    """
    One run of a (mu + lambda) or (mu, lambda) evolutionary strategy.

    Every generation:
        1. the children are decoded and their fitness is evaluated
        2. the candidates (children, then parents under the '+' strategy)
           are handed to the selection scheme, which overwrites the parents
        3. the trial stops if the best parent has zero (or negative) error
        4. the reproduction scheme overwrites the children with offspring of the parents

    Under the '+' strategy the parents are evaluated once, before the first
    generation; afterwards their fitness travels with them through selection.

    Subclasses can override:
    - _evaluate_fitness(chromosome): Evaluate the fitness of a single chromosome
                                     (default: the configured fitness function)
    - _report_progress():            Report progress during the run
    - _final_report():               Report the outcome of the run

    Public Attributes:
        failed: True unless the last run found a zero error chromosome

    Public Properties:
        population: The population evolved by the last run

    Public Methods:
        run(): Execute a complete trial

    Parallelization of fitness evaluation for children:
        num_jobs=1:  Serial evaluation (no parallelization)
        num_jobs>1:  Use specified number of parallel processes
        num_jobs=-1: Use all available CPU cores
    """

    def __init__(self, config: Config, dataset: 'Dataset | None' = None, suppress_output: bool = False):
        """
        Initialize the trial.

        Parameters:
            config:          Configuration parameters
            dataset:         The data handed to the fitness function
            suppress_output: If True, suppress progress and final reports
                             (useful when running multiple trials in experiments)
        """
        self._config            : Config                  = config
        self._dataset           : 'Dataset | None'        = dataset
        self._generation_counter: int                     = 0
        self._population        : Population | None       = None
        self._candidates        : list['Chromosome']      = []
        self._suppress_output   : bool                    = suppress_output
        self.failed             : bool                    = True

    @property
    def population(self) -> Population | None:
        return self._population

    def run(self, num_jobs: int = 1, population: Population | None = None) -> Population:
        """
        Run the trial.

        Resets the trial state and runs the evolutionary algorithm
        until a solution is found or the generation budget is used up.

        Parameters:
            num_jobs:   Number of parallel processes for fitness evaluation of children
                          1 = serial (no parallelization)
                         -1 = use all available CPU cores
                         >1 = use specified number of processes
            population: Population to evolve further; a random one is created if None

        Returns:
            The evolved population, with 'trained_generations' set to the
            generation at which the run stopped

        Raises:
            ValueError: If the ',' strategy is used with fewer children than parents
        """
        # Reset the trial state before starting a new run
        self._reset()

        config = self._config
        self._population = population if population is not None else Population(config)

        # Allocate the chromosomes handed to the selection scheme once;
        # they are overwritten every generation
        plus_strategy = config.evolutionary_strategy == '+'
        if not plus_strategy and config.lambda_ < config.mu:
            raise ValueError(f"the ',' strategy needs lambda >= mu, got mu={config.mu}, lambda={config.lambda_}")

        pool_members     = self._population.children + (self._population.parents if plus_strategy else [])
        self._candidates = [chromosome.clone() for chromosome in pool_members]

        # Under the '+' strategy the parents compete with the children
        if plus_strategy:
            self._evaluate_fitness_all(self._population.parents, num_jobs)

        # Evolution loop
        generation = 0
        while generation < config.generations:
            self._generation_counter = generation

            # Evaluate the fitness of each child
            self._evaluate_fitness_all(self._population.children, num_jobs)

            # Select the parents of the next generation
            self._assemble_candidates()
            config.selection_scheme(config, self._population.parents, self._candidates)

            if self._terminate():
                break

            # Display progress
            if not self._suppress_output and config.update_frequency and generation % config.update_frequency == 0:
                self._report_progress()

            # The parents create the next generation of children
            self._population.spawn_next_generation()
            generation += 1

        self._generation_counter = generation
        self._population.trained_generations = generation

        # Produce final report
        if not self._suppress_output:
            self._final_report()

        return self._population

    def _reset(self):
        """
        Reset the trial state before starting a new run.
        Subclasses should call super()._reset().
        """
        self._generation_counter = 0
        self._candidates = []
        self.failed = True

    def _evaluate_fitness(self, chromosome: 'Chromosome') -> float:
        """
        Evaluate and return the fitness (error) of a decoded chromosome.

        The default implementation applies the configured fitness function to
        the trial's dataset. Lower values are better; zero error ends the trial.

        Parameters:
            chromosome: The Chromosome to evaluate (its active nodes are current)

        Returns:
            float: Error score for the chromosome
        """
        return self._config.fitness_function(self._config, chromosome, self._dataset)

    def _evaluate_fitness_all(self, chromosomes: list['Chromosome'], num_jobs: int):
        """
        Decode and evaluate the fitness of a list of chromosomes.

        Uses serial or parallel evaluation based on num_jobs:
        - num_jobs=1: Sequential evaluation in single process
        - num_jobs>1 or -1: Parallel evaluation using joblib; the workers
          receive copies of the chromosomes and only the fitness values
          they return are stored

        Parameters:
            chromosomes: The chromosomes to evaluate (updated in place)
            num_jobs:    Number of parallel processes for fitness evaluation
        """
        for chromosome in chromosomes:
            chromosome.set_active_nodes()

        serialize = num_jobs == 1

        if serialize:
            for chromosome in chromosomes:
                chromosome.fitness = self._evaluate_fitness(chromosome)
        else:
            fitness_all = Parallel(num_jobs)(delayed(self._evaluate_fitness)(c) for c in chromosomes)
            for chromosome, fitness in zip(chromosomes, fitness_all):
                chromosome.fitness = fitness

    def _assemble_candidates(self):
        """
        Copy the children, then (under the '+' strategy) the parents, into the candidate pool.
        """
        pool_members = self._population.children + self._population.parents
        for candidate, chromosome in zip(self._candidates, pool_members):
            candidate.copy_from(chromosome)

    def _terminate(self) -> bool:
        """
        Whether the best parent is a perfect (zero error) solution.
        Also reports the solution, unless output is suppressed.
        """
        best_fitness = self._population.parents[0].fitness
        if not best_fitness <= 0:
            return False

        self.failed = False
        if not self._suppress_output:
            logger.info("{}\t{:f} - Solution Found", self._generation_counter, best_fitness)

        return True

    def _report_progress(self):
        """
        Report progress: the generation number and the error of the best parent.

        Called every 'update_frequency' generations, unless 'self._suppress_output'
        is 'True', which we might do when running many trials, as part of an experiment.
        """
        logger.info("{}\t{:f}", self._generation_counter, self._population.parents[0].fitness)

    def _final_report(self):
        """
        Produce final report at the end of the trial.
        """
        fittest = self._population.get_fittest_chromosome()
        outcome = "Solution found" if not self.failed else "Generation limit reached"
        logger.info("{} after {} generations: fitness {:f}, active nodes {}",
                    outcome, self._population.trained_generations, fittest.fitness, fittest.num_active_nodes)
