"""
CGP Population Module

This module implements the Population class, the set of chromosomes evolved by
a CGP trial.

Classes:
    Population: Parent and child chromosomes of an evolutionary strategy
"""

from typing import TYPE_CHECKING

from evocgp.genotype import Chromosome

if TYPE_CHECKING:
    from evocgp.run.config import Config

class Population:
    """
    The parents (mu of them) and children (lambda of them) of a
    (mu + lambda) or (mu, lambda) evolutionary strategy.

    Chromosome objects are created once and reused from one generation to the
    next: selection and reproduction overwrite them in place.

    Public Attributes:
        parents:             List of mu Chromosome objects
        children:            List of lambda Chromosome objects
        trained_generations: Generation reached by the last run (-1 if never run)

    Public Properties:
        mu, lambda_:           Number of parents and children
        number_of_generations: Same as 'trained_generations'

    Public Methods:
        get_fittest_chromosome(): Return the chromosome with the lowest fitness
        spawn_next_generation():  Overwrite the children with offspring of the parents
    """

    def __init__(self, config: 'Config'):
        """
        Create mu random parents and lambda random children.

        Parameters:
            config: Stores configuration parameters
        """
        self._config = config

        self.parents : list[Chromosome] = [Chromosome(config) for _ in range(config.mu)]
        self.children: list[Chromosome] = [Chromosome(config) for _ in range(config.lambda_)]

        self.trained_generations: int = -1

    @property
    def mu(self) -> int:
        return len(self.parents)

    @property
    def lambda_(self) -> int:
        return len(self.children)

    @property
    def number_of_generations(self) -> int:
        return self.trained_generations

    def get_fittest_chromosome(self) -> Chromosome:
        """
        Return the chromosome with the lowest fitness, among parents and children.

        Parents are examined first, so a parent wins a tie. Chromosomes which
        have not been evaluated are ignored, unless none has been.
        """
        fittest = None
        for chromosome in self.parents + self.children:
            if chromosome.fitness is None:
                continue
            if fittest is None or chromosome.fitness < fittest.fitness:
                fittest = chromosome

        return fittest if fittest is not None else self.parents[0]

    def spawn_next_generation(self) -> None:
        """
        Replace the children with offspring of the current parents,
        using the configured reproduction scheme.
        """
        self._config.reproduction_scheme(self._config, self.parents, self.children)

    def __str__(self):
        s = f"Population (mu={self.mu}, lambda={self.lambda_}, generations={self.trained_generations})"
        for i, chromosome in enumerate(self.parents):
            s += f"\nparent {i}: fitness={chromosome.fitness}, active nodes={chromosome.num_active_nodes}"
        return s
