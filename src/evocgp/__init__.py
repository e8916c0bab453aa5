"""
evocgp - Cartesian Genetic Programming in Python.

This package evolves small feed-forward programs (chromosomes) with Cartesian
Genetic Programming and a (mu + lambda) or (mu, lambda) evolutionary strategy,
so that their outputs approximate a mapping given by example data.

Main components:
- functions: Node functions and the function set they are drawn from
- genotype:  Genetic encoding (node genes, chromosomes, mutation)
- phenotype: Active node decoding and program execution
- pool:      Population, selection and reproduction
- run:       Configuration, fitness functions, trials and experiments
- data:      Training datasets

Example:
    >>> from evocgp import Config, Dataset, Trial
    >>> config  = Config("symbolic_regression.ini")
    >>> dataset = Dataset.from_file("symbolic.data")
    >>> population = Trial(config, dataset).run()
    >>> print(population.get_fittest_chromosome())
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from evocgp.run.config          import Config
from evocgp.run.trial           import Trial
from evocgp.run.experiment      import Experiment, Results
from evocgp.functions           import FunctionSet
from evocgp.genotype.node_gene  import NodeGene
from evocgp.genotype.chromosome import Chromosome
from evocgp.phenotype.program   import Program
from evocgp.pool.population     import Population
from evocgp.data.dataset        import Dataset
