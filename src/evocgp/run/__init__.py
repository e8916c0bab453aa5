"""
CGP Run Package

This package contains the configuration and the machinery that runs the
evolutionary strategy: trials, repeated trials (experiments) and the
fitness functions used to score chromosomes.

Modules:
    config:     Configuration (INI file or defaults)
    fitness:    Fitness functions
    trial:      One run of the evolutionary strategy
    experiment: Repeated runs and their statistics

Exported Classes:
    Config:     Configuration parameters
    Trial:      One run of the evolutionary strategy
    Experiment: Repeated independent trials
    Results:    Outcome of an experiment
"""

from evocgp.run.config     import Config
from evocgp.run.fitness    import fitness_functions, supervised_learning
from evocgp.run.trial      import Trial
from evocgp.run.experiment import Experiment, Results

__all__ = [
    'Config',
    'fitness_functions',
    'supervised_learning',
    'Trial',
    'Experiment',
    'Results',
]
