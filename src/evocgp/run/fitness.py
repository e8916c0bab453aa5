"""
Fitness functions, called as 'fitness(config, chromosome, dataset)'.

A fitness function returns an error score for a decoded chromosome:
lower is better, and a score of zero (or less) is a perfect solution.
"""

from typing import TYPE_CHECKING

from evocgp.exceptions        import DatasetMismatchError
from evocgp.phenotype.program import Program

if TYPE_CHECKING:
    from evocgp.data.dataset        import Dataset
    from evocgp.genotype.chromosome import Chromosome
    from evocgp.run.config          import Config

def supervised_learning(config: 'Config', chromosome: 'Chromosome', dataset: 'Dataset | None') -> float:
    """
    Sum, over all samples and outputs, of the absolute difference between
    the program output and the expected output.

    Raises:
        ValueError:           If no dataset is given
        DatasetMismatchError: If the chromosome and dataset disagree on the
                              number of inputs or outputs
    """
    if dataset is None:
        raise ValueError("supervised learning requires a dataset")

    if chromosome.num_inputs != dataset.num_inputs:
        raise DatasetMismatchError(
            f"the chromosome has {chromosome.num_inputs} inputs but the dataset has {dataset.num_inputs}")
    if chromosome.num_outputs != dataset.num_outputs:
        raise DatasetMismatchError(
            f"the chromosome has {chromosome.num_outputs} outputs but the dataset has {dataset.num_outputs}")

    program = Program(chromosome, decode=False)

    error = 0.0
    for inputs, expected in zip(dataset.inputs, dataset.outputs):
        outputs = program.forward_pass(inputs)
        for output, target in zip(outputs, expected):
            error += abs(output - target)

    return float(error)

fitness_functions = {
    "supervised_learning": supervised_learning
    }
