"""
Reproduction schemes, called as 'reproduction(config, parents, children)'.

A reproduction scheme overwrites the children, in place, with offspring of the parents.
"""

import random
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from evocgp.genotype.chromosome import Chromosome
    from evocgp.run.config          import Config

def mutate_random_parent(config: 'Config', parents: list['Chromosome'], children: list['Chromosome']) -> None:
    """
    Each child becomes a mutated copy of a parent picked uniformly at random.
    """
    for child in children:
        child.copy_from(random.choice(parents))
        child.mutate()

reproduction_schemes = {
    "mutate_random_parent": mutate_random_parent
    }
