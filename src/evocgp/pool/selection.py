"""
Selection schemes, called as 'selection(config, parents, candidates)'.

A selection scheme overwrites the parents, in place, with copies of
candidates chosen according to their fitness (lower is better).
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from evocgp.genotype.chromosome import Chromosome
    from evocgp.run.config          import Config

def pick_highest(config: 'Config', parents: list['Chromosome'], candidates: list['Chromosome']) -> None:
    """
    Copy the mu fittest candidates into the parents.

    The first and last candidates are swapped before the candidates are
    (stable) sorted by fitness. The candidate pool lists children before
    parents, so a child whose fitness equals that of the best parent can
    replace it, which lets the search drift across neutral networks.
    """
    candidates[0], candidates[-1] = candidates[-1], candidates[0]
    candidates.sort(key=lambda chromosome: chromosome.fitness)

    for parent, candidate in zip(parents, candidates):
        parent.copy_from(candidate)

selection_schemes = {
    "pick_highest": pick_highest
    }
