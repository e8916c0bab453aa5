"""
CGP Pool Package

This package contains the population of chromosomes evolved by a CGP trial,
together with the selection and reproduction schemes which move it from one
generation to the next.

Modules:
    population:   Parents and children of the evolutionary strategy
    selection:    Selection schemes (candidates => parents)
    reproduction: Reproduction schemes (parents => children)

Exported Classes:
    Population: Parent and child chromosomes

Exported Tables:
    selection_schemes:    Selection schemes, by name
    reproduction_schemes: Reproduction schemes, by name
"""

from evocgp.pool.population   import Population
from evocgp.pool.selection    import pick_highest, selection_schemes
from evocgp.pool.reproduction import mutate_random_parent, reproduction_schemes

__all__ = [
    'Population',
    'pick_highest',
    'selection_schemes',
    'mutate_random_parent',
    'reproduction_schemes',
]
