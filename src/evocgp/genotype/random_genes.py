"""
CGP Random Genes Module

Samplers for every kind of gene in a CGP chromosome. Chromosome construction
and all mutation operators draw their alleles through these functions, which
is what keeps every chromosome feed-forward: a node at position 'p' may only
read from the primary inputs and from nodes at positions below 'p'.

Address space:
    - [0, num_inputs)                       primary inputs
    - [num_inputs, num_inputs + num_nodes)  node outputs (node = address - num_inputs)
"""

import random
from typing import TYPE_CHECKING

from evocgp.exceptions import EmptyFunctionSetError

if TYPE_CHECKING:
    from evocgp.run.config import Config

def random_connection(config: 'Config', position: int) -> int:
    """
    Return a random connection gene for the node at 'position'.
    The gene addresses a primary input or a node at a lower position.
    """
    return random.randrange(config.num_inputs + position)

def random_output_gene(config: 'Config') -> int:
    """
    Return a random output gene (any primary input or any node).
    """
    return random.randrange(config.num_inputs + config.num_nodes)

def random_function(config: 'Config') -> int:
    """
    Return a random function gene (a slot in the configured function set).

    Raises:
        EmptyFunctionSetError: If the function set contains no functions
    """
    num_functions = len(config.function_set)
    if num_functions < 1:
        raise EmptyFunctionSetError("cannot assign the function gene a value as the function set is empty")
    return random.randrange(num_functions)

def random_weight(config: 'Config') -> float:
    """
    Return a random connection weight in [-range, +range].
    """
    weight_range = config.connection_weight_range
    return random.uniform(-weight_range, weight_range)
