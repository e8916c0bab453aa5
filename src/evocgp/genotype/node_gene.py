"""
CGP Node Gene Module.

This module implements the NodeGene class for Cartesian Genetic Programming.

Classes:
    NodeGene: Genes encoding a single computational node
"""

from typing import TYPE_CHECKING

from evocgp.genotype.random_genes import random_connection, random_function, random_weight

if TYPE_CHECKING:
    from evocgp.run.config import Config

class NodeGene:
    """
    The genes describing one node of a CGP chromosome.

    A node applies one function (selected by its function gene) to the values
    found at the addresses held by its connection genes. Each connection gene
    is paired with a weight gene. A node belongs to exactly one chromosome and
    its position in that chromosome bounds the addresses it may connect to
    (see 'random_genes.py').

    Public Attributes:
        function:    Function gene, a slot in the configured function set
        connections: Connection genes, one address per input ('arity' of them)
        weights:     Weight genes, one per connection gene
        active:      Whether the node contributes to an output (set by the decoder)
        output:      Value computed by the node during the last execution

    Public Methods:
        copy_from(other): Overwrite this node's genes with those of another node
    """

    def __init__(self,
                 position   : int,
                 config     : 'Config',
                 function   : int         | None = None,
                 connections: list[int]   | None = None,
                 weights    : list[float] | None = None):
        """
        Initialize a node gene.
        Genes which are not specified are initialized with random values,
        according to the configuration.

        Parameters:
            position:    Index of the node among the chromosome's nodes
            config:      Stores configuration parameters
            function:    Function gene
            connections: Connection genes ('arity' addresses)
            weights:     Weight genes ('arity' values)
        """
        if function is None:
            function = random_function(config)
        self.function: int = function

        if connections is None:
            connections = [random_connection(config, position) for _ in range(config.arity)]
        self.connections: list[int] = list(connections)

        if weights is None:
            weights = [random_weight(config) for _ in range(config.arity)]
        self.weights: list[float] = [float(w) for w in weights]

        self.active: bool  = True
        self.output: float = 0.0

    def copy_from(self, other: 'NodeGene') -> None:
        """
        Overwrite the genes of this node with those of 'other'.
        The existing lists are reused, both nodes must have the same arity.
        """
        self.function       = other.function
        self.active         = other.active
        self.connections[:] = other.connections
        self.weights[:]     = other.weights

    def __eq__(self, other):
        if not isinstance(other, NodeGene):
            return NotImplemented
        return (self.function    == other.function    and
                self.connections == other.connections and
                self.weights     == other.weights)

    def __repr__(self):
        return (f"NodeGene(function={self.function}, connections={self.connections}, "
                f"weights={self.weights}, active={self.active})")
