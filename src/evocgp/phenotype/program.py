"""
CGP Program Module

This module implements the executable form of a CGP chromosome.

Classes:
    Program: Evaluates the active nodes of a chromosome on input values
"""

import numpy as np
from typing import TYPE_CHECKING, Sequence

from evocgp.phenotype.decoder import set_active_nodes

if TYPE_CHECKING:
    from evocgp.genotype.chromosome import Chromosome

# Largest finite float64; infinite node results are clamped to +/- this value
FLOAT_MAX = float(np.finfo(np.float64).max)

class Program:
    """
    Executable view of a chromosome.

    Only the active nodes are evaluated, in ascending position order. Each node
    gathers the values at its connection addresses into a scratch buffer, applies
    its function and caches the result on the node, where later nodes and the
    output genes read it. The chromosome's active node list is used as found,
    so a Program created with decode=False relies on it being current.

    The scratch buffer belongs to the Program, so separate Program objects
    can execute copies of a chromosome concurrently.

    Public Methods:
        forward_pass(inputs): Execute the program on one set of inputs
                              Input:  (num_inputs,)
                              Output: list of num_outputs values
        forward_batch(rows):  Execute the program on every row of a 2D array
                              Input:  (num_samples, num_inputs)
                              Output: (num_samples, num_outputs)
    """

    def __init__(self, chromosome: 'Chromosome', decode: bool = True):
        """
        Parameters:
            chromosome: The chromosome to execute
            decode:     Whether to recompute the active nodes first
        """
        if decode:
            set_active_nodes(chromosome)

        self._chromosome    = chromosome
        self._function_set  = chromosome.function_set
        self._node_inputs   = np.empty(chromosome.arity, dtype=np.float64)

    def forward_pass(self, inputs: Sequence[float]) -> list[float]:
        """
        Execute the program.

        Parameters:
            inputs: One value per primary input

        Returns:
            The program outputs, also stored in 'chromosome.output_values'

        Raises:
            ValueError: If the number of inputs does not match the chromosome
        """
        chromosome = self._chromosome
        num_inputs = chromosome.num_inputs
        nodes      = chromosome.nodes

        if len(inputs) != num_inputs:
            raise ValueError(f"Expected {num_inputs} inputs, got {len(inputs)}")

        def value_at(address: int) -> float:
            if address < num_inputs:
                return inputs[address]
            return nodes[address - num_inputs].output

        node_inputs = self._node_inputs
        with np.errstate(all='ignore'):
            for position in chromosome.active_nodes:
                node = nodes[position]
                for i, address in enumerate(node.connections):
                    node_inputs[i] = value_at(address)

                result = self._function_set[node.function](node_inputs, node.weights)

                if np.isnan(result):
                    result = 0.0
                elif np.isinf(result):
                    result = FLOAT_MAX if result > 0 else -FLOAT_MAX
                node.output = float(result)

        outputs = [float(value_at(address)) for address in chromosome.output_genes]
        chromosome.output_values[:] = outputs

        return outputs

    def forward_batch(self, rows: np.ndarray) -> np.ndarray:
        """
        Execute the program once per row of 'rows'.

        Parameters:
            rows: Input values, shape (num_samples, num_inputs)

        Returns:
            Program outputs, shape (num_samples, num_outputs)
        """
        rows = np.atleast_2d(np.asarray(rows, dtype=np.float64))
        outputs = np.empty((rows.shape[0], self._chromosome.num_outputs), dtype=np.float64)
        for i, row in enumerate(rows):
            outputs[i] = self.forward_pass(row)

        return outputs
