"""
CGP Phenotype Decoder

Finds the nodes of a chromosome that contribute to at least one program output.
Only these 'active' nodes need to be evaluated when the program is executed.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from evocgp.genotype.chromosome import Chromosome

def set_active_nodes(chromosome: 'Chromosome') -> list[int]:
    """
    Mark the active nodes of a chromosome and store their positions, in
    ascending order, in 'chromosome.active_nodes'.

    Starting from every output gene that addresses a node, the connection
    genes are followed backwards (depth first, with an explicit stack) and each
    node reached is marked active. The search stops at primary inputs and at
    nodes which are already active.

    Since a node only reads from inputs and lower-positioned nodes, ascending
    position order is a valid evaluation order for the active nodes.

    Parameters:
        chromosome: The chromosome to decode (modified in place)

    Returns:
        The list of active node positions
    """
    num_inputs = chromosome.num_inputs
    nodes      = chromosome.nodes

    for node in nodes:
        node.active = False

    active_nodes = []
    for address in chromosome.output_genes:
        if address < num_inputs:
            continue

        stack = [address - num_inputs]
        while stack:
            position = stack.pop()
            node = nodes[position]
            if node.active:
                continue

            node.active = True
            active_nodes.append(position)

            for connection in node.connections:
                if connection >= num_inputs and not nodes[connection - num_inputs].active:
                    stack.append(connection - num_inputs)

    active_nodes.sort()
    chromosome.active_nodes[:] = active_nodes

    return chromosome.active_nodes
