"""
CGP Mutation Module

Mutation operators for CGP chromosomes. Every operator is called as
'mutation(config, chromosome)' and modifies the chromosome in place.
New allele values are always drawn through 'random_genes.py', so a mutated
chromosome stays feed-forward.

The genes of a chromosome are numbered as follows: each node contributes
one function gene, 'arity' connection genes and 'arity' weight genes (in that
order), node after node; the output genes come last.

Functions:
    probabilistic_mutation: Resample each gene with probability 'mutation_rate'
    point_mutation:         Resample a fixed number of randomly chosen genes
    single_mutation:        Resample genes until an active gene changes
"""

import random
from typing import TYPE_CHECKING

from evocgp.genotype.random_genes import random_connection, random_function, random_output_gene, random_weight

if TYPE_CHECKING:
    from evocgp.genotype.chromosome import Chromosome
    from evocgp.run.config          import Config

# Upper bound on the number of genes single_mutation() resamples
# before giving up on finding one that changes the program
MAX_SINGLE_MUTATION_ATTEMPTS = 10000

def num_genes(chromosome: 'Chromosome') -> int:
    """Total number of genes in the chromosome."""
    return chromosome.num_nodes * (1 + 2 * chromosome.arity) + chromosome.num_outputs

def probabilistic_mutation(config: 'Config', chromosome: 'Chromosome') -> None:
    """
    Resample each gene, independently, with probability 'config.mutation_rate'.
    """
    rate = config.mutation_rate

    for position, node in enumerate(chromosome.nodes):
        if random.random() < rate:
            node.function = random_function(config)

        for i in range(chromosome.arity):
            if random.random() < rate:
                node.connections[i] = random_connection(config, position)

        for i in range(chromosome.arity):
            if random.random() < rate:
                node.weights[i] = random_weight(config)

    for i in range(chromosome.num_outputs):
        if random.random() < rate:
            chromosome.output_genes[i] = random_output_gene(config)

def point_mutation(config: 'Config', chromosome: 'Chromosome') -> None:
    """
    Resample 'int(num_genes * mutation_rate)' genes chosen uniformly at random
    (the same gene may be chosen more than once).
    """
    num_mutations = int(num_genes(chromosome) * config.mutation_rate)
    for _ in range(num_mutations):
        _resample_gene(config, chromosome, random.randrange(num_genes(chromosome)))

def single_mutation(config: 'Config', chromosome: 'Chromosome') -> None:
    """
    Resample randomly chosen genes until one gene that is expressed in the
    program (a gene of an active node, or an output gene) changes value.

    Genes of inactive nodes resampled along the way keep their new values.
    The mutation rate is not used.
    """
    chromosome.set_active_nodes()
    total = num_genes(chromosome)

    for _ in range(MAX_SINGLE_MUTATION_ATTEMPTS):
        gene = random.randrange(total)
        changed = _resample_gene(config, chromosome, gene)
        if changed and _is_expressed(chromosome, gene):
            return

def _gene_location(chromosome: 'Chromosome', gene: int) -> tuple[int, int]:
    """
    Map a gene number to (node position, offset within the node).
    Output genes are reported with position -1 and the output index as offset.
    """
    genes_per_node = 1 + 2 * chromosome.arity
    if gene < chromosome.num_nodes * genes_per_node:
        return divmod(gene, genes_per_node)
    return -1, gene - chromosome.num_nodes * genes_per_node

def _is_expressed(chromosome: 'Chromosome', gene: int) -> bool:
    position, _ = _gene_location(chromosome, gene)
    return position < 0 or chromosome.nodes[position].active

def _resample_gene(config: 'Config', chromosome: 'Chromosome', gene: int) -> bool:
    """
    Draw a new value for one gene. Returns whether the value changed.
    """
    position, offset = _gene_location(chromosome, gene)

    if position < 0:
        old = chromosome.output_genes[offset]
        chromosome.output_genes[offset] = random_output_gene(config)
        return chromosome.output_genes[offset] != old

    node  = chromosome.nodes[position]
    arity = chromosome.arity

    if offset == 0:
        old = node.function
        node.function = random_function(config)
        return node.function != old

    if offset <= arity:
        old = node.connections[offset - 1]
        node.connections[offset - 1] = random_connection(config, position)
        return node.connections[offset - 1] != old

    old = node.weights[offset - 1 - arity]
    node.weights[offset - 1 - arity] = random_weight(config)
    return node.weights[offset - 1 - arity] != old

mutation_types = {
    "probabilistic": probabilistic_mutation,
    "point"        : point_mutation,
    "single"       : single_mutation
    }
