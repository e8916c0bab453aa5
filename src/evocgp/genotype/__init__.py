"""
CGP Genotype Package

This package contains the genetic encoding of CGP programs: node genes,
chromosomes, the samplers which draw random gene values, and the mutation
operators.

Modules:
    random_genes: Random values for every kind of gene
    node_gene:    Genes of a single computational node
    chromosome:   Complete genotype of a program
    mutation:     Mutation operators

Exported Classes:
    NodeGene:   Function, connection and weight genes of one node
    Chromosome: Nodes plus output genes
"""

from evocgp.genotype.node_gene  import NodeGene
from evocgp.genotype.chromosome import Chromosome
from evocgp.genotype.mutation   import mutation_types, probabilistic_mutation, point_mutation, single_mutation

__all__ = [
    'NodeGene',
    'Chromosome',
    'mutation_types',
    'probabilistic_mutation',
    'point_mutation',
    'single_mutation',
]
