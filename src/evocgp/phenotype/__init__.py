"""
CGP Phenotype Package

This package turns a chromosome into an executable program: the decoder finds
the nodes that contribute to the outputs, and the Program class evaluates them.

Modules:
    decoder: Active node detection
    program: Program execution

Exported Classes:
    Program: Executable view of a chromosome
"""

from evocgp.phenotype.decoder import set_active_nodes
from evocgp.phenotype.program import Program, FLOAT_MAX

__all__ = [
    'set_active_nodes',
    'Program',
    'FLOAT_MAX',
]
