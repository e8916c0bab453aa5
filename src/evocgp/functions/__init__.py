"""
Functions Package

This package provides the node functions of CGP chromosomes and the
registry (function set) from which function genes are drawn.

Exported:
    node_functions:  Dictionary mapping built-in function names to functions
    FunctionSet:     Ordered, bounded registry of named node functions
    MAX_FUNCTIONS:   Capacity of a function set
    lookup_function: Return the built-in function with a given name
    Individual built-in functions: add_function, sub_function, mul_function,
                                   div_function, and_function, nand_function,
                                   or_function, nor_function, xor_function,
                                   xnor_function, not_function
"""

from evocgp.functions.basic_functions import (
    node_functions,
    add_function,
    sub_function,
    mul_function,
    div_function,
    and_function,
    nand_function,
    or_function,
    nor_function,
    xor_function,
    xnor_function,
    not_function
)
from evocgp.functions.function_set import FunctionSet, MAX_FUNCTIONS, lookup_function

__all__ = [
    'node_functions',
    'add_function',
    'sub_function',
    'mul_function',
    'div_function',
    'and_function',
    'nand_function',
    'or_function',
    'nor_function',
    'xor_function',
    'xnor_function',
    'not_function',
    'FunctionSet',
    'MAX_FUNCTIONS',
    'lookup_function'
]
