import numpy as np

# Every node function receives the values gathered from the node's connections
# (a 1-D array holding 'arity' values) and the node's connection weights, and
# returns a single value. The built-in functions ignore the weights.

def add_function(inputs, weights):
    return float(np.sum(inputs))

def sub_function(inputs, weights):
    result = inputs[0]
    for value in inputs[1:]:
        result = result - value
    return float(result)

def mul_function(inputs, weights):
    return float(np.prod(inputs))

def div_function(inputs, weights):
    # Unguarded: a zero divisor yields inf or nan, sanitised by the executing program
    result = np.float64(inputs[0])
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        for value in inputs[1:]:
            result = result / value
    return float(result)

# Logical functions read an input equal to 1 as true and equal to 0 as false.
# Any other value is neither.

def and_function(inputs, weights):
    return 0.0 if np.any(np.asarray(inputs) == 0) else 1.0

def nand_function(inputs, weights):
    return 1.0 if np.any(np.asarray(inputs) == 0) else 0.0

def or_function(inputs, weights):
    return 1.0 if np.any(np.asarray(inputs) == 1) else 0.0

def nor_function(inputs, weights):
    return 0.0 if np.any(np.asarray(inputs) == 1) else 1.0

def xor_function(inputs, weights):
    # one-hot: true iff exactly one input is 1
    return 1.0 if np.count_nonzero(np.asarray(inputs) == 1) == 1 else 0.0

def xnor_function(inputs, weights):
    return 0.0 if np.count_nonzero(np.asarray(inputs) == 1) == 1 else 1.0

def not_function(inputs, weights):
    # only the first input is considered
    return 1.0 if inputs[0] == 0 else 0.0

node_functions = {
    "add" : add_function,
    "sub" : sub_function,
    "mul" : mul_function,
    "div" : div_function,
    "and" : and_function,
    "nand": nand_function,
    "or"  : or_function,
    "nor" : nor_function,
    "xor" : xor_function,
    "xnor": xnor_function,
    "not" : not_function
    }
