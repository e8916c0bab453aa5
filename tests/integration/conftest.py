"""
Shared fixtures for integration tests.
"""

import itertools

import numpy as np
import pytest

from evocgp.data import Dataset


@pytest.fixture
def xor_dataset():
    """Two input XOR truth table."""
    return Dataset([[0, 0], [0, 1], [1, 0], [1, 1]], [[0], [1], [1], [0]])


@pytest.fixture
def parity3_dataset():
    """Three input even parity: output 1 when an even number of inputs are 1."""
    inputs = np.array(list(itertools.product([0, 1], repeat=3)), dtype=float)
    outputs = (inputs.sum(axis=1) % 2 == 0).astype(float).reshape(-1, 1)
    return Dataset(inputs, outputs)


@pytest.fixture
def polynomial_dataset():
    """y = x^2 + x on 21 points in [-1, 1]."""
    x = np.linspace(-1.0, 1.0, 21)
    return Dataset(x.reshape(-1, 1), (x * x + x).reshape(-1, 1))
