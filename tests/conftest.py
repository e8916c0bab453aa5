"""Pytest configuration and shared fixtures."""

import random

import numpy as np
import pytest

from evocgp.run.config import Config


@pytest.fixture(autouse=True)
def set_random_seeds():
    """Set random seeds for reproducibility."""
    np.random.seed(42)
    random.seed(42)

    yield

    np.random.seed(None)
    random.seed(None)


@pytest.fixture
def make_config():
    """
    Factory building a Config in code.

    Defaults: 2 inputs, 10 nodes, 1 output, arity 2, arithmetic function set.
    """
    def _make(num_inputs=2, num_nodes=10, num_outputs=1, arity=2, **settings):
        settings.setdefault('function_set', 'add,sub,mul,div')
        return Config.create(num_inputs, num_nodes, num_outputs, arity, **settings)
    return _make


@pytest.fixture
def add_config(make_config):
    """Config with a single 'add' function, 2 inputs, 1 node, 1 output, arity 2."""
    return make_config(num_inputs=2, num_nodes=1, num_outputs=1, arity=2, function_set='add')


@pytest.fixture
def log_messages():
    """Collect the messages logged through loguru (WARNING and above) during a test."""
    from loguru import logger

    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="WARNING")

    yield messages

    logger.remove(handler_id)
