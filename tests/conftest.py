"""
conftest.py
~~~~~~~~~~~

Shared fixtures: small networks and tiny synthetic datasets.
"""

import numpy as np
import pytest

from scratchnet import NeuralNetwork
from scratchnet.helpers.dataset import Sample


def make_blobs(n_per_class=20, seed=0):
    """Two well separated classes over 4 features in [0, 1]."""
    rng = np.random.default_rng(seed)
    centers = [np.array([0.9, 0.9, 0.1, 0.1]), np.array([0.1, 0.1, 0.9, 0.9])]
    samples = []
    for _ in range(n_per_class):
        for label, c in enumerate(centers):
            pixels = np.clip(c + rng.normal(0.0, 0.05, size=4), 0.0, 1.0)
            samples.append(Sample(pixels, label))
    return samples


@pytest.fixture
def small_network():
    """A 4-5-3 network with momentum."""
    return NeuralNetwork(0.01, 0.6, 0.0, 42, 4, 5, 3)


@pytest.fixture
def deep_network():
    """A 4-6-5-3 network, two hidden layers."""
    return NeuralNetwork(0.01, 0.6, 0.0, 7, 4, 6, 5, 3)


@pytest.fixture
def blobs():
    return make_blobs()


@pytest.fixture
def positive_input():
    return np.array([0.2, 0.4, 0.6, 0.8])


@pytest.fixture
def blob_factory():
    return make_blobs
