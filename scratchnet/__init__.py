"""
scratchnet
~~~~~~~~~~

Multilayer perceptron written from scratch with numpy, trained sample by
sample with hand-coded backpropagation (SGD with momentum or Adam) to
classify Fashion-MNIST images read from CSV files.
"""

from .NeuralNetwork import NeuralNetwork
from .layers import Layer
from .helpers.vector_ops import DimensionMismatchError
from .helpers.dataset import Sample, DataFormatError

__version__ = "1.0.0"

__all__ = [
    "NeuralNetwork",
    "Layer",
    "DimensionMismatchError",
    "Sample",
    "DataFormatError",
]
