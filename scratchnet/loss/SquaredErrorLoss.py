import numpy as np
from ..helpers.vector_ops import subtract_vectors


class SquaredErrorLoss:
    """
    Squared error bookkeeping for a single sample.

    forward() is the number reported per sample and per epoch; it is not what
    drives the weights. backward() returns output - expected, which is the
    fused softmax gradient used as the output-layer delta.
    """

    def forward(self, output, expected):
        diff = subtract_vectors(expected, output)
        return float(np.sum(diff * diff))

    def backward(self, output, expected):
        return subtract_vectors(output, expected)
