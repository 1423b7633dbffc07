import numpy as np
from ..helpers.initializers import he_normal, constant_bias


class Layer:
    def __init__(self, input_size, output_size, rng):
        # weights: (output_size, input_size), row i feeds output neuron i
        # biases: (output_size,)
        self.input_size = input_size
        self.output_size = output_size

        self.weights = he_normal(rng, output_size, input_size)
        self.biases = constant_bias(output_size)

        # momentum state
        self.weight_velocities = np.zeros_like(self.weights)
        self.bias_velocities = np.zeros_like(self.biases)

        # Adam state (first / second moment estimates)
        self.m_weights = np.zeros_like(self.weights)
        self.v_weights = np.zeros_like(self.weights)
        self.m_biases = np.zeros_like(self.biases)
        self.v_biases = np.zeros_like(self.biases)

    def params(self):
        # Return list of parameter ndarrays
        return [self.weights, self.biases]

    def __repr__(self):
        return f"Layer({self.input_size} -> {self.output_size})"
