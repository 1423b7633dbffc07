# helpers/activations.py
"""
Activation functions and their derivatives.

Derivatives take the *output* of the activation, not the raw input, since
that is what the forward pass keeps around for backprop.
"""
import numpy as np

LEAKY_SLOPE = 0.01


def sigmoid(x):
    return 1 / (1 + np.exp(-x))


def sigmoid_derivative(sigmoid_output):
    return sigmoid_output * (1 - sigmoid_output)


def relu(x):
    return np.maximum(0.0, x)


def relu_derivative(relu_output):
    # strict > 0, so exactly 0 takes the zero branch
    return np.where(np.asarray(relu_output) > 0, 1.0, 0.0)


def leaky_relu(x):
    x = np.asarray(x, dtype=np.float64)
    return np.where(x > 0, x, LEAKY_SLOPE * x)


def leaky_relu_derivative(leaky_relu_output):
    return np.where(np.asarray(leaky_relu_output) > 0, 1.0, LEAKY_SLOPE)


def softmax(logits):
    logits = np.asarray(logits, dtype=np.float64)
    exp_z = np.exp(logits - np.max(logits))  # stability
    return exp_z / np.sum(exp_z)


# Output layer activations, applied to the whole biased sum vector
OUTPUT_ACTIVATIONS = {
    "softmax": softmax,
    "sigmoid": sigmoid,
}
