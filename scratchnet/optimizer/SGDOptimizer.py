import numpy as np


class SGDOptimizer:
    """Per-sample SGD with momentum and L2 weight decay on the weights."""

    def __init__(self, lr=1e-2, momentum=0.0, weight_decay=0.0):
        self.lr = lr
        self.momentum = momentum
        self.wd = weight_decay

    def update_layer(self, layer, previous_activation, delta):
        # biases: no weight decay
        velocity = self.momentum * layer.bias_velocities - self.lr * delta
        layer.biases += velocity
        layer.bias_velocities[...] = velocity

        # weights: L2 term is blended into the gradient before momentum
        grad = np.outer(delta, previous_activation) + self.wd * layer.weights
        velocity = self.momentum * layer.weight_velocities - self.lr * grad
        layer.weights += velocity
        layer.weight_velocities[...] = velocity
