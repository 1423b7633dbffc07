import numpy as np


class AdamOptimizer:
    def __init__(self, lr=1e-3, weight_decay=0.0, beta1=0.9, beta2=0.999, eps=1e-8):
        self.lr = lr
        self.weight_decay = weight_decay
        self.beta1 = beta1
        self.beta2 = beta2
        self.eps = eps
        # running bias-correction powers beta^t, never reset
        self.beta1_t = 1.0
        self.beta2_t = 1.0

    def step(self):
        # once per training sample, before any layer is updated
        self.beta1_t *= self.beta1
        self.beta2_t *= self.beta2

    def _apply(self, param, m, v, grad):
        # Adam moments (in-place)
        m[...] = self.beta1 * m + (1.0 - self.beta1) * grad
        v[...] = self.beta2 * v + (1.0 - self.beta2) * (grad * grad)
        m_hat = m / (1.0 - self.beta1_t)
        v_hat = v / (1.0 - self.beta2_t)
        param -= self.lr * m_hat / (np.sqrt(v_hat) + self.eps)

    def update_layer(self, layer, previous_activation, delta):
        self._apply(layer.biases, layer.m_biases, layer.v_biases, delta)

        # coupled L2: added to the gradient, weights only
        grad = np.outer(delta, previous_activation) + self.weight_decay * layer.weights
        self._apply(layer.weights, layer.m_weights, layer.v_weights, grad)
