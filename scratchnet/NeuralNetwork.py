import time
import numpy as np

from .layers import Layer
from .loss.SquaredErrorLoss import SquaredErrorLoss
from .optimizer.SGDOptimizer import SGDOptimizer
from .optimizer.AdamOptimizer import AdamOptimizer
from .early_stopping.EarlyStopping import EarlyStopping
from .helpers.activations import (
    OUTPUT_ACTIVATIONS,
    leaky_relu,
    leaky_relu_derivative,
    sigmoid_derivative,
)
from .helpers.dataset import one_hot
from .helpers.vector_ops import (
    add_vectors,
    element_mult_vectors,
    matrix_vector_multiply,
    transpose,
)


class NeuralNetwork:
    """
    Fully connected feed-forward network trained one sample at a time.

    Hidden layers use Leaky ReLU, the output layer uses softmax (or sigmoid
    for small binary problems such as XOR). Gradients are computed by hand.

    Args:
        learning_rate: step size shared by both update rules.
        momentum: velocity decay for train(); ignored by train_adam().
        l2_lambda: L2 strength added to weight gradients (never to biases).
        seed: seed of the generator used to initialize every layer.
        *sizes: layer sizes, e.g. 784, 128, 64, 10.
    """

    def __init__(
        self,
        learning_rate,
        momentum,
        l2_lambda,
        seed,
        *sizes,
        output_activation="softmax",
        beta1=0.9,
        beta2=0.999,
        epsilon=1e-8,
    ):
        if len(sizes) < 2:
            raise ValueError(f"Need at least an input and an output size, got {sizes}")
        if any(int(s) <= 0 for s in sizes):
            raise ValueError(f"Layer sizes must be positive, got {sizes}")
        if output_activation not in OUTPUT_ACTIVATIONS:
            raise ValueError(
                f"Unknown output activation {output_activation!r}, "
                f"expected one of {sorted(OUTPUT_ACTIVATIONS)}"
            )

        self.sizes = tuple(int(s) for s in sizes)
        self.learning_rate = learning_rate
        self.momentum = 0.0 if momentum is None else momentum
        self.l2_lambda = l2_lambda
        self.seed = seed
        self.output_activation = output_activation

        # one stream for all layers, consumed in construction order
        self.rng = np.random.default_rng(seed)
        self.layers = [
            Layer(n_in, n_out, self.rng)
            for n_in, n_out in zip(self.sizes[:-1], self.sizes[1:])
        ]

        self.loss_fn = SquaredErrorLoss()
        self.sgd = SGDOptimizer(
            lr=learning_rate, momentum=self.momentum, weight_decay=l2_lambda
        )
        self.adam = AdamOptimizer(
            lr=learning_rate, weight_decay=l2_lambda,
            beta1=beta1, beta2=beta2, eps=epsilon,
        )

    @property
    def beta1_t(self):
        return self.adam.beta1_t

    @property
    def beta2_t(self):
        return self.adam.beta2_t

    @property
    def input_size(self):
        return self.sizes[0]

    @property
    def num_classes(self):
        return self.sizes[-1]

    # ================== forward ==================
    def iter_activations(self, x):
        """Yields the input, then each layer's activation in order."""
        a = np.asarray(x, dtype=np.float64)
        yield a
        last = len(self.layers) - 1
        for i, layer in enumerate(self.layers):
            weighted_sum = matrix_vector_multiply(layer.weights, a)
            biased_sum = add_vectors(weighted_sum, layer.biases)
            if i == last:
                a = OUTPUT_ACTIVATIONS[self.output_activation](biased_sum)
            else:
                a = leaky_relu(biased_sum)
            yield a

    def feed_forward(self, x):
        # backprop needs every activation, not just the output
        return list(self.iter_activations(x))

    # ================== backward ==================
    def _output_delta(self, output, expected):
        delta = self.loss_fn.backward(output, expected)
        if self.output_activation == "sigmoid":
            delta = element_mult_vectors(delta, sigmoid_derivative(output))
        return delta

    def backward(self, activations, expected):
        """
        Returns one delta per layer, index 0 being the first layer.
        """
        deltas = [self._output_delta(activations[-1], expected)]
        for i in range(len(self.layers) - 2, -1, -1):
            front = self.layers[i + 1]
            propagated = matrix_vector_multiply(transpose(front.weights), deltas[0])
            derivative = leaky_relu_derivative(activations[i + 1])
            deltas.insert(0, element_mult_vectors(propagated, derivative))
        return deltas

    def _train_step(self, x, expected, optimizer, before_update=None):
        activations = self.feed_forward(x)
        error = self.loss_fn.forward(activations[-1], expected)
        deltas = self.backward(activations, expected)

        # only reached once forward and backward succeeded
        if before_update is not None:
            before_update()
        for layer, prev, delta in zip(self.layers, activations[:-1], deltas):
            optimizer.update_layer(layer, prev, delta)
        return error

    def train(self, x, expected):
        """One SGD-with-momentum step on a single sample; returns its squared error."""
        return self._train_step(x, expected, self.sgd)

    def train_adam(self, x, expected):
        """One Adam step on a single sample; returns its squared error."""
        return self._train_step(x, expected, self.adam, before_update=self.adam.step)

    # ================== inference ==================
    def predict(self, x):
        output = self.feed_forward(x)[-1]
        # argmax keeps the first index on ties
        return int(np.argmax(output))

    def evaluate(self, samples):
        if len(samples) == 0:
            return 0.0
        correct = sum(1 for s in samples if self.predict(s.pixels) == s.label)
        return correct / len(samples)

    # ================== training loop ==================
    def fit(
        self,
        train_samples,
        val_samples=None,
        epochs=15,
        optimizer="adam",
        early_stopping=None,
        patience=2,
        shuffle=False,
        logger=None,
        verbose=1,
    ):
        if optimizer == "adam":
            step = self.train_adam
        elif optimizer == "momentum":
            step = self.train
        else:
            raise ValueError(f"optimizer must be 'adam' or 'momentum', got {optimizer!r}")

        history = {"train_error": []}
        has_val = val_samples is not None and len(val_samples) > 0
        if has_val:
            history["val_acc"] = []

        # normalize early_stopping
        if isinstance(early_stopping, dict):
            stopper = EarlyStopping(**early_stopping)
        else:
            stopper = early_stopping
        if stopper is None and has_val and patience is not None:
            stopper = EarlyStopping(patience=patience, monitor="val_acc", mode="max")

        if verbose > 0:
            print(f"Starting training for up to {epochs} epochs...")
        for ep in range(1, epochs + 1):
            t0 = time.time()
            order = np.arange(len(train_samples))
            if shuffle:
                self.rng.shuffle(order)

            total_error = 0.0
            for idx in order:
                sample = train_samples[idx]
                total_error += step(sample.pixels, one_hot(sample.label, self.num_classes))
            train_error = total_error / max(1, len(train_samples))
            history["train_error"].append(train_error)
            metrics = {"train_error": train_error}

            if has_val:
                val_acc = self.evaluate(val_samples)
                history["val_acc"].append(val_acc)
                metrics["val_acc"] = val_acc

            if verbose > 0:
                line = f"Epoch {ep}/{epochs} - error: {train_error:.4f}"
                if has_val:
                    line += f" - val_acc: {val_acc:.4f}"
                print(line)

            if logger is not None:
                logger.log_epoch(ep, time_s=time.time() - t0, **metrics)

            if stopper is not None:
                should_stop = stopper.update(ep, metrics, self)
                if verbose > 0 and stopper.best_epoch == ep:
                    print(f"  -> New best {stopper.monitor}!")
                if should_stop:
                    if verbose > 0:
                        print(
                            f"Stopping early. {stopper.monitor} has not improved "
                            f"for {stopper.patience} epochs (best {stopper.best:.4f} "
                            f"at epoch {stopper.best_epoch})."
                        )
                    break

        if verbose > 0:
            print("Training finished.")
        if logger is not None:
            logger.save_json()
        return history

    # ================== helpers ==================
    def parameters(self):
        ps = []
        for L in self.layers:
            ps.extend(L.params())
        return ps

    def _snapshot_params(self):
        # Deep-copy all params into a flat list (for early stopping).
        return [np.copy(p) for p in self.parameters()]

    def _load_params(self, snapshot):
        for p, saved in zip(self.parameters(), snapshot):
            p[...] = saved
