import numpy as np
from scratchnet import NeuralNetwork

XOR_INPUTS = np.array([[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]])
XOR_TARGETS = np.array([[0.0], [1.0], [1.0], [0.0]])


def test(n_hidden, lr, momentum, epochs, seed=23):
    model = NeuralNetwork(lr, momentum, 0.0, seed, 2, n_hidden, 1, output_activation="sigmoid")

    print("Untrained outputs:")
    for x in XOR_INPUTS:
        print(f"  {x} -> {model.feed_forward(x)[-1]}")

    log_every = max(1, epochs // 10)
    for epoch in range(epochs):
        total_error = 0.0
        for x, y in zip(XOR_INPUTS, XOR_TARGETS):
            total_error += model.train(x, y)
        if (epoch + 1) % log_every == 0:
            print(f"Epoch {epoch + 1}/{epochs}, Average Error: {total_error / len(XOR_INPUTS):.6f}")

    print("Trained outputs:")
    preds = []
    for x, y in zip(XOR_INPUTS, XOR_TARGETS):
        out = model.feed_forward(x)[-1]
        preds.append(int(out[0] >= 0.5))
        print(f"  {x} -> {out} (target {y[0]:.0f})")
    print(f"Accuracy: {np.mean(np.array(preds) == XOR_TARGETS.ravel()) * 100:.2f}%")


if __name__ == "__main__":
    test(n_hidden=3, lr=0.05, momentum=0.9, epochs=10_000)
