"""
Train the Fashion-MNIST network and write prediction files.

Usage examples::

    scratchnet
    scratchnet --epochs 20 --optimizer momentum --lr 0.001 --layers 784 256 10
"""
import argparse
import os
import time

from .NeuralNetwork import NeuralNetwork
from .helpers.dataset import load_data, save_predictions, split_validation
from .helpers.logger import RunLogger

FASHION_MNIST_CLASSES = [
    "T-shirt/top", "Trouser", "Pullover", "Dress", "Coat",
    "Sandal", "Shirt", "Sneaker", "Bag", "Ankle boot",
]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="scratchnet",
        description="Train a from-scratch MLP on Fashion-MNIST CSV files.",
    )
    parser.add_argument("--train-vectors", default="data/fashion_mnist_train_vectors.csv")
    parser.add_argument("--train-labels", default="data/fashion_mnist_train_labels.csv")
    parser.add_argument("--test-vectors", default="data/fashion_mnist_test_vectors.csv")
    parser.add_argument("--test-labels", default="data/fashion_mnist_test_labels.csv")
    parser.add_argument("--layers", type=int, nargs="+", default=[784, 128, 64, 10],
                        help="Layer sizes, input first, output last.")
    parser.add_argument("--optimizer", choices=["adam", "momentum"], default="adam")
    parser.add_argument("--lr", type=float, default=0.0001, help="Learning rate.")
    parser.add_argument("--momentum", type=float, default=0.6, help="Momentum for SGD.")
    parser.add_argument("--l2", type=float, default=0.0, help="L2 weight decay (lambda).")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--epochs", type=int, default=15)
    parser.add_argument("--patience", type=int, default=2,
                        help="Epochs without validation improvement before stopping.")
    parser.add_argument("--val-frac", type=float, default=0.1)
    parser.add_argument("--shuffle", action="store_true", help="Shuffle training data each epoch.")
    parser.add_argument("--output-dir", default=".", help="Where prediction files are written.")
    parser.add_argument("--runs-root", default="runs")
    parser.add_argument("--tag", default=None)
    parser.add_argument("--no-plots", action="store_true")
    parser.add_argument("--quiet", action="store_true")
    return parser.parse_args(argv)


def run(args):
    """Full train / predict / evaluate pipeline; returns the test metrics."""
    start = time.time()
    verbose = 0 if args.quiet else 1

    print("Setting up...")
    network = NeuralNetwork(args.lr, args.momentum, args.l2, args.seed, *args.layers)
    tag = args.tag or (
        f"FashionMNIST_{args.optimizer}_lr_{args.lr}_"
        + "-".join(str(s) for s in args.layers)
    )
    logger = RunLogger(root=args.runs_root, tag=tag)

    print(f"Loading all training data from {args.train_vectors}")
    all_training = load_data(
        args.train_vectors, args.train_labels,
        num_pixels=network.input_size, num_classes=network.num_classes,
    )
    training, validation = split_validation(all_training, args.val_frac)
    print("Data split into:")
    print(f" - Training set size: {len(training)}")
    print(f" - Validation set size: {len(validation)}")

    history = network.fit(
        training,
        val_samples=validation,
        epochs=args.epochs,
        optimizer=args.optimizer,
        patience=args.patience,
        shuffle=args.shuffle,
        logger=logger,
        verbose=verbose,
    )

    print("\n--- Final Evaluation Phase ---")
    train_pred_path = os.path.join(args.output_dir, "train_predictions.csv")
    print(f"Generating {train_pred_path}...")
    save_predictions(network, all_training, train_pred_path)

    print("Loading test data...")
    test = load_data(
        args.test_vectors, args.test_labels,
        num_pixels=network.input_size, num_classes=network.num_classes,
    )
    test_pred_path = os.path.join(args.output_dir, "test_predictions.csv")
    print(f"Generating {test_pred_path}...")
    save_predictions(network, test, test_pred_path)

    y_pred = [network.predict(s.pixels) for s in test]
    y_true = [s.label for s in test]
    metrics = logger.calculate_metrics_from_predictions(
        y_true, y_pred, num_classes=network.num_classes
    )
    logger.save_metrics_summary(metrics, tag=tag)
    print(f"Final Test Accuracy: {metrics['accuracy'] * 100:.2f}%")
    print(f"Macro F1: {metrics['macro_f1']:.4f}")

    if not args.no_plots:
        class_names = FASHION_MNIST_CLASSES if network.num_classes == 10 else None
        logger.plot_all(history, tag=tag)
        logger.plot_confusion_matrix(metrics["confusion_matrix"], tag=tag, class_names=class_names)

    print(f"Run logs saved to {logger.dir}")
    print(f"\nTotal execution time: {time.time() - start:.3f} seconds.")
    return metrics


def main(argv=None):
    run(parse_args(argv))


if __name__ == "__main__":
    main()
